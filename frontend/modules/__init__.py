# Subpackage aggregating Streamlit page renderers

from .general import display_help_page
from .converter import display_convert_page

__all__ = [
    "display_help_page",
    "display_convert_page",
]
