"""
NRC Conversion Package - turns pasted NRC township tables into MySQL INSERT scripts.

Main Components:
    - NrcConverter: result-dictionary API with skip counts and optional output check
    - convert_to_sql: plain text in, SQL (or a user-facing notice) out
    - parser: line splitting and region grouping
    - sql_builder: region-name formatting and statement templates

Usage:
    from app.services.nrc_conversion import convert_to_sql

    sql = convert_to_sql(pasted_text)
"""

from .converter import EMPTY_INPUT_MESSAGE, NrcConverter, convert_to_sql

__all__ = ['EMPTY_INPUT_MESSAGE', 'NrcConverter', 'convert_to_sql']
