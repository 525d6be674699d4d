import streamlit as st
from modules.converter import display_convert_page
from modules.general import display_help_page

# --- Page Configuration & Session State Initialization ---
st.set_page_config(layout="centered", page_title="NRC Data Converter")

# Hide the (irrelevant) Streamlit "Deploy" button in local runs
hide_streamlit_style = """
            <style>
            /* Hide deploy button from toolbar if present */
            div[data-testid="stToolbar"] button[title*="Deploy"] {
                display: none !important;
            }
            </style>
            """
st.markdown(hide_streamlit_style, unsafe_allow_html=True)

if 'conversion_data' not in st.session_state: # To store results from nrc/convert
    st.session_state.conversion_data = None

st.title("NRC Data Converter")
st.caption("Convert Excel-like NRC data to MySQL INSERT statements")

convert_tab, help_tab = st.tabs(["Convert", "Help"])

with convert_tab:
    display_convert_page()

with help_tab:
    display_help_page()
