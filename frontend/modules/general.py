import streamlit as st
from utils import nrc_help_api

__all__ = ["display_help_page"]


def display_help_page():
    help_data = nrc_help_api()
    if help_data.get("error"):
        return

    st.subheader("How to use this converter")
    st.markdown("\n".join(f"{i}. {step}" for i, step in enumerate(help_data.get("usage_steps", []), start=1)))

    st.subheader("Expected Input Format")
    st.markdown("The input should have the following columns:")
    st.code("\t".join(help_data.get("expected_columns", [])), language=None)

    st.subheader("Output Format")
    st.markdown(help_data.get("output_format", ""))
