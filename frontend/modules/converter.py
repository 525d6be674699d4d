import streamlit as st

from utils import nrc_convert_api, DOWNLOAD_FILENAME, DOWNLOAD_MIME

__all__ = ["display_convert_page"]


def display_convert_page():
    input_text = st.text_area(
        "Input Data (Excel-like format)",
        placeholder="Paste your Excel data here...",
        height=200,
        key="nrc_input_text",
    )
    check_output = st.checkbox(
        "Check generated SQL for syntax problems",
        value=False,
        key="nrc_check_output",
        help="Parses every statement; quotes inside names produce invalid SQL.",
    )

    if st.button("Convert to SQL", key="nrc_convert_btn", use_container_width=True):
        with st.spinner("Converting…"):
            st.session_state.conversion_data = nrc_convert_api(input_text, check_output)

    response_data = st.session_state.conversion_data
    if not response_data:
        return

    if response_data.get("error"):
        st.error(f"Error: {response_data.get('error')}")
        return

    output_sql = response_data.get("sql", "")
    status = response_data.get("status")

    header_col, download_col = st.columns([4, 1])
    header_col.markdown("**Output SQL**")
    download_col.download_button(
        "Download",
        data=output_sql,
        file_name=DOWNLOAD_FILENAME,
        mime=DOWNLOAD_MIME,
        key="nrc_download_btn",
        disabled=status != "success",
    )

    if status == "success":
        # st.code renders a copy button in its top-right corner
        st.code(output_sql, language="sql")
        stats = response_data.get("stats", {})
        st.caption(
            f"{stats.get('regions', 0)} region(s), {stats.get('townships', 0)} township(s); "
            f"{stats.get('lines_skipped', 0)} of {stats.get('lines_read', 0)} data line(s) skipped."
        )
        for issue in response_data.get("issues") or []:
            st.warning(f"{issue['region']}: {issue['error']}")
    elif status == "empty":
        st.info(output_sql)
    else:
        st.error(output_sql)
