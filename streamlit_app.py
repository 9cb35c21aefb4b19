# streamlit_app.py
import streamlit as st
import requests
from typing import Optional, Dict, Any

from csv2table.config import get_settings
from csv2table.frames import rows_to_frame

settings = get_settings()
API_BASE = settings.api_base

TARGETS = {
    "HTML table": "html",
    "WordPress table block": "block",
}

st.set_page_config(page_title="CSV to Table", layout="wide")
st.title("CSV → HTML Table / WordPress Block")
st.write("Paste CSV text, pick an output format, and copy the generated markup.")

# -------------------------
# Helpers
# -------------------------
def call_api(target: str, text: str, options: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    try:
        resp = requests.post(
            f"{API_BASE}/{target}",
            json={"text": text, "options": options},
            timeout=settings.request_timeout,
        )
    except requests.RequestException as e:
        st.error("Failed to call API")
        st.exception(e)
        return None

    if resp.status_code != 200:
        try:
            detail = resp.json().get("detail", resp.text)
        except ValueError:
            detail = resp.text
        if resp.status_code in (400, 422):
            st.warning(detail)
        else:
            st.error(f"Backend returned error {resp.status_code}: {detail}")
        return None

    return resp.json()

# -------------------------
# UI: options
# -------------------------
with st.sidebar:
    st.header("Output")
    target_label = st.radio("Format", list(TARGETS.keys()))
    target = TARGETS[target_label]

    if target == "html":
        has_header = st.checkbox("First row is header", value=True)
        class_name = st.text_input("Table CSS class", value=settings.table_class)
        options: Dict[str, Any] = {"has_header": has_header, "class_name": class_name}
    else:
        has_header = st.checkbox("First row is header", value=False)
        has_fixed_layout = st.checkbox("Fixed width table cells", value=True)
        has_stripes = st.checkbox("Striped style", value=False)
        options = {
            "has_header": has_header,
            "has_fixed_layout": has_fixed_layout,
            "has_stripes": has_stripes,
        }

# -------------------------
# UI: input & call
# -------------------------
text = st.text_area("CSV data", height=220, placeholder='name,age\nAlice,30\n"Smith, Bob",25')

if st.button("Convert"):
    if not text.strip():
        st.warning("Please enter CSV data")
        st.stop()

    with st.spinner("Converting..."):
        result = call_api(target, text, options)
    if result is None:
        st.stop()

    code_col, preview_col = st.columns(2)

    with code_col:
        st.subheader("Code")
        st.code(result["formatted"], language="html")
        st.download_button(
            "Download markup",
            data=result["markup"].encode("utf-8"),
            file_name="table.html",
            mime="text/html",
        )

    with preview_col:
        st.subheader("Preview")
        if result.get("preview"):
            st.components.v1.html(result["preview"], height=400, scrolling=True)
        else:
            st.info("No preview available for this output.")

    st.subheader("Parsed rows")
    st.dataframe(rows_to_frame(result["rows"], has_header))

else:
    st.info("Enter CSV text and click 'Convert'. Quoted fields may contain commas, line breaks and doubled quotes (\"\").")
