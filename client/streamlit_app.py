# client/streamlit_app.py
import streamlit as st

import config
from recordtable.setup_logging import setup_logging

setup_logging(config.LOG_LEVEL)

st.set_page_config(page_title="Record Table", layout="wide")
st.title("🗂️ Record Table")

st.markdown("""
This is the home page.

Use the **sidebar Pages** to open:
- **📥 Load** — Generate sample project records or paste/upload a raw JSON array, then map display headers to source keys.
- **📋 Table** — See the normalized rows: click a header to sort (stable, asc/desc), page through results and select rows.
""")

with st.sidebar:
    st.header("Settings")
    st.text_input("Detail link path (from env)", value=config.DETAIL_PATH, disabled=True)
    st.checkbox("Link first column (from env)", value=config.LINK_FIRST_COLUMN, disabled=True)

st.info("Tip: set `DETAIL_PATH` / `LINK_FIRST_COLUMN` in `client/.env` or export them before running `streamlit run client/streamlit_app.py`.")
