import json
import streamlit as st

import config
from components import show_json, parse_list
from gen_data import gen_project_records
from recordtable.normalizers import SchemaPolicy

st.title("📥 Load")

# ------------------------
# Session state
# ------------------------
if "records" not in st.session_state:
    st.session_state.records = []
if "headers" not in st.session_state:
    st.session_state.headers = list(config.DEFAULT_HEADERS)
if "filter_keys" not in st.session_state:
    st.session_state.filter_keys = list(config.DEFAULT_KEYS)
if "schema_policy" not in st.session_state:
    st.session_state.schema_policy = SchemaPolicy.FIRST.value

def _set_records(data):
    if not isinstance(data, list) or not all(isinstance(r, dict) for r in data):
        raise ValueError("Payload must be a JSON array of objects")
    st.session_state.records = data
    st.session_state.table_state = None  # new data -> start from the first page
    st.success(f"Loaded {len(data)} record(s).")

# ------------------------
# Records
# ------------------------
c1, c2 = st.columns(2)
with c1:
    n = st.number_input("Sample records", 1, 5000, 25, key="load_n")
    if st.button("🎲 Generate sample", key="btn_gen"):
        _set_records(gen_project_records(int(n)))
with c2:
    if st.session_state.records and st.button("Preview first 2 records", key="btn_preview"):
        show_json(st.session_state.records[:2], caption="Preview (first 2 records)")

st.divider()

cU, cP = st.columns(2)
with cU:
    up = st.file_uploader("Upload JSON file (array)", type=["json"], key="load_upload")
    if up and st.button("Load uploaded JSON", key="btn_upload"):
        try:
            _set_records(json.load(up))
        except Exception as e:
            st.error(e)
with cP:
    payload_text = st.text_area("Paste JSON array", height=180, key="load_textarea",
                                placeholder='[{"id": 1, "code": "BH-L1056", "title": "..."}]')
    if st.button("Load pasted JSON", key="btn_paste"):
        try:
            _set_records(json.loads(payload_text))
        except Exception as e:
            st.error(e)

st.divider()

# ------------------------
# Column mapping
# ------------------------
st.subheader("Columns")
headers_text = st.text_input("Headers (comma-separated)", ", ".join(st.session_state.headers), key="load_headers")
keys_text = st.text_input("Source keys (comma-separated, same count)", ", ".join(st.session_state.filter_keys), key="load_keys")
policy = st.selectbox(
    "Validate keys against",
    [p.value for p in SchemaPolicy],
    index=[p.value for p in SchemaPolicy].index(st.session_state.schema_policy),
    help="first: keys of the first record; union: keys seen on any record",
    key="load_policy",
)
if st.button("Apply columns", key="btn_columns"):
    headers, keys = parse_list(headers_text), parse_list(keys_text)
    if len(headers) != len(keys):
        st.error(f"The number of headers ({len(headers)}) and keys ({len(keys)}) must match.")
    else:
        st.session_state.headers = headers
        st.session_state.filter_keys = keys
        st.session_state.schema_policy = policy
        st.session_state.table_state = None
        st.success(f"Mapped {len(headers)} column(s).")
