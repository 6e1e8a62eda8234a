import streamlit as st

import config
from components import show_table
from recordtable.errors import ConfigurationError
from recordtable.normalizers import ColumnMapping, SchemaPolicy, get_default_normalizer
from recordtable.settings import ROWS_PER_PAGE_OPTIONS
from recordtable.sorting import Order
from recordtable.table import TableState, build_head_cells, visible_rows

st.title("📋 Table")

records = st.session_state.get("records") or []
headers = st.session_state.get("headers") or list(config.DEFAULT_HEADERS)
keys = st.session_state.get("filter_keys") or list(config.DEFAULT_KEYS)

if not records:
    st.info("No records yet — load some on the **Load** page first.")
    st.stop()

# one memoized normalizer per session: reruns with unchanged inputs reuse the rows
if "normalizer" not in st.session_state:
    st.session_state.normalizer = get_default_normalizer()

try:
    mapping = ColumnMapping(
        attributes=headers,
        filter_keys=keys,
        schema_policy=SchemaPolicy(st.session_state.get("schema_policy", "first")),
    )
    rows = st.session_state.normalizer.normalize(mapping, records)
except ConfigurationError as e:
    st.error(f"Column configuration error: {e}")
    st.stop()

state = st.session_state.get("table_state") or TableState(order_by=headers[0] if headers else "id")
head_cells = build_head_cells(headers, rows)

def _save(new_state: TableState):
    st.session_state.table_state = new_state
    st.rerun()

# ------------------------
# Sort controls (one button per header, like clickable column heads)
# ------------------------
if head_cells:
    cols = st.columns(len(head_cells))
    for col, cell in zip(cols, head_cells):
        arrow = ""
        if state.order_by == cell.id:
            arrow = " ▲" if state.order == Order.ASC else " ▼"
        if col.button(cell.label + arrow, key=f"sort_{cell.id}", use_container_width=True):
            _save(state.request_sort(cell.id))

page = visible_rows(rows, state)
detail_path = config.DETAIL_PATH if config.LINK_FIRST_COLUMN else None
show_table(page.rows, head_cells, detail_path=detail_path)

# ------------------------
# Pagination
# ------------------------
c1, c2, c3, c4 = st.columns(4)
with c1:
    size = st.selectbox(
        "Rows per page", ROWS_PER_PAGE_OPTIONS,
        index=ROWS_PER_PAGE_OPTIONS.index(state.rows_per_page) if state.rows_per_page in ROWS_PER_PAGE_OPTIONS else 0,
        key="tbl_size",
    )
    if size != state.rows_per_page:
        _save(state.change_rows_per_page(int(size)))
with c2:
    if st.button("◀ Prev", disabled=state.page == 0, key="tbl_prev"):
        _save(state.change_page(state.page - 1))
with c3:
    if st.button("Next ▶", disabled=state.page + 1 >= page.page_count, key="tbl_next"):
        _save(state.change_page(state.page + 1))
with c4:
    start = state.page * state.rows_per_page
    st.caption(f"{min(start + 1, page.total)}–{min(start + len(page.rows), page.total)} of {page.total}")

# ------------------------
# Selection
# ------------------------
st.divider()
all_ids = [r["id"] for r in rows]
s1, s2 = st.columns([1, 3])
with s1:
    if st.button("Select all", disabled=len(state.selected) == len(all_ids), key="tbl_all"):
        _save(state.select_all(rows, checked=True))
    if st.button("Clear selection", disabled=not state.selected, key="tbl_none"):
        _save(state.select_all(rows, checked=False))
with s2:
    page_ids = [r["id"] for r in page.rows]
    picked = st.multiselect("Select rows on this page", page_ids,
                            default=[i for i in page_ids if state.is_selected(i)],
                            # rebuild the widget whenever the selection changes elsewhere
                            key=f"tbl_pick_{state.page}_{abs(hash(repr(state.selected)))}")
    toggled = [i for i in page_ids if (i in picked) != state.is_selected(i)]
    if toggled:
        new_state = state
        for i in toggled:
            new_state = new_state.toggle_row(i)
        _save(new_state)
st.caption(f"{len(state.selected)} selected")
