# client/components.py
from typing import Any, Dict, List, Optional, Sequence
import streamlit as st
import pandas as pd

from recordtable.table import HeadCell, row_link

def rows_to_frame(
    rows: Sequence[Dict[str, Any]],
    head_cells: Sequence[HeadCell],
    detail_path: Optional[str] = None,
) -> pd.DataFrame:
    """Rows as a DataFrame with header labels; first column turned into links if asked."""
    cols = [c.id for c in head_cells]
    df = pd.DataFrame(list(rows), columns=cols)
    if detail_path and cols:
        df[cols[0]] = [row_link(detail_path, v) for v in df[cols[0]]]
    return df.rename(columns={c.id: c.label for c in head_cells})

def show_table(
    rows: Sequence[Dict[str, Any]],
    head_cells: Sequence[HeadCell],
    detail_path: Optional[str] = None,
    caption: Optional[str] = None,
):
    """Render normalized rows; numeric columns right-aligned, long text truncated."""
    if caption:
        st.caption(caption)
    if not rows:
        st.info("No rows to show.")
        return
    df = rows_to_frame(rows, head_cells, detail_path)
    column_config = {}
    for i, c in enumerate(head_cells):
        if i == 0 and detail_path:
            column_config[c.label] = st.column_config.LinkColumn(c.label, display_text=r".*/(.*)$")
        elif c.numeric:
            column_config[c.label] = st.column_config.NumberColumn(c.label)
        else:
            column_config[c.label] = st.column_config.TextColumn(c.label, width="medium", help=c.label)
    st.dataframe(df, column_config=column_config, hide_index=True, use_container_width=True)

def show_json(obj, caption: Optional[str] = None):
    if caption:
        st.caption(caption)
    st.json(obj)

def parse_list(text: str) -> List[str]:
    """Comma-separated text input -> list of trimmed names (empty entries dropped)."""
    return [p.strip() for p in (text or "").split(",") if p.strip()]
