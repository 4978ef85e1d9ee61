from __future__ import annotations
from typing import Callable
import streamlit as st
import pandas as pd

from constants import EXPORT_TYPES, SHIPGLOBAL_COLUMNS, SHIPROCKET_COLUMNS, TABLE_COLUMNS
from exporters import ExportFile

SELECT_COL = "Select"

def orders_table(
    view: pd.DataFrame,
    selection: frozenset,
    editor_key: str,
    on_edit: Callable[[], None],
    on_select_all: Callable[[], None],
) -> None:
    st.subheader("Orders")
    if view.empty:
        st.info("No Orders Found.")
        return
    st.checkbox("Select all", key="select_all", on_change=on_select_all)

    table = view[list(TABLE_COLUMNS)].rename(columns=TABLE_COLUMNS)
    table.insert(0, SELECT_COL, view["order_id"].isin(selection).to_numpy())
    st.data_editor(
        table,
        key=editor_key,
        on_change=on_edit,
        hide_index=True,
        use_container_width=True,
        disabled=list(TABLE_COLUMNS.values()),
        column_config={SELECT_COL: st.column_config.CheckboxColumn(SELECT_COL, default=False)},
    )

def export_controls() -> bool:
    c1, c2, c3 = st.columns([2, 2, 1])
    c1.selectbox(
        "Export type",
        [""] + list(EXPORT_TYPES),
        key="export_type",
        format_func=lambda k: EXPORT_TYPES.get(k, "Select Export Type"),
    )
    c2.text_input("Start Invoice", key="start_invoice", placeholder="Start Invoice")
    c3.write("")
    return c3.button("Export", type="primary", use_container_width=True)

def download_export(export: ExportFile) -> None:
    st.success(f"{export.rows} orders ready: {export.filename}")
    st.download_button(
        f"Download {export.filename}",
        export.as_bytes(),
        export.filename,
        "text/csv",
    )

def export_columns_expander() -> None:
    with st.expander("Export columns"):
        l, r = st.columns(2)
        l.markdown("**Ship Rocket**\n\n" + "\n".join(f"- {c}" for c in SHIPROCKET_COLUMNS))
        r.markdown("**Ship Global**\n\n" + "\n".join(f"- {c}" for c in SHIPGLOBAL_COLUMNS))
