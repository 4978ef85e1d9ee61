from __future__ import annotations
import streamlit as st
from typing import Callable, Optional

from constants import EXPECTED_COLS

def header(app_title: str) -> None:
    st.set_page_config(page_title=app_title, layout="wide")
    st.title(app_title)

def import_sidebar(
    on_upload: Callable[[], None],
    on_sample: Callable[[], None],
    source_name: Optional[str],
) -> None:
    st.sidebar.header("Data")
    st.sidebar.file_uploader("Upload orders CSV", type=["csv"], key="orders_file", on_change=on_upload)
    st.sidebar.button("Load sample orders", key="load_sample", on_click=on_sample, use_container_width=True)
    if source_name:
        st.sidebar.caption(f"Loaded: {source_name}")

def footer_description() -> None:
    with st.expander("ℹ️ Note: About this app and expected data format", expanded=False):
        st.markdown(
            f"""
            Import an order export, narrow it down with search, country and sale-date filters,
            tick the orders to ship and export them as a **Ship Rocket** or **Ship Global** bulk CSV.
            Invoice numbers count up from the Start Invoice value in the order the rows are listed.
            Orders have no email or phone in the import, so exports fill them from the
            `FALLBACK_EMAIL` / `FALLBACK_MOBILE` settings (environment or `.streamlit/secrets.toml`).

            **Expected columns:**
            `{", ".join(EXPECTED_COLS)}`
            """
        )
