from __future__ import annotations
from typing import Dict
import streamlit as st
import pandas as pd
from constants import SUMMARY_FORMATS
from session import OrderSession

def compute_summary(session: OrderSession) -> Dict[str, float]:
    view = session.view()
    selected = session.selected_view()
    items = pd.to_numeric(selected["no_of_items"], errors="coerce").sum()
    return dict(
        total_orders=len(session.orders),
        visible_orders=len(view),
        selected_orders=len(selected),
        selected_items=float(items),
    )

def render_summary(summary: Dict[str, float]) -> None:
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Orders Loaded", SUMMARY_FORMATS["total_orders"].format(summary["total_orders"]))
    c2.metric("Orders Shown", SUMMARY_FORMATS["visible_orders"].format(summary["visible_orders"]))
    c3.metric("Selected", SUMMARY_FORMATS["selected_orders"].format(summary["selected_orders"]))
    c4.metric("Selected Items", SUMMARY_FORMATS["selected_items"].format(summary["selected_items"]))
