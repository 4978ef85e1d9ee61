# filters.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Optional
import datetime as _dt
import logging
import streamlit as st
import pandas as pd

from constants import SALE_DATE_FORMAT, TABLE_COLUMNS

logger = logging.getLogger(__name__)

ASC, DESC = "asc", "desc"

@dataclass(frozen=True)
class FilterState:
    search: str = ""
    country: str = ""
    start_date: Optional[_dt.date] = None
    end_date: Optional[_dt.date] = None

@dataclass(frozen=True)
class SortState:
    key: str = ""
    direction: str = ASC

# ---------- helpers ----------
def _text(s: pd.Series) -> pd.Series:
    return s.fillna("").astype(str)

def _contains(s: pd.Series, term: str) -> pd.Series:
    return _text(s).str.contains(term, case=False, regex=False)

def parse_sale_dates(s: pd.Series) -> pd.Series:
    """dd/mm/yyyy text -> Timestamp; anything else becomes NaT."""
    return pd.to_datetime(_text(s), format=SALE_DATE_FORMAT, errors="coerce")

# ---------- filtering ----------
def apply_filters(df: pd.DataFrame, f: FilterState) -> pd.DataFrame:
    """Search -> country -> start date -> end date, each narrowing the previous result.

    A record without a usable sale date never passes an active date bound.
    """
    out = df
    if f.search:
        out = out[_contains(out["order_id"], f.search) | _contains(out["full_name"], f.search)]
    if f.country:
        out = out[_contains(out["country"], f.country)]
    if f.start_date is not None:
        out = out[parse_sale_dates(out["sale_date"]) >= pd.Timestamp(f.start_date)]
    if f.end_date is not None:
        out = out[parse_sale_dates(out["sale_date"]) <= pd.Timestamp(f.end_date)]
    return out

# ---------- sorting ----------
def toggle_sort(current: SortState, key: str) -> SortState:
    if current.key == key and current.direction == ASC:
        return SortState(key, DESC)
    return SortState(key, ASC)

def apply_sort(df: pd.DataFrame, s: SortState) -> pd.DataFrame:
    if not s.key or s.key not in df.columns:
        return df
    ascending = s.direction == ASC
    try:
        return df.sort_values(s.key, ascending=ascending, na_position="last")
    except TypeError:
        # mixed value types: compare as text
        logger.debug("Sorting %s as text", s.key)
        return df.sort_values(s.key, ascending=ascending, na_position="last", key=_text)

# ---------- widgets ----------
def filter_controls(on_clear: Callable[[], None]) -> FilterState:
    c1, c2, c3, c4 = st.columns(4)
    search = c1.text_input("Search", key="search_term", placeholder="Search by Order ID or Full Name")
    country = c2.text_input("Country", key="country_filter", placeholder="Country")
    start = c3.date_input("From", value=None, key="start_date", format="DD/MM/YYYY")
    end = c4.date_input("To", value=None, key="end_date", format="DD/MM/YYYY")
    st.button("Clear", key="clear_filters", on_click=on_clear)
    return FilterState(search=search or "", country=country or "", start_date=start, end_date=end)

def sort_controls(current: SortState, on_sort: Callable[[], None]) -> None:
    keys = list(TABLE_COLUMNS)
    c1, c2 = st.columns([3, 1])
    c1.selectbox("Sort by", keys, key="sort_key", format_func=TABLE_COLUMNS.get)
    c2.button("Sort ⇅", on_click=on_sort, use_container_width=True)
    if current.key:
        arrow = "▲" if current.direction == ASC else "▼"
        st.caption(f"Sorted by {TABLE_COLUMNS.get(current.key, current.key)} {arrow}")
