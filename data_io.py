# data_io.py
from __future__ import annotations
import csv
import logging
from pathlib import Path
from typing import Iterable, Optional

import pandas as pd
import streamlit as st

from constants import COLUMN_MAP, CONTACT_COLS, EXPECTED_COLS, NUMERIC_COLS, ORDER_COLS, SALE_DATE_FORMAT, ZIP_CODE_WIDTH

logger = logging.getLogger(__name__)

SAMPLE_PATH = Path(__file__).with_name("sample_orders.csv")


class OrderImportError(Exception):
    """The uploaded file could not be read as a CSV of orders."""


def format_sale_date(value: str) -> str:
    """Render a sale date as dd/mm/yyyy, or hand back the raw text if it does not parse."""
    if not value:
        return ""
    # pandas reads words like "today" as the current date
    if not any(ch.isdigit() for ch in value):
        logger.debug("Keeping sale date without digits %r", value)
        return value
    try:
        ts = pd.to_datetime(value)
    except (ValueError, OverflowError) as e:
        logger.debug("Keeping unparsable sale date %r (%s)", value, e)
        return value
    if pd.isna(ts):
        return value
    return ts.strftime(SALE_DATE_FORMAT)

def pad_zip_code(value: str) -> str:
    return str(value).rjust(ZIP_CODE_WIDTH, "0")

def _maybe_numeric(s: pd.Series) -> pd.Series:
    # only convert when every non-blank cell is a number
    present = s.str.strip().ne("")
    parsed = pd.to_numeric(s.where(present), errors="coerce")
    if parsed[present].notna().all():
        return parsed
    return s

def validate_columns(df: pd.DataFrame, expected: Iterable[str]) -> Optional[str]:
    missing = [c for c in expected if c not in df.columns]
    return f"Missing required columns: {', '.join(missing)}" if missing else None

def empty_orders() -> pd.DataFrame:
    return pd.DataFrame({c: pd.Series(dtype=object) for c in ORDER_COLS})

def to_orders(raw: pd.DataFrame) -> pd.DataFrame:
    """Map a header-keyed frame of raw text cells onto canonical order columns."""
    # short rows come back with NaN for the missing trailing fields
    raw = raw.rename(columns=lambda c: str(c).strip()).fillna("")
    err = validate_columns(raw, EXPECTED_COLS)
    if err:
        logger.warning("%s (filled with blanks)", err)

    # drop rows where every field is empty
    raw = raw[raw.ne("").any(axis=1)]

    out = pd.DataFrame(index=raw.index)
    for src, dst in COLUMN_MAP.items():
        out[dst] = raw[src] if src in raw.columns else ""
    out["sale_date"] = out["sale_date"].map(format_sale_date)
    out["zip_code"] = out["zip_code"].map(pad_zip_code)
    for col in NUMERIC_COLS:
        out[col] = _maybe_numeric(out[col].astype(str))
    for col in CONTACT_COLS:
        out[col] = None
    return out[ORDER_COLS].reset_index(drop=True)

def read_orders(source) -> pd.DataFrame:
    """Parse an order CSV (path, buffer or uploaded file) into canonical order records."""
    try:
        raw = pd.read_csv(
            source,
            dtype=str,
            keep_default_na=False,
            encoding="utf-8-sig",
            skip_blank_lines=True,
        )
    except (pd.errors.EmptyDataError, pd.errors.ParserError, UnicodeDecodeError, csv.Error) as e:
        raise OrderImportError(f"Could not parse CSV: {e}") from e
    return to_orders(raw)

@st.cache_data
def load_sample() -> pd.DataFrame:
    return read_orders(SAMPLE_PATH)

def load_uploaded(file) -> pd.DataFrame:
    if hasattr(file, "seek"):
        file.seek(0)
    df = read_orders(file)
    logger.info("Imported %d orders from %s", len(df), getattr(file, "name", "upload"))
    return df
