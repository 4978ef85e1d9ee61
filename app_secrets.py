from __future__ import annotations
import os
import streamlit as st

from constants import DEFAULT_FALLBACK_EMAIL, DEFAULT_FALLBACK_MOBILE
from exporters import ExportDefaults

def get_secret(key: str) -> str | None:
    v = os.environ.get(key)
    if v:
        return v
    try:
        return st.secrets.get(key)  # type: ignore[attr-defined]
    except Exception:
        # no secrets.toml present
        return None

def load_export_defaults() -> ExportDefaults:
    return ExportDefaults(
        email=get_secret("FALLBACK_EMAIL") or DEFAULT_FALLBACK_EMAIL,
        mobile=get_secret("FALLBACK_MOBILE") or DEFAULT_FALLBACK_MOBILE,
    )
