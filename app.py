# app.py
from __future__ import annotations
import logging
import streamlit as st

from app_secrets import get_secret, load_export_defaults
from constants import APP_TITLE
from data_io import OrderImportError, SAMPLE_PATH, load_sample, load_uploaded
from exporters import ExportError, build_export, check_export_request
from filters import filter_controls, sort_controls
from kpis import compute_summary, render_summary
from selection import all_selected
from session import OrderSession, cleared, with_filters, with_orders, with_select_all, with_sort, with_toggled
from tables import SELECT_COL, download_export, export_columns_expander, export_controls, orders_table
from ui import footer_description, header, import_sidebar

logger = logging.getLogger(__name__)

SESSION_KEY = "order_session"


def _session() -> OrderSession:
    if SESSION_KEY not in st.session_state:
        st.session_state[SESSION_KEY] = OrderSession()
    return st.session_state[SESSION_KEY]

def _store(session: OrderSession) -> None:
    st.session_state[SESSION_KEY] = session

# The table is re-keyed after every change so its pending edits never outlive
# the selection they were made against.
def _editor_key() -> str:
    return f"orders_editor_{st.session_state.get('_editor_nonce', 0)}"

def _reset_editor() -> None:
    st.session_state["_editor_nonce"] = st.session_state.get("_editor_nonce", 0) + 1


# ---------- callbacks (run before the rerun, one at a time per session) ----------
def _import(load, name: str) -> None:
    try:
        orders = load()
    except OrderImportError as e:
        logger.error("Import of %s failed: %s", name, e)
        st.session_state["_import_error"] = f"{name}: {e}"
        return
    st.session_state.pop("_import_error", None)
    _store(with_orders(_session(), orders, source_name=name))
    _reset_editor()

def _on_upload() -> None:
    uploaded = st.session_state.get("orders_file")
    if uploaded is not None:
        _import(lambda: load_uploaded(uploaded), uploaded.name)

def _on_sample() -> None:
    _import(load_sample, SAMPLE_PATH.name)

def _on_edit() -> None:
    edits = st.session_state.get(_editor_key(), {}).get("edited_rows", {})
    ids = st.session_state.get("_editor_ids", [])
    session = _session()
    for row, change in edits.items():
        row = int(row)
        if SELECT_COL not in change or row >= len(ids):
            continue
        order_id = ids[row]
        if bool(change[SELECT_COL]) != (order_id in session.selection):
            session = with_toggled(session, order_id)
    _store(session)
    _reset_editor()

def _on_select_all() -> None:
    _store(with_select_all(_session(), bool(st.session_state.get("select_all"))))
    _reset_editor()

def _on_sort() -> None:
    _store(with_sort(_session(), st.session_state["sort_key"]))
    _reset_editor()

def _on_clear() -> None:
    for key, value in {
        "search_term": "",
        "country_filter": "",
        "start_date": None,
        "end_date": None,
        "start_invoice": "",
    }.items():
        st.session_state[key] = value
    _store(cleared(_session()))
    _reset_editor()


def _export(session: OrderSession) -> None:
    export_type = st.session_state.get("export_type")
    start_invoice = st.session_state.get("start_invoice")
    problem = check_export_request(export_type, start_invoice)
    if problem:
        st.warning(problem)
        return
    try:
        export = build_export(
            session.selected_view(),
            export_type,
            start_invoice,
            defaults=load_export_defaults(),
        )
    except ExportError as e:
        logger.warning("Export aborted: %s", e)
        st.warning(str(e))
        return
    download_export(export)


def main() -> None:
    logging.basicConfig(
        level=(get_secret("LOG_LEVEL") or "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    header(APP_TITLE)

    # Data load
    import_sidebar(_on_upload, _on_sample, _session().source_name)
    if "_import_error" in st.session_state:
        st.error(f"Could not import {st.session_state['_import_error']}")

    # Filters + sort
    filters = filter_controls(on_clear=_on_clear)
    session = with_filters(_session(), filters)
    _store(session)
    sort_controls(session.sort, _on_sort)

    # Summary
    st.divider()
    render_summary(compute_summary(session))

    # Table
    view = session.view()
    st.session_state["_editor_ids"] = view["order_id"].tolist()
    st.session_state["select_all"] = all_selected(session.selection, view["order_id"])
    orders_table(view, session.selection, _editor_key(), _on_edit, _on_select_all)

    # Export
    st.divider()
    if export_controls():
        _export(session)

    st.divider()
    export_columns_expander()
    footer_description()


if __name__ == "__main__":
    main()
