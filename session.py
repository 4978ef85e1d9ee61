# session.py
"""Session state for one user: the imported orders plus the view settings over them.

``OrderSession`` is never mutated; every user action goes through one of the
``with_*`` transitions, which return a new session. Transitions that can change
which rows are visible reconcile the selection against the new view, so the
selection never holds an id the user cannot see.
"""
from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import List, Optional
import pandas as pd

from data_io import empty_orders
from filters import FilterState, SortState, apply_filters, apply_sort, toggle_sort
import selection as sel


@dataclass(frozen=True, eq=False)
class OrderSession:
    orders: pd.DataFrame = field(default_factory=empty_orders)
    filters: FilterState = FilterState()
    sort: SortState = SortState()
    selection: sel.Selection = frozenset()
    source_name: Optional[str] = None

    def view(self) -> pd.DataFrame:
        return apply_sort(apply_filters(self.orders, self.filters), self.sort)

    def visible_ids(self) -> List[str]:
        return self.view()["order_id"].tolist()

    def selected_view(self) -> pd.DataFrame:
        """Selected orders in the order they are listed on screen."""
        return sel.selected_orders(self.view(), self.selection)


def _reconciled(session: OrderSession) -> OrderSession:
    return replace(session, selection=sel.reconcile(session.selection, session.visible_ids()))

def with_orders(session: OrderSession, orders: pd.DataFrame, source_name: Optional[str] = None) -> OrderSession:
    # a new import replaces everything that came from the previous file
    return replace(session, orders=orders, selection=frozenset(), source_name=source_name)

def with_filters(session: OrderSession, filters: FilterState) -> OrderSession:
    return _reconciled(replace(session, filters=filters))

def with_sort(session: OrderSession, key: str) -> OrderSession:
    return _reconciled(replace(session, sort=toggle_sort(session.sort, key)))

def with_toggled(session: OrderSession, order_id: str) -> OrderSession:
    if order_id not in session.visible_ids():
        return session
    return replace(session, selection=sel.toggle(session.selection, order_id))

def with_select_all(session: OrderSession, checked: bool) -> OrderSession:
    return replace(session, selection=sel.select_all(session.visible_ids(), checked))

def cleared(session: OrderSession) -> OrderSession:
    """Drop search and filters; orders, sort and selection stay."""
    return with_filters(session, FilterState())
