from __future__ import annotations
from typing import FrozenSet, Iterable
import pandas as pd

Selection = FrozenSet[str]

def toggle(selection: Selection, order_id: str) -> Selection:
    if order_id in selection:
        return selection - {order_id}
    return selection | {order_id}

def select_all(visible_ids: Iterable[str], checked: bool) -> Selection:
    return frozenset(visible_ids) if checked else frozenset()

def reconcile(previous: Selection, visible_ids: Iterable[str]) -> Selection:
    """Keep only the selected ids that are still in view."""
    return previous & frozenset(visible_ids)

def all_selected(selection: Selection, visible_ids: Iterable[str]) -> bool:
    visible = frozenset(visible_ids)
    return bool(visible) and visible <= selection

def selected_orders(view: pd.DataFrame, selection: Selection) -> pd.DataFrame:
    return view[view["order_id"].isin(selection)]
