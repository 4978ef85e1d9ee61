import pandas as pd

from selection import all_selected, reconcile, select_all, selected_orders, toggle


def test_toggle_adds_then_removes():
    s = toggle(frozenset(), "1")
    assert s == {"1"}
    assert toggle(s, "1") == frozenset()


def test_select_all():
    assert select_all(["1", "2"], True) == {"1", "2"}
    assert select_all(["1", "2"], False) == frozenset()


def test_reconcile_keeps_only_visible():
    assert reconcile(frozenset({"1", "2", "3"}), ["2", "3", "4"]) == {"2", "3"}
    assert reconcile(frozenset({"1"}), []) == frozenset()


def test_all_selected():
    assert all_selected(frozenset({"1", "2"}), ["1", "2"])
    assert not all_selected(frozenset({"1"}), ["1", "2"])
    assert not all_selected(frozenset(), [])


def test_selected_orders_preserves_view_order():
    view = pd.DataFrame({"order_id": ["3", "1", "2"]})

    assert selected_orders(view, frozenset({"1", "3"}))["order_id"].tolist() == ["3", "1"]
