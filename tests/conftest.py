import io

import pandas as pd
import pytest

from constants import EXPECTED_COLS, ORDER_COLS

HEADER = ",".join(EXPECTED_COLS)


def make_csv(*rows: str) -> io.StringIO:
    """CSV buffer with the standard order header followed by ``rows``."""
    return io.StringIO("\n".join([HEADER, *rows]) + "\n")


def make_order(**fields):
    record = {c: "" for c in ORDER_COLS}
    record["email"] = None
    record["mobile_no"] = None
    record.update(fields)
    return record


@pytest.fixture
def orders():
    """Canonical orders as the importer would produce them."""
    return pd.DataFrame([
        make_order(order_id="1001", sale_date="05/01/2024", full_name="Anita Rao", country="India", no_of_items=1),
        make_order(order_id="1002", sale_date="15/02/2024", full_name="Budi Santoso", country="Indonesia", no_of_items=2),
        make_order(order_id="2003", sale_date="20/01/2024", full_name="John Smith", country="USA", no_of_items=3),
        make_order(order_id="2004", sale_date="", full_name="Cher", country="USA", no_of_items=1),
    ])
