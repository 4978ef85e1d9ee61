"""
Tests for the courier exporters.

Validates:
- Exact header order per courier
- Sequential invoice numbering from the entered start value
- Name splitting and contact/state fallbacks
- File naming and empty-selection handling
"""
import datetime as dt
import io

import pandas as pd
import pytest

from constants import SHIPGLOBAL_COLUMNS, SHIPROCKET_COLUMNS
from exporters import (
    EmptySelectionError,
    ExportDefaults,
    UnknownCourierError,
    build_export,
    check_export_request,
    export_date,
    map_orders,
    parse_invoice_start,
    shiprocket_row,
    split_customer_name,
)
from tests.conftest import make_order

TODAY = dt.date(2024, 3, 5)


def read_back(export):
    return pd.read_csv(io.StringIO(export.content), dtype=str, keep_default_na=False)


@pytest.mark.parametrize("first, last, full, expected", [
    ("", "", "Anita Rao", ("Anita", "Rao")),
    ("", "", "James van der Berg", ("James", "van der Berg")),
    ("", "", "  Mary   Ann   Lee ", ("Mary", "Ann Lee")),
    ("", "", "Cher", ("Cher", "Cher")),
    ("Ann", "", "Cher", ("Cher", "Cher")),
    ("Maria", "Lopez", "Someone Else", ("Maria", "Lopez")),
    ("Maria", "", "", ("Maria", "")),
    (None, None, None, ("", "")),
    ("", "", "   ", ("", "")),
])
def test_split_customer_name(first, last, full, expected):
    assert split_customer_name(first, last, full) == expected


@pytest.mark.parametrize("raw, expected", [
    ("100", 100),
    (" 7", 7),
    ("12abc", 12),
    (42, 42),
    ("", 1),
    (None, 1),
    ("abc", 1),
])
def test_parse_invoice_start(raw, expected):
    assert parse_invoice_start(raw) == expected


def test_export_date_format():
    assert export_date(TODAY) == "05-03-2024"


def test_check_export_request():
    assert check_export_request("", "1") == "Please select an export type."
    assert check_export_request("shipRocket", "") == "Please enter a Start Invoice number before exporting."
    assert check_export_request("shipGlobal", "1") is None


def test_shiprocket_header_is_exact(orders):
    export = build_export(orders, "shipRocket", "1", today=TODAY)

    assert export.content.splitlines()[0] == ",".join(SHIPROCKET_COLUMNS)


def test_shipglobal_header_is_exact(orders):
    export = build_export(orders, "shipGlobal", "1", today=TODAY)

    assert export.content.splitlines()[0] == ",".join(SHIPGLOBAL_COLUMNS)


@pytest.mark.parametrize("courier, column", [("shipRocket", "Order ID"), ("shipGlobal", "Invoice Number")])
def test_invoice_numbers_are_sequential(orders, courier, column):
    export = build_export(orders, courier, "250", today=TODAY)

    assert read_back(export)[column].tolist() == ["250", "251", "252", "253"]
    assert export.rows == 4


def test_invalid_start_invoice_counts_from_one(orders):
    mapped = map_orders(orders.iloc[:2], "shipRocket", "n/a", today=TODAY)

    assert mapped["Order ID"].tolist() == ["1", "2"]


def test_filenames(orders):
    assert build_export(orders, "shipRocket", "1", today=TODAY).filename == "shipRocket_05-03-2024.csv"
    assert build_export(orders, "shipGlobal", "1", today=TODAY).filename == "shipGlobal_05-03-2024.csv"


def test_empty_selection_raises(orders):
    with pytest.raises(EmptySelectionError, match="No valid rows available for export!"):
        build_export(orders.iloc[:0], "shipRocket", "1", today=TODAY)


def test_unknown_courier_raises(orders):
    with pytest.raises(UnknownCourierError):
        build_export(orders, "dhl", "1", today=TODAY)


def test_shiprocket_row_fallbacks_and_constants():
    order = make_order(order_id="9", sale_date="05/01/2024", full_name="Cher", no_of_items=2.0, zip_code="00123")

    row = shiprocket_row(order, 17, "05-03-2024")

    assert row["Order ID"] == "17"
    assert row["Order Date"] == "05/01/2024"
    assert row["Invoice Date"] == "05-03-2024"
    assert (row["Customer First Name"], row["Customer Last Name"]) == ("Cher", "Cher")
    assert row["Email"] == ExportDefaults().email
    assert row["Customer Mobile"] == ExportDefaults().mobile
    assert row["Shipping Address State"] == "NA"
    assert row["Shipping Address Postcode"] == "00123"
    assert row["Product Quantity"] == "2"
    assert row["HSN code"] == "65061090"
    assert row["Selling Price(Per Unit Item Inclusive of Tax)"] == 17
    assert row["Weight Of Shipment(kg)"] == "0.05"


def test_record_contact_values_win_over_fallbacks():
    order = make_order(order_id="9", email="a@b.co", mobile_no="555", state="KA")

    row = shiprocket_row(order, 1, "05-03-2024", ExportDefaults("x@y.z", "000"))

    assert (row["Email"], row["Customer Mobile"], row["Shipping Address State"]) == ("a@b.co", "555", "KA")


def test_custom_defaults_are_used(orders):
    export = build_export(orders, "shipGlobal", "1", today=TODAY, defaults=ExportDefaults("ops@shop.test", "1234567890"))
    df = read_back(export)

    assert set(df["Customer Email"]) == {"ops@shop.test"}
    assert set(df["Customer Mobile"]) == {"1234567890"}


def test_shipglobal_keeps_source_order_reference(orders):
    df = read_back(build_export(orders, "shipGlobal", "10", today=TODAY))

    assert df["Order Reference"].tolist() == ["1001", "1002", "2003", "2004"]
    assert df.loc[0, "Customer First Name"] == "Anita"
    assert df.loc[0, "Customer Last Name"] == "Rao"
    assert df.loc[0, "Invoice Date"] == "05-03-2024"
    assert df.loc[0, "State"] == "NA"


def test_exported_bytes_are_utf8(orders):
    export = build_export(orders, "shipRocket", "1", today=TODAY)

    assert export.as_bytes().decode("utf-8") == export.content


def test_long_start_invoice_counts_up_without_overflow(orders):
    export = build_export(orders.iloc[:2], "shipRocket", "99999999999999999999", today=TODAY)

    assert read_back(export)["Order ID"].tolist() == ["99999999999999999999", "100000000000000000000"]
