# exporters.py
"""Courier CSV exports.

Each courier is a pure ``(order, invoice_number, invoice_date, defaults) -> row``
mapper plus a fixed column schema. ``build_export`` numbers the selected orders,
maps them and serializes the result; the UI only offers the bytes for download.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple
import datetime as _dt
import logging
import re
import numpy as np
import pandas as pd

from constants import (
    DEFAULT_FALLBACK_EMAIL,
    DEFAULT_FALLBACK_MOBILE,
    EXPORT_DATE_FORMAT,
    PRODUCT_DEFAULTS as P,
    SHIPGLOBAL_COLUMNS,
    SHIPROCKET_COLUMNS,
)

logger = logging.getLogger(__name__)


class ExportError(Exception):
    """An export request that cannot produce a file."""

class EmptySelectionError(ExportError):
    """No orders are selected."""

class UnknownCourierError(ExportError):
    """The export type names no known courier."""


@dataclass(frozen=True)
class ExportDefaults:
    email: str = DEFAULT_FALLBACK_EMAIL
    mobile: str = DEFAULT_FALLBACK_MOBILE

@dataclass(frozen=True)
class ExportFile:
    courier: str
    filename: str
    content: str
    rows: int

    def as_bytes(self) -> bytes:
        return self.content.encode("utf-8")

RowMapper = Callable[[Mapping[str, Any], int, str, ExportDefaults], Dict[str, Any]]

@dataclass(frozen=True)
class Courier:
    file_prefix: str
    columns: List[str]
    map_row: RowMapper


# ---------- shared rules ----------
def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float):
        if np.isnan(value):
            return ""
        if value.is_integer():
            return str(int(value))
    return str(value)

def export_date(today: Optional[_dt.date] = None) -> str:
    return (today or _dt.date.today()).strftime(EXPORT_DATE_FORMAT)

def parse_invoice_start(value: Any) -> int:
    """Leading integer of the entered text; 1 when there is none."""
    m = re.match(r"\s*([+-]?\d+)", _cell(value))
    return int(m.group(1)) if m else 1

def split_customer_name(first: Any, last: Any, full: Any) -> Tuple[str, str]:
    first, last, full = _cell(first), _cell(last), _cell(full)
    if last or not full:
        return first, last
    parts = full.split()
    if not parts:
        return "", ""
    if len(parts) == 1:
        return parts[0], parts[0]
    return parts[0], " ".join(parts[1:])

def check_export_request(export_type: Optional[str], start_invoice: Optional[str]) -> Optional[str]:
    if not export_type:
        return "Please select an export type."
    if not start_invoice:
        return "Please enter a Start Invoice number before exporting."
    return None


# ---------- courier mappers ----------
def shiprocket_row(order: Mapping[str, Any], invoice_number: int, invoice_date: str,
                   defaults: ExportDefaults = ExportDefaults()) -> Dict[str, Any]:
    first, last = split_customer_name(order.get("first_name"), order.get("last_name"), order.get("full_name"))
    return {
        "Order ID": str(invoice_number),
        "Channel": "Custom",
        "Order Date": _cell(order.get("sale_date")),
        "Purpose of Shipment(Gift/Sample)": "Gift",
        "Currency": "USD",
        "Customer First Name": first,
        "Customer Last Name": last,
        "Email": _cell(order.get("email")) or defaults.email,
        "Customer Mobile": _cell(order.get("mobile_no")) or defaults.mobile,
        "Shipping Address Line 1": _cell(order.get("address_line1")),
        "Shipping Address Line 2": _cell(order.get("address_line2")),
        "Shipping Address Country": _cell(order.get("country")),
        "Shipping Address Postcode": _cell(order.get("zip_code")),
        "Shipping Address City": _cell(order.get("city")),
        "Shipping Address State": _cell(order.get("state")) or "NA",
        "Master SKU": P["sku"],
        "Product Name": P["name"],
        "HSN code": P["hsn"],
        "Product Quantity": _cell(order.get("no_of_items")),
        "Tax": 1,
        "VAT Number": "",
        "Selling Price(Per Unit Item Inclusive of Tax)": P["unit_price"],
        "Invoice Date": invoice_date,
        "Length (cm)": P["length_cm"],
        "Breadth (cm)": P["breadth_cm"],
        "Height (cm)": P["height_cm"],
        "Weight Of Shipment(kg)": P["weight_kg"],
        "Ioss": "",
        "Eori": "",
        "Terms of Invoice": "",
        "Franchise Seller ID": "",
        "Courier ID": "",
    }

def shipglobal_row(order: Mapping[str, Any], invoice_number: int, invoice_date: str,
                   defaults: ExportDefaults = ExportDefaults()) -> Dict[str, Any]:
    first, last = split_customer_name(order.get("first_name"), order.get("last_name"), order.get("full_name"))
    return {
        "Invoice Number": str(invoice_number),
        "Order Reference": _cell(order.get("order_id")),
        "Invoice Date": invoice_date,
        "Order Date": _cell(order.get("sale_date")),
        "Invoice Currency": "USD",
        "Shipment Purpose": "Gift",
        "CSB Type": "CSB-IV",
        "Customer First Name": first,
        "Customer Last Name": last,
        "Customer Email": _cell(order.get("email")) or defaults.email,
        "Customer Mobile": _cell(order.get("mobile_no")) or defaults.mobile,
        "Address Line 1": _cell(order.get("address_line1")),
        "Address Line 2": _cell(order.get("address_line2")),
        "City": _cell(order.get("city")),
        "State": _cell(order.get("state")) or "NA",
        "Zip Code": _cell(order.get("zip_code")),
        "Country": _cell(order.get("country")),
        "Package Weight (kg)": P["weight_kg"],
        "Package Length (cm)": P["length_cm"],
        "Package Breadth (cm)": P["breadth_cm"],
        "Package Height (cm)": P["height_cm"],
        "Product Name": P["name"],
        "Product SKU": P["sku"],
        "Product HSN": P["hsn"],
        "Product Quantity": _cell(order.get("no_of_items")),
        "Product Unit Price": P["unit_price"],
        "IGST (%)": 0,
    }

COURIERS: Dict[str, Courier] = {
    "shipRocket": Courier("shipRocket", SHIPROCKET_COLUMNS, shiprocket_row),
    "shipGlobal": Courier("shipGlobal", SHIPGLOBAL_COLUMNS, shipglobal_row),
}


# ---------- public API ----------
def map_orders(orders: pd.DataFrame, courier: str, start_invoice: Any,
               today: Optional[_dt.date] = None,
               defaults: ExportDefaults = ExportDefaults()) -> pd.DataFrame:
    if courier not in COURIERS:
        raise UnknownCourierError(f"Unknown export type: {courier!r}")
    target = COURIERS[courier]
    invoice_date = export_date(today)
    start = parse_invoice_start(start_invoice)
    records = orders.to_dict("records")
    rows = [
        target.map_row(order, n, invoice_date, defaults)
        for order, n in zip(records, range(start, start + len(records)))
    ]
    return pd.DataFrame(rows, columns=target.columns)

def build_export(orders: pd.DataFrame, courier: str, start_invoice: Any,
                 today: Optional[_dt.date] = None,
                 defaults: ExportDefaults = ExportDefaults()) -> ExportFile:
    mapped = map_orders(orders, courier, start_invoice, today, defaults)
    if mapped.empty:
        raise EmptySelectionError("No valid rows available for export!")
    filename = f"{COURIERS[courier].file_prefix}_{export_date(today)}.csv"
    content = mapped.to_csv(index=False, lineterminator="\n")
    logger.info("Exported %d orders to %s", len(mapped), filename)
    return ExportFile(courier=courier, filename=filename, content=content, rows=len(mapped))
