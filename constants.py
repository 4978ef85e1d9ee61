APP_TITLE = "Order Export: ShipRocket & ShipGlobal"

# raw CSV header -> canonical order field
COLUMN_MAP = {
    "Sale Date": "sale_date",
    "Order ID": "order_id",
    "First Name": "first_name",
    "Last Name": "last_name",
    "Full Name": "full_name",
    "Number of Items": "no_of_items",
    "Street 1": "address_line1",
    "Street 2": "address_line2",
    "Ship City": "city",
    "Ship State": "state",
    "Ship Zipcode": "zip_code",
    "Ship Country": "country",
    "Order Value": "order_value",
}
EXPECTED_COLS = list(COLUMN_MAP)
CONTACT_COLS = ["email", "mobile_no"]
ORDER_COLS = list(COLUMN_MAP.values()) + CONTACT_COLS
NUMERIC_COLS = ["no_of_items", "order_value"]

SALE_DATE_FORMAT = "%d/%m/%Y"
EXPORT_DATE_FORMAT = "%d-%m-%Y"
ZIP_CODE_WIDTH = 5

# table column -> header label, in display order
TABLE_COLUMNS = {
    "sale_date": "Sale Date",
    "order_id": "Order ID",
    "full_name": "Full Name",
    "no_of_items": "No Of Items",
    "address_line1": "Address Line 1",
    "address_line2": "Address Line 2",
    "city": "City",
    "state": "State",
    "zip_code": "Zip Code",
    "country": "Country",
    "order_value": "Order Value",
}

EXPORT_TYPES = {
    "shipRocket": "Ship Rocket",
    "shipGlobal": "Ship Global",
}

DEFAULT_FALLBACK_EMAIL = "orders@example.com"
DEFAULT_FALLBACK_MOBILE = "9000000000"

SHIPROCKET_COLUMNS = [
    "Order ID", "Channel", "Order Date", "Purpose of Shipment(Gift/Sample)", "Currency",
    "Customer First Name", "Customer Last Name", "Email", "Customer Mobile",
    "Shipping Address Line 1", "Shipping Address Line 2", "Shipping Address Country",
    "Shipping Address Postcode", "Shipping Address City", "Shipping Address State",
    "Master SKU", "Product Name", "HSN code", "Product Quantity", "Tax", "VAT Number",
    "Selling Price(Per Unit Item Inclusive of Tax)", "Invoice Date",
    "Length (cm)", "Breadth (cm)", "Height (cm)", "Weight Of Shipment(kg)",
    "Ioss", "Eori", "Terms of Invoice", "Franchise Seller ID", "Courier ID",
]

SHIPGLOBAL_COLUMNS = [
    "Invoice Number", "Order Reference", "Invoice Date", "Order Date", "Invoice Currency",
    "Shipment Purpose", "CSB Type", "Customer First Name", "Customer Last Name",
    "Customer Email", "Customer Mobile", "Address Line 1", "Address Line 2",
    "City", "State", "Zip Code", "Country",
    "Package Weight (kg)", "Package Length (cm)", "Package Breadth (cm)", "Package Height (cm)",
    "Product Name", "Product SKU", "Product HSN", "Product Quantity", "Product Unit Price", "IGST (%)",
]

# fixed package/commercial values shared by both couriers
PRODUCT_DEFAULTS = {
    "sku": "CAP",
    "name": "Fabric Cotton Cap",
    "hsn": "65061090",
    "unit_price": 17,
    "length_cm": 10,
    "breadth_cm": 8,
    "height_cm": 2,
    "weight_kg": "0.05",
}

SUMMARY_FORMATS = {
    "total_orders": "{:,}",
    "visible_orders": "{:,}",
    "selected_orders": "{:,}",
    "selected_items": "{:,.0f}",
}
