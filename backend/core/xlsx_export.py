"""
XLSX Export Module - order spreadsheets for the shop's bookkeeping.

Layout:
- Orders from a single month: one "Orders" sheet
- Orders spanning several months: an "Overall" sheet (one row per month)
  followed by one sheet per month, named YYYY-MM

Every order sheet ends with a TOTAL footer row. Money columns use a VND
number format.
"""

from decimal import Decimal
from io import BytesIO
from typing import Dict, List

from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter

from bakehouse.dates import calendar_date, parse_date, to_report_time
from bakehouse.notify.models import Order
from bakehouse.numbers import to_decimal

VND_FORMAT = '#,##0 "₫"'
HEADER_FILL = PatternFill(start_color="EA580C", end_color="EA580C", fill_type="solid")
FOOTER_FILL = PatternFill(start_color="FFF7ED", end_color="FFF7ED", fill_type="solid")
UNKNOWN_MONTH = "Unknown"

ORDER_COLUMNS = [
    "Order #",
    "Order Date",
    "Customer",
    "Phone",
    "Address",
    "Items",
    "Status",
    "Payment",
    "Shipping",
    "Total",
]
ORDER_COLUMN_WIDTHS = [14, 18, 24, 14, 36, 40, 12, 10, 12, 14]
ORDER_MONEY_COLUMNS = {"Shipping", "Total"}

OVERALL_COLUMNS = ["Month", "Total Orders", "Total Revenue", "Total Customers", "Avg Order Value"]
OVERALL_COLUMN_WIDTHS = [15, 15, 20, 15, 20]
OVERALL_MONEY_COLUMNS = {"Total Revenue", "Avg Order Value"}


def _amount(value) -> Decimal:
    return to_decimal(value) or Decimal("0")


def month_key(order: Order) -> str:
    """YYYY-MM of the order date in the shop's timezone, or UNKNOWN_MONTH."""
    day = calendar_date(order.order_date)
    if day is None:
        return UNKNOWN_MONTH
    return f"{day.year}-{day.month:02d}"


def group_orders_by_month(orders: List[Order]) -> Dict[str, List[Order]]:
    """Group orders by month; known months sort ascending, unknown last."""
    grouped: Dict[str, List[Order]] = {}
    for order in orders:
        grouped.setdefault(month_key(order), []).append(order)
    return dict(sorted(grouped.items(), key=lambda kv: (kv[0] == UNKNOWN_MONTH, kv[0])))


def extract_order_row(order: Order) -> List:
    """Extract one sheet row for an order."""
    ordered_at = parse_date(order.order_date)
    customer = order.customer
    items = ", ".join(f"{item.name} x{item.quantity}" for item in order.items)

    return [
        order.display_id,
        to_report_time(ordered_at).strftime("%d/%m/%Y %H:%M") if ordered_at else "",
        (customer.name if customer else None) or "",
        (customer.phone if customer else None) or "",
        (customer.address if customer else None) or "",
        items,
        order.status.value,
        order.payment_status.value,
        float(_amount(order.shipping_cost)),
        float(_amount(order.total)),
    ]


def _style_header(ws, widths: List[int]):
    for cell in ws[1]:
        cell.font = Font(bold=True, color="FFFFFF")
        cell.fill = HEADER_FILL
    for col_idx, width in enumerate(widths, 1):
        ws.column_dimensions[get_column_letter(col_idx)].width = width


def _apply_money_format(ws, columns: List[str], money_columns: set):
    for col_idx, name in enumerate(columns, 1):
        if name not in money_columns:
            continue
        for row in ws.iter_rows(min_row=2, min_col=col_idx, max_col=col_idx):
            for cell in row:
                cell.number_format = VND_FORMAT


def _write_order_sheet(ws, orders: List[Order]):
    ws.append(ORDER_COLUMNS)
    for order in orders:
        ws.append(extract_order_row(order))

    shipping = sum((_amount(o.shipping_cost) for o in orders), Decimal("0"))
    total = sum((_amount(o.total) for o in orders), Decimal("0"))
    footer = ["TOTAL", f"{len(orders)} orders"] + [""] * 6 + [float(shipping), float(total)]
    ws.append(footer)
    for cell in ws[ws.max_row]:
        cell.font = Font(bold=True, color="EA580C")
        cell.fill = FOOTER_FILL

    _style_header(ws, ORDER_COLUMN_WIDTHS)
    _apply_money_format(ws, ORDER_COLUMNS, ORDER_MONEY_COLUMNS)


def _write_overall_sheet(ws, grouped: Dict[str, List[Order]]):
    ws.append(OVERALL_COLUMNS)
    for month, month_orders in grouped.items():
        revenue = sum((_amount(o.total) for o in month_orders), Decimal("0"))
        customers = {
            (o.customer.id or o.customer.phone or o.customer.name)
            for o in month_orders if o.customer
        }
        customers.discard(None)
        ws.append([
            month,
            len(month_orders),
            float(revenue),
            len(customers),
            float(revenue / len(month_orders)) if month_orders else 0,
        ])

    _style_header(ws, OVERALL_COLUMN_WIDTHS)
    _apply_money_format(ws, OVERALL_COLUMNS, OVERALL_MONEY_COLUMNS)


def create_orders_workbook(orders: List[Order]) -> BytesIO:
    """
    Create the order export workbook.

    Args:
        orders: Orders to export, in the order they should appear

    Returns:
        BytesIO buffer containing the Excel file
    """
    wb = Workbook()
    grouped = group_orders_by_month(orders)

    if len(grouped) > 1:
        overall = wb.active
        overall.title = "Overall"
        _write_overall_sheet(overall, grouped)
        for month, month_orders in grouped.items():
            _write_order_sheet(wb.create_sheet(title=month), month_orders)
    else:
        ws = wb.active
        ws.title = "Orders"
        _write_order_sheet(ws, orders)

    buffer = BytesIO()
    wb.save(buffer)
    buffer.seek(0)
    return buffer
