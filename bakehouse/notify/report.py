"""
Notification Compiler - render order reports as chat messages.

Every report kind has the same frame:

    title line
    count line + total line (sum of order totals)
    one numbered block per order

and a fixed "nothing to report" sentence when the selection is empty.
Missing fields render as NOT_AVAILABLE; rendering never raises on data.
"""

from datetime import date
from decimal import Decimal
from typing import Any, Optional

from ..dates import calendar_date, parse_date
from ..formatting import field_text, format_currency, format_date, format_day
from ..numbers import to_decimal
from .models import NotificationReportRequest, Order, ReportKind
from .selection import select_orders

UNPAID_TITLE = "⚠️ == THÔNG BÁO ĐƠN HÀNG CHƯA THANH TOÁN =="
PENDING_TITLE = "⚠️ == THÔNG BÁO ĐƠN HÀNG CẦN XỬ LÝ =="
DELIVERY_TITLE = "🚚 == THÔNG BÁO ĐƠN HÀNG CẦN GIAO =="
PAYMENT_TITLE = "💰 == THÔNG BÁO ĐÃ NHẬN THANH TOÁN =="

NO_UNPAID_ORDERS = "✅ Không có đơn hàng chưa thanh toán."
NO_PENDING_ORDERS = "✅ Không có đơn hàng cần xử lý."
NO_DELIVERY_ORDERS = "✅ Không có đơn hàng cần giao vào {date}."


def _sum_totals(orders: list[Order]) -> Decimal:
    return sum((to_decimal(o.total) or Decimal("0") for o in orders), Decimal("0"))


def _summary_lines(orders: list[Order]) -> list[str]:
    return [
        f"📊 Tổng số đơn: {len(orders)}",
        f"💰 Tổng tiền: {format_currency(_sum_totals(orders))}",
    ]


def _delivery_line(order: Order, indent: str, label: str) -> Optional[str]:
    """Delivery date (and free-text time slot) line, or None if no usable date."""
    delivery = parse_date(order.delivery_date)
    if delivery is None:
        return None
    line = f"{indent}📅 {label}: {format_date(delivery)}"
    if order.delivery_time:
        line += f" {order.delivery_time}"
    return line


def _items_count_line(order: Order, indent: str) -> str:
    return f"{indent}📦 Số lượng sản phẩm: {order.total_items} sản phẩm"


def _item_lines(order: Order, indent: str) -> list[str]:
    if not order.items:
        return []
    lines = [f"{indent}📋 Chi tiết sản phẩm:"]
    for i, item in enumerate(order.items, 1):
        lines.append(f"{indent}   {i}. {field_text(item, 'name')} x{item.quantity or 0}")
    return lines


def _order_block(
    index: int,
    order: Order,
    detailed: bool = False,
    with_address: bool = False,
    with_items: bool = False,
) -> list[str]:
    """
    Lines for one numbered order in a list report.

    Args:
        index: 1-based position in the report
        detailed: Add delivery date, item count, status and payment status
        with_address: Add the customer's address
        with_items: Add the itemized "name xN" listing
    """
    indent = "   "
    order_date = format_date(parse_date(order.order_date))

    lines = [
        "",
        f"{index}. 🆔 {order.display_id}",
        f"{indent}👤 {field_text(order, 'customer.name')}",
        f"{indent}📞 {field_text(order, 'customer.phone')}",
    ]
    if with_address:
        lines.append(f"{indent}🏠 {field_text(order, 'customer.address')}")

    if not detailed:
        lines.append(f"{indent}🕒 {order_date}")
        lines.append(f"{indent}💰 {format_currency(order.total)}")
        return lines

    lines.append(f"{indent}🕒 Đặt: {order_date}")
    delivery = _delivery_line(order, indent, "Giao")
    if delivery:
        lines.append(delivery)
    lines.append(_items_count_line(order, indent))
    if with_items:
        lines.extend(_item_lines(order, indent))
    lines.append(f"{indent}📦 Trạng thái: {field_text(order, 'status')}")
    lines.append(f"{indent}💳 Thanh toán: {field_text(order, 'payment_status')}")
    lines.append(f"{indent}💰 {format_currency(order.total)}")
    return lines


def format_unpaid_orders_message(orders: list[Order]) -> str:
    """Report for orders awaiting payment (already selected by the caller)."""
    if not orders:
        return NO_UNPAID_ORDERS

    lines = [UNPAID_TITLE, ""]
    lines.extend(_summary_lines(orders))
    lines.extend(["", "📋 Danh sách đơn hàng:"])
    for i, order in enumerate(orders, 1):
        lines.extend(_order_block(i, order))
    return "\n".join(lines)


def format_pending_orders_message(orders: list[Order]) -> str:
    """Report for orders still to be processed, with status and payment state."""
    if not orders:
        return NO_PENDING_ORDERS

    lines = [PENDING_TITLE, ""]
    lines.extend(_summary_lines(orders))
    lines.extend(["", "📋 Danh sách đơn hàng:"])
    for i, order in enumerate(orders, 1):
        lines.extend(_order_block(i, order, detailed=True))
    return "\n".join(lines)


def format_delivery_due_message(orders: list[Order], target_date: Any) -> str:
    """Report for orders to deliver on ``target_date``, with addresses and items."""
    day = format_day(calendar_date(target_date))
    if not orders:
        return NO_DELIVERY_ORDERS.format(date=day)

    lines = [DELIVERY_TITLE, "", f"📅 Ngày giao: {day}"]
    lines.extend(_summary_lines(orders))
    lines.extend(["", "📋 Danh sách đơn hàng:"])
    for i, order in enumerate(orders, 1):
        lines.extend(_order_block(i, order, detailed=True, with_address=True, with_items=True))
    return "\n".join(lines)


def format_custom_message(content: str) -> str:
    """Custom notifications are sent exactly as written."""
    return content


def format_payment_received_message(order_number: Optional[str], amount: Any) -> str:
    """Short acknowledgement for a settled payment."""
    lines = [PAYMENT_TITLE, ""]
    if order_number:
        lines.append(f"🆔 Mã đơn: {order_number}")
    lines.append(f"💰 Số tiền đã thanh toán: {format_currency(amount)}")
    lines.append("✅ Trạng thái: ĐÃ THANH TOÁN")
    return "\n".join(lines)


def format_order_message(order: Order) -> str:
    """
    Announcement for a single new order.

    The month/year in the header comes from the order date so the output
    does not depend on when it is rendered.
    """
    ordered_at = parse_date(order.order_date)
    header = "📦 == ĐƠN HÀNG MỚI =="
    if ordered_at is not None:
        day = calendar_date(ordered_at)
        header = f"📦 == ĐƠN HÀNG MỚI {day.month}/{day.year} =="

    lines = [
        header,
        "",
        f"🆔 Mã đơn: {order.display_id}",
        f"🕒 Ngày đặt: {format_date(ordered_at)}",
    ]
    delivery = _delivery_line(order, "", "Ngày giao")
    if delivery:
        lines.append(delivery)

    lines.extend([
        f"👤 Khách hàng: {field_text(order, 'customer.name')}",
        f"📞 SĐT: {field_text(order, 'customer.phone')}",
        f"🏠 Địa chỉ: {field_text(order, 'customer.address')}",
        "",
        f"💵 Phương thức thanh toán: {field_text(order, 'payment_method')}",
        f"💰 Phí ship: {format_currency(order.shipping_cost)}",
        f"💬 Ghi chú: {field_text(order, 'note')}",
        "",
        _items_count_line(order, ""),
    ])
    lines.extend(_item_lines(order, ""))
    lines.extend([
        "",
        f"💰 Tổng tiền: {format_currency(order.total)}",
        f"💳 Trạng thái thanh toán: {field_text(order, 'payment_status')}",
        f"📦 Trạng thái đơn hàng: {field_text(order, 'status')}",
    ])
    return "\n".join(lines)


def compile_report(request: NotificationReportRequest) -> str:
    """Select the orders a request covers and render its message."""
    if request.kind == ReportKind.CUSTOM:
        return format_custom_message(request.content)

    selected = select_orders(request.kind, request.orders, request.target_date)
    if request.kind == ReportKind.UNPAID:
        return format_unpaid_orders_message(selected)
    if request.kind == ReportKind.PENDING:
        return format_pending_orders_message(selected)
    return format_delivery_due_message(selected, request.target_date)
