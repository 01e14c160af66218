# Order notification compiler
# Pure select + render; delivery happens in the caller

from .models import (
    OrderStatus,
    PaymentStatus,
    PaymentMethod,
    ReportKind,
    Customer,
    OrderItem,
    Order,
    NotificationReportRequest,
)
from .selection import select_unpaid, select_pending, select_delivery_due, select_orders
from .adapters import order_from_document, map_status, map_payment_status
from .report import (
    format_unpaid_orders_message,
    format_pending_orders_message,
    format_delivery_due_message,
    format_custom_message,
    format_payment_received_message,
    format_order_message,
    compile_report,
)

__all__ = [
    # Models
    "OrderStatus",
    "PaymentStatus",
    "PaymentMethod",
    "ReportKind",
    "Customer",
    "OrderItem",
    "Order",
    "NotificationReportRequest",
    # Selection
    "select_unpaid",
    "select_pending",
    "select_delivery_due",
    "select_orders",
    # Adapters
    "order_from_document",
    "map_status",
    "map_payment_status",
    # Report
    "format_unpaid_orders_message",
    "format_pending_orders_message",
    "format_delivery_due_message",
    "format_custom_message",
    "format_payment_received_message",
    "format_order_message",
    "compile_report",
]
