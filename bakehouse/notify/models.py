"""
Data models for order notifications.

Orders are consumed, not owned: they arrive from the order store and are
read as-is. Date fields keep their raw store representation and are parsed
at render time with ``bakehouse.dates.parse_date_value``.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from ..numbers import to_int


class OrderStatus(str, Enum):
    PENDING = "Pending"
    PROCESSING = "Processing"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"
    RETURNED = "Returned"


class PaymentStatus(str, Enum):
    PAID = "Paid"
    UNPAID = "Unpaid"
    REFUNDED = "Refunded"


class PaymentMethod(str, Enum):
    CASH = "Cash"
    BANKING = "Banking"


class ReportKind(str, Enum):
    """Notification categories, each with its own selection and layout."""
    UNPAID = "unpaid"
    PENDING = "pending"
    DELIVERY_DUE = "delivery"
    CUSTOM = "custom"


# Orders in these states need no further action
CLOSED_STATUSES = frozenset({OrderStatus.DELIVERED, OrderStatus.CANCELLED})


@dataclass
class Customer:
    name: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    id: Optional[str] = None
    email: Optional[str] = None


@dataclass
class OrderItem:
    name: str
    quantity: int = 0
    price: Optional[Decimal] = None


@dataclass
class Order:
    """
    An order as read from the store.

    ``total`` is authoritative for money reporting; line totals are never
    re-derived from ``items``.
    """
    id: str
    total: Decimal = Decimal("0")
    status: OrderStatus = OrderStatus.PENDING
    payment_status: PaymentStatus = PaymentStatus.UNPAID
    order_number: Optional[str] = None   # Human-readable id (ORD-XXXXXX)
    customer: Optional[Customer] = None
    items: list[OrderItem] = field(default_factory=list)
    order_date: Any = None               # ISO string, epoch ms, datetime or store timestamp
    delivery_date: Any = None            # Same representations as order_date
    delivery_time: Optional[str] = None  # Free text, e.g. "14:00-16:00"
    note: Optional[str] = None
    shipping_cost: Optional[Decimal] = None
    payment_method: Optional[PaymentMethod] = None

    @property
    def display_id(self) -> str:
        return self.order_number or self.id

    @property
    def total_items(self) -> int:
        return sum(to_int(item.quantity) for item in self.items)

    @property
    def is_open(self) -> bool:
        return self.status not in CLOSED_STATUSES


@dataclass
class NotificationReportRequest:
    """
    One report to compile.

    ``target_date`` is required for DELIVERY_DUE: "today" is supplied by
    the caller, never read from the clock here. ``content`` is the literal
    text for CUSTOM reports.
    """
    kind: ReportKind
    orders: list[Order] = field(default_factory=list)
    target_date: Optional[date] = None
    content: str = ""

    def __post_init__(self):
        self.kind = ReportKind(self.kind)
        if self.kind == ReportKind.DELIVERY_DUE and self.target_date is None:
            raise ValueError("target_date is required for delivery-due reports")
