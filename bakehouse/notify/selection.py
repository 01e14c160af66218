"""
Order selection - which orders each report kind covers.

All filters are pure and keep the input order.
"""

from datetime import date
from typing import Iterable, Optional

from ..dates import calendar_date
from .models import Order, PaymentStatus, ReportKind


def select_unpaid(orders: Iterable[Order]) -> list[Order]:
    return [o for o in orders if o.payment_status == PaymentStatus.UNPAID]


def select_pending(orders: Iterable[Order]) -> list[Order]:
    """Orders that are neither delivered nor cancelled."""
    return [o for o in orders if o.is_open]


def is_due_on(order: Order, target_date: date) -> bool:
    """
    True when the order is open and its delivery date falls on ``target_date``.

    Comparison is by calendar day in the shop's timezone, for the target as
    well as the delivery date. An order whose delivery date is missing or
    unparseable is never due.
    """
    if not order.is_open:
        return False
    delivery_day = calendar_date(order.delivery_date)
    if delivery_day is None:
        return False
    return delivery_day == calendar_date(target_date)


def select_delivery_due(orders: Iterable[Order], target_date: date) -> list[Order]:
    """
    Open orders whose delivery falls on ``target_date``.

    A plain ``date`` or a naive datetime is taken as the shop-local day. A
    timezone-aware datetime is first converted to shop time (UTC+7), so
    2024-03-15T20:00Z targets the 16th. Pass a ``date`` to avoid that.
    """
    return [o for o in orders if is_due_on(o, target_date)]


def select_orders(
    kind: ReportKind,
    orders: Iterable[Order],
    target_date: Optional[date] = None,
) -> list[Order]:
    """
    Apply the selection policy for ``kind``.

    CUSTOM reports carry free text and select no orders.
    """
    if kind == ReportKind.UNPAID:
        return select_unpaid(orders)
    if kind == ReportKind.PENDING:
        return select_pending(orders)
    if kind == ReportKind.DELIVERY_DUE:
        if target_date is None:
            raise ValueError("target_date is required for delivery-due selection")
        return select_delivery_due(orders, target_date)
    return []
