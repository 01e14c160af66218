"""
Order Adapters - read order documents from the store.

Status strings in older documents do not always match the enum values
("completed", "shipping", "fail", ...); they are normalized here.
Date fields are passed through untouched.
"""

from decimal import Decimal
from typing import Any, Optional

from ..numbers import to_decimal, to_int
from .models import Customer, Order, OrderItem, OrderStatus, PaymentMethod, PaymentStatus

# Legacy status spellings -> OrderStatus
STATUS_ALIASES = {
    "completed": OrderStatus.DELIVERED,
    "success": OrderStatus.DELIVERED,
    "shipping": OrderStatus.SHIPPED,
    "fail": OrderStatus.CANCELLED,
}

BANKING_ALIASES = {"banking", "transfer", "chuyển khoản"}


def map_status(raw: Any) -> OrderStatus:
    """
    Normalize an order status string.

    Unknown or missing values fall back to PROCESSING.
    """
    s = str(raw or "").strip().lower()
    if s in STATUS_ALIASES:
        return STATUS_ALIASES[s]
    for status in OrderStatus:
        if s in (status.value.lower(), status.name.lower()):
            return status
    return OrderStatus.PROCESSING


def map_payment_status(raw: Any) -> PaymentStatus:
    """Normalize a payment status; anything unrecognised counts as UNPAID."""
    s = str(raw or "").strip().lower()
    if s == "paid":
        return PaymentStatus.PAID
    if s == "refunded":
        return PaymentStatus.REFUNDED
    return PaymentStatus.UNPAID


def map_payment_method(raw: Any) -> PaymentMethod:
    s = str(raw or "").strip().lower()
    if s in BANKING_ALIASES:
        return PaymentMethod.BANKING
    return PaymentMethod.CASH


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def customer_from_document(doc: Any) -> Optional[Customer]:
    if not isinstance(doc, dict):
        return None
    return Customer(
        name=_text(doc.get("name")),
        phone=_text(doc.get("phone")),
        address=_text(doc.get("address")),
        id=_text(doc.get("id")),
        email=_text(doc.get("email")),
    )


def item_from_document(doc: dict) -> OrderItem:
    return OrderItem(
        name=_text(doc.get("name")) or "",
        quantity=to_int(doc.get("quantity")),
        price=to_decimal(doc.get("price")),
    )


def order_from_document(doc: dict) -> Order:
    """
    Parse an order document.

    ``orderDate`` wins over ``date`` when both are present, matching how
    the reports pick the order date.
    """
    items = doc.get("items") or []
    if not isinstance(items, list):
        items = []

    payment_method = doc.get("paymentMethod")

    return Order(
        id=str(doc.get("id", "")),
        order_number=_text(doc.get("orderNumber")),
        customer=customer_from_document(doc.get("customer")),
        items=[item_from_document(i) for i in items if isinstance(i, dict)],
        total=to_decimal(doc.get("total")) or Decimal("0"),
        status=map_status(doc.get("status")),
        payment_status=map_payment_status(doc.get("paymentStatus")),
        order_date=doc.get("orderDate") or doc.get("date"),
        delivery_date=doc.get("deliveryDate"),
        delivery_time=_text(doc.get("deliveryTime")),
        note=_text(doc.get("note")),
        shipping_cost=to_decimal(doc.get("shippingCost")),
        payment_method=map_payment_method(payment_method) if payment_method else None,
    )
