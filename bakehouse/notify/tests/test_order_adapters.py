"""
Tests for order document adapters.

Run with: pytest bakehouse/notify/tests/test_order_adapters.py -v
"""

from decimal import Decimal

from bakehouse.notify.adapters import (
    map_payment_method,
    map_payment_status,
    map_status,
    order_from_document,
)
from bakehouse.notify.models import OrderStatus, PaymentMethod, PaymentStatus


class TestStatusMapping:
    def test_canonical_values(self):
        assert map_status("Pending") == OrderStatus.PENDING
        assert map_status("DELIVERED") == OrderStatus.DELIVERED
        assert map_status("returned") == OrderStatus.RETURNED

    def test_legacy_aliases(self):
        assert map_status("completed") == OrderStatus.DELIVERED
        assert map_status("shipping") == OrderStatus.SHIPPED
        assert map_status("fail") == OrderStatus.CANCELLED

    def test_unknown_falls_back_to_processing(self):
        assert map_status("???") == OrderStatus.PROCESSING
        assert map_status(None) == OrderStatus.PROCESSING

    def test_payment_status(self):
        assert map_payment_status("PAID") == PaymentStatus.PAID
        assert map_payment_status("Refunded") == PaymentStatus.REFUNDED
        assert map_payment_status("") == PaymentStatus.UNPAID

    def test_payment_method(self):
        assert map_payment_method("banking") == PaymentMethod.BANKING
        assert map_payment_method("Cash") == PaymentMethod.CASH


class TestOrderFromDocument:
    def test_full_document(self):
        order = order_from_document({
            "id": "abc",
            "orderNumber": "ORD-000001",
            "customer": {"name": "Lan", "phone": "0901"},
            "items": [{"name": "Bánh mì", "quantity": "3", "price": 15000}],
            "total": 45000,
            "status": "Pending",
            "paymentStatus": "Unpaid",
            "orderDate": "2024-03-14T02:00:00Z",
            "deliveryDate": 1710496800000,
            "deliveryTime": "9h",
            "paymentMethod": "Banking",
        })
        assert order.display_id == "ORD-000001"
        assert order.customer.name == "Lan"
        assert order.items[0].quantity == 3
        assert order.total == Decimal("45000")
        assert order.delivery_date == 1710496800000
        assert order.payment_method == PaymentMethod.BANKING

    def test_order_date_falls_back_to_date(self):
        order = order_from_document({"id": "x", "date": "2024-01-01"})
        assert order.order_date == "2024-01-01"

    def test_tolerates_missing_and_malformed(self):
        order = order_from_document({"id": "x", "total": "n/a", "customer": "Lan", "items": "none"})
        assert order.total == Decimal("0")
        assert order.customer is None
        assert order.items == []
        assert order.payment_status == PaymentStatus.UNPAID
        assert order.payment_method is None
        assert order.display_id == "x"
