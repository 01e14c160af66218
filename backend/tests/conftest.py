"""
Test configuration and fixtures for the Bakehouse backend test suite.

Provides:
- In-memory SQLite test database (isolated per test)
- FastAPI TestClient fixture
- Zalo settings fixture and factory functions for webhook/order payloads
"""
import sqlite3
from contextlib import contextmanager
from typing import Optional
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from backend.core.config import settings
from backend.core.db.base import SCHEMA


# ---------------------------------------------------------------------------
# Database fixtures
# ---------------------------------------------------------------------------

def _create_test_db() -> sqlite3.Connection:
    """Create an in-memory SQLite database with the Bakehouse schema."""
    conn = sqlite3.connect(":memory:", check_same_thread=False)
    conn.row_factory = sqlite3.Row
    conn.executescript(SCHEMA)
    return conn


@contextmanager
def _test_get_db(conn: sqlite3.Connection):
    """Replacement for get_db() that uses the shared test connection."""
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise


@pytest.fixture()
def test_db():
    """Provide a fresh in-memory SQLite database for each test."""
    conn = _create_test_db()
    yield conn
    conn.close()


@pytest.fixture()
def patch_db(test_db):
    """
    Patch the get_db context manager across all db modules so that
    every database call uses the in-memory test database.
    """
    cm = lambda: _test_get_db(test_db)  # noqa: E731

    with (
        patch("backend.core.db.base.get_db", cm),
        patch("backend.core.db.transactions.get_db", cm),
    ):
        yield test_db


@pytest.fixture()
def client(patch_db):
    """
    Provide a FastAPI TestClient with the database patched.

    Skips init_db in the lifespan so no database file is created.
    """
    from backend.api.main import app

    with patch("backend.api.main.init_db"):
        with TestClient(app) as c:
            yield c


@pytest.fixture()
def zalo_settings():
    """Configure the Zalo channel for the duration of a test."""
    with (
        patch.object(settings, "ZALO_URL", "https://zalo.example.test/api"),
        patch.object(settings, "ZALO_SHOP_CODE", "shop1"),
        patch.object(settings, "ZALO_TOKEN", "tok"),
        patch.object(settings, "ZALO_FROM_NUMBER", "0900000000"),
        patch.object(settings, "ZALO_GROUP_ID", "group-1"),
    ):
        yield settings


@pytest.fixture()
def no_zalo():
    """Make sure the Zalo channel is unconfigured."""
    with patch.object(settings, "ZALO_URL", ""):
        yield


# ---------------------------------------------------------------------------
# Factory functions
# ---------------------------------------------------------------------------

def make_webhook_payload(
    *,
    sepay_id: int = 92704,
    amount: int = 150000,
    description: str = "CT DEN:0123 ORD104 thanh toan",
    gateway: str = "Vietcombank",
) -> dict:
    """Build a SePay webhook body."""
    return {
        "id": sepay_id,
        "gateway": gateway,
        "transactionDate": "2024-03-15 10:30:00",
        "accountNumber": "0071000000000",
        "code": None,
        "content": description,
        "transferType": "in",
        "transferAmount": amount,
        "accumulated": 19077000,
        "subAccount": None,
        "referenceCode": "MBVCB.3278907687",
        "description": description,
    }


def make_order_doc(
    *,
    order_id: str = "o1",
    order_number: Optional[str] = "ORD-000001",
    total: int = 150000,
    status: str = "Pending",
    payment_status: str = "Unpaid",
    order_date: str = "2024-03-14T02:00:00Z",
    delivery_date: Optional[str] = None,
    items: Optional[list] = None,
) -> dict:
    """Build an order document as stored by the web client."""
    doc = {
        "id": order_id,
        "orderNumber": order_number,
        "customer": {"name": "Lan", "phone": "0901234567", "address": "12 Lê Lợi"},
        "items": items if items is not None else [{"name": "Bánh kem", "quantity": 1, "price": total}],
        "total": total,
        "status": status,
        "paymentStatus": payment_status,
        "orderDate": order_date,
    }
    if delivery_date is not None:
        doc["deliveryDate"] = delivery_date
    return doc
