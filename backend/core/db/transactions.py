"""
Payment transaction database operations (webhook ingestion).
"""
from decimal import Decimal
from typing import Any, Dict, List, Optional
import uuid

from .base import get_db

AMOUNT_COLUMNS = ("transfer_amount", "accumulated")


def _row_to_dict(row) -> Dict[str, Any]:
    record = dict(row)
    for column in AMOUNT_COLUMNS:
        if record.get(column) is not None:
            record[column] = Decimal(record[column])
    return record


def create_transaction(transaction: Dict[str, Any]) -> Dict[str, Any]:
    """
    Persist a normalized transaction record.

    Args:
        transaction: Output of ``normalize_transaction``

    Returns:
        The stored row, including its generated id
    """
    transaction_id = str(uuid.uuid4())

    with get_db() as conn:
        conn.execute("""
            INSERT INTO transactions (
                id, sepay_id, gateway, transaction_date, account_number, code,
                content, transfer_type, transfer_amount, accumulated, sub_account,
                reference_code, description, order_number, received_at, created_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
        """, (
            transaction_id,
            str(transaction["sepay_id"]),
            transaction.get("gateway"),
            transaction.get("transaction_date"),
            transaction.get("account_number"),
            transaction.get("code"),
            transaction.get("content"),
            transaction.get("transfer_type"),
            str(transaction.get("transfer_amount", 0)),
            str(transaction.get("accumulated", 0)),
            transaction.get("sub_account"),
            transaction.get("reference_code"),
            transaction.get("description"),
            transaction.get("order_number"),
            transaction.get("received_at"),
            transaction.get("created_at"),
        ))

    return get_transaction(transaction_id)


def get_transaction(transaction_id: str) -> Optional[Dict[str, Any]]:
    """Get a transaction by its row id."""
    with get_db() as conn:
        row = conn.execute(
            "SELECT * FROM transactions WHERE id = ?",
            (transaction_id,)
        ).fetchone()
        if row:
            return _row_to_dict(row)
    return None


def list_transactions(
    order_number: Optional[str] = None,
    limit: int = 100,
) -> List[Dict[str, Any]]:
    """List transactions, newest first, optionally for one order."""
    with get_db() as conn:
        if order_number:
            rows = conn.execute(
                "SELECT * FROM transactions WHERE order_number = ? "
                "ORDER BY created_at DESC LIMIT ?",
                (order_number, limit)
            ).fetchall()
        else:
            rows = conn.execute(
                "SELECT * FROM transactions ORDER BY created_at DESC LIMIT ?",
                (limit,)
            ).fetchall()
        return [_row_to_dict(row) for row in rows]
