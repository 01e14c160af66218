"""
SePay payment webhook normalization.

Turns an inbound bank-transfer event into the transaction record stored by
``backend.core.db.transactions``. Customers put the order code in the
transfer description without the dash ("ORD123"); it is restored here
("ORD-123") so it matches the order's ``orderNumber``.
"""
import re
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from bakehouse.numbers import to_decimal

ORDER_CODE_PATTERN = re.compile(r"ORD(\d+)")


def extract_order_number(text: Optional[str]) -> Optional[str]:
    """
    Find the first order code in a transfer description.

    >>> extract_order_number("CT DEN:123 ORD104 thanh toan")
    'ORD-104'
    """
    if not text:
        return None
    match = ORDER_CODE_PATTERN.search(str(text))
    if not match:
        return None
    return f"ORD-{match.group(1)}"


def normalize_transaction(payload: Dict[str, Any], now: Optional[datetime] = None) -> Dict[str, Any]:
    """
    Build a transaction record from a webhook payload.

    Args:
        payload: Webhook JSON body; must contain ``id``
        now: Receive time (defaults to the current UTC time)

    Returns:
        Dict with snake_case keys ready for ``create_transaction``
    """
    received = (now or datetime.now(timezone.utc)).isoformat()

    return {
        "sepay_id": payload["id"],
        "gateway": payload.get("gateway") or "",
        "transaction_date": payload.get("transactionDate") or "",
        "account_number": payload.get("accountNumber") or "",
        "code": payload.get("code") or None,
        "content": payload.get("content") or "",
        "transfer_type": payload.get("transferType") or "in",
        "transfer_amount": to_decimal(payload.get("transferAmount")) or 0,
        "accumulated": to_decimal(payload.get("accumulated")) or 0,
        "sub_account": payload.get("subAccount") or None,
        "reference_code": payload.get("referenceCode") or "",
        "description": payload.get("description") or "",
        "order_number": extract_order_number(payload.get("description")),
        "received_at": received,
        "created_at": received,
    }
