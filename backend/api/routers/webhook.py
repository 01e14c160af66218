"""
Payment webhook API router.

Contract (fixed by the payment gateway):
- POST only; any other method -> 405 {"error": ...}
- payload without "id" -> 400 {"error": ...}
- success -> 200 {"success": true, "message": ..., "transactionId": id}
- unexpected failure -> 500 {"success": false, "error": ...}
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse

from backend.api.models import TransactionResponse
from backend.core.db import create_transaction, list_transactions
from backend.core.sepay import normalize_transaction
from backend.core import zalo
from bakehouse.notify import format_payment_received_message

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Payments"])

WEBHOOK_PATH = "/api/sepay/webhook"


def _notify_payment_received(transaction: dict) -> None:
    """Tell the staff group about a settled transfer; failures are only logged."""
    if not zalo.is_configured():
        return
    message = format_payment_received_message(
        transaction.get("order_number"),
        transaction.get("transfer_amount"),
    )
    result = zalo.send_group_message(message)
    if not result["success"]:
        logger.warning(f"Payment notification not delivered: {result['error']}")


@router.post(WEBHOOK_PATH)
async def sepay_webhook(request: Request):
    """Record an inbound bank transfer reported by SePay."""
    try:
        payload = await request.json()
    except ValueError:
        payload = None

    if not isinstance(payload, dict) or not payload.get("id"):
        return JSONResponse(status_code=400, content={"error": "Invalid webhook data"})

    try:
        transaction = normalize_transaction(payload)
        create_transaction(transaction)
        logger.info(
            f"Recorded transaction {payload['id']} "
            f"for order {transaction['order_number'] or '(none)'}"
        )
        _notify_payment_received(transaction)
    except Exception as e:
        logger.error(f"Webhook error: {e}")
        return JSONResponse(status_code=500, content={"success": False, "error": str(e)})

    return {
        "success": True,
        "message": "Webhook received",
        "transactionId": payload["id"],
    }


@router.api_route(WEBHOOK_PATH, methods=["GET", "PUT", "PATCH", "DELETE"], include_in_schema=False)
def sepay_webhook_wrong_method():
    return JSONResponse(status_code=405, content={"error": "Method not allowed"})


@router.get("/api/transactions", response_model=List[TransactionResponse])
def get_transactions(
    order_number: Optional[str] = Query(None, description="Only transactions for this order"),
    limit: int = Query(100, ge=1, le=1000),
):
    """List recorded transactions, newest first."""
    return list_transactions(order_number=order_number, limit=limit)
