"""
Notifications API router.

Compiles order reports from posted order documents and, for /send,
hands the message to the Zalo delivery channel.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException

from backend.api.models import (
    NotificationPreviewResponse,
    NotificationRequest,
    NotificationSendResponse,
    PaymentReceivedRequest,
)
from backend.api.security import require_api_key
from backend.core import zalo
from bakehouse.notify import (
    NotificationReportRequest,
    ReportKind,
    compile_report,
    format_payment_received_message,
    order_from_document,
    select_orders,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/notifications", tags=["Notifications"])


def _build_report(body: NotificationRequest) -> tuple[NotificationReportRequest, int]:
    """Validate the request and return it with the number of selected orders."""
    if body.kind == ReportKind.DELIVERY_DUE and body.target_date is None:
        raise HTTPException(status_code=400, detail="target_date is required for delivery reports")
    if body.kind == ReportKind.CUSTOM and not body.content.strip():
        raise HTTPException(status_code=400, detail="content is required for custom notifications")

    orders = [order_from_document(doc) for doc in body.orders]
    request = NotificationReportRequest(
        kind=body.kind,
        orders=orders,
        target_date=body.target_date,
        content=body.content,
    )
    count = len(select_orders(request.kind, orders, request.target_date))
    return request, count


@router.post("/preview", response_model=NotificationPreviewResponse)
def preview_notification(body: NotificationRequest):
    """Render a report without sending it."""
    request, count = _build_report(body)
    return {"kind": request.kind, "count": count, "message": compile_report(request)}


@router.post("/send", response_model=NotificationSendResponse, dependencies=[Depends(require_api_key)])
def send_notification(body: NotificationRequest):
    """
    Render a report and deliver it to the staff group.

    Reports with no matching orders are not sent.
    """
    request, count = _build_report(body)
    if request.kind != ReportKind.CUSTOM and count == 0:
        raise HTTPException(status_code=400, detail=f"No orders to notify for {request.kind.value} report")

    if not zalo.is_configured():
        raise HTTPException(status_code=503, detail="Notification channel is not configured")

    message = compile_report(request)
    result = zalo.send_group_message(message)
    if not result["success"]:
        raise HTTPException(status_code=502, detail=f"Delivery failed: {result['error']}")

    logger.info(f"Sent {request.kind.value} notification covering {count} order(s)")
    return {"success": True, "kind": request.kind, "count": count, "message": message}


@router.post("/payment-received/preview")
def preview_payment_received(body: PaymentReceivedRequest):
    """Render the payment acknowledgement sent after a webhook transfer."""
    return {"message": format_payment_received_message(body.order_number, body.amount)}
