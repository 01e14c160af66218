"""
Zalo group messaging - the notification delivery channel.

Sends a finished message to the shop's staff group through the Zalo
gateway. Rendering happens elsewhere; this module only delivers text and
reports the outcome to the caller.
"""
import logging
import requests
from typing import Any, Dict, Optional

from .config import settings

logger = logging.getLogger(__name__)


def is_configured() -> bool:
    """Check whether every gateway setting needed to send is present."""
    return all((
        settings.ZALO_URL,
        settings.ZALO_SHOP_CODE,
        settings.ZALO_TOKEN,
        settings.ZALO_GROUP_ID,
    ))


def _endpoint() -> str:
    return f"{settings.ZALO_URL.rstrip('/')}/{settings.ZALO_SHOP_CODE}/{settings.ZALO_TOKEN}"


def send_group_message(message: str, group_id: Optional[str] = None) -> Dict[str, Any]:
    """
    Send a message to the staff group.

    Args:
        message: Rendered message text
        group_id: Target group (defaults to ZALO_GROUP_ID)

    Returns:
        {"success": bool, "error": Optional[str], "response": Any}
        Never raises; network and HTTP failures are reported in the result.
    """
    if not is_configured():
        return {"success": False, "error": "Zalo channel is not configured", "response": None}

    payload = {
        "send_from_number": settings.ZALO_FROM_NUMBER,
        "send_to_groupid": group_id or settings.ZALO_GROUP_ID,
        "message": message,
    }

    try:
        resp = requests.post(_endpoint(), json=payload, timeout=settings.ZALO_TIMEOUT)
        resp.raise_for_status()
    except requests.RequestException as e:
        logger.error(f"Zalo message delivery failed: {e}")
        return {"success": False, "error": str(e), "response": None}

    try:
        body = resp.json()
    except ValueError:
        body = resp.text

    logger.info(f"Zalo message delivered to group {payload['send_to_groupid']}")
    return {"success": True, "error": None, "response": body}
