"""
Guard for endpoints that push messages to the staff Zalo group.

Sending is open when BAKEHOUSE_API_KEY is unset (local use); once a key is
configured, callers must present it in the ``X-API-Key`` header.
"""
from typing import Optional

from fastapi import Header, HTTPException

from backend.core.config import settings


def require_api_key(x_api_key: Optional[str] = Header(None)) -> None:
    """Reject a send request whose X-API-Key does not match the configured key."""
    if not settings.API_KEY:
        return
    if x_api_key != settings.API_KEY:
        raise HTTPException(status_code=401, detail="Invalid API key")
