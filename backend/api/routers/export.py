"""
Export API router.
"""
from datetime import datetime
from urllib.parse import quote
import re

from fastapi import APIRouter
from fastapi.responses import StreamingResponse

from backend.api.models import OrderExportRequest
from backend.core.xlsx_export import create_orders_workbook
from bakehouse.notify import order_from_document

router = APIRouter(prefix="/api/export", tags=["Export"])


def sanitize_filename(filename: str) -> str:
    """Sanitize filename for safe use in Content-Disposition header."""
    safe = re.sub(r'[^\w\s\-\.]', '_', filename)
    return quote(safe, safe='')


@router.post("/orders")
def export_orders(body: OrderExportRequest):
    """
    Export orders as XLSX.

    One sheet for a single month; an Overall sheet plus one sheet per
    month when the orders span several months.
    """
    orders = [order_from_document(doc) for doc in body.orders]
    buffer = create_orders_workbook(orders)
    filename = f"Orders_{datetime.now().strftime('%Y%m%d')}.xlsx"
    safe_filename = sanitize_filename(filename)

    def iterfile():
        yield buffer.getvalue()

    return StreamingResponse(
        iterfile(),
        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        headers={
            "Content-Disposition": f"attachment; filename=\"{safe_filename}\"; filename*=UTF-8''{safe_filename}"
        }
    )
