"""
Pydantic request/response models for the API.

Order and ingredient documents are accepted as plain dicts and read with
the tolerant adapters in ``bakehouse``; only the envelopes are typed here.
"""
from datetime import date
from pydantic import BaseModel
from typing import Any, Dict, List, Optional

from bakehouse.notify.models import ReportKind


# ============== Notifications ==============

class NotificationRequest(BaseModel):
    kind: ReportKind
    orders: List[Dict[str, Any]] = []
    target_date: Optional[date] = None
    content: str = ""


class NotificationPreviewResponse(BaseModel):
    kind: ReportKind
    count: int
    message: str


class NotificationSendResponse(BaseModel):
    success: bool
    kind: ReportKind
    count: int
    message: str


class PaymentReceivedRequest(BaseModel):
    order_number: Optional[str] = None
    amount: float = 0


# ============== Inventory ==============

class StockRequest(BaseModel):
    ingredients: List[Dict[str, Any]]


class StockItem(BaseModel):
    """Derived stock state for one ingredient."""
    id: str
    name: str
    type: str
    unit: str
    initial_quantity: float
    current_quantity: float
    out_of_stock: bool
    total_import_quantity: float
    total_usage_quantity: float
    total_import_weight: float
    total_import_price: float
    import_count: int


class StockTotals(BaseModel):
    total: int
    in_stock: int
    out_of_stock: int
    import_count: int
    total_import_price: float
    total_import_weight: float


class StockResponse(BaseModel):
    items: List[StockItem]
    totals: StockTotals


# ============== Export ==============

class OrderExportRequest(BaseModel):
    orders: List[Dict[str, Any]]


# ============== Transactions ==============

class TransactionResponse(BaseModel):
    id: str
    sepay_id: str
    gateway: Optional[str] = None
    transaction_date: Optional[str] = None
    account_number: Optional[str] = None
    code: Optional[str] = None
    content: Optional[str] = None
    transfer_type: Optional[str] = None
    transfer_amount: float = 0
    accumulated: float = 0
    sub_account: Optional[str] = None
    reference_code: Optional[str] = None
    description: Optional[str] = None
    order_number: Optional[str] = None
    received_at: Optional[str] = None
    created_at: Optional[str] = None
