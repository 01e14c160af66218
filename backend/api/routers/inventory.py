"""
Inventory API router.

Stock is derived on read from posted ingredient documents; nothing is
stored here.
"""
from fastapi import APIRouter, Query

from backend.api.models import StockItem, StockRequest, StockResponse
from bakehouse.stock import ingredient_from_document, summarize_ingredient, summarize_stock
from bakehouse.stock.engine import sort_for_report
from bakehouse.stock.models import StockSummary
from bakehouse.numbers import to_decimal

router = APIRouter(prefix="/api/inventory", tags=["Inventory"])


def _stock_item(summary: StockSummary) -> StockItem:
    ingredient = summary.ingredient
    return StockItem(
        id=ingredient.id,
        name=ingredient.name,
        type=ingredient.type.value,
        unit=ingredient.unit.value,
        initial_quantity=float(to_decimal(ingredient.initial_quantity) or 0),
        current_quantity=float(summary.current_quantity),
        out_of_stock=summary.out_of_stock,
        total_import_quantity=float(summary.total_import_quantity),
        total_usage_quantity=float(summary.total_usage_quantity),
        total_import_weight=float(summary.total_import_weight),
        total_import_price=float(summary.total_import_price),
        import_count=summary.import_count,
    )


@router.post("/stock", response_model=StockResponse)
def derive_stock(
    body: StockRequest,
    out_of_stock_only: bool = Query(False, description="Only return ingredients with no stock"),
) -> StockResponse:
    """
    Returns current stock and import statistics for each ingredient,
    out-of-stock ingredients first, plus catalogue totals.
    """
    summaries = sort_for_report(
        summarize_ingredient(ingredient_from_document(doc)) for doc in body.ingredients
    )
    totals = summarize_stock(summaries)
    if out_of_stock_only:
        summaries = [s for s in summaries if s.out_of_stock]

    return StockResponse(
        items=[_stock_item(s) for s in summaries],
        totals={
            **totals,
            "total_import_price": float(totals["total_import_price"]),
            "total_import_weight": float(totals["total_import_weight"]),
        },
    )
