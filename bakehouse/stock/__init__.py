# Ingredient stock engine
# Pure read-time projections; no storage access

from .models import (
    HistoryType,
    IngredientType,
    IngredientUnit,
    IngredientHistoryEntry,
    Ingredient,
    StockSummary,
)
from .engine import (
    total_import_quantity,
    total_usage_quantity,
    current_quantity,
    is_out_of_stock,
    total_import_price,
    import_count,
    total_import_weight,
    summarize_ingredient,
    summarize_stock,
)
from .adapters import ingredient_from_document, IngredientSource, JsonFileIngredientSource
from .report import format_console, export_csv

__all__ = [
    # Models
    "HistoryType",
    "IngredientType",
    "IngredientUnit",
    "IngredientHistoryEntry",
    "Ingredient",
    "StockSummary",
    # Engine
    "total_import_quantity",
    "total_usage_quantity",
    "current_quantity",
    "is_out_of_stock",
    "total_import_price",
    "import_count",
    "total_import_weight",
    "summarize_ingredient",
    "summarize_stock",
    # Adapters
    "ingredient_from_document",
    "IngredientSource",
    "JsonFileIngredientSource",
    # Report
    "format_console",
    "export_csv",
]
