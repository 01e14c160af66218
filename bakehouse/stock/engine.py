"""
Stock Engine - derive stock state from an ingredient's history.

Current stock is never stored as a counter. Every value here is a pure
function of (initial quantity, history), so the result cannot drift from
the events that produced it.

Tolerant reader: a missing or malformed optional number contributes zero.
None of these functions raise.
"""

from decimal import Decimal
from typing import Any, Iterable

from ..numbers import to_decimal
from .models import Ingredient, IngredientHistoryEntry, IngredientType, StockSummary

ZERO = Decimal("0")


def _imports(ingredient: Ingredient) -> list[IngredientHistoryEntry]:
    return [entry for entry in (ingredient.history or ()) if entry.is_import]


def _amount(value: Any) -> Decimal:
    """A document number as Decimal; missing or malformed values count as 0."""
    return to_decimal(value) or ZERO


def _product(a: Any, b: Any) -> Decimal:
    """Multiply two optional factors; a missing, malformed or zero factor yields 0."""
    return _amount(a) * _amount(b)


def total_import_quantity(ingredient: Ingredient) -> Decimal:
    """Sum of import quantities over IMPORT entries."""
    return sum((_amount(entry.import_quantity) for entry in _imports(ingredient)), ZERO)


def total_usage_quantity(ingredient: Ingredient) -> Decimal:
    """
    Total quantity consumed.

    Usage entries are no longer recorded, so this is always 0. Kept because
    the stock summary and API still expose the figure.
    """
    return ZERO


def current_quantity(ingredient: Ingredient) -> Decimal:
    """Initial quantity (default 0) plus everything imported since."""
    return _amount(ingredient.initial_quantity) + total_import_quantity(ingredient)


def is_out_of_stock(ingredient: Ingredient) -> bool:
    return current_quantity(ingredient) <= 0


def total_import_price(ingredient: Ingredient) -> Decimal:
    """Sum of ``price * import_quantity`` over IMPORT entries (VND)."""
    return sum(
        (_product(entry.price, entry.import_quantity) for entry in _imports(ingredient)),
        ZERO,
    )


def import_count(ingredient: Ingredient) -> int:
    return len(_imports(ingredient))


def total_import_weight(ingredient: Ingredient) -> Decimal:
    """Sum of ``product_weight * import_quantity`` over IMPORT entries (g)."""
    return sum(
        (_product(entry.product_weight, entry.import_quantity) for entry in _imports(ingredient)),
        ZERO,
    )


def summarize_ingredient(ingredient: Ingredient) -> StockSummary:
    """Compute every derived value for one ingredient."""
    return StockSummary(
        ingredient=ingredient,
        current_quantity=current_quantity(ingredient),
        out_of_stock=is_out_of_stock(ingredient),
        total_import_quantity=total_import_quantity(ingredient),
        total_usage_quantity=total_usage_quantity(ingredient),
        total_import_price=total_import_price(ingredient),
        total_import_weight=total_import_weight(ingredient),
        import_count=import_count(ingredient),
    )


def sort_for_report(summaries: Iterable[StockSummary]) -> list[StockSummary]:
    """
    Sort summaries for human consumption.

    Out-of-stock ingredients first, then alphabetical by name.
    """
    return sorted(summaries, key=lambda s: (not s.out_of_stock, (s.name or "").lower()))


def group_by_type(summaries: Iterable[StockSummary]) -> dict[IngredientType, list[StockSummary]]:
    """Group summaries by ingredient type, keeping input order within a group."""
    grouped: dict[IngredientType, list[StockSummary]] = {}
    for summary in summaries:
        grouped.setdefault(summary.ingredient.type, []).append(summary)
    return grouped


def summarize_stock(summaries: Iterable[StockSummary]) -> dict:
    """Generate catalogue-wide statistics from per-ingredient summaries."""
    counts = {
        "total": 0,
        "in_stock": 0,
        "out_of_stock": 0,
        "import_count": 0,
        "total_import_price": ZERO,
        "total_import_weight": ZERO,
    }

    for summary in summaries:
        counts["total"] += 1
        if summary.out_of_stock:
            counts["out_of_stock"] += 1
        else:
            counts["in_stock"] += 1
        counts["import_count"] += summary.import_count
        counts["total_import_price"] += _amount(summary.total_import_price)
        counts["total_import_weight"] += _amount(summary.total_import_weight)

    return counts
