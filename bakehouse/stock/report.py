"""
Stock Report - Format stock summaries for human consumption.

Produces console output and CSV export.
"""

import csv
import io
from typing import TextIO

from ..formatting import format_currency, format_quantity
from .engine import group_by_type, sort_for_report, summarize_stock
from .models import IngredientType, StockSummary


def format_console(summaries: list[StockSummary], show_in_stock: bool = True) -> str:
    """
    Format stock summaries for console display.

    Groups by ingredient type, out-of-stock items first within a group.

    Args:
        summaries: Per-ingredient summaries from ``summarize_ingredient``
        show_in_stock: Whether to include ingredients that still have stock

    Returns:
        Formatted string for console output
    """
    if not summaries:
        return "No ingredients to report.\n"

    lines = []
    grouped = group_by_type(summaries)

    for ingredient_type in IngredientType:
        rows = sort_for_report(grouped.get(ingredient_type, []))
        if not show_in_stock:
            rows = [s for s in rows if s.out_of_stock]
        if not rows:
            continue

        lines.append(f"\nTYPE: {ingredient_type.value}")
        lines.append("=" * 78)
        lines.append(f"{'INGREDIENT':<24} {'CURRENT':>12} {'UNIT':<6} {'IMPORTS':>7} {'IMPORT VALUE':>16}  STATUS")
        lines.append("-" * 78)
        for s in rows:
            status = "OUT" if s.out_of_stock else ""
            lines.append(
                f"{s.name[:24]:<24} {format_quantity(s.current_quantity):>12} "
                f"{s.ingredient.unit.value:<6} {s.import_count:>7} "
                f"{format_currency(s.total_import_price):>16}  {status}"
            )

    totals = summarize_stock(summaries)
    lines.append("\n" + "=" * 78)
    lines.append("SUMMARY")
    lines.append(f"  Ingredients:   {totals['total']}")
    lines.append(f"  In stock:      {totals['in_stock']}")
    lines.append(f"  Out of stock:  {totals['out_of_stock']}")
    lines.append(f"  Imports:       {totals['import_count']}")
    lines.append(f"  Import value:  {format_currency(totals['total_import_price'])}")
    lines.append("=" * 78)

    return "\n".join(lines)


def export_csv(summaries: list[StockSummary], output: TextIO | None = None) -> str:
    """
    Export stock summaries to CSV format.

    Args:
        summaries: Per-ingredient summaries
        output: Optional file handle to write to

    Returns:
        CSV string (also writes to output if provided)
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer)

    writer.writerow([
        "id",
        "name",
        "type",
        "unit",
        "initial_quantity",
        "current_quantity",
        "out_of_stock",
        "total_import_quantity",
        "total_import_weight",
        "total_import_price",
        "import_count",
    ])

    for s in summaries:
        ingredient = s.ingredient
        writer.writerow([
            ingredient.id,
            ingredient.name,
            ingredient.type.value,
            ingredient.unit.value,
            str(ingredient.initial_quantity) if ingredient.initial_quantity is not None else "",
            str(s.current_quantity),
            "yes" if s.out_of_stock else "no",
            str(s.total_import_quantity),
            str(s.total_import_weight),
            str(s.total_import_price),
            s.import_count,
        ])

    csv_content = buffer.getvalue()

    if output:
        output.write(csv_content)

    return csv_content
