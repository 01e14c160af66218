"""
CLI entry point for the stock report.

Usage:
    python -m bakehouse.stock --ingredients ingredients.json
    python -m bakehouse.stock --ingredients ingredients.json --out-of-stock --output-csv stock.csv
    python -m bakehouse.stock --ingredients ingredients.json --ingredient ing-1
"""

import argparse
import sys
from pathlib import Path

from .adapters import JsonFileIngredientSource
from .engine import summarize_ingredient
from .report import export_csv, format_console


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="stock",
        description="Stock report - derive current stock and import totals from ingredient history",
    )

    parser.add_argument(
        "--ingredients",
        required=True,
        metavar="FILE",
        help="JSON export of the ingredient collection",
    )

    parser.add_argument(
        "--ingredient",
        metavar="ID",
        help="Only report the ingredient with this id",
    )

    parser.add_argument(
        "--output-csv",
        metavar="FILE",
        help="Output CSV file path",
    )

    parser.add_argument(
        "--out-of-stock",
        action="store_true",
        help="Only list ingredients that are out of stock",
    )

    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Suppress console output (only output CSV)",
    )

    args = parser.parse_args(argv)

    ingredients_path = Path(args.ingredients)
    if not ingredients_path.exists():
        print(f"Error: Ingredient file not found: {ingredients_path}", file=sys.stderr)
        sys.exit(1)

    try:
        source = JsonFileIngredientSource(ingredients_path)
        if args.ingredient:
            ingredient = source.get_ingredient(args.ingredient)
            if ingredient is None:
                raise ValueError(f"Ingredient not found: {args.ingredient}")
            ingredients = [ingredient]
        else:
            ingredients = source.list_ingredients()
        summaries = [summarize_ingredient(i) for i in ingredients]

        if not args.quiet:
            print(format_console(summaries, show_in_stock=not args.out_of_stock))

        if args.output_csv:
            output_path = Path(args.output_csv)
            with open(output_path, "w", newline="", encoding="utf-8") as f:
                export_csv(summaries, output=f)
            if not args.quiet:
                print(f"\nCSV exported to: {output_path}")

    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
