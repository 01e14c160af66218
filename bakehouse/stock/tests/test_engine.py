"""
Tests for the stock engine.

Run with: pytest bakehouse/stock/tests/test_engine.py -v
"""

import pytest
from decimal import Decimal

from bakehouse.stock.models import (
    HistoryType,
    Ingredient,
    IngredientHistoryEntry,
    IngredientType,
)
from bakehouse.stock.engine import (
    current_quantity,
    group_by_type,
    import_count,
    is_out_of_stock,
    sort_for_report,
    summarize_ingredient,
    summarize_stock,
    total_import_price,
    total_import_quantity,
    total_import_weight,
    total_usage_quantity,
)


def imported(quantity, price=None, weight=None):
    return IngredientHistoryEntry(
        type=HistoryType.IMPORT,
        import_quantity=Decimal(str(quantity)) if quantity is not None else None,
        price=Decimal(str(price)) if price is not None else None,
        product_weight=Decimal(str(weight)) if weight is not None else None,
    )


@pytest.fixture
def flour():
    """Ingredient from the worked example: 500 initial, two imports."""
    return Ingredient(
        id="ing-1",
        name="Bột mì",
        initial_quantity=Decimal("500"),
        history=(imported(200, price=50000), imported(100)),
    )


class TestWorkedExample:
    def test_current_quantity(self, flour):
        assert current_quantity(flour) == 800

    def test_total_import_quantity(self, flour):
        assert total_import_quantity(flour) == 300

    def test_total_import_price_skips_missing_price(self, flour):
        assert total_import_price(flour) == Decimal("10000000")

    def test_import_count(self, flour):
        assert import_count(flour) == 2


class TestEmptyHistory:
    def test_defaults_to_initial_quantity(self):
        ingredient = Ingredient(id="a", name="Bơ", initial_quantity=Decimal("250"))
        assert current_quantity(ingredient) == 250
        assert import_count(ingredient) == 0
        assert total_import_price(ingredient) == 0
        assert total_import_weight(ingredient) == 0

    def test_missing_initial_quantity_is_zero(self):
        ingredient = Ingredient(id="a", name="Bơ")
        assert current_quantity(ingredient) == 0
        assert is_out_of_stock(ingredient)

    def test_none_history_is_tolerated(self):
        ingredient = Ingredient(id="a", name="Bơ", initial_quantity=Decimal("5"), history=None)
        assert total_import_quantity(ingredient) == 0
        assert current_quantity(ingredient) == 5


class TestImportAggregation:
    def test_adding_import_increases_totals(self, flour):
        updated = flour.with_entry(imported(40))
        assert total_import_quantity(updated) == total_import_quantity(flour) + 40
        assert import_count(updated) == import_count(flour) + 1

    def test_order_independent(self):
        entries = (imported(10, price=3), imported(20, price=5, weight=2), imported(5))
        forward = Ingredient(id="a", name="x", history=entries)
        backward = Ingredient(id="a", name="x", history=tuple(reversed(entries)))
        assert summarize_ingredient(forward).current_quantity == summarize_ingredient(backward).current_quantity
        assert total_import_price(forward) == total_import_price(backward)
        assert total_import_weight(forward) == total_import_weight(backward)

    def test_missing_price_still_counts_as_import(self):
        ingredient = Ingredient(id="a", name="x", history=(imported(10),))
        assert total_import_price(ingredient) == 0
        assert import_count(ingredient) == 1

    def test_missing_quantity_contributes_zero(self):
        ingredient = Ingredient(id="a", name="x", history=(imported(None, price=1000),))
        assert total_import_quantity(ingredient) == 0
        assert total_import_price(ingredient) == 0
        assert import_count(ingredient) == 1

    def test_non_import_entries_ignored(self):
        other = IngredientHistoryEntry(type="ADJUSTMENT", import_quantity=Decimal("99"), price=Decimal("1"))
        ingredient = Ingredient(id="a", name="x", history=(other, imported(5)))
        assert total_import_quantity(ingredient) == 5
        assert import_count(ingredient) == 1
        assert total_import_price(ingredient) == 0

    def test_total_import_weight(self):
        ingredient = Ingredient(
            id="a", name="Trứng",
            history=(imported(30, weight=55), imported(12), imported(10, weight=60)),
        )
        assert total_import_weight(ingredient) == Decimal("2250")

    def test_usage_is_always_zero(self, flour):
        assert total_usage_quantity(flour) == 0


class TestOutOfStock:
    def test_positive_stock(self, flour):
        assert not is_out_of_stock(flour)

    def test_zero_stock(self):
        ingredient = Ingredient(id="a", name="x", initial_quantity=Decimal("0"))
        assert is_out_of_stock(ingredient)

    def test_negative_stock_counts_as_out(self):
        ingredient = Ingredient(id="a", name="x", initial_quantity=Decimal("-3"), history=(imported(1),))
        assert current_quantity(ingredient) == -2
        assert is_out_of_stock(ingredient)

    def test_matches_current_quantity(self, flour):
        for ingredient in (flour, Ingredient(id="b", name="y")):
            assert is_out_of_stock(ingredient) == (current_quantity(ingredient) <= 0)


class TestSummaries:
    @pytest.fixture
    def summaries(self, flour):
        return [
            summarize_ingredient(flour),
            summarize_ingredient(Ingredient(id="b", name="Socola", type=IngredientType.FLAVOR)),
            summarize_ingredient(Ingredient(
                id="c", name="Anh đào", type=IngredientType.TOPPING,
                initial_quantity=Decimal("10"), history=(imported(5, price=2000),),
            )),
        ]

    def test_summarize_ingredient(self, flour):
        summary = summarize_ingredient(flour)
        assert summary.current_quantity == 800
        assert summary.out_of_stock is False
        assert summary.import_count == 2
        assert summary.total_usage_quantity == 0
        assert summary.name == "Bột mì"

    def test_sort_puts_out_of_stock_first(self, summaries):
        ordered = sort_for_report(summaries)
        assert ordered[0].name == "Socola"
        assert [s.name for s in ordered[1:]] == ["Anh đào", "Bột mì"]

    def test_group_by_type(self, summaries):
        grouped = group_by_type(summaries)
        assert set(grouped) == {IngredientType.BASE, IngredientType.FLAVOR, IngredientType.TOPPING}
        assert grouped[IngredientType.BASE][0].name == "Bột mì"

    def test_summarize_stock(self, summaries):
        totals = summarize_stock(summaries)
        assert totals["total"] == 3
        assert totals["out_of_stock"] == 1
        assert totals["in_stock"] == 2
        assert totals["import_count"] == 3
        assert totals["total_import_price"] == Decimal("10010000")

    def test_summarize_stock_empty(self):
        totals = summarize_stock([])
        assert totals["total"] == 0
        assert totals["total_import_price"] == 0


class TestLooselyTypedNumbers:
    """Models built directly, without the adapters, may carry floats or strings."""

    def test_float_import_quantity(self):
        entry = IngredientHistoryEntry(type=HistoryType.IMPORT, import_quantity=200.5, price=50000)
        ingredient = Ingredient(id="a", name="x", initial_quantity=500, history=(entry,))
        assert total_import_quantity(ingredient) == Decimal("200.5")
        assert current_quantity(ingredient) == Decimal("700.5")
        assert total_import_price(ingredient) == Decimal("10025000")

    def test_float_initial_quantity(self):
        ingredient = Ingredient(id="a", name="x", initial_quantity=500.0)
        assert current_quantity(ingredient) == 500
        assert not is_out_of_stock(ingredient)

    def test_malformed_price_contributes_zero(self):
        entry = IngredientHistoryEntry(type=HistoryType.IMPORT, import_quantity=Decimal("10"), price="n/a")
        ingredient = Ingredient(id="a", name="x", history=(entry,))
        assert total_import_price(ingredient) == 0
        assert import_count(ingredient) == 1

    def test_string_numbers(self):
        entry = IngredientHistoryEntry(
            type=HistoryType.IMPORT, import_quantity="12", price="1500", product_weight="abc",
        )
        ingredient = Ingredient(id="a", name="x", initial_quantity="8", history=(entry,))
        summary = summarize_ingredient(ingredient)
        assert summary.current_quantity == 20
        assert summary.total_import_price == Decimal("18000")
        assert summary.total_import_weight == 0

    def test_summarize_stock_with_float_totals(self):
        ingredient = Ingredient(
            id="a", name="x", initial_quantity=1.5,
            history=(IngredientHistoryEntry(type=HistoryType.IMPORT, import_quantity=2.5, price=1000.0),),
        )
        totals = summarize_stock([summarize_ingredient(ingredient)])
        assert totals["total_import_price"] == Decimal("2500")
