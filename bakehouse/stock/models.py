"""
Data models for the ingredient stock engine.

An ingredient never stores its current stock. It carries an initial quantity
and an append-only history; everything else is derived on read.
Quantities and money use Decimal.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional, Union


class HistoryType(str, Enum):
    """Kinds of ingredient history entries that carry stock semantics."""
    IMPORT = "IMPORT"


class IngredientType(str, Enum):
    BASE = "BASE"
    FLAVOR = "FLAVOR"
    TOPPING = "TOPPING"
    DECORATION = "DECORATION"
    MATERIAL = "MATERIAL"


class IngredientUnit(str, Enum):
    GRAM = "g"        # Mass based, default
    PIECE = "piece"   # Counted; product_weight gives grams per piece


@dataclass(frozen=True)
class IngredientHistoryEntry:
    """
    One recorded event in an ingredient's history.

    Entries are facts: they are appended, never edited. Unknown kinds read
    from the store keep their raw string as ``type``.
    """
    type: Union[HistoryType, str]
    import_quantity: Optional[Decimal] = None
    price: Optional[Decimal] = None           # Unit price at import time (VND)
    product_weight: Optional[Decimal] = None  # Weight per unit, for piece-counted stock
    created_at: Optional[datetime] = None
    note: Optional[str] = None

    @property
    def is_import(self) -> bool:
        return self.type == HistoryType.IMPORT


@dataclass
class Ingredient:
    """An ingredient with its initial stock and history log."""
    id: str
    name: str
    type: IngredientType = IngredientType.BASE
    unit: IngredientUnit = IngredientUnit.GRAM
    initial_quantity: Optional[Decimal] = None  # Absent counts as 0
    history: tuple[IngredientHistoryEntry, ...] = field(default_factory=tuple)

    def with_entry(self, entry: IngredientHistoryEntry) -> "Ingredient":
        """Return a copy of this ingredient with ``entry`` appended to its history."""
        return Ingredient(
            id=self.id,
            name=self.name,
            type=self.type,
            unit=self.unit,
            initial_quantity=self.initial_quantity,
            history=tuple(self.history) + (entry,),
        )


@dataclass
class StockSummary:
    """
    Read-time projection of one ingredient.

    Produced by ``engine.summarize_ingredient``; never persisted.
    """
    ingredient: Ingredient
    current_quantity: Decimal
    out_of_stock: bool
    total_import_quantity: Decimal
    total_usage_quantity: Decimal
    total_import_price: Decimal
    total_import_weight: Decimal
    import_count: int

    @property
    def name(self) -> str:
        return self.ingredient.name
