"""
Ingredient Adapters - Bridge to ingredient data sources.

Store documents are loosely typed: camelCase keys, numbers that may arrive
as strings, fields that may be missing. The readers here apply the
tolerant-reader policy and never raise on a malformed field.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Optional

from ..dates import parse_date
from ..numbers import to_decimal
from .models import HistoryType, Ingredient, IngredientHistoryEntry, IngredientType, IngredientUnit


def _enum_or_default(enum_cls, raw: Any, default):
    if raw is None:
        return default
    text = str(raw).strip()
    for member in enum_cls:
        if text.upper() == member.name or text.lower() == str(member.value).lower():
            return member
    return default


def entry_from_document(doc: dict) -> IngredientHistoryEntry:
    """
    Parse one history document.

    Unknown ``type`` values are kept as raw strings so they are counted as
    non-import entries instead of being dropped.
    """
    raw_type = doc.get("type")
    entry_type = _enum_or_default(HistoryType, raw_type, None)
    if entry_type is None:
        entry_type = str(raw_type) if raw_type is not None else ""

    note = doc.get("note")
    return IngredientHistoryEntry(
        type=entry_type,
        import_quantity=to_decimal(doc.get("importQuantity", doc.get("import_quantity"))),
        price=to_decimal(doc.get("price")),
        product_weight=to_decimal(doc.get("productWeight", doc.get("product_weight"))),
        created_at=parse_date(doc.get("createdAt", doc.get("created_at"))),
        note=str(note) if note else None,
    )


def ingredient_from_document(doc: dict) -> Ingredient:
    """Parse an ingredient document, including its history log."""
    history = doc.get("history") or []
    if not isinstance(history, list):
        history = []

    return Ingredient(
        id=str(doc.get("id", "")),
        name=str(doc.get("name") or ""),
        type=_enum_or_default(IngredientType, doc.get("type"), IngredientType.BASE),
        unit=_enum_or_default(IngredientUnit, doc.get("unit"), IngredientUnit.GRAM),
        initial_quantity=to_decimal(doc.get("initialQuantity", doc.get("initial_quantity"))),
        history=tuple(entry_from_document(h) for h in history if isinstance(h, dict)),
    )


class IngredientSource(ABC):
    """
    Abstract interface for ingredient data access.

    The engine never queries storage itself; a source hands it values.
    """

    @abstractmethod
    def list_ingredients(self) -> list[Ingredient]:
        """Fetch every ingredient."""
        pass

    def get_ingredient(self, ingredient_id: str) -> Optional[Ingredient]:
        """Fetch one ingredient by id, or None."""
        for ingredient in self.list_ingredients():
            if ingredient.id == ingredient_id:
                return ingredient
        return None


class JsonFileIngredientSource(IngredientSource):
    """
    Ingredient source backed by a JSON export of the ingredient collection.

    JSON format expected:
        [{"id": "...", "name": "Bột mì", "initialQuantity": 500,
          "history": [{"type": "IMPORT", "importQuantity": 200, "price": 50000}]}]
    """

    def __init__(self, data_path: str | Path):
        self._data_path = Path(data_path)
        self._ingredients: list[Ingredient] = []
        self._load_data()

    def _load_data(self):
        if not self._data_path.exists():
            raise FileNotFoundError(f"Ingredient data file not found: {self._data_path}")

        with open(self._data_path, "r", encoding="utf-8") as f:
            data = json.load(f)

        if isinstance(data, dict):
            data = data.get("ingredients", [])
        if not isinstance(data, list):
            raise ValueError(f"Expected a list of ingredients in {self._data_path}")

        self._ingredients = [ingredient_from_document(doc) for doc in data if isinstance(doc, dict)]

    def list_ingredients(self) -> list[Ingredient]:
        return list(self._ingredients)
