"""Reference nutrition profiles per 100g for each known ingredient category.

The table is an immutable value passed into the aggregator. Alternate tables
can be loaded from JSON with ReferenceTableLoader:

    {
      "ingredients": [
        {"category": "carrot",
         "per_100g": {"kcal": 41, "carbs": 9.6, "sugar": 4.7, "fiber": 2.8,
                      "protein": 0.9, "fat": 0.2}},
        ...
      ],
      "micronutrients_per_100g": {"vitamin_a_rae_mcg": 700, ...}
    }
"""
import json
import logging
import math
from dataclasses import fields
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from gajrela.data_layer.exceptions import InvalidConfigurationError
from gajrela.data_layer.models import (
    IngredientCategory,
    IngredientProfile,
    MicronutrientProfile,
    NUTRIENT_KEYS,
)

_logger = logging.getLogger(__name__)


class ReferenceTable:
    """Read-only lookup of IngredientProfile by IngredientCategory."""

    def __init__(
        self,
        profiles: Mapping[IngredientCategory, IngredientProfile],
        micronutrients: Optional[MicronutrientProfile] = None,
    ):
        """Initialize table from a complete category -> profile mapping.

        Args:
            profiles: One profile for every IngredientCategory
            micronutrients: Optional typical micronutrients of the finished dish

        Raises:
            InvalidConfigurationError: If a category is missing
        """
        missing = [c.value for c in IngredientCategory if c not in profiles]
        if missing:
            raise InvalidConfigurationError(
                "Reference table is missing ingredient categories",
                context={"missing": missing},
            )
        self._profiles = MappingProxyType(dict(profiles))
        self.micronutrients = micronutrients

    def lookup(self, category: IngredientCategory) -> IngredientProfile:
        """Return the per-100g profile for a category."""
        return self._profiles[category]

    def __eq__(self, other):
        if not isinstance(other, ReferenceTable):
            return NotImplemented
        return (
            dict(self._profiles) == dict(other._profiles)
            and self.micronutrients == other.micronutrients
        )

    def __repr__(self) -> str:
        return f"ReferenceTable({[c.value for c in self._profiles]})"


# Approximate USDA-style values; good enough for a UI estimate.
DEFAULT_REFERENCE_TABLE = ReferenceTable(
    {
        IngredientCategory.CARROT: IngredientProfile(
            kcal=41, carbs=9.6, sugar=4.7, fiber=2.8, protein=0.9, fat=0.2
        ),
        IngredientCategory.MILK_FULL_FAT: IngredientProfile(
            kcal=61, carbs=4.8, sugar=5.0, fiber=0, protein=3.2, fat=3.3, satfat=2.1
        ),
        IngredientCategory.MILK_REDUCED_FAT: IngredientProfile(
            kcal=47, carbs=4.9, sugar=5.0, fiber=0, protein=3.1, fat=1.5, satfat=1.0
        ),
        IngredientCategory.ALMOND: IngredientProfile(
            kcal=579, carbs=21.6, sugar=4.4, fiber=12.5, protein=21.2, fat=49.9, satfat=3.8
        ),
        IngredientCategory.CASHEW: IngredientProfile(
            kcal=553, carbs=30.2, sugar=5.9, fiber=3.3, protein=18.2, fat=43.9, satfat=7.8
        ),
        IngredientCategory.RAISIN: IngredientProfile(
            kcal=299, carbs=79.2, sugar=59.2, fiber=3.7, protein=3.1, fat=0.5, satfat=0.2
        ),
    },
    micronutrients=MicronutrientProfile(
        vitamin_a_rae_mcg=700,  # carrot-heavy dessert
        vitamin_b6_mg=0.12,
        vitamin_c_mg=4,
        vitamin_d_mcg=0.7,  # varies widely with milk fortification
        vitamin_k_mcg=10,
        calcium_mg=110,
        iron_mg=0.9,
        potassium_mg=240,
    ),
)


class ReferenceTableLoader:
    """Loader for reference tables stored as JSON."""

    def __init__(self, json_path: str):
        """Initialize loader.

        Args:
            json_path: Path to JSON file containing ingredient profiles
        """
        self.json_path = Path(json_path)

    def load(self) -> ReferenceTable:
        """Load and validate the reference table.

        Returns:
            ReferenceTable built from the file

        Raises:
            FileNotFoundError: If the JSON file doesn't exist
            InvalidConfigurationError: If the file content is not a valid table
        """
        with open(self.json_path, "r") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as exc:
                raise InvalidConfigurationError(
                    f"Reference table is not valid JSON: {exc}",
                    context={"path": str(self.json_path)},
                ) from exc

        if not isinstance(data, dict):
            raise InvalidConfigurationError(
                "Reference table must be a JSON object",
                context={"path": str(self.json_path)},
            )

        entries = data.get("ingredients", [])
        if not isinstance(entries, list):
            raise InvalidConfigurationError(
                "'ingredients' must be a list",
                context={"path": str(self.json_path)},
            )

        profiles: Dict[IngredientCategory, IngredientProfile] = {}
        for entry in entries:
            if not isinstance(entry, dict):
                raise InvalidConfigurationError(
                    f"Ingredient entry must be an object: {entry!r}",
                    context={"path": str(self.json_path)},
                )
            category = self._parse_category(entry.get("category"))
            values = entry.get("per_100g") or {}
            if not isinstance(values, dict):
                raise InvalidConfigurationError(
                    f"per_100g for '{category.value}' must be an object",
                    context={"path": str(self.json_path), "category": category.value},
                )
            profiles[category] = self._parse_profile(category, values)

        micros = data.get("micronutrients_per_100g")
        if micros is not None and not isinstance(micros, dict):
            raise InvalidConfigurationError(
                "micronutrients_per_100g must be an object",
                context={"path": str(self.json_path)},
            )
        micronutrients = self._parse_micronutrients(micros) if micros else None

        table = ReferenceTable(profiles, micronutrients=micronutrients)
        _logger.debug("Loaded reference table from %s", self.json_path)
        return table

    def _parse_category(self, raw: Any) -> IngredientCategory:
        try:
            return IngredientCategory(raw)
        except ValueError:
            raise InvalidConfigurationError(
                f"Unknown ingredient category '{raw}'",
                context={
                    "path": str(self.json_path),
                    "known": [c.value for c in IngredientCategory],
                },
            ) from None

    def _parse_profile(
        self, category: IngredientCategory, values: Dict[str, Any]
    ) -> IngredientProfile:
        """Parse a per-100g block. Missing nutrients default to zero.

        Args:
            category: Category the block belongs to (for error context)
            values: Raw nutrient values keyed by nutrient name

        Returns:
            IngredientProfile
        """
        parsed = {
            key: self._parse_amount(category.value, key, values.get(key, 0.0))
            for key in NUTRIENT_KEYS
        }
        return IngredientProfile(**parsed)

    def _parse_micronutrients(self, values: Dict[str, Any]) -> MicronutrientProfile:
        known = {f.name for f in fields(MicronutrientProfile)}
        parsed = {
            key: self._parse_amount("micronutrients", key, value)
            for key, value in values.items()
            if key in known
        }
        return MicronutrientProfile(**parsed)

    def _parse_amount(self, owner: str, key: str, value: Any) -> float:
        try:
            amount = float(value)
        except (TypeError, ValueError):
            amount = float("nan")
        if not math.isfinite(amount) or amount < 0:
            raise InvalidConfigurationError(
                f"Invalid value for {owner}.{key}: {value!r}",
                context={"path": str(self.json_path), "category": owner, "nutrient": key},
            )
        return amount
