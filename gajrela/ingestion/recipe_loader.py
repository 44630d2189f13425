"""Recipe configuration loader for batch descriptions stored in YAML.

Expected layout (see config/gajar_halwa.yaml):

    recipe:
      name: Gajar Ka Halwa
      carrots_g: 500
      milk_g: 500
      milk_type: full-fat
      dry_fruits:
        - {name: Almonds, grams: 15}
    estimate:
      assumed_yield_g: 650
"""
from dataclasses import dataclass
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from gajrela.data_layer.exceptions import InvalidConfigurationError
from gajrela.data_layer.models import MilkCategory, RecipeInput
from gajrela.ingestion.ingredient_resolver import DEFAULT_RESOLVER, IngredientResolver

_logger = logging.getLogger(__name__)

# Finished weight after the milk reduces; adjust if the actual yield differs.
DEFAULT_ASSUMED_YIELD_G = 650.0

DEFAULT_RECIPE = RecipeInput(
    name="Gajar Ka Halwa",
    carrot_g=500.0,
    milk_g=500.0,  # ~500 ml
    milk_category=MilkCategory.FULL_FAT,
    supplementary=DEFAULT_RESOLVER.build_all(
        [("Almonds", 15.0), ("Cashews", 15.0), ("Raisins", 15.0)]
    ),
)


@dataclass(frozen=True)
class RecipeConfig:
    """A recipe together with the yield used to normalize it."""

    recipe: RecipeInput
    assumed_yield_g: float = DEFAULT_ASSUMED_YIELD_G


class RecipeConfigLoader:
    """Loader for recipe configuration from YAML."""

    def __init__(self, yaml_path: str, resolver: Optional[IngredientResolver] = None):
        """Initialize recipe loader from YAML file.

        Args:
            yaml_path: Path to YAML file containing the recipe
            resolver: Name resolution policy for dry fruits (default: substring)
        """
        self.yaml_path = Path(yaml_path)
        self.resolver = resolver or DEFAULT_RESOLVER

    def load(self) -> RecipeConfig:
        """Load recipe configuration from YAML file.

        Missing fields fall back to the default recipe.

        Returns:
            RecipeConfig object

        Raises:
            FileNotFoundError: If YAML file doesn't exist
            InvalidConfigurationError: If the file is not a valid recipe
            InvalidInputError: If a mass or milk type is invalid
        """
        with open(self.yaml_path, "r") as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as exc:
                raise InvalidConfigurationError(
                    f"Recipe file is not valid YAML: {exc}",
                    context={"path": str(self.yaml_path)},
                ) from exc

        if not isinstance(data, dict):
            raise InvalidConfigurationError(
                "Recipe file must contain a mapping",
                context={"path": str(self.yaml_path)},
            )

        recipe_data = self._section(data, "recipe")
        estimate_data = self._section(data, "estimate")

        milk_type = recipe_data.get("milk_type")
        milk_category = (
            MilkCategory.from_label(milk_type) if milk_type is not None
            else DEFAULT_RECIPE.milk_category
        )

        if "dry_fruits" in recipe_data:
            dry_fruits = recipe_data.get("dry_fruits") or []
            if not isinstance(dry_fruits, list):
                raise InvalidConfigurationError(
                    "'dry_fruits' must be a list",
                    context={"path": str(self.yaml_path)},
                )
            entries = self._parse_dry_fruits(dry_fruits)
            supplementary = self.resolver.build_all(entries)
        else:
            supplementary = DEFAULT_RECIPE.supplementary

        name = recipe_data.get("name")
        recipe = RecipeInput(
            name=str(name) if name is not None else DEFAULT_RECIPE.name,
            carrot_g=recipe_data.get("carrots_g", DEFAULT_RECIPE.carrot_g),
            milk_g=recipe_data.get("milk_g", DEFAULT_RECIPE.milk_g),
            milk_category=milk_category,
            supplementary=supplementary,
        )

        raw_yield = estimate_data.get("assumed_yield_g", DEFAULT_ASSUMED_YIELD_G)
        try:
            if isinstance(raw_yield, bool):
                raise TypeError(raw_yield)
            assumed_yield_g = float(raw_yield)
        except (TypeError, ValueError):
            raise InvalidConfigurationError(
                f"assumed_yield_g is not a number: {raw_yield!r}",
                context={"path": str(self.yaml_path)},
            ) from None
        _logger.debug(
            "Loaded recipe '%s' from %s (%d dry fruits)",
            recipe.name, self.yaml_path, len(recipe.supplementary),
        )
        return RecipeConfig(recipe=recipe, assumed_yield_g=assumed_yield_g)

    def _section(self, data: Dict[str, Any], key: str) -> Dict[str, Any]:
        section = data.get(key)
        if section is None:
            return {}
        if not isinstance(section, dict):
            raise InvalidConfigurationError(
                f"'{key}' must be a mapping, got {type(section).__name__}",
                context={"path": str(self.yaml_path), "section": key},
            )
        return section

    def _parse_dry_fruits(self, items: List[Any]) -> List[Tuple[str, Any]]:
        """Parse dry fruit entries into (name, grams) pairs.

        Args:
            items: List of {"name": ..., "grams": ...} mappings

        Returns:
            List of (name, grams) tuples in file order
        """
        entries = []
        for item in items:
            if not isinstance(item, dict) or "name" not in item:
                raise InvalidConfigurationError(
                    f"Dry fruit entry must have a name: {item!r}",
                    context={"path": str(self.yaml_path)},
                )
            entries.append((str(item["name"]), item.get("grams", 0.0)))
        return entries


def recipe_to_dict(recipe: RecipeInput) -> Dict[str, Any]:
    """Inverse of the YAML layout, used by the JSON formatter."""
    return {
        "name": recipe.name,
        "carrots_g": recipe.carrot_g,
        "milk_g": recipe.milk_g,
        "milk_type": recipe.milk_category.value,
        "dry_fruits": [
            {
                "name": item.name,
                "grams": item.grams,
                "category": item.category.value if item.category else None,
            }
            for item in recipe.supplementary
        ],
    }
