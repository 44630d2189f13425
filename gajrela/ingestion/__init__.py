"""Ingestion layer: name resolution and recipe configuration loading."""

from gajrela.ingestion.ingredient_resolver import (
    IngredientResolver,
    SubstringResolver,
    ExactResolver,
    DEFAULT_RESOLVER,
    SUPPLEMENTARY_KEYWORDS,
    resolve,
)

from gajrela.ingestion.recipe_loader import (
    RecipeConfig,
    RecipeConfigLoader,
    DEFAULT_RECIPE,
    DEFAULT_ASSUMED_YIELD_G,
)

__all__ = [
    # Name resolution
    "IngredientResolver",
    "SubstringResolver",
    "ExactResolver",
    "DEFAULT_RESOLVER",
    "SUPPLEMENTARY_KEYWORDS",
    "resolve",
    # Recipe configuration
    "RecipeConfig",
    "RecipeConfigLoader",
    "DEFAULT_RECIPE",
    "DEFAULT_ASSUMED_YIELD_G",
]
