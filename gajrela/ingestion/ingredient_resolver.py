"""Ingredient name resolution for supplementary ingredients.

Names are matched to an IngredientCategory once, when the recipe is built.
The aggregator only ever sees the resulting category (or None), so the
matching policy can be changed here without touching any arithmetic.

Two policies are provided:
- SubstringResolver (default): case-insensitive substring match, so
  "Roasted Almonds" and "almond slivers" both resolve to ALMOND.
- ExactResolver: whole-name match on singular or plural forms only.

Names matching nothing resolve to None. Callers treat that as a zero
contribution, not as an error.
"""

from typing import Dict, Iterable, Optional, Tuple

from gajrela.data_layer.models import IngredientCategory, SupplementaryIngredient


# Checked in order; the first keyword found in the name wins.
SUPPLEMENTARY_KEYWORDS: Tuple[Tuple[str, IngredientCategory], ...] = (
    ("almond", IngredientCategory.ALMOND),
    ("cashew", IngredientCategory.CASHEW),
    ("raisin", IngredientCategory.RAISIN),
)


class IngredientResolver:
    """Base class for name -> category policies."""

    def resolve(self, name: str) -> Optional[IngredientCategory]:
        raise NotImplementedError

    def build(self, name: str, grams: float) -> SupplementaryIngredient:
        """Create a SupplementaryIngredient tagged with its resolved category.

        Args:
            name: Free-text ingredient name (e.g., "Almonds")
            grams: Mass in grams

        Returns:
            SupplementaryIngredient; category is None if the name is unknown
        """
        return SupplementaryIngredient(name=name, grams=grams, category=self.resolve(name))

    def build_all(self, entries: Iterable[Tuple[str, float]]) -> Tuple[SupplementaryIngredient, ...]:
        return tuple(self.build(name, grams) for name, grams in entries)


class SubstringResolver(IngredientResolver):
    """Case-insensitive substring matching against known keywords."""

    def __init__(self, keywords: Tuple[Tuple[str, IngredientCategory], ...] = SUPPLEMENTARY_KEYWORDS):
        self.keywords = keywords

    def resolve(self, name: str) -> Optional[IngredientCategory]:
        key = (name or "").lower()
        for keyword, category in self.keywords:
            if keyword in key:
                return category
        return None


class ExactResolver(IngredientResolver):
    """Whole-name matching; "almond" and "almonds" match, "almond flour" does not."""

    def __init__(self, keywords: Tuple[Tuple[str, IngredientCategory], ...] = SUPPLEMENTARY_KEYWORDS):
        self._names: Dict[str, IngredientCategory] = {}
        for keyword, category in keywords:
            self._names[keyword] = category
            self._names[keyword + "s"] = category

    def resolve(self, name: str) -> Optional[IngredientCategory]:
        return self._names.get(" ".join((name or "").lower().split()))


DEFAULT_RESOLVER = SubstringResolver()


def resolve(name: str) -> Optional[IngredientCategory]:
    """Resolve a name with the default substring policy."""
    return DEFAULT_RESOLVER.resolve(name)
