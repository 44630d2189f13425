"""Data models for the Gajrela nutrition estimator."""
from dataclasses import dataclass, field, fields
from enum import Enum
import math
from typing import Dict, List, Optional, Tuple

from gajrela.data_layer.exceptions import InvalidInputError


NUTRIENT_KEYS: Tuple[str, ...] = (
    "kcal",
    "carbs",
    "sugar",
    "fiber",
    "protein",
    "fat",
    "satfat",
)


class IngredientCategory(Enum):
    """Known ingredient categories with a reference profile."""

    CARROT = "carrot"
    MILK_FULL_FAT = "milk_full_fat"
    MILK_REDUCED_FAT = "milk_reduced_fat"
    ALMOND = "almond"
    CASHEW = "cashew"
    RAISIN = "raisin"


class MilkCategory(Enum):
    """Milk used in the batch. Selects exactly one reference profile."""

    FULL_FAT = "full-fat"
    REDUCED_FAT = "reduced-fat"

    @property
    def ingredient_category(self) -> IngredientCategory:
        if self is MilkCategory.FULL_FAT:
            return IngredientCategory.MILK_FULL_FAT
        return IngredientCategory.MILK_REDUCED_FAT

    @classmethod
    def from_label(cls, label: str) -> "MilkCategory":
        """Parse a milk label such as "full-fat", "whole" or "toned".

        Args:
            label: Free-text milk type label

        Returns:
            Matching MilkCategory

        Raises:
            InvalidInputError: If the label names no known milk type
        """
        key = " ".join(str(label).strip().lower().replace("-", " ").split())
        category = _MILK_LABELS.get(key)
        if category is None:
            raise InvalidInputError(
                f"Unknown milk type '{label}'",
                context={"milk_type": label, "accepted": sorted(_MILK_LABELS)},
            )
        return category


_MILK_LABELS: Dict[str, MilkCategory] = {
    "full fat": MilkCategory.FULL_FAT,
    "whole": MilkCategory.FULL_FAT,
    "reduced fat": MilkCategory.REDUCED_FAT,
    "toned": MilkCategory.REDUCED_FAT,
}


def _check_mass(label: str, value: float) -> float:
    """Return value as float, rejecting negative or non-finite masses."""
    if isinstance(value, bool):
        raise InvalidInputError(
            f"Mass for {label} is not a number: {value!r}",
            context={"field": label, "value": value},
        )
    try:
        mass = float(value)
    except (TypeError, ValueError):
        raise InvalidInputError(
            f"Mass for {label} is not a number: {value!r}",
            context={"field": label, "value": value},
        ) from None
    if not math.isfinite(mass) or mass < 0:
        raise InvalidInputError(
            f"Mass for {label} must be a finite, non-negative number of grams, got {value}",
            context={"field": label, "value": value},
        )
    return mass


@dataclass(frozen=True)
class IngredientProfile:
    """Nutrition per 100g of a raw ingredient."""

    kcal: float
    carbs: float
    sugar: float
    fiber: float
    protein: float
    fat: float
    satfat: float = 0.0


@dataclass(frozen=True)
class MicronutrientProfile:
    """Typical vitamins and minerals per 100g of finished halwa.

    These are display values only and are never computed from the recipe.
    """

    vitamin_a_rae_mcg: float = 0.0
    vitamin_b6_mg: float = 0.0
    vitamin_c_mg: float = 0.0
    vitamin_d_mcg: float = 0.0
    vitamin_k_mcg: float = 0.0
    calcium_mg: float = 0.0
    iron_mg: float = 0.0
    potassium_mg: float = 0.0


@dataclass(frozen=True)
class SupplementaryIngredient:
    """A dry fruit or nut added to the batch.

    category must be given explicitly, normally by an IngredientResolver
    (see ingredient_resolver.build); None means the name matched no known
    category and the entry contributes nothing.
    """

    name: str
    grams: float
    category: Optional[IngredientCategory]

    def __post_init__(self):
        object.__setattr__(self, "grams", _check_mass(self.name or "supplementary ingredient", self.grams))


@dataclass(frozen=True)
class RecipeInput:
    """Fixed description of one batch."""

    carrot_g: float
    milk_g: float
    milk_category: MilkCategory = MilkCategory.FULL_FAT
    supplementary: Tuple[SupplementaryIngredient, ...] = ()
    name: str = ""

    def __post_init__(self):
        object.__setattr__(self, "carrot_g", _check_mass("carrot", self.carrot_g))
        object.__setattr__(self, "milk_g", _check_mass("milk", self.milk_g))
        if not isinstance(self.milk_category, MilkCategory):
            raise InvalidInputError(
                f"milk_category must be a MilkCategory, got {self.milk_category!r}",
                context={"milk_category": repr(self.milk_category)},
            )
        object.__setattr__(self, "supplementary", tuple(self.supplementary))

    def with_milk(self, milk_category: MilkCategory) -> "RecipeInput":
        """Return a copy of this recipe using a different milk."""
        return RecipeInput(
            carrot_g=self.carrot_g,
            milk_g=self.milk_g,
            milk_category=milk_category,
            supplementary=self.supplementary,
            name=self.name,
        )


@dataclass(frozen=True)
class NutrientTotals:
    """Amounts for the seven tracked nutrients.

    Use BatchTotals or Per100gTotals; arithmetic is only defined between
    totals of the same scale.
    """

    kcal: float = 0.0
    carbs: float = 0.0
    sugar: float = 0.0
    fiber: float = 0.0
    protein: float = 0.0
    fat: float = 0.0
    satfat: float = 0.0

    @classmethod
    def from_profile(cls, profile: IngredientProfile, grams: float):
        """Scale a per-100g profile to the given mass."""
        factor = grams / 100.0
        return cls(**{key: getattr(profile, key) * factor for key in NUTRIENT_KEYS})

    def scaled(self, factor: float):
        """Return a copy with every nutrient multiplied by factor."""
        return type(self)(**{key: getattr(self, key) * factor for key in NUTRIENT_KEYS})

    def as_dict(self) -> Dict[str, float]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(
            **{key: getattr(self, key) + getattr(other, key) for key in NUTRIENT_KEYS}
        )


@dataclass(frozen=True)
class BatchTotals(NutrientTotals):
    """Absolute nutrient amounts for one whole batch."""


@dataclass(frozen=True)
class Per100gTotals(NutrientTotals):
    """Nutrient amounts per 100g of finished product."""


@dataclass(frozen=True)
class MacroShares:
    """Share of carbohydrate, fat and protein in total macro mass (percent)."""

    carbs_pct: float
    fat_pct: float
    protein_pct: float


@dataclass
class NutritionEstimate:
    """Result of running the estimator on one recipe."""

    recipe: RecipeInput
    assumed_yield_g: float
    batch: BatchTotals
    per_100g: Per100gTotals
    macros: MacroShares
    micronutrients: Optional[MicronutrientProfile] = None
    unresolved_ingredients: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
