"""Nutrition estimator: runs aggregation, normalization and macro shares."""
import logging
from typing import List, Optional

from gajrela.data_layer.models import NutritionEstimate, RecipeInput
from gajrela.data_layer.reference_table import DEFAULT_REFERENCE_TABLE, ReferenceTable
from gajrela.ingestion.recipe_loader import DEFAULT_ASSUMED_YIELD_G, DEFAULT_RECIPE
from gajrela.nutrition.aggregator import BatchAggregator
from gajrela.nutrition.macro_ratio import calculate_macro_shares, macro_total
from gajrela.nutrition.normalizer import YieldNormalizer

_logger = logging.getLogger(__name__)


class NutritionEstimator:
    """Estimates approximate nutrition for a recipe batch.

    Stateless once constructed; one instance can serve any number of callers.

    Usage:
        estimator = NutritionEstimator()
        estimate = estimator.estimate(DEFAULT_RECIPE)
        estimate.per_100g.kcal   # ~111.5
    """

    def __init__(
        self,
        reference_table: ReferenceTable = DEFAULT_REFERENCE_TABLE,
        assumed_yield_g: float = DEFAULT_ASSUMED_YIELD_G,
    ):
        """Initialize estimator.

        Args:
            reference_table: Per-100g ingredient profiles
            assumed_yield_g: Finished product weight used for per-100g values

        Raises:
            InvalidConfigurationError: If assumed_yield_g <= 0
        """
        self.reference_table = reference_table
        self.aggregator = BatchAggregator(reference_table)
        self.normalizer = YieldNormalizer(assumed_yield_g)

    @property
    def assumed_yield_g(self) -> float:
        return self.normalizer.assumed_yield_g

    def estimate(self, recipe: Optional[RecipeInput] = None) -> NutritionEstimate:
        """Estimate batch and per-100g nutrition.

        Args:
            recipe: Batch description (default: DEFAULT_RECIPE)

        Returns:
            NutritionEstimate. Soft defaults (unresolved dry fruits, zero macro
            total) are listed in its warnings.
        """
        recipe = recipe if recipe is not None else DEFAULT_RECIPE
        warnings: List[str] = []

        unresolved = [item.name for item in recipe.supplementary if item.category is None]
        for name in unresolved:
            message = f"Unrecognized ingredient '{name}' contributes no nutrition"
            warnings.append(message)
            _logger.warning(message)

        batch = self.aggregator.aggregate(recipe)
        per_100g = self.normalizer.normalize(batch)
        macros = calculate_macro_shares(per_100g)

        if macro_total(per_100g) <= 0:
            message = "Carbs, fat and protein are all zero; macro shares reported as 0%"
            warnings.append(message)
            _logger.warning(message)

        _logger.debug(
            "Estimated '%s': %.1f kcal per 100g (yield %.0fg)",
            recipe.name, per_100g.kcal, self.assumed_yield_g,
        )

        return NutritionEstimate(
            recipe=recipe,
            assumed_yield_g=self.assumed_yield_g,
            batch=batch,
            per_100g=per_100g,
            macros=macros,
            micronutrients=self.reference_table.micronutrients,
            unresolved_ingredients=unresolved,
            warnings=warnings,
        )
