"""Batch aggregator: absolute nutrient totals for one recipe batch."""
import logging
from typing import Iterable

from gajrela.data_layer.models import (
    BatchTotals,
    IngredientCategory,
    RecipeInput,
    SupplementaryIngredient,
)
from gajrela.data_layer.reference_table import ReferenceTable

_logger = logging.getLogger(__name__)


class BatchAggregator:
    """Combines a recipe's ingredient masses with the reference table."""

    def __init__(self, reference_table: ReferenceTable):
        """Initialize aggregator with an injected reference table.

        Args:
            reference_table: ReferenceTable providing per-100g profiles
        """
        self.reference_table = reference_table

    def aggregate(self, recipe: RecipeInput) -> BatchTotals:
        """Calculate absolute nutrient totals for the whole batch.

        Args:
            recipe: RecipeInput describing the batch

        Returns:
            BatchTotals (carrot + milk base plus supplementary ingredients)
        """
        return self.aggregate_base(recipe) + self.aggregate_supplementary(recipe.supplementary)

    def aggregate_base(self, recipe: RecipeInput) -> BatchTotals:
        """Carrot and milk contribution.

        Fiber is attributed to carrot only and saturated fat to milk only,
        whatever the reference table says for the other ingredient.
        """
        carrot = BatchTotals.from_profile(
            self.reference_table.lookup(IngredientCategory.CARROT), recipe.carrot_g
        )
        milk = BatchTotals.from_profile(
            self.reference_table.lookup(recipe.milk_category.ingredient_category), recipe.milk_g
        )
        return BatchTotals(
            kcal=carrot.kcal + milk.kcal,
            carbs=carrot.carbs + milk.carbs,
            sugar=carrot.sugar + milk.sugar,
            fiber=carrot.fiber,
            protein=carrot.protein + milk.protein,
            fat=carrot.fat + milk.fat,
            satfat=milk.satfat,
        )

    def aggregate_supplementary(self, items: Iterable[SupplementaryIngredient]) -> BatchTotals:
        """Sum dry fruit and nut contributions across all nutrients.

        Entries without a category contribute nothing.
        """
        total = BatchTotals()
        for item in items:
            if item.category is None:
                _logger.debug("Skipping unresolved ingredient '%s' (%sg)", item.name, item.grams)
                continue
            profile = self.reference_table.lookup(item.category)
            total = total + BatchTotals.from_profile(profile, item.grams)
        return total
