"""Yield normalization: batch totals to a per-100g basis.

The assumed yield models evaporation while the milk reduces. It is a fixed
configuration value and is never derived from ingredient masses.
"""
import math

from gajrela.data_layer.exceptions import InvalidConfigurationError
from gajrela.data_layer.models import BatchTotals, Per100gTotals


class YieldNormalizer:
    """Rescales batch totals by 100 / assumed_yield_g."""

    def __init__(self, assumed_yield_g: float):
        """Initialize normalizer.

        Args:
            assumed_yield_g: Finished product weight in grams

        Raises:
            InvalidConfigurationError: If assumed_yield_g is not a positive number
        """
        if not isinstance(assumed_yield_g, (int, float)) or isinstance(assumed_yield_g, bool):
            raise InvalidConfigurationError(
                f"Assumed yield must be a number, got {assumed_yield_g!r}",
                context={"assumed_yield_g": repr(assumed_yield_g)},
            )
        if not math.isfinite(assumed_yield_g) or assumed_yield_g <= 0:
            raise InvalidConfigurationError(
                f"Assumed yield must be positive, got {assumed_yield_g}",
                context={"assumed_yield_g": assumed_yield_g},
            )
        self.assumed_yield_g = float(assumed_yield_g)

    @property
    def factor(self) -> float:
        return 100.0 / self.assumed_yield_g

    def normalize(self, batch: BatchTotals) -> Per100gTotals:
        """Convert absolute batch totals to amounts per 100g of finished product.

        Args:
            batch: BatchTotals for the whole recipe

        Returns:
            Per100gTotals

        Raises:
            TypeError: If batch is not BatchTotals
        """
        if not isinstance(batch, BatchTotals):
            raise TypeError(
                f"normalize() expects BatchTotals, got {type(batch).__name__}"
            )
        return Per100gTotals(**batch.scaled(self.factor).as_dict())
