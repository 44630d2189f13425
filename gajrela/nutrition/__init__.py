"""Nutrition pipeline: batch aggregation, yield normalization, macro shares."""

from gajrela.nutrition.aggregator import BatchAggregator
from gajrela.nutrition.normalizer import YieldNormalizer
from gajrela.nutrition.macro_ratio import calculate_macro_shares, macro_total
from gajrela.nutrition.estimator import NutritionEstimator

__all__ = [
    "BatchAggregator",
    "YieldNormalizer",
    "calculate_macro_shares",
    "macro_total",
    "NutritionEstimator",
]
