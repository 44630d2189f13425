"""Macro share calculation for the nutrition card bars."""

from gajrela.data_layer.models import MacroShares, Per100gTotals


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def macro_total(per_100g: Per100gTotals) -> float:
    """Carbohydrate + fat + protein mass per 100g."""
    return per_100g.carbs + per_100g.fat + per_100g.protein


def calculate_macro_shares(per_100g: Per100gTotals) -> MacroShares:
    """Percentage of total macro mass attributable to carbs, fat and protein.

    Args:
        per_100g: Normalized nutrient totals

    Returns:
        MacroShares with each share in [0, 100]. All three are 0 when the
        macro total is 0.
    """
    total = macro_total(per_100g)
    if total <= 0:
        return MacroShares(carbs_pct=0.0, fat_pct=0.0, protein_pct=0.0)

    return MacroShares(
        carbs_pct=clamp(100.0 * per_100g.carbs / total, 0.0, 100.0),
        fat_pct=clamp(100.0 * per_100g.fat / total, 0.0, 100.0),
        protein_pct=clamp(100.0 * per_100g.protein / total, 0.0, 100.0),
    )
