"""Formatters for nutrition estimates (JSON and Markdown)."""

import json
from dataclasses import asdict
from typing import Any, Dict, List

from gajrela.data_layer.models import (
    MacroShares,
    MicronutrientProfile,
    NutrientTotals,
    NutritionEstimate,
    RecipeInput,
    SupplementaryIngredient,
)
from gajrela.ingestion.recipe_loader import recipe_to_dict


MICRONUTRIENT_LABELS = [
    ("vitamin_a_rae_mcg", "Vitamin A", "mcg RAE"),
    ("vitamin_b6_mg", "Vitamin B6", "mg"),
    ("vitamin_c_mg", "Vitamin C", "mg"),
    ("vitamin_d_mcg", "Vitamin D", "mcg"),
    ("vitamin_k_mcg", "Vitamin K", "mcg"),
    ("calcium_mg", "Calcium", "mg"),
    ("iron_mg", "Iron", "mg"),
    ("potassium_mg", "Potassium", "mg"),
]


def format_grams(value: float) -> str:
    """Format a quantity without a trailing ".0" (e.g., 500.0 -> "500")."""
    if value == int(value):
        return str(int(value))
    return f"{value:.1f}".rstrip('0').rstrip('.')


def format_ingredient_string(item: SupplementaryIngredient) -> str:
    """Format a dry fruit entry as e.g. "Almonds 15g"."""
    return f"{item.name} {format_grams(item.grams)}g"


def format_batch_inputs(recipe: RecipeInput) -> List[str]:
    """Lines describing the batch that was estimated.

    Args:
        recipe: RecipeInput used for the estimate

    Returns:
        List like ["500g carrots", "500g milk (full-fat)", "Dry fruits: ..."]
    """
    lines = [
        f"{format_grams(recipe.carrot_g)}g carrots",
        f"{format_grams(recipe.milk_g)}g milk ({recipe.milk_category.value})",
    ]
    if recipe.supplementary:
        dry_fruits = ", ".join(format_ingredient_string(i) for i in recipe.supplementary)
    else:
        dry_fruits = "none"
    lines.append(f"Dry fruits: {dry_fruits}")
    return lines


def format_nutrition_breakdown(totals: NutrientTotals, indent: str = "") -> str:
    """Format totals for display: kcal to whole units, grams to one decimal.

    Args:
        totals: BatchTotals or Per100gTotals
        indent: Optional indentation prefix

    Returns:
        Formatted Markdown lines
    """
    lines = [
        f"{indent}**Calories:** {round(totals.kcal):.0f} kcal",
        f"{indent}**Carbs:** {totals.carbs:.1f}g",
        f"{indent}**Fat:** {totals.fat:.1f}g",
        f"{indent}**Protein:** {totals.protein:.1f}g",
        f"{indent}**Sugar:** {totals.sugar:.1f}g",
        f"{indent}**Fiber:** {totals.fiber:.1f}g",
        f"{indent}**Saturated fat:** {totals.satfat:.1f}g",
    ]
    return "\n".join(lines)


def format_macro_bar(label: str, pct: float, grams: float, width: int = 20) -> str:
    """Render one macro bar as text, e.g. "Carbs    ############........ 61.0% (14.1g)"."""
    filled = int(round(width * pct / 100.0))
    bar = "#" * filled + "." * (width - filled)
    return f"{label:<8} {bar} {pct:.1f}% ({grams:.1f}g)"


def format_macro_bars(macros: MacroShares, totals: NutrientTotals) -> str:
    return "\n".join([
        format_macro_bar("Carbs", macros.carbs_pct, totals.carbs),
        format_macro_bar("Fat", macros.fat_pct, totals.fat),
        format_macro_bar("Protein", macros.protein_pct, totals.protein),
    ])


def format_micronutrients(micros: MicronutrientProfile) -> List[str]:
    return [
        f"- {label}: {getattr(micros, key):g} {unit}"
        for key, label, unit in MICRONUTRIENT_LABELS
    ]


def format_estimate_markdown(estimate: NutritionEstimate) -> str:
    """Format a NutritionEstimate as a Markdown nutrition card.

    Args:
        estimate: NutritionEstimate from the estimator

    Returns:
        Formatted Markdown string
    """
    title = estimate.recipe.name or "Recipe"
    lines = [f"# {title}: Nutrition (approx.)\n"]

    if estimate.warnings:
        lines.append("## Warnings\n")
        for warning in estimate.warnings:
            lines.append(f"- {warning}")
        lines.append("")

    lines.append("## Per 100g (estimated)")
    lines.append(format_nutrition_breakdown(estimate.per_100g))
    lines.append("")

    lines.append("### Macro distribution")
    lines.append("```")
    lines.append(format_macro_bars(estimate.macros, estimate.per_100g))
    lines.append("```")
    lines.append("")
    lines.append(
        f"Per-100g depends on your final yield (assumed {format_grams(estimate.assumed_yield_g)}g "
        "after evaporation), sugar and ghee."
    )
    lines.append("")

    lines.append("## Whole batch")
    lines.append(format_nutrition_breakdown(estimate.batch))
    lines.append("")

    if estimate.micronutrients is not None:
        lines.append("## Vitamins & minerals (typical, per 100g)")
        lines.extend(format_micronutrients(estimate.micronutrients))
        lines.append("")

    lines.append("## Batch inputs used")
    for line in format_batch_inputs(estimate.recipe):
        lines.append(f"- {line}")
    lines.append("")

    return "\n".join(lines)


def _rounded_totals(totals: NutrientTotals) -> Dict[str, float]:
    values = {key: round(value, 1) for key, value in totals.as_dict().items()}
    values["kcal"] = round(totals.kcal)
    return values


def format_estimate_json(estimate: NutritionEstimate) -> Dict[str, Any]:
    """Format a NutritionEstimate as a JSON-ready dictionary.

    Display values are rounded (kcal to whole units, grams to one decimal);
    unrounded values are kept under "raw".

    Args:
        estimate: NutritionEstimate from the estimator

    Returns:
        Dictionary ready for JSON serialization
    """
    return {
        "recipe": recipe_to_dict(estimate.recipe),
        "assumed_yield_g": estimate.assumed_yield_g,
        "per_100g": _rounded_totals(estimate.per_100g),
        "batch": _rounded_totals(estimate.batch),
        "macro_shares": {
            "carbs_pct": round(estimate.macros.carbs_pct, 1),
            "fat_pct": round(estimate.macros.fat_pct, 1),
            "protein_pct": round(estimate.macros.protein_pct, 1),
        },
        "micronutrients_per_100g": (
            asdict(estimate.micronutrients) if estimate.micronutrients is not None else None
        ),
        "unresolved_ingredients": list(estimate.unresolved_ingredients),
        "warnings": list(estimate.warnings),
        "raw": {
            "per_100g": estimate.per_100g.as_dict(),
            "batch": estimate.batch.as_dict(),
            "macro_shares": asdict(estimate.macros),
        },
    }


def format_estimate_json_string(estimate: NutritionEstimate, indent: int = 2) -> str:
    """Format a NutritionEstimate as a JSON string.

    Args:
        estimate: NutritionEstimate from the estimator
        indent: JSON indentation (default: 2)

    Returns:
        JSON string
    """
    return json.dumps(format_estimate_json(estimate), indent=indent)
