"""Shared test fixtures."""

import logging

import pytest

from gajrela.data_layer.models import MilkCategory, RecipeInput
from gajrela.data_layer.reference_table import DEFAULT_REFERENCE_TABLE
from gajrela.ingestion.ingredient_resolver import DEFAULT_RESOLVER


# Whole-batch totals for 500g carrot + 500g full-fat milk + 15g each of
# almonds, cashews and raisins, worked out by hand from the reference table.
_DEFAULT_BATCH = {
    "kcal": 205 + 305 + 86.85 + 82.95 + 44.85,
    "carbs": 48 + 24 + 3.24 + 4.53 + 11.88,
    "sugar": 23.5 + 25 + 0.66 + 0.885 + 8.88,
    "fiber": 14 + 1.875 + 0.495 + 0.555,
    "protein": 4.5 + 16 + 3.18 + 2.73 + 0.465,
    "fat": 1.0 + 16.5 + 7.485 + 6.585 + 0.075,
    "satfat": 10.5 + 0.57 + 1.17 + 0.03,
}


@pytest.fixture
def reference_table():
    return DEFAULT_REFERENCE_TABLE


@pytest.fixture
def default_recipe():
    """500g carrot, 500g full-fat milk, 15g almonds/cashews/raisins."""
    return RecipeInput(
        name="Gajar Ka Halwa",
        carrot_g=500,
        milk_g=500,
        milk_category=MilkCategory.FULL_FAT,
        supplementary=DEFAULT_RESOLVER.build_all(
            [("Almonds", 15), ("Cashews", 15), ("Raisins", 15)]
        ),
    )


@pytest.fixture
def expected_batch():
    """Hand-computed whole-batch totals for default_recipe."""
    return dict(_DEFAULT_BATCH)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo configure_logging() so caplog keeps receiving records."""
    yield
    logger = logging.getLogger("gajrela")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
