"""Tests for the YAML recipe configuration loader."""
from pathlib import Path
from tempfile import NamedTemporaryFile

import pytest
import yaml

from gajrela.data_layer.exceptions import InvalidConfigurationError, InvalidInputError
from gajrela.data_layer.models import IngredientCategory, MilkCategory
from gajrela.ingestion.ingredient_resolver import ExactResolver
from gajrela.ingestion.recipe_loader import (
    DEFAULT_RECIPE,
    RecipeConfigLoader,
    recipe_to_dict,
)

REPO_ROOT = Path(__file__).resolve().parent.parent


def _write_yaml(data) -> str:
    with NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
        if isinstance(data, str):
            f.write(data)
        else:
            yaml.dump(data, f)
        return f.name


class TestRecipeConfigLoader:
    """Tests for RecipeConfigLoader."""

    def test_bundled_config_is_default_recipe(self):
        config = RecipeConfigLoader(str(REPO_ROOT / "config" / "gajar_halwa.yaml")).load()
        assert config.recipe == DEFAULT_RECIPE
        assert config.assumed_yield_g == 650.0

    def test_load_recipe_from_yaml(self):
        temp_path = _write_yaml({
            "recipe": {
                "name": "Winter batch",
                "carrots_g": 1000,
                "milk_g": 750,
                "milk_type": "toned",
                "dry_fruits": [
                    {"name": "Cashews", "grams": 30},
                    {"name": "Pistachios", "grams": 10},
                ],
            },
            "estimate": {"assumed_yield_g": 1100},
        })
        try:
            config = RecipeConfigLoader(temp_path).load()
            recipe = config.recipe
            assert recipe.name == "Winter batch"
            assert recipe.carrot_g == 1000.0
            assert recipe.milk_g == 750.0
            assert recipe.milk_category is MilkCategory.REDUCED_FAT
            assert [i.category for i in recipe.supplementary] == [IngredientCategory.CASHEW, None]
            assert config.assumed_yield_g == 1100.0
        finally:
            Path(temp_path).unlink()

    def test_missing_fields_fall_back_to_defaults(self):
        temp_path = _write_yaml({"recipe": {"milk_g": 600}})
        try:
            config = RecipeConfigLoader(temp_path).load()
            assert config.recipe.milk_g == 600.0
            assert config.recipe.carrot_g == DEFAULT_RECIPE.carrot_g
            assert config.recipe.supplementary == DEFAULT_RECIPE.supplementary
            assert config.assumed_yield_g == 650.0
        finally:
            Path(temp_path).unlink()

    def test_empty_dry_fruits(self):
        temp_path = _write_yaml({"recipe": {"dry_fruits": []}})
        try:
            assert RecipeConfigLoader(temp_path).load().recipe.supplementary == ()
        finally:
            Path(temp_path).unlink()

    def test_custom_resolver(self):
        temp_path = _write_yaml({"recipe": {"dry_fruits": [{"name": "almond flour", "grams": 10}]}})
        try:
            recipe = RecipeConfigLoader(temp_path, resolver=ExactResolver()).load().recipe
            assert recipe.supplementary[0].category is None
        finally:
            Path(temp_path).unlink()

    def test_negative_mass_rejected(self):
        temp_path = _write_yaml({"recipe": {"carrots_g": -500}})
        try:
            with pytest.raises(InvalidInputError):
                RecipeConfigLoader(temp_path).load()
        finally:
            Path(temp_path).unlink()

    def test_unknown_milk_type_rejected(self):
        temp_path = _write_yaml({"recipe": {"milk_type": "oat"}})
        try:
            with pytest.raises(InvalidInputError, match="oat"):
                RecipeConfigLoader(temp_path).load()
        finally:
            Path(temp_path).unlink()

    def test_dry_fruit_without_name_rejected(self):
        temp_path = _write_yaml({"recipe": {"dry_fruits": [{"grams": 10}]}})
        try:
            with pytest.raises(InvalidConfigurationError, match="name"):
                RecipeConfigLoader(temp_path).load()
        finally:
            Path(temp_path).unlink()

    def test_non_numeric_yield_rejected(self):
        temp_path = _write_yaml({"estimate": {"assumed_yield_g": "a lot"}})
        try:
            with pytest.raises(InvalidConfigurationError, match="assumed_yield_g"):
                RecipeConfigLoader(temp_path).load()
        finally:
            Path(temp_path).unlink()

    def test_invalid_yaml_rejected(self):
        temp_path = _write_yaml("recipe: [unclosed")
        try:
            with pytest.raises(InvalidConfigurationError, match="YAML"):
                RecipeConfigLoader(temp_path).load()
        finally:
            Path(temp_path).unlink()

    def test_non_mapping_rejected(self):
        temp_path = _write_yaml("- just\n- a list\n")
        try:
            with pytest.raises(InvalidConfigurationError, match="mapping"):
                RecipeConfigLoader(temp_path).load()
        finally:
            Path(temp_path).unlink()

    @pytest.mark.parametrize(
        "content",
        [
            "recipe:\n  - carrots\n",
            "recipe: carrots\n",
            "estimate:\n  - 650\n",
            "recipe:\n  dry_fruits: Almonds\n",
        ],
    )
    def test_malformed_sections_rejected(self, content):
        temp_path = _write_yaml(content)
        try:
            with pytest.raises(InvalidConfigurationError):
                RecipeConfigLoader(temp_path).load()
        finally:
            Path(temp_path).unlink()

    def test_boolean_yield_rejected(self):
        temp_path = _write_yaml({"estimate": {"assumed_yield_g": True}})
        try:
            with pytest.raises(InvalidConfigurationError, match="assumed_yield_g"):
                RecipeConfigLoader(temp_path).load()
        finally:
            Path(temp_path).unlink()

    def test_boolean_mass_rejected(self):
        temp_path = _write_yaml({"recipe": {"carrots_g": True}})
        try:
            with pytest.raises(InvalidInputError):
                RecipeConfigLoader(temp_path).load()
        finally:
            Path(temp_path).unlink()

    def test_null_name_uses_default(self):
        temp_path = _write_yaml("recipe:\n  name:\n  carrots_g: 400\n")
        try:
            recipe = RecipeConfigLoader(temp_path).load().recipe
            assert recipe.name == DEFAULT_RECIPE.name
            assert recipe.carrot_g == 400.0
        finally:
            Path(temp_path).unlink()

    def test_missing_file(self):
        with pytest.raises(FileNotFoundError):
            RecipeConfigLoader("/nonexistent/recipe.yaml").load()


def test_recipe_to_dict():
    data = recipe_to_dict(DEFAULT_RECIPE)
    assert data["carrots_g"] == 500.0
    assert data["milk_type"] == "full-fat"
    assert data["dry_fruits"][0] == {"name": "Almonds", "grams": 15.0, "category": "almond"}
