"""
Tests for add/edit form validation.

This module tests validate_form() presence checks and the comma-separated
parsing of ingredients and tags.
"""

import pytest

from recipe_explorer.forms import (
    INGREDIENTS_REQUIRED,
    INSTRUCTIONS_REQUIRED,
    TITLE_REQUIRED,
    RecipeForm,
    ValidationError,
    split_comma_list,
    validate_form,
)
from recipe_explorer.models import Recipe


class TestSplitCommaList:
    """Test cases for split_comma_list."""

    def test_trims_and_drops_empty(self):
        assert split_comma_list(" water, tea leaves ,, ") == ["water", "tea leaves"]

    def test_lower(self):
        assert split_comma_list("Dessert, QUICK", lower=True) == ["dessert", "quick"]

    @pytest.mark.parametrize("text", ["", None, " , ,"])
    def test_empty(self, text):
        assert split_comma_list(text) == []


class TestValidateForm:
    """Test cases for validate_form."""

    def test_tea_scenario(self):
        draft = validate_form(RecipeForm(
            title="Tea",
            ingredients="water, tea leaves",
            instructions="Boil. Steep.",
        ))

        assert draft.title == "Tea"
        assert draft.ingredients == ["water", "tea leaves"]
        assert draft.instructions == "Boil. Steep."
        assert draft.image is None
        assert draft.tags == []

    def test_tags_lower_cased(self):
        draft = validate_form(RecipeForm(
            title="Tea",
            ingredients="water",
            instructions="Boil.",
            tags="Drink, Hot ,",
            image=" https://example.com/tea.jpg ",
        ))

        assert draft.tags == ["drink", "hot"]
        assert draft.image == "https://example.com/tea.jpg"

    def test_empty_title(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_form(RecipeForm(title="  ", ingredients="water", instructions="Boil."))

        assert exc_info.value.field == "title"
        assert str(exc_info.value) == TITLE_REQUIRED == "Title is required"

    def test_empty_ingredients(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_form(RecipeForm(title="Tea", ingredients=" ", instructions="Boil."))
        assert exc_info.value.message == INGREDIENTS_REQUIRED

    def test_ingredients_with_only_commas(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_form(RecipeForm(title="Tea", ingredients=", ,", instructions="Boil."))
        assert exc_info.value.field == "ingredients"

    def test_empty_instructions(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_form(RecipeForm(title="Tea", ingredients="water", instructions="\n"))
        assert exc_info.value.message == INSTRUCTIONS_REQUIRED

    def test_first_failure_wins(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_form(RecipeForm())
        assert exc_info.value.field == "title"


class TestRecipeFormPrefill:
    """Test cases for RecipeForm.from_recipe."""

    def test_none_gives_empty_form(self):
        assert RecipeForm.from_recipe(None) == RecipeForm()

    def test_prefill_round_trips_through_validation(self):
        recipe = Recipe(
            id=4,
            title="Guacamole",
            ingredients=["avocado", "lime"],
            instructions="Mash.",
            image=None,
            tags=["mexican", "vegan"],
        )
        form = RecipeForm.from_recipe(recipe)

        assert form.ingredients == "avocado, lime"
        assert form.tags == "mexican, vegan"
        assert form.image == ""
        assert validate_form(form) == recipe.to_draft()
