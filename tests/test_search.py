"""
Tests for recipe filtering.

This module tests filter_recipes() over title, ingredients and tags, including
the identity and idempotence properties.
"""

import pytest

from recipe_explorer.demo_data import get_demo_recipes
from recipe_explorer.models import Recipe
from recipe_explorer.search import filter_recipes, recipe_matches


@pytest.fixture
def recipes():
    return get_demo_recipes() + [
        Recipe(
            id=3,
            title="Green Tea",
            ingredients=["Water", "Tea Leaves"],
            instructions="Boil. Steep.",
            tags=["drink"],
        ),
    ]


def titles(recipes):
    return [r.title for r in recipes]


class TestFilterRecipes:
    """Test cases for filter_recipes."""

    @pytest.mark.parametrize("query", ["", "   ", None])
    def test_empty_query_returns_everything(self, recipes, query):
        assert filter_recipes(recipes, query) == recipes

    def test_matches_title_case_insensitive(self, recipes):
        assert titles(filter_recipes(recipes, "GUAC")) == ["Guacamole"]

    def test_matches_ingredient(self, recipes):
        assert titles(filter_recipes(recipes, "pancetta")) == ["Classic Spaghetti Carbonara"]

    def test_matches_tag(self, recipes):
        assert titles(filter_recipes(recipes, "vegan")) == ["Guacamole"]

    def test_matches_across_joined_ingredients(self, recipes):
        """Test that a query spanning two ingredients matches the space-joined list."""
        assert titles(filter_recipes(recipes, "egg pancetta")) == ["Classic Spaghetti Carbonara"]

    def test_query_is_trimmed(self, recipes):
        assert titles(filter_recipes(recipes, "  tea leaves ")) == ["Green Tea"]

    def test_keeps_order(self, recipes):
        # "a" appears in every recipe
        assert titles(filter_recipes(recipes, "a")) == titles(recipes)

    def test_no_match(self, recipes):
        assert filter_recipes(recipes, "sushi") == []

    @pytest.mark.parametrize("query", ["tea", "an", "mexican", "zzz", ""])
    def test_idempotent(self, recipes, query):
        once = filter_recipes(recipes, query)
        assert filter_recipes(once, query) == once

    @pytest.mark.parametrize("query", ["tea", "an", "to", "italian"])
    def test_every_result_matches(self, recipes, query):
        for recipe in filter_recipes(recipes, query):
            assert recipe_matches(recipe, query.lower())

    def test_does_not_mutate_input(self, recipes):
        before = list(recipes)
        filter_recipes(recipes, "tea")
        assert recipes == before

    def test_accepts_tuple(self, recipes):
        assert filter_recipes(tuple(recipes), "") == recipes
