"""
Recipe Repository Module.

The collection is an ordered tuple of Recipe objects. The module-level functions
are pure transitions: each takes a collection and returns a new one, without
touching storage. RecipeRepository holds the current collection for a session
and writes it through RecipeStorage after every successful mutation.

Ordering rules:
- add prepends (most recent first)
- update keeps position and id
- remove drops the entry with the matching id
"""

import logging
from typing import Optional, Sequence, Tuple

from recipe_explorer.models import Recipe, RecipeDraft
from recipe_explorer.storage import RecipeStorage

logger = logging.getLogger(__name__)

Recipes = Tuple[Recipe, ...]


class RecipeNotFoundError(KeyError):
    """No recipe with the given id exists in the collection."""

    def __init__(self, recipe_id: int):
        super().__init__(recipe_id)
        self.recipe_id = recipe_id

    def __str__(self) -> str:
        return f"Recipe {self.recipe_id} not found"


def next_recipe_id(recipes: Sequence[Recipe]) -> int:
    """
    Compute the id for a new recipe.

    Args:
        recipes: Current collection

    Returns:
        max(existing ids, 0) + 1
    """
    return max((r.id for r in recipes), default=0) + 1


def find_recipe(recipes: Sequence[Recipe], recipe_id: int) -> Optional[Recipe]:
    for recipe in recipes:
        if recipe.id == recipe_id:
            return recipe
    return None


def add_recipe(recipes: Sequence[Recipe], draft: RecipeDraft) -> Tuple[Recipes, Recipe]:
    """
    Prepend a new recipe built from draft.

    Returns:
        (new collection, stored recipe)
    """
    recipe = Recipe.from_draft(draft, next_recipe_id(recipes))
    return (recipe, *recipes), recipe


def update_recipe(recipes: Sequence[Recipe], recipe_id: int, draft: RecipeDraft) -> Tuple[Recipes, Recipe]:
    """
    Replace the recipe with recipe_id by draft, keeping its id and position.

    Raises:
        RecipeNotFoundError: If no recipe has recipe_id
    """
    if find_recipe(recipes, recipe_id) is None:
        raise RecipeNotFoundError(recipe_id)
    updated = Recipe.from_draft(draft, recipe_id)
    return tuple(updated if r.id == recipe_id else r for r in recipes), updated


def remove_recipe(recipes: Sequence[Recipe], recipe_id: int) -> Recipes:
    """
    Drop the recipe with recipe_id.

    Raises:
        RecipeNotFoundError: If no recipe has recipe_id
    """
    if find_recipe(recipes, recipe_id) is None:
        raise RecipeNotFoundError(recipe_id)
    return tuple(r for r in recipes if r.id != recipe_id)


class RecipeRepository:
    """
    In-memory recipe collection with write-through persistence.

    The collection is loaded once when the repository is created. Each
    mutation computes the new collection, replaces the in-memory copy and saves
    the full collection. Failed mutations change nothing.
    """

    def __init__(self, storage: RecipeStorage):
        self.storage = storage
        self._recipes: Recipes = tuple(storage.load())
        logger.info(f"Loaded {len(self._recipes)} recipe(s)")

    @property
    def recipes(self) -> Recipes:
        return self._recipes

    def _commit(self, recipes: Recipes) -> None:
        # Save first so a failed write leaves the in-memory copy untouched
        self.storage.save(recipes)
        self._recipes = recipes

    def find_by_id(self, recipe_id: int) -> Optional[Recipe]:
        return find_recipe(self._recipes, recipe_id)

    def add(self, draft: RecipeDraft) -> Recipe:
        recipes, recipe = add_recipe(self._recipes, draft)
        self._commit(recipes)
        logger.info(f"Added recipe {recipe.id}: {recipe.title}")
        return recipe

    def update(self, recipe_id: int, draft: RecipeDraft) -> Recipe:
        recipes, recipe = update_recipe(self._recipes, recipe_id, draft)
        self._commit(recipes)
        logger.info(f"Updated recipe {recipe.id}: {recipe.title}")
        return recipe

    def remove(self, recipe_id: int) -> None:
        recipes = remove_recipe(self._recipes, recipe_id)
        self._commit(recipes)
        logger.info(f"Removed recipe {recipe_id}")
