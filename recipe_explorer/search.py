"""
Recipe search.

filter_recipes() is the only filter the app has: a case-insensitive substring
match over title, ingredients and tags. It is pure and keeps input order.
"""

from typing import List, Optional, Sequence

from recipe_explorer.models import Recipe


def recipe_matches(recipe: Recipe, query_lower: str) -> bool:
    """
    Check one recipe against an already lower-cased query.

    Ingredients and tags are joined with spaces before matching, so a query can
    span two neighbouring entries (e.g. "egg pancetta").
    """
    return (
        query_lower in recipe.title.lower()
        or query_lower in " ".join(recipe.ingredients).lower()
        or query_lower in " ".join(recipe.tags).lower()
    )


def filter_recipes(recipes: Sequence[Recipe], query: Optional[str]) -> List[Recipe]:
    """
    Filter recipes by a free-text query.

    Args:
        recipes: Collection to filter
        query: Search text. None, empty or whitespace-only returns everything.

    Returns:
        Matching recipes in their original order
    """
    if not query or not query.strip():
        return list(recipes)

    query_lower = query.strip().lower()
    return [r for r in recipes if recipe_matches(r, query_lower)]
