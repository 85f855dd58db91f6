"""
Add/Edit form handling.

RecipeForm holds the raw text of the form fields as the user typed them.
validate_form() turns it into a RecipeDraft or raises ValidationError with the
message shown inline above the form. Only presence is checked.
"""

from dataclasses import dataclass
from typing import List, Optional

from recipe_explorer.models import Recipe, RecipeDraft

TITLE_REQUIRED = "Title is required"
INGREDIENTS_REQUIRED = "At least one ingredient required"
INSTRUCTIONS_REQUIRED = "Instructions required"


class ValidationError(ValueError):
    """A form field failed its presence check."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message


@dataclass
class RecipeForm:
    """
    Raw form input.

    Attributes:
        title: Title text
        ingredients: Comma-separated ingredients
        instructions: Instructions text
        image: Image URL text (may be empty)
        tags: Comma-separated tags (may be empty)
    """
    title: str = ""
    ingredients: str = ""
    instructions: str = ""
    image: str = ""
    tags: str = ""

    @classmethod
    def from_recipe(cls, recipe: Optional[Recipe]) -> "RecipeForm":
        """Prefill from an existing recipe, or return an empty form for None."""
        if recipe is None:
            return cls()
        return cls(
            title=recipe.title,
            ingredients=", ".join(recipe.ingredients),
            instructions=recipe.instructions,
            image=recipe.image or "",
            tags=", ".join(recipe.tags),
        )


def split_comma_list(text: Optional[str], lower: bool = False) -> List[str]:
    """
    Split comma-separated text into trimmed, non-empty entries.

    Args:
        text: Raw text, e.g. "water, tea leaves,"
        lower: Lower-case each entry

    Returns:
        List of entries in input order
    """
    if not text:
        return []
    parts = (p.strip() for p in text.split(","))
    return [p.lower() if lower else p for p in parts if p]


def validate_form(form: RecipeForm) -> RecipeDraft:
    """
    Validate form input and build a draft.

    Raises:
        ValidationError: On the first missing required field (title, then
            ingredients, then instructions)
    """
    if not form.title.strip():
        raise ValidationError("title", TITLE_REQUIRED)

    ingredients = split_comma_list(form.ingredients)
    if not ingredients:
        raise ValidationError("ingredients", INGREDIENTS_REQUIRED)

    if not form.instructions.strip():
        raise ValidationError("instructions", INSTRUCTIONS_REQUIRED)

    return RecipeDraft(
        title=form.title.strip(),
        ingredients=ingredients,
        instructions=form.instructions,
        image=form.image.strip() or None,
        tags=split_comma_list(form.tags, lower=True),
    )
