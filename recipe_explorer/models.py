"""
Recipe models for Recipe Explorer.

This module defines the one persisted entity of the app. RecipeDraft is what the
add/edit form produces; Recipe is a draft that has been given an id by the
repository. Both are pydantic models so that anything read back from storage is
checked against a fixed schema instead of being trusted as a free-form dict.

Stored JSON shape (one entry of the persisted array):
- id: number
- title, instructions: strings
- image: string or null
- ingredients, tags: arrays of strings
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RecipeDraft(BaseModel):
    """
    A recipe without an id.

    Required: title, ingredients (at least one), instructions.
    Optional: image (URL string), tags (may be empty).
    """
    model_config = ConfigDict(extra="ignore", frozen=True)

    title: str = Field(..., description="Recipe name", json_schema_extra={"example": "Guacamole"})
    ingredients: List[str] = Field(
        ...,
        min_length=1,
        description="Ordered ingredient names",
        json_schema_extra={"example": ["avocado", "lime", "salt"]},
    )
    instructions: str = Field(..., description="Free-text preparation steps")
    image: Optional[str] = Field(None, description="Image URL; None when absent")
    tags: List[str] = Field(default_factory=list, description="Lower-cased tags")

    @field_validator("title", "instructions")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("ingredients", "tags")
    @classmethod
    def _no_blank_entries(cls, values: List[str]) -> List[str]:
        if any(not v.strip() for v in values):
            raise ValueError("entries must not be blank")
        return values

    @field_validator("image", mode="before")
    @classmethod
    def _blank_image_is_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class Recipe(RecipeDraft):
    """A stored recipe. `id` is unique within the collection."""

    id: int = Field(..., description="Collection-unique integer id")

    @classmethod
    def from_draft(cls, draft: RecipeDraft, recipe_id: int) -> "Recipe":
        return cls(id=recipe_id, **draft.model_dump())

    def to_draft(self) -> RecipeDraft:
        return RecipeDraft(**self.model_dump(exclude={"id"}))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the stored JSON shape."""
        return self.model_dump(mode="json")
