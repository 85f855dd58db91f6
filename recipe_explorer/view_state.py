"""
View State Module.

ViewState is an immutable value describing what the page shows:
- selected_id: id of the recipe the modal is about (None for add / closed)
- modal_mode: none | view | edit | add
- theme: light | dark
- confirming_delete: the detail view is asking "Delete this recipe?"

Transitions are pure functions returning a new ViewState. ViewController pairs
the current state with a RecipeRepository and performs the side effects (save,
delete) that some transitions imply.

The theme is session-only: a new session always starts light.
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from recipe_explorer.models import Recipe, RecipeDraft
from recipe_explorer.repository import RecipeNotFoundError, RecipeRepository

logger = logging.getLogger(__name__)


class ModalMode(str, Enum):
    NONE = "none"
    VIEW = "view"
    EDIT = "edit"
    ADD = "add"


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"


@dataclass(frozen=True)
class ViewState:
    selected_id: Optional[int] = None
    modal_mode: ModalMode = ModalMode.NONE
    theme: Theme = Theme.LIGHT
    confirming_delete: bool = False


def open_view(state: ViewState, recipe_id: int) -> ViewState:
    return replace(state, selected_id=recipe_id, modal_mode=ModalMode.VIEW, confirming_delete=False)


def open_edit(state: ViewState, recipe_id: int) -> ViewState:
    return replace(state, selected_id=recipe_id, modal_mode=ModalMode.EDIT, confirming_delete=False)


def open_add(state: ViewState) -> ViewState:
    return replace(state, selected_id=None, modal_mode=ModalMode.ADD, confirming_delete=False)


def close(state: ViewState) -> ViewState:
    return replace(state, selected_id=None, modal_mode=ModalMode.NONE, confirming_delete=False)


def toggle_theme(state: ViewState) -> ViewState:
    theme = Theme.DARK if state.theme == Theme.LIGHT else Theme.LIGHT
    return replace(state, theme=theme)


def request_delete(state: ViewState) -> ViewState:
    """Ask for delete confirmation. Only meaningful while viewing a recipe."""
    if state.modal_mode != ModalMode.VIEW:
        return state
    return replace(state, confirming_delete=True)


def cancel_delete(state: ViewState) -> ViewState:
    return replace(state, confirming_delete=False)


class ViewController:
    """
    Current ViewState plus the repository it acts on.

    The state attribute is replaced wholesale on every transition; it is never
    mutated in place.
    """

    def __init__(self, repository: RecipeRepository, state: Optional[ViewState] = None):
        self.repository = repository
        self.state = state or ViewState()

    @property
    def displayed_recipe(self) -> Optional[Recipe]:
        """Recipe for the current selection, or None."""
        if self.state.selected_id is None:
            return None
        return self.repository.find_by_id(self.state.selected_id)

    @property
    def effective_modal_mode(self) -> ModalMode:
        """
        Modal mode to render.

        view/edit collapse to none when the selected recipe no longer exists,
        so a detail view or edit form is never shown without a recipe.
        """
        mode = self.state.modal_mode
        if mode in (ModalMode.VIEW, ModalMode.EDIT) and self.displayed_recipe is None:
            return ModalMode.NONE
        return mode

    def _open(self, recipe_id: int, mode: ModalMode) -> None:
        if self.repository.find_by_id(recipe_id) is None:
            logger.warning(f"Cannot open {mode.value} for unknown recipe {recipe_id}")
            self.close()
            return
        if mode == ModalMode.VIEW:
            self.state = open_view(self.state, recipe_id)
        else:
            self.state = open_edit(self.state, recipe_id)

    def open_view(self, recipe_id: int) -> None:
        self._open(recipe_id, ModalMode.VIEW)

    def open_edit(self, recipe_id: int) -> None:
        self._open(recipe_id, ModalMode.EDIT)

    def open_add(self) -> None:
        self.state = open_add(self.state)

    def close(self) -> None:
        self.state = close(self.state)

    def toggle_theme(self) -> None:
        self.state = toggle_theme(self.state)

    def request_delete(self) -> None:
        self.state = request_delete(self.state)

    def cancel_delete(self) -> None:
        self.state = cancel_delete(self.state)

    def save(self, draft: RecipeDraft) -> Optional[Recipe]:
        """
        Persist a validated draft according to the current modal mode.

        edit updates the selected recipe, add creates a new one. The modal is
        closed afterwards in both cases.

        Returns:
            The stored Recipe, or None if there was nothing to save (no form
            open, or the edited recipe disappeared)
        """
        mode = self.state.modal_mode
        saved = None
        try:
            if mode == ModalMode.EDIT and self.state.selected_id is not None:
                saved = self.repository.update(self.state.selected_id, draft)
            elif mode == ModalMode.ADD:
                saved = self.repository.add(draft)
            else:
                logger.warning(f"save() called with modal mode '{mode.value}', ignoring")
        except RecipeNotFoundError as e:
            logger.warning(f"Could not save edit: {e}")
        self.close()
        return saved

    def delete_confirmed(self, recipe_id: int) -> None:
        """Remove the recipe (caller has confirmed) and close the modal."""
        try:
            self.repository.remove(recipe_id)
        except RecipeNotFoundError as e:
            logger.warning(f"Could not delete: {e}")
        self.close()
