"""
Recipe Explorer Session State Module.

This module wraps Streamlit's session_state to hold one ViewController per
browser session. The controller owns the session's RecipeRepository (loaded
once, on first access) and the current ViewState.

# NOTE: The recipe collection is persisted to the local storage file, so it
    survives page refreshes. The view state (selection, modal, theme) lives only
    in session_state and resets to a closed modal and the light theme when a
    new session starts.
"""

from typing import Optional

import streamlit as st

from recipe_explorer.config import StorageConfig
from recipe_explorer.repository import RecipeRepository
from recipe_explorer.storage import JsonFileStore, KeyValueStore, RecipeStorage
from recipe_explorer.view_state import ViewController

# Session state key for the controller
CONTROLLER_KEY = "view_controller"


def build_repository(store: Optional[KeyValueStore] = None) -> RecipeRepository:
    """
    Create a repository on top of the given store.

    Args:
        store: Key-value store to use. Defaults to a JsonFileStore at the
               configured storage path.

    Returns:
        RecipeRepository with the collection already loaded
    """
    if store is None:
        store = JsonFileStore(StorageConfig.get_storage_path())
    return RecipeRepository(RecipeStorage(store))


def init_controller() -> None:
    """Ensure the controller exists in session state."""
    if CONTROLLER_KEY not in st.session_state:
        st.session_state[CONTROLLER_KEY] = ViewController(build_repository())


def get_controller() -> ViewController:
    """
    Get the session's ViewController.

    Automatically creates it (and loads the collection) on first access.
    """
    init_controller()
    return st.session_state[CONTROLLER_KEY]


def reset_controller() -> None:
    """Drop the session's controller so the next access reloads from storage."""
    st.session_state.pop(CONTROLLER_KEY, None)
