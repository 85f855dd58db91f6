"""
Layout primitives for the recipe page.

Navbar, top bar, search bar and footer. Each render function returns whether
its control was used so app.py can apply the matching transition.
"""

from datetime import date

import streamlit as st

from recipe_explorer.view_state import Theme

APP_TITLE = "Recipe Explorer"
SEARCH_KEY = "recipe_search"
SEARCH_PLACEHOLDER = "Search recipes, ingredients, tags..."


def theme_toggle_label(theme: Theme) -> str:
    """Label for the theme button: it names the theme you would switch to."""
    return "🌙 Dark" if theme == Theme.LIGHT else "☀️ Light"


def render_navbar(theme: Theme) -> bool:
    """
    Render the navigation bar with app title and theme toggle.

    Args:
        theme: Current theme (decides the toggle label)

    Returns:
        True if the theme toggle was clicked in this run
    """
    col_title, col_toggle = st.columns([5, 1])
    with col_title:
        st.markdown(f'<div class="rx-navbar">🍽️ {APP_TITLE}</div>', unsafe_allow_html=True)
    with col_toggle:
        return st.button(theme_toggle_label(theme), key="theme_toggle_btn", width="stretch")


def render_top_bar() -> bool:
    """
    Render the page heading and the add button.

    Returns:
        True if "Add Recipe" was clicked in this run
    """
    col_heading, col_add = st.columns([5, 1])
    with col_heading:
        st.markdown(f"# {APP_TITLE}")
    with col_add:
        return st.button("＋ Add Recipe", key="add_recipe_btn", type="primary", width="stretch")


def render_search_bar() -> str:
    """
    Render the free-text search input.

    Returns:
        Current query text (may be empty)
    """
    return st.text_input(
        "Search",
        key=SEARCH_KEY,
        placeholder=SEARCH_PLACEHOLDER,
        label_visibility="collapsed",
    )


def render_footer() -> None:
    st.markdown(
        f'<div class="rx-footer">{APP_TITLE} &copy; {date.today().year} | Modern, Monochrome Theme</div>',
        unsafe_allow_html=True,
    )
