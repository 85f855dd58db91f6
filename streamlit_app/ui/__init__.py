"""
UI Styling and Components Module.

This module provides global CSS styling, page layout pieces, and the recipe
components for the Recipe Explorer Streamlit app.
"""

from streamlit_app.ui.styles import load_global_styles
from streamlit_app.ui.layout import render_navbar, render_top_bar, render_search_bar, render_footer
from streamlit_app.ui.components import render_modal, render_recipe_grid

__all__ = [
    "load_global_styles",
    "render_navbar",
    "render_top_bar",
    "render_search_bar",
    "render_footer",
    "render_modal",
    "render_recipe_grid",
]
