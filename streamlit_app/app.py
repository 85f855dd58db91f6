"""
Recipe Explorer - Streamlit Frontend Main Entry Point.

Single-page recipe browser: search, view, add, edit and delete recipes kept in
local storage, with a light/dark theme toggle.

Run with:
    streamlit run streamlit_app/app.py
"""

import sys
from pathlib import Path

# Add project root to path so `recipe_explorer` and `streamlit_app` import
# regardless of how the app is run
project_root = Path(__file__).resolve().parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Import config early to load .env before anything reads environment variables
from recipe_explorer.config import configure_logging

import streamlit as st

from recipe_explorer.search import filter_recipes
from streamlit_app.ui.styles import load_global_styles
from streamlit_app.ui.layout import render_navbar, render_top_bar, render_search_bar, render_footer
from streamlit_app.ui.components import render_modal, render_recipe_grid
from streamlit_app.utils.state import get_controller

# Page configuration - must be called before any other Streamlit commands
st.set_page_config(
    page_title="Recipe Explorer",
    page_icon="🍽️",
    layout="wide",
    initial_sidebar_state="collapsed",
)

configure_logging()

controller = get_controller()

load_global_styles(controller.state.theme)

if render_navbar(controller.state.theme):
    controller.toggle_theme()
    st.rerun()

if render_top_bar():
    controller.open_add()
    st.rerun()

query = render_search_bar()

# Modal panel sits above the grid
render_modal(controller)

clicked_id = render_recipe_grid(filter_recipes(controller.repository.recipes, query))
if clicked_id is not None:
    controller.open_view(clicked_id)
    st.rerun()

render_footer()
