"""
Global CSS Styling for Recipe Explorer.

This module provides load_global_styles(theme) to inject the page styling. The
light and dark themes share one stylesheet driven by CSS variables; switching
theme only swaps the variable block, which plays the role of a global
data-theme attribute.
"""

from typing import Dict

import streamlit as st

from recipe_explorer.view_state import Theme

THEME_VARIABLES: Dict[Theme, Dict[str, str]] = {
    Theme.LIGHT: {
        "--bg-primary": "#ffffff",
        "--bg-secondary": "#f4f4f4",
        "--text-primary": "#111111",
        "--text-secondary": "#555555",
        "--border-color": "#dddddd",
        "--accent": "#222222",
        "--tag-bg": "#ececec",
        "--error": "#b00020",
    },
    Theme.DARK: {
        "--bg-primary": "#121212",
        "--bg-secondary": "#1e1e1e",
        "--text-primary": "#f2f2f2",
        "--text-secondary": "#aaaaaa",
        "--border-color": "#333333",
        "--accent": "#eeeeee",
        "--tag-bg": "#2a2a2a",
        "--error": "#ff6b81",
    },
}


def theme_css_variables(theme: Theme) -> str:
    """
    Build the :root variable block for a theme.

    Args:
        theme: Theme to render

    Returns:
        CSS text like ":root { --bg-primary: #fff; ... }"
    """
    declarations = " ".join(f"{name}: {value};" for name, value in THEME_VARIABLES[theme].items())
    return f":root {{ {declarations} }}"


def load_global_styles(theme: Theme) -> None:
    """
    Inject global CSS for the given theme.

    Covers the app background and text colours, the navbar, recipe cards and
    thumbnails, tag chips, the modal panel, and the footer.
    """
    css = f"""
    <style>
        {theme_css_variables(theme)}

        .stApp, [data-testid="stAppViewContainer"], [data-testid="stHeader"] {{
            background: var(--bg-primary) !important;
            color: var(--text-primary) !important;
        }}

        .stApp p, .stApp li, .stApp label, .stApp h1, .stApp h2, .stApp h3, .stApp h4 {{
            color: var(--text-primary) !important;
        }}

        .main .block-container {{
            max-width: 1200px !important;
        }}

        /* Navbar */
        .rx-navbar {{
            display: flex;
            align-items: center;
            font-size: 1.4rem;
            font-weight: 700;
            padding: 0.5rem 0;
        }}

        /* Cards */
        .rx-recipe-thumb {{
            width: 100%;
            height: 180px;
            object-fit: cover;
            border-radius: 12px;
            background: #eeeeee;
        }}

        .rx-detail-image {{
            width: 100%;
            max-height: 260px;
            object-fit: cover;
            border-radius: 12px;
            background: #eeeeee;
        }}

        .rx-ingredient-small {{
            color: var(--text-secondary);
            font-size: 0.9rem;
            margin: 0.25rem 0 0.5rem 0;
        }}

        /* Tag chips */
        .rx-tag {{
            display: inline-block;
            padding: 0.15rem 0.6rem;
            margin: 0 0.25rem 0.25rem 0;
            border-radius: 999px;
            background: var(--tag-bg);
            color: var(--text-primary);
            font-size: 0.75rem;
            font-weight: 600;
        }}

        /* Detail instructions */
        .rx-instructions {{
            white-space: pre-wrap;
            background: var(--bg-secondary);
            border: 1px solid var(--border-color);
            border-radius: 8px;
            padding: 0.75rem;
            font-family: inherit;
        }}

        .rx-empty-hint {{
            color: var(--text-secondary);
            text-align: center;
            padding: 2rem 0;
        }}

        /* Footer */
        .rx-footer {{
            margin-top: 3rem;
            padding: 1.5rem 0;
            text-align: center;
            color: var(--text-secondary);
            border-top: 1px solid var(--border-color);
            font-size: 0.85rem;
        }}
    </style>
    """
    st.markdown(css, unsafe_allow_html=True)
