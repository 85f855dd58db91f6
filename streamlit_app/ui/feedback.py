"""
Standardized feedback utilities for error and empty states.

Provides the inline form error, general error, and empty-grid components used
on the recipe page.
"""

from typing import Optional

import streamlit as st


def show_error(message: str, hint: Optional[str] = None) -> None:
    """
    Display a standardized error message with optional hint.

    Args:
        message: Main error message to display
        hint: Optional hint text to help users resolve the issue
    """
    st.error(f"⚠️ {message}")
    if hint:
        st.caption(f"💡 {hint}")


def show_form_error(message: str) -> None:
    """Inline validation message shown above the add/edit form."""
    st.error(message)


def show_empty_state(title: str, subtitle: Optional[str] = None) -> None:
    """
    Display a standardized empty state.

    Args:
        title: Main empty state text
        subtitle: Optional caption below it
    """
    st.markdown(f'<div class="rx-empty-hint">{title}</div>', unsafe_allow_html=True)
    if subtitle:
        st.caption(subtitle)
