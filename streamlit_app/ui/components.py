"""
Recipe UI components.

Card grid, modal dialog, detail view and add/edit form. The modal is an
st.dialog; dismissing it with Escape, a backdrop click or its close button
runs ViewController.close(). Components that change state call the matching
ViewController method and then st.rerun() so the page re-renders from the
updated collection.
"""

import html
import re
from typing import List, Optional, Sequence

import streamlit as st

from recipe_explorer.forms import RecipeForm, ValidationError, validate_form
from recipe_explorer.models import Recipe
from recipe_explorer.view_state import ModalMode, ViewController
from streamlit_app.ui.feedback import show_empty_state, show_error, show_form_error

CARD_PLACEHOLDER_IMAGE = "https://via.placeholder.com/300x200.png?text=No+Image"
DETAIL_PLACEHOLDER_IMAGE = "https://via.placeholder.com/300x150.png?text=No+Image"

GRID_COLUMNS = 3
EMPTY_GRID_MESSAGE = "No recipes found. Try adding a new recipe!"
DELETE_PROMPT = "Delete this recipe?"

MODAL_TITLES = {
    ModalMode.VIEW: "Recipe",
    ModalMode.EDIT: "Edit Recipe",
    ModalMode.ADD: "Add Recipe",
}

_MARKDOWN_SPECIAL = re.compile(r"([\\`*_{}\[\]()#+\-.!|<>~$])")


def escape_markdown(text: str) -> str:
    """Backslash-escape markdown syntax so user text renders as typed."""
    return _MARKDOWN_SPECIAL.sub(r"\\\1", text)


def image_src(recipe: Recipe, placeholder: str = CARD_PLACEHOLDER_IMAGE) -> str:
    """
    Pick the image URL to render.

    Args:
        recipe: Recipe to render
        placeholder: URL used when the recipe has no usable http(s) image

    Returns:
        The recipe image URL, or the placeholder
    """
    image = (recipe.image or "").strip()
    if image.lower().startswith(("http://", "https://")):
        return image
    return placeholder


def image_html(recipe: Recipe, css_class: str, placeholder: str) -> str:
    """<img> tag that swaps to the placeholder if the URL fails to load."""
    src = html.escape(image_src(recipe, placeholder), quote=True)
    fallback = html.escape(placeholder, quote=True)
    alt = html.escape(recipe.title, quote=True)
    return (
        f'<img src="{src}" alt="{alt}" class="{css_class}" loading="lazy" '
        f"onerror=\"this.onerror=null;this.src='{fallback}';\" />"
    )


def tags_html(tags: Sequence[str]) -> str:
    return " ".join(f'<span class="rx-tag">{html.escape(tag)}</span>' for tag in tags)


def ingredient_summary(recipe: Recipe) -> str:
    return ", ".join(recipe.ingredients)


def render_recipe_card(recipe: Recipe) -> bool:
    """
    Render one recipe card.

    Returns:
        True if the card's "View" button was clicked
    """
    with st.container(border=True):
        st.markdown(image_html(recipe, "rx-recipe-thumb", CARD_PLACEHOLDER_IMAGE), unsafe_allow_html=True)
        st.markdown(f"### {escape_markdown(recipe.title)}")
        st.markdown(
            f'<div class="rx-ingredient-small">🧾 {html.escape(ingredient_summary(recipe))}</div>',
            unsafe_allow_html=True,
        )
        if recipe.tags:
            st.markdown(tags_html(recipe.tags), unsafe_allow_html=True)
        return st.button("View", key=f"view_recipe_{recipe.id}", width="stretch")


def render_recipe_grid(recipes: List[Recipe]) -> Optional[int]:
    """
    Render recipes as a grid of cards.

    Args:
        recipes: Recipes to show, already filtered

    Returns:
        Id of the recipe whose card was clicked, or None
    """
    if not recipes:
        show_empty_state(EMPTY_GRID_MESSAGE)
        return None

    clicked = None
    for row_start in range(0, len(recipes), GRID_COLUMNS):
        cols = st.columns(GRID_COLUMNS, gap="medium")
        for col, recipe in zip(cols, recipes[row_start:row_start + GRID_COLUMNS]):
            with col:
                if render_recipe_card(recipe):
                    clicked = recipe.id
    return clicked


def render_recipe_detail(controller: ViewController, recipe: Recipe) -> None:
    """Detail view with Edit / Delete / Close actions and delete confirmation."""
    st.markdown(image_html(recipe, "rx-detail-image", DETAIL_PLACEHOLDER_IMAGE), unsafe_allow_html=True)
    st.markdown(f"## {escape_markdown(recipe.title)}")
    if recipe.tags:
        st.markdown(tags_html(recipe.tags), unsafe_allow_html=True)

    st.markdown("#### Ingredients:")
    st.markdown("\n".join(f"- {escape_markdown(ingredient)}" for ingredient in recipe.ingredients))

    st.markdown("#### Instructions:")
    st.markdown(f'<pre class="rx-instructions">{html.escape(recipe.instructions)}</pre>', unsafe_allow_html=True)

    if controller.state.confirming_delete:
        st.warning(DELETE_PROMPT)
        col_yes, col_no = st.columns(2)
        with col_yes:
            if st.button("Yes, delete", key="confirm_delete_btn", type="primary", width="stretch"):
                try:
                    controller.delete_confirmed(recipe.id)
                except OSError as e:
                    show_error("Could not delete the recipe.", hint=str(e))
                    return
                st.toast(f"Deleted {recipe.title}")
                st.rerun()
        with col_no:
            if st.button("Keep recipe", key="cancel_delete_btn", width="stretch"):
                controller.cancel_delete()
                st.rerun()
        return

    col_edit, col_delete, col_close = st.columns(3)
    with col_edit:
        if st.button("Edit", key="edit_recipe_btn", width="stretch"):
            controller.open_edit(recipe.id)
            st.rerun()
    with col_delete:
        if st.button("Delete", key="delete_recipe_btn", width="stretch"):
            controller.request_delete()
            st.rerun()
    with col_close:
        if st.button("Close", key="close_detail_btn", width="stretch"):
            controller.close()
            st.rerun()


def render_recipe_form(controller: ViewController, recipe: Optional[Recipe]) -> None:
    """
    Add/edit form.

    Widget keys include the recipe id so a form opened for another recipe
    starts from that recipe's values. Cancel discards unsaved input.
    """
    initial = RecipeForm.from_recipe(recipe)
    key_prefix = f"recipe_form_{recipe.id if recipe else 'new'}"

    error_slot = st.empty()

    with st.form(key_prefix, clear_on_submit=False, border=False):
        title = st.text_input("Title:", value=initial.title, key=f"{key_prefix}_title")
        ingredients = st.text_input(
            "Ingredients (comma separated):", value=initial.ingredients, key=f"{key_prefix}_ingredients"
        )
        instructions = st.text_area(
            "Instructions:", value=initial.instructions, height=120, key=f"{key_prefix}_instructions"
        )
        image = st.text_input(
            "Image URL:", value=initial.image, placeholder="http://...", key=f"{key_prefix}_image"
        )
        tags = st.text_input(
            "Tags (comma separated):",
            value=initial.tags,
            placeholder="dessert, quick, vegan...",
            key=f"{key_prefix}_tags",
        )

        col_save, col_cancel = st.columns(2)
        with col_save:
            save_clicked = st.form_submit_button("Save", type="primary", width="stretch")
        with col_cancel:
            cancel_clicked = st.form_submit_button("Cancel", width="stretch")

    if cancel_clicked:
        controller.close()
        st.rerun()

    if save_clicked:
        form = RecipeForm(title=title, ingredients=ingredients, instructions=instructions, image=image, tags=tags)
        try:
            draft = validate_form(form)
        except ValidationError as e:
            with error_slot.container():
                show_form_error(e.message)
            return
        try:
            saved = controller.save(draft)
        except OSError as e:
            with error_slot.container():
                show_error("Could not save the recipe.", hint=str(e))
            return
        if saved is not None:
            st.toast(f"Saved {saved.title}")
        st.rerun()


def render_modal_body(controller: ViewController, mode: ModalMode) -> None:
    if mode == ModalMode.VIEW:
        render_recipe_detail(controller, controller.displayed_recipe)
    elif mode == ModalMode.EDIT:
        render_recipe_form(controller, controller.displayed_recipe)
    elif mode == ModalMode.ADD:
        render_recipe_form(controller, None)


def render_modal(controller: ViewController) -> None:
    """
    Open the modal dialog for the current modal mode, if any.

    The dialog stays open for as long as the controller is in a modal mode,
    because it is reopened on every rerun. Escape, a backdrop click and the
    dialog's own close button all call controller.close() through on_dismiss,
    which discards unsaved form input.
    """
    mode = controller.effective_modal_mode
    if mode == ModalMode.NONE:
        return

    dialog = st.dialog(MODAL_TITLES[mode], width="large", dismissible=True, on_dismiss=controller.close)
    dialog(render_modal_body)(controller, mode)
