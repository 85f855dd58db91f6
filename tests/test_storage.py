"""
Tests for the key-value stores and RecipeStorage.

These tests verify that:
- Empty, corrupt or non-array storage falls back to the demo recipes and persists them
- Entries failing the schema are dropped without failing the load
- save() followed by load() returns the same collection
- JsonFileStore survives a missing or corrupt file
- A failed write is logged, re-raised and leaves no temp file
"""

import json
import logging

import pytest

from recipe_explorer.demo_data import get_demo_recipes
from recipe_explorer.models import Recipe
from recipe_explorer import storage as storage_module
from recipe_explorer.storage import (
    STORAGE_KEY,
    InMemoryStore,
    JsonFileStore,
    RecipeStorage,
)

DEMO_TITLES = ["Classic Spaghetti Carbonara", "Guacamole"]


def make_recipe(recipe_id, title="Tea", **overrides):
    data = {
        "id": recipe_id,
        "title": title,
        "ingredients": ["water", "tea leaves"],
        "instructions": "Boil. Steep.",
        "image": None,
        "tags": [],
    }
    data.update(overrides)
    return Recipe(**data)


class TestRecipeStorageLoad:
    """Test cases for RecipeStorage.load()."""

    def test_empty_storage_seeds_demo_data(self):
        """Test that empty storage returns the two demo recipes and persists them."""
        store = InMemoryStore()
        storage = RecipeStorage(store)

        recipes = storage.load()

        assert [r.title for r in recipes] == DEMO_TITLES
        stored = json.loads(store.get_item(STORAGE_KEY))
        assert [r["title"] for r in stored] == DEMO_TITLES

    def test_corrupt_blob_falls_back_to_demo(self):
        store = InMemoryStore({STORAGE_KEY: "{not json"})
        recipes = RecipeStorage(store).load()

        assert [r.title for r in recipes] == DEMO_TITLES
        # The corrupt blob is replaced
        assert json.loads(store.get_item(STORAGE_KEY))[0]["id"] == 1

    def test_non_array_blob_falls_back_to_demo(self):
        store = InMemoryStore({STORAGE_KEY: json.dumps({"id": 1})})
        assert [r.title for r in RecipeStorage(store).load()] == DEMO_TITLES

    def test_empty_array_falls_back_to_demo(self):
        store = InMemoryStore({STORAGE_KEY: "[]"})
        assert [r.title for r in RecipeStorage(store).load()] == DEMO_TITLES

    def test_invalid_entries_are_dropped(self):
        good = make_recipe(5).to_dict()
        blob = json.dumps([good, {"title": "no id"}, 42, {**good, "title": ""}])
        store = InMemoryStore({STORAGE_KEY: blob})

        recipes = RecipeStorage(store).load()

        assert recipes == [make_recipe(5)]

    def test_duplicate_ids_keep_first(self):
        first = make_recipe(1, title="First").to_dict()
        second = make_recipe(1, title="Second").to_dict()
        store = InMemoryStore({STORAGE_KEY: json.dumps([first, second])})

        recipes = RecipeStorage(store).load()

        assert [r.title for r in recipes] == ["First"]

    def test_load_never_raises_on_garbage(self):
        store = InMemoryStore({STORAGE_KEY: "null"})
        assert len(RecipeStorage(store).load()) == 2


class TestRecipeStorageSave:
    """Test cases for RecipeStorage.save()."""

    def test_round_trip(self):
        """Test that load(save(C)) == C for a well-formed collection."""
        storage = RecipeStorage(InMemoryStore())
        recipes = [
            make_recipe(3, title="Tea", tags=["drink"], image="https://example.com/tea.jpg"),
            make_recipe(1, title="Toast"),
        ]

        storage.save(recipes)

        assert storage.load() == recipes

    def test_save_overwrites(self):
        store = InMemoryStore()
        storage = RecipeStorage(store)
        storage.save([make_recipe(1)])
        storage.save([make_recipe(2, title="Coffee")])

        stored = json.loads(store.get_item(STORAGE_KEY))
        assert [r["id"] for r in stored] == [2]

    def test_custom_key(self):
        store = InMemoryStore()
        RecipeStorage(store, key="other").save([make_recipe(1)])

        assert store.get_item(STORAGE_KEY) is None
        assert store.get_item("other") is not None

    def test_demo_data_round_trips(self):
        storage = RecipeStorage(InMemoryStore())
        storage.save(get_demo_recipes())
        assert storage.load() == get_demo_recipes()


class TestJsonFileStore:
    """Test cases for JsonFileStore."""

    def test_missing_file_reads_empty(self, tmp_path):
        store = JsonFileStore(tmp_path / "missing.json")
        assert store.get_item("recipes") is None

    def test_set_and_get(self, tmp_path):
        path = tmp_path / "nested" / "storage.json"
        store = JsonFileStore(path)

        store.set_item("recipes", "[]")
        store.set_item("other", "x")

        assert path.exists()
        assert JsonFileStore(path).get_item("recipes") == "[]"
        assert json.loads(path.read_text(encoding="utf-8")) == {"recipes": "[]", "other": "x"}

    def test_remove_item(self, tmp_path):
        store = JsonFileStore(tmp_path / "storage.json")
        store.set_item("recipes", "[]")
        store.remove_item("recipes")
        store.remove_item("never-set")

        assert store.get_item("recipes") is None

    def test_corrupt_file_reads_empty(self, tmp_path):
        path = tmp_path / "storage.json"
        path.write_text("not json", encoding="utf-8")

        assert JsonFileStore(path).get_item("recipes") is None

    def test_non_object_file_reads_empty(self, tmp_path):
        path = tmp_path / "storage.json"
        path.write_text("[1, 2]", encoding="utf-8")

        assert JsonFileStore(path).get_item("recipes") is None

    def test_recipe_storage_on_file(self, tmp_path):
        """Test that demo data seeded on one store instance is seen by another."""
        path = tmp_path / "storage.json"
        RecipeStorage(JsonFileStore(path)).load()

        recipes = RecipeStorage(JsonFileStore(path)).load()
        assert [r.title for r in recipes] == DEMO_TITLES

    def test_failed_write_is_logged_and_cleaned_up(self, tmp_path, monkeypatch, caplog):
        """Test that an OSError during replace is logged, re-raised and removes the temp file."""
        path = tmp_path / "storage.json"
        store = JsonFileStore(path)
        store.set_item("recipes", "[]")

        def broken_replace(src, dst):
            raise OSError("disk full")

        monkeypatch.setattr(storage_module.os, "replace", broken_replace)

        with caplog.at_level(logging.ERROR, logger="recipe_explorer.storage"):
            with pytest.raises(OSError, match="disk full"):
                store.set_item("recipes", '[{"id": 1}]')

        assert not (tmp_path / "storage.json.tmp").exists()
        assert json.loads(path.read_text(encoding="utf-8")) == {"recipes": "[]"}
        assert "Could not write storage file" in caplog.text
