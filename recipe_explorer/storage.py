"""
Local persistence for the recipe collection.

The whole collection is stored as one JSON array under a single fixed key in a
small key-value store, the same shape as a browser's localStorage:

- KeyValueStore: get_item / set_item / remove_item on string values
- InMemoryStore: dict-backed, used by tests
- JsonFileStore: a JSON object on disk mapping keys to string values
- RecipeStorage: load()/save() of the recipe collection on top of any store

load() never raises. A missing, corrupt, non-array or empty blob is replaced by
the demo recipes, which are written back immediately. save() overwrites the
blob unconditionally (last writer wins).
"""

import json
import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from pydantic import ValidationError as SchemaError

from recipe_explorer.demo_data import get_demo_recipes
from recipe_explorer.models import Recipe

logger = logging.getLogger(__name__)

# Fixed key the collection is stored under
STORAGE_KEY = "recipes"


class KeyValueStore(ABC):
    """String key -> string value store."""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Return the stored value, or None if the key is absent."""

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Remove key if present."""


class InMemoryStore(KeyValueStore):
    """Process-local store. Contents are lost when the object goes away."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class JsonFileStore(KeyValueStore):
    """
    Key-value store persisted as a single JSON object file.

    A missing or unreadable file behaves like an empty store. Every write
    rewrites the whole file through a temp file + os.replace so a crash
    mid-write never leaves a half-written file behind.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read storage file {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Storage file {self.path} does not hold a JSON object, ignoring it")
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def _write_all(self, items: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            tmp_path.write_text(json.dumps(items, ensure_ascii=False, indent=2), encoding="utf-8")
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.error(f"Could not write storage file {self.path}: {e}")
            tmp_path.unlink(missing_ok=True)
            raise

    def get_item(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._read_all()
        items[key] = value
        self._write_all(items)

    def remove_item(self, key: str) -> None:
        items = self._read_all()
        if key in items:
            del items[key]
            self._write_all(items)


class RecipeStorage:
    """Reads and writes the recipe collection as one blob under STORAGE_KEY."""

    def __init__(self, store: KeyValueStore, key: str = STORAGE_KEY):
        self.store = store
        self.key = key

    def load(self) -> List[Recipe]:
        """
        Load the stored collection.

        Falls back to the demo recipes (and persists them) when the blob is
        missing, unparsable, not an array, or yields no valid recipe. Entries
        that fail the Recipe schema are dropped with a warning.

        Returns:
            List of Recipe objects in stored order
        """
        recipes = self._read_recipes()
        if not recipes:
            logger.info("No stored recipes found, seeding demo data")
            recipes = get_demo_recipes()
            self.save(recipes)
        return recipes

    def _read_recipes(self) -> List[Recipe]:
        raw = self.store.get_item(self.key)
        if raw is None:
            return []

        try:
            data = json.loads(raw)
        except ValueError as e:
            logger.warning(f"Stored recipes are not valid JSON, ignoring them: {e}")
            return []

        if not isinstance(data, list):
            logger.warning(f"Stored recipes are a {type(data).__name__}, expected a list")
            return []

        recipes = []
        seen_ids = set()
        for index, entry in enumerate(data):
            try:
                recipe = Recipe.model_validate(entry)
            except SchemaError as e:
                logger.warning(f"Dropping stored recipe #{index}: {e.error_count()} schema error(s)")
                continue
            if recipe.id in seen_ids:
                logger.warning(f"Dropping stored recipe #{index}: duplicate id {recipe.id}")
                continue
            seen_ids.add(recipe.id)
            recipes.append(recipe)
        return recipes

    def save(self, recipes: Sequence[Recipe]) -> None:
        """Overwrite the stored blob with the given collection."""
        blob = json.dumps([recipe.to_dict() for recipe in recipes], ensure_ascii=False)
        self.store.set_item(self.key, blob)
        logger.debug(f"Saved {len(recipes)} recipe(s) under key '{self.key}'")
