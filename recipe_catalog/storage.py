from __future__ import annotations

import logging
import os
import threading
from dataclasses import replace
from typing import Callable, Iterable, List, Optional, Protocol

from .models import Recipe
from .seed import sample_recipes

logger = logging.getLogger(__name__)

ChangeListener = Callable[[str, Recipe], None]

ADDED = "added"
UPDATED = "updated"
REMOVED = "removed"
FAVORITE_TOGGLED = "favorite_toggled"

_FALSE_VALUES = {"0", "false", "no", "off", ""}


class RecipeRepository(Protocol):
    """Protocol describing the behaviour required by the web layer.

    Mutations on an unknown id are not errors: they return ``False`` and leave
    the collection untouched.
    """

    def list_recipes(self) -> List[Recipe]:
        """Return the stored recipes in insertion order."""

    def get_recipe(self, recipe_id: str) -> Recipe:
        """Return a single recipe or raise :class:`KeyError` if missing."""

    def add_recipe(self, recipe: Recipe) -> str:
        """Append a recipe and return its id."""

    def update_recipe(self, recipe: Recipe) -> bool:
        """Replace the recipe sharing ``recipe.id``, keeping its position."""

    def delete_recipe(self, recipe_id: str) -> bool:
        """Remove the recipe with ``recipe_id``."""

    def toggle_favorite(self, recipe_id: str) -> bool:
        """Flip the favorite flag of the recipe with ``recipe_id``."""

    def search_recipes(self, query: str) -> List[Recipe]:
        """Return recipes whose name or description contains ``query``."""


def _copy(recipe: Recipe) -> Recipe:
    return replace(recipe, ingredients=list(recipe.ingredients))


class InMemoryRecipeStore(RecipeRepository):
    """Authoritative in-memory recipe collection.

    Every effective mutation is published to the listeners registered with
    :meth:`subscribe` as ``listener(event, recipe)``. Listeners run after the
    store lock has been released, so they may read from the store.
    """

    def __init__(self, seed: Optional[Iterable[Recipe]] = None) -> None:
        self._lock = threading.RLock()
        self._recipes: List[Recipe] = [_copy(recipe) for recipe in seed or ()]
        self._listeners: List[ChangeListener] = []

    @classmethod
    def from_env(cls) -> "InMemoryRecipeStore":
        """Build a store, seeded with the sample recipes unless ``RECIPES_SEED`` is off."""

        use_seed = os.environ.get("RECIPES_SEED", "1").strip().lower() not in _FALSE_VALUES
        return cls(seed=sample_recipes() if use_seed else None)

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """Register a change listener and return a function that removes it."""

        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def list_recipes(self) -> List[Recipe]:
        with self._lock:
            return [_copy(recipe) for recipe in self._recipes]

    def get_recipe(self, recipe_id: str) -> Recipe:
        with self._lock:
            index = self._index_of(recipe_id)
            if index is None:
                raise KeyError(f"Recipe '{recipe_id}' does not exist.")
            return _copy(self._recipes[index])

    def add_recipe(self, recipe: Recipe) -> str:
        stored = _copy(recipe)
        with self._lock:
            self._recipes.append(stored)
        logger.debug("Added recipe %s (%r)", stored.id, stored.name)
        self._notify(ADDED, stored)
        return stored.id

    def update_recipe(self, recipe: Recipe) -> bool:
        stored = _copy(recipe)
        with self._lock:
            index = self._index_of(recipe.id)
            if index is not None:
                self._recipes[index] = stored
        if index is None:
            logger.info("Ignoring update of unknown recipe %s", recipe.id)
            return False
        logger.debug("Updated recipe %s (%r)", stored.id, stored.name)
        self._notify(UPDATED, stored)
        return True

    def delete_recipe(self, recipe_id: str) -> bool:
        with self._lock:
            removed = [recipe for recipe in self._recipes if recipe.id == recipe_id]
            if removed:
                self._recipes = [recipe for recipe in self._recipes if recipe.id != recipe_id]
        if not removed:
            logger.info("Ignoring removal of unknown recipe %s", recipe_id)
            return False
        for recipe in removed:
            logger.debug("Removed recipe %s (%r)", recipe.id, recipe.name)
            self._notify(REMOVED, recipe)
        return True

    def toggle_favorite(self, recipe_id: str) -> bool:
        with self._lock:
            index = self._index_of(recipe_id)
            if index is not None:
                current = self._recipes[index]
                current.is_favorite = not current.is_favorite
                toggled = _copy(current)
        if index is None:
            logger.info("Ignoring favorite toggle of unknown recipe %s", recipe_id)
            return False
        logger.debug("Recipe %s favorite=%s", recipe_id, toggled.is_favorite)
        self._notify(FAVORITE_TOGGLED, toggled)
        return True

    def search_recipes(self, query: str) -> List[Recipe]:
        needle = (query or "").casefold()
        recipes = self.list_recipes()
        if not needle:
            return recipes
        return [
            recipe
            for recipe in recipes
            if needle in recipe.name.casefold() or needle in recipe.description.casefold()
        ]

    def __len__(self) -> int:
        with self._lock:
            return len(self._recipes)

    def _index_of(self, recipe_id: str) -> Optional[int]:
        for index, recipe in enumerate(self._recipes):
            if recipe.id == recipe_id:
                return index
        return None

    def _notify(self, event: str, recipe: Recipe) -> None:
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            listener(event, _copy(recipe))


__all__ = [
    "ADDED",
    "FAVORITE_TOGGLED",
    "REMOVED",
    "UPDATED",
    "ChangeListener",
    "InMemoryRecipeStore",
    "RecipeRepository",
]
