from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Mapping, Optional

from werkzeug.datastructures import FileStorage

from .cooking_time import format_cooking_time, preset_cooking_time
from .models import DEFAULT_ICON, Recipe, new_recipe_id

ALLOWED_IMAGE_EXTENSIONS = {"png", "jpg", "jpeg", "gif", "webp"}

REQUIRED_FIELDS = {
    "name": "name",
    "description": "description",
    "ingredients": "ingredients",
    "cooking_time": "cooking time",
    "servings": "servings",
}


def parse_ingredients(ingredients_text: str) -> List[str]:
    return [line.strip() for line in ingredients_text.splitlines() if line.strip()]


def allowed_image(filename: Optional[str]) -> bool:
    if not filename or "." not in filename:
        return False
    ext = filename.rsplit(".", 1)[1].lower()
    return ext in ALLOWED_IMAGE_EXTENSIONS


def _cooking_time_from_form(form: Mapping[str, str]) -> str:
    preset = form.get("cooking_preset", "").strip()
    if preset:
        try:
            return preset_cooking_time(preset)
        except KeyError:
            return ""

    hours_text = form.get("cooking_hours", "").strip()
    minutes_text = form.get("cooking_minutes", "").strip()
    if hours_text or minutes_text:
        try:
            hours = int(hours_text or 0)
            minutes = int(minutes_text or 0)
            if hours or minutes:
                return format_cooking_time(hours, minutes)
        except ValueError:
            return ""

    return form.get("cooking_time", "").strip()


@dataclass
class RecipeForm:
    """Values collected by the add/edit form before they reach the store."""

    name: str = ""
    description: str = ""
    meal_type: str = "Breakfast"
    dietary_type: str = "None"
    ingredients: List[str] = field(default_factory=list)
    cooking_time: str = ""
    servings: str = ""
    difficulty: str = "Easy"
    background_color: str = "orange"
    image: Optional[FileStorage] = None
    remove_image: bool = False

    @classmethod
    def from_request(
        cls, form: Mapping[str, str], files: Optional[Mapping[str, FileStorage]] = None
    ) -> "RecipeForm":
        image = files.get("image") if files else None
        if image is not None and not image.filename:
            image = None

        remove_image = form.get("remove_image") == "1" and image is None

        return cls(
            name=form.get("name", "").strip(),
            description=form.get("description", "").strip(),
            meal_type=form.get("meal_type", "Breakfast").strip(),
            dietary_type=form.get("dietary_type", "None").strip(),
            ingredients=parse_ingredients(form.get("ingredients", "")),
            cooking_time=_cooking_time_from_form(form),
            servings=form.get("servings", "").strip(),
            difficulty=form.get("difficulty", "Easy").strip(),
            background_color=form.get("background_color", "orange").strip(),
            image=image,
            remove_image=remove_image,
        )

    @classmethod
    def from_recipe(cls, recipe: Recipe) -> "RecipeForm":
        return cls(
            name=recipe.name,
            description=recipe.description,
            meal_type=recipe.meal_type,
            dietary_type=recipe.dietary_type,
            ingredients=list(recipe.ingredients),
            cooking_time=recipe.cooking_time,
            servings=str(recipe.servings),
            difficulty=recipe.difficulty,
            background_color=recipe.background_color,
        )

    @property
    def ingredients_text(self) -> str:
        return "\n".join(self.ingredients)

    def missing_fields(self) -> List[str]:
        """Labels of the required fields that are still empty, in form order."""

        return [label for attr, label in REQUIRED_FIELDS.items() if not getattr(self, attr)]

    @property
    def is_valid(self) -> bool:
        return not self.missing_fields()

    @property
    def has_allowed_image(self) -> bool:
        return self.image is None or allowed_image(self.image.filename)

    def build_recipe(self, editing: Optional[Recipe] = None) -> Recipe:
        """Create the recipe to save.

        When ``editing`` is given its id and favorite flag are carried over,
        and so is its image unless a new one was uploaded or removal was
        requested. The icon is always reset to the default.
        """

        try:
            servings = int(self.servings)
        except ValueError:
            servings = 1

        image: Optional[bytes] = None
        image_mimetype: Optional[str] = None
        if self.image is not None:
            self.image.stream.seek(0)
            image = self.image.stream.read()
            image_mimetype = self.image.mimetype
        elif editing is not None and not self.remove_image:
            image = editing.image
            image_mimetype = editing.image_mimetype

        return Recipe(
            id=editing.id if editing is not None else new_recipe_id(),
            name=self.name,
            description=self.description,
            meal_type=self.meal_type,
            dietary_type=self.dietary_type,
            ingredients=list(self.ingredients),
            cooking_time=self.cooking_time,
            servings=servings,
            difficulty=self.difficulty,
            is_favorite=editing.is_favorite if editing is not None else False,
            background_color=self.background_color,
            icon_name=DEFAULT_ICON,
            image=image,
            image_mimetype=image_mimetype,
        )


__all__ = ["ALLOWED_IMAGE_EXTENSIONS", "RecipeForm", "allowed_image", "parse_ingredients"]
