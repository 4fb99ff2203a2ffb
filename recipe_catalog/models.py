import uuid
from dataclasses import dataclass, field
from typing import List, Optional

MEAL_TYPES = ["Breakfast", "Lunch", "Dinner", "Dessert", "Snack"]
DIETARY_TYPES = ["None", "Vegetarian", "Vegan", "Gluten-Free", "Dairy-Free", "Keto"]
DIFFICULTIES = ["Easy", "Medium", "Hard"]
BACKGROUND_COLORS = ["orange", "pink", "blue", "green", "purple"]

DEFAULT_ICON = "fork.knife"


def new_recipe_id() -> str:
    return uuid.uuid4().hex


@dataclass
class Recipe:
    """Domain object representing a catalog recipe.

    ``meal_type``, ``dietary_type`` and ``difficulty`` normally hold one of the
    module level choices but are not validated; the store accepts any value.
    """

    id: str
    name: str
    description: str
    meal_type: str
    dietary_type: str
    ingredients: List[str]
    cooking_time: str
    servings: int
    difficulty: str
    is_favorite: bool = False
    background_color: str = "orange"
    icon_name: str = DEFAULT_ICON
    image: Optional[bytes] = field(default=None, repr=False)
    image_mimetype: Optional[str] = None

    @classmethod
    def new(cls, **fields) -> "Recipe":
        """Build a recipe with a freshly generated id."""

        return cls(id=new_recipe_id(), **fields)

    @property
    def has_image(self) -> bool:
        return bool(self.image)


__all__ = [
    "BACKGROUND_COLORS",
    "DEFAULT_ICON",
    "DIETARY_TYPES",
    "DIFFICULTIES",
    "MEAL_TYPES",
    "Recipe",
    "new_recipe_id",
]
