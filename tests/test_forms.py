from __future__ import annotations

from io import BytesIO
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from werkzeug.datastructures import FileStorage, MultiDict

from recipe_catalog.forms import RecipeForm, allowed_image, parse_ingredients
from recipe_catalog.models import Recipe


def valid_form_data(**overrides) -> MultiDict:
    data = {
        "name": "Summer Salad",
        "description": "Fresh veggies",
        "meal_type": "Lunch",
        "dietary_type": "Vegan",
        "ingredients": "tomatoes\ncucumber",
        "cooking_time": "10 mins",
        "servings": "2",
        "difficulty": "Easy",
        "background_color": "green",
    }
    data.update(overrides)
    return MultiDict(data)


def test_parse_ingredients_drops_blank_lines_and_keeps_duplicates():
    assert parse_ingredients("  salt \n\npepper\nsalt\n") == ["salt", "pepper", "salt"]


def test_allowed_image():
    assert allowed_image("photo.JPG")
    assert allowed_image("photo.webp")
    assert not allowed_image("notes.txt")
    assert not allowed_image("noextension")
    assert not allowed_image(None)


def test_complete_form_is_valid():
    form = RecipeForm.from_request(valid_form_data())

    assert form.is_valid
    assert form.missing_fields() == []


def test_missing_fields_are_reported_in_form_order():
    form = RecipeForm.from_request(
        valid_form_data(
            name=" ", description="", ingredients="\n", cooking_time="", servings=""
        )
    )

    assert not form.is_valid
    assert form.missing_fields() == [
        "name",
        "description",
        "ingredients",
        "cooking time",
        "servings",
    ]


def test_preset_takes_precedence_over_other_cooking_time_fields():
    form = RecipeForm.from_request(
        valid_form_data(cooking_preset="1h 30m", cooking_hours="2", cooking_minutes="5")
    )

    assert form.cooking_time == "1h 30m"


def test_hours_and_minutes_are_formatted():
    form = RecipeForm.from_request(valid_form_data(cooking_hours="2", cooking_minutes="0"))

    assert form.cooking_time == "2 hours"


def test_zero_hours_and_minutes_fall_back_to_text_field():
    form = RecipeForm.from_request(
        valid_form_data(cooking_hours="0", cooking_minutes="0", cooking_time="45 mins")
    )

    assert form.cooking_time == "45 mins"


def test_invalid_cooking_time_counts_as_missing():
    form = RecipeForm.from_request(valid_form_data(cooking_minutes="75"))

    assert form.cooking_time == ""
    assert form.missing_fields() == ["cooking time"]


def test_build_recipe_creates_fresh_id_and_falls_back_to_one_serving():
    form = RecipeForm.from_request(valid_form_data(servings="a few"))

    first = form.build_recipe()
    second = form.build_recipe()

    assert first.id != second.id
    assert first.servings == 1
    assert first.is_favorite is False
    assert first.ingredients == ["tomatoes", "cucumber"]
    assert first.background_color == "green"


def test_build_recipe_when_editing_keeps_id_favorite_and_image_and_resets_icon():
    existing = Recipe.new(
        name="Old",
        description="Old description",
        meal_type="Dinner",
        dietary_type="None",
        ingredients=["x"],
        cooking_time="1 hour",
        servings=4,
        difficulty="Hard",
        is_favorite=True,
        icon_name="flame",
        image=b"old-bytes",
        image_mimetype="image/png",
    )
    form = RecipeForm.from_request(valid_form_data(servings="3"))

    updated = form.build_recipe(editing=existing)

    assert updated.id == existing.id
    assert updated.is_favorite is True
    assert updated.icon_name == "fork.knife"
    assert updated.servings == 3
    assert updated.image == b"old-bytes"
    assert updated.image_mimetype == "image/png"


def test_build_recipe_can_remove_or_replace_image():
    existing = Recipe.new(
        name="Old",
        description="Old description",
        meal_type="Dinner",
        dietary_type="None",
        ingredients=["x"],
        cooking_time="1 hour",
        servings=4,
        difficulty="Hard",
        image=b"old-bytes",
        image_mimetype="image/png",
    )

    removed = RecipeForm.from_request(valid_form_data(remove_image="1")).build_recipe(editing=existing)
    assert removed.image is None
    assert not removed.has_image

    upload = FileStorage(stream=BytesIO(b"new-bytes"), filename="new.jpg", content_type="image/jpeg")
    replaced = RecipeForm.from_request(
        valid_form_data(remove_image="1"), {"image": upload}
    ).build_recipe(editing=existing)
    assert replaced.image == b"new-bytes"
    assert replaced.image_mimetype == "image/jpeg"


def test_empty_upload_is_ignored():
    empty = FileStorage(stream=BytesIO(b""), filename="", content_type="application/octet-stream")

    form = RecipeForm.from_request(valid_form_data(), {"image": empty})

    assert form.image is None
    assert form.has_allowed_image


def test_from_recipe_prefills_values():
    recipe = Recipe.new(
        name="Pasta Salad",
        description="Perfect for picnics",
        meal_type="Lunch",
        dietary_type="Vegetarian",
        ingredients=["pasta", "tomatoes"],
        cooking_time="20 mins",
        servings=4,
        difficulty="Easy",
        background_color="blue",
    )

    form = RecipeForm.from_recipe(recipe)

    assert form.ingredients_text == "pasta\ntomatoes"
    assert form.servings == "4"
    assert form.is_valid
