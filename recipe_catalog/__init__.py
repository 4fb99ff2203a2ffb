import os
from typing import Optional

from flask import Flask, abort, flash, redirect, render_template, request, url_for
from werkzeug.wrappers import Response

from .cooking_time import MAX_HOURS, MAX_MINUTES, PRESETS
from .forms import ALLOWED_IMAGE_EXTENSIONS, RecipeForm
from .models import BACKGROUND_COLORS, DIETARY_TYPES, DIFFICULTIES, MEAL_TYPES, Recipe
from .storage import InMemoryRecipeStore, RecipeRepository

IMAGE_FORMATS_MESSAGE = "Unsupported image format. Allowed formats: {}.".format(
    ", ".join(sorted(ext.upper() for ext in ALLOWED_IMAGE_EXTENSIONS))
)


def create_app(storage: Optional[RecipeRepository] = None) -> Flask:
    """Create and configure the Flask application.

    Parameters
    ----------
    storage:
        Optional recipe repository. When ``None`` the application uses an
        :class:`InMemoryRecipeStore` configured through environment variables.
    """

    app = Flask(__name__)
    app.config.setdefault("MAX_CONTENT_LENGTH", 16 * 1024 * 1024)
    app.secret_key = os.environ.get("FLASK_SECRET_KEY", "development-secret-change-me")

    if storage is None:
        storage = InMemoryRecipeStore.from_env()
    app.config["RECIPE_STORAGE"] = storage

    if isinstance(storage, InMemoryRecipeStore):
        storage.subscribe(
            lambda event, recipe: app.logger.info("Recipe %s: %s (%r)", event, recipe.id, recipe.name)
        )

    def _storage() -> RecipeRepository:
        return app.config["RECIPE_STORAGE"]

    def _render_form(template: str, form: RecipeForm, **context) -> str:
        return render_template(
            template,
            form=form,
            meal_types=MEAL_TYPES,
            dietary_types=DIETARY_TYPES,
            difficulties=DIFFICULTIES,
            background_colors=BACKGROUND_COLORS,
            presets=list(PRESETS),
            max_hours=MAX_HOURS,
            max_minutes=MAX_MINUTES,
            **context,
        )

    def _rejection(form: RecipeForm) -> Optional[str]:
        missing = form.missing_fields()
        if missing:
            return "Please provide a recipe {}.".format(", ".join(missing))
        if not form.has_allowed_image:
            return IMAGE_FORMATS_MESSAGE
        return None

    @app.get("/")
    def index() -> str:
        query = request.args.get("q", "")
        recipes = _storage().search_recipes(query)
        selected_id = request.args.get("selected")
        selected_recipe: Recipe | None = None

        if recipes:
            selected_recipe = next((recipe for recipe in recipes if recipe.id == selected_id), None)
            if selected_recipe is None:
                selected_recipe = recipes[0]
            selected_id = selected_recipe.id

        return render_template(
            "index.html",
            recipes=recipes,
            query=query,
            selected_recipe=selected_recipe,
            selected_id=selected_id,
            title="Recipes",
        )

    @app.get("/recipes/<recipe_id>")
    def recipe_detail(recipe_id: str) -> str | Response:
        try:
            recipe = _storage().get_recipe(recipe_id)
        except KeyError:
            flash("Recipe not found.", "error")
            return redirect(url_for("index"))

        return render_template("recipe_detail.html", recipe=recipe, title=recipe.name)

    @app.get("/recipes/new")
    def new_recipe() -> str:
        return _render_form("add_recipe.html", RecipeForm(), title="New Recipe")

    @app.post("/recipes")
    def create_recipe() -> Response | tuple[str, int]:
        form = RecipeForm.from_request(request.form, request.files)

        rejection = _rejection(form)
        if rejection:
            flash(rejection, "error")
            return _render_form("add_recipe.html", form, title="New Recipe"), 400

        try:
            recipe_id = _storage().add_recipe(form.build_recipe())
        except Exception as exc:  # pragma: no cover - defensive programming
            app.logger.exception("Failed to save recipe %r", form.name)
            flash(f"Failed to save recipe: {exc}", "error")
            return redirect(url_for("new_recipe"))

        flash(f"Recipe '{form.name}' saved.", "success")
        return redirect(url_for("index", selected=recipe_id))

    @app.get("/recipes/<recipe_id>/edit")
    def edit_recipe(recipe_id: str) -> str | Response:
        try:
            recipe = _storage().get_recipe(recipe_id)
        except KeyError:
            flash("Recipe not found.", "error")
            return redirect(url_for("index"))

        return _render_form(
            "edit_recipe.html",
            RecipeForm.from_recipe(recipe),
            recipe=recipe,
            title="Edit Recipe",
        )

    @app.post("/recipes/<recipe_id>")
    def update_recipe(recipe_id: str) -> Response | tuple[str, int]:
        storage_backend = _storage()

        try:
            existing = storage_backend.get_recipe(recipe_id)
        except KeyError:
            flash("Recipe not found.", "error")
            return redirect(url_for("index"))

        form = RecipeForm.from_request(request.form, request.files)

        rejection = _rejection(form)
        if rejection:
            flash(rejection, "error")
            return (
                _render_form("edit_recipe.html", form, recipe=existing, title="Edit Recipe"),
                400,
            )

        try:
            updated = storage_backend.update_recipe(form.build_recipe(editing=existing))
        except Exception as exc:  # pragma: no cover - defensive programming
            app.logger.exception("Failed to update recipe %s", recipe_id)
            flash(f"Failed to update recipe: {exc}", "error")
            return redirect(url_for("edit_recipe", recipe_id=recipe_id))

        if updated:
            flash(f"Recipe '{form.name}' updated.", "success")
        else:
            # Removed by another request between the lookup and the save.
            flash("Recipe not found.", "error")
        return redirect(url_for("index", selected=recipe_id))

    @app.post("/recipes/<recipe_id>/delete")
    def delete_recipe(recipe_id: str) -> Response:
        if _storage().delete_recipe(recipe_id):
            flash("Recipe deleted.", "success")
        else:
            flash("Recipe already removed.", "info")
        return redirect(url_for("index"))

    @app.post("/recipes/<recipe_id>/favorite")
    def toggle_favorite(recipe_id: str) -> Response:
        _storage().toggle_favorite(recipe_id)
        next_url = request.form.get("next") or url_for("index", selected=recipe_id)
        if not next_url.startswith("/") or next_url.startswith("//"):
            next_url = url_for("index", selected=recipe_id)
        return redirect(next_url)

    @app.get("/recipes/<recipe_id>/image")
    def recipe_image(recipe_id: str) -> Response:
        try:
            recipe = _storage().get_recipe(recipe_id)
        except KeyError:
            abort(404)

        if not recipe.has_image:
            abort(404)

        return Response(recipe.image, mimetype=recipe.image_mimetype or "application/octet-stream")

    return app


__all__ = ["create_app", "InMemoryRecipeStore", "Recipe"]
