"""Sample recipes the catalog starts with."""

from typing import List

from .models import Recipe


def sample_recipes() -> List[Recipe]:
    """Return the seed recipes, each with a fresh id."""

    return [
        Recipe.new(
            name="Grilled Salmon",
            description="Perfectly grilled salmon with lemon and herbs",
            meal_type="Dinner",
            dietary_type="Gluten-Free",
            ingredients=["Salmon fillet", "Lemon", "Olive Oil", "Fresh herbs", "Garlic"],
            icon_name="flame",
            cooking_time="25 mins",
            servings=2,
            difficulty="Medium",
            background_color="pink",
        ),
        Recipe.new(
            name="Quinoa Buddha",
            description="Nutritious bowl with quinoa, roasted vegetables, and tahini dressing",
            meal_type="Lunch",
            dietary_type="Vegan",
            ingredients=["Quinoa", "Sweet potato", "Chickpeas", "Kale", "Tahini", "Lemon"],
            icon_name="leaf.circle",
            cooking_time="40 mins",
            servings=2,
            difficulty="Medium",
            background_color="blue",
        ),
        Recipe.new(
            name="Chicken Alfredo",
            description="Creamy Alfredo sauce with tender chicken and pasta",
            meal_type="Dinner",
            dietary_type="Non-Vegetarian",
            ingredients=["Chicken", "Pasta", "Cream", "Parmesan Cheese", "Garlic"],
            icon_name="fork.knife",
            cooking_time="30 mins",
            servings=3,
            difficulty="Medium",
            background_color="purple",
        ),
        Recipe.new(
            name="Berry Smoothie",
            description="A refreshing and healthy berry smoothie",
            meal_type="Beverage",
            dietary_type="Vegan",
            ingredients=["Strawberries", "Blueberries", "Banana", "Almond Milk"],
            icon_name="cup.and.saucer",
            cooking_time="5 mins",
            servings=1,
            difficulty="Easy",
            background_color="pink",
        ),
        Recipe.new(
            name="Carbonara Pasta",
            description="Traditional Italian pasta dish with creamy sauce",
            meal_type="Dinner",
            dietary_type="Non-Vegetarian",
            ingredients=["Pasta", "Eggs", "Pancetta", "Parmesan"],
            icon_name="fork.knife",
            cooking_time="20 mins",
            servings=2,
            difficulty="Medium",
            background_color="red",
        ),
        Recipe.new(
            name="Greek Yogurt",
            description="Healthy and delicious Greek yogurt layered with fruits",
            meal_type="Breakfast",
            dietary_type="Vegetarian",
            ingredients=["Greek Yogurt", "Granola", "Berries", "Honey"],
            icon_name="cup.and.saucer",
            cooking_time="5 mins",
            servings=1,
            difficulty="Easy",
            background_color="blue",
        ),
    ]


__all__ = ["sample_recipes"]
