"""Curated food keywords grouped by quality tier."""

from dataclasses import dataclass

KNOWLEDGE_BASE_VERSION = "2025.09.0"


@dataclass(frozen=True)
class FoodCategory:
    """Keywords that identify foods of one quality tier."""

    name: str
    keywords: tuple[str, ...]
    description: str


# Iteration order matters: matched keywords are reported in this order.
FOOD_CATEGORIES: tuple[FoodCategory, ...] = (
    FoodCategory(
        name="excellent",
        keywords=(
            # proteins
            "grilled chicken",
            "lean beef",
            "salmon",
            "tuna",
            "turkey",
            "eggs",
            "protein shake",
            "greek yogurt",
            "cottage cheese",
            "tofu",
            "quinoa",
            # complex carbs
            "brown rice",
            "sweet potato",
            "whole grain",
            "oatmeal",
            "whole wheat",
            # vegetables and fruit
            "broccoli",
            "spinach",
            "kale",
            "vegetables",
            "salad",
            "berries",
            "avocado",
            "organic",
            "fresh fruit",
            # hydration and recovery
            "water",
            "coconut water",
            "electrolytes",
            "sports drink",
            # nordic
            "ruisleipä",
            "porridge",
            "puuro",
            "salmon soup",
            "lohikeitto",
            "nordic berries",
            "lingonberry",
            "blueberry",
        ),
        description="Optimal nutrition choices for athletic performance",
    ),
    FoodCategory(
        name="good",
        keywords=(
            "chicken",
            "beef",
            "pork",
            "fish",
            "beans",
            "lentils",
            "milk",
            "cheese",
            "yogurt",
            "nuts",
            "peanut butter",
            "rice",
            "pasta",
            "potatoes",
            "bread",
            "cereal",
            "apple",
            "banana",
            "orange",
            "grapes",
            "melon",
            "sandwich",
            "wrap",
            "soup",
            "stew",
            "maitorahka",
            "viili",
            "piimä",
            "karjalanpiirakka",
            "kalakeitto",
        ),
        description="Good nutritional choices for regular training",
    ),
    FoodCategory(
        name="fair",
        keywords=(
            "processed meat",
            "sausage",
            "bacon",
            "hot dog",
            "white bread",
            "white rice",
            "crackers",
            "pretzels",
            "juice",
            "smoothie",
            "chocolate milk",
            "tea",
            "coffee",
            "granola bar",
            "muffin",
            "bagel",
            "pancakes",
            "pulla",
            "korvapuusti",
            "munkki",
            "lihapiirakka",
        ),
        description="Moderate choices, okay in moderation",
    ),
    FoodCategory(
        name="poor",
        keywords=(
            # junk food
            "chips",
            "candy",
            "chocolate",
            "cookies",
            "cake",
            "ice cream",
            "donut",
            "pastry",
            # fast food
            "pizza",
            "burger",
            "fries",
            "fried",
            "deep fried",
            "nuggets",
            # sugary drinks
            "soda",
            "cola",
            "energy drink",
            "sugary",
            "sweet drink",
            # processed
            "instant noodles",
            "microwave meal",
            "frozen pizza",
            # finnish
            "karkit",
            "sipsit",
            "limsa",
            # brand name, spelled out so it does not match inside "vegetables"
            "es energy",
            "megaforce",
        ),
        description="Poor nutritional choices, limit consumption",
    ),
)
