"""
Demo Recipes Module.

The two recipes used to seed empty or unreadable storage on first run.
"""

from typing import List

from recipe_explorer.models import Recipe

DEMO_IMAGE_URL = "https://images.pexels.com/photos/461382/pexels-photo-461382.jpeg?h=400&w=700&auto=compress"

_DEMO_RECIPES = [
    Recipe(
        id=1,
        title="Classic Spaghetti Carbonara",
        ingredients=["spaghetti", "egg", "pancetta", "parmesan", "black pepper"],
        instructions=(
            "1. Cook spaghetti. 2. Fry pancetta. 3. Mix eggs and cheese. "
            "4. Combine spaghetti, pancetta, and egg-cheese mix off the heat. "
            "5. Add pepper and serve."
        ),
        image=DEMO_IMAGE_URL,
        tags=["italian", "pasta"],
    ),
    Recipe(
        id=2,
        title="Guacamole",
        ingredients=["avocado", "lime", "onion", "tomato", "salt", "cilantro"],
        instructions=(
            "1. Mash avocados. 2. Mix in lime juice, onion, tomato, and cilantro. "
            "3. Season with salt."
        ),
        image=DEMO_IMAGE_URL,
        tags=["mexican", "vegan", "appetizer"],
    ),
]


def get_demo_recipes() -> List[Recipe]:
    """
    Get the demo recipe collection.

    Returns:
        A fresh list of the demo Recipe objects (models are immutable, so
        sharing the instances is safe)
    """
    return _DEMO_RECIPES.copy()
