"""
Sample Data Loader

Seeds an empty store with the sample recipes. Safe to call on every start.
"""

import logging

from constants.sample_data import SAMPLE_INGREDIENTS, SAMPLE_CATEGORIES, SAMPLE_RECIPES
from models import Ingredient, Category, Recipe, RecipeIngredient

logger = logging.getLogger(__name__)


def load_if_empty(store):
    """
    Insert the sample data unless at least one ingredient already exists.

    Everything is inserted in a single commit and cross-references use the
    objects created here, not lookups after insert.

    Returns:
        bool: True if the sample data was loaded
    """
    if store.count(Ingredient):
        logger.debug('Store already has ingredients, skipping sample data')
        return False

    ingredients = {name: store.insert(Ingredient(name=name)) for name in SAMPLE_INGREDIENTS}
    categories = {name: store.insert(Category(name=name)) for name in SAMPLE_CATEGORIES}

    lines = 0
    for data in SAMPLE_RECIPES:
        recipe = store.insert(Recipe(
            name=data['name'],
            summary=data['summary'],
            category=categories[data['category']],
            serving=data['serving'],
            time=data['time'],
            instructions=data['instructions'],
        ))
        for position, (ingredient_name, quantity) in enumerate(data['ingredients']):
            store.insert(RecipeIngredient(
                recipe=recipe,
                ingredient=ingredients[ingredient_name],
                quantity=quantity,
                position=position,
            ))
            lines += 1

    store.save()
    logger.info(
        'Loaded sample data: %d ingredients, %d categories, %d recipes, %d recipe lines',
        len(ingredients), len(categories), len(SAMPLE_RECIPES), lines,
    )
    return True
