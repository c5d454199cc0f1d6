"""
Ingredient Service

Create, rename, list and delete ingredients.
"""

import logging

from constants.validation import MAX_LENGTHS
from models import Ingredient
from persistence import Search, Sort
from utils.sanitizer import sanitize_name
from .validation import ensure_unique_name

logger = logging.getLogger(__name__)


def _clean_name(name):
    name = sanitize_name(name, max_length=MAX_LENGTHS['ingredient_name'])
    if not name:
        raise ValueError('Ingredient name is required')
    return name


def list_ingredients(store, query=''):
    """All ingredients sorted by name, optionally filtered by a name substring."""
    return store.query(Ingredient, search=Search(query, ('name',)), sort=Sort('name'))


def get_ingredient(store, ingredient_id):
    return store.get_or_raise(Ingredient, ingredient_id)


def create_ingredient(store, name):
    name = _clean_name(name)
    ensure_unique_name(store, Ingredient, name)

    ingredient = store.insert(Ingredient(name=name))
    store.save()
    logger.info('Ingredient "%s" added (%s)', ingredient.name, ingredient.id)
    return ingredient


def update_ingredient(store, ingredient_id, name):
    ingredient = store.get_or_raise(Ingredient, ingredient_id)
    name = _clean_name(name)
    ensure_unique_name(store, Ingredient, name, excluding_id=ingredient.id)

    store.update(ingredient, name=name)
    store.save()
    logger.info('Ingredient %s renamed to "%s"', ingredient.id, ingredient.name)
    return ingredient


def delete_ingredient(store, ingredient_id):
    """Delete an ingredient and every recipe line that uses it."""
    ingredient = store.get_or_raise(Ingredient, ingredient_id)
    name = ingredient.name
    lines = len(ingredient.recipe_ingredients)

    store.delete(ingredient)
    store.save()
    logger.info('Ingredient "%s" deleted with %d recipe line(s)', name, lines)
