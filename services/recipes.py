"""
Recipe Service

Recipes are saved as a unit: scalar fields, category and the full list of
ingredient lines. Editing a recipe replaces all of its lines rather than
diffing them.
"""

import logging

from constants.validation import MAX_LENGTHS, MAX_SERVING, MAX_TIME_MINUTES
from models import Category, Ingredient, Recipe, RecipeIngredient
from persistence import Search, Sort
from utils.sanitizer import sanitize_name, sanitize_text, sanitize_instructions
from .validation import ensure_unique_name

logger = logging.getLogger(__name__)

# Passed as image_data to update_recipe() to keep the stored image
UNCHANGED = object()


def _positive_int(value, label, max_val):
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f'{label} must be a whole number')
    if value < 1 or value > max_val:
        raise ValueError(f'{label} must be between 1 and {max_val}')
    return value


def _recipe_fields(name, summary, serving, time, instructions):
    """Clean and check the scalar recipe fields before anything is staged."""
    name = sanitize_name(name, max_length=MAX_LENGTHS['recipe_name'])
    if not name:
        raise ValueError('Recipe name is required')

    return {
        'name': name,
        'summary': sanitize_text(summary, max_length=MAX_LENGTHS['summary']),
        'serving': _positive_int(serving, 'Serving', MAX_SERVING),
        'time': _positive_int(time, 'Time', MAX_TIME_MINUTES),
        'instructions': sanitize_instructions(instructions, max_length=MAX_LENGTHS['instructions']),
    }


def _resolve_category(store, category_id):
    if category_id is None:
        return None
    return store.get_or_raise(Category, category_id)


def _resolve_lines(store, lines):
    """Turn (ingredient_id, quantity) pairs into (Ingredient, quantity) pairs."""
    resolved = []
    for ingredient_id, quantity in lines:
        ingredient = store.get_or_raise(Ingredient, ingredient_id)
        resolved.append((ingredient, sanitize_text(quantity, max_length=MAX_LENGTHS['quantity'])))
    return resolved


def _attach_lines(store, recipe, resolved):
    for position, (ingredient, quantity) in enumerate(resolved):
        store.insert(RecipeIngredient(
            recipe=recipe,
            ingredient=ingredient,
            quantity=quantity,
            position=position,
        ))


def list_recipes(store, query='', sort_by='name', descending=False):
    """Recipes whose name or summary contains `query`, sorted by name, serving or time."""
    return store.query(
        Recipe,
        search=Search(query, ('name', 'summary')),
        sort=Sort(sort_by, descending),
    )


def get_recipe(store, recipe_id):
    return store.get_or_raise(Recipe, recipe_id)


def create_recipe(store, name, summary='', serving=1, time=5, instructions='',
                  category_id=None, ingredients=(), image_data=None):
    """
    Create a recipe with its ingredient lines in one commit.

    Args:
        store: Store handle
        name: Recipe name, unique among recipes
        summary: Short description
        serving: Number of servings (positive)
        time: Preparation time in minutes (positive)
        instructions: Free-text instructions
        category_id: Optional category id
        ingredients: Iterable of (ingredient_id, quantity) pairs, in order
        image_data: Optional image bytes

    Returns:
        The new Recipe

    Raises:
        ValueError: A field is missing or out of range
        DuplicateNameError: Another recipe has the same name
        RecordNotFound: The category or an ingredient does not exist
        StoreError: The commit failed
    """
    fields = _recipe_fields(name, summary, serving, time, instructions)
    ensure_unique_name(store, Recipe, fields['name'])
    category = _resolve_category(store, category_id)
    lines = _resolve_lines(store, ingredients)

    recipe = store.insert(Recipe(category=category, image_data=image_data, **fields))
    _attach_lines(store, recipe, lines)
    store.save()

    logger.info('Recipe "%s" created with %d ingredient(s)', recipe.name, len(lines))
    return recipe


def update_recipe(store, recipe_id, name, summary='', serving=1, time=5, instructions='',
                  category_id=None, ingredients=(), image_data=UNCHANGED):
    """
    Overwrite a recipe with new values and a new set of ingredient lines.

    Old lines are deleted and new ones inserted in the same commit; the
    Ingredient records they pointed to are untouched. Leave image_data as
    UNCHANGED to keep the stored image, pass None to remove it.
    """
    recipe = store.get_or_raise(Recipe, recipe_id)
    fields = _recipe_fields(name, summary, serving, time, instructions)
    ensure_unique_name(store, Recipe, fields['name'], excluding_id=recipe.id)
    category = _resolve_category(store, category_id)
    lines = _resolve_lines(store, ingredients)

    if image_data is not UNCHANGED:
        fields['image_data'] = image_data

    store.update(recipe, category=category, **fields)
    for old_line in list(recipe.ingredients):
        store.delete(old_line)
    _attach_lines(store, recipe, lines)
    store.save()

    logger.info('Recipe "%s" updated with %d ingredient(s)', recipe.name, len(lines))
    return recipe


def set_recipe_image(store, recipe_id, image_data):
    recipe = store.get_or_raise(Recipe, recipe_id)
    store.update(recipe, image_data=image_data)
    store.save()
    logger.info('Recipe "%s" image %s', recipe.name, 'updated' if image_data else 'removed')
    return recipe


def delete_recipe(store, recipe_id):
    """Delete a recipe and its ingredient lines. Ingredients survive."""
    recipe = store.get_or_raise(Recipe, recipe_id)
    name = recipe.name

    store.delete(recipe)
    store.save()
    logger.info('Recipe "%s" deleted', name)
