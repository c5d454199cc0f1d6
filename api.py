"""
JSON API

Query, mutation and validation endpoints used by the front end.
Every view resolves the store handle from the app and delegates to services.
"""

import base64
import logging

from flask import Blueprint, Response, abort, current_app, jsonify, request

from constants.validation import MAX_LENGTHS, RECIPE_SORT_OPTIONS, SORT_ORDERS
from models import Ingredient, Category, Recipe
from persistence import RecordNotFound, StoreError
from services import (
    DUPLICATE_MESSAGES, DuplicateNameError, UNCHANGED, exists,
    list_ingredients, create_ingredient, update_ingredient, delete_ingredient,
    list_categories, get_category, create_category, update_category, delete_category,
    list_recipes, get_recipe, create_recipe, update_recipe, set_recipe_image, delete_recipe,
)
from utils.image_handler import validate_and_process_image, allowed_file, ImageValidationError
from utils.sanitizer import sanitize_name

logger = logging.getLogger(__name__)

bp = Blueprint('api', __name__)

# Name length limits, matching the services' cleaning
NAME_LIMITS = {
    Ingredient: MAX_LENGTHS['ingredient_name'],
    Category: MAX_LENGTHS['category_name'],
    Recipe: MAX_LENGTHS['recipe_name'],
}


def get_store():
    return current_app.extensions['recipe_store']


def _json_body():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise ValueError('Expected a JSON object')
    return payload


def _int_field(payload, key, default):
    """Accept a JSON integer or a string of digits; floats are never truncated."""
    value = payload.get(key, default)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and value.strip().lstrip('-').isdecimal():
        return int(value)
    raise ValueError(f'{key} must be a whole number')


def _image_field(payload):
    """Decode a base64 image from the payload; None clears it."""
    encoded = payload['image']
    if encoded is None:
        return None
    if not isinstance(encoded, str):
        raise ValueError('image must be a base64 string')
    image_bytes = base64.b64decode(encoded, validate=True)
    return validate_and_process_image(
        image_bytes,
        max_width=current_app.config['IMAGE_MAX_WIDTH'],
        max_height=current_app.config['IMAGE_MAX_HEIGHT'],
    )


def _recipe_args(payload):
    lines = []
    for line in payload.get('ingredients') or []:
        if not isinstance(line, dict) or not line.get('ingredient_id'):
            raise ValueError('Each ingredient needs an ingredient_id')
        lines.append((line['ingredient_id'], line.get('quantity', '')))

    return {
        'name': payload.get('name', ''),
        'summary': payload.get('summary', ''),
        'serving': _int_field(payload, 'serving', 1),
        'time': _int_field(payload, 'time', 5),
        'instructions': payload.get('instructions', ''),
        'category_id': payload.get('category_id') or None,
        'ingredients': lines,
    }


def _named_json(record):
    return {'id': str(record.id), 'name': record.name}


def _recipe_json(recipe, detail=False):
    data = {
        'id': str(recipe.id),
        'name': recipe.name,
        'summary': recipe.summary,
        'serving': recipe.serving,
        'time': recipe.time,
        'has_image': recipe.image_data is not None,
        'category': _named_json(recipe.category) if recipe.category else None,
    }
    if detail:
        data['instructions'] = recipe.instructions
        data['ingredients'] = [
            {
                'id': str(line.id),
                'ingredient': _named_json(line.ingredient) if line.ingredient else None,
                'quantity': line.quantity,
            }
            for line in recipe.ingredients
        ]
    return data


def _exists_response(model):
    # Clean the name the same way create and update do
    name = sanitize_name(request.args.get('name', ''), max_length=NAME_LIMITS[model])
    excluding_id = request.args.get('excluding_id') or None
    taken = exists(get_store(), model, name, excluding_id=excluding_id)
    return jsonify(exists=taken, message=DUPLICATE_MESSAGES[model] if taken else None)


# ============================================
# ERROR HANDLERS
# ============================================

@bp.errorhandler(DuplicateNameError)
def handle_duplicate_name(error):
    return jsonify(error=str(error), entity=error.model.__name__), 409


@bp.errorhandler(RecordNotFound)
def handle_not_found(error):
    return jsonify(error=str(error)), 404


@bp.errorhandler(ImageValidationError)
def handle_invalid_image(error):
    return jsonify(error=f'Invalid image: {error}'), 400


@bp.errorhandler(ValueError)
def handle_bad_request(error):
    return jsonify(error=str(error)), 400


@bp.errorhandler(StoreError)
def handle_store_error(error):
    logger.error('Request %s %s failed: %s', request.method, request.path, error)
    return jsonify(error='Failed to save, please try again'), 500


# ============================================
# ROUTES - INGREDIENTS
# ============================================

@bp.route('/ingredients')
def ingredients_list():
    ingredients = list_ingredients(get_store(), request.args.get('q', ''))
    return jsonify([_named_json(i) for i in ingredients])


@bp.route('/ingredients', methods=['POST'])
def ingredient_add():
    ingredient = create_ingredient(get_store(), _json_body().get('name', ''))
    return jsonify(_named_json(ingredient)), 201


@bp.route('/ingredients/exists')
def ingredient_exists():
    return _exists_response(Ingredient)


@bp.route('/ingredients/<uuid:id>', methods=['PUT'])
def ingredient_edit(id):
    ingredient = update_ingredient(get_store(), id, _json_body().get('name', ''))
    return jsonify(_named_json(ingredient))


@bp.route('/ingredients/<uuid:id>', methods=['DELETE'])
def ingredient_delete(id):
    delete_ingredient(get_store(), id)
    return '', 204


# ============================================
# ROUTES - CATEGORIES
# ============================================

@bp.route('/categories')
def categories_list():
    categories = list_categories(get_store(), request.args.get('q', ''))
    return jsonify([_named_json(c) for c in categories])


@bp.route('/categories', methods=['POST'])
def category_add():
    category = create_category(get_store(), _json_body().get('name', ''))
    return jsonify(_named_json(category)), 201


@bp.route('/categories/exists')
def category_exists():
    return _exists_response(Category)


@bp.route('/categories/<uuid:id>')
def category_view(id):
    category = get_category(get_store(), id)
    data = _named_json(category)
    data['recipes'] = [_recipe_json(r) for r in category.recipes]
    return jsonify(data)


@bp.route('/categories/<uuid:id>', methods=['PUT'])
def category_edit(id):
    category = update_category(get_store(), id, _json_body().get('name', ''))
    return jsonify(_named_json(category))


@bp.route('/categories/<uuid:id>', methods=['DELETE'])
def category_delete(id):
    delete_category(get_store(), id)
    return '', 204


# ============================================
# ROUTES - RECIPES
# ============================================

@bp.route('/recipes')
def recipes_list():
    sort_by = request.args.get('sort', 'name')
    order = request.args.get('order', 'asc')
    if sort_by not in RECIPE_SORT_OPTIONS:
        raise ValueError(f'Invalid sort field: {sort_by}')
    if order not in SORT_ORDERS:
        raise ValueError(f'Invalid sort order: {order}')

    recipes = list_recipes(get_store(), request.args.get('q', ''), sort_by=sort_by, descending=order == 'desc')
    return jsonify([_recipe_json(r) for r in recipes])


@bp.route('/recipes', methods=['POST'])
def recipe_add():
    payload = _json_body()
    image_data = _image_field(payload) if 'image' in payload else None
    recipe = create_recipe(get_store(), image_data=image_data, **_recipe_args(payload))
    return jsonify(_recipe_json(recipe, detail=True)), 201


@bp.route('/recipes/exists')
def recipe_exists():
    return _exists_response(Recipe)


@bp.route('/recipes/<uuid:id>')
def recipe_view(id):
    return jsonify(_recipe_json(get_recipe(get_store(), id), detail=True))


@bp.route('/recipes/<uuid:id>', methods=['PUT'])
def recipe_edit(id):
    payload = _json_body()
    image_data = _image_field(payload) if 'image' in payload else UNCHANGED
    recipe = update_recipe(get_store(), id, image_data=image_data, **_recipe_args(payload))
    return jsonify(_recipe_json(recipe, detail=True))


@bp.route('/recipes/<uuid:id>', methods=['DELETE'])
def recipe_delete(id):
    delete_recipe(get_store(), id)
    return '', 204


@bp.route('/recipes/<uuid:id>/image', methods=['POST'])
def recipe_upload_image(id):
    file = request.files.get('image')
    if file is None or file.filename == '':
        raise ValueError('No image selected')
    if not allowed_file(file.filename):
        raise ValueError('Invalid file type. Use PNG, JPG, GIF, or WEBP.')

    image_data = validate_and_process_image(
        file,
        max_width=current_app.config['IMAGE_MAX_WIDTH'],
        max_height=current_app.config['IMAGE_MAX_HEIGHT'],
    )
    recipe = set_recipe_image(get_store(), id, image_data)
    return jsonify(_recipe_json(recipe))


@bp.route('/recipes/<uuid:id>/image')
def recipe_image(id):
    recipe = get_recipe(get_store(), id)
    if recipe.image_data is None:
        abort(404)
    return Response(recipe.image_data, mimetype='image/jpeg')
