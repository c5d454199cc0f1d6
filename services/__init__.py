"""
Services Package

Business logic for the recipe application. Every function takes the
store handle as its first argument.
"""

from .validation import (
    DUPLICATE_MESSAGES,
    DuplicateNameError,
    exists,
    ensure_unique_name,
)

from .ingredients import (
    list_ingredients,
    get_ingredient,
    create_ingredient,
    update_ingredient,
    delete_ingredient,
)

from .categories import (
    list_categories,
    get_category,
    create_category,
    update_category,
    delete_category,
)

from .recipes import (
    UNCHANGED,
    list_recipes,
    get_recipe,
    create_recipe,
    update_recipe,
    set_recipe_image,
    delete_recipe,
)

from .sample_data import load_if_empty

__all__ = [
    # Validation
    'DUPLICATE_MESSAGES',
    'DuplicateNameError',
    'exists',
    'ensure_unique_name',
    # Ingredients
    'list_ingredients',
    'get_ingredient',
    'create_ingredient',
    'update_ingredient',
    'delete_ingredient',
    # Categories
    'list_categories',
    'get_category',
    'create_category',
    'update_category',
    'delete_category',
    # Recipes
    'UNCHANGED',
    'list_recipes',
    'get_recipe',
    'create_recipe',
    'update_recipe',
    'set_recipe_image',
    'delete_recipe',
    # Sample data
    'load_if_empty',
]
