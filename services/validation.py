"""
Duplicate-Name Validation

Existence checks that gate every create/update of an ingredient, category
or recipe. The store itself does not enforce unique names.

The check and the write that follows it are separate steps, so two callers
validating the same name at once can both pass.
"""

from models import Ingredient, Category, Recipe, NAMED_MODELS
from persistence import as_identity
from utils.sanitizer import normalize_name

DUPLICATE_MESSAGES = {
    Ingredient: 'Ingredient with the same name exists',
    Category: 'Category with the same name exists',
    Recipe: 'Recipe with the same name exists',
}


class DuplicateNameError(Exception):
    """Raised when another record of the same type already has the name."""

    def __init__(self, model):
        self.model = model
        super().__init__(DUPLICATE_MESSAGES[model])


def exists(store, model, name, excluding_id=None):
    """
    Check whether a record of `model` already uses `name`.

    Comparison is case- and accent-insensitive.

    Args:
        store: Store handle
        model: Ingredient, Category or Recipe
        name: Candidate name
        excluding_id: Ignore the record with this id (used when editing)

    Returns:
        bool
    """
    if model not in NAMED_MODELS:
        raise ValueError(f'{model.__name__} has no unique name')

    matches = store.query(model, where={'normalized_name': normalize_name(name)})
    if excluding_id is None:
        return bool(matches)

    excluding_id = as_identity(excluding_id)
    return any(record.id != excluding_id for record in matches)


def ensure_unique_name(store, model, name, excluding_id=None):
    """Raise DuplicateNameError if `name` is taken by another record."""
    if exists(store, model, name, excluding_id=excluding_id):
        raise DuplicateNameError(model)
