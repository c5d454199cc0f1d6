"""
Category Service

Create, rename, list and delete recipe categories.
"""

import logging

from constants.validation import MAX_LENGTHS
from models import Category
from persistence import Search, Sort
from utils.sanitizer import sanitize_name
from .validation import ensure_unique_name

logger = logging.getLogger(__name__)


def _clean_name(name):
    name = sanitize_name(name, max_length=MAX_LENGTHS['category_name'])
    if not name:
        raise ValueError('Category name is required')
    return name


def list_categories(store, query=''):
    return store.query(Category, search=Search(query, ('name',)), sort=Sort('name'))


def get_category(store, category_id):
    return store.get_or_raise(Category, category_id)


def create_category(store, name):
    name = _clean_name(name)
    ensure_unique_name(store, Category, name)

    category = store.insert(Category(name=name))
    store.save()
    logger.info('Category "%s" added (%s)', category.name, category.id)
    return category


def update_category(store, category_id, name):
    category = store.get_or_raise(Category, category_id)
    name = _clean_name(name)
    ensure_unique_name(store, Category, name, excluding_id=category.id)

    store.update(category, name=name)
    store.save()
    logger.info('Category %s renamed to "%s"', category.id, category.name)
    return category


def delete_category(store, category_id):
    """Delete a category. Its recipes stay, without a category."""
    category = store.get_or_raise(Category, category_id)
    name = category.name
    recipes = len(category.recipes)

    store.delete(category)
    store.save()
    logger.info('Category "%s" deleted, %d recipe(s) uncategorized', name, recipes)
