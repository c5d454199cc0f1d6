"""
Models Package

Exports all database models and the db instance for use throughout the application.
"""

from .base import db

from .ingredient import Ingredient
from .category import Category
from .recipe import Recipe, RecipeIngredient
from .rules import CASCADE, NULLIFY, DELETE_RULES, SEARCH_FIELDS, SORT_FIELDS, NAMED_MODELS

__all__ = [
    'db',
    'Ingredient',
    'Category',
    'Recipe',
    'RecipeIngredient',
    'CASCADE',
    'NULLIFY',
    'DELETE_RULES',
    'SEARCH_FIELDS',
    'SORT_FIELDS',
    'NAMED_MODELS',
]
