"""
Constants Package

Input limits and seed data.
"""

from .validation import (
    MAX_LENGTHS,
    MAX_SERVING,
    MAX_TIME_MINUTES,
    RECIPE_SORT_OPTIONS,
    SORT_ORDERS,
    ALLOWED_EXTENSIONS,
)

from .sample_data import (
    SAMPLE_INGREDIENTS,
    SAMPLE_CATEGORIES,
    SAMPLE_RECIPES,
)

__all__ = [
    # Validation
    'MAX_LENGTHS',
    'MAX_SERVING',
    'MAX_TIME_MINUTES',
    'RECIPE_SORT_OPTIONS',
    'SORT_ORDERS',
    'ALLOWED_EXTENSIONS',
    # Sample data
    'SAMPLE_INGREDIENTS',
    'SAMPLE_CATEGORIES',
    'SAMPLE_RECIPES',
]
