"""
Validation Constants

Limits and whitelists applied to user input before it reaches the store.
"""

# Maximum field lengths
MAX_LENGTHS = {
    'ingredient_name': 200,
    'category_name': 50,
    'recipe_name': 200,
    'summary': 2000,
    'instructions': 50000,
    'quantity': 200,
}

# Upper bounds for recipe numbers (lower bound is always 1)
MAX_SERVING = 100
MAX_TIME_MINUTES = 7 * 24 * 60

# Recipe list sort options exposed over HTTP
RECIPE_SORT_OPTIONS = {'name', 'serving', 'time'}
SORT_ORDERS = {'asc', 'desc'}

# Allowed image extensions
ALLOWED_EXTENSIONS = {'png', 'jpg', 'jpeg', 'gif', 'webp'}
