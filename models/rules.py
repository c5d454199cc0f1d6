"""
Relationship Rules

Declarative metadata read by the persistence store: what happens to related
records when a record is deleted, and which fields queries may search or sort.
"""

from .ingredient import Ingredient
from .category import Category
from .recipe import Recipe, RecipeIngredient

CASCADE = 'cascade'
NULLIFY = 'nullify'

# entity type -> ((relationship attribute, rule), ...)
DELETE_RULES = {
    Ingredient: (('recipe_ingredients', CASCADE),),
    Category: (('recipes', NULLIFY),),
    Recipe: (('ingredients', CASCADE),),
    RecipeIngredient: (),
}

# String fields usable for substring search
SEARCH_FIELDS = {
    Ingredient: ('name',),
    Category: ('name',),
    Recipe: ('name', 'summary'),
    RecipeIngredient: ('quantity',),
}

SORT_FIELDS = {
    Ingredient: ('name',),
    Category: ('name',),
    Recipe: ('name', 'serving', 'time'),
    RecipeIngredient: ('position', 'quantity'),
}

# Sorting by these fields uses the folded shadow column instead
FOLDED_COLUMNS = {
    'name': 'normalized_name',
}

# Records whose names must be unique per type
NAMED_MODELS = (Ingredient, Category, Recipe)
