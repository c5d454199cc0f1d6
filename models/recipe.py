"""
Recipe Models

Contains the Recipe and RecipeIngredient models for managing
recipes and their ingredient associations.
"""

from sqlalchemy.orm import validates

from utils.sanitizer import normalize_name
from .base import db, IdentityMixin


class Recipe(IdentityMixin, db.Model):
    """Recipe with metadata, optional category and ordered ingredient lines."""
    __tablename__ = 'recipes'

    name = db.Column(db.String(200), nullable=False)
    normalized_name = db.Column(db.String(200), nullable=False, index=True)
    summary = db.Column(db.Text, nullable=False, default='')
    serving = db.Column(db.Integer, nullable=False, default=1)
    time = db.Column(db.Integer, nullable=False, default=5)  # minutes
    instructions = db.Column(db.Text, nullable=False, default='')
    image_data = db.Column(db.LargeBinary, nullable=True)

    category_id = db.Column(db.Uuid, db.ForeignKey('categories.id', ondelete='SET NULL'), nullable=True, index=True)
    category = db.relationship('Category', back_populates='recipes')

    ingredients = db.relationship('RecipeIngredient', back_populates='recipe', order_by='RecipeIngredient.position')

    @validates('name')
    def _sync_normalized_name(self, key, value):
        self.normalized_name = normalize_name(value)
        return value

    @validates('serving', 'time')
    def _validate_positive(self, key, value):
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise ValueError(f'{key} must be a positive integer')
        return value


class RecipeIngredient(IdentityMixin, db.Model):
    """Join table linking recipes to ingredients with a free-text quantity."""
    __tablename__ = 'recipe_ingredients'

    quantity = db.Column(db.String(200), nullable=False, default='')
    position = db.Column(db.Integer, nullable=False, default=0)  # order inside the recipe

    recipe_id = db.Column(db.Uuid, db.ForeignKey('recipes.id', ondelete='CASCADE'), nullable=True, index=True)
    ingredient_id = db.Column(db.Uuid, db.ForeignKey('ingredients.id', ondelete='CASCADE'), nullable=True, index=True)

    recipe = db.relationship('Recipe', back_populates='ingredients')
    ingredient = db.relationship('Ingredient', back_populates='recipe_ingredients')
