"""
Ingredient Model

Ingredients are shared across recipes through RecipeIngredient rows.
"""

from sqlalchemy.orm import validates

from utils.sanitizer import normalize_name
from .base import db, IdentityMixin


class Ingredient(IdentityMixin, db.Model):
    """A named ingredient. Deleting it removes every recipe line that uses it."""
    __tablename__ = 'ingredients'

    name = db.Column(db.String(200), nullable=False)
    # Folded copy of name used for duplicate checks and sorting (not unique)
    normalized_name = db.Column(db.String(200), nullable=False, index=True)

    recipe_ingredients = db.relationship('RecipeIngredient', back_populates='ingredient')

    @validates('name')
    def _sync_normalized_name(self, key, value):
        self.normalized_name = normalize_name(value)
        return value
