"""
Category Model

Recipes optionally belong to one category.
"""

from sqlalchemy.orm import validates

from utils.sanitizer import normalize_name
from .base import db, IdentityMixin


class Category(IdentityMixin, db.Model):
    """Recipe grouping. Deleting it detaches its recipes, it never deletes them."""
    __tablename__ = 'categories'

    name = db.Column(db.String(50), nullable=False)
    normalized_name = db.Column(db.String(50), nullable=False, index=True)

    recipes = db.relationship('Recipe', back_populates='category', order_by='Recipe.normalized_name')

    @validates('name')
    def _sync_normalized_name(self, key, value):
        self.normalized_name = normalize_name(value)
        return value
