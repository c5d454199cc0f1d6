"""Shared fixtures: a fresh in-memory app, its store and a test client."""

import pytest

from app import create_app
from models import db, Ingredient, Category, Recipe, RecipeIngredient


@pytest.fixture
def app():
    app = create_app('testing')
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def store(app):
    return app.extensions['recipe_store']


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_ingredient(store):
    def _make(name):
        ingredient = store.insert(Ingredient(name=name))
        store.save()
        return ingredient
    return _make


@pytest.fixture
def make_category(store):
    def _make(name):
        category = store.insert(Category(name=name))
        store.save()
        return category
    return _make


@pytest.fixture
def make_recipe(store):
    """Insert a recipe with (ingredient, quantity) lines straight through the store."""
    def _make(name, lines=(), category=None, **fields):
        recipe = store.insert(Recipe(name=name, category=category, **fields))
        for position, (ingredient, quantity) in enumerate(lines):
            store.insert(RecipeIngredient(
                recipe=recipe, ingredient=ingredient, quantity=quantity, position=position,
            ))
        store.save()
        return recipe
    return _make
