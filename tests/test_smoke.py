"""
Smoke tests for the recipe app.
Run with: python tests/test_smoke.py or through pytest.
"""

import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def test_app_imports():
    """Verify the app factory and database can be imported."""
    from app import create_app, db
    assert callable(create_app)
    assert db is not None
    print("OK: App imports successfully")


def test_models_import():
    """Verify models can be imported."""
    from models import Ingredient, Category, Recipe, RecipeIngredient
    assert Ingredient.__tablename__ == 'ingredients'
    assert Category.__tablename__ == 'categories'
    assert Recipe.__tablename__ == 'recipes'
    assert RecipeIngredient.__tablename__ == 'recipe_ingredients'
    print("OK: Models import successfully")


def test_utils_import():
    """Verify image and text utilities can be imported."""
    from utils import validate_and_process_image, sanitize_text, normalize_name
    assert callable(validate_and_process_image)
    assert callable(sanitize_text)
    assert callable(normalize_name)
    print("OK: Utils import successfully")


def test_sample_data_unchanged():
    """Verify the seed set has the expected shape."""
    from constants import SAMPLE_INGREDIENTS, SAMPLE_CATEGORIES, SAMPLE_RECIPES

    assert len(SAMPLE_INGREDIENTS) == 29
    assert len(set(SAMPLE_INGREDIENTS)) == 29
    assert SAMPLE_CATEGORIES == ['Italian', 'Middle Eastern']
    assert len(SAMPLE_RECIPES) == 5
    assert sum(len(r['ingredients']) for r in SAMPLE_RECIPES) == 42
    for recipe in SAMPLE_RECIPES:
        assert recipe['category'] in SAMPLE_CATEGORIES
        for name, _ in recipe['ingredients']:
            assert name in SAMPLE_INGREDIENTS
    print("OK: Sample data unchanged")


def test_app_runs():
    """Verify app can create test client."""
    from app import create_app
    app = create_app('testing')
    with app.test_client() as client:
        response = client.get('/recipes')
        assert response.status_code == 200
        assert response.get_json() == []
        print("OK: App serves recipe list")


if __name__ == '__main__':
    print("Running smoke tests...\n")

    tests = [
        test_app_imports,
        test_models_import,
        test_utils_import,
        test_sample_data_unchanged,
        test_app_runs,
    ]

    failed = 0
    for test in tests:
        try:
            test()
        except Exception as e:
            print(f"FAIL: {test.__name__} - {e}")
            failed += 1

    print(f"\n{'='*40}")
    if failed:
        print(f"FAILED: {failed}/{len(tests)} tests")
        sys.exit(1)
    else:
        print(f"PASSED: {len(tests)}/{len(tests)} tests")
        sys.exit(0)
