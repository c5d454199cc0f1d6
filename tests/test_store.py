import pytest
from sqlalchemy.exc import OperationalError, SQLAlchemyError
from sqlalchemy.orm import Session

from models import Ingredient, Category, Recipe, RecipeIngredient, CASCADE
from persistence import (
    Search, Sort, StoreError, ConstraintError, DeleteCascadeError, RecordNotFound,
)
from persistence import store as store_module


def test_query_with_no_match_returns_empty_list(store, make_ingredient):
    make_ingredient('Salt')
    assert store.query(Ingredient, where={'name': 'Pepper'}) == []
    assert store.query(Category) == []


def test_insert_is_visible_after_save(store):
    salt = store.insert(Ingredient(name='Salt'))
    assert salt.id is not None
    store.save()

    assert [i.name for i in store.query(Ingredient)] == ['Salt']
    assert store.get(Ingredient, str(salt.id)) is salt


def test_insert_rejects_identity_collision(store, make_ingredient):
    salt = make_ingredient('Salt')

    with pytest.raises(ConstraintError):
        store.insert(Ingredient(id=salt.id, name='Pepper'))


def test_recipe_line_must_belong_to_a_recipe(store, make_ingredient):
    salt = make_ingredient('Salt')

    with pytest.raises(ConstraintError):
        store.insert(RecipeIngredient(ingredient=salt, quantity='1 tsp'))


def test_get_or_raise_unknown_id(store):
    with pytest.raises(RecordNotFound):
        store.get_or_raise(Recipe, '00000000-0000-0000-0000-000000000000')


def test_get_rejects_malformed_id(store):
    with pytest.raises(ValueError):
        store.get(Recipe, 'not-a-uuid')


def test_delete_ingredient_removes_exactly_its_recipe_lines(store, make_ingredient, make_recipe):
    salt = make_ingredient('Salt')
    garlic = make_ingredient('Garlic')
    hummus = make_recipe('Hummus', [(salt, 'To taste'), (garlic, '1 clove, minced')])
    falafel = make_recipe('Falafel', [(salt, '1 tsp')])
    garlic_line_ids = {line.id for line in garlic.recipe_ingredients}
    assert len(salt.recipe_ingredients) == 2

    store.delete(salt)
    store.save()

    assert {line.id for line in store.query(RecipeIngredient)} == garlic_line_ids
    assert store.count(Recipe) == 2
    assert [line.ingredient.name for line in hummus.ingredients] == ['Garlic']
    assert falafel.ingredients == []
    assert [i.name for i in store.query(Ingredient)] == ['Garlic']


def test_delete_category_clears_recipe_reference(store, make_ingredient, make_category, make_recipe):
    dough = make_ingredient('Pizza Dough')
    italian = make_category('Italian')
    pizza = make_recipe('Pizza', [(dough, '1 ball')], category=italian, serving=4, time=50)
    pizza_id = pizza.id

    store.delete(italian)
    store.save()

    pizza = store.get(Recipe, pizza_id)
    assert pizza is not None
    assert pizza.category is None
    assert pizza.category_id is None
    assert pizza.name == 'Pizza'
    assert [(line.ingredient.name, line.quantity) for line in pizza.ingredients] == [('Pizza Dough', '1 ball')]
    assert store.count(Category) == 0


def test_delete_recipe_removes_its_lines_and_keeps_ingredients(store, make_ingredient, make_recipe):
    eggs = make_ingredient('Eggs')
    pancetta = make_ingredient('Pancetta')
    carbonara = make_recipe('Carbonara', [(eggs, '4'), (pancetta, '200g, diced')])
    omelette = make_recipe('Omelette', [(eggs, '3')])
    omelette_lines = {line.id for line in omelette.ingredients}

    store.delete(carbonara)
    store.save()

    assert {line.id for line in store.query(RecipeIngredient)} == omelette_lines
    assert sorted(i.name for i in store.query(Ingredient)) == ['Eggs', 'Pancetta']
    assert [line.quantity for line in eggs.recipe_ingredients] == ['3']
    assert pancetta.recipe_ingredients == []


def test_delete_recipe_line_does_not_propagate(store, make_ingredient, make_recipe):
    eggs = make_ingredient('Eggs')
    salt = make_ingredient('Salt')
    omelette = make_recipe('Omelette', [(eggs, '3'), (salt, 'Pinch')])

    store.delete(omelette.ingredients[0])
    store.save()

    assert [line.ingredient.name for line in omelette.ingredients] == ['Salt']
    assert store.count(Ingredient) == 2
    assert store.count(Recipe) == 1


def test_failed_cascade_rolls_back_the_whole_delete(store, monkeypatch, make_ingredient, make_recipe):
    salt = make_ingredient('Salt')
    make_recipe('Hummus', [(salt, 'To taste')])

    def broken_cascade(session, record, attr):
        raise SQLAlchemyError('disk full')

    monkeypatch.setitem(store_module.PROPAGATORS, CASCADE, broken_cascade)

    with pytest.raises(DeleteCascadeError):
        store.delete(salt)

    assert store.count(Ingredient) == 1
    assert store.count(RecipeIngredient) == 1


def test_failed_commit_applies_nothing(store):
    store.insert(Ingredient(name='Salt'))
    store.insert(Recipe(name=None))  # violates NOT NULL on flush

    with pytest.raises(ConstraintError):
        store.save()

    assert store.count(Ingredient) == 0
    assert store.count(Recipe) == 0


def test_commit_failure_surfaces_as_store_error(store, monkeypatch):
    def failing_commit(self):
        raise OperationalError('COMMIT', {}, Exception('disk I/O error'))

    monkeypatch.setattr(Session, 'commit', failing_commit)
    store.insert(Ingredient(name='Salt'))

    with pytest.raises(StoreError):
        store.save()


def test_update_changes_fields_and_name_key(store, make_ingredient):
    salt = make_ingredient('Salt')

    store.update(salt, name='Sea Salt')
    store.save()

    assert store.query(Ingredient, where={'normalized_name': 'sea salt'}) == [salt]


def test_update_rejects_unknown_fields_and_id(store, make_ingredient):
    salt = make_ingredient('Salt')

    with pytest.raises(ValueError):
        store.update(salt, colour='white')
    with pytest.raises(ValueError):
        store.update(salt, id=salt.id)


def test_rejected_update_keeps_other_staged_work(store, make_recipe, make_category):
    soup = make_recipe('Soup', serving=2)
    italian = make_category('Italian')
    store.insert(Ingredient(name='Salt'))

    with pytest.raises(ValueError):
        store.update(soup, name='Stew', category=italian, serving=0)
    store.save()

    assert store.count(Ingredient) == 1
    assert (soup.name, soup.normalized_name, soup.serving) == ('Soup', 'soup', 2)
    assert soup.category is None
    assert italian.recipes == []


def test_update_requires_a_stored_record(store):
    with pytest.raises(ConstraintError):
        store.update(Ingredient(name='Salt'), name='Pepper')


def test_search_ignores_case_and_accents(store, make_ingredient):
    make_ingredient('Crème Fraîche')
    make_ingredient('Cream')

    found = store.query(Ingredient, search=Search('CREME', ('name',)))

    assert [i.name for i in found] == ['Crème Fraîche']


def test_search_any_field_matches(store, make_recipe):
    make_recipe('Hummus', summary='A creamy dip')
    make_recipe('Falafel', summary='Fried chickpea balls')

    found = store.query(Recipe, search=Search('dip', ('name', 'summary')))

    assert [r.name for r in found] == ['Hummus']


def test_sort_by_name_is_case_insensitive(store, make_ingredient):
    for name in ('banana', 'Cherry', 'apple'):
        make_ingredient(name)

    names = [i.name for i in store.query(Ingredient, sort=Sort('name'))]

    assert names == ['apple', 'banana', 'Cherry']


def test_sort_by_number_descending(store, make_recipe):
    make_recipe('Pizza', serving=4, time=50)
    make_recipe('Hummus', serving=6, time=10)
    make_recipe('Shawarma', serving=2, time=120)

    by_serving = store.query(Recipe, sort=Sort('serving', descending=True))
    by_time = store.query(Recipe, sort=Sort('time'))

    assert [r.name for r in by_serving] == ['Hummus', 'Pizza', 'Shawarma']
    assert [r.name for r in by_time] == ['Hummus', 'Pizza', 'Shawarma']


def test_query_rejects_undeclared_fields(store):
    with pytest.raises(ValueError):
        store.query(Recipe, sort=Sort('instructions'))
    with pytest.raises(ValueError):
        store.query(Ingredient, search=Search('x', ('id',)))
    with pytest.raises(ValueError):
        store.query(Ingredient, where={'colour': 'white'})


def test_recipe_rejects_non_positive_numbers():
    with pytest.raises(ValueError):
        Recipe(name='Soup', serving=0)
    with pytest.raises(ValueError):
        Recipe(name='Soup', time=-5)
