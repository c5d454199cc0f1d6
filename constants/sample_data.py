"""
Sample Data

Seed ingredients, categories and recipes loaded on first start.
Recipes reference ingredients and categories by name; the loader links
them to the objects it creates.
"""

SAMPLE_INGREDIENTS = [
    'Pizza Dough', 'Tomato Sauce', 'Mozzarella Cheese', 'Fresh Basil Leaves',
    'Extra Virgin Olive Oil', 'Salt', 'Chickpeas', 'Tahini', 'Lemon Juice',
    'Garlic', 'Cumin', 'Water', 'Paprika', 'Parsley', 'Spaghetti', 'Eggs',
    'Parmesan Cheese', 'Pancetta', 'Black Pepper', 'Dried Chickpeas', 'Onions',
    'Cilantro', 'Coriander', 'Baking Powder', 'Chicken Thighs', 'Yogurt',
    'Cardamom', 'Cinnamon', 'Turmeric',
]

SAMPLE_CATEGORIES = ['Italian', 'Middle Eastern']

SAMPLE_RECIPES = [
    {
        'name': 'Classic Margherita Pizza',
        'summary': 'A simple yet delicious pizza with tomato, mozzarella, basil, and olive oil.',
        'category': 'Italian',
        'serving': 4,
        'time': 50,
        'instructions': 'Preheat oven, roll out dough, apply sauce, add cheese and basil, bake for 20 minutes.',
        'ingredients': [
            ('Pizza Dough', '1 ball'),
            ('Tomato Sauce', '1/2 cup'),
            ('Mozzarella Cheese', '1 cup, shredded'),
            ('Fresh Basil Leaves', 'A handful'),
            ('Extra Virgin Olive Oil', '2 tablespoons'),
            ('Salt', 'Pinch'),
        ],
    },
    {
        'name': 'Spaghetti Carbonara',
        'summary': 'A classic Italian pasta dish made with eggs, cheese, pancetta, and pepper.',
        'category': 'Italian',
        'serving': 4,
        'time': 30,
        'instructions': (
            'Cook spaghetti. Fry pancetta until crisp. Whisk eggs and Parmesan, '
            'add to pasta with pancetta, and season with black pepper.'
        ),
        'ingredients': [
            ('Spaghetti', '400g'),
            ('Eggs', '4'),
            ('Parmesan Cheese', '1 cup, grated'),
            ('Pancetta', '200g, diced'),
            ('Black Pepper', 'To taste'),
        ],
    },
    {
        'name': 'Classic Hummus',
        'summary': 'A creamy and flavorful Middle Eastern dip made from chickpeas, tahini, and spices.',
        'category': 'Middle Eastern',
        'serving': 6,
        'time': 10,
        'instructions': (
            'Blend chickpeas, tahini, lemon juice, garlic, and spices. Adjust consistency '
            'with water. Garnish with olive oil, paprika, and parsley.'
        ),
        'ingredients': [
            ('Chickpeas', '1 can (15 oz)'),
            ('Tahini', '1/4 cup'),
            ('Lemon Juice', '3 tablespoons'),
            ('Garlic', '1 clove, minced'),
            ('Extra Virgin Olive Oil', '2 tablespoons'),
            ('Cumin', '1/2 teaspoon'),
            ('Salt', 'To taste'),
            ('Water', '2-3 tablespoons'),
            ('Paprika', 'For garnish'),
            ('Parsley', 'For garnish'),
        ],
    },
    {
        'name': 'Classic Falafel',
        'summary': 'A traditional Middle Eastern dish of spiced, fried chickpea balls, often served in pita bread.',
        'category': 'Middle Eastern',
        'serving': 4,
        'time': 60,
        'instructions': (
            'Soak chickpeas overnight. Blend with onions, garlic, herbs, and spices. '
            'Form into balls, add baking powder, and fry until golden.'
        ),
        'ingredients': [
            ('Dried Chickpeas', '1 cup'),
            ('Onions', '1 medium, chopped'),
            ('Garlic', '3 cloves, minced'),
            ('Cilantro', '1/2 cup, chopped'),
            ('Parsley', '1/2 cup, chopped'),
            ('Cumin', '1 tsp'),
            ('Coriander', '1 tsp'),
            ('Salt', '1 tsp'),
            ('Baking Powder', '1/2 tsp'),
        ],
    },
    {
        'name': 'Chicken Shawarma',
        'summary': 'A popular Middle Eastern dish featuring marinated chicken, slow-roasted to perfection.',
        'category': 'Middle Eastern',
        'serving': 4,
        'time': 120,
        'instructions': (
            'Marinate chicken with yogurt, spices, garlic, lemon juice, and olive oil. '
            'Roast until cooked. Serve with pita and sauces.'
        ),
        'ingredients': [
            ('Chicken Thighs', '1 kg, boneless'),
            ('Yogurt', '1 cup'),
            ('Garlic', '3 cloves, minced'),
            ('Lemon Juice', '3 tablespoons'),
            ('Cumin', '1 tsp'),
            ('Coriander', '1 tsp'),
            ('Cardamom', '1/2 tsp'),
            ('Cinnamon', '1/2 tsp'),
            ('Turmeric', '1/2 tsp'),
            ('Salt', 'To taste'),
            ('Black Pepper', 'To taste'),
            ('Extra Virgin Olive Oil', '2 tablespoons'),
        ],
    },
]
