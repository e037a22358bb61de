"""Catalogue seeding: the shop's preset pizzas, inserted once by name."""

import structlog
from protean.utils.globals import current_domain

from pizzeria.catalogue.pizza import Pizza

logger = structlog.get_logger(__name__)

PRESET_PIZZAS = [
    {
        "name": "Classic Supreme",
        "crust": "Thin",
        "meats": ["Sausage", "Pepperoni"],
        "non_meats": ["Green Peppers", "Mushrooms", "Black Olives", "Onions"],
        "sauce": "Tomato",
        "size": 14,
        "price": 10000,
    },
    {
        "name": "Chicago",
        "crust": "Deep Dish",
        "meats": ["Pepperoni"],
        "non_meats": ["Banana Peppers", "Green Peppers", "Mushrooms", "Black Olives", "Onions"],
        "sauce": "Robust Tomato",
        "size": 12,
        "price": 15000,
    },
    {
        "name": "Classic Pepperoni",
        "crust": "Regular",
        "meats": ["Pepperoni"],
        "non_meats": [],
        "sauce": "Tomato",
        "size": 12,
        "price": 10000,
    },
]


def seed_catalogue(presets=None):
    """Insert each preset pizza whose name is not in the catalogue yet.

    Safe to run on every startup. Returns the ids of the pizzas inserted.
    """
    repo = current_domain.repository_for(Pizza)
    inserted = []

    for preset in presets if presets is not None else PRESET_PIZZAS:
        if repo.find_preset_by_name(preset["name"]) is not None:
            continue

        pizza = Pizza.preset(**preset)
        repo.add(pizza)
        inserted.append(str(pizza.id))

    logger.info("Catalogue seeded", inserted=len(inserted))
    return inserted
