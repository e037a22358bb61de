"""Custom pizza creation: command and handler."""

import json

from protean import handle
from protean.fields import Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from pizzeria.catalogue.pizza import Pizza
from pizzeria.domain import pizzeria


@pizzeria.command(part_of="Pizza")
class CreateCustomPizza:
    owner_id: Identifier(required=True)
    name: String(required=True, max_length=100)
    crust: String(required=True, max_length=50)
    sauce: String(required=True, max_length=50)
    size: Integer(required=True, min_value=1)
    meat_toppings: Text()  # JSON: list of topping names
    non_meat_toppings: Text()  # JSON: list of topping names


@pizzeria.command_handler(part_of=Pizza)
class CreateCustomPizzaHandler:
    @handle(CreateCustomPizza)
    def create_custom_pizza(self, command):
        pizza = Pizza.design(
            owner_id=command.owner_id,
            name=command.name,
            crust=command.crust,
            sauce=command.sauce,
            size=command.size,
            meats=json.loads(command.meat_toppings) if command.meat_toppings else [],
            non_meats=json.loads(command.non_meat_toppings) if command.non_meat_toppings else [],
        )
        current_domain.repository_for(Pizza).add(pizza)
        return str(pizza.id)
