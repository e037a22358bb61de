"""Pizza aggregate with the Toppings value object."""

import json
from datetime import datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Identifier, Integer, String, Text, ValueObject

from pizzeria.domain import pizzeria

# Every custom pizza costs the same, in cents ($10.00).
CUSTOM_PIZZA_PRICE = 1000


def _load_names(raw):
    return json.loads(raw) if raw else []


@pizzeria.value_object(part_of="Pizza")
class Toppings:
    """Meat and non-meat toppings, each stored as a JSON array of names."""

    meats: Text()
    non_meats: Text()

    @invariant.post
    def toppings_must_be_lists_of_names(self):
        for field in ("meats", "non_meats"):
            raw = getattr(self, field)
            if not raw:
                continue
            try:
                names = json.loads(raw)
            except (json.JSONDecodeError, TypeError):
                raise ValidationError({field: ["Toppings must be valid JSON"]}) from None
            if not isinstance(names, list) or not all(isinstance(n, str) and n for n in names):
                raise ValidationError({field: ["Toppings must be a list of names"]})

    @classmethod
    def of(cls, meats=None, non_meats=None):
        return cls(meats=json.dumps(list(meats or [])), non_meats=json.dumps(list(non_meats or [])))

    def as_dict(self):
        return {"meats": _load_names(self.meats), "non_meats": _load_names(self.non_meats)}


@pizzeria.aggregate
class Pizza:
    """A pizza on the menu.

    Catalogue pizzas are defined by the shop and visible to everyone. Custom
    pizzas are designed by a customer while ordering, carry the fixed custom
    price, and belong to that customer alone. ``owner_id`` is set exactly
    when the pizza is custom.
    """

    name: String(required=True, max_length=100)
    crust: String(required=True, max_length=50)
    sauce: String(required=True, max_length=50)
    size: Integer(required=True, min_value=1)
    toppings: ValueObject(Toppings)
    price: Integer(required=True, min_value=0)
    custom: Boolean(default=False)
    owner_id: Identifier()
    created_at: DateTime(default=datetime.now)

    @invariant.post
    def owner_set_exactly_for_custom_pizzas(self):
        if self.custom and not self.owner_id:
            raise ValidationError({"owner_id": ["Custom pizzas must have an owner"]})
        if not self.custom and self.owner_id:
            raise ValidationError({"owner_id": ["Catalogue pizzas cannot have an owner"]})

    @classmethod
    def _new(cls, **fields):
        from pizzeria.catalogue.events import PizzaCreated

        now = datetime.now()
        pizza = cls(created_at=now, **fields)
        pizza.raise_(
            PizzaCreated(
                pizza_id=pizza.id,
                name=pizza.name,
                price=pizza.price,
                custom=pizza.custom,
                owner_id=pizza.owner_id,
                created_at=now,
            )
        )
        return pizza

    @classmethod
    def preset(cls, name, crust, sauce, size, price, meats=None, non_meats=None):
        return cls._new(
            name=name,
            crust=crust,
            sauce=sauce,
            size=size,
            price=price,
            toppings=Toppings.of(meats, non_meats),
            custom=False,
        )

    @classmethod
    def design(cls, owner_id, name, crust, sauce, size, meats=None, non_meats=None):
        return cls._new(
            name=name,
            crust=crust,
            sauce=sauce,
            size=size,
            price=CUSTOM_PIZZA_PRICE,
            toppings=Toppings.of(meats, non_meats),
            custom=True,
            owner_id=owner_id,
        )

    def visible_to(self, user_id):
        if not self.custom:
            return True
        return user_id is not None and str(self.owner_id) == str(user_id)


@pizzeria.repository(part_of=Pizza)
class PizzaRepository:
    def find_preset_by_name(self, name: str) -> Pizza | None:
        results = self._dao.query.filter(name=name, custom=False).all().items
        return results[0] if results else None

    def catalogue(self) -> list[Pizza]:
        """Shop-defined pizzas, visible to every caller."""
        return self._dao.query.filter(custom=False).all().items

    def owned_by(self, user_id: str) -> list[Pizza]:
        return self._dao.query.filter(custom=True, owner_id=str(user_id)).all().items
