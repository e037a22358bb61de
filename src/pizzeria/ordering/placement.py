"""Order placement: the one workflow that writes to every store.

Steps run strictly in order because each needs an id produced earlier:

    1. account   create the account when a guest signs up while ordering,
                 otherwise confirm the signed-in user's account exists
    2. customer  store inline contact details as a new Customer
    3. pizza     store an inline custom pizza, or check the referenced one
    4. order     store the Order tying user and pizza together

Each step commits on its own. When a step fails the error carries the step
name in ``step`` and the steps before it stay committed: there is no
compensation, so a failed pizza step can leave a fresh account and Customer
behind.
"""

import json
from contextlib import contextmanager

import structlog
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from pizzeria.accounts import get_account_service
from pizzeria.catalogue.creation import CreateCustomPizza
from pizzeria.catalogue.pizza import Pizza
from pizzeria.customer.registration import RegisterCustomer
from pizzeria.ordering.creation import CreateOrder
from pizzeria.ordering.draft import (
    ContactDetails,
    Credentials,
    CustomerByReference,
    CustomPizza,
    PizzaByReference,
)
from pizzeria.shared.errors import NoPizzaSelectedError, NotFoundError, StoreWriteError

logger = structlog.get_logger(__name__)

STEP_ACCOUNT = "account"
STEP_CUSTOMER = "customer"
STEP_PIZZA = "pizza"
STEP_ORDER = "order"


@contextmanager
def _step(name, log):
    try:
        yield
    except (ValidationError, ObjectNotFoundError) as exc:
        exc.step = name
        log.warning("Order placement failed", step=name, error=str(exc))
        raise
    except Exception as exc:
        log.error("Order placement failed", step=name, error=str(exc), exc_info=True)
        raise StoreWriteError(name, str(exc)) from exc


def _check_draft(draft, caller_id):
    """Reject drafts the workflow cannot act on, before any write."""
    if draft.pizza is None:
        raise NoPizzaSelectedError()

    if not isinstance(draft.pizza, PizzaByReference | CustomPizza):
        raise ValidationError({"pizza": ["Pick a catalogue pizza or build a custom one"]})

    if draft.customer is not None and not isinstance(draft.customer, CustomerByReference | ContactDetails):
        raise ValidationError({"customer": ["Unrecognised customer selection"]})

    if draft.credentials is not None:
        if not isinstance(draft.credentials, Credentials):
            raise ValidationError({"credentials": ["Unrecognised credentials"]})
        if caller_id is not None:
            raise ValidationError({"credentials": ["You are already signed in"]})
        if not isinstance(draft.customer, ContactDetails):
            raise ValidationError({"customer": ["Contact details are required to sign up while ordering"]})
        return

    if caller_id is None:
        raise ValidationError({"credentials": ["Sign in or create an account to place an order"]})

    if isinstance(draft.customer, ContactDetails):
        raise ValidationError({"customer": ["Signed-in customers order with the contact details in their profile"]})

    if isinstance(draft.customer, CustomerByReference) and str(draft.customer.user_id) != str(caller_id):
        raise ValidationError({"customer": ["You can only order for yourself"]})


def _resolve_pizza(selection, user_id):
    if isinstance(selection, CustomPizza):
        return current_domain.process(
            CreateCustomPizza(
                owner_id=user_id,
                name=selection.name,
                crust=selection.crust,
                sauce=selection.sauce,
                size=selection.size,
                meat_toppings=selection.meats or json.dumps([]),
                non_meat_toppings=selection.non_meats or json.dumps([]),
            ),
            asynchronous=False,
        )

    try:
        pizza = current_domain.repository_for(Pizza).get(selection.pizza_id)
    except ObjectNotFoundError:
        pizza = None

    if pizza is None or not pizza.visible_to(user_id):
        raise NotFoundError({"pizza": [f"Pizza {selection.pizza_id} does not exist"]})

    return str(pizza.id)


def place_order(draft, caller_id=None):
    """Materialize everything an order needs and return the new order id.

    ``caller_id`` is the signed-in user, if any. Raises
    ``NoPizzaSelectedError`` or ``ValidationError`` for an unusable draft,
    ``AccountCreationError`` when sign-up fails, ``NotFoundError`` for a
    missing account or pizza, and ``StoreWriteError`` for any other failure.
    """
    _check_draft(draft, caller_id)

    accounts = get_account_service()
    log = logger.bind(signing_up=draft.credentials is not None)

    with _step(STEP_ACCOUNT, log):
        if draft.credentials is not None:
            user_id = accounts.create_account(draft.credentials.email, draft.credentials.password)
        else:
            user_id = str(caller_id)
            if not accounts.account_exists(user_id):
                raise NotFoundError({"user_id": [f"Account {user_id} does not exist"]})
    log = log.bind(user_id=user_id)

    if isinstance(draft.customer, ContactDetails):
        with _step(STEP_CUSTOMER, log):
            customer_id = current_domain.process(
                RegisterCustomer(user_id=user_id, **draft.customer.as_dict()),
                asynchronous=False,
            )
        log.info("Customer stored", customer_id=customer_id)

    with _step(STEP_PIZZA, log):
        pizza_id = _resolve_pizza(draft.pizza, user_id)
    log = log.bind(pizza_id=pizza_id, custom=isinstance(draft.pizza, CustomPizza))

    with _step(STEP_ORDER, log):
        order_id = current_domain.process(
            CreateOrder(user_id=user_id, pizza_id=pizza_id),
            asynchronous=False,
        )

    log.info("Order placed", order_id=order_id)
    return order_id
