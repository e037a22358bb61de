"""FastAPI endpoints for the pizzeria.

Every write goes through a workflow; there are no routes that create,
change or delete documents directly.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from pizzeria.accounts import get_account_service
from pizzeria.accounts.registration import register_account
from pizzeria.api.auth import create_access_token, current_user_id, require_user_id
from pizzeria.api.schemas import (
    ChannelResponse,
    CustomerIdResponse,
    LoginRequest,
    OrderIdResponse,
    PlaceOrderRequest,
    RegisterAccountRequest,
    TokenResponse,
    ContactRequest,
    UserIdResponse,
)
from pizzeria.channels.publications import order_channel, profile_channel
from pizzeria.customer.profile import update_customer
from pizzeria.ordering.draft import (
    ContactDetails,
    Credentials,
    CustomerByReference,
    CustomPizza,
    OrderDraft,
    PizzaByReference,
)
from pizzeria.ordering.placement import place_order

account_router = APIRouter(prefix="/accounts", tags=["accounts"])
order_router = APIRouter(prefix="/orders", tags=["orders"])
customer_router = APIRouter(prefix="/customers", tags=["customers"])
channel_router = APIRouter(prefix="/channels", tags=["channels"])


# --- Account endpoints ---


@account_router.post("", status_code=201, response_model=UserIdResponse)
async def register(body: RegisterAccountRequest) -> UserIdResponse:
    user_id = register_account(body.email, body.password)
    return UserIdResponse(user_id=user_id)


@account_router.post("/login", response_model=TokenResponse)
async def login(body: LoginRequest) -> TokenResponse:
    user_id = get_account_service().authenticate(body.email, body.password)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return TokenResponse(access_token=create_access_token(user_id), user_id=user_id)


# --- Order endpoints ---


def _draft_from(body: PlaceOrderRequest, caller_id: str | None) -> OrderDraft:
    pizza = None
    if body.pizza is not None and body.pizza.kind == "catalogue":
        pizza = PizzaByReference(pizza_id=body.pizza.pizza_id)
    elif body.pizza is not None and body.pizza.kind == "custom":
        pizza = CustomPizza.build(
            name=body.pizza.name,
            crust=body.pizza.crust,
            sauce=body.pizza.sauce,
            size=body.pizza.size,
            meats=body.pizza.meats,
            non_meats=body.pizza.non_meats,
        )

    if body.customer is not None:
        customer = ContactDetails(**body.customer.model_dump(exclude_none=True))
    elif caller_id is not None:
        customer = CustomerByReference(user_id=caller_id)
    else:
        customer = None

    credentials = None
    if body.credentials is not None:
        credentials = Credentials(email=body.credentials.email, password=body.credentials.password)

    return OrderDraft(pizza=pizza, customer=customer, credentials=credentials)


@order_router.post("", status_code=201, response_model=OrderIdResponse)
async def create_order(
    body: PlaceOrderRequest,
    caller_id: str | None = Depends(current_user_id),
) -> OrderIdResponse:
    order_id = place_order(_draft_from(body, caller_id), caller_id=caller_id)
    return OrderIdResponse(order_id=order_id)


# --- Customer endpoints ---


@customer_router.put("/me", response_model=CustomerIdResponse)
async def update_contact_information(
    body: ContactRequest,
    user_id: str = Depends(require_user_id),
) -> CustomerIdResponse:
    customer_id = update_customer(user_id, **body.model_dump(exclude_none=True))
    return CustomerIdResponse(customer_id=customer_id)


# --- Channel endpoints ---


@channel_router.get("/order", response_model=ChannelResponse)
async def order_screen(user_id: str | None = Depends(current_user_id)) -> ChannelResponse:
    return ChannelResponse(**order_channel(user_id))


@channel_router.get("/profile", response_model=ChannelResponse)
async def profile_screen(user_id: str = Depends(require_user_id)) -> ChannelResponse:
    return ChannelResponse(**profile_channel(user_id))
