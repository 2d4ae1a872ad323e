# services/business_logic/order_service/api.py
# Create and read-by-id routes for orders, carts and checkouts.
# Each route does exactly one storage call; errors map to 404 / 500.

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from constants import (
    CART_COLLECTION,
    CART_CREATED_MESSAGE,
    CHECKOUT_COLLECTION,
    CHECKOUT_CREATED_MESSAGE,
    ORDER_COLLECTION,
    ORDER_CREATED_MESSAGE,
)
from shared.database.mongo_client import MongoStore
from services.api.body import read_body
from services.business_logic.order_service.repository import (
    EntityRepository,
    RecordNotFound,
    StorageFailure,
)
from services.business_logic.order_service.schemas import Cart, Checkout, Order

router = APIRouter()


# ── Dependencies ──────────────────────────────────────────────────────────────

def get_store(request: Request) -> MongoStore:
    return request.app.state.store


def order_repository(store: MongoStore = Depends(get_store)) -> EntityRepository:
    return EntityRepository(store, Order, ORDER_COLLECTION)


def cart_repository(store: MongoStore = Depends(get_store)) -> EntityRepository:
    return EntityRepository(store, Cart, CART_COLLECTION)


def checkout_repository(store: MongoStore = Depends(get_store)) -> EntityRepository:
    return EntityRepository(store, Checkout, CHECKOUT_COLLECTION)


def _storage_error(e: StorageFailure) -> JSONResponse:
    # Raw driver/coercion text goes back to the caller unchanged
    return JSONResponse(status_code=500, content={"error": str(e)})


def _not_found(label: str) -> JSONResponse:
    return JSONResponse(status_code=404, content={"message": f"{label} not found"})


# ── Orders ────────────────────────────────────────────────────────────────────

@router.post("/order", status_code=201)
def create_order(
    body: dict = Depends(read_body),
    orders: EntityRepository = Depends(order_repository),
):
    try:
        order_id = orders.create(body)
    except StorageFailure as e:
        return _storage_error(e)
    return {"message": ORDER_CREATED_MESSAGE, "orderId": order_id}


@router.get("/order/{order_id}")
def get_order(order_id: str, orders: EntityRepository = Depends(order_repository)):
    try:
        return orders.get_by_id(order_id)
    except RecordNotFound:
        return _not_found("Order")
    except StorageFailure as e:
        return _storage_error(e)


# ── Carts ─────────────────────────────────────────────────────────────────────

@router.post("/cart", status_code=201)
def create_cart(
    body: dict = Depends(read_body),
    carts: EntityRepository = Depends(cart_repository),
):
    try:
        cart_id = carts.create(body)
    except StorageFailure as e:
        return _storage_error(e)
    return {"message": CART_CREATED_MESSAGE, "cartId": cart_id}


@router.get("/cart/{cart_id}")
def get_cart(cart_id: str, carts: EntityRepository = Depends(cart_repository)):
    try:
        return carts.get_by_id(cart_id)
    except RecordNotFound:
        return _not_found("Cart")
    except StorageFailure as e:
        return _storage_error(e)


# ── Checkouts ─────────────────────────────────────────────────────────────────

@router.post("/checkout", status_code=201)
def create_checkout(
    body: dict = Depends(read_body),
    checkouts: EntityRepository = Depends(checkout_repository),
):
    try:
        checkout_id = checkouts.create(body)
    except StorageFailure as e:
        return _storage_error(e)
    return {"message": CHECKOUT_CREATED_MESSAGE, "checkoutId": checkout_id}


@router.get("/checkout/{checkout_id}")
def get_checkout(checkout_id: str, checkouts: EntityRepository = Depends(checkout_repository)):
    try:
        return checkouts.get_by_id(checkout_id)
    except RecordNotFound:
        return _not_found("Checkout")
    except StorageFailure as e:
        return _storage_error(e)
