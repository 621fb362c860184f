"""Storage and lookup of allocated orders in MongoDB."""

from __future__ import annotations

from typing import Any

from bson import ObjectId
from bson.errors import InvalidId

from .models import Order, OrderDocument, OrderItem, OrderResponse

ORDERS_COLLECTION = "orders"


class InvalidOrderIdError(ValueError):
    """Raised when an order id is not a valid ObjectId in hex form."""


class OrderNotFoundError(LookupError):
    """Raised when no stored order has the requested id."""


def save_order_document(database: Any, document: OrderDocument) -> ObjectId:
    """Insert the order and return the id the database gave it."""
    result = database[ORDERS_COLLECTION].insert_one(document.to_bson())
    return result.inserted_id


def get_order_by_id(database: Any, order_id: str) -> OrderResponse:
    """Read a stored order back in the shape the API answers with."""
    try:
        object_id = ObjectId(order_id)
    except (InvalidId, TypeError) as exc:
        raise InvalidOrderIdError("invalid order ID") from exc

    raw = database[ORDERS_COLLECTION].find_one({"_id": object_id})
    if raw is None:
        raise OrderNotFoundError(f"no order with id {order_id}")

    document = OrderDocument.from_bson(raw)
    items = [
        OrderItem(
            id=item.id,
            name=item.name,
            price=item.price,
            distribution_center=item.distribution_center,
        )
        for item in document.items
    ]
    return OrderResponse(order=Order(items=items), order_id=str(object_id))