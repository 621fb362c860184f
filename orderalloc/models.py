"""Order data as it travels over the wire and as it is stored."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from bson import ObjectId

DISTRIBUTION_CENTERS_KEY = "distribuitionCenters"


def _require_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"{what} must be a JSON object")
    return data


def _read_int(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field {key!r} must be an integer")
    return value


def _read_float(data: Mapping[str, Any], key: str) -> float:
    value = data.get(key)
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"field {key!r} must be a number")
    return float(value)


def _read_str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


def _read_list(data: Mapping[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"field {key!r} must be an array")
    return value


@dataclass
class Item:
    """An item as requested in an order."""

    id: int
    name: str = ""
    price: float = 0.0


@dataclass
class OrderRequest:
    """The body of an order request."""

    items: list[Item] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> OrderRequest:
        """Build a request from decoded JSON, raising ValueError on bad shapes."""
        body = _require_mapping(data, "order request")
        items = []
        for raw in _read_list(body, "items"):
            entry = _require_mapping(raw, "item")
            items.append(
                Item(
                    id=_read_int(entry, "id"),
                    name=_read_str(entry, "name"),
                    price=_read_float(entry, "price"),
                )
            )
        return cls(items=items)


@dataclass
class OrderItem:
    """An item together with the distribution center that serves it."""

    id: int
    name: str = ""
    price: float = 0.0
    distribution_center: str = ""


@dataclass
class Order:
    """The allocated items of an order."""

    items: list[OrderItem] = field(default_factory=list)


def _order_item_to_dict(item: OrderItem) -> dict[str, Any]:
    payload: dict[str, Any] = {"id": item.id, "name": item.name, "price": item.price}
    if item.distribution_center:
        payload["distribution_center"] = item.distribution_center
    return payload


@dataclass
class OrderResponse:
    """The answer to an order request."""

    order: Order = field(default_factory=Order)
    order_id: str = ""

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready form; empty ids and centers are left out."""
        payload: dict[str, Any] = {}
        if self.order_id:
            payload["order_id"] = self.order_id
        payload["order"] = {"items": [_order_item_to_dict(i) for i in self.order.items]}
        return payload


@dataclass
class DistributionCenterResponse:
    """The lookup service's answer for one item."""

    distribution_centers: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> DistributionCenterResponse:
        """Build from decoded JSON, raising ValueError on bad shapes."""
        body = _require_mapping(data, "distribution center response")
        centers = _read_list(body, DISTRIBUTION_CENTERS_KEY)
        if not all(isinstance(center, str) for center in centers):
            raise ValueError(f"field {DISTRIBUTION_CENTERS_KEY!r} must hold strings")
        return cls(distribution_centers=list(centers))


@dataclass
class OrderItemDocument:
    """A stored order item."""

    id: int
    name: str = ""
    price: float = 0.0
    distribution_center: str = ""


@dataclass
class OrderDocument:
    """A stored order."""

    items: list[OrderItemDocument] = field(default_factory=list)
    id: ObjectId | None = None

    def to_bson(self) -> dict[str, Any]:
        """Document ready for insertion; ``_id`` only when one is set."""
        document: dict[str, Any] = {}
        if self.id is not None:
            document["_id"] = self.id
        document["items"] = [
            {
                "id": item.id,
                "name": item.name,
                "price": item.price,
                "distribution_center": item.distribution_center,
            }
            for item in self.items
        ]
        return document

    @classmethod
    def from_bson(cls, data: Mapping[str, Any]) -> OrderDocument:
        """Build from a document as read from the database."""
        body = _require_mapping(data, "order document")
        items = []
        for raw in _read_list(body, "items"):
            entry = _require_mapping(raw, "order item")
            items.append(
                OrderItemDocument(
                    id=_read_int(entry, "id"),
                    name=_read_str(entry, "name"),
                    price=_read_float(entry, "price"),
                    distribution_center=_read_str(entry, "distribution_center"),
                )
            )
        return cls(items=items, id=body.get("_id"))


def to_order_document(response: OrderResponse) -> OrderDocument:
    """Turn an allocation result into the document that gets stored."""
    return OrderDocument(
        items=[
            OrderItemDocument(
                id=item.id,
                name=item.name,
                price=item.price,
                distribution_center=item.distribution_center,
            )
            for item in response.order.items
        ]
    )