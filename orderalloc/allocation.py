"""Greedy assignment of order items to distribution centers."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from .models import Order, OrderItem, OrderRequest, OrderResponse


@dataclass
class DistributionCenter:
    """A distribution center and the products it stocks."""

    name: str
    products: set[int] = field(default_factory=set)


class Catalog:
    """Which distribution centers stock which products."""

    def __init__(self, product_distribution_centers: Mapping[int, Sequence[str]]) -> None:
        self.product_distribution_centers: dict[int, list[str]] = {
            product: list(centers) for product, centers in product_distribution_centers.items()
        }
        self.distribution_center_map: dict[str, DistributionCenter] = {}
        for product, centers in self.product_distribution_centers.items():
            for name in centers:
                if name not in self.distribution_center_map:
                    self.distribution_center_map[name] = DistributionCenter(name)
                self.distribution_center_map[name].products.add(product)

    def allocate(self, order: OrderRequest) -> OrderResponse:
        """Assign products by repeatedly picking the center that covers the most
        still-unassigned products; items nobody stocks get an empty center."""
        unassigned = set(self.product_distribution_centers)
        remaining = dict(self.distribution_center_map)
        assignments: dict[int, str] = {}

        while unassigned and remaining:
            best = max(
                remaining.values(),
                key=lambda center: len(center.products & unassigned),
            )
            covered = best.products & unassigned
            if not covered:
                break
            for product in covered:
                assignments[product] = best.name
            unassigned -= covered
            del remaining[best.name]

        items = [
            OrderItem(
                id=item.id,
                name=item.name,
                price=item.price,
                distribution_center=assignments.get(item.id, ""),
            )
            for item in order.items
        ]
        return OrderResponse(order=Order(items=items))