"""Concurrent lookup of the distribution centers that stock each order item."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from functools import partial
from typing import Any

from .config import get_distribution_center_url
from .httpclient import HttpClientError, RequestOptions, do_request
from .models import DistributionCenterResponse, OrderRequest

MAX_CONCURRENT_REQUESTS = 10

RequestFunc = Callable[[RequestOptions], Any]


@dataclass(frozen=True)
class FetchResult:
    """Outcome of looking up one item: its centers, or the error met."""

    item_id: int
    centers: list[str] = field(default_factory=list)
    error: Exception | None = None


def fetch_distribution_center(item_id: int, request_func: RequestFunc = do_request) -> FetchResult:
    """Ask the lookup service which centers stock ``item_id``."""
    options = RequestOptions(
        method="GET",
        url=get_distribution_center_url(),
        query_params={"itemId": str(item_id)},
    )
    try:
        payload = request_func(options)
        parsed = DistributionCenterResponse.from_dict(payload or {})
    except (HttpClientError, ValueError) as exc:
        return FetchResult(item_id=item_id, error=exc)
    return FetchResult(item_id=item_id, centers=parsed.distribution_centers)


def organize_results(
    results: Iterable[FetchResult],
) -> tuple[dict[int, list[str]], dict[int, str]]:
    """Split results into centers per item and error messages per item."""
    centers: dict[int, list[str]] = {}
    errors: dict[int, str] = {}
    for result in results:
        if result.error is not None:
            errors[result.item_id] = str(result.error)
        else:
            centers[result.item_id] = result.centers
    return centers, errors


def retrieve_distribution_centers(
    order: OrderRequest, request_func: RequestFunc = do_request
) -> tuple[dict[int, list[str]], dict[int, str]]:
    """Look up every item of the order, at most ten requests at a time."""
    fetch = partial(fetch_distribution_center, request_func=request_func)
    with ThreadPoolExecutor(max_workers=MAX_CONCURRENT_REQUESTS) as pool:
        results = list(pool.map(fetch, (item.id for item in order.items)))
    return organize_results(results)