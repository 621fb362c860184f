"""A small JSON-over-HTTP request helper."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import requests

SUPPORTED_METHODS = frozenset({"GET", "POST", "PUT", "DELETE"})


class HttpClientError(Exception):
    """Raised when a request cannot be made or the server answers with an error."""


@dataclass(frozen=True)
class RequestOptions:
    """What to send: method, URL, and optional query parameters and headers."""

    method: str
    url: str
    query_params: Mapping[str, str] | None = None
    headers: Mapping[str, str] | None = None
    timeout: float | None = None


def do_request(options: RequestOptions) -> Any:
    """Perform the request and return the decoded JSON body.

    Returns ``None`` when the response carries no JSON. Raises
    :class:`HttpClientError` for unsupported methods, transport failures and
    responses with a status of 400 or above.
    """
    if options.method not in SUPPORTED_METHODS:
        raise HttpClientError(f"unsupported HTTP method: {options.method}")

    try:
        response = requests.request(
            options.method,
            options.url,
            params=dict(options.query_params) if options.query_params else None,
            headers=dict(options.headers) if options.headers else None,
            timeout=options.timeout,
        )
    except requests.RequestException as exc:
        raise HttpClientError(f"request failed: {exc}") from exc

    if response.status_code > 399:
        raise HttpClientError(f"API error: {response.status_code} {response.reason}")

    content_type = response.headers.get("Content-Type", "").lower()
    if not response.content or "json" not in content_type:
        return None
    try:
        return response.json()
    except ValueError as exc:
        raise HttpClientError(f"request failed: {exc}") from exc