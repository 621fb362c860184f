"""HTTP API: health check, order allocation and order lookup."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from flask import Blueprint, Flask, Response, current_app, jsonify, request
from pymongo.errors import PyMongoError

from .allocation import Catalog
from .httpclient import do_request
from .models import OrderRequest, to_order_document
from .repository import (
    InvalidOrderIdError,
    OrderNotFoundError,
    get_order_by_id,
    save_order_document,
)
from .retrieve import RequestFunc, retrieve_distribution_centers

API_PREFIX = "/api/v1"
MAX_ORDER_ITEMS = 100

ALLOW_ORIGIN = "*"
ALLOW_METHODS = "GET, POST, PUT, DELETE, OPTIONS"
ALLOW_HEADERS = "Content-Type, Authorization"

_EXTENSION_KEY = "orderalloc"


@dataclass(frozen=True)
class _Services:
    database: Any
    request_func: RequestFunc


def _services() -> _Services:
    return current_app.extensions[_EXTENSION_KEY]


def _database() -> Any:
    database = _services().database
    if database is None:
        raise RuntimeError("database is not configured")
    return database


def health_check() -> Response:
    """Report that the service is up."""
    return jsonify({"status": "ok", "message": "Service is healthy"})


def process_order() -> Any:
    """Allocate the posted order's items to distribution centers and store it."""
    try:
        payload = json.loads(request.get_data(as_text=True))
        order = OrderRequest.from_dict(payload)
    except ValueError as exc:
        return jsonify({"error": str(exc)}), 400

    if not 1 <= len(order.items) <= MAX_ORDER_ITEMS:
        return jsonify({"error": "order must contain between 1 and 100 items"}), 400

    centers, errors = retrieve_distribution_centers(order, _services().request_func)
    if errors:
        return jsonify({"message": "Failed to fetch distribution centers"}), 500

    response = Catalog(centers).allocate(order)
    try:
        order_id = save_order_document(_database(), to_order_document(response))
    except (PyMongoError, RuntimeError) as exc:
        return jsonify({"message": "Failed to save order request", "error": str(exc)}), 500

    response.order_id = str(order_id)
    return jsonify(response.to_dict())


def get_order(order_id: str) -> Any:
    """Return a stored order by its id."""
    try:
        order = get_order_by_id(_database(), order_id)
    except (InvalidOrderIdError, OrderNotFoundError, PyMongoError, RuntimeError):
        return jsonify({"error": "order not found"}), 404
    return jsonify(order.to_dict())


def register_cors(app: Flask) -> None:
    """Answer preflight requests and add CORS headers to every response."""

    @app.before_request
    def _short_circuit_preflight() -> Response | None:
        if request.method == "OPTIONS":
            return app.make_response(("", 204))
        return None

    @app.after_request
    def _add_cors_headers(response: Response) -> Response:
        response.headers["Access-Control-Allow-Origin"] = ALLOW_ORIGIN
        response.headers["Access-Control-Allow-Methods"] = ALLOW_METHODS
        response.headers["Access-Control-Allow-Headers"] = ALLOW_HEADERS
        return response


def _api_blueprint() -> Blueprint:
    api = Blueprint("api", __name__, url_prefix=API_PREFIX)
    api.add_url_rule("/health-check", view_func=health_check, methods=["GET"])
    api.add_url_rule("/order", view_func=process_order, methods=["POST"])
    api.add_url_rule("/order/<order_id>", view_func=get_order, methods=["GET"])
    return api


def create_app(database: Any = None, request_func: RequestFunc = do_request) -> Flask:
    """Build the application around a database and a lookup request function."""
    app = Flask(__name__)
    app.extensions[_EXTENSION_KEY] = _Services(database=database, request_func=request_func)
    register_cors(app)
    app.register_blueprint(_api_blueprint())
    return app