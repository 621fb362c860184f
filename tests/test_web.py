from __future__ import annotations

import copy
from types import SimpleNamespace

import pytest
from bson import ObjectId
from flask import Flask, jsonify
from pymongo.errors import PyMongoError

from orderalloc.httpclient import HttpClientError
from orderalloc.web import create_app, register_cors


class FakeCollection:
    def __init__(self, fail=False):
        self.documents = []
        self.fail = fail

    def insert_one(self, document):
        if self.fail:
            raise PyMongoError("write refused")
        stored = copy.deepcopy(document)
        stored.setdefault("_id", ObjectId())
        self.documents.append(stored)
        return SimpleNamespace(inserted_id=stored["_id"])

    def find_one(self, query):
        for document in self.documents:
            if all(document.get(key) == value for key, value in query.items()):
                return copy.deepcopy(document)
        return None


class FakeDatabase:
    def __init__(self, fail=False):
        self.fail = fail
        self.collections = {}

    def __getitem__(self, name):
        return self.collections.setdefault(name, FakeCollection(self.fail))


CENTERS = {"1": ["CD1", "CD2"], "2": ["CD2"], "3": ["CD3"]}


def fake_lookup(options):
    item_id = options.query_params["itemId"]
    if item_id == "99":
        raise HttpClientError("mocked error")
    return {"distribuitionCenters": CENTERS.get(item_id, [])}


@pytest.fixture
def database():
    return FakeDatabase()


@pytest.fixture
def client(database):
    return create_app(database, fake_lookup).test_client()


def _order(*ids):
    return {"items": [{"id": i, "name": f"Item {i}", "price": float(i)} for i in ids]}


def test_health_check(client):
    resp = client.get("/api/v1/health-check")
    assert resp.status_code == 200
    body = resp.get_data(as_text=True)
    assert "ok" in body
    assert "Service is healthy" in body


def test_order_invalid_json(client):
    resp = client.post(
        "/api/v1/order", data='{"items": [invalid]}', content_type="application/json"
    )
    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_order_empty_items(client):
    resp = client.post("/api/v1/order", json={"items": []})
    assert resp.status_code == 400
    assert "between 1 and 100" in resp.get_data(as_text=True)


def test_order_too_many_items(client):
    items = [{"id": i + 1, "name": "Item", "price": 1.0} for i in range(101)]
    resp = client.post("/api/v1/order", json={"items": items})
    assert resp.status_code == 400


def test_order_wrong_field_type(client):
    resp = client.post("/api/v1/order", json={"items": [{"id": "one"}]})
    assert resp.status_code == 400


def test_order_allocates_and_stores(client, database):
    resp = client.post("/api/v1/order", json=_order(1, 2, 3))
    assert resp.status_code == 200
    body = resp.get_json()
    assert ObjectId.is_valid(body["order_id"])
    items = body["order"]["items"]
    assert [item["id"] for item in items] == [1, 2, 3]
    assert all(item["distribution_center"] for item in items)
    assert items[2]["distribution_center"] == "CD3"
    assert len(database["orders"].documents) == 1


def test_order_then_get_round_trip(client):
    created = client.post("/api/v1/order", json=_order(1, 2)).get_json()
    resp = client.get(f"/api/v1/order/{created['order_id']}")
    assert resp.status_code == 200
    assert resp.get_json() == created


def test_order_lookup_failure(client, database):
    resp = client.post("/api/v1/order", json=_order(1, 99))
    assert resp.status_code == 500
    assert resp.get_json() == {"message": "Failed to fetch distribution centers"}
    assert database["orders"].documents == []


def test_order_save_failure():
    client = create_app(FakeDatabase(fail=True), fake_lookup).test_client()
    resp = client.post("/api/v1/order", json=_order(1))
    assert resp.status_code == 500
    body = resp.get_json()
    assert body["message"] == "Failed to save order request"
    assert "write refused" in body["error"]


@pytest.mark.parametrize("order_id", ["not-an-id", str(ObjectId())])
def test_get_order_not_found(client, order_id):
    resp = client.get(f"/api/v1/order/{order_id}")
    assert resp.status_code == 404
    assert resp.get_json() == {"error": "order not found"}


def test_cors_options_request():
    app = Flask(__name__)
    register_cors(app)

    @app.route("/test", methods=["OPTIONS"])
    def _test():
        return ""

    resp = app.test_client().options("/test")
    assert resp.status_code == 204
    assert resp.headers["Access-Control-Allow-Origin"] == "*"
    assert "OPTIONS" in resp.headers["Access-Control-Allow-Methods"]
    assert "Authorization" in resp.headers["Access-Control-Allow-Headers"]


def test_cors_non_options_request():
    app = Flask(__name__)
    register_cors(app)

    @app.route("/test")
    def _test():
        return jsonify({"message": "ok"})

    resp = app.test_client().get("/test")
    assert resp.status_code == 200
    assert resp.headers["Access-Control-Allow-Origin"] == "*"
    assert "GET" in resp.headers["Access-Control-Allow-Methods"]


def test_router_health_check_route():
    resp = create_app().test_client().get("/api/v1/health-check")
    assert resp.status_code == 200
    assert "healthy" in resp.get_data(as_text=True)
    assert resp.headers["Access-Control-Allow-Origin"] == "*"


def test_router_not_found():
    resp = create_app().test_client().get("/api/v1/nonexistent")
    assert resp.status_code == 404