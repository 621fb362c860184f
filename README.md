# orderalloc

An HTTP service that takes an order, asks a lookup service which distribution
centers stock each item, picks as few centers as it can to cover the whole
order, and stores the result in MongoDB.

## Installing

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Running

```
orderalloc
```

The command sets up logging (text lines with full timestamps at INFO level on
stderr), reads a `.env` file from the working directory when one exists, and
connects to MongoDB. It exits with status 1 if MongoDB does not answer a ping
or the server cannot start. It takes no options; `orderalloc --help` prints a
short description.

Variables already in the environment win over those in `.env`. Empty
variables fall back to the defaults:

| Variable                  | Default                                          |
|---------------------------|--------------------------------------------------|
| `PORT`                    | `8080`                                           |
| `MONGO_URI`               | `mongodb://localhost:27017`                      |
| `MONGO_DB_NAME`           | `orderdb`                                        |
| `DISTRIBUTION_CENTER_URL` | `http://localhost:8001/distribuitioncenters`     |

The server listens on all interfaces (`0.0.0.0`) at `PORT`.

The distribution-center service is queried with `GET <url>?itemId=<id>` and
is expected to answer with `{"distribuitionCenters": ["CD1", "CD2"]}`. Up to
ten lookups run at a time.

## Endpoints

All routes live under `/api/v1`. Every response carries the headers
`Access-Control-Allow-Origin: *`,
`Access-Control-Allow-Methods: GET, POST, PUT, DELETE, OPTIONS` and
`Access-Control-Allow-Headers: Content-Type, Authorization`, and every
`OPTIONS` request is answered with an empty `204`.

### `GET /api/v1/health-check`

```json
{"status": "ok", "message": "Service is healthy"}
```

### `POST /api/v1/order`

Request:

```json
{"items": [{"id": 1, "name": "Item 1", "price": 10.0},
           {"id": 2, "name": "Item 2", "price": 20.0}]}
```

- A body that is not valid JSON, or has fields of the wrong type, gets `400`
  with `{"error": "..."}`.
- An order must hold between 1 and 100 items; otherwise `400` with
  `{"error": "order must contain between 1 and 100 items"}`.
- If any lookup fails (transport error, status 400 or above, or a malformed
  answer) the reply is `500` with
  `{"message": "Failed to fetch distribution centers"}`.
- If the order cannot be stored the reply is `500` with
  `{"message": "Failed to save order request", "error": "..."}`.

Response:

```json
{"order_id": "6650f0c2a1b2c3d4e5f60718",
 "order": {"items": [
   {"id": 1, "name": "Item 1", "price": 10.0, "distribution_center": "CD2"},
   {"id": 2, "name": "Item 2", "price": 20.0, "distribution_center": "CD2"}]}}
```

Allocation is greedy: the center that covers the most still-unassigned items
is chosen first, then the next, until every item is covered or no center adds
anything. Items no center stocks have no `distribution_center` key.

### `GET /api/v1/order/<id>`

Returns a saved order in the same shape as above. An id that is not a valid
ObjectId, an unknown id, or a database failure all give `404` with
`{"error": "order not found"}`.

## Using it as a library

```python
from orderalloc.allocation import Catalog
from orderalloc.models import OrderRequest

order = OrderRequest.from_dict({"items": [{"id": 1, "name": "A", "price": 1.0}]})
catalog = Catalog({1: ["CD1"]})
print(catalog.allocate(order).to_dict())
# {'order': {'items': [{'id': 1, 'name': 'A', 'price': 1.0, 'distribution_center': 'CD1'}]}}
```

The modules:

- `orderalloc.config` — `load_env()`, `get_port()`,
  `get_distribution_center_url()` and `init_mongo()`.
- `orderalloc.logger` — `init()` for the logging setup described above.
- `orderalloc.httpclient` — `do_request(RequestOptions(...))` sends a `GET`,
  `POST`, `PUT` or `DELETE` request and returns the decoded JSON body (or
  `None` when there is none); it raises `HttpClientError` otherwise.
- `orderalloc.models` — the request, response and stored-document dataclasses
  and `to_order_document()`.
- `orderalloc.allocation` — `Catalog` and `DistributionCenter`.
- `orderalloc.retrieve` — `retrieve_distribution_centers(order, request_func)`,
  `fetch_distribution_center()` and `organize_results()`.
- `orderalloc.repository` — `save_order_document(database, document)` and
  `get_order_by_id(database, order_id)`, raising `InvalidOrderIdError` or
  `OrderNotFoundError`.
- `orderalloc.web` — `create_app(database, request_func)` builds the Flask
  application around any pymongo database and any function that takes a
  `RequestOptions` and returns decoded JSON, which is handy for tests and
  embedding.

## What it does not do

- The `orderalloc` command runs Flask's built-in development server; for
  production, serve the application from `create_app()` with a WSGI server of
  your choice.
- There is no API documentation endpoint; the endpoints are described only
  here.
- Lookups to the distribution-center service have no timeout and are not
  retried.