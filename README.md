# shopapi

A small Flask REST API for an online shop's product catalogue. It serves
products stored in a MySQL `products` table as JSON and wraps every reply
in a standard envelope. It also adds CORS headers, answers preflight
requests and publishes a Swagger 2.0 description of its endpoints.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Configuration

`shopapi.database.DatabaseConfig.from_env()` reads the connection settings
from the environment:

| Variable      | Meaning            |
|---------------|--------------------|
| `DB_USER`     | database user      |
| `DB_PASSWORD` | database password  |
| `DB_HOST`     | database host      |
| `DB_PORT`     | database port      |
| `DB_NAME`     | database (schema)  |

`init_database()` opens a connection with these settings. If the port is
not a number or the server cannot be reached, it raises
`shopapi.database.DatabaseError`.

The `products` table must already exist. It has the columns `id`,
`productCode`, `name`, `price`, `status` and `inventory`, in that order.

## Running the server

```
shopapi
```

The command prints a banner, connects to the database and serves on
`:9004`, which means all interfaces, port 9004. Use `--port` to give
another listen address, for example `--port 127.0.0.1:8080`. The command
prints its startup time and closes the database connection when the
server stops.

## Endpoints

| Method | Path                 | Action                          |
|--------|----------------------|---------------------------------|
| GET    | `/products`          | list every product              |
| GET    | `/products/{id}`     | fetch one product               |
| POST   | `/products`          | create a product                |
| PUT    | `/products`          | update a product (id required)  |
| DELETE | `/products/{id}`     | delete one product              |
| DELETE | `/products`          | delete every product            |
| GET    | `/swagger/doc.json`  | the Swagger 2.0 document        |

Products travel as JSON objects with the keys `id`, `productCode`,
`name`, `price`, `status` and `inventory`. Keys match case-insensitively
and unknown keys are ignored. POST answers with the new product's `id`,
`productCode` and `name`.

Every reply has this shape:

```json
{
  "responseStatus": 200,
  "timedate": "2024-01-01 12:00:00",
  "responseMessage": "...",
  "responseData": { }
}
```

`responseData` is left out when there is nothing to return.

The API answers with these error statuses:

- **400** for an id that is not an integer.
- **400** for a body that is not valid JSON.
- **400** for a PUT without an `id`.
- **500** for database failures. A product that does not exist also gets a 500.

Each request has a seven-second deadline. Two situations produce a 408:

- A request found past its deadline before its handler runs.
- A database failure after the deadline has passed.

The delete endpoints wait five intervals before acting. An interval is one
second by default and is set by the Flask config key
`DELAY_ABORT_INTERVAL`. If the deadline would pass during this wait, they
answer 408 instead.

## Using it from Python

```python
from shopapi.app import create_app
from shopapi.database import DatabaseConfig, init_database
from shopapi.repository import ProductRepository
from shopapi.service import ProductService

connection = init_database(DatabaseConfig.from_env())
service = ProductService(ProductRepository(connection))
app = create_app(service)
app.run(port=9004)
```

The modules are:

- **`ProductRepository`** works with any DB-API connection. Its `placeholder` argument (default `%s`) sets the driver's parameter marker. Query failures raise `RepositoryError`. A missing product raises `ProductNotFound`.
- **`shopapi.app.App`** bundles a listen address and a service. `App.init()` builds the Flask application and `App.run()` serves it.
- **`shopapi.docs.swagger_spec(info)`** returns the Swagger document for a `SwaggerInfo`.
- **`shopapi.responses`** provides `json_response` and `error_response`, which build the standard envelope.

## What it does not do

- It serves the Swagger document as JSON only. There is no interactive documentation page.
- It does not create or migrate the `products` table.
- It has no authentication.