# flashsale

A small JSON HTTP server that keeps users and products in an SQLite
database. Domain models and storage for flash sales and orders are included
as a library, but are not exposed over HTTP.

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Configuration

The server reads its settings from the environment. If a `.env` file can be
found from the working directory, it is loaded first; variables already set
in the environment take precedence over it.

| Variable       | Meaning                                           |
|----------------|---------------------------------------------------|
| `DATABASE_URL` | The SQLite database to use. Required.             |

`DATABASE_URL` may be:

- `:memory:` or `sqlite://` for an in-memory database,
- `sqlite:///path/to/file.db` for a database file,
- a plain file path such as `data.db`.

Any other URL with a scheme (for example `postgres://...`) is rejected with
`ValueError: unsupported database URL`. The tables `users`, `products`,
`flash_sales` and `orders` are created on start-up if they do not exist.

If `DATABASE_URL` is missing, the server refuses to start with the message
`DATABASE_URL must be set (e.g. in .env)`. The server always listens on
`127.0.0.1:3000`.

## Running

```
flashsale
```

The command takes no options besides `--help`. Logging is at debug level
(with the `aiosqlite` logger held at info), so every request and every
start-up step is written out. If start-up fails, the error is printed as
`Error: ...` on standard error and the exit status is 1.

## Endpoints

| Method | Path           | What it does                                  |
|--------|----------------|-----------------------------------------------|
| POST   | `/users`       | Creates a user and returns it.                |
| GET    | `/users`       | Lists all users.                              |
| GET    | `/users/{id}`  | Returns one user by its UUID.                 |
| POST   | `/products`    | Creates a product from `{"name": "..."}`.     |
| GET    | `/products`    | Lists all products.                           |

Users come back as `{"id": ..., "created_at": ...}` and products as
`{"id": ..., "name": ..., "created_at": ...}`, with timestamps in ISO 8601.
A new product is stored with a freshly generated id and a `created_at` of
`1970-01-01T00:00:00Z`.

Failures from storage, including an unknown user id, are answered with
status 500 and the error text as plain text. A `/users/{id}` path whose id is
not a UUID is answered with status 500 and the text `Invalid UUID`. A product
request body without a string `name` is rejected by request validation with
status 422.

## Using it as a library

The pieces are separate and can be put together by hand:

- `flashsale.config.Config.from_env()` reads the settings; `Config` holds
  `database_url`, `http_host`, `http_port` and the `http_addr` property.
- `flashsale.database.connect(config)` opens the database and
  `flashsale.database.create_schema(connection)` creates its tables.
- `flashsale.domain` holds the entities `User`, `Product`, `FlashSale`,
  `Order` and the `OrderStatus` enum. `FlashSale` and `Order` check that their
  counts fit their ranges (inventories up to 2^32-1, per-user limit up to 255,
  quantity up to 65535) and raise `ValueError` otherwise.
- `flashsale.records` holds the row types and their conversions to and from
  the domain entities.
- `flashsale.repositories` holds `SqlUserRepo`, `SqlProductRepo`,
  `SqlFlashSaleRepo` and `SqlOrderRepo`, which implement the abstract
  repositories in `flashsale.ports`. `SqlUserRepo.get_by_id` raises
  `LookupError` for an unknown id.
- `flashsale.logic` holds the use cases `create_user`, `get_users`,
  `get_user_by_id`, `save_product` and `get_products`, and
  `CreateProductCommand`.
- `flashsale.dto` holds the request and response models.
- `flashsale.http.http_router(state)` builds the FastAPI application from an
  `AppState` holding a user repository and a product repository.
- `flashsale.runtime.run(config)` does all of the above and serves until
  stopped.

## What it does not do

- There are no HTTP endpoints for flash sales or orders; they can only be
  stored and listed through `SqlFlashSaleRepo` and `SqlOrderRepo`.
- Only SQLite is supported as storage.
- The listening address cannot be changed through the environment or the
  command line.