"""Opening the database and creating its tables."""

from __future__ import annotations

import aiosqlite

from flashsale.config import Config

_SCHEMA = """
CREATE TABLE IF NOT EXISTS users (
    id TEXT PRIMARY KEY,
    created_at TEXT NOT NULL
);
CREATE TABLE IF NOT EXISTS products (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    created_at TEXT NOT NULL
);
CREATE TABLE IF NOT EXISTS flash_sales (
    id TEXT PRIMARY KEY,
    product_id TEXT NOT NULL,
    start_time TEXT NOT NULL,
    end_time TEXT NOT NULL,
    total_inventory INTEGER NOT NULL,
    remaining_inventory INTEGER NOT NULL,
    per_user_limit INTEGER NOT NULL,
    created_at TEXT NOT NULL
);
CREATE TABLE IF NOT EXISTS orders (
    id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    flash_sale_id TEXT NOT NULL,
    quantity INTEGER NOT NULL,
    status TEXT NOT NULL CHECK (status IN ('PENDING', 'CONFIRMED', 'FAILED')),
    created_at TEXT NOT NULL
);
"""

_MEMORY = ":memory:"


def _database_path(url: str) -> str:
    if url in (_MEMORY, "sqlite://"):
        return _MEMORY
    prefix = "sqlite:///"
    if url.startswith(prefix):
        return url[len(prefix):] or _MEMORY
    if "://" in url:
        raise ValueError(f"unsupported database URL: {url}")
    return url


async def create_schema(connection: aiosqlite.Connection) -> None:
    """Create the tables if they do not exist yet."""
    await connection.executescript(_SCHEMA)
    await connection.commit()


async def connect(config: Config) -> aiosqlite.Connection:
    """Open the configured database and make sure its tables exist."""
    connection = await aiosqlite.connect(_database_path(config.database_url))
    try:
        await create_schema(connection)
    except BaseException:
        await connection.close()
        raise
    return connection