"""SQL-backed implementations of the repository interfaces."""

from __future__ import annotations

import dataclasses
import uuid
from datetime import datetime, timezone
from typing import Any, Sequence

import aiosqlite

from flashsale.domain import FlashSale, Order, Product, User
from flashsale.ports import FlashSaleRepo, OrderRepo, ProductRepo, UserRepo
from flashsale.records import (
    FlashSaleRecord,
    OrderRecord,
    OrderStatusDb,
    ProductRecord,
    UserRecord,
)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _encode_time(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat()


def _decode_time(value: str) -> datetime:
    return datetime.fromisoformat(value)


class _SqlRepo:
    def __init__(self, connection: aiosqlite.Connection) -> None:
        self._connection = connection

    async def _insert(self, sql: str, params: Sequence[Any]) -> None:
        await self._connection.execute(sql, params)
        await self._connection.commit()

    async def _fetch_all(self, sql: str, params: Sequence[Any] = ()) -> list[Any]:
        async with self._connection.execute(sql, params) as cursor:
            return list(await cursor.fetchall())


class SqlFlashSaleRepo(_SqlRepo, FlashSaleRepo):
    """Flash sales in the ``flash_sales`` table."""

    async def save(self, flash_sale: FlashSale) -> FlashSale:
        """Insert a flash sale; the stored row gets a fresh id and timestamp."""
        record = dataclasses.replace(
            FlashSaleRecord.from_domain(flash_sale), id=uuid.uuid4(), created_at=_now()
        )
        await self._insert(
            "INSERT INTO flash_sales (id, product_id, start_time, end_time,"
            " total_inventory, remaining_inventory, per_user_limit, created_at)"
            " VALUES (?, ?, ?, ?, ?, ?, ?, ?)",
            (
                str(record.id),
                str(record.product_id),
                _encode_time(record.start_time),
                _encode_time(record.end_time),
                record.total_inventory,
                record.remaining_inventory,
                record.per_user_limit,
                _encode_time(record.created_at),
            ),
        )
        return record.to_domain()

    async def get_all(self) -> list[FlashSale]:
        rows = await self._fetch_all(
            "SELECT id, product_id, start_time, end_time, total_inventory,"
            " remaining_inventory, per_user_limit, created_at FROM flash_sales"
        )
        return [
            FlashSaleRecord(
                id=uuid.UUID(row[0]),
                product_id=uuid.UUID(row[1]),
                start_time=_decode_time(row[2]),
                end_time=_decode_time(row[3]),
                total_inventory=row[4],
                remaining_inventory=row[5],
                per_user_limit=row[6],
                created_at=_decode_time(row[7]),
            ).to_domain()
            for row in rows
        ]


class SqlOrderRepo(_SqlRepo, OrderRepo):
    """Orders in the ``orders`` table."""

    async def save(self, order: Order) -> Order:
        """Insert an order; the stored row gets a fresh id."""
        record = dataclasses.replace(OrderRecord.from_domain(order), id=uuid.uuid4())
        await self._insert(
            "INSERT INTO orders (id, user_id, flash_sale_id, quantity, status, created_at)"
            " VALUES (?, ?, ?, ?, ?, ?)",
            (
                str(record.id),
                str(record.user_id),
                str(record.flash_sale_id),
                record.quantity,
                record.status.value,
                _encode_time(record.created_at),
            ),
        )
        return record.to_domain()

    async def get_all(self) -> list[Order]:
        rows = await self._fetch_all(
            "SELECT id, user_id, flash_sale_id, quantity, status, created_at FROM orders"
        )
        return [
            OrderRecord(
                id=uuid.UUID(row[0]),
                user_id=uuid.UUID(row[1]),
                flash_sale_id=uuid.UUID(row[2]),
                quantity=row[3],
                status=OrderStatusDb(row[4]),
                created_at=_decode_time(row[5]),
            ).to_domain()
            for row in rows
        ]


class SqlProductRepo(_SqlRepo, ProductRepo):
    """Products in the ``products`` table."""

    async def save(self, product: Product) -> Product:
        """Insert a product; the stored row gets a fresh id."""
        record = dataclasses.replace(ProductRecord.from_domain(product), id=uuid.uuid4())
        await self._insert(
            "INSERT INTO products (id, name, created_at) VALUES (?, ?, ?)",
            (str(record.id), record.name, _encode_time(record.created_at)),
        )
        return record.to_domain()

    async def get_all(self) -> list[Product]:
        rows = await self._fetch_all("SELECT id, name, created_at FROM products")
        return [
            ProductRecord(
                id=uuid.UUID(row[0]), name=row[1], created_at=_decode_time(row[2])
            ).to_domain()
            for row in rows
        ]


class SqlUserRepo(_SqlRepo, UserRepo):
    """Users in the ``users`` table."""

    async def _insert_user(self, record: UserRecord) -> User:
        await self._insert(
            "INSERT INTO users (id, created_at) VALUES (?, ?)",
            (str(record.id), _encode_time(record.created_at)),
        )
        return record.as_user()

    async def create(self) -> User:
        return await self._insert_user(UserRecord(id=uuid.uuid4(), created_at=_now()))

    async def save(self, user: User) -> User:
        return await self._insert_user(UserRecord(id=user.id, created_at=user.created_at))

    async def get_all(self) -> list[User]:
        rows = await self._fetch_all("SELECT id, created_at FROM users")
        return [
            UserRecord(id=uuid.UUID(row[0]), created_at=_decode_time(row[1])).as_user()
            for row in rows
        ]

    async def get_by_id(self, user_id: uuid.UUID) -> User:
        rows = await self._fetch_all(
            "SELECT id, created_at FROM users WHERE id = ?", (str(user_id),)
        )
        if not rows:
            raise LookupError(f"User with id {user_id} not found")
        row = rows[0]
        return UserRecord(id=uuid.UUID(row[0]), created_at=_decode_time(row[1])).as_user()