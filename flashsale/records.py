"""Row representations of domain entities as the database stores them."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from flashsale.domain import FlashSale, Order, OrderStatus, Product, User

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def _to_i32(name: str, value: int) -> int:
    if not _I32_MIN <= value <= _I32_MAX:
        raise ValueError(f"{name} does not fit a 32-bit signed column: {value}")
    return value


@dataclass
class FlashSaleRecord:
    """A row of the ``flash_sales`` table."""

    id: uuid.UUID
    product_id: uuid.UUID
    start_time: datetime
    end_time: datetime
    total_inventory: int
    remaining_inventory: int
    per_user_limit: int
    created_at: datetime

    @classmethod
    def from_domain(cls, flash_sale: FlashSale) -> FlashSaleRecord:
        """The row for a flash sale; ValueError if a count overflows a column."""
        return cls(
            id=flash_sale.id,
            product_id=flash_sale.product_id,
            start_time=flash_sale.start_time,
            end_time=flash_sale.end_time,
            total_inventory=_to_i32("total_inventory", flash_sale.total_inventory),
            remaining_inventory=_to_i32(
                "remaining_inventory", flash_sale.remaining_inventory
            ),
            per_user_limit=_to_i32("per_user_limit", flash_sale.per_user_limit),
            created_at=flash_sale.created_at,
        )

    def to_domain(self) -> FlashSale:
        """The flash sale; ValueError if a stored count is out of range."""
        return FlashSale(
            id=self.id,
            product_id=self.product_id,
            start_time=self.start_time,
            end_time=self.end_time,
            total_inventory=self.total_inventory,
            remaining_inventory=self.remaining_inventory,
            per_user_limit=self.per_user_limit,
            created_at=self.created_at,
        )


class OrderStatusDb(Enum):
    """Order status as stored in the ``order_status`` column."""

    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    FAILED = "FAILED"

    @classmethod
    def from_domain(cls, status: OrderStatus) -> OrderStatusDb:
        return cls[status.name]

    def to_domain(self) -> OrderStatus:
        return OrderStatus[self.name]


@dataclass
class OrderRecord:
    """A row of the ``orders`` table."""

    id: uuid.UUID
    user_id: uuid.UUID
    flash_sale_id: uuid.UUID
    quantity: int
    status: OrderStatusDb
    created_at: datetime

    @classmethod
    def from_domain(cls, order: Order) -> OrderRecord:
        return cls(
            id=order.id,
            user_id=order.user_id,
            flash_sale_id=order.flash_sale_id,
            quantity=order.quantity,
            status=OrderStatusDb.from_domain(order.status),
            created_at=order.created_at,
        )

    def to_domain(self) -> Order:
        """The order; ValueError if the stored quantity is out of range."""
        return Order(
            id=self.id,
            user_id=self.user_id,
            flash_sale_id=self.flash_sale_id,
            quantity=self.quantity,
            status=self.status.to_domain(),
            created_at=self.created_at,
        )


@dataclass
class ProductRecord:
    """A row of the ``products`` table."""

    id: uuid.UUID
    name: str
    created_at: datetime

    @classmethod
    def from_domain(cls, product: Product) -> ProductRecord:
        return cls(id=product.id, name=product.name, created_at=product.created_at)

    def to_domain(self) -> Product:
        return Product.from_record(self)


@dataclass
class UserRecord:
    """A row of the ``users`` table."""

    id: uuid.UUID
    created_at: datetime

    def as_user(self) -> User:
        return User(id=self.id, created_at=self.created_at)