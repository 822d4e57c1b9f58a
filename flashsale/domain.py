"""Domain entities of the flash-sale service."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_U8_MAX = 0xFF
_U16_MAX = 0xFFFF
_U32_MAX = 0xFFFFFFFF


def _check_range(name: str, value: int, maximum: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {value!r}")
    if not 0 <= value <= maximum:
        raise ValueError(f"{name} must be between 0 and {maximum}, got {value}")


class AppError(Exception):
    """Unspecified application failure."""


@dataclass
class FlashSale:
    """A time-limited sale of a product with a fixed inventory."""

    id: uuid.UUID
    product_id: uuid.UUID
    start_time: datetime
    end_time: datetime
    total_inventory: int
    remaining_inventory: int
    per_user_limit: int
    created_at: datetime

    def __post_init__(self) -> None:
        _check_range("total_inventory", self.total_inventory, _U32_MAX)
        _check_range("remaining_inventory", self.remaining_inventory, _U32_MAX)
        _check_range("per_user_limit", self.per_user_limit, _U8_MAX)


class OrderStatus(Enum):
    """Lifecycle state of an order."""

    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    FAILED = "FAILED"

    def as_str(self) -> str:
        """The status as its canonical upper-case name."""
        return self.value

    @classmethod
    def from_str(cls, s: str) -> Optional[OrderStatus]:
        """Parse a canonical name; return None for anything else."""
        try:
            return cls(s)
        except ValueError:
            return None


@dataclass
class Order:
    """A user's order against a flash sale."""

    id: uuid.UUID
    user_id: uuid.UUID
    flash_sale_id: uuid.UUID
    quantity: int
    status: OrderStatus
    created_at: datetime

    def __post_init__(self) -> None:
        _check_range("quantity", self.quantity, _U16_MAX)


@dataclass
class Product:
    """A product that can be put on sale."""

    id: uuid.UUID
    name: str
    created_at: datetime

    @classmethod
    def from_command(cls, command: Any) -> Product:
        """A fresh product from a create command, stamped with the epoch."""
        return cls(id=uuid.uuid4(), name=command.name, created_at=EPOCH)

    @classmethod
    def from_record(cls, record: Any) -> Product:
        """A product from a stored row."""
        return cls(id=record.id, name=record.name, created_at=record.created_at)


@dataclass
class User:
    """A registered user."""

    id: uuid.UUID
    created_at: datetime