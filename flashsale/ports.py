"""Repository interfaces that storage adapters implement."""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod

from flashsale.domain import FlashSale, Order, Product, User


class FlashSaleRepo(ABC):
    """Storage for flash sales."""

    @abstractmethod
    async def save(self, flash_sale: FlashSale) -> FlashSale:
        """Store a flash sale and return it as stored."""

    @abstractmethod
    async def get_all(self) -> list[FlashSale]:
        """Every stored flash sale."""


class OrderRepo(ABC):
    """Storage for orders."""

    @abstractmethod
    async def save(self, order: Order) -> Order:
        """Store an order and return it as stored."""

    @abstractmethod
    async def get_all(self) -> list[Order]:
        """Every stored order."""


class ProductRepo(ABC):
    """Storage for products."""

    @abstractmethod
    async def save(self, product: Product) -> Product:
        """Store a product and return it as stored."""

    @abstractmethod
    async def get_all(self) -> list[Product]:
        """Every stored product."""


class UserRepo(ABC):
    """Storage for users."""

    @abstractmethod
    async def create(self) -> User:
        """Create a user with generated values and return it."""

    @abstractmethod
    async def save(self, user: User) -> User:
        """Store a given user and return it as stored."""

    @abstractmethod
    async def get_all(self) -> list[User]:
        """Every stored user."""

    @abstractmethod
    async def get_by_id(self, user_id: uuid.UUID) -> User:
        """The user with this id; raise LookupError if there is none."""