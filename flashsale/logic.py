"""Use cases for products and users."""

from __future__ import annotations

import uuid
from dataclasses import dataclass

from flashsale.domain import Product, User
from flashsale.dto import CreateProductRequest
from flashsale.ports import ProductRepo, UserRepo


@dataclass
class CreateProductCommand:
    """A validated request to create a product."""

    id: uuid.UUID
    name: str

    @classmethod
    def from_request(cls, request: CreateProductRequest) -> CreateProductCommand:
        return cls(id=uuid.uuid4(), name=request.name)


async def save_product(repo: ProductRepo, command: CreateProductCommand) -> Product:
    """Create a product from the command and store it."""
    return await repo.save(Product.from_command(command))


async def get_products(repo: ProductRepo) -> list[Product]:
    """Every stored product."""
    return await repo.get_all()


async def create_user(repo: UserRepo) -> User:
    """Create and store a new user."""
    return await repo.create()


async def get_users(repo: UserRepo) -> list[User]:
    """Every stored user."""
    return await repo.get_all()


async def get_user_by_id(repo: UserRepo, user_id: uuid.UUID) -> User:
    """The user with this id; the repository's error propagates if missing."""
    return await repo.get_by_id(user_id)