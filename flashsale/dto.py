"""Request and response bodies of the HTTP interface."""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel

from flashsale.domain import FlashSale, Order, Product, User


class CreateProductRequest(BaseModel):
    """Body of a request to create a product."""

    name: str


class ProductResponse(BaseModel):
    """A product as returned to clients."""

    id: str
    name: str
    created_at: datetime

    @classmethod
    def from_product(cls, product: Product) -> ProductResponse:
        return cls(id=str(product.id), name=product.name, created_at=product.created_at)


class UserResponse(BaseModel):
    """A user as returned to clients."""

    id: uuid.UUID
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> UserResponse:
        return cls(id=user.id, created_at=user.created_at)


class FlashSaleResponse(BaseModel):
    """A flash sale as returned to clients."""

    id: str
    product_id: str
    start_time: datetime
    end_time: datetime
    total_inventory: int
    remaining_inventory: int
    per_user_limit: int

    @classmethod
    def from_flash_sale(cls, flash_sale: FlashSale) -> FlashSaleResponse:
        return cls(
            id=str(flash_sale.id),
            product_id=str(flash_sale.product_id),
            start_time=flash_sale.start_time,
            end_time=flash_sale.end_time,
            total_inventory=flash_sale.total_inventory,
            remaining_inventory=flash_sale.remaining_inventory,
            per_user_limit=flash_sale.per_user_limit,
        )


class OrderResponse(BaseModel):
    """An order as returned to clients."""

    id: str
    user_id: str
    flash_sale_id: str
    quantity: int
    created_at: datetime

    @classmethod
    def from_order(cls, order: Order) -> OrderResponse:
        return cls(
            id=str(order.id),
            user_id=str(order.user_id),
            flash_sale_id=str(order.flash_sale_id),
            quantity=order.quantity,
            created_at=order.created_at,
        )