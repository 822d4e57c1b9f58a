import uuid
from datetime import datetime, timezone

import pytest

from flashsale.domain import Product, User
from flashsale.logic import create_user, get_products, get_user_by_id, save_product
from flashsale.ports import FlashSaleRepo, OrderRepo, ProductRepo, UserRepo

NOW = datetime(2024, 5, 1, tzinfo=timezone.utc)


class MemoryProductRepo(ProductRepo):
    def __init__(self):
        self.items = []

    async def save(self, product):
        self.items.append(product)
        return product

    async def get_all(self):
        return list(self.items)


class MemoryUserRepo(UserRepo):
    def __init__(self):
        self.users = {}

    async def create(self):
        user = User(id=uuid.uuid4(), created_at=NOW)
        self.users[user.id] = user
        return user

    async def save(self, user):
        self.users[user.id] = user
        return user

    async def get_all(self):
        return list(self.users.values())

    async def get_by_id(self, user_id):
        try:
            return self.users[user_id]
        except KeyError:
            raise LookupError(f"User with id {user_id} not found") from None


@pytest.mark.parametrize("port", [FlashSaleRepo, OrderRepo, ProductRepo, UserRepo])
def test_ports_cannot_be_instantiated(port):
    with pytest.raises(TypeError):
        port()


@pytest.mark.parametrize(
    "port, methods",
    [
        (FlashSaleRepo, {"save", "get_all"}),
        (OrderRepo, {"save", "get_all"}),
        (ProductRepo, {"save", "get_all"}),
        (UserRepo, {"create", "save", "get_all", "get_by_id"}),
    ],
)
def test_ports_declare_expected_methods(port, methods):
    assert port.__abstractmethods__ == frozenset(methods)


@pytest.mark.asyncio
async def test_product_implementation_round_trip():
    repo = MemoryProductRepo()
    product = Product(id=uuid.uuid4(), name="Desk", created_at=NOW)
    saved = await save_product(repo, Product.from_record(product))
    assert saved == product
    assert await get_products(repo) == [product]


@pytest.mark.asyncio
async def test_user_implementation_lookup():
    repo = MemoryUserRepo()
    created = await create_user(repo)
    assert created.created_at == NOW
    assert await get_user_by_id(repo, created.id) == created
    with pytest.raises(LookupError):
        await get_user_by_id(repo, uuid.uuid4())