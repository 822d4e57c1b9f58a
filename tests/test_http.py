import logging
import uuid
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from flashsale.domain import Product, User
from flashsale.http import AppState, http_router
from flashsale.ports import ProductRepo, UserRepo


class MemoryUserRepo(UserRepo):
    def __init__(self):
        self.users = []

    async def create(self):
        user = User(id=uuid.uuid4(), created_at=datetime.now(timezone.utc))
        self.users.append(user)
        return user

    async def save(self, user):
        self.users.append(user)
        return user

    async def get_all(self):
        return list(self.users)

    async def get_by_id(self, user_id):
        for user in self.users:
            if user.id == user_id:
                return user
        raise LookupError(f"User with id {user_id} not found")


class MemoryProductRepo(ProductRepo):
    def __init__(self):
        self.products = []

    async def save(self, product):
        self.products.append(product)
        return product

    async def get_all(self):
        return list(self.products)


class BrokenProductRepo(ProductRepo):
    async def save(self, product):
        raise RuntimeError("database unavailable")

    async def get_all(self):
        raise RuntimeError("database unavailable")


@pytest.fixture
def user_repo():
    return MemoryUserRepo()


@pytest.fixture
def product_repo():
    return MemoryProductRepo()


@pytest.fixture
def client(user_repo, product_repo):
    app = http_router(AppState(user_repo=user_repo, product_repo=product_repo))
    return TestClient(app)


def test_create_user_then_list(client, user_repo):
    created = client.post("/users")
    assert created.status_code == 200
    body = created.json()
    assert uuid.UUID(body["id"]) == user_repo.users[0].id

    listed = client.get("/users")
    assert listed.status_code == 200
    assert [item["id"] for item in listed.json()] == [body["id"]]


def test_get_user_by_id(client):
    created = client.post("/users").json()
    fetched = client.get(f"/users/{created['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == created


def test_get_missing_user_is_server_error(client):
    missing = uuid.uuid4()
    response = client.get(f"/users/{missing}")
    assert response.status_code == 500
    assert response.text == f"User with id {missing} not found"


def test_get_user_with_invalid_id(client):
    response = client.get("/users/not-a-uuid")
    assert response.status_code == 500
    assert response.text == "Invalid UUID"


def test_create_product(client, product_repo):
    response = client.post("/products", json={"name": "Widget"})
    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Widget"
    assert body["created_at"] == "1970-01-01T00:00:00Z"
    assert body["id"] == str(product_repo.products[0].id)


def test_list_products(client, product_repo):
    product = Product(
        id=uuid.uuid4(), name="Gadget", created_at=datetime(2024, 5, 1, tzinfo=timezone.utc)
    )
    product_repo.products.append(product)
    response = client.get("/products")
    assert response.status_code == 200
    assert response.json() == [
        {"id": str(product.id), "name": "Gadget", "created_at": "2024-05-01T00:00:00Z"}
    ]


def test_create_product_without_name_is_rejected(client, product_repo):
    response = client.post("/products", json={})
    assert response.status_code == 422
    assert product_repo.products == []


def test_repository_failure_is_reported_as_text(user_repo):
    app = http_router(AppState(user_repo=user_repo, product_repo=BrokenProductRepo()))
    client = TestClient(app)
    listed = client.get("/products")
    assert listed.status_code == 500
    assert listed.text == "database unavailable"
    created = client.post("/products", json={"name": "Widget"})
    assert created.status_code == 500
    assert created.text == "database unavailable"


def test_server_errors_are_logged(user_repo, caplog):
    app = http_router(AppState(user_repo=user_repo, product_repo=BrokenProductRepo()))
    client = TestClient(app)
    with caplog.at_level(logging.DEBUG, logger="flashsale.http"):
        client.get("/products")
    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert len(errors) == 1
    assert "status=500" in errors[0].getMessage()