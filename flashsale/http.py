"""HTTP routes, handlers and request logging."""

from __future__ import annotations

import logging
import time
import uuid
from dataclasses import dataclass
from typing import Awaitable, Callable

from fastapi import APIRouter, FastAPI, Request, Response
from fastapi.responses import PlainTextResponse

from flashsale import logic
from flashsale.dto import CreateProductRequest, ProductResponse, UserResponse
from flashsale.ports import ProductRepo, UserRepo

logger = logging.getLogger(__name__)

_BAD_REQUEST = 400
_INTERNAL_SERVER_ERROR = 500


@dataclass(frozen=True)
class AppState:
    """The repositories shared by every request handler."""

    user_repo: UserRepo
    product_repo: ProductRepo


class _HandlerError(Exception):
    """A failure answered with a status code and a plain-text message."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


async def _handler_error_response(request: Request, exc: Exception) -> Response:
    assert isinstance(exc, _HandlerError)
    return PlainTextResponse(exc.message, status_code=exc.status_code)


def _routes(state: AppState) -> APIRouter:
    router = APIRouter()

    @router.post("/users", response_model=UserResponse)
    async def create_user() -> UserResponse:
        try:
            user = await logic.create_user(state.user_repo)
        except Exception as exc:
            raise _HandlerError(_INTERNAL_SERVER_ERROR, str(exc)) from exc
        return UserResponse.from_user(user)

    @router.get("/users", response_model=list[UserResponse])
    async def get_users() -> list[UserResponse]:
        try:
            users = await logic.get_users(state.user_repo)
        except Exception as exc:
            raise _HandlerError(_INTERNAL_SERVER_ERROR, str(exc)) from exc
        return [UserResponse.from_user(user) for user in users]

    @router.get("/users/{id}", response_model=UserResponse)
    async def get_user_by_id(id: str) -> UserResponse:
        try:
            user_id = uuid.UUID(id)
        except ValueError as exc:
            raise _HandlerError(_INTERNAL_SERVER_ERROR, "Invalid UUID") from exc
        try:
            user = await logic.get_user_by_id(state.user_repo, user_id)
        except Exception as exc:
            raise _HandlerError(_INTERNAL_SERVER_ERROR, str(exc)) from exc
        return UserResponse.from_user(user)

    @router.post("/products", response_model=ProductResponse)
    async def create_product(request: CreateProductRequest) -> ProductResponse:
        try:
            command = logic.CreateProductCommand.from_request(request)
        except Exception as exc:
            raise _HandlerError(_BAD_REQUEST, str(exc)) from exc
        try:
            product = await logic.save_product(state.product_repo, command)
        except Exception as exc:
            raise _HandlerError(_INTERNAL_SERVER_ERROR, str(exc)) from exc
        return ProductResponse.from_product(product)

    @router.get("/products", response_model=list[ProductResponse])
    async def get_products() -> list[ProductResponse]:
        try:
            products = await logic.get_products(state.product_repo)
        except Exception as exc:
            raise _HandlerError(_INTERNAL_SERVER_ERROR, str(exc)) from exc
        return [ProductResponse.from_product(product) for product in products]

    return router


async def _log_request(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    start = time.perf_counter()
    logger.debug("started processing request %s %s", request.method, request.url.path)
    response = await call_next(request)
    latency_ms = (time.perf_counter() - start) * 1000
    if response.status_code >= _INTERNAL_SERVER_ERROR:
        logger.error(
            "response failed status=%d latency=%.0f ms",
            response.status_code,
            latency_ms,
        )
    else:
        logger.debug(
            "finished processing request status=%d latency=%.0f ms",
            response.status_code,
            latency_ms,
        )
    return response


def http_router(state: AppState) -> FastAPI:
    """The application with every route and request logging installed."""
    app = FastAPI()
    app.include_router(_routes(state))
    app.add_exception_handler(_HandlerError, _handler_error_response)
    app.middleware("http")(_log_request)
    return app