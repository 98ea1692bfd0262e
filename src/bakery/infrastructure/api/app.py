"""FastAPI application factory and error mapping.

Domain exceptions become JSON ``{"message": ...}`` responses:
ValidationError and BusinessRuleViolation -> 400, EntityNotFoundError
-> 404, PersistenceError -> 500 with a generic message (details are
logged, not returned).
"""

from __future__ import annotations

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from bakery.application.confirmation import BusinessProfile, ConfirmationDispatcher
from bakery.domain.exceptions import (
    BusinessRuleViolation,
    EntityNotFoundError,
    PersistenceError,
    ValidationError,
)
from bakery.domain.repository.order_repository import OrderRepository
from bakery.domain.repository.product_repository import ProductRepository
from bakery.infrastructure import bootstrap, settings
from bakery.infrastructure.api import routes
from bakery.infrastructure.logging import configure_logging
from bakery.infrastructure.persistence.memory_order_repository import (
    InMemoryOrderRepository,
)

logger = structlog.get_logger(__name__)


def _message(status_code: int, message: str, errors: list[dict] | None = None) -> JSONResponse:
    body: dict = {"message": message}
    if errors is not None:
        body["errors"] = errors
    return JSONResponse(status_code=status_code, content=body)


def _register_error_handlers(app: FastAPI) -> None:

    @app.exception_handler(ValidationError)
    def on_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
        errors = [{"field": e.field, "message": e.message} for e in exc.errors]
        return _message(400, str(exc), errors)

    @app.exception_handler(BusinessRuleViolation)
    def on_business_rule(request: Request, exc: BusinessRuleViolation) -> JSONResponse:
        return _message(400, str(exc))

    @app.exception_handler(EntityNotFoundError)
    def on_not_found(request: Request, exc: EntityNotFoundError) -> JSONResponse:
        return _message(404, str(exc))

    @app.exception_handler(PersistenceError)
    def on_persistence_error(request: Request, exc: PersistenceError) -> JSONResponse:
        logger.error("persistence_error", path=request.url.path, error=str(exc))
        return _message(500, "Failed to create order")

    @app.exception_handler(RequestValidationError)
    def on_bad_request(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = [
            {
                "field": ".".join(str(p) for p in err.get("loc", ()) if p != "body"),
                "message": err.get("msg", "Invalid value"),
            }
            for err in exc.errors()
        ]
        return _message(400, "Invalid request body", errors)

    @app.exception_handler(StarletteHTTPException)
    def on_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return _message(exc.status_code, str(exc.detail))


def create_app(
    product_repo: ProductRepository | None = None,
    order_repo: OrderRepository | None = None,
    dispatcher: ConfirmationDispatcher | None = None,
    business: BusinessProfile | None = None,
    api_prefix: str | None = None,
) -> FastAPI:
    configure_logging(settings.LOG_LEVEL, settings.LOG_JSON)

    app = FastAPI(title="Bakery Storefront", version="1.0.0")

    app.state.product_repo = product_repo or bootstrap.product_repository()
    app.state.order_repo = order_repo or InMemoryOrderRepository()
    app.state.business = business or bootstrap.business_profile()
    app.state.dispatcher = dispatcher or ConfirmationDispatcher(
        bootstrap.email_sender(), app.state.business
    )

    _register_error_handlers(app)
    prefix = settings.API_PREFIX if api_prefix is None else api_prefix
    app.include_router(routes.router, prefix=prefix)
    return app
