"""HTTP routes: catalog, order submission and order lookup."""

from __future__ import annotations

from fastapi import APIRouter, BackgroundTasks, HTTPException, Request

from bakery.application.catalog import ListProductsHandler, ShowProductHandler
from bakery.application.show_order import ShowInvoiceHandler, ShowOrderHandler
from bakery.application.submit_order import SubmitOrderHandler
from bakery.infrastructure.api.schemas import (
    ErrorOut,
    InvoiceOut,
    OrderIn,
    OrderOut,
    ProductOut,
)

router = APIRouter()


def _state(request: Request):
    return request.app.state


@router.get("/health")
def health() -> dict:
    return {"status": "ok"}


# --- Catalog ------------------------------------------------------------------


@router.get("/products", response_model=list[ProductOut], tags=["catalog"])
@router.get("/flavours", response_model=list[ProductOut], include_in_schema=False)
@router.get("/flavors", response_model=list[ProductOut], include_in_schema=False)
def list_products(request: Request):
    handler = ListProductsHandler(_state(request).product_repo)
    return [ProductOut.model_validate(p) for p in handler.handle()]


@router.get(
    "/products/{product_id}",
    response_model=ProductOut,
    responses={400: {"model": ErrorOut}, 404: {"model": ErrorOut}},
    tags=["catalog"],
)
@router.get("/flavours/{product_id}", response_model=ProductOut, include_in_schema=False)
@router.get("/flavors/{product_id}", response_model=ProductOut, include_in_schema=False)
def get_product(product_id: str, request: Request):
    try:
        parsed = int(product_id)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid product ID")
    handler = ShowProductHandler(_state(request).product_repo)
    return ProductOut.model_validate(handler.handle(parsed))


# --- Orders -------------------------------------------------------------------


@router.post(
    "/orders",
    response_model=OrderOut,
    status_code=201,
    responses={400: {"model": ErrorOut}, 500: {"model": ErrorOut}},
    tags=["orders"],
)
def submit_order(payload: OrderIn, background_tasks: BackgroundTasks, request: Request):
    """Validate, price and store an order; confirmations go out after the response."""
    state = _state(request)
    handler = SubmitOrderHandler(
        order_repo=state.order_repo,
        dispatcher=state.dispatcher,
        schedule=background_tasks.add_task,
    )
    return OrderOut.model_validate(handler.handle(payload.to_submission()))


@router.get(
    "/orders/{order_number}",
    response_model=OrderOut,
    responses={404: {"model": ErrorOut}},
    tags=["orders"],
)
def get_order(order_number: str, request: Request):
    handler = ShowOrderHandler(_state(request).order_repo)
    return OrderOut.model_validate(handler.handle(order_number))


@router.get(
    "/orders/{order_number}/invoice",
    response_model=InvoiceOut,
    responses={404: {"model": ErrorOut}},
    tags=["orders"],
)
def get_invoice(order_number: str, request: Request):
    state = _state(request)
    handler = ShowInvoiceHandler(state.order_repo, state.business)
    return InvoiceOut.model_validate(handler.handle(order_number))
