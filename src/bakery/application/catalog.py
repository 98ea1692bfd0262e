"""Application service: catalog queries."""

from __future__ import annotations

from bakery.application.dto import ProductDTO, to_product_dto
from bakery.domain.exceptions import EntityNotFoundError
from bakery.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, available_only: bool = False) -> list[ProductDTO]:
        products = self._product_repo.list_all()
        if available_only:
            products = [p for p in products if p.available]
        return [to_product_dto(p) for p in products]


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> ProductDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product #{product_id} not found")
        return to_product_dto(product)
