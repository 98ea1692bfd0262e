"""Abstract repository for the Product catalog.

Defined in the domain layer so the domain never depends on
infrastructure.  The catalog is read-only from the storefront's point
of view; ``save`` exists for seeding and availability changes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from bakery.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog, in catalog order."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""
