"""Product aggregate.

Products live independently of carts and orders.  The catalog is
seeded at startup; unavailable products stay listed but cannot be
added to a cart.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from bakery.domain.model.value_objects import Money


@dataclass
class Product:
    """A macaron flavor (or other purchasable box) in the catalog.

    Carts capture ``unit_price`` at add time, so nothing that happens to
    a product later alters items already selected.
    """

    id: int
    name: str
    description: str
    unit_price: Money
    image_ref: str = ""
    available: bool = True
    tags: frozenset[str] = field(default_factory=frozenset)

    @property
    def is_featured(self) -> bool:
        return "featured" in self.tags
