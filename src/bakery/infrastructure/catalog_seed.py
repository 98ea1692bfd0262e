"""The storefront's starting catalog."""

from __future__ import annotations

from bakery.domain.model.product import Product
from bakery.domain.model.value_objects import Money

_IMAGE = "https://images.unsplash.com/photo-{}?auto=format&fit=crop&w=400&h=300&q=80"

_FLAVORS = [
    (
        "Vanilla Bean",
        "Classic vanilla bean macaron with a smooth vanilla bean buttercream filling.",
        "1558326567-98ae2405596b",
        {"featured"},
    ),
    (
        "Raspberry",
        "Vibrant raspberry macaron with a tart raspberry jam center and white chocolate ganache.",
        "1569864358642-9d1684040f43",
        {"featured"},
    ),
    (
        "Chocolate",
        "Rich chocolate macaron with a silky dark chocolate ganache filling.",
        "1558326567-98ae2405596b",
        set(),
    ),
    (
        "Pistachio",
        "Delicate pistachio macaron filled with a creamy pistachio buttercream.",
        "1552848031-326ec03fe2ec",
        set(),
    ),
    (
        "Lemon",
        "Bright lemon macaron with a zesty lemon curd filling that balances sweet and tart.",
        "1558326567-98ae2405596b",
        set(),
    ),
    (
        "Salted Caramel",
        "Golden macaron with a decadent salted caramel filling that melts in your mouth.",
        "1558326567-98ae2405596b",
        {"featured"},
    ),
]

BASE_PRICE = Money(200)


def default_products() -> list[Product]:
    return [
        Product(
            id=index,
            name=name,
            description=description,
            unit_price=BASE_PRICE,
            image_ref=_IMAGE.format(photo),
            available=True,
            tags=frozenset(tags),
        )
        for index, (name, description, photo, tags) in enumerate(_FLAVORS, start=1)
    ]
