"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass

from bakery.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Money:
    """Monetary amount held as integer cents.

    Integer cents keep every price computation exact; there is no
    rounding anywhere except the explicit per-item floor of the bulk
    discount.
    """

    cents: int

    def __post_init__(self) -> None:
        if isinstance(self.cents, bool) or not isinstance(self.cents, int):
            raise ValidationError(
                f"Money amount must be integer cents, got {type(self.cents).__name__}"
            )
        if self.cents < 0:
            raise ValidationError(
                f"Money amount cannot be negative, got {self.cents}"
            )

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.cents // 100}.{self.cents % 100:02d}"


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot order zero or negative items.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")


VariantSelections = tuple[tuple[str, str], ...]


def freeze_selections(selections: dict[str, str] | VariantSelections | None) -> VariantSelections:
    """Hashable form of a variant-selection mapping, in the order given."""
    if not selections:
        return ()
    pairs = selections.items() if isinstance(selections, dict) else selections
    return tuple((str(aspect), str(option)) for aspect, option in pairs)


def selections_key(selections: VariantSelections) -> VariantSelections:
    """Order-insensitive key: the same choices in any order compare equal."""
    return tuple(sorted(selections))


def describe_selections(selections: VariantSelections) -> str:
    """Human annotation such as ``Shell: Pink / Filling: White``."""
    return " / ".join(f"{aspect}: {option}" for aspect, option in selections)
