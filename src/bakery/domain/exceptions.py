"""Domain-level exceptions.

All failures are expressed as subclasses of DomainException so the CLI
and HTTP layers can catch them uniformly.  Each subclass maps to one
kind of response: user-correctable (validation, business rule), missing
(not found), or internal (persistence, dispatch).
"""

from __future__ import annotations

from dataclasses import dataclass


class DomainException(Exception):
    """Base class for all domain errors."""


@dataclass(frozen=True)
class FieldError:
    """One field that failed validation and why."""

    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class ValidationError(DomainException):
    """Malformed or missing input.  User-correctable.

    ``errors`` enumerates the offending fields when the failure can be
    pinned to specific inputs; it is empty for invariant violations
    raised by value objects.
    """

    def __init__(self, message: str, errors: list[FieldError] | None = None) -> None:
        super().__init__(message)
        self.errors: list[FieldError] = list(errors or [])

    @classmethod
    def from_fields(cls, errors: list[FieldError]) -> ValidationError:
        summary = "; ".join(str(e) for e in errors)
        return cls(f"Validation failed: {summary}", errors)


class BusinessRuleViolation(DomainException):
    """Input is well-formed but breaks a business rule (e.g. minimum order)."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class PersistenceError(DomainException):
    """The order store could not be written.  Not user-correctable."""


class DispatchError(DomainException):
    """A confirmation artifact could not be produced or sent.

    Never surfaced to the customer; the dispatcher logs it and moves on.
    """
