"""Use case results.

Expected failures (bad input, missing product, SKU clash, rejected
invariant) are returned as values instead of raised, so callers can
``match`` on the outcome. Anything else, such as a broken data file or
a storage-level constraint, is left to propagate as an exception.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Generic, TypeVar, Union

from inventory_manager.domain import exceptions as domain_exceptions

T = TypeVar("T")


class ErrorKind(Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    DOMAIN = "domain"
    UNHANDLED = "unhandled"


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T
    kind: ClassVar[ErrorKind | None] = None
    ok: ClassVar[bool] = True


@dataclass(frozen=True)
class ValidationError:
    """One or more request fields broke a validation rule."""

    errors: dict[str, list[str]] = field(default_factory=dict)
    message: str = "Validation failed"
    kind: ClassVar[ErrorKind] = ErrorKind.VALIDATION
    ok: ClassVar[bool] = False


@dataclass(frozen=True)
class NotFoundError:
    message: str
    kind: ClassVar[ErrorKind] = ErrorKind.NOT_FOUND
    ok: ClassVar[bool] = False


@dataclass(frozen=True)
class ConflictError:
    message: str
    kind: ClassVar[ErrorKind] = ErrorKind.CONFLICT
    ok: ClassVar[bool] = False


@dataclass(frozen=True)
class DomainError:
    """The Product aggregate refused the change."""

    message: str
    kind: ClassVar[ErrorKind] = ErrorKind.DOMAIN
    ok: ClassVar[bool] = False

    @classmethod
    def from_exception(cls, exc: domain_exceptions.DomainError) -> DomainError:
        return cls(message=exc.message)


Failure = Union[ValidationError, NotFoundError, ConflictError, DomainError]
Result = Union[Success[T], ValidationError, NotFoundError, ConflictError, DomainError]
