"""Request validators.

Pure functions: each takes a request and returns every rule it breaks
as a ``FieldViolation``. They produce user-facing messages only; the
Product aggregate still enforces its own invariants independently.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from inventory_manager.application.dto import (
    CreateProductRequest,
    ListProductsRequest,
    UpdateProductRequest,
)

NAME_MAX_LENGTH = 100
SKU_MIN_LENGTH = 5
SKU_MAX_LENGTH = 20
PAGE_SIZE_LIMIT = 50

NAME_REQUIRED = "Name is required."
NAME_TOO_LONG = f"Name must not exceed {NAME_MAX_LENGTH} characters."
PRICE_MUST_BE_POSITIVE = "Price must be greater than zero."
STOCK_CANNOT_BE_NEGATIVE = "Stock quantity cannot be negative."
STOCK_MUST_BE_WHOLE = "Stock quantity must be a whole number."
SKU_REQUIRED = "SKU is required."
SKU_LENGTH_INVALID = (
    f"SKU must be between {SKU_MIN_LENGTH} and {SKU_MAX_LENGTH} characters."
)
PAGE_MUST_BE_POSITIVE = "Page must be at least 1."
PAGE_SIZE_MUST_BE_POSITIVE = "Page size must be at least 1."
PAGE_SIZE_LIMIT_EXCEEDED = f"Page size must not exceed {PAGE_SIZE_LIMIT}."


@dataclass(frozen=True)
class FieldViolation:
    field: str
    message: str


def validate_create_request(request: CreateProductRequest) -> list[FieldViolation]:
    return _validate_product_fields(request)


def validate_update_request(request: UpdateProductRequest) -> list[FieldViolation]:
    return _validate_product_fields(request)


def validate_list_request(request: ListProductsRequest) -> list[FieldViolation]:
    violations: list[FieldViolation] = []

    if request.page < 1:
        violations.append(FieldViolation("Page", PAGE_MUST_BE_POSITIVE))

    if request.page_size < 1:
        violations.append(FieldViolation("PageSize", PAGE_SIZE_MUST_BE_POSITIVE))
    if request.page_size > PAGE_SIZE_LIMIT:
        violations.append(FieldViolation("PageSize", PAGE_SIZE_LIMIT_EXCEEDED))

    return violations


def group_by_field(violations: list[FieldViolation]) -> dict[str, list[str]]:
    """Collapse violations into ``{field: [messages]}``, keeping rule order."""
    grouped: dict[str, list[str]] = {}
    for violation in violations:
        grouped.setdefault(violation.field, []).append(violation.message)
    return grouped


def _validate_product_fields(
    request: CreateProductRequest | UpdateProductRequest,
) -> list[FieldViolation]:
    violations: list[FieldViolation] = []

    name = request.name or ""
    if not name.strip():
        violations.append(FieldViolation("Name", NAME_REQUIRED))
    if len(name) > NAME_MAX_LENGTH:
        violations.append(FieldViolation("Name", NAME_TOO_LONG))

    if not _is_positive_amount(request.price):
        violations.append(FieldViolation("Price", PRICE_MUST_BE_POSITIVE))

    stock = request.stock_quantity
    if not _is_whole_number(stock):
        violations.append(FieldViolation("StockQuantity", STOCK_MUST_BE_WHOLE))
    elif stock < 0:
        violations.append(FieldViolation("StockQuantity", STOCK_CANNOT_BE_NEGATIVE))

    # Both SKU rules run independently: an empty SKU breaks each of them.
    sku = request.sku or ""
    if not sku.strip():
        violations.append(FieldViolation("Sku", SKU_REQUIRED))
    if not SKU_MIN_LENGTH <= len(sku) <= SKU_MAX_LENGTH:
        violations.append(FieldViolation("Sku", SKU_LENGTH_INVALID))

    return violations


def _is_positive_amount(amount: Decimal | None) -> bool:
    if amount is None:
        return False
    try:
        value = Decimal(str(amount))
    except InvalidOperation:
        return False
    return value.is_finite() and value > 0


def _is_whole_number(value: object) -> bool:
    # bool is an int subclass but never a quantity
    return isinstance(value, int) and not isinstance(value, bool)
