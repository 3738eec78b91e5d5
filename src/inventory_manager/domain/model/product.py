"""Product aggregate.

A product is the unit of invariant enforcement and persistence. Every
field is read-only from the outside; the only legal mutations are the
full ``update`` and the two stock adjustments.
"""

from __future__ import annotations

import uuid
from decimal import Decimal, InvalidOperation

from inventory_manager.domain.exceptions import DomainError


class Product:
    """A product in the inventory catalog (aggregate root).

    Invariants (checked on construction and on ``update``):
    - ``name`` and ``sku`` are never blank
    - ``price`` is strictly positive
    - ``stock_quantity`` is a non-negative integer
    """

    PRICE_MUST_BE_POSITIVE = "Price must be greater than zero."
    QUANTITY_MUST_BE_POSITIVE = "Quantity must be positive."
    INSUFFICIENT_STOCK = "Insufficient stock."
    STOCK_CANNOT_BE_NEGATIVE = "Stock quantity cannot be negative."
    STOCK_MUST_BE_WHOLE = "Stock quantity must be a whole number."
    NAME_CANNOT_BE_EMPTY = "Name cannot be empty."
    SKU_CANNOT_BE_EMPTY = "SKU cannot be empty."

    def __init__(
        self,
        name: str,
        description: str,
        price: Decimal | int | str,
        stock_quantity: int,
        sku: str,
        *,
        product_id: uuid.UUID | None = None,
    ) -> None:
        price = _to_decimal(price)
        self._validate(name, price, stock_quantity, sku)

        self._id = product_id if product_id is not None else uuid.uuid4()
        self._name = name
        self._description = description or ""
        self._price = price
        self._stock_quantity = stock_quantity
        self._sku = sku

    # --- Read-only state ------------------------------------------------------

    @property
    def id(self) -> uuid.UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def price(self) -> Decimal:
        return self._price

    @property
    def stock_quantity(self) -> int:
        return self._stock_quantity

    @property
    def sku(self) -> str:
        return self._sku

    # --- Mutations ------------------------------------------------------------

    def update(
        self,
        name: str,
        description: str,
        price: Decimal | int | str,
        stock_quantity: int,
        sku: str,
    ) -> None:
        """Replace every mutable field at once.

        All invariants are checked before anything is assigned, so a
        rejected update leaves the product exactly as it was.
        """
        price = _to_decimal(price)
        self._validate(name, price, stock_quantity, sku)

        self._name = name
        self._description = description or ""
        self._price = price
        self._stock_quantity = stock_quantity
        self._sku = sku

    def add_stock(self, quantity: int) -> None:
        if quantity <= 0:
            raise DomainError(self.QUANTITY_MUST_BE_POSITIVE)
        self._stock_quantity += quantity

    def remove_stock(self, quantity: int) -> None:
        """Take ``quantity`` units out of stock.

        Raises DomainError if the quantity is not positive or exceeds
        what is currently in stock.
        """
        if quantity <= 0:
            raise DomainError(self.QUANTITY_MUST_BE_POSITIVE)
        if self._stock_quantity - quantity < 0:
            raise DomainError(self.INSUFFICIENT_STOCK)
        self._stock_quantity -= quantity

    # --- Identity -------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Product(id={self._id!s}, name={self._name!r}, sku={self._sku!r}, "
            f"price={self._price}, stock_quantity={self._stock_quantity})"
        )

    # --- Internal helpers -----------------------------------------------------

    @classmethod
    def _validate(cls, name: str, price: Decimal, stock: int, sku: str) -> None:
        if not name or not name.strip():
            raise DomainError(cls.NAME_CANNOT_BE_EMPTY)
        if price <= 0:
            raise DomainError(cls.PRICE_MUST_BE_POSITIVE)
        if not isinstance(stock, int) or isinstance(stock, bool):
            raise DomainError(cls.STOCK_MUST_BE_WHOLE)
        if stock < 0:
            raise DomainError(cls.STOCK_CANNOT_BE_NEGATIVE)
        if not sku or not sku.strip():
            raise DomainError(cls.SKU_CANNOT_BE_EMPTY)


def _to_decimal(amount: Decimal | int | str) -> Decimal:
    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    except (InvalidOperation, ValueError) as exc:
        raise DomainError(f"Invalid price: {amount!r}") from exc
    if not value.is_finite():
        raise DomainError(f"Invalid price: {amount!r}")
    return value
