"""Abstract repository for the Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. The contract is blocking; concrete implementations
(JSON, in-memory) live in the infrastructure layer and tests.
"""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod

from inventory_manager.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def add(self, product: Product) -> None:
        """Persist a new product."""

    @abstractmethod
    def update(self, product: Product) -> None:
        """Persist changes to an existing product."""

    @abstractmethod
    def delete(self, product: Product) -> None:
        """Remove a product from the catalog."""

    @abstractmethod
    def get_by_id(self, product_id: uuid.UUID) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_all(self, page: int, page_size: int) -> tuple[list[Product], int]:
        """Return one page of products ordered by name, plus the total count.

        ``page`` is 1-based: skip ``(page - 1) * page_size`` rows and take
        ``page_size``.
        """

    @abstractmethod
    def exists(self, sku: str) -> bool:
        """Return True if any product already uses ``sku``."""

    @abstractmethod
    def is_sku_unique(self, sku: str, exclude_id: uuid.UUID) -> bool:
        """Return True if no product other than ``exclude_id`` uses ``sku``."""
