"""Data Transfer Objects: plain containers that cross layer boundaries.

Requests carry raw input from the CLI into the use cases; views carry
the externally visible projection of a Product back out. Neither
exposes the aggregate itself.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from inventory_manager.domain.model.product import Product


@dataclass(frozen=True)
class CreateProductRequest:
    """Input: a new product to add to the catalog."""

    name: str
    description: str
    price: Decimal
    stock_quantity: int
    sku: str


@dataclass(frozen=True)
class UpdateProductRequest:
    """Input: the full replacement state of an existing product."""

    name: str
    description: str
    price: Decimal
    stock_quantity: int
    sku: str


@dataclass(frozen=True)
class ListProductsRequest:
    """Input: which page of the catalog to return."""

    page: int = 1
    page_size: int = 10


@dataclass(frozen=True)
class ProductView:
    """Output: a product as seen from outside the application."""

    id: uuid.UUID
    name: str
    description: str
    price: Decimal
    stock_quantity: int
    sku: str

    @classmethod
    def from_product(cls, product: Product) -> ProductView:
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            stock_quantity=product.stock_quantity,
            sku=product.sku,
        )

    def as_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "name": self.name,
            "description": self.description,
            "price": str(self.price),
            "stockQuantity": self.stock_quantity,
            "sku": self.sku,
        }


@dataclass(frozen=True)
class PageMeta:
    """Navigation metadata derived from a total count and a page position."""

    total_items: int
    current_page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        # Integer ceiling division, no float rounding
        return -(-self.total_items // self.page_size)

    @property
    def has_next_page(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def has_previous_page(self) -> bool:
        return self.current_page > 1

    def as_dict(self) -> dict[str, Any]:
        return {
            "totalItems": self.total_items,
            "currentPage": self.current_page,
            "pageSize": self.page_size,
            "totalPages": self.total_pages,
            "hasNextPage": self.has_next_page,
            "hasPreviousPage": self.has_previous_page,
        }


@dataclass(frozen=True)
class PagedResult:
    """Output: one page of products plus the catalog-wide total."""

    items: tuple[ProductView, ...]
    total_items: int
    page: int
    page_size: int
    meta: PageMeta = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "meta", PageMeta(self.total_items, self.page, self.page_size)
        )

    @property
    def total_pages(self) -> int:
        return self.meta.total_pages

    @property
    def has_next_page(self) -> bool:
        return self.meta.has_next_page

    @property
    def has_previous_page(self) -> bool:
        return self.meta.has_previous_page
