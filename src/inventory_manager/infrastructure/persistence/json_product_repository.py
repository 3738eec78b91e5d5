"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
import threading
import uuid
from decimal import Decimal, InvalidOperation
from pathlib import Path

from loguru import logger

from inventory_manager.domain.exceptions import DomainError
from inventory_manager.domain.model.product import Product
from inventory_manager.domain.repository.product_repository import ProductRepository
from inventory_manager.infrastructure.persistence.errors import (
    DuplicateSkuError,
    StorageError,
)


class JsonProductRepository(ProductRepository):
    """Stores the whole catalog as a JSON array in a single file.

    SKU uniqueness is enforced here as well as in the use cases: the
    check and the write happen under one lock, so two concurrent adds
    in the same process cannot both claim a SKU.
    """

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock = threading.Lock()
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def add(self, product: Product) -> None:
        with self._lock:
            products = self._load()
            self._assert_sku_free(products, product)
            products[product.id] = product
            self._persist(products)
        logger.debug("Added product {} ({})", product.id, product.sku)

    def update(self, product: Product) -> None:
        with self._lock:
            products = self._load()
            if product.id not in products:
                raise StorageError(f"Cannot update unknown product {product.id}")
            self._assert_sku_free(products, product)
            products[product.id] = product
            self._persist(products)
        logger.debug("Updated product {}", product.id)

    def delete(self, product: Product) -> None:
        with self._lock:
            products = self._load()
            if products.pop(product.id, None) is None:
                raise StorageError(f"Cannot delete unknown product {product.id}")
            self._persist(products)
        logger.debug("Deleted product {}", product.id)

    def get_by_id(self, product_id: uuid.UUID) -> Product | None:
        with self._lock:
            return self._load().get(product_id)

    def get_all(self, page: int, page_size: int) -> tuple[list[Product], int]:
        with self._lock:
            products = sorted(
                self._load().values(), key=lambda p: (p.name, str(p.id))
            )
        start = (page - 1) * page_size
        return products[start:start + page_size], len(products)

    def exists(self, sku: str) -> bool:
        with self._lock:
            return any(p.sku == sku for p in self._load().values())

    def is_sku_unique(self, sku: str, exclude_id: uuid.UUID) -> bool:
        with self._lock:
            return not any(
                p.sku == sku and p.id != exclude_id for p in self._load().values()
            )

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[uuid.UUID, Product]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
            return {
                uuid.UUID(item["id"]): Product(
                    name=item["name"],
                    description=item.get("description", ""),
                    price=Decimal(item["price"]),
                    stock_quantity=int(item["stock_quantity"]),
                    sku=item["sku"],
                    product_id=uuid.UUID(item["id"]),
                )
                for item in raw
            }
        except (
            OSError, ValueError, KeyError, TypeError, InvalidOperation, DomainError
        ) as exc:
            raise StorageError(f"Cannot read catalog at {self._file_path}: {exc}") from exc

    def _persist(self, products: dict[uuid.UUID, Product]) -> None:
        raw = [
            {
                "id": str(p.id),
                "name": p.name,
                "description": p.description,
                "price": str(p.price),
                "stock_quantity": p.stock_quantity,
                "sku": p.sku,
            }
            for p in products.values()
        ]
        self._file_path.write_text(
            json.dumps(raw, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")

    @staticmethod
    def _assert_sku_free(products: dict[uuid.UUID, Product], product: Product) -> None:
        for other in products.values():
            if other.sku == product.sku and other.id != product.id:
                raise DuplicateSkuError(product.sku)
