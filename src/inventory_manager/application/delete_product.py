"""Application service: Delete Product use case."""

from __future__ import annotations

import uuid

from loguru import logger

from inventory_manager.application.get_product import PRODUCT_NOT_FOUND
from inventory_manager.application.result import NotFoundError, Result, Success
from inventory_manager.domain.repository.product_repository import ProductRepository


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: uuid.UUID) -> Result[None]:
        logger.info("Deleting product {}", product_id)

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            return NotFoundError(PRODUCT_NOT_FOUND.format(id=product_id))

        self._product_repo.delete(product)
        return Success(None)
