"""Application service: Get Product By Id use case (query)."""

from __future__ import annotations

import uuid

from loguru import logger

from inventory_manager.application.dto import ProductView
from inventory_manager.application.result import NotFoundError, Result, Success
from inventory_manager.domain.repository.product_repository import ProductRepository

PRODUCT_NOT_FOUND = "Product with Id '{id}' not found."


class GetProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: uuid.UUID) -> Result[ProductView]:
        logger.info("Fetching product with Id: {}", product_id)

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            return NotFoundError(PRODUCT_NOT_FOUND.format(id=product_id))
        return Success(ProductView.from_product(product))
