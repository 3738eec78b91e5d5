"""Application service: Update Product use case."""

from __future__ import annotations

import uuid

from loguru import logger

from inventory_manager.application.create_product import SKU_ALREADY_EXISTS
from inventory_manager.application.dto import UpdateProductRequest
from inventory_manager.application.get_product import PRODUCT_NOT_FOUND
from inventory_manager.application.result import (
    ConflictError,
    DomainError,
    NotFoundError,
    Result,
    Success,
    ValidationError,
)
from inventory_manager.application.validation import (
    group_by_field,
    validate_update_request,
)
from inventory_manager.domain import exceptions as domain_exceptions
from inventory_manager.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self, product_id: uuid.UUID, request: UpdateProductRequest
    ) -> Result[None]:
        """Replace every field of an existing product.

        Validation runs before the lookup, so a malformed request is
        rejected even when the product does not exist. The SKU check
        ignores the product being updated.
        """
        if request is None:
            raise TypeError("request must not be None")

        logger.info("Updating product {}", product_id)

        violations = validate_update_request(request)
        if violations:
            return ValidationError(errors=group_by_field(violations))

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            return NotFoundError(PRODUCT_NOT_FOUND.format(id=product_id))

        if not self._product_repo.is_sku_unique(request.sku, product_id):
            logger.warning("Rejected duplicate SKU {}", request.sku)
            return ConflictError(SKU_ALREADY_EXISTS.format(sku=request.sku))

        try:
            product.update(
                name=request.name,
                description=request.description,
                price=request.price,
                stock_quantity=request.stock_quantity,
                sku=request.sku,
            )
        except domain_exceptions.DomainError as exc:
            return DomainError.from_exception(exc)

        self._product_repo.update(product)
        return Success(None)
