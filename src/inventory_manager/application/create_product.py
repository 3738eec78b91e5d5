"""Application service: Create Product use case."""

from __future__ import annotations

from loguru import logger

from inventory_manager.application.dto import CreateProductRequest, ProductView
from inventory_manager.application.result import (
    ConflictError,
    DomainError,
    Result,
    Success,
    ValidationError,
)
from inventory_manager.application.validation import (
    group_by_field,
    validate_create_request,
)
from inventory_manager.domain import exceptions as domain_exceptions
from inventory_manager.domain.model.product import Product
from inventory_manager.domain.repository.product_repository import ProductRepository

SKU_ALREADY_EXISTS = "Product with SKU {sku} already exists."


class CreateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, request: CreateProductRequest) -> Result[ProductView]:
        """Add a new product to the catalog.

        Checks run in a fixed order and stop at the first failure:
        request validation, SKU conflict, aggregate invariants. Only
        then is the product persisted.
        """
        if request is None:
            raise TypeError("request must not be None")

        logger.info("Executing create product use case for: {}", request.name)

        violations = validate_create_request(request)
        if violations:
            return ValidationError(errors=group_by_field(violations))

        if self._product_repo.exists(request.sku):
            logger.warning("Rejected duplicate SKU {}", request.sku)
            return ConflictError(SKU_ALREADY_EXISTS.format(sku=request.sku))

        try:
            product = Product(
                name=request.name,
                description=request.description,
                price=request.price,
                stock_quantity=request.stock_quantity,
                sku=request.sku,
            )
        except domain_exceptions.DomainError as exc:
            return DomainError.from_exception(exc)

        self._product_repo.add(product)
        return Success(ProductView.from_product(product))
