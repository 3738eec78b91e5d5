"""Application service: List Products use case (query)."""

from __future__ import annotations

from loguru import logger

from inventory_manager.application.dto import (
    ListProductsRequest,
    PagedResult,
    ProductView,
)
from inventory_manager.application.result import Result, Success, ValidationError
from inventory_manager.application.validation import (
    group_by_field,
    validate_list_request,
)
from inventory_manager.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, request: ListProductsRequest) -> Result[PagedResult]:
        """Return one page of the catalog, ordered by product name.

        The total comes from the repository, not from the length of the
        returned page. An empty catalog is a successful, empty page.
        """
        if request is None:
            raise TypeError("request must not be None")

        logger.info(
            "Getting all products. Page: {}, PageSize: {}",
            request.page,
            request.page_size,
        )

        violations = validate_list_request(request)
        if violations:
            return ValidationError(errors=group_by_field(violations))

        products, total_count = self._product_repo.get_all(
            request.page, request.page_size
        )
        return Success(
            PagedResult(
                items=tuple(ProductView.from_product(p) for p in products),
                total_items=total_count,
                page=request.page,
                page_size=request.page_size,
            )
        )
