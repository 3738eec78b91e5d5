"""Integration tests for the ListProducts use case."""

from decimal import Decimal

import pytest

from inventory_manager.application.dto import ListProductsRequest
from inventory_manager.application.list_products import ListProductsHandler
from inventory_manager.application.result import Success, ValidationError
from inventory_manager.domain.model.product import Product
from tests.fakes import FakeProductRepository


def _catalog(count: int) -> list[Product]:
    return [
        Product(f"Product {i:02d}", "", Decimal("10"), i, f"SKU-{i:05d}")
        for i in range(count)
    ]


def _setup(count: int = 15):
    repo = FakeProductRepository(_catalog(count))
    return ListProductsHandler(repo), repo


class TestListProductsPaging:

    def test_first_page_of_fifteen(self):
        handler, _ = _setup(15)

        result = handler.handle(ListProductsRequest(page=1, page_size=10))

        assert isinstance(result, Success)
        paged = result.value
        assert len(paged.items) == 10
        assert paged.total_items == 15
        assert paged.total_pages == 2
        assert paged.has_next_page is True
        assert paged.has_previous_page is False

    def test_last_page_holds_remainder(self):
        handler, _ = _setup(15)

        paged = handler.handle(ListProductsRequest(page=2, page_size=10)).value

        assert len(paged.items) == 5
        assert paged.total_items == 15
        assert paged.has_next_page is False
        assert paged.has_previous_page is True

    def test_items_ordered_by_name(self):
        handler, _ = _setup(5)

        paged = handler.handle(ListProductsRequest(page=1, page_size=5)).value

        names = [v.name for v in paged.items]
        assert names == sorted(names)

    def test_defaults_are_first_page_of_ten(self):
        handler, _ = _setup(12)

        paged = handler.handle(ListProductsRequest()).value

        assert paged.page == 1
        assert paged.page_size == 10
        assert len(paged.items) == 10

    def test_empty_catalog_is_success(self):
        handler, _ = _setup(0)

        result = handler.handle(ListProductsRequest())

        assert isinstance(result, Success)
        assert result.value.items == ()
        assert result.value.total_items == 0
        assert result.value.total_pages == 0
        assert result.value.has_next_page is False

    def test_page_past_the_end_is_empty_but_keeps_total(self):
        handler, _ = _setup(3)

        paged = handler.handle(ListProductsRequest(page=5, page_size=10)).value

        assert paged.items == ()
        assert paged.total_items == 3


class TestListProductsValidation:

    @pytest.mark.parametrize(
        "page, page_size, field",
        [(0, 10, "Page"), (1, 0, "PageSize"), (1, 51, "PageSize")],
    )
    def test_invalid_request_issues_no_query(self, page, page_size, field):
        handler, repo = _setup()

        result = handler.handle(ListProductsRequest(page=page, page_size=page_size))

        assert isinstance(result, ValidationError)
        assert field in result.errors
        assert repo.calls == []

    def test_none_request_is_a_programmer_error(self):
        handler, _ = _setup()
        with pytest.raises(TypeError):
            handler.handle(None)
