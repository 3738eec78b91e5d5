"""Unit tests for the pagination calculator."""

import pytest

from inventory_manager.application.dto import PagedResult, PageMeta


class TestPageMeta:

    @pytest.mark.parametrize(
        "total, size, pages",
        [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (15, 10, 2), (50, 7, 8)],
    )
    def test_total_pages_is_ceiling(self, total, size, pages):
        assert PageMeta(total, 1, size).total_pages == pages

    def test_next_page_only_before_last(self):
        assert PageMeta(25, 2, 10).has_next_page is True
        assert PageMeta(25, 3, 10).has_next_page is False

    def test_previous_page_only_after_first(self):
        assert PageMeta(25, 1, 10).has_previous_page is False
        assert PageMeta(25, 2, 10).has_previous_page is True

    def test_as_dict_uses_header_keys(self):
        assert PageMeta(15, 1, 10).as_dict() == {
            "totalItems": 15,
            "currentPage": 1,
            "pageSize": 10,
            "totalPages": 2,
            "hasNextPage": True,
            "hasPreviousPage": False,
        }


class TestPagedResult:

    def test_meta_derives_from_reported_total(self):
        result = PagedResult(items=(), total_items=42, page=3, page_size=10)
        assert result.meta == PageMeta(42, 3, 10)
        assert result.total_pages == 5
        assert result.has_next_page is True
        assert result.has_previous_page is True
