"""Integration tests for the UpdateProduct use case."""

import uuid
from decimal import Decimal

import pytest

from inventory_manager.application.dto import UpdateProductRequest
from inventory_manager.application.result import (
    ConflictError,
    DomainError,
    ErrorKind,
    NotFoundError,
    Success,
    ValidationError,
)
from inventory_manager.application import update_product
from inventory_manager.application.update_product import UpdateProductHandler
from inventory_manager.domain.model.product import Product
from tests.fakes import FakeProductRepository


def _request(**overrides) -> UpdateProductRequest:
    fields = dict(
        name="Gamer Keyboard v2",
        description="Wireless",
        price=Decimal("250.00"),
        stock_quantity=30,
        sku="KB-RGB-002",
    )
    fields.update(overrides)
    return UpdateProductRequest(**fields)


def _setup():
    keyboard = Product("Gamer Keyboard", "RGB", Decimal("200"), 50, "KB-RGB-001")
    mouse = Product("Gamer Mouse", "High DPI", Decimal("150"), 10, "MSE-001")
    repo = FakeProductRepository([keyboard, mouse])
    return UpdateProductHandler(repo), repo, keyboard, mouse


class TestUpdateProductHappyPath:

    def test_updates_and_persists(self):
        handler, repo, keyboard, _ = _setup()

        result = handler.handle(keyboard.id, _request())

        assert result == Success(None)
        stored = repo.get_by_id(keyboard.id)
        assert stored.name == "Gamer Keyboard v2"
        assert stored.price == Decimal("250.00")
        assert stored.sku == "KB-RGB-002"
        assert repo.calls[:4] == ["get_by_id", "is_sku_unique", "update", "get_by_id"]

    def test_keeping_own_sku_is_not_a_conflict(self):
        handler, _, keyboard, _ = _setup()

        result = handler.handle(keyboard.id, _request(sku="KB-RGB-001"))

        assert result.ok


class TestUpdateProductFailures:

    def test_validation_runs_before_existence_check(self):
        handler, repo, _, _ = _setup()

        result = handler.handle(uuid.uuid4(), _request(name=""))

        assert isinstance(result, ValidationError)
        assert "Name" in result.errors
        assert repo.calls == []

    def test_missing_product_returns_not_found_and_never_updates(self):
        handler, repo, _, _ = _setup()
        missing_id = uuid.uuid4()

        result = handler.handle(missing_id, _request())

        assert isinstance(result, NotFoundError)
        assert result.message == f"Product with Id '{missing_id}' not found."
        assert "update" not in repo.calls

    def test_sku_owned_by_another_product_returns_conflict(self):
        handler, repo, keyboard, mouse = _setup()

        result = handler.handle(keyboard.id, _request(sku="MSE-001"))

        assert isinstance(result, ConflictError)
        assert result.message == "Product with SKU MSE-001 already exists."
        assert "update" not in repo.calls
        assert repo.get_by_id(keyboard.id).sku == "KB-RGB-001"

    def test_none_request_is_a_programmer_error(self):
        handler, _, keyboard, _ = _setup()
        with pytest.raises(TypeError):
            handler.handle(keyboard.id, None)


class TestUpdateProductAggregateGuard:

    def test_aggregate_rejects_what_validation_let_through(self, monkeypatch):
        # With request validation disabled the aggregate is the last line.
        monkeypatch.setattr(update_product, "validate_update_request", lambda r: [])
        handler, repo, keyboard, _ = _setup()

        result = handler.handle(keyboard.id, _request(stock_quantity=-1))

        assert isinstance(result, DomainError)
        assert result.kind is ErrorKind.DOMAIN
        assert result.message == "Stock quantity cannot be negative."
        assert "update" not in repo.calls
        assert repo.get_by_id(keyboard.id).stock_quantity == 50
