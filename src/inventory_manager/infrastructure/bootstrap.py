"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from inventory_manager.infrastructure.config import Settings
from inventory_manager.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def product_repository(settings: Settings) -> JsonProductRepository:
    return JsonProductRepository(settings.products_file)
