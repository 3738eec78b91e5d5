"""Demo catalogue for a fresh data directory."""

from __future__ import annotations

from decimal import Decimal

from loguru import logger

from inventory_manager.domain.model.product import Product
from inventory_manager.domain.repository.product_repository import ProductRepository

# (name, description, price, stock, sku)
DEMO_PRODUCTS: list[tuple[str, str, str, int, str]] = [
    ("iPhone 15 Pro", "Apple smartphone 256GB titanium", "7500", 10, "SKU-IPHONE-15P"),
    ("Samsung Galaxy S24", "Samsung smartphone with AI features", "4500", 15, "SKU-GALAXY-S24"),
    ("Xiaomi 13T", "Xiaomi flagship killer", "3200", 20, "SKU-XIAOMI-13T"),
    ("Motorola Edge 40", "Premium mid-range smartphone", "2100", 12, "SKU-MOTO-EDGE40"),
    ("MacBook Pro M3", "Apple Silicon notebook", "12000", 5, "SKU-MAC-M3"),
    ("Dell XPS 13", "Premium Windows ultrabook", "9000", 7, "SKU-DELL-XPS"),
    ("Mouse Logitech MX Master", "Ergonomic wireless mouse", "450", 50, "SKU-MOUSE-MX"),
    ("Keychron Mechanical Keyboard", "Mechanical keyboard, brown switches", "600", 25, "SKU-KEYCHRON-K2"),
    ("Monitor Dell 27 4K", "UHD monitor with USB-C hub", "2800", 10, "SKU-DELL-27-4K"),
    ("Webcam Logitech C920", "Full HD pro webcam", "350", 40, "SKU-WEBCAM-C920"),
    ("Headset HyperX Gamer", "7.1 surround headset", "300", 60, "SKU-HEADSET-HX"),
    ("Gamer Chair DX", "Reclining ergonomic chair", "1500", 8, "SKU-CHAIR-DX"),
    ("HDMI 2.1 Cable", "8K ultra speed cable", "80", 200, "SKU-CABLE-HDMI"),
    ("USB-C Hub 7-in-1", "Adapter for MacBook and Windows", "250", 45, "SKU-HUB-USBC"),
]


def seed_catalog(product_repo: ProductRepository) -> int:
    """Add every demo product whose SKU is not taken yet.

    Returns how many products were added; running it twice adds nothing
    the second time.
    """
    added = 0
    for name, description, price, stock, sku in DEMO_PRODUCTS:
        if product_repo.exists(sku):
            continue
        product_repo.add(Product(name, description, Decimal(price), stock, sku))
        added += 1
    logger.info("Seeded {} demo products", added)
    return added
