"""CLI commands for the Product aggregate."""

from __future__ import annotations

import json
import uuid
from decimal import Decimal, InvalidOperation
from typing import Callable, TypeVar

import click

from inventory_manager.application.create_product import CreateProductHandler
from inventory_manager.application.delete_product import DeleteProductHandler
from inventory_manager.application.dto import (
    CreateProductRequest,
    ListProductsRequest,
    ProductView,
    UpdateProductRequest,
)
from inventory_manager.application.get_product import GetProductHandler
from inventory_manager.application.list_products import ListProductsHandler
from inventory_manager.application.result import Result, Success
from inventory_manager.application.update_product import UpdateProductHandler
from inventory_manager.infrastructure.bootstrap import product_repository
from inventory_manager.infrastructure.cli.errors import fail, fail_unexpected
from inventory_manager.infrastructure.config import Settings
from inventory_manager.infrastructure.persistence.seed import seed_catalog

T = TypeVar("T")


class DecimalParamType(click.ParamType):
    name = "decimal"

    def convert(self, value, param, ctx) -> Decimal:
        if isinstance(value, Decimal):
            return value
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation:
            self.fail(f"{value!r} is not a valid decimal amount.", param, ctx)
        if not amount.is_finite():
            self.fail(f"{value!r} is not a finite amount.", param, ctx)
        return amount


DECIMAL = DecimalParamType()


def _run(call: Callable[[], Result[T]]) -> T:
    """Invoke a use case and unwrap its result, or exit with a problem."""
    try:
        result = call()
    except Exception as exc:
        raise fail_unexpected(exc) from exc

    match result:
        case Success(value=value):
            return value
        case failure:
            raise fail(failure)


def _product_fields(func):
    """Options shared by create and update."""
    options = [
        click.option("--name", required=True, help="Product name."),
        click.option("--description", default="", help="Free-form description."),
        click.option("--price", required=True, type=DECIMAL, help="Unit price (e.g. 199.90)."),
        click.option("--stock", "stock_quantity", required=True, type=int, help="Units in stock."),
        click.option("--sku", required=True, help="Stock-keeping unit (5-20 chars)."),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _display_product(view: ProductView) -> None:
    click.echo(f"Product {view.id}")
    click.echo(f"  Name:        {view.name}")
    click.echo(f"  Description: {view.description}")
    click.echo(f"  Price:       {view.price:.2f}")
    click.echo(f"  Stock:       {view.stock_quantity}")
    click.echo(f"  SKU:         {view.sku}")


@click.command("create")
@_product_fields
@click.pass_obj
def product_create(
    settings: Settings,
    name: str,
    description: str,
    price: Decimal,
    stock_quantity: int,
    sku: str,
) -> None:
    """Add a new product to the catalog."""
    handler = CreateProductHandler(product_repo=product_repository(settings))
    request = CreateProductRequest(name, description, price, stock_quantity, sku)

    view = _run(lambda: handler.handle(request))

    click.echo("Product created.")
    _display_product(view)


@click.command("get")
@click.argument("product_id", type=click.UUID)
@click.option("--json", "as_json", is_flag=True, help="Print as JSON.")
@click.pass_obj
def product_get(settings: Settings, product_id: uuid.UUID, as_json: bool) -> None:
    """Show a single product."""
    handler = GetProductHandler(product_repo=product_repository(settings))

    view = _run(lambda: handler.handle(product_id))

    if as_json:
        click.echo(json.dumps(view.as_dict(), indent=2, ensure_ascii=False))
    else:
        _display_product(view)


@click.command("list")
@click.option("--page", default=1, show_default=True, type=int, help="1-based page number.")
@click.option("--page-size", default=10, show_default=True, type=int, help="Products per page (max 50).")
@click.option("--json", "as_json", is_flag=True, help="Print items as a JSON array.")
@click.pass_obj
def product_list(settings: Settings, page: int, page_size: int, as_json: bool) -> None:
    """List products ordered by name, one page at a time."""
    handler = ListProductsHandler(product_repo=product_repository(settings))

    result = _run(lambda: handler.handle(ListProductsRequest(page, page_size)))

    # Pagination metadata travels out of band, like a response header.
    click.echo(f"X-Pagination: {json.dumps(result.meta.as_dict())}", err=True)

    if as_json:
        click.echo(
            json.dumps([v.as_dict() for v in result.items], indent=2, ensure_ascii=False)
        )
        return

    if not result.items:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<36}  {'Name':<28} {'SKU':<20} {'Price':>10} {'Stock':>6}")
    click.echo("-" * 104)
    for v in result.items:
        click.echo(
            f"{str(v.id):<36}  {v.name:<28} {v.sku:<20} {v.price:>10.2f} {v.stock_quantity:>6}"
        )
    click.echo(f"Page {result.page} of {result.total_pages} ({result.total_items} products)")


@click.command("update")
@click.argument("product_id", type=click.UUID)
@_product_fields
@click.pass_obj
def product_update(
    settings: Settings,
    product_id: uuid.UUID,
    name: str,
    description: str,
    price: Decimal,
    stock_quantity: int,
    sku: str,
) -> None:
    """Replace every field of an existing product."""
    handler = UpdateProductHandler(product_repo=product_repository(settings))
    request = UpdateProductRequest(name, description, price, stock_quantity, sku)

    _run(lambda: handler.handle(product_id, request))

    click.echo(f"Product {product_id} updated.")


@click.command("delete")
@click.argument("product_id", type=click.UUID)
@click.pass_obj
def product_delete(settings: Settings, product_id: uuid.UUID) -> None:
    """Remove a product from the catalog."""
    handler = DeleteProductHandler(product_repo=product_repository(settings))

    _run(lambda: handler.handle(product_id))

    click.echo(f"Product {product_id} deleted.")


@click.command("seed")
@click.pass_obj
def product_seed(settings: Settings) -> None:
    """Load the demo catalogue into an empty (or partial) data file."""
    try:
        added = seed_catalog(product_repository(settings))
    except Exception as exc:
        raise fail_unexpected(exc) from exc

    click.echo(f"Seeded {added} products.")
