from __future__ import annotations

from pathlib import Path

import click

from inventory_manager.infrastructure.cli.product_commands import (
    product_create,
    product_delete,
    product_get,
    product_list,
    product_seed,
    product_update,
)
from inventory_manager.infrastructure.config import (
    DATA_DIR_ENV,
    LOG_LEVEL_ENV,
    LOG_LEVELS,
    Settings,
)
from inventory_manager.infrastructure.logging_setup import configure_logging


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar=DATA_DIR_ENV,
    help="Directory holding products.json.",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    envvar=LOG_LEVEL_ENV,
    help="Minimum level written to stderr.",
)
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None, log_level: str | None) -> None:
    """Inventory Manager: product catalog"""
    settings = Settings.from_env()
    if data_dir is not None:
        settings = Settings(data_dir=data_dir, log_level=settings.log_level)
    if log_level is not None:
        settings = Settings(data_dir=settings.data_dir, log_level=log_level.upper())
    if settings.log_level not in LOG_LEVELS:
        # A level from .env never went through the Choice above.
        raise click.BadParameter(
            f"{settings.log_level!r} is not one of {', '.join(LOG_LEVELS)}.",
            param_hint=LOG_LEVEL_ENV,
        )

    configure_logging(settings.log_level)
    ctx.obj = settings


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
product.add_command(product_create)
product.add_command(product_delete)
product.add_command(product_get)
product.add_command(product_list)
product.add_command(product_seed)
product.add_command(product_update)
