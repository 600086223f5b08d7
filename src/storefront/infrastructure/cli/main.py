import logging

import click

from storefront.infrastructure.cli.catalog_commands import (
    catalog_categories,
    catalog_export,
    catalog_list,
    catalog_show,
)
from storefront.infrastructure.cli.shop_commands import shop
from storefront.infrastructure.config import load_settings


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Storefront: product catalog and shopping cart"""
    try:
        settings = load_settings()
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    ctx.obj = settings


@cli.group()
def catalog() -> None:
    """Browse the product catalog."""


# Register subcommands
catalog.add_command(catalog_categories)
catalog.add_command(catalog_export)
catalog.add_command(catalog_list)
catalog.add_command(catalog_show)
cli.add_command(shop)
