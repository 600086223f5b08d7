"""CLI commands for browsing the catalog."""

from __future__ import annotations

import asyncio
from pathlib import Path

import click

from storefront.application.browse_catalog import BrowseCatalogHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import Storefront, storefront
from storefront.infrastructure.config import Settings
from storefront.infrastructure.persistence.json_catalog_source import (
    JsonFileCatalogSource,
)


def load_storefront(settings: Settings) -> Storefront:
    """Build the stores and load the catalog once, failing on fetch error."""
    app = storefront(settings)

    async def _load() -> None:
        await app.catalog.load(app.source)

    asyncio.run(_load())
    if app.catalog.error is not None:
        raise click.ClickException(app.catalog.error)
    return app


def display_grid(products) -> None:
    """Shared formatting for a list of ProductDTOs."""
    click.echo(f"{'ID':<5} {'Title':<40} {'Category':<18} {'Price':>10} {'Rating':>12}")
    click.echo("-" * 89)
    for p in products:
        marker = "*" if p.in_cart else " "
        click.echo(
            f"{p.id:<5} {p.title[:39]:<40} {p.category[:17]:<18} "
            f"{p.price:>10} {p.rating:>12}{marker}"
        )


def display_detail(dto) -> None:
    click.echo(f"#{dto.id}  {dto.title}")
    click.echo(f"Category: {dto.category}")
    click.echo(f"Price:    {dto.price}")
    click.echo(f"Rating:   {dto.rating} reviews")
    click.echo(f"Image:    {dto.image}")
    click.echo()
    click.echo(dto.description)


@click.command("list")
@click.option("--category", default=None, help="Only show this category.")
@click.pass_obj
def catalog_list(settings: Settings, category: str | None) -> None:
    """List all products in the catalog."""
    app = load_storefront(settings)
    products = BrowseCatalogHandler(app.catalog, app.cart).handle(category)

    if not products:
        click.echo("No products found.")
        return

    display_grid(products)


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def catalog_show(settings: Settings, product_id: int) -> None:
    """Show details of a single product."""
    app = load_storefront(settings)
    handler = BrowseCatalogHandler(app.catalog, app.cart)

    try:
        dto = handler.detail(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_detail(dto)


@click.command("categories")
@click.pass_obj
def catalog_categories(settings: Settings) -> None:
    """List the distinct product categories."""
    app = load_storefront(settings)
    for category in app.catalog.categories:
        click.echo(category)


@click.command("export")
@click.option(
    "--out",
    "out_path",
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="File to write the catalog to.",
)
@click.pass_obj
def catalog_export(settings: Settings, out_path: Path) -> None:
    """Save the fetched catalog as JSON for offline use."""
    app = load_storefront(settings)
    JsonFileCatalogSource(out_path, currency=settings.currency).save(
        list(app.catalog.products)
    )
    click.echo(f"Saved {len(app.catalog.products)} products to {out_path}")
