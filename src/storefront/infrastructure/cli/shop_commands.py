"""Interactive shopping session.

The whole session runs on one event loop. Input is read in a daemon
thread so a catalog fetch can complete while the prompt is waiting;
commands themselves always execute on the loop.
"""

from __future__ import annotations

import asyncio
import shlex
import threading

import click

from storefront.application.browse_catalog import BrowseCatalogHandler
from storefront.application.catalog_store import CatalogStore
from storefront.domain.exceptions import DomainException, ValidationError
from storefront.infrastructure.bootstrap import Storefront, storefront
from storefront.infrastructure.cli.catalog_commands import display_detail, display_grid
from storefront.infrastructure.config import Settings

HELP_TEXT = """\
Commands:
  list [CATEGORY]   show the catalog
  categories        show product categories
  show ID           product details
  add ID            put a product in the cart, or take it out again
  inc ID / dec ID   change the quantity of a cart item
  cart              show the cart
  checkout          place the order
  retry             fetch the catalog again
  help              this text
  quit              leave"""

THANK_YOU = "Thank You! Your order has been placed successfully!"


class ShellSession:
    """Parses one command line at a time and applies it to the stores."""

    def __init__(self, app: Storefront) -> None:
        self.app = app
        self._browse = BrowseCatalogHandler(app.catalog, app.cart)
        self._unsubscribe = app.catalog.subscribe(self._on_catalog_change)

    def start(self) -> None:
        click.echo("Loading products...")
        self.app.catalog.load(self.app.source)

    def close(self) -> None:
        self._unsubscribe()
        self.app.catalog.cancel_pending()

    def execute(self, line: str) -> bool:
        """Run one command. Returns False when the session should end."""
        try:
            words = shlex.split(line)
        except ValueError as exc:
            click.echo(f"Error: {exc}")
            return True
        if not words:
            return True

        command, args = words[0].lower(), words[1:]
        if command in ("quit", "exit"):
            return False

        handler = self._commands().get(command)
        if handler is None:
            click.echo(f"Unknown command '{command}'. Type 'help'.")
            return True

        try:
            handler(args)
        except DomainException as exc:
            click.echo(f"Error: {exc}")
        return True

    # --- Commands -------------------------------------------------------------

    def _commands(self):
        return {
            "help": lambda args: click.echo(HELP_TEXT),
            "list": self._list,
            "categories": self._categories,
            "show": self._show,
            "add": self._toggle,
            "inc": lambda args: self._adjust(args, increment=True),
            "dec": lambda args: self._adjust(args, increment=False),
            "cart": self._cart,
            "checkout": self._checkout,
            "retry": self._retry,
        }

    def _list(self, args: list[str]) -> None:
        catalog = self.app.catalog
        if catalog.error is not None:
            click.echo(f"Error: {catalog.error} (type 'retry')")
            return
        if not catalog.products:
            click.echo("Loading products..." if catalog.is_loading else "No products found.")
            return
        category = " ".join(args) if args else None
        display_grid(self._browse.handle(category))

    def _categories(self, args: list[str]) -> None:
        for category in self.app.catalog.categories:
            click.echo(category)

    def _show(self, args: list[str]) -> None:
        display_detail(self._browse.detail(self._product_id(args)))

    def _toggle(self, args: list[str]) -> None:
        product_id = self._product_id(args)
        cart = self.app.cart
        cart.toggle(product_id)
        if cart.contains(product_id):
            click.echo(f"Added #{product_id} to cart.")
        elif self.app.catalog.get(product_id) is None:
            click.echo(f"Product #{product_id} is not in the catalog.")
        else:
            click.echo(f"Removed #{product_id} from cart.")
        click.echo(f"Cart: {cart.total_item_count} item(s), {cart.total_price}")

    def _adjust(self, args: list[str], increment: bool) -> None:
        product_id = self._product_id(args)
        cart = self.app.cart
        if not cart.contains(product_id):
            click.echo(f"Product #{product_id} is not in the cart.")
            return
        cart.set_quantity(product_id, increment)
        click.echo(f"#{product_id} quantity: {cart.quantity(product_id)}")

    def _cart(self, args: list[str]) -> None:
        summary = self.app.cart.summary()
        if summary.is_empty:
            click.echo("Your cart is empty")
            return
        click.echo(f"  {'ID':<5} {'Product':<30} {'Qty':>5} {'Price':>10} {'Total':>10}")
        click.echo(f"  {'-'*63}")
        for line in summary.lines:
            click.echo(
                f"  {line.product_id:<5} {line.title[:29]:<30} {line.quantity:>5} "
                f"{line.unit_price:>10} {line.line_total:>10}"
            )
        click.echo(f"  {'-'*63}")
        click.echo(f"  {'Items':<42} {summary.total_item_count:>21}")
        click.echo(f"  {'Total':<42} {summary.total:>21}")

    def _checkout(self, args: list[str]) -> None:
        cart = self.app.cart
        if cart.is_empty:
            click.echo("Your cart is empty")
            return
        total = cart.total_price
        cart.checkout()
        click.echo(f"Charged {total}.")
        click.echo(THANK_YOU)

    def _retry(self, args: list[str]) -> None:
        click.echo("Loading products...")
        self.app.catalog.load(self.app.source)

    # --- Helpers --------------------------------------------------------------

    @staticmethod
    def _product_id(args: list[str]) -> int:
        if len(args) != 1:
            raise ValidationError("Expected exactly one product ID.")
        try:
            return int(args[0])
        except ValueError:
            raise ValidationError(f"Invalid product ID '{args[0]}'.")

    def _on_catalog_change(self, catalog: CatalogStore) -> None:
        if catalog.is_loading:
            return
        if catalog.error is not None:
            click.echo(f"\nError: {catalog.error} (type 'retry')")
        else:
            click.echo(f"\nCatalog loaded: {len(catalog.products)} products.")


def _read_line() -> str | None:
    try:
        return click.prompt("storefront", default="", show_default=False, prompt_suffix="> ")
    except click.Abort:
        return None


def _resolve(future: asyncio.Future, line: str | None) -> None:
    if not future.done():
        future.set_result(line)


async def _prompt() -> str | None:
    """Wait for one line of input without tying up the loop's executor.

    The reader is a daemon thread, so a session interrupted while the
    prompt is waiting can exit without anyone pressing Enter.
    """
    loop = asyncio.get_running_loop()
    future = loop.create_future()

    def read() -> None:
        line = _read_line()
        try:
            loop.call_soon_threadsafe(_resolve, future, line)
        except RuntimeError:
            # The loop closed while the prompt was waiting.
            pass

    threading.Thread(target=read, name="storefront-prompt", daemon=True).start()
    return await future


async def run_session(session: ShellSession) -> None:
    session.start()
    try:
        while True:
            line = await _prompt()
            if line is None or not session.execute(line):
                break
    finally:
        session.close()


@click.command("shop")
@click.pass_obj
def shop(settings: Settings) -> None:
    """Browse the catalog and fill a cart interactively."""
    session = ShellSession(storefront(settings))
    click.echo("Type 'help' for commands.")
    asyncio.run(run_session(session))
