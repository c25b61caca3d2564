"""Interactive text menu over the in-memory inventory.

Input is read with typed ``click.prompt`` calls, which re-prompt until the
value parses. Domain errors are reported and the menu carries on.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

import click

from ims.application.add_product import AddProductHandler
from ims.application.remove_product import RemoveProductHandler
from ims.application.show_inventory import ShowInventoryHandler
from ims.application.update_product import UpdateProductHandler
from ims.domain.exceptions import DomainException
from ims.domain.model.product import MAX_PRICE
from ims.infrastructure.cli.inventory_commands import echo_inventory
from ims.infrastructure.cli.session import Session

MENU_OPTIONS = (
    "Add Product",
    "Remove Product",
    "Update Product",
    "List Products",
    "Exit",
)
EXIT_CHOICE = len(MENU_OPTIONS)


class PriceType(click.ParamType):
    """A non-negative decimal amount such as ``15`` or ``9.99``."""

    name = "price"

    def convert(self, value, param, ctx):
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation:
            self.fail(f"{value!r} is not a valid price.", param, ctx)
        if not amount.is_finite() or amount < 0:
            self.fail(f"{value!r} is not a valid price.", param, ctx)
        if amount > MAX_PRICE:
            self.fail(f"Price cannot exceed {MAX_PRICE:,}.", param, ctx)
        return amount


class ProductNameType(click.ParamType):
    """A product name with surrounding whitespace removed; never blank."""

    name = "name"

    def convert(self, value, param, ctx):
        name = str(value).strip()
        if not name:
            self.fail("Product name cannot be empty.", param, ctx)
        return name


PRICE = PriceType()
PRODUCT_NAME = ProductNameType()
PRODUCT_ID = click.IntRange(min=1)
QUANTITY = click.IntRange(min=0)


def _add_product(session: Session) -> None:
    name = click.prompt("Enter a product name", type=PRODUCT_NAME)
    quantity = click.prompt("Enter the quantity", type=QUANTITY)
    price = click.prompt("Enter the price", type=PRICE)
    dto = AddProductHandler(session.manager, session.currency_symbol).handle(
        name=name, quantity=quantity, price=price
    )
    click.echo(f"Product #{dto.id} '{dto.name}' added successfully.")


def _remove_product(session: Session) -> None:
    product_id = click.prompt("Enter the product ID to remove", type=PRODUCT_ID)
    dto = RemoveProductHandler(session.manager, session.currency_symbol).handle(
        product_id
    )
    click.echo(f"Product #{dto.id} '{dto.name}' removed successfully.")


def _update_product(session: Session) -> None:
    product_id = click.prompt("Enter the product ID to update", type=PRODUCT_ID)
    quantity = click.prompt("Enter the new quantity", type=QUANTITY)
    dto = UpdateProductHandler(session.manager, session.currency_symbol).handle(
        product_id, quantity
    )
    click.echo(f"Product #{dto.id} quantity updated to {dto.quantity_in_stock}.")


def _list_products(session: Session) -> None:
    echo_inventory(ShowInventoryHandler(session.manager, session.currency_symbol).handle())


_ACTIONS = {
    1: _add_product,
    2: _remove_product,
    3: _update_product,
    4: _list_products,
}


def run_menu(session: Session) -> None:
    click.echo("Welcome to the Inventory Management System!")
    while True:
        click.echo()
        click.echo("Inventory Management System")
        click.echo("=" * 33)
        for number, label in enumerate(MENU_OPTIONS, start=1):
            click.echo(f"{number}. {label}")

        choice = click.prompt(
            f"Please select an option (1-{EXIT_CHOICE})",
            type=click.IntRange(1, EXIT_CHOICE),
        )
        if choice == EXIT_CHOICE:
            click.echo("Goodbye!")
            return

        try:
            _ACTIONS[choice](session)
        except DomainException as exc:
            click.echo(f"Error: {exc}", err=True)


@click.command("menu")
@click.pass_obj
def menu(session: Session) -> None:
    """Run the interactive inventory menu."""
    run_menu(session)
