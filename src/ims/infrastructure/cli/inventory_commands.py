"""CLI commands and rendering for the inventory listing."""

from __future__ import annotations

import click

from ims.application.dto import InventoryReportDTO
from ims.application.show_inventory import ShowInventoryHandler
from ims.infrastructure.cli.session import Session

COLUMN_WIDTH = 20
MAX_NAME_LENGTH = 15


def truncate_name(name: str) -> str:
    """Shorten long names to 14 characters plus an ellipsis."""
    if len(name) > MAX_NAME_LENGTH:
        return name[: MAX_NAME_LENGTH - 1] + "..."
    return name


def echo_inventory(report: InventoryReportDTO) -> None:
    """Print the inventory table followed by the total value."""
    w = COLUMN_WIDTH
    header = (
        f"{'Id':<{w}} {'Name':<{w}} {'Stock':<{w}} "
        f"{'Price':<{w}} {'Value':<{w}}"
    )
    click.echo(header)
    click.echo("-" * len(header))

    if report.is_empty:
        click.echo("No products found.")
    for item in report.items:
        click.echo(
            f"{item.id:<{w}} {truncate_name(item.name):<{w}} "
            f"{item.quantity_in_stock:<{w}} {item.price:<{w}} {item.total_value:<{w}}"
        )

    click.echo("-" * len(header))
    click.echo(f"{'Total Value:':<{w}} {report.total_value}")


@click.command("list")
@click.pass_obj
def inventory_list(session: Session) -> None:
    """List the inventory and its total value."""
    handler = ShowInventoryHandler(session.manager, session.currency_symbol)
    echo_inventory(handler.handle())
