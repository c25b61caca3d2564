from __future__ import annotations

from dataclasses import replace

import click

from ims.infrastructure.bootstrap import inventory_manager
from ims.infrastructure.cli.inventory_commands import inventory_list
from ims.infrastructure.cli.menu import menu
from ims.infrastructure.cli.session import Session
from ims.infrastructure.logging_config import configure_logging
from ims.infrastructure.settings import load_settings


@click.group(invoke_without_command=True)
@click.option("--currency-symbol", default=None, help="Symbol used when showing money.")
@click.option("--no-seed", is_flag=True, help="Start with an empty inventory.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, currency_symbol: str | None, no_seed: bool, verbose: bool) -> None:
    """IMS — Inventory Management System"""
    settings = load_settings()
    try:
        configure_logging("DEBUG" if verbose else settings.log_level)
    except ValueError as exc:
        raise click.UsageError(f"IMS_LOG_LEVEL: {exc}")

    if no_seed:
        settings = replace(settings, seed_catalog=False)

    ctx.obj = Session(
        manager=inventory_manager(settings),
        currency_symbol=currency_symbol or settings.currency_symbol,
    )

    if ctx.invoked_subcommand is None:
        ctx.invoke(menu)


# Register subcommands
cli.add_command(inventory_list)
cli.add_command(menu)
