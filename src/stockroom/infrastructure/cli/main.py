from __future__ import annotations

from pathlib import Path
from typing import get_args

import click
from pydantic import ValidationError as SettingsError

from stockroom import logging as stockroom_logging
from stockroom.infrastructure.cli.item_commands import (
    item_add,
    item_delete,
    item_edit,
    item_list,
    item_search,
    item_show,
)
from stockroom.infrastructure.cli.order_commands import order_place, shop
from stockroom.infrastructure.config import LogLevel, Settings


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding items.json [env: STOCKROOM_DATA_DIR].",
)
@click.option(
    "--log-level",
    type=click.Choice(get_args(LogLevel), case_sensitive=False),
    default=None,
    help="Log verbosity, logs go to stderr [env: STOCKROOM_LOG_LEVEL].",
)
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None, log_level: str | None) -> None:
    """Stockroom: inventory and ordering"""
    overrides = {"data_dir": data_dir, "log_level": log_level}
    try:
        settings = Settings(**{k: v for k, v in overrides.items() if v is not None})
    except SettingsError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}")
    stockroom_logging.configure(settings.log_level)
    ctx.obj = settings


@cli.group()
def item() -> None:
    """Browse and maintain items."""


@cli.group()
def order() -> None:
    """Place orders."""


# Register subcommands
item.add_command(item_list)
item.add_command(item_search)
item.add_command(item_show)
item.add_command(item_add)
item.add_command(item_edit)
item.add_command(item_delete)
order.add_command(order_place)
cli.add_command(shop)
