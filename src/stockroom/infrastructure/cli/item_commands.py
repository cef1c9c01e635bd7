"""CLI commands for browsing and maintaining items."""

from __future__ import annotations

import click

from stockroom.application.list_items import HomeViewModel, SearchItemHandler
from stockroom.application.manage_items import (
    AddItemHandler,
    DeleteItemHandler,
    ShowItemHandler,
    UpdateItemHandler,
)
from stockroom.domain.exceptions import DomainException, EntityNotFoundError
from stockroom.infrastructure.bootstrap import item_repository
from stockroom.infrastructure.cli.views import (
    PRODUCT_NOT_FOUND_DIALOG,
    display_item,
    display_items,
)
from stockroom.infrastructure.config import Settings


@click.command("list")
@click.pass_obj
def item_list(settings: Settings) -> None:
    """List all items, by name."""
    home = HomeViewModel(item_repository(settings))
    display_items(home.state)
    home.close()


@click.command("search")
@click.argument("query")
@click.pass_obj
def item_search(settings: Settings, query: str) -> None:
    """Find an item by name and show its detail."""
    handler = SearchItemHandler(item_repository(settings))

    try:
        item = handler.handle(query)
    except EntityNotFoundError:
        raise click.ClickException(PRODUCT_NOT_FOUND_DIALOG)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_item(item)


@click.command("show")
@click.option("--id", "item_id", required=True, type=int, help="Item ID to display.")
@click.pass_obj
def item_show(settings: Settings, item_id: int) -> None:
    """Show one item's detail."""
    handler = ShowItemHandler(item_repository(settings))

    try:
        item = handler.handle(item_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_item(item)


@click.command("add")
@click.option("--name", required=True, help="Item name.")
@click.option("--price", required=True, help="Unit price (e.g. 15.00).")
@click.option("--quantity", required=True, type=int, help="Units in stock.")
@click.pass_obj
def item_add(settings: Settings, name: str, price: str, quantity: int) -> None:
    """Add a new item to the inventory."""
    handler = AddItemHandler(item_repository(settings))

    try:
        item = handler.handle(name=name, price=price, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Item #{item.id} '{item.name}' added at {item.price} ({item.in_stock_label})")


@click.command("edit")
@click.option("--id", "item_id", required=True, type=int, help="Item ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--price", default=None, help="New unit price.")
@click.option("--quantity", default=None, type=int, help="New stock count.")
@click.pass_obj
def item_edit(
    settings: Settings,
    item_id: int,
    name: str | None,
    price: str | None,
    quantity: int | None,
) -> None:
    """Edit an item's name, price or stock."""
    if name is None and price is None and quantity is None:
        raise click.UsageError("Nothing to change: pass --name, --price or --quantity.")

    handler = UpdateItemHandler(item_repository(settings))

    try:
        item = handler.handle(item_id, name=name, price=price, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Item #{item.id} updated.")
    display_item(item)


@click.command("delete")
@click.option("--id", "item_id", required=True, type=int, help="Item ID.")
@click.confirmation_option(prompt="Delete this item?")
@click.pass_obj
def item_delete(settings: Settings, item_id: int) -> None:
    """Remove an item from the inventory."""
    handler = DeleteItemHandler(item_repository(settings))

    try:
        handler.handle(item_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Item #{item_id} deleted.")
