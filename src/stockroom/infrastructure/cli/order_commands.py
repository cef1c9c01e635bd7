"""CLI commands for ordering: one-shot and interactive."""

from __future__ import annotations

import click

from stockroom.application.list_items import HomeViewModel
from stockroom.application.place_order import OrderConfirmationViewModel
from stockroom.application.product_detail import ProductDetailViewModel
from stockroom.domain.exceptions import DomainException, EntityNotFoundError
from stockroom.domain.repository.item_repository import ItemRepository
from stockroom.infrastructure.bootstrap import item_repository
from stockroom.infrastructure.cli.views import (
    PRODUCT_NOT_FOUND_DIALOG,
    display_detail,
    display_items,
    display_receipt,
)
from stockroom.infrastructure.config import Settings


def _confirm(repo: ItemRepository, detail: ProductDetailViewModel) -> None:
    """Submit the detail view's quantity and print the receipt."""
    intent = detail.submit_order()
    confirmation = OrderConfirmationViewModel(repo, intent)
    try:
        display_receipt(confirmation.state)
    finally:
        confirmation.close()


@click.command("place")
@click.option("--id", "item_id", required=True, type=int, help="Item ID to order.")
@click.option("--quantity", required=True, help="Units to order.")
@click.pass_obj
def order_place(settings: Settings, item_id: int, quantity: str) -> None:
    """Order QUANTITY units of an item and deduct them from stock."""
    repo = item_repository(settings)
    detail = ProductDetailViewModel(repo, item_id, quantity_input=quantity)

    try:
        if detail.state.item is None:
            raise click.ClickException(PRODUCT_NOT_FOUND_DIALOG)
        _confirm(repo, detail)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    finally:
        detail.close()


def _order_from_detail(repo: ItemRepository, item_id: int) -> None:
    detail = ProductDetailViewModel(repo, item_id)
    try:
        display_detail(detail.state)
        while detail.state.item is not None:
            text = click.prompt(
                "Quantity to order (blank to go back)", default="", show_default=False
            )
            if not text.strip():
                return
            detail.update_quantity(text)
            if detail.state.has_error:
                click.echo(f"  ! {detail.state.error_message}")
                continue
            try:
                _confirm(repo, detail)
            except DomainException as exc:
                click.echo(f"  ! {exc}")
                continue
            return
    finally:
        detail.close()


@click.command("shop")
@click.pass_obj
def shop(settings: Settings) -> None:
    """Browse, search and order interactively."""
    repo = item_repository(settings)
    home = HomeViewModel(repo)

    try:
        while True:
            click.echo()
            display_items(home.state)
            query = click.prompt("Search (blank to quit)", default="", show_default=False)
            if not query.strip():
                return
            try:
                found = home.search(query)
            except EntityNotFoundError:
                click.echo(PRODUCT_NOT_FOUND_DIALOG)
                continue
            _order_from_detail(repo, found.id)
    finally:
        home.close()
