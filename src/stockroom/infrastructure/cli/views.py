"""Text rendering shared by the CLI commands."""

from __future__ import annotations

import click

from stockroom.application.dto import (
    HomeState,
    ItemDTO,
    OrderReceiptDTO,
    ProductDetailState,
)

PRODUCT_NOT_FOUND_DIALOG = "Attention: Product not found"


def display_items(state: HomeState) -> None:
    if state.is_empty:
        click.echo("No items in inventory. Add one with 'stockroom item add'.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10}  {'Stock':<14}")
    click.echo("-" * 54)
    for item in state.items:
        click.echo(f"{item.id:<6} {item.name:<20} {item.price:>10}  {item.in_stock_label:<14}")


def display_item(item: ItemDTO) -> None:
    click.echo(f"Item #{item.id}")
    click.echo(f"  {'Item':<18} {item.name}")
    click.echo(f"  {'Price':<18} {item.price}")
    click.echo(f"  {'Quantity in stock':<18} {item.quantity}")


def display_detail(state: ProductDetailState) -> None:
    if state.item is None:
        click.echo(PRODUCT_NOT_FOUND_DIALOG)
        return
    display_item(state.item)
    if state.error_message:
        click.echo(f"  ! {state.error_message}")


def display_receipt(receipt: OrderReceiptDTO) -> None:
    if not receipt.found:
        click.echo(PRODUCT_NOT_FOUND_DIALOG)
        return

    click.echo("Order confirmation")
    click.echo(f"  {'Item':<18} {receipt.item_name:>12}")
    click.echo(f"  {'Price':<18} {receipt.unit_price:>12}")
    click.echo(f"  {'Quantity ordered':<18} {receipt.quantity_ordered:>12}")
    click.echo(f"  {'Total cost':<18} {receipt.total_cost:>12}")
    click.echo(f"  {'Remaining items':<18} {receipt.remaining_items:>12}")
    if not receipt.placed:
        click.echo("  Stock changed before the order went through; nothing was deducted.")
