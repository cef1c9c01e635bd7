"""Unit tests for order quantity validation."""

import pytest

from stockroom.domain.exceptions import InsufficientStockError, InvalidQuantityError
from stockroom.domain.model.item import Item
from stockroom.domain.model.value_objects import MAX_QUANTITY, Money, Quantity
from stockroom.domain.service.order_validation import (
    check_quantity,
    parse_quantity,
    validate_order,
)


def _item(quantity: int) -> Item:
    return Item(id=7, name="Pen", price=Money.of("2.00"), quantity=quantity)


class TestParseQuantity:

    @pytest.mark.parametrize(
        "text, expected",
        [("5", 5), (" 12 ", 12), ("+3", 3), ("-4", -4), ("007", 7)],
    )
    def test_integers(self, text, expected):
        assert parse_quantity(text) == expected

    @pytest.mark.parametrize("text", [None, "", "   ", "abc", "1.5", "1e3", "5 5", "--1"])
    def test_non_integers(self, text):
        assert parse_quantity(text) is None


class TestCheckQuantity:

    def test_blank_is_not_an_error(self):
        check = check_quantity("", _item(10))
        assert not check.has_error
        assert check.error_message is None
        assert check.quantity is None

    def test_garbage_is_invalid(self):
        check = check_quantity("lots", _item(10))
        assert check.has_error
        assert check.error_message == "Invalid quantity"

    @pytest.mark.parametrize("text", ["0", "-2"])
    def test_non_positive_is_invalid(self, text):
        check = check_quantity(text, _item(10))
        assert check.has_error
        assert check.error_message == "Invalid quantity"

    def test_above_stock_reports_available(self):
        check = check_quantity("11", _item(10))
        assert check.has_error
        assert check.error_message == "Insufficient stock. Available: 10"

    def test_within_stock_is_valid(self):
        check = check_quantity("10", _item(10))
        assert not check.has_error
        assert check.quantity == 10

    def test_unknown_item_skips_stock_check(self):
        check = check_quantity("999", None)
        assert not check.has_error


class TestValidateOrder:

    @pytest.mark.parametrize("stock", [0, 1, 2, 7, 50])
    def test_rejects_every_quantity_above_stock(self, stock):
        for requested in range(stock + 1, stock + 6):
            with pytest.raises(InsufficientStockError, match=f"Available: {stock}"):
                validate_order(str(requested), _item(stock))

    @pytest.mark.parametrize("stock", [1, 2, 7, 50])
    def test_accepts_every_quantity_within_stock(self, stock):
        for requested in range(1, stock + 1):
            item = _item(stock)
            assert validate_order(str(requested), item) == requested
            remaining = item.remove_stock(Quantity(requested)).quantity
            assert remaining == stock - requested
            assert remaining >= 0

    @pytest.mark.parametrize("text", ["", "  ", "x", "0", "-1", "2.0"])
    def test_invalid_text_rejected(self, text):
        with pytest.raises(InvalidQuantityError, match="Invalid quantity"):
            validate_order(text, _item(10))

    def test_zero_stock_rejects_positive_quantity(self):
        with pytest.raises(InsufficientStockError):
            validate_order("1", _item(0))


class TestOversizedQuantity:

    @pytest.mark.parametrize(
        "text",
        [
            "9" * 5000,
            "-" + "9" * 5000,
            str(MAX_QUANTITY + 1),
            "99999999999",
        ],
    )
    def test_parse_returns_none(self, text):
        assert parse_quantity(text) is None

    def test_leading_zeros_do_not_count_as_digits(self):
        assert parse_quantity("0" * 5000 + "12") == 12

    def test_largest_quantity_parses(self):
        assert parse_quantity(str(MAX_QUANTITY)) == MAX_QUANTITY

    @pytest.mark.parametrize("text", ["9" * 5000, "99999999999"])
    def test_check_reports_invalid_not_insufficient(self, text):
        check = check_quantity(text, _item(10))
        assert check.has_error
        assert check.error_message == "Invalid quantity"

    def test_validate_rejects_as_invalid(self):
        with pytest.raises(InvalidQuantityError, match="Invalid quantity"):
            validate_order("9" * 5000, _item(10))
