"""Tests for the home view: item list and search."""

import pytest

from stockroom.application.list_items import HomeViewModel, SearchItemHandler
from stockroom.domain.exceptions import EntityNotFoundError, ValidationError
from stockroom.domain.model.item import Item
from stockroom.domain.model.value_objects import Money
from tests.fakes import FakeItemRepository


def _repo() -> FakeItemRepository:
    return FakeItemRepository([
        Item(id=1, name="Game", price=Money.of("100.00"), quantity=20),
        Item(id=2, name="Pen", price=Money.of("200.00"), quantity=30),
        Item(id=3, name="TV", price=Money.of("300.00"), quantity=50),
        Item(id=4, name="Pencil", price=Money.of("1.50"), quantity=0),
    ])


class TestSearchItem:

    def test_exact_name_found(self):
        dto = SearchItemHandler(_repo()).handle("TV")
        assert dto.id == 3
        assert dto.price == "$300.00"

    def test_case_insensitive(self):
        assert SearchItemHandler(_repo()).handle("game").id == 1

    def test_exact_match_beats_partial(self):
        # "Pen" is also a prefix of "Pencil"
        assert SearchItemHandler(_repo()).handle("pen").id == 2

    def test_partial_match(self):
        assert SearchItemHandler(_repo()).handle("cil").id == 4

    def test_absent_reports_not_found(self):
        with pytest.raises(EntityNotFoundError, match="Product not found"):
            SearchItemHandler(_repo()).handle("Laptop")

    def test_blank_query_rejected(self):
        with pytest.raises(ValidationError, match="required"):
            SearchItemHandler(_repo()).handle("   ")


class TestHomeViewModel:

    def test_items_ordered_by_name(self):
        home = HomeViewModel(_repo())
        assert [i.name for i in home.state.items] == ["Game", "Pen", "Pencil", "TV"]
        assert home.state.items[0].in_stock_label == "In stock: 20"

    def test_empty_inventory(self):
        home = HomeViewModel(FakeItemRepository())
        assert home.state.is_empty

    def test_list_follows_repository_changes(self):
        repo = _repo()
        home = HomeViewModel(repo)

        repo.update(repo.get_by_id(1).with_quantity(5))
        repo.delete(3)

        assert [(i.name, i.quantity) for i in home.state.items] == [
            ("Game", 5), ("Pen", 30), ("Pencil", 0),
        ]

    def test_close_unsubscribes(self):
        repo = _repo()
        home = HomeViewModel(repo)
        home.close()

        repo.delete(1)

        assert len(home.state.items) == 4
        assert not repo.has_subscribers()

    def test_search_delegates(self):
        assert HomeViewModel(_repo()).search("tv").id == 3
