"""Unit tests for the Catalog."""

import pytest

from ims.domain.catalog import Catalog
from ims.domain.exceptions import EntityNotFoundError
from ims.domain.model.product import Product


def _catalog(*names: str) -> Catalog:
    return Catalog([Product(name=n, price=1.0, quantity=1) for n in names])


class TestCatalogRegister:

    def test_register_appends(self):
        catalog = Catalog()
        catalog.register(Product("Pen", 1.5, 100))
        assert len(catalog) == 1
        assert "Pen" in catalog

    def test_duplicate_names_coexist(self):
        catalog = Catalog()
        catalog.register(Product("Pen", 1.0, 1))
        catalog.register(Product("Pen", 2.0, 2))
        assert len(catalog) == 2


class TestCatalogFind:

    def test_find_existing(self):
        catalog = _catalog("Pen", "Ink")
        assert catalog.find("Ink").name == "Ink"

    def test_find_returns_first_duplicate(self):
        catalog = Catalog([Product("Pen", 1.0, 1), Product("Pen", 2.0, 2)])
        assert catalog.find("Pen").price == 1.0

    def test_find_is_case_sensitive(self):
        catalog = _catalog("Pen")
        with pytest.raises(EntityNotFoundError, match="Product not found"):
            catalog.find("pen")

    def test_find_missing(self):
        with pytest.raises(EntityNotFoundError):
            Catalog().find("Pen")


class TestCatalogRemove:

    def test_remove_returns_snapshot(self):
        catalog = Catalog([Product("Pen", 1.5, 100)])
        removed = catalog.remove("Pen")
        assert removed == Product("Pen", 1.5, 100)
        assert len(catalog) == 0

    def test_remove_only_first_duplicate(self):
        catalog = Catalog([Product("Pen", 1.0, 1), Product("Pen", 2.0, 2)])
        removed = catalog.remove("Pen")
        assert removed.price == 1.0
        assert catalog.find("Pen").price == 2.0

    def test_remove_missing_leaves_catalog_alone(self):
        catalog = _catalog("Pen")
        with pytest.raises(EntityNotFoundError):
            catalog.remove("Ink")
        assert len(catalog) == 1


class TestCatalogListSorted:

    def test_sorted_by_name(self):
        catalog = _catalog("Pencil", "Eraser", "Notebook")
        assert [p.name for p in catalog.list_sorted()] == ["Eraser", "Notebook", "Pencil"]

    def test_sort_is_stable_for_equal_names(self):
        catalog = Catalog([
            Product("Pen", 3.0, 1),
            Product("Ink", 1.0, 1),
            Product("Pen", 1.0, 1),
        ])
        assert [p.price for p in catalog.list_sorted()] == [1.0, 3.0, 1.0]

    def test_sorting_does_not_change_arrival_order(self):
        catalog = _catalog("B", "A")
        catalog.list_sorted()
        catalog.register(Product("A", 9.0, 9))
        # first "A" registered is still the one found
        assert catalog.find("A").price == 1.0

    def test_empty(self):
        assert Catalog().list_sorted() == []
