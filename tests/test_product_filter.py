# tests/test_product_filter.py

"""Tests for ProductFilter search and low-stock filtering."""

import unittest

from inventory_pro.filters.product_filter import ProductFilter
from inventory_pro.models.filter_state import FilterState
from inventory_pro.models.product import Product


def _make_product(
    pid: str,
    name: str,
    sku: str = "",
    stock: int = 10,
    threshold: int = 5,
) -> Product:
    """Create a minimal Product for filtering."""
    return Product(
        id=pid,
        name=name,
        sku=sku,
        stock=stock,
        buy_price=1.0,
        sell_price=2.0,
        low_stock_threshold=threshold,
        created_at=0,
    )


class TestProductFilter(unittest.TestCase):
    """ProductFilter.apply behaviour."""

    def setUp(self) -> None:
        """A small mixed catalogue."""
        self.products = [
            _make_product("1", "Wireless Headphones", "AUDIO-WH1000", 12, 5),
            _make_product("2", "Vitamin C Serum", "SKIN-VITC-30", 3, 10),
            _make_product("3", "Phone Case", "", 0, 0),
        ]

    def test_empty_filter_is_identity(self) -> None:
        """No search and no toggle returns everything in order."""
        result = ProductFilter.apply(self.products, FilterState())
        self.assertEqual(result, self.products)

    def test_returns_new_list(self) -> None:
        """The input list is never returned or mutated."""
        original = list(self.products)
        result = ProductFilter.apply(self.products, FilterState())
        result.pop()
        self.assertIsNot(result, self.products)
        self.assertEqual(self.products, original)

    def test_search_name_case_insensitive(self) -> None:
        """Name matching ignores case."""
        result = ProductFilter.apply(
            self.products, FilterState(search="HEADPHONES"),
        )
        self.assertEqual([p.id for p in result], ["1"])

    def test_search_sku_only_match(self) -> None:
        """A SKU substring in different case finds only that product."""
        result = ProductFilter.apply(
            self.products, FilterState(search="vitc"),
        )
        self.assertEqual([p.id for p in result], ["2"])

    def test_search_substring_across_products(self) -> None:
        """A shared substring matches several products, order kept."""
        result = ProductFilter.apply(
            self.products, FilterState(search="ph"),
        )
        self.assertEqual([p.id for p in result], ["1", "3"])

    def test_search_no_match(self) -> None:
        """Unmatched search yields an empty list."""
        result = ProductFilter.apply(
            self.products, FilterState(search="zzz"),
        )
        self.assertEqual(result, [])

    def test_missing_sku_never_matches_text(self) -> None:
        """A product without SKU is matched on name only."""
        self.assertFalse(
            ProductFilter.matches(
                self.products[2], FilterState(search="audio"),
            )
        )

    def test_only_low_stock_inclusive(self) -> None:
        """Stock equal to the threshold counts as low."""
        products = self.products + [_make_product("4", "Edge", "", 5, 5)]
        result = ProductFilter.apply(
            products, FilterState(only_low_stock=True),
        )
        self.assertEqual([p.id for p in result], ["2", "3", "4"])

    def test_search_and_low_stock_combined(self) -> None:
        """Both conditions must hold."""
        result = ProductFilter.apply(
            self.products,
            FilterState(search="e", only_low_stock=True),
        )
        self.assertEqual([p.id for p in result], ["2", "3"])

    def test_stock_range_not_applied(self) -> None:
        """min/max stock fields are carried but ignored."""
        result = ProductFilter.apply(
            self.products, FilterState(min_stock=100, max_stock=200),
        )
        self.assertEqual(result, self.products)

    def test_empty_collection(self) -> None:
        """Filtering nothing returns nothing."""
        self.assertEqual(
            ProductFilter.apply([], FilterState(search="x")), [],
        )

    def test_special_characters_in_search(self) -> None:
        """Search is a plain substring test, not a pattern."""
        products = [_make_product("9", "Gel (50% off)")]
        result = ProductFilter.apply(products, FilterState(search="(50%"))
        self.assertEqual(len(result), 1)


if __name__ == "__main__":
    unittest.main()
