# inventory_pro/filters/product_filter.py

"""Search and low-stock filtering over the product collection."""

import logging

from inventory_pro.models.filter_state import FilterState
from inventory_pro.models.product import Product

logger = logging.getLogger("inventory_pro.filters")


class ProductFilter:
    """Derive the visible product list from a filter state."""

    @staticmethod
    def matches(product: Product, state: FilterState) -> bool:
        """Return whether *product* passes both the search and the toggle.

        Search is a case-insensitive substring test against name or SKU.
        """
        needle = state.search.lower()
        matches_search = (
            needle in product.name.lower()
            or (bool(product.sku) and needle in product.sku.lower())
        )
        matches_low_stock = (
            product.is_low_stock if state.only_low_stock else True
        )
        return matches_search and matches_low_stock

    @staticmethod
    def apply(
        products: list[Product],
        state: FilterState,
    ) -> list[Product]:
        """Return a new list with the matching products, order preserved."""
        kept = [p for p in products if ProductFilter.matches(p, state)]
        if state.is_active:
            logger.debug(
                "Filter search=%r low_stock=%s kept %d of %d",
                state.search,
                state.only_low_stock,
                len(kept),
                len(products),
            )
        return kept
