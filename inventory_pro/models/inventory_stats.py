# inventory_pro/models/inventory_stats.py

"""Aggregate counters and totals derived from the product collection."""

from dataclasses import dataclass
from enum import Enum


class StockState(Enum):
    """Mutually exclusive stock classification of a single product."""

    OUT = "out"
    LOW = "low"
    HEALTHY = "healthy"


@dataclass(frozen=True)
class InventoryStats:
    """Derived view of the collection; recomputed, never stored.

    ``in_stock`` overlaps ``low_stock`` and ``healthy_stock``.
    """

    total_products: int = 0
    out_of_stock: int = 0
    low_stock: int = 0
    in_stock: int = 0
    healthy_stock: int = 0
    total_buy_value: float = 0.0
    total_sell_value: float = 0.0

    @property
    def potential_profit(self) -> float:
        """Sell-side value minus buy-side value of everything on hand."""
        return self.total_sell_value - self.total_buy_value
