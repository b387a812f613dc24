# inventory_pro/filters/stock_stats.py

"""Stock counters and inventory valuation."""

from inventory_pro.models.inventory_stats import InventoryStats, StockState
from inventory_pro.models.product import Product


def classify_stock(product: Product) -> StockState:
    """Place a product in exactly one of out / low / healthy."""
    if product.stock == 0:
        return StockState.OUT
    if product.stock <= product.low_stock_threshold:
        return StockState.LOW
    return StockState.HEALTHY


def compute_stats(products: list[Product]) -> InventoryStats:
    """Count stock states and value the inventory in one pass."""
    counts = {state: 0 for state in StockState}
    buy_value = 0.0
    sell_value = 0.0

    for p in products:
        counts[classify_stock(p)] += 1
        buy_value += p.buy_price * p.stock
        sell_value += p.sell_price * p.stock

    return InventoryStats(
        total_products=len(products),
        out_of_stock=counts[StockState.OUT],
        low_stock=counts[StockState.LOW],
        in_stock=counts[StockState.LOW] + counts[StockState.HEALTHY],
        healthy_stock=counts[StockState.HEALTHY],
        total_buy_value=buy_value,
        total_sell_value=sell_value,
    )
