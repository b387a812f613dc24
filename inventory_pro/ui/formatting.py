# inventory_pro/ui/formatting.py

"""Display helpers shared by the TUI and the CLI."""

from datetime import date

from inventory_pro.config.settings import Settings
from inventory_pro.filters.stock_stats import classify_stock
from inventory_pro.models.inventory_stats import StockState
from inventory_pro.models.product import Product

STATUS_LABELS: dict[StockState, str] = {
    StockState.OUT: "Out of stock",
    StockState.LOW: "Low stock",
    StockState.HEALTHY: "OK",
}

STATUS_STYLES: dict[StockState, str] = {
    StockState.OUT: "bold red",
    StockState.LOW: "yellow",
    StockState.HEALTHY: "green",
}


def format_money(amount: float) -> str:
    """``৳22,500`` style amount; decimals only when there are any."""
    if float(amount).is_integer():
        return f"{Settings.CURRENCY_SYMBOL}{amount:,.0f}"
    return f"{Settings.CURRENCY_SYMBOL}{amount:,.2f}"


def format_expiry(expiry_date: str) -> str:
    """Render an ISO expiry date, or a dash when the product never expires."""
    if not expiry_date:
        return "—"
    try:
        return date.fromisoformat(expiry_date).strftime("%d %b %Y")
    except ValueError:
        return expiry_date


def status_label(product: Product) -> str:
    """Human-readable stock state."""
    return STATUS_LABELS[classify_stock(product)]


def status_style(product: Product) -> str:
    """Rich style matching the stock state."""
    return STATUS_STYLES[classify_stock(product)]
