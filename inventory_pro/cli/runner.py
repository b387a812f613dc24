# inventory_pro/cli/runner.py

"""Headless inventory commands sharing the TUI's store and filters."""

import dataclasses
import json
import logging
import sys
from datetime import date
from pathlib import Path

from rich.console import Console
from rich.prompt import Confirm
from rich.table import Table

from inventory_pro.config.settings import Settings
from inventory_pro.filters.product_filter import ProductFilter
from inventory_pro.filters.stock_stats import compute_stats
from inventory_pro.models.filter_state import FilterState
from inventory_pro.models.images import encode_image_files
from inventory_pro.models.product import Product, ProductFormData
from inventory_pro.services.description_assistant import (
    DescriptionAssistant,
)
from inventory_pro.services.inventory_store import InventoryStore
from inventory_pro.storage.local_storage import LocalStorage
from inventory_pro.storage.product_storage import ProductStorage
from inventory_pro.ui.formatting import (
    format_expiry,
    format_money,
    status_label,
    status_style,
)

logger = logging.getLogger("inventory_pro.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)


def build_store(data_file: str | None = None) -> InventoryStore:
    """Create a store on the default or given storage file."""
    path = Path(data_file) if data_file else Settings.STORAGE_PATH
    return InventoryStore(ProductStorage(LocalStorage(path)))


def open_store(data_file: str | None = None) -> InventoryStore:
    """Create a store and load (or seed) its collection."""
    store = build_store(data_file)
    store.initialize()
    return store


def _print_products(products: list[Product]) -> None:
    """Render a Rich table of products to stdout."""
    table = Table(
        title="Inventory",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("ID", style="dim", overflow="fold")
    table.add_column("Name", max_width=40)
    table.add_column("SKU", style="magenta")
    table.add_column("Stock", justify="right")
    table.add_column("Low Alert", justify="right")
    table.add_column("Buy", justify="right")
    table.add_column("Sell", justify="right", style="green")
    table.add_column("Expiry", justify="center")
    table.add_column("Status")

    for p in products:
        style = status_style(p)
        table.add_row(
            p.id,
            p.name,
            p.sku or "—",
            f"[{style}]{p.stock}[/{style}]",
            str(p.low_stock_threshold),
            format_money(p.buy_price),
            format_money(p.sell_price),
            format_expiry(p.expiry_date),
            f"[{style}]{status_label(p)}[/{style}]",
        )

    Console().print(table)


def _dump_json(payload: object) -> None:
    json.dump(payload, sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")


def list_products(
    store: InventoryStore,
    search: str = "",
    only_low_stock: bool = False,
    output_format: str = "json",
) -> int:
    """Print the filtered product view."""
    state = FilterState(search=search, only_low_stock=only_low_stock)
    products = ProductFilter.apply(store.products, state)

    if not products:
        _err.print("[yellow]No products found.[/yellow]")
    if output_format == "table":
        _print_products(products)
    else:
        _dump_json([p.to_dict() for p in products])
    return 0


def show_stats(store: InventoryStore, output_format: str = "json") -> int:
    """Print stock counters and inventory valuation."""
    stats = compute_stats(store.products)
    rows: list[tuple[str, int | float]] = [
        ("Total Products", stats.total_products),
        ("Healthy Stock", stats.healthy_stock),
        ("In Stock", stats.in_stock),
        ("Low Stock", stats.low_stock),
        ("Out of Stock", stats.out_of_stock),
        ("Buy Value", stats.total_buy_value),
        ("Sell Value", stats.total_sell_value),
        ("Potential Profit", stats.potential_profit),
    ]

    if output_format == "table":
        table = Table(title="Inventory Stats", title_style="bold cyan")
        table.add_column("Metric", style="bold")
        table.add_column("Value", justify="right")
        for label, value in rows:
            shown = (
                format_money(value)
                if isinstance(value, float)
                else str(value)
            )
            table.add_row(label, shown)
        Console().print(table)
    else:
        _dump_json({
            "totalProducts": stats.total_products,
            "healthyStock": stats.healthy_stock,
            "inStock": stats.in_stock,
            "lowStock": stats.low_stock,
            "outOfStock": stats.out_of_stock,
            "totalBuyValue": stats.total_buy_value,
            "totalSellValue": stats.total_sell_value,
            "potentialProfit": stats.potential_profit,
        })
    return 0


def build_form(
    base: ProductFormData,
    name: str | None = None,
    sku: str | None = None,
    stock: int | None = None,
    buy_price: float | None = None,
    sell_price: float | None = None,
    low_stock_threshold: int | None = None,
    description: str | None = None,
    expiry_date: str | None = None,
    image_paths: list[str] | None = None,
) -> ProductFormData:
    """Overlay the given command-line values on *base*.

    Raises ``ValueError`` for negative numbers, an empty name, a
    malformed expiry date or an unreadable image.
    """
    for label, value in (
        ("stock", stock),
        ("buy price", buy_price),
        ("sell price", sell_price),
        ("low stock threshold", low_stock_threshold),
    ):
        if value is not None and value < 0:
            raise ValueError(f"{label} cannot be negative")

    resolved_name = base.name if name is None else name.strip()
    if not resolved_name:
        raise ValueError("product name is required")

    if expiry_date:
        try:
            date.fromisoformat(expiry_date)
        except ValueError as exc:
            raise ValueError(
                f"expiry date must be YYYY-MM-DD, got '{expiry_date}'"
            ) from exc

    try:
        new_images = encode_image_files(
            [Path(p).expanduser() for p in image_paths or []]
        )
    except OSError as exc:
        raise ValueError(f"cannot read image: {exc}") from exc

    return ProductFormData(
        name=resolved_name,
        sku=base.sku if sku is None else sku,
        stock=base.stock if stock is None else stock,
        buy_price=base.buy_price if buy_price is None else buy_price,
        sell_price=base.sell_price if sell_price is None else sell_price,
        low_stock_threshold=(
            base.low_stock_threshold
            if low_stock_threshold is None
            else low_stock_threshold
        ),
        images=base.images + tuple(new_images),
        description=base.description if description is None else description,
        expiry_date=base.expiry_date if expiry_date is None else expiry_date,
    )


async def add_product(
    store: InventoryStore,
    form: ProductFormData,
    generate: bool = False,
    assistant: DescriptionAssistant | None = None,
) -> int:
    """Create a product, optionally with an AI-written description."""
    if generate:
        helper = assistant or DescriptionAssistant()
        text = await helper.generate(
            form.name,
            f"Price: {form.sell_price:g} {Settings.CURRENCY_CODE}",
        )
        form = dataclasses.replace(form, description=text)

    product = store.add(form)
    _err.print(f"[green]✓ Added {product.name} ({product.id})[/green]")
    _report_save(store)
    _dump_json(product.to_dict())
    return 0


def update_product(
    store: InventoryStore, product_id: str, form: ProductFormData,
) -> int:
    """Replace the editable fields of an existing product."""
    product = store.update(product_id, form)
    if product is None:
        _err.print(f"[red]No product with id {product_id}[/red]")
        return 1
    _err.print(f"[green]✓ Updated {product.name}[/green]")
    _report_save(store)
    _dump_json(product.to_dict())
    return 0


def set_stock(store: InventoryStore, product_id: str, stock: int) -> int:
    """Set a product's stock level (negative values clamp to zero)."""
    product = store.adjust_stock(product_id, stock)
    if product is None:
        _err.print(f"[red]No product with id {product_id}[/red]")
        return 1
    _err.print(
        f"[green]✓ {product.name}: stock {product.stock}[/green]"
    )
    _report_save(store)
    return 0


def remove_product(
    store: InventoryStore, product_id: str, assume_yes: bool = False,
) -> int:
    """Delete a product after confirmation."""
    product = store.get(product_id)
    if product is None:
        _err.print(f"[red]No product with id {product_id}[/red]")
        return 1
    if not assume_yes and not Confirm.ask(
        f"Remove '{product.name}' from inventory?", console=_err,
    ):
        _err.print("[dim]Kept.[/dim]")
        return 0
    store.remove(product_id)
    _err.print(f"[green]✓ Removed {product.name}[/green]")
    _report_save(store)
    return 0


async def describe(
    name: str,
    context: str = "",
    assistant: DescriptionAssistant | None = None,
) -> int:
    """Print a generated sales description."""
    helper = assistant or DescriptionAssistant()
    sys.stdout.write(await helper.generate(name, context) + "\n")
    return 0


async def advise(
    store: InventoryStore,
    product_id: str,
    sales_trend: str,
    assistant: DescriptionAssistant | None = None,
) -> int:
    """Print a restocking recommendation for a product."""
    product = store.get(product_id)
    if product is None:
        _err.print(f"[red]No product with id {product_id}[/red]")
        return 1
    helper = assistant or DescriptionAssistant()
    text = await helper.analyze_stock_action(
        product.name, product.stock, sales_trend,
    )
    sys.stdout.write(text + "\n")
    return 0


def _report_save(store: InventoryStore) -> None:
    if not store.last_save_ok:
        _err.print(
            "[red]Warning: change not saved to disk (see log)[/red]"
        )
