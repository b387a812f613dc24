# inventory_pro/ui/app.py

"""Terminal UI for the InventoryPro tracker."""

import dataclasses
import logging
from typing import cast

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.widgets import (
    Checkbox,
    DataTable,
    Footer,
    Header,
    Input,
    Static,
)

from inventory_pro.filters.product_filter import ProductFilter
from inventory_pro.filters.stock_stats import compute_stats
from inventory_pro.models.filter_state import FilterState
from inventory_pro.models.inventory_stats import InventoryStats
from inventory_pro.models.product import Product, ProductFormData
from inventory_pro.services.description_assistant import (
    DescriptionAssistant,
)
from inventory_pro.services.inventory_store import InventoryStore
from inventory_pro.ui.formatting import (
    format_expiry,
    format_money,
    status_label,
    status_style,
)
from inventory_pro.ui.screens import ConfirmScreen, ProductFormScreen

logger = logging.getLogger("inventory_pro.ui")


def render_stats(stats: InventoryStats) -> str:
    """One-line dashboard of counters and valuation."""
    return (
        f"📦 Total {stats.total_products}  "
        f"✅ Healthy {stats.healthy_stock}  "
        f"🟢 In stock {stats.in_stock}  "
        f"⚠️  Low {stats.low_stock}  "
        f"❌ Out {stats.out_of_stock}  │  "
        f"Buy:{format_money(stats.total_buy_value)} | "
        f"Sell:{format_money(stats.total_sell_value)}"
    )


class InventoryApp(App[object]):
    """Terminal UI for the InventoryPro tracker."""

    CSS_PATH = "styles.css"
    TITLE = "InventoryPro"
    SUB_TITLE = "Modern Inventory For Sales Reps"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("a", "add_product", "Add"),
        Binding("e", "edit_product", "Edit"),
        Binding("d", "delete_product", "Delete"),
        Binding("plus", "increment_stock", "+1"),
        Binding("minus", "decrement_stock", "-1"),
        Binding("l", "toggle_low_stock", "Low Stock"),
        Binding("c", "clear_filters", "Clear"),
    ]

    def __init__(
        self,
        store: InventoryStore | None = None,
        assistant: DescriptionAssistant | None = None,
    ) -> None:
        super().__init__()
        self.store = store or InventoryStore()
        self.assistant = assistant or DescriptionAssistant()
        self.filter_state = FilterState()
        self.visible: list[Product] = []

    def compose(self) -> ComposeResult:
        """Build the widget tree for the TUI."""
        yield Header()
        yield Container(
            Horizontal(
                Input(
                    placeholder="Search products by name or SKU...",
                    id="search_input",
                ),
                Checkbox("Low stock only", value=False, id="low_stock_toggle"),
                id="filter_bar",
            ),
            Static("", id="stats"),
            Static("Ready", id="status"),
            cast(
                DataTable[str | Text],
                DataTable(
                    id="products_table",
                    zebra_stripes=True,
                    cursor_type="row",
                ),
            ),
            id="main_container",
        )
        yield Footer()

    def on_mount(self) -> None:
        """Load inventory and configure the table."""
        table = self._table()
        table.add_columns(
            "Name", "SKU", "Stock", "Low Alert",
            "Buy", "Sell", "Expiry", "Status",
        )
        self.store.initialize()
        self.refresh_view()
        table.focus()

    # ── Rendering ────────────────────────────────────────

    def _table(self) -> DataTable[str | Text]:
        return cast(
            DataTable[str | Text],
            self.query_one("#products_table", DataTable),
        )

    def refresh_view(self) -> None:
        """Recompute the filtered view and stats, then redraw."""
        products = self.store.products
        self.visible = ProductFilter.apply(products, self.filter_state)
        stats = compute_stats(products)

        self.query_one("#stats", Static).update(render_stats(stats))
        self._populate_table()

        status = self.query_one("#status", Static)
        if not self.visible:
            status.update(
                "No products found. Try adjusting your filters."
                if self.filter_state.is_active
                else "Your inventory is empty. Press 'a' to add a product."
            )
        else:
            status.update(
                f"Showing {len(self.visible)} of {len(products)} products"
            )

    def _after_change(self) -> None:
        """Redraw after a mutation and surface a failed save."""
        self.refresh_view()
        if not self.store.last_save_ok:
            self.notify(
                "Could not save inventory to disk", severity="error",
            )

    def _populate_table(self) -> None:
        table = self._table()
        cursor = table.cursor_row
        table.clear()
        for p in self.visible:
            table.add_row(
                p.name[:48],
                p.sku or "—",
                Text(str(p.stock), style=status_style(p)),
                str(p.low_stock_threshold),
                format_money(p.buy_price),
                format_money(p.sell_price),
                format_expiry(p.expiry_date),
                Text(status_label(p), style=status_style(p)),
                key=p.id,
            )
        if self.visible:
            table.move_cursor(row=min(cursor, len(self.visible) - 1))

    def selected_product(self) -> Product | None:
        """Product under the table cursor, if any."""
        row = self._table().cursor_row
        if 0 <= row < len(self.visible):
            return self.visible[row]
        return None

    # ── Filters ──────────────────────────────────────────

    def on_input_changed(self, event: Input.Changed) -> None:
        """Live search as the user types."""
        if event.input.id == "search_input":
            self.filter_state = dataclasses.replace(
                self.filter_state, search=event.value,
            )
            self.refresh_view()

    def on_checkbox_changed(self, event: Checkbox.Changed) -> None:
        """Apply the low-stock toggle."""
        if event.checkbox.id == "low_stock_toggle":
            self.filter_state = dataclasses.replace(
                self.filter_state, only_low_stock=event.value,
            )
            self.refresh_view()

    def action_toggle_low_stock(self) -> None:
        """Flip the low-stock-only filter."""
        toggle = self.query_one("#low_stock_toggle", Checkbox)
        toggle.value = not toggle.value

    def action_clear_filters(self) -> None:
        """Reset search and the low-stock toggle."""
        self.query_one("#search_input", Input).value = ""
        self.query_one("#low_stock_toggle", Checkbox).value = False
        self.filter_state = FilterState()
        self.refresh_view()

    # ── Stock controls ───────────────────────────────────

    def action_increment_stock(self) -> None:
        """Add one unit to the selected product."""
        self._change_selected_stock(1)

    def action_decrement_stock(self) -> None:
        """Remove one unit from the selected product."""
        self._change_selected_stock(-1)

    def _change_selected_stock(self, delta: int) -> None:
        product = self.selected_product()
        if product is None:
            return
        self.store.change_stock(product.id, delta)
        self._after_change()

    # ── Add / edit / delete ──────────────────────────────

    def action_add_product(self) -> None:
        """Open the form for a new product."""
        self.push_screen(
            ProductFormScreen(self.assistant), self._on_product_created,
        )

    def _on_product_created(self, form: ProductFormData | None) -> None:
        if form is None:
            return
        product = self.store.add(form)
        self._after_change()
        self.notify(f"Added {product.name}")

    def action_edit_product(self) -> None:
        """Open the form pre-filled with the selected product."""
        product = self.selected_product()
        if product is None:
            self.notify("Select a product to edit", severity="warning")
            return

        def _on_saved(form: ProductFormData | None) -> None:
            if form is None:
                return
            if self.store.update(product.id, form) is None:
                self.notify("Product no longer exists", severity="error")
            self._after_change()

        self.push_screen(
            ProductFormScreen(self.assistant, product), _on_saved,
        )

    def action_delete_product(self) -> None:
        """Ask for confirmation, then remove the selected product."""
        product = self.selected_product()
        if product is None:
            return

        def _on_confirmed(confirmed: bool | None) -> None:
            self.delete_confirmed(product.id, bool(confirmed))

        self.push_screen(
            ConfirmScreen(
                f"Remove '{product.name}' from inventory?"
            ),
            _on_confirmed,
        )

    def delete_confirmed(self, product_id: str, confirmed: bool) -> None:
        """Remove *product_id* once the user has agreed."""
        if not confirmed:
            return
        if self.store.remove(product_id):
            self.notify("Product removed")
        self._after_change()
