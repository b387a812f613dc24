# inventory_pro/ui/screens.py

"""Modal screens: product add/edit form and delete confirmation."""

import logging
from datetime import date
from pathlib import Path

from textual import work
from textual.app import ComposeResult
from textual.containers import Grid, Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, Static, TextArea

from inventory_pro.config.settings import Settings
from inventory_pro.models.images import encode_image_files
from inventory_pro.models.product import Product, ProductFormData
from inventory_pro.services.description_assistant import (
    DescriptionAssistant,
)

logger = logging.getLogger("inventory_pro.ui")


class FormError(ValueError):
    """Raised when form input cannot become product data."""


def parse_amount(text: str) -> float:
    """Lenient non-negative number: blank or garbage reads as zero."""
    try:
        value = float(text.strip() or 0)
    except ValueError:
        return 0.0
    return max(0.0, value)


def parse_form_fields(
    fields: dict[str, str],
    images: tuple[str, ...] = (),
) -> ProductFormData:
    """Turn raw form text into validated :class:`ProductFormData`.

    ``fields["images"]`` may hold comma-separated image file paths; they
    are encoded and appended after *images*.
    """
    name = fields.get("name", "").strip()
    if not name:
        raise FormError("Product name is required")

    expiry = fields.get("expiry_date", "").strip()
    if expiry:
        try:
            date.fromisoformat(expiry)
        except ValueError as exc:
            raise FormError(
                f"Expiry date must be YYYY-MM-DD, got '{expiry}'"
            ) from exc

    paths = [
        Path(p.strip()).expanduser()
        for p in fields.get("images", "").split(",")
        if p.strip()
    ]
    try:
        new_images = encode_image_files(paths)
    except OSError as exc:
        raise FormError(f"Cannot read image: {exc}") from exc

    return ProductFormData(
        name=name,
        sku=fields.get("sku", "").strip(),
        stock=int(parse_amount(fields.get("stock", ""))),
        buy_price=parse_amount(fields.get("buy_price", "")),
        sell_price=parse_amount(fields.get("sell_price", "")),
        low_stock_threshold=int(
            parse_amount(fields.get("low_stock_threshold", ""))
        ),
        images=tuple(images) + tuple(new_images),
        description=fields.get("description", "").strip(),
        expiry_date=expiry,
    )


def _number_text(value: float) -> str:
    return f"{value:g}"


class ProductFormScreen(ModalScreen[ProductFormData | None]):
    """Add or edit a product.  Dismisses with the form data or ``None``."""

    BINDINGS = [("escape", "cancel", "Cancel")]

    def __init__(
        self,
        assistant: DescriptionAssistant,
        product: Product | None = None,
    ) -> None:
        super().__init__()
        self.assistant = assistant
        self.product = product
        self.form = (
            product.form_data() if product is not None else ProductFormData()
        )

    def compose(self) -> ComposeResult:
        """Lay out the form fields."""
        form = self.form
        title = "Edit Product" if self.product else "Add New Product"
        yield Vertical(
            Static(title, id="form_title"),
            Label("Product Name *"),
            Input(
                value=form.name,
                placeholder="e.g. Wireless Headphones",
                id="name_input",
            ),
            Grid(
                Label("SKU (Optional)"),
                Label("Expiry Date (Optional)"),
                Input(value=form.sku, placeholder="INV-001", id="sku_input"),
                Input(
                    value=form.expiry_date,
                    placeholder="YYYY-MM-DD",
                    id="expiry_input",
                ),
                Label("Stock *"),
                Label("Low Alert *"),
                Input(
                    value=str(form.stock), type="integer", id="stock_input",
                ),
                Input(
                    value=str(form.low_stock_threshold),
                    type="integer",
                    id="threshold_input",
                ),
                Label(f"Buy Price ({Settings.CURRENCY_SYMBOL})"),
                Label(f"Sell Price ({Settings.CURRENCY_SYMBOL})"),
                Input(
                    value=_number_text(form.buy_price),
                    type="number",
                    id="buy_input",
                ),
                Input(
                    value=_number_text(form.sell_price),
                    type="number",
                    id="sell_input",
                ),
                id="form_grid",
            ),
            Horizontal(
                Label("Description"),
                Button("✨ Generate", id="generate_btn"),
                id="description_bar",
            ),
            TextArea(form.description, id="description_input"),
            Label(f"Images: {len(form.images)} attached"),
            Input(
                placeholder="Add image files (comma-separated paths)",
                id="images_input",
            ),
            Horizontal(
                Button("Cancel", id="cancel_btn"),
                Button("Save Product", variant="primary", id="save_btn"),
                id="form_actions",
            ),
            id="product_form",
        )

    def collect_fields(self) -> dict[str, str]:
        """Read the raw text of every field."""
        return {
            "name": self.query_one("#name_input", Input).value,
            "sku": self.query_one("#sku_input", Input).value,
            "expiry_date": self.query_one("#expiry_input", Input).value,
            "stock": self.query_one("#stock_input", Input).value,
            "low_stock_threshold": self.query_one(
                "#threshold_input", Input
            ).value,
            "buy_price": self.query_one("#buy_input", Input).value,
            "sell_price": self.query_one("#sell_input", Input).value,
            "description": self.query_one(
                "#description_input", TextArea
            ).text,
            "images": self.query_one("#images_input", Input).value,
        }

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Route the form buttons."""
        if event.button.id == "save_btn":
            self.action_save()
        elif event.button.id == "cancel_btn":
            self.action_cancel()
        elif event.button.id == "generate_btn":
            self.generate_description()

    def action_save(self) -> None:
        """Validate and dismiss with the parsed form data."""
        try:
            data = parse_form_fields(self.collect_fields(), self.form.images)
        except FormError as exc:
            self.notify(str(exc), severity="warning")
            return
        self.dismiss(data)

    def action_cancel(self) -> None:
        """Close without saving."""
        self.dismiss(None)

    @work(exclusive=True, group="describe")
    async def generate_description(self) -> None:
        """Ask the assistant for copy and drop it into the description."""
        name = self.query_one("#name_input", Input).value.strip()
        if not name:
            self.notify("Enter a product name first", severity="warning")
            return
        price = parse_amount(self.query_one("#sell_input", Input).value)
        button = self.query_one("#generate_btn", Button)
        button.disabled = True
        try:
            text = await self.assistant.generate(
                name, f"Price: {price:g} {Settings.CURRENCY_CODE}",
            )
        finally:
            if self.is_attached:
                button.disabled = False
        if not self.is_attached:
            logger.debug("Form closed, discarding generated description")
            return
        self.query_one("#description_input", TextArea).load_text(text)


class ConfirmScreen(ModalScreen[bool]):
    """Yes/no question; dismisses with ``True`` only on confirmation."""

    BINDINGS = [
        ("y", "confirm", "Yes"),
        ("n,escape", "cancel", "No"),
    ]

    def __init__(self, message: str) -> None:
        super().__init__()
        self.message = message

    def compose(self) -> ComposeResult:
        """Question text and the two buttons."""
        yield Vertical(
            Static(self.message, id="confirm_message"),
            Horizontal(
                Button("Remove", variant="error", id="confirm_yes"),
                Button("Keep", id="confirm_no"),
                id="confirm_actions",
            ),
            id="confirm_dialog",
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Dismiss with the chosen answer."""
        self.dismiss(event.button.id == "confirm_yes")

    def action_confirm(self) -> None:
        """Keyboard confirmation."""
        self.dismiss(True)

    def action_cancel(self) -> None:
        """Keyboard refusal."""
        self.dismiss(False)
