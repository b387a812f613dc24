# inventory_pro/models/product.py

"""Product records and the editable form data behind them."""

import math
from dataclasses import dataclass, field
from typing import Any

from inventory_pro.config.settings import Settings


def _integer(value: Any, key: str) -> int:
    try:
        return int(value)
    except OverflowError as exc:
        raise ValueError(f"{key} is not finite: {value!r}") from exc


def _count(value: Any, key: str) -> int:
    """Non-negative integer field of a stored record."""
    number = _integer(value, key)
    if number < 0:
        raise ValueError(f"{key} must be >= 0, got {number}")
    return number


def _amount(value: Any, key: str) -> float:
    """Finite, non-negative price field of a stored record."""
    number = float(value)
    if not math.isfinite(number) or number < 0:
        raise ValueError(f"{key} must be a finite amount >= 0, got {value!r}")
    return number


@dataclass(frozen=True)
class ProductFormData:
    """Every editable product field; ``id`` and ``created_at`` excluded."""

    name: str = ""
    sku: str = ""
    stock: int = 0
    buy_price: float = 0.0
    sell_price: float = 0.0
    low_stock_threshold: int = Settings.DEFAULT_LOW_STOCK_THRESHOLD
    images: tuple[str, ...] = field(default_factory=tuple)
    description: str = ""
    expiry_date: str = ""


@dataclass(frozen=True)
class Product:
    """A single inventory item.

    Optional text fields use ``""`` for "absent".  ``images`` holds inline
    ``data:`` URLs; the first one is the default display image.
    ``created_at`` is epoch milliseconds.
    """

    id: str
    name: str
    stock: int
    buy_price: float
    sell_price: float
    low_stock_threshold: int
    created_at: int
    sku: str = ""
    images: tuple[str, ...] = field(default_factory=tuple)
    description: str = ""
    expiry_date: str = ""

    @property
    def is_low_stock(self) -> bool:
        """Stock at or below the alert threshold."""
        return self.stock <= self.low_stock_threshold

    @classmethod
    def from_form(
        cls, product_id: str, created_at: int, form: ProductFormData,
    ) -> "Product":
        """Build a product from form data plus its store-assigned identity."""
        return cls(
            id=product_id,
            name=form.name,
            sku=form.sku,
            stock=max(0, int(form.stock)),
            buy_price=form.buy_price,
            sell_price=form.sell_price,
            low_stock_threshold=form.low_stock_threshold,
            images=tuple(form.images),
            description=form.description,
            expiry_date=form.expiry_date,
            created_at=created_at,
        )

    def form_data(self) -> ProductFormData:
        """Return the editable fields of this product."""
        return ProductFormData(
            name=self.name,
            sku=self.sku,
            stock=self.stock,
            buy_price=self.buy_price,
            sell_price=self.sell_price,
            low_stock_threshold=self.low_stock_threshold,
            images=self.images,
            description=self.description,
            expiry_date=self.expiry_date,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the persisted record shape (camelCase keys)."""
        return {
            "id": self.id,
            "name": self.name,
            "sku": self.sku,
            "stock": self.stock,
            "buyPrice": self.buy_price,
            "sellPrice": self.sell_price,
            "images": list(self.images),
            "expiryDate": self.expiry_date,
            "lowStockThreshold": self.low_stock_threshold,
            "description": self.description,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, row: dict[str, Any]) -> "Product":
        """Rebuild a product from a persisted record.

        Raises ``KeyError`` for a missing required key and ``TypeError`` or
        ``ValueError`` for values of the wrong shape, and ``ValueError`` for
        a blank name or a negative or non-finite number.
        """
        images = row.get("images") or []
        if not isinstance(images, list):
            raise TypeError(f"images must be a list, got {type(images)}")
        name = str(row["name"])
        if not name.strip():
            raise ValueError("product name is empty")
        return cls(
            id=str(row["id"]),
            name=name,
            sku=str(row.get("sku") or ""),
            stock=_count(row["stock"], "stock"),
            buy_price=_amount(row["buyPrice"], "buyPrice"),
            sell_price=_amount(row["sellPrice"], "sellPrice"),
            low_stock_threshold=_count(
                row["lowStockThreshold"], "lowStockThreshold",
            ),
            images=tuple(str(img) for img in images),
            description=str(row.get("description") or ""),
            expiry_date=str(row.get("expiryDate") or ""),
            created_at=_integer(row["createdAt"], "createdAt"),
        )
