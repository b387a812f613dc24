# inventory_pro/services/inventory_store.py

"""Owner of the product collection; every mutation is persisted."""

import dataclasses
import logging
import time
import uuid
from collections.abc import Callable

from inventory_pro.models.product import Product, ProductFormData
from inventory_pro.storage.product_storage import ProductStorage

logger = logging.getLogger("inventory_pro.store")


def _new_id() -> str:
    return str(uuid.uuid4())


def demo_products(created_at: int) -> list[Product]:
    """The two sample products seeded into an empty install."""
    return [
        Product(
            id="1",
            name="Wireless Noise Cancelling Headphones",
            sku="AUDIO-WH1000",
            stock=12,
            buy_price=15000.0,
            sell_price=22500.0,
            low_stock_threshold=5,
            description=(
                "Premium over-ear headphones with industry-leading noise "
                "cancellation and 30-hour battery life."
            ),
            created_at=created_at,
        ),
        Product(
            id="2",
            name="Vitamin C Serum 30ml",
            sku="SKIN-VITC-30",
            stock=3,
            buy_price=850.0,
            sell_price=1200.0,
            low_stock_threshold=10,
            description="Brightening serum for all skin types.",
            expiry_date="2025-12-31",
            created_at=created_at,
        ),
    ]


class InventoryStore:
    """Single writer of the in-memory collection.

    Products are immutable; mutations swap in replacement records and
    then re-save the whole collection.  Operations on an unknown id do
    nothing and report it through their return value.
    """

    def __init__(
        self,
        storage: ProductStorage | None = None,
        clock: Callable[[], float] = time.time,
        id_factory: Callable[[], str] = _new_id,
    ) -> None:
        self.storage = storage or ProductStorage()
        self._clock = clock
        self._id_factory = id_factory
        self._products: list[Product] = []
        self.last_save_ok: bool = True

    # ── Reading ──────────────────────────────────────────

    @property
    def products(self) -> list[Product]:
        """Snapshot of the collection, newest first."""
        return list(self._products)

    def get(self, product_id: str) -> Product | None:
        """Look up a product by id."""
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def __len__(self) -> int:
        return len(self._products)

    # ── Lifecycle ────────────────────────────────────────

    def initialize(self) -> list[Product]:
        """Load the persisted collection, seeding demo data on first run."""
        loaded = self.storage.load()
        if loaded is None:
            self._products = demo_products(self._now_ms())
            logger.info(
                "Seeded %d demonstration products", len(self._products),
            )
            self._persist()
        else:
            self._products = loaded
        return self.products

    def add(self, form: ProductFormData) -> Product:
        """Create a product from *form* and put it at the front."""
        product = Product.from_form(self._id_factory(), self._now_ms(), form)
        self._products.insert(0, product)
        logger.info("Added product %s (%s)", product.id, product.name)
        self._persist()
        return product

    def update(
        self, product_id: str, form: ProductFormData,
    ) -> Product | None:
        """Replace every editable field of a product."""
        current = self.get(product_id)
        if current is None:
            logger.debug("Update ignored, unknown product %s", product_id)
            return None
        updated = Product.from_form(current.id, current.created_at, form)
        self._replace(updated)
        logger.info("Updated product %s (%s)", updated.id, updated.name)
        return updated

    def adjust_stock(
        self, product_id: str, new_stock: int,
    ) -> Product | None:
        """Set the stock level, clamped at zero."""
        current = self.get(product_id)
        if current is None:
            logger.debug(
                "Stock change ignored, unknown product %s", product_id,
            )
            return None
        updated = dataclasses.replace(current, stock=max(0, int(new_stock)))
        self._replace(updated)
        logger.info(
            "Stock for %s: %d -> %d",
            product_id,
            current.stock,
            updated.stock,
        )
        return updated

    def change_stock(self, product_id: str, delta: int) -> Product | None:
        """Move the stock level by *delta* units."""
        current = self.get(product_id)
        if current is None:
            logger.debug(
                "Stock change ignored, unknown product %s", product_id,
            )
            return None
        return self.adjust_stock(product_id, current.stock + delta)

    def remove(self, product_id: str) -> bool:
        """Delete a product.  Returns ``False`` if it was not present."""
        remaining = [p for p in self._products if p.id != product_id]
        if len(remaining) == len(self._products):
            logger.debug("Remove ignored, unknown product %s", product_id)
            return False
        self._products = remaining
        logger.info("Removed product %s", product_id)
        self._persist()
        return True

    # ── Internals ────────────────────────────────────────

    def _replace(self, updated: Product) -> None:
        self._products = [
            updated if p.id == updated.id else p for p in self._products
        ]
        self._persist()

    def _persist(self) -> None:
        self.last_save_ok = self.storage.save(self._products)
        if not self.last_save_ok:
            logger.warning(
                "Inventory change kept in memory only; save failed",
            )

    def _now_ms(self) -> int:
        return int(self._clock() * 1000)
