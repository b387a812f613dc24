# inventory_pro/storage/product_storage.py

"""Saves and restores the product collection as one JSON slot."""

import json
import logging
from typing import Any, cast

from inventory_pro.config.settings import Settings
from inventory_pro.models.product import Product
from inventory_pro.storage.local_storage import LocalStorage

logger = logging.getLogger("inventory_pro.storage")


def serialize_products(products: list[Product]) -> str:
    """Encode the full collection as a JSON array of records."""
    return json.dumps(
        [p.to_dict() for p in products], ensure_ascii=False,
    )


def deserialize_products(text: str) -> list[Product]:
    """Decode a JSON array of records back into products.

    Raises ``ValueError`` (including ``json.JSONDecodeError``),
    ``KeyError`` or ``TypeError`` when the text is not a well-formed
    collection, including one that repeats a product id.
    """
    data: Any = json.loads(text)
    if not isinstance(data, list):
        raise ValueError(
            f"expected a JSON array, got {type(data).__name__}"
        )
    rows = cast(list[Any], data)
    products: list[Product] = []
    seen: set[str] = set()
    for row in rows:
        if not isinstance(row, dict):
            raise TypeError(
                f"expected a product object, got {type(row).__name__}"
            )
        product = Product.from_dict(cast(dict[str, Any], row))
        if product.id in seen:
            raise ValueError(f"duplicate product id '{product.id}'")
        seen.add(product.id)
        products.append(product)
    return products


class ProductStorage:
    """Persistence adapter for the inventory collection."""

    def __init__(
        self,
        storage: LocalStorage | None = None,
        key: str = Settings.STORAGE_KEY,
    ) -> None:
        self.storage = storage or LocalStorage()
        self.key = key

    def save(self, products: list[Product]) -> bool:
        """Write the whole collection.  Returns ``False`` on failure."""
        try:
            self.storage.set_item(self.key, serialize_products(products))
        except (OSError, TypeError, ValueError) as exc:
            logger.error(
                "Failed to persist %d products: %s",
                len(products),
                exc,
                exc_info=True,
            )
            return False
        logger.debug("Persisted %d products", len(products))
        return True

    def load(self) -> list[Product] | None:
        """Read the stored collection.

        Returns ``None`` when nothing is stored or the stored text cannot
        be decoded, which tells the caller to seed demonstration data.
        """
        text = self.storage.get_item(self.key)
        if text is None:
            logger.info("No stored inventory under '%s'", self.key)
            return None
        try:
            products = deserialize_products(text)
        except (ValueError, KeyError, TypeError) as exc:
            logger.warning(
                "Stored inventory under '%s' is corrupt: %s", self.key, exc,
            )
            return None
        logger.info("Loaded %d products from storage", len(products))
        return products
