# inventory_pro/models/filter_state.py

"""Filter settings controlling which products a view shows."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FilterState:
    """Search text plus the low-stock toggle.

    ``min_stock`` / ``max_stock`` are carried for callers that collect a
    range, but the product filter does not apply them.
    """

    search: str = ""
    only_low_stock: bool = False
    min_stock: int | None = None
    max_stock: int | None = None

    @property
    def is_active(self) -> bool:
        """True when search text or the low-stock toggle narrows the view."""
        return bool(self.search) or self.only_low_stock
