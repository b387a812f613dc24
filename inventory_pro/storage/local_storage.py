# inventory_pro/storage/local_storage.py

"""File-backed key/value slots with ``localStorage`` semantics."""

import json
import logging
import os
from pathlib import Path
from typing import Any, cast

from inventory_pro.config.settings import Settings

logger = logging.getLogger("inventory_pro.storage")


class LocalStorage:
    """Named text slots persisted together in one JSON object file.

    Reads and writes are synchronous.  Every ``set_item`` rewrites the
    whole file, so the file always mirrors the last completed write.
    """

    def __init__(self, path: Path | None = None) -> None:
        self.path: Path = path or Settings.STORAGE_PATH
        logger.debug("LocalStorage bound to %s", self.path)

    def _read_all(self) -> dict[str, str]:
        """Load every slot; an absent or unreadable file reads as empty."""
        if not self.path.exists():
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                data: Any = json.load(f)
        except (json.JSONDecodeError, OSError, UnicodeDecodeError) as exc:
            logger.warning(
                "Ignoring unreadable storage file %s: %s", self.path, exc,
            )
            return {}
        if not isinstance(data, dict):
            logger.warning(
                "Ignoring storage file %s: top level is %s, not an object",
                self.path,
                type(data).__name__,
            )
            return {}
        slots = cast(dict[str, Any], data)
        return {k: v for k, v in slots.items() if isinstance(v, str)}

    def _write_all(self, slots: dict[str, str]) -> None:
        """Atomically replace the storage file with *slots*."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(slots, f, ensure_ascii=False)
        os.replace(tmp_path, self.path)

    def get_item(self, key: str) -> str | None:
        """Return the text stored under *key*, or ``None``."""
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        """Store *value* under *key*.  Raises ``OSError`` on write failure."""
        slots = self._read_all()
        slots[key] = value
        self._write_all(slots)
        logger.debug(
            "Wrote slot '%s' (%d chars) to %s", key, len(value), self.path,
        )

    def remove_item(self, key: str) -> None:
        """Delete *key* if present."""
        slots = self._read_all()
        if slots.pop(key, None) is not None:
            self._write_all(slots)
            logger.debug("Removed slot '%s'", key)

    def keys(self) -> list[str]:
        """Names of all stored slots."""
        return list(self._read_all())
