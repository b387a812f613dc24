# tests/conftest.py

"""Shared pytest fixtures for all InventoryPro tests."""

from collections.abc import Generator
from pathlib import Path

import pytest

from inventory_pro.config.settings import Settings


@pytest.fixture(autouse=True)
def isolated_settings(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
) -> Generator[None, None, None]:
    """Point storage and logs at a temp dir and drop any real API key."""
    monkeypatch.setattr(Settings, "DATA_DIR", tmp_path / "data")
    monkeypatch.setattr(
        Settings, "STORAGE_PATH", tmp_path / "data" / "local_storage.json",
    )
    monkeypatch.setattr(Settings, "LOGS_DIR", tmp_path / "logs")
    monkeypatch.setattr(Settings, "GEMINI_API_KEY", "")
    yield
