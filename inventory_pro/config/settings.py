# inventory_pro/config/settings.py

"""Central configuration for the InventoryPro tracker."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Central configuration for the InventoryPro tracker."""

    # --- Inventory ---
    STORAGE_KEY: str = "inventory_products"  # Slot holding the collection
    DEFAULT_LOW_STOCK_THRESHOLD: int = 5
    CURRENCY_SYMBOL: str = "৳"
    CURRENCY_CODE: str = "BDT"

    # --- Description assistant ---
    GEMINI_API_KEY: str = (
        os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY") or ""
    )
    GEMINI_MODEL: str = "gemini-2.5-flash"
    GEMINI_ENDPOINT: str = (
        "https://generativelanguage.googleapis.com/v1beta/models"
        "/{model}:generateContent"
    )
    REQUEST_TIMEOUT: int = 30           # Seconds before a request times out

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    DATA_DIR: Path = BASE_DIR / "data"
    STORAGE_PATH: Path = DATA_DIR / "local_storage.json"
    LOGS_DIR: Path = BASE_DIR / "logs"
