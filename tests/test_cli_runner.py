# tests/test_cli_runner.py

"""Tests for the headless CLI commands."""

import asyncio
import io
import json
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

from inventory_pro.cli import runner
from inventory_pro.models.product import ProductFormData
from inventory_pro.services.inventory_store import InventoryStore


class _CliTestCase(unittest.TestCase):
    """Store on a temp file plus stdout capture."""

    def setUp(self) -> None:
        """Open a freshly seeded store."""
        self.tmp_dir = tempfile.mkdtemp()
        self.data_file = str(Path(self.tmp_dir) / "storage.json")
        self.store: InventoryStore = runner.open_store(self.data_file)

    def _capture(self, func: Any, *args: Any, **kwargs: Any) -> tuple[int, str]:
        buf = io.StringIO()
        with redirect_stdout(buf):
            code = func(*args, **kwargs)
        return code, buf.getvalue()


class TestListAndStats(_CliTestCase):
    """list / stats output."""

    def test_open_store_seeds(self) -> None:
        """A new data file starts with the demo products."""
        self.assertEqual(len(self.store), 2)
        self.assertTrue(Path(self.data_file).exists())

    def test_list_json_all(self) -> None:
        """JSON listing contains every product in store order."""
        code, out = self._capture(runner.list_products, self.store)
        self.assertEqual(code, 0)
        data: list[dict[str, Any]] = json.loads(out)
        self.assertEqual([d["id"] for d in data], ["1", "2"])

    def test_list_low_stock(self) -> None:
        """--low-stock keeps only the serum."""
        _code, out = self._capture(
            runner.list_products, self.store, "", True,
        )
        self.assertEqual([d["id"] for d in json.loads(out)], ["2"])

    def test_list_search_sku(self) -> None:
        """Search matches SKUs case-insensitively."""
        _code, out = self._capture(
            runner.list_products, self.store, "audio-wh",
        )
        self.assertEqual([d["id"] for d in json.loads(out)], ["1"])

    def test_list_table_format(self) -> None:
        """Table output renders product names."""
        code, out = self._capture(
            runner.list_products, self.store, "", False, "table",
        )
        self.assertEqual(code, 0)
        self.assertIn("Inventory", out)

    def test_stats_json(self) -> None:
        """Stats JSON reports counters and totals."""
        _code, out = self._capture(runner.show_stats, self.store)
        stats = json.loads(out)
        self.assertEqual(stats["totalProducts"], 2)
        self.assertEqual(stats["lowStock"], 1)
        self.assertEqual(stats["healthyStock"], 1)
        self.assertEqual(stats["totalSellValue"], 273600.0)

    def test_stats_table(self) -> None:
        """Stats table mentions the valuation rows."""
        _code, out = self._capture(runner.show_stats, self.store, "table")
        self.assertIn("Sell Value", out)


class TestMutations(_CliTestCase):
    """add / update / set-stock / remove."""

    def test_build_form_overlays_values(self) -> None:
        """Only given values replace the base form."""
        base = ProductFormData(name="Old", sku="S1", stock=4)
        form = runner.build_form(base, stock=9)
        self.assertEqual(form.name, "Old")
        self.assertEqual(form.sku, "S1")
        self.assertEqual(form.stock, 9)

    def test_build_form_rejects_bad_input(self) -> None:
        """Negative numbers, blank names and bad dates are refused."""
        base = ProductFormData(name="Ok")
        with self.assertRaises(ValueError):
            runner.build_form(base, stock=-1)
        with self.assertRaises(ValueError):
            runner.build_form(ProductFormData())
        with self.assertRaises(ValueError):
            runner.build_form(base, expiry_date="31/12/2025")
        with self.assertRaises(ValueError):
            runner.build_form(base, image_paths=["/no/such/file.png"])

    def test_build_form_encodes_images(self) -> None:
        """Image files are appended as data URLs."""
        img = Path(self.tmp_dir) / "pic.png"
        img.write_bytes(b"\x89PNG")
        form = runner.build_form(
            ProductFormData(name="Pic", images=("data:old",)),
            image_paths=[str(img)],
        )
        self.assertEqual(form.images[0], "data:old")
        self.assertTrue(form.images[1].startswith("data:image/png;base64,"))

    def test_add_product(self) -> None:
        """add prints the new record and persists it."""
        buf = io.StringIO()
        with redirect_stdout(buf):
            code = _run(runner.add_product(
                self.store, ProductFormData(name="Mug", stock=2),
            ))
        self.assertEqual(code, 0)
        created = json.loads(buf.getvalue())
        self.assertEqual(created["name"], "Mug")
        reopened = runner.open_store(self.data_file)
        self.assertEqual(reopened.products[0].name, "Mug")

    def test_add_product_with_generated_description(self) -> None:
        """--generate fills the description from the assistant."""
        assistant = MagicMock()
        assistant.generate = AsyncMock(return_value="A mug you will love.")
        buf = io.StringIO()
        with redirect_stdout(buf):
            _run(runner.add_product(
                self.store,
                ProductFormData(name="Mug", sell_price=250.0),
                generate=True,
                assistant=assistant,
            ))
        assistant.generate.assert_awaited_once_with(
            "Mug", "Price: 250 BDT",
        )
        self.assertEqual(
            self.store.products[0].description, "A mug you will love.",
        )

    def test_update_product(self) -> None:
        """update replaces fields on an existing product."""
        base = self.store.get("1")
        assert base is not None
        form = runner.build_form(base.form_data(), name="Headset")
        code, _out = self._capture(
            runner.update_product, self.store, "1", form,
        )
        self.assertEqual(code, 0)
        updated = self.store.get("1")
        assert updated is not None
        self.assertEqual(updated.name, "Headset")
        self.assertEqual(updated.sku, "AUDIO-WH1000")

    def test_update_unknown(self) -> None:
        """Unknown ids exit with 1."""
        code, _out = self._capture(
            runner.update_product, self.store, "zzz",
            ProductFormData(name="X"),
        )
        self.assertEqual(code, 1)

    def test_set_stock_clamps(self) -> None:
        """Negative stock requests clamp at zero."""
        code = runner.set_stock(self.store, "2", -4)
        self.assertEqual(code, 0)
        product = self.store.get("2")
        assert product is not None
        self.assertEqual(product.stock, 0)

    def test_set_stock_unknown(self) -> None:
        """Unknown ids exit with 1."""
        self.assertEqual(runner.set_stock(self.store, "zzz", 1), 1)

    def test_remove_with_yes(self) -> None:
        """--yes skips confirmation."""
        self.assertEqual(runner.remove_product(self.store, "1", True), 0)
        self.assertIsNone(self.store.get("1"))

    @patch("inventory_pro.cli.runner.Confirm.ask", return_value=False)
    def test_remove_declined(self, mock_ask: MagicMock) -> None:
        """Declining the prompt keeps the product."""
        self.assertEqual(runner.remove_product(self.store, "1"), 0)
        mock_ask.assert_called_once()
        self.assertIsNotNone(self.store.get("1"))

    @patch("inventory_pro.cli.runner.Confirm.ask", return_value=True)
    def test_remove_confirmed(self, _mock_ask: MagicMock) -> None:
        """Confirming the prompt removes the product."""
        runner.remove_product(self.store, "2")
        self.assertIsNone(self.store.get("2"))

    def test_remove_unknown(self) -> None:
        """Unknown ids exit with 1."""
        self.assertEqual(runner.remove_product(self.store, "zzz", True), 1)


class TestAssistantCommands(_CliTestCase):
    """describe / advise."""

    def test_describe_without_key(self) -> None:
        """Without an API key the fixed fallback text is printed."""
        buf = io.StringIO()
        with redirect_stdout(buf):
            code = _run(runner.describe("Mug"))
        self.assertEqual(code, 0)
        self.assertIn("Missing API Key", buf.getvalue())

    def test_advise_uses_product_stock(self) -> None:
        """advise passes the product's name and stock to the assistant."""
        assistant = MagicMock()
        assistant.analyze_stock_action = AsyncMock(return_value="Reorder.")
        buf = io.StringIO()
        with redirect_stdout(buf):
            code = _run(runner.advise(self.store, "2", "rising", assistant))
        self.assertEqual(code, 0)
        assistant.analyze_stock_action.assert_awaited_once_with(
            "Vitamin C Serum 30ml", 3, "rising",
        )
        self.assertIn("Reorder.", buf.getvalue())

    def test_advise_unknown(self) -> None:
        """Unknown ids exit with 1."""
        self.assertEqual(_run(runner.advise(self.store, "zzz", "flat")), 1)


def _run(coro: Any) -> Any:
    return asyncio.run(coro)


if __name__ == "__main__":
    unittest.main()
