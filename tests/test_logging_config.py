# tests/test_logging_config.py

"""Tests for the per-run logging configuration."""

import logging
import tempfile
import unittest
from pathlib import Path

from inventory_pro.config.logging_config import (
    setup_logging,
    shutdown_logging,
)


class TestLoggingConfig(unittest.TestCase):
    """Verify logging setup behaviour."""

    def setUp(self) -> None:
        """Start each test without handlers on the project logger."""
        shutdown_logging()
        self.addCleanup(shutdown_logging)
        self.logs_dir = Path(tempfile.mkdtemp()) / "logs"

    def _root(self) -> logging.Logger:
        return logging.getLogger("inventory_pro")

    def test_setup_creates_log_file(self) -> None:
        """setup_logging returns a path that exists on disk."""
        log_path = setup_logging(self.logs_dir)
        self.assertTrue(log_path.exists())
        self.assertEqual(log_path.parent, self.logs_dir)

    def test_default_dir_from_settings(self) -> None:
        """Without an argument the configured logs dir is used."""
        log_path = setup_logging()
        self.assertEqual(log_path.parent.name, "logs")

    def test_log_file_naming_convention(self) -> None:
        """Log file name matches run_YYYYMMDD_HHMMSS.log format."""
        log_path = setup_logging(self.logs_dir)
        self.assertRegex(log_path.name, r"^run_\d{8}_\d{6}\.log$")

    def test_handler_levels(self) -> None:
        """File handler at DEBUG, console at WARNING."""
        setup_logging(self.logs_dir)
        handlers = self._root().handlers
        file_handlers = [
            h for h in handlers if isinstance(h, logging.FileHandler)
        ]
        console_handlers = [
            h for h in handlers
            if isinstance(h, logging.StreamHandler)
            and not isinstance(h, logging.FileHandler)
        ]
        self.assertEqual(len(file_handlers), 1)
        self.assertEqual(file_handlers[0].level, logging.DEBUG)
        self.assertEqual(len(console_handlers), 1)
        self.assertEqual(console_handlers[0].level, logging.WARNING)

    def test_custom_console_level(self) -> None:
        """console_level controls the stderr handler."""
        setup_logging(self.logs_dir, console_level=logging.ERROR)
        console = [
            h for h in self._root().handlers
            if not isinstance(h, logging.FileHandler)
        ]
        self.assertEqual(console[0].level, logging.ERROR)

    def test_repeated_calls_reuse_handlers(self) -> None:
        """A second call adds nothing and returns the same file."""
        first = setup_logging(self.logs_dir)
        count = len(self._root().handlers)
        second = setup_logging(self.logs_dir)
        self.assertEqual(len(self._root().handlers), count)
        self.assertEqual(first, second)

    def test_child_loggers_reach_file(self) -> None:
        """Module loggers propagate into the run log."""
        log_path = setup_logging(self.logs_dir)
        logging.getLogger("inventory_pro.store").info("stock moved")
        for handler in self._root().handlers:
            handler.flush()
        self.assertIn("stock moved", log_path.read_text(encoding="utf-8"))

    def test_shutdown_removes_handlers(self) -> None:
        """shutdown_logging detaches everything."""
        setup_logging(self.logs_dir)
        shutdown_logging()
        self.assertEqual(self._root().handlers, [])


if __name__ == "__main__":
    unittest.main()
