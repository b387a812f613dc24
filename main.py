# main.py

"""Entry point for InventoryPro (TUI or headless commands)."""

import argparse
import asyncio
import logging
import sys

from inventory_pro.config.logging_config import setup_logging

logger = logging.getLogger("inventory_pro.main")


def _add_product_fields(
    parser: argparse.ArgumentParser, name_required: bool,
) -> None:
    """Attach the editable product options shared by add and update."""
    if name_required:
        parser.add_argument("name", help="Product name.")
    else:
        parser.add_argument("--name", default=None, help="Product name.")
    parser.add_argument("--sku", default=None, help="Optional SKU.")
    parser.add_argument(
        "--stock", type=int, default=None, help="Units on hand.",
    )
    parser.add_argument(
        "--buy", type=float, default=None, dest="buy_price",
        help="Buy price per unit.",
    )
    parser.add_argument(
        "--sell", type=float, default=None, dest="sell_price",
        help="Sell price per unit.",
    )
    parser.add_argument(
        "--threshold", type=int, default=None, dest="low_stock_threshold",
        help="Low-stock alert level (inclusive).",
    )
    parser.add_argument(
        "--expiry", default=None, dest="expiry_date",
        help="Expiry date (YYYY-MM-DD).",
    )
    parser.add_argument(
        "--description", default=None, help="Free-text description.",
    )
    parser.add_argument(
        "--image",
        action="append",
        default=None,
        dest="image_paths",
        help="Image file to attach (repeatable).",
    )


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="inventory_pro",
        description="Single-user inventory tracker.",
        epilog="Run without a command to launch the interactive TUI.",
    )
    parser.add_argument(
        "--data-file",
        default=None,
        dest="data_file",
        help="Storage file (default: data/local_storage.json).",
    )
    commands = parser.add_subparsers(dest="command")

    list_cmd = commands.add_parser("list", help="List products.")
    list_cmd.add_argument(
        "-s", "--search", default="", help="Name or SKU substring.",
    )
    list_cmd.add_argument(
        "--low-stock",
        action="store_true",
        default=False,
        dest="only_low_stock",
        help="Only products at or below their alert level.",
    )
    stats_cmd = commands.add_parser("stats", help="Show stock statistics.")
    for sub in (list_cmd, stats_cmd):
        sub.add_argument(
            "-f",
            "--format",
            choices=["json", "table"],
            default="json",
            dest="output_format",
            help="Output format (default: json).",
        )

    add_cmd = commands.add_parser("add", help="Add a product.")
    _add_product_fields(add_cmd, name_required=True)
    add_cmd.add_argument(
        "--generate",
        action="store_true",
        default=False,
        help="Write the description with the AI assistant.",
    )

    update_cmd = commands.add_parser(
        "update", help="Edit a product (unspecified fields are kept).",
    )
    update_cmd.add_argument("product_id")
    _add_product_fields(update_cmd, name_required=False)

    stock_cmd = commands.add_parser("set-stock", help="Set stock level.")
    stock_cmd.add_argument("product_id")
    stock_cmd.add_argument("stock", type=int)

    remove_cmd = commands.add_parser("remove", help="Delete a product.")
    remove_cmd.add_argument("product_id")
    remove_cmd.add_argument(
        "-y", "--yes",
        action="store_true",
        default=False,
        dest="assume_yes",
        help="Skip the confirmation prompt.",
    )

    describe_cmd = commands.add_parser(
        "describe", help="Generate a sales description.",
    )
    describe_cmd.add_argument("name")
    describe_cmd.add_argument(
        "--context", default="", help="Keywords for the prompt.",
    )

    advise_cmd = commands.add_parser(
        "advise", help="AI restocking recommendation for a product.",
    )
    advise_cmd.add_argument("product_id")
    advise_cmd.add_argument(
        "--trend", default="steady", dest="sales_trend",
        help="Recent sales trend, e.g. 'rising'.",
    )
    return parser


def _run_tui(data_file: str | None) -> None:
    """Launch the interactive Textual TUI."""
    from inventory_pro.cli.runner import build_store
    from inventory_pro.ui.app import InventoryApp

    try:
        app = InventoryApp(store=build_store(data_file))
        app.run()
    except Exception:
        logger.critical("Fatal error during TUI run", exc_info=True)
        raise
    finally:
        logger.info("InventoryPro TUI shutting down")


def _run_command(args: argparse.Namespace) -> int:
    """Dispatch a headless subcommand and return its exit code."""
    from inventory_pro.cli import runner
    from inventory_pro.models.product import ProductFormData

    if args.command == "describe":
        return asyncio.run(runner.describe(args.name, args.context))

    store = runner.open_store(args.data_file)

    if args.command == "list":
        return runner.list_products(
            store, args.search, args.only_low_stock, args.output_format,
        )
    if args.command == "stats":
        return runner.show_stats(store, args.output_format)
    if args.command == "set-stock":
        return runner.set_stock(store, args.product_id, args.stock)
    if args.command == "remove":
        return runner.remove_product(
            store, args.product_id, args.assume_yes,
        )
    if args.command == "advise":
        return asyncio.run(
            runner.advise(store, args.product_id, args.sales_trend)
        )

    if args.command == "add":
        base = ProductFormData()
    else:
        current = store.get(args.product_id)
        if current is None:
            logger.warning("Update for unknown product %s", args.product_id)
            sys.stderr.write(f"No product with id {args.product_id}\n")
            return 1
        base = current.form_data()

    try:
        form = runner.build_form(
            base,
            name=args.name,
            sku=args.sku,
            stock=args.stock,
            buy_price=args.buy_price,
            sell_price=args.sell_price,
            low_stock_threshold=args.low_stock_threshold,
            description=args.description,
            expiry_date=args.expiry_date,
            image_paths=args.image_paths,
        )
    except ValueError as exc:
        sys.stderr.write(f"Invalid product: {exc}\n")
        return 1

    if args.command == "add":
        return asyncio.run(runner.add_product(store, form, args.generate))
    return runner.update_product(store, args.product_id, form)


def main() -> None:
    """Route to the TUI (no command) or a headless command."""
    log_file = setup_logging()
    logger.info("InventoryPro starting, log file: %s", log_file)

    parser = _build_parser()
    args = parser.parse_args()

    if args.command is None:
        _run_tui(args.data_file)
    else:
        sys.exit(_run_command(args))


if __name__ == "__main__":
    main()
