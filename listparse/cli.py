"""CLI entry point for the list ingestion pipeline."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from .categorizer import WISHLIST_CATEGORIZER, Categorizer
from .config import load_config
from .display import format_items, items_to_json
from .models import ListType
from .pipeline import ListIngestPipeline
from .text import segment


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="listparse",
        description="Turn pasted shopping lists and recipe ingredients into list items",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to a TOML config file",
    )

    sub = parser.add_subparsers(dest="command")

    # parse
    parse_parser = sub.add_parser("parse", help="Parse pasted text into items")
    parse_parser.add_argument(
        "file", nargs="?", default="-", help="Input file (default: stdin)"
    )
    parse_parser.add_argument(
        "--list-type",
        choices=[t.value for t in ListType],
        default=None,
        help="Destination list",
    )
    parse_parser.add_argument("--json", action="store_true", help="Output JSON rows")
    parse_parser.add_argument(
        "--group", action="store_true", help="Group output by category"
    )
    parse_parser.add_argument(
        "--no-compounds",
        action="store_true",
        help="Keep compound phrases like 'salt and pepper' as one item",
    )

    # categorize
    cat_parser = sub.add_parser("categorize", help="Print the category of item names")
    cat_parser.add_argument("names", nargs="+", help="Item names")
    cat_parser.add_argument(
        "--list-type",
        choices=[t.value for t in ListType],
        default=None,
        help="Destination list (wishlist uses non-food categories)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    load_dotenv()
    try:
        config = load_config(args.config)
    except ValueError as e:
        print(f"Config error: {e}", file=sys.stderr)
        sys.exit(1)

    logging.basicConfig(
        level=config.logging.level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    categorizer = Categorizer().with_keywords(config.categories.keywords)

    match args.command:
        case "parse":
            _cmd_parse(config, categorizer, args)
        case "categorize":
            _cmd_categorize(config, categorizer, args)


def _read_input(file: str) -> str:
    if file == "-":
        return sys.stdin.read()
    path = Path(file)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {file}")
    return path.read_text(encoding="utf-8")


def _cmd_parse(config, categorizer: Categorizer, args) -> None:
    try:
        text = _read_input(args.file)
    except FileNotFoundError as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)

    list_type = args.list_type or config.pipeline.list_type
    pipeline = ListIngestPipeline(
        categorizer=categorizer,
        split_compounds=config.pipeline.split_compounds and not args.no_compounds,
    )
    items = pipeline.run(text, list_type)

    if args.json or config.output.format == "json":
        print(items_to_json(items, list_type))
    elif items:
        print(format_items(items, group=args.group or config.output.group))
    else:
        print("No items found.")

    # Segments that produced no item at all
    segments = segment(text)
    skipped = sum(1 for s in segments if not pipeline.parse_segment(s, list_type))
    if skipped:
        noun = "line was" if skipped == 1 else "lines were"
        print(f"{skipped} {noun} skipped", file=sys.stderr)


def _cmd_categorize(config, categorizer: Categorizer, args) -> None:
    list_type = ListType.coerce(args.list_type or config.pipeline.list_type)
    if list_type is ListType.WISHLIST:
        categorizer = WISHLIST_CATEGORIZER
    for name in args.names:
        print(f"{name}: {categorizer.categorize(name)}")


if __name__ == "__main__":
    main()
