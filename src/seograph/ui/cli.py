from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING, cast

from dotenv import load_dotenv

from seograph.app import build_collection_view, build_seo_tags
from seograph.config import configure_logging

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Resolve SEO tags from JSON:API documents")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    tags = subparsers.add_parser("tags", help="Print the head tags of a page as JSON")
    tags.add_argument(
        "document",
        type=str,
        help="Path to the JSON:API document ('-' reads stdin)",
    )
    tags.add_argument(
        "--item-id",
        type=str,
        help="Item the page renders; omit for site-level pages",
    )
    tags.add_argument(
        "--locale",
        type=str,
        help="Request locale (defaults to config, then the site's first locale)",
    )

    items = subparsers.add_parser("items", help="List the items of a content type")
    items.add_argument(
        "document",
        type=str,
        help="Path to the JSON:API document ('-' reads stdin)",
    )
    items.add_argument(
        "--type",
        dest="api_key",
        type=str,
        required=True,
        help="Api key of the content type (e.g. article)",
    )

    return parser.parse_args(list(argv))


def _read_document(source: str) -> dict[str, object]:
    try:
        raw = sys.stdin.read() if source == "-" else Path(source).read_text(encoding="utf-8")
    except OSError as exc:
        raise ValueError(f"Cannot read document {source}: {exc}") from exc
    try:
        document = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Document {source} is not valid JSON: {exc}") from exc
    if not isinstance(document, dict):
        raise ValueError(f"Document {source} must be a JSON object")
    return cast(dict[str, object], document)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args: argparse.Namespace
    try:
        parsed_args = _parse_args(args_list)
        configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.WARNING)
        document = _read_document(parsed_args.document)
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        if parsed_args.command == "tags":
            tags = build_seo_tags(
                document,
                item_id=parsed_args.item_id,
                locale=parsed_args.locale,
            )
            output: object = [tag.as_dict() for tag in tags]
        elif parsed_args.command == "items":
            view = build_collection_view(document)
            output = [
                {"id": item.id, "title": item.title}
                for item in view.items_of_type(parsed_args.api_key)
            ]
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except Exception:
        log.exception("Fatal error while resolving tags")
        sys.exit(1)

    sys.stdout.write(json.dumps(output, indent=2, ensure_ascii=False) + "\n")


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
