"""Command-line interface for the documentation symbol crawler."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from .cli_config import CONFIG_ENV_FILE, load_config
from .config import CrawlerSettings
from .output import format_elisp, format_json, report_seen_kinds
from .traversal import CrawlResult


def _load_config() -> None:
    load_config(config_env_file=CONFIG_ENV_FILE, cwd=Path.cwd(), load_env=load_dotenv)


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="symbol-crawl",
        description=(
            "Crawl the Swift standard library and Foundation documentation "
            "and emit the symbol names as Emacs Lisp constants."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
  # Full crawl, Emacs Lisp to stdout
  symbol-crawl > swift-mode-standard-types.el

  # Write to a file, keep caches elsewhere
  symbol-crawl -o swift-mode-standard-types.el --cache-dir /tmp/pages --json-cache-dir /tmp/json

  # Crawl a single subtree and print JSON
  symbol-crawl --root https://developer.apple.com/documentation/swift/array --json
""",
    )

    parser.add_argument(
        "-o",
        "--output",
        type=str,
        default=None,
        help="Output file (default: stdout)",
    )
    parser.add_argument(
        "--root",
        action="append",
        dest="roots",
        default=None,
        help="Root URL to start from (repeatable; replaces the default roots)",
    )
    parser.add_argument(
        "--cache-dir",
        type=str,
        default=None,
        help="Directory for cached pages (default: cache)",
    )
    parser.add_argument(
        "--json-cache-dir",
        type=str,
        default=None,
        help="Directory for cached documentation JSON (default: cache_json)",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=None,
        help="Seconds to wait after every network request (default: 5)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        dest="json_output",
        help="Output as JSON instead of Emacs Lisp",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def _build_settings(args: argparse.Namespace) -> CrawlerSettings:
    settings = CrawlerSettings.from_env()
    if args.roots:
        settings.root_urls = list(args.roots)
    if args.cache_dir:
        settings.cache_dir = args.cache_dir
    if args.json_cache_dir:
        settings.json_cache_dir = args.json_cache_dir
    if args.delay is not None:
        settings.delay = max(0.0, args.delay)
    return settings


def _write_result(result: CrawlResult, args: argparse.Namespace, settings: CrawlerSettings) -> None:
    if args.json_output:
        text = format_json(result.symbols)
    else:
        text = format_elisp(result.symbols, settings.namespaces)

    if args.output:
        path = Path(args.output)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        logging.info("Wrote %s", path)
    else:
        sys.stdout.write(text)
        if not text.endswith("\n"):
            sys.stdout.write("\n")


async def _run_async(args: argparse.Namespace) -> int:
    from . import crawl_symbols_async

    settings = _build_settings(args)
    logging.info(
        "Starting crawl from %d root(s) (cache=%s, json cache=%s, delay=%.1fs)",
        len(settings.root_urls),
        settings.cache_dir,
        settings.json_cache_dir,
        settings.delay,
    )
    result = await crawl_symbols_async(settings)

    report_seen_kinds(result.seen_kinds)

    if result.errors:
        logging.warning("%d page(s) could not be processed", len(result.errors))

    _write_result(result, args, settings)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point for the symbol-crawl command."""
    args = _parse_args(argv)
    _setup_logging(args.verbose)
    _load_config()

    try:
        return asyncio.run(_run_async(args))
    except KeyboardInterrupt:
        logging.info("Interrupted")
        return 130
    except Exception as exc:
        logging.error("Error: %s", exc)
        if args.verbose:
            logging.exception("Full traceback:")
        return 1


if __name__ == "__main__":
    sys.exit(main())
