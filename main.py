#!/usr/bin/env python3
"""nyaa-search: CLI search of the Nyaa RSS feed."""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from nyaa_search import SearchOrchestrator, SearchRequest, create_orchestrator
from nyaa_search.config import AppConfig, ConfigManager
from nyaa_search.models import ReleaseRecord


def print_results(results: list[ReleaseRecord], show_magnet: bool = False):
    """Display search results in a formatted list."""
    for i, r in enumerate(results, 1):
        mark = " [✓]" if r.verified else ""
        print(f"[{i}] {r.title} ({r.size_formatted}) - {r.seeders}↑ {r.leechers}↓{mark}")
        if show_magnet:
            print(f"    {SearchOrchestrator.get_magnet(r)}")


def build_request(args) -> SearchRequest:
    """Turn parsed arguments into a search request."""
    return SearchRequest(
        titles=(" ".join(args.title),),
        episode=getattr(args, "episode", None),
        resolution=args.resolution,
        exclusions=tuple(args.exclude or ()),
    )


def cmd_search(args) -> int:
    """Handle the single, batch and movie commands."""
    config = ConfigManager(args.config).load()
    orchestrator = create_orchestrator(config)
    request = build_request(args)

    search = getattr(orchestrator, args.command)
    results = asyncio.run(search(request))[: args.number]

    if args.json:
        data = [{**r.to_dict(), "magnet": orchestrator.get_magnet(r)} for r in results]
        print(json.dumps(data, indent=2, ensure_ascii=False))
        return 0

    if not results:
        print(f"No results for '{request.primary_title}'")
        return 0

    print_results(results, show_magnet=args.magnet)
    return 0


def cmd_config(args) -> int:
    """Handle the config command - show or initialize the configuration."""
    manager = ConfigManager(args.config)

    if args.init:
        if manager.config_path.exists() and not args.force:
            print(f"{manager.config_path} already exists (use --force to overwrite)")
            return 1
        manager.save(AppConfig())
        print(f"Wrote default configuration to {manager.config_path}")
        return 0

    print(f"# {manager.config_path}")
    print(json.dumps(manager.load().to_dict(), indent=2, ensure_ascii=False))
    return 0


def _add_search_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("title", nargs="+", help="Title to search for")
    parser.add_argument(
        "-r", "--resolution", type=int, help="Resolution, e.g. 1080"
    )
    parser.add_argument(
        "-x", "--exclude", action="append", metavar="TERM",
        help="Drop results containing TERM (repeatable)",
    )
    parser.add_argument(
        "-n", "--number", type=int, default=20, help="Number of results (default: 20)"
    )
    parser.add_argument(
        "-m", "--magnet", action="store_true", help="Print the magnet link under each result"
    )
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.set_defaults(func=cmd_search)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="nyaa-search: search the Nyaa RSS feed",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-c", "--config", type=Path, help="Path to config.yaml"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    single_parser = subparsers.add_parser("single", help="Search for a single episode")
    _add_search_options(single_parser)
    single_parser.add_argument(
        "-e", "--episode", type=int, required=True, help="Episode number"
    )

    batch_parser = subparsers.add_parser("batch", help="Search for batch releases")
    _add_search_options(batch_parser)

    movie_parser = subparsers.add_parser("movie", help="Search for movies")
    _add_search_options(movie_parser)

    config_parser = subparsers.add_parser("config", help="Show or create the configuration")
    config_parser.add_argument(
        "--init", action="store_true", help="Write the default configuration"
    )
    config_parser.add_argument(
        "--force", action="store_true", help="Overwrite an existing file with --init"
    )
    config_parser.set_defaults(func=cmd_config)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
