"""Command-line interface for worldreports."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import DatabaseSettings, load_settings
from .console import ReportConsole, build_catalog
from .database import ConnectionProvider, run_connectivity_check
from .exceptions import ConfigurationError, ResourceAcquisitionError

logger = logging.getLogger(__name__)

BANNER = "World Reports\n============="


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="worldreports",
        description="Run population reports against the world database.",
        epilog="Without --test-db or --exec an interactive console is started.",
    )
    parser.add_argument(
        "-t",
        "--test-db",
        action="store_true",
        help="Run database connectivity tests and exit.",
    )
    parser.add_argument(
        "--discover",
        action="store_true",
        help="Find report commands by scanning the reports package instead of the built-in list.",
    )
    parser.add_argument(
        "--database",
        type=Path,
        default=None,
        help="Path to the SQLite world database (overrides WORLD_DB_PATH).",
    )
    parser.add_argument(
        "--env-file",
        default=None,
        help="Load environment settings from this file instead of ./.env.",
    )
    parser.add_argument(
        "-c",
        "--exec",
        dest="lines",
        action="append",
        default=[],
        metavar="LINE",
        help="Run a console line and exit (repeatable).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log at DEBUG level.",
    )
    return parser


def _configure_logging(settings: DatabaseSettings, verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.getLevelName(settings.log_level)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _run_console(args: argparse.Namespace, provider: ConnectionProvider) -> int:
    catalog = build_catalog("discover" if args.discover else "explicit")
    try:
        connection = provider.acquire()
    except ResourceAcquisitionError as exc:
        sys.stderr.write(f"Cannot start the console: {exc}\n")
        return 1
    try:
        console = ReportConsole(catalog, connection)
        if args.lines:
            for line in args.lines:
                result = console.dispatch(line)
                if result is not None:
                    console.write(result)
                if not console.running:
                    break
            return 0
        sys.stdout.write(f"{BANNER}\nType 'help' to list reports, 'exit' to leave.\n")
        try:
            console.run()
        except KeyboardInterrupt:
            sys.stdout.write("\n")
        return 0
    finally:
        provider.release(connection)


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args, unknown = parser.parse_known_args(argv)
    if unknown:
        for arg in unknown:
            sys.stdout.write(f"WARNING: Unknown argument: {arg}\n")
        parser.print_usage(sys.stdout)

    try:
        settings = load_settings(args.env_file)
    except ConfigurationError as exc:
        sys.stderr.write(f"Configuration error: {exc}\n")
        raise SystemExit(1) from None
    if args.database is not None:
        settings.path = args.database
    _configure_logging(settings, args.verbose)
    provider = ConnectionProvider(settings)

    if args.test_db:
        sys.stdout.write("Testing database connectivity...\n")
        ok = run_connectivity_check(provider, sys.stdout)
        if ok:
            sys.stdout.write("\nAll systems operational.\n")
        else:
            sys.stdout.write("\nDatabase connectivity issues occurred.\n")
        raise SystemExit(0 if ok else 1)

    raise SystemExit(_run_console(args, provider))


__all__ = ["main"]
