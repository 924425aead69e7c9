"""Command-line entry point: ``drizzle-setup init [-y] [-d DIR]``."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from rich.markup import escape
from rich.panel import Panel

from drizzle_setup import __version__
from drizzle_setup.config import InvocationOptions, SetupConfig
from drizzle_setup.pipeline import SetupPipeline
from drizzle_setup.utils import console, print_error


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="drizzle-setup",
        description="CLI tool for adding Drizzle ORM with PostgreSQL to Next.js applications",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  drizzle-setup init\n"
            "  drizzle-setup init --yes --dir ./my-next-app\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command")
    init = subparsers.add_parser(
        "init",
        help="Initialize Drizzle ORM with PostgreSQL in your Next.js application",
    )
    init.add_argument(
        "-y", "--yes",
        action="store_true",
        help="Skip confirmation prompts",
    )
    init.add_argument(
        "-d", "--dir",
        default=None,
        metavar="DIRECTORY",
        help="Specify the Next.js project directory (default: current directory)",
    )
    init.add_argument(
        "--no-prompt-url",
        dest="prompt_url",
        action="store_false",
        help="Do not ask for a database connection string",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse *argv*, run the requested command and return the exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    console.print(
        Panel(
            "[bold]Next.js Drizzle Setup[/bold]",
            border_style="cyan",
            expand=False,
        )
    )

    options = InvocationOptions(
        skip_confirmation=args.yes,
        target_directory=Path(args.dir) if args.dir else None,
        collect_connection_string=args.prompt_url,
    )
    try:
        config = SetupConfig.from_env()
    except ValueError as exc:
        print_error(f"Invalid configuration: {escape(str(exc))}")
        return 1
    pipeline = SetupPipeline(options, config)
    outcome = asyncio.run(pipeline.run())
    return outcome.exit_code


def run() -> None:
    """Console-script wrapper around :func:`main`."""
    sys.exit(main())


if __name__ == "__main__":
    run()
