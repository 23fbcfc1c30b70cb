"""spaserve CLI — serve a single-page app's index and 404 documents.

Entry point registered as ``spaserve`` in ``pyproject.toml``::

    [project.scripts]
    spaserve = "spaserve.cli:main"
"""

import argparse
import sys
from pathlib import Path


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``spaserve`` command."""
    parser = argparse.ArgumentParser(
        prog="spaserve",
        description="Serve a single-page application's HTML.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- spaserve run -----------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Load the documents and start the server")
    run_parser.add_argument("--host", default=None, help="Bind host address")
    run_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Bind port number (overrides $PORT)",
    )
    run_parser.add_argument(
        "--root",
        type=Path,
        default=None,
        help="Base directory the document paths are relative to",
    )
    run_parser.add_argument(
        "--build-dir",
        default=None,
        help="Build output directory holding index.html",
    )
    run_parser.add_argument(
        "--static-dir",
        default=None,
        help="Static assets directory holding 404.html",
    )
    run_parser.add_argument("--workers", type=int, default=None, help="Worker count")
    run_parser.add_argument(
        "--log-level",
        default=None,
        choices=("debug", "info", "warning", "error", "critical"),
        help="Log level (default: info)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "run":
        from spaserve.cli._run import run_server

        run_server(args)
