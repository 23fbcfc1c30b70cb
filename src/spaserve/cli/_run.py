"""``spaserve run`` — resolve config, load the documents, serve.

Every startup failure ends the process with exit status 1 and a
diagnostic on stderr.  Nothing is bound unless both documents loaded.
"""

import argparse
import logging
import sys

from spaserve.config import ServeConfig
from spaserve.errors import SpaServeError

logger = logging.getLogger("spaserve.server")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    """Send log records to stderr at the given level name."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, stream=sys.stderr)


def run_server(args: argparse.Namespace) -> None:
    """Start the server, exiting with status 1 on any startup failure.

    CLI flags override ``$PORT`` and the config defaults.
    """
    configure_logging(args.log_level or "info")

    try:
        config = ServeConfig.from_env(
            host=args.host,
            port=args.port,
            root=args.root,
            build_dir=args.build_dir,
            static_dir=args.static_dir,
            workers=args.workers,
            log_level=args.log_level,
        )

        from spaserve.server.listener import serve

        serve(config)
    except SpaServeError as exc:
        logger.critical("%s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
