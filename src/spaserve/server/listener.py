"""Listener bootstrap — loads the documents, then starts pounce.

Loading always completes before the server is constructed, so no
request can observe a partially initialized handler.
"""

from __future__ import annotations

import errno
import logging
from typing import TYPE_CHECKING

from spaserve.documents import load_documents
from spaserve.errors import ConfigurationError, ListenBindFailure
from spaserve.server.handler import SPAHandler

if TYPE_CHECKING:
    from spaserve.config import ServeConfig

logger = logging.getLogger("spaserve.server")

BIND_ERRNOS = frozenset({errno.EADDRINUSE, errno.EADDRNOTAVAIL, errno.EACCES})


def create_handler(config: ServeConfig) -> SPAHandler:
    """Load both documents and build the handler.

    Raises:
        StartupLoadFailure: If either document cannot be read.
    """
    return SPAHandler(load_documents(config))


def run_server(handler: SPAHandler, config: ServeConfig) -> None:
    """Start a pounce server with the given handler. Blocks until shutdown.

    Pounce's ``run()`` takes an import string (e.g., ``"myapp:app"``),
    but the handler is a live object built from loaded documents, so
    ``pounce.Server`` is used directly with the ASGI callable.

    ``Server.run()`` binds its sockets before serving, so only the errno
    values a bind produces are reported as a bind failure; any other
    ``OSError`` propagates unchanged.

    Raises:
        ConfigurationError: If pounce rejects the server settings.
        ListenBindFailure: If the host and port cannot be bound.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    try:
        server_config = ServerConfig(
            host=config.host,
            port=config.port,
            workers=config.workers,
            log_level=config.log_level,
        )
    except ValueError as exc:
        raise ConfigurationError(str(exc)) from exc
    server = Server(server_config, handler)

    logger.info("Listening on port %d", config.port)
    try:
        server.run()
    except OSError as exc:
        if exc.errno not in BIND_ERRNOS:
            raise
        raise ListenBindFailure(config.host, config.port, exc) from exc


def serve(config: ServeConfig) -> None:
    """Load or abort, then listen until externally terminated."""
    handler = create_handler(config)
    run_server(handler, config)
