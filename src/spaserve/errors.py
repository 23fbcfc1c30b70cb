"""spaserve exception hierarchy.

Shared across the loader, bootstrap, and CLI so every module raises and
catches the same types.  Library code raises; only the CLI turns these
into an exit status.
"""

from pathlib import Path


class SpaServeError(Exception):
    """Base for all spaserve-specific errors."""


class ConfigurationError(SpaServeError):
    """Raised when the serve configuration is invalid.

    Typically raised by ``ServeConfig.from_env()`` before anything is
    read from disk or bound.
    """


class StartupLoadFailure(SpaServeError):  # noqa: N818
    """A document could not be fully read at startup.

    The service cannot run without its content, so the bootstrap aborts
    instead of serving broken responses.
    """

    def __init__(self, path: str | Path, reason: BaseException | str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"cannot read {self.path}: {reason}")


class ListenBindFailure(SpaServeError):  # noqa: N818
    """The listener could not bind to the resolved host and port."""

    def __init__(self, host: str, port: int, reason: BaseException | str) -> None:
        self.host = host
        self.port = port
        self.reason = reason
        super().__init__(f"cannot listen on {host}:{port}: {reason}")
