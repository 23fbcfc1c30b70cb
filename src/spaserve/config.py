"""Serve configuration.

ServeConfig is a frozen dataclass, immutable after creation and built once
at startup from defaults, the ``PORT`` environment variable, and CLI
overrides.
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from spaserve.errors import ConfigurationError

logger = logging.getLogger("spaserve.config")

DEFAULT_PORT = 8080
MAX_PORT = 65535


@dataclass(frozen=True, slots=True)
class ServeConfig:
    """Serve configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ServeConfig(port=3000, root=Path("/srv/app"))
    """

    # Server
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    workers: int = 1

    # Documents
    root: str | Path = "."
    build_dir: str = "dist"  # Build output holding the index document
    static_dir: str = "static"  # Static assets holding the not-found document
    index_name: str = "index.html"
    not_found_name: str = "404.html"

    # Logging
    log_level: str = "info"

    @property
    def index_path(self) -> Path:
        """Location of the document served for ``/``."""
        return Path(self.root) / self.build_dir / self.index_name

    @property
    def not_found_path(self) -> Path:
        """Location of the document served for every other path."""
        return Path(self.root) / self.static_dir / self.not_found_name

    def with_overrides(self, **overrides: Any) -> "ServeConfig":
        """Return a copy with the non-``None`` overrides applied."""
        changes = {name: value for name, value in overrides.items() if value is not None}
        return replace(self, **changes) if changes else self

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        **overrides: Any,
    ) -> "ServeConfig":
        """Build a config from ``PORT`` plus keyword overrides.

        An unset or empty ``PORT`` falls back to the default port.  Any
        other value must be an integer.

        Raises:
            ConfigurationError: If ``PORT`` is not an integer, or the
                resolved port or worker count is out of range.
        """
        env = os.environ if environ is None else environ
        raw_port = env.get("PORT", "")

        if raw_port:
            try:
                port = int(raw_port)
            except ValueError as exc:
                msg = f"PORT must be an integer, got {raw_port!r}"
                raise ConfigurationError(msg) from exc
        else:
            port = DEFAULT_PORT
            if overrides.get("port") is None:
                logger.info("Defaulting to port %d", port)

        config = cls(port=port).with_overrides(**overrides)
        config.validate()
        return config

    def validate(self) -> None:
        """Check the values pounce rejects before anything is loaded.

        Raises:
            ConfigurationError: If the port is outside 0-65535 or the
                worker count is negative.
        """
        if not 0 <= self.port <= MAX_PORT:
            msg = f"port must be 0-{MAX_PORT}, got {self.port}"
            raise ConfigurationError(msg)
        if self.workers < 0:
            msg = f"workers must be >= 0, got {self.workers}"
            raise ConfigurationError(msg)
