"""Content loading — reads the two served documents once at startup.

Both documents are held as raw bytes for the process lifetime.  The
loader raises on failure and never exits the process; the bootstrap
decides whether to abort.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from spaserve.config import ServeConfig
from spaserve.errors import StartupLoadFailure

logger = logging.getLogger("spaserve.documents")


@dataclass(frozen=True, slots=True)
class Documents:
    """The index and not-found documents. Immutable after load."""

    index: bytes
    not_found: bytes


def read_document(path: str | Path) -> bytes:
    """Read an entire file into memory.

    An empty file is valid content.

    Raises:
        StartupLoadFailure: If the file cannot be opened or fully read.
    """
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise StartupLoadFailure(path, exc) from exc


def load_documents(config: ServeConfig) -> Documents:
    """Load the index and not-found documents named by *config*."""
    index = read_document(config.index_path)
    not_found = read_document(config.not_found_path)
    logger.debug("Loaded %s (%d bytes)", config.index_path, len(index))
    logger.debug("Loaded %s (%d bytes)", config.not_found_path, len(not_found))
    return Documents(index=index, not_found=not_found)
