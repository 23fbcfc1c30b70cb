"""Shared fixtures: an on-disk site with the two served documents."""

from pathlib import Path

import pytest

from spaserve.config import ServeConfig

INDEX_HTML = b'<!doctype html>\n<div id="app"></div>\n<script src="/main.js"></script>\n'
NOT_FOUND_HTML = b"<!doctype html>\n<h1>404 - Page not found</h1>\n"


@pytest.fixture
def index_html() -> bytes:
    return INDEX_HTML


@pytest.fixture
def not_found_html() -> bytes:
    return NOT_FOUND_HTML


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """Create dist/index.html and static/404.html under a temp root."""
    (tmp_path / "dist").mkdir()
    (tmp_path / "static").mkdir()
    (tmp_path / "dist" / "index.html").write_bytes(INDEX_HTML)
    (tmp_path / "static" / "404.html").write_bytes(NOT_FOUND_HTML)
    return tmp_path


@pytest.fixture
def site_config(site_root: Path) -> ServeConfig:
    return ServeConfig(root=site_root)
