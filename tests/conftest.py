"""
Pytest configuration and fixtures for the asset generator tests.

Fixtures build a throwaway copy of the site layout (client/, client/public/)
under pytest's tmp_path so the generators never touch the real site.
"""
import os
import json
import pytest

from constants import LOGO_PATH, INDEX_HTML_PATH, MANIFEST_PATH, PUBLIC_DIR


LOGO_SVG = """<svg width="64" height="64" viewBox="0 0 64 64" xmlns="http://www.w3.org/2000/svg">
  <circle cx="32" cy="32" r="24" fill="#2E8B8B"/>
</svg>
"""

# Wider than tall so the fitted logo leaves letterbox bands
WIDE_LOGO_SVG = """<svg width="128" height="64" viewBox="0 0 128 64" xmlns="http://www.w3.org/2000/svg">
  <rect width="128" height="64" fill="#ff0000"/>
</svg>
"""

INDEX_HTML = """<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="UTF-8" />
    <title>Site</title>
  </head>
  <body></body>
</html>
"""

MANIFEST = {
    "name": "True North Navigator",
    "short_name": "TNN",
    "icons": [{"src": "/old.png", "sizes": "48x48", "type": "image/png"}],
}


@pytest.fixture
def logo_path(tmp_path):
    """A small square SVG logo."""
    path = tmp_path / "logo-icon.svg"
    path.write_text(LOGO_SVG, encoding="utf-8")
    return str(path)


@pytest.fixture
def wide_logo_path(tmp_path):
    """A solid red 2:1 SVG logo."""
    path = tmp_path / "wide-logo.svg"
    path.write_text(WIDE_LOGO_SVG, encoding="utf-8")
    return str(path)


@pytest.fixture
def html_path(tmp_path):
    """An index.html with a title and no favicon links."""
    path = tmp_path / "index.html"
    path.write_text(INDEX_HTML, encoding="utf-8")
    return str(path)


@pytest.fixture
def site_root(tmp_path):
    """
    A full site layout:
    - client/public/logo-icon.svg
    - client/public/manifest.json
    - client/index.html
    Returns the root directory as a string.
    """
    root = tmp_path / "site"
    os.makedirs(root / PUBLIC_DIR)
    (root / LOGO_PATH).write_text(LOGO_SVG, encoding="utf-8")
    (root / INDEX_HTML_PATH).write_text(INDEX_HTML, encoding="utf-8")
    (root / MANIFEST_PATH).write_text(json.dumps(MANIFEST, indent=2), encoding="utf-8")
    return str(root)
