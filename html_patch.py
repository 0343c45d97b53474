"""
In-place updates to the site's index.html and manifest.json so they
reference the generated icons.
"""
import os
import re
import json
import logging

from constants import FAVICON_MARKER, FAVICON_LINKS, ICON_SIZES, MASKABLE_MIN_SIZE
from imaging import write_atomic

logger = logging.getLogger(__name__)

TITLE_RE = re.compile(r'<title>.*?</title>')


def insert_favicon_links(html):
    """
    Return html with the favicon link block after the first <title> element.
    Unchanged if the favicon marker is already present, None if there is no title.
    """
    if FAVICON_MARKER in html:
        return html
    match = TITLE_RE.search(html)
    if not match:
        return None
    return html[:match.end()] + '\n' + FAVICON_LINKS + html[match.end():]


def update_index_html(html_path: str) -> bool:
    """Add favicon links to index.html. Returns True if the links are in place."""
    logger.info("Updating index.html with favicon links...")
    try:
        with open(html_path, 'r', encoding='utf-8', newline='') as f:
            html = f.read()

        patched = insert_favicon_links(html)
        if patched is None:
            logger.warning(f"No <title> tag found in {html_path}; favicon links not added")
            return False
        if patched == html:
            logger.info("Favicon links already in index.html")
            return True

        base, _ = os.path.splitext(html_path)
        write_atomic(html_path, patched.encode("utf-8"), temp_path=f"{base}-temp.html")
    except Exception as e:
        logger.error(f"Error updating index.html: {e}", exc_info=True)
        return False

    logger.info("Updated index.html with favicon links")
    return True


def manifest_icons():
    """Icon entries for manifest.json, one per PWA icon size."""
    return [
        {
            'src': f'/icon-{size}x{size}.png',
            'sizes': f'{size}x{size}',
            'type': 'image/png',
            'purpose': 'any maskable' if size >= MASKABLE_MIN_SIZE else 'any',
        }
        for size in ICON_SIZES
    ]


def update_manifest(manifest_path: str) -> bool:
    """Replace the icons array in manifest.json. Other keys are kept."""
    try:
        with open(manifest_path, 'r', encoding='utf-8') as f:
            manifest = json.load(f)
        manifest['icons'] = manifest_icons()
        data = json.dumps(manifest, indent=2, ensure_ascii=False)
        base, _ = os.path.splitext(manifest_path)
        write_atomic(manifest_path, data.encode("utf-8"), temp_path=f"{base}-temp.json")
    except (OSError, ValueError, TypeError) as e:
        logger.warning(f"Could not update manifest.json: {e}")
        return False

    logger.info("Updated manifest.json with new icon paths")
    return True
