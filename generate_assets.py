#!/usr/bin/env python3
"""
Generate favicon.ico, PNG icons and the social preview from the site logo,
then point index.html and manifest.json at them.

Run when you change the logo:
  python3 generate_assets.py
"""
import os
import sys
import logging

from constants import (
    PROJECT_ROOT, LOGO_PATH, PUBLIC_DIR, FAVICON_PATH, SOCIAL_PREVIEW_PATH,
    INDEX_HTML_PATH, MANIFEST_PATH, SOCIAL_WIDTH, SOCIAL_HEIGHT, resolve,
)
from favicon import generate_favicon, generate_icon_set
from social_preview import generate_social_preview
from html_patch import update_index_html, update_manifest

logger = logging.getLogger(__name__)

BANNER = "=" * 52


def configure_logging():
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stdout,
    )


def main(root=None):
    """
    Run every generation step in order. Failures are logged inside each step.
    Paths resolve against root, or the current working directory if not given.
    """
    configure_logging()
    if root is None:
        root = os.getcwd()
    logo_path = resolve(root, LOGO_PATH)

    print("\n🚀 True North Navigator - Favicon & Social Generator\n")
    print(BANNER + "\n")

    generate_favicon(logo_path, resolve(root, FAVICON_PATH))
    generate_icon_set(logo_path, resolve(root, PUBLIC_DIR))
    generate_social_preview(resolve(root, SOCIAL_PREVIEW_PATH))
    update_index_html(resolve(root, INDEX_HTML_PATH))
    update_manifest(resolve(root, MANIFEST_PATH))

    print(BANNER)
    print("✅ Asset generation finished!\n")
    print("Generated files:")
    print(f"  - {FAVICON_PATH}")
    print(f"  - {PUBLIC_DIR}/favicon-16x16.png, favicon-32x32.png, icon-*.png")
    print(f"  - {SOCIAL_PREVIEW_PATH} ({SOCIAL_WIDTH}x{SOCIAL_HEIGHT})")
    print("\nNext steps:")
    print("  1. Check the generated social-preview.png")
    print("  2. Refresh your browser to see new favicon")
    print("  3. Test PWA installation with new icons\n")
    return 0


def run(root=None):
    """Console entry point. Returns a process exit code."""
    try:
        return main(root)
    except Exception as e:
        logger.error(f"Asset generation failed: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(run(PROJECT_ROOT))
