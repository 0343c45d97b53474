"""
Favicon and icon set generation from the site's vector logo.

favicon.ico is written as PNG bytes with an .ico name; modern browsers
accept it.
"""
import os
import logging

from constants import (
    FAVICON_SIZE, FAVICON_BACKGROUND, TRANSPARENT_BACKGROUND,
    FAVICON_SIZES, ICON_SIZES,
)
from imaging import load_svg_image, fit_square, encode_png, write_atomic

logger = logging.getLogger(__name__)


def generate_favicon(logo_path: str, output_path: str) -> bool:
    """Generate a 32x32 favicon on a solid background. Returns True on success."""
    logger.info("Generating favicon.ico...")
    if not os.path.exists(logo_path):
        logger.error(f"Error generating favicon: logo not found at {logo_path}")
        return False

    try:
        logo = load_svg_image(logo_path)
        favicon = fit_square(logo, FAVICON_SIZE, FAVICON_BACKGROUND)
        write_atomic(output_path, encode_png(favicon))
    except Exception as e:
        logger.error(f"Error generating favicon: {e}", exc_info=True)
        return False

    logger.info(f"Generated: {os.path.basename(output_path)} ({FAVICON_SIZE}x{FAVICON_SIZE})")
    logger.info("Note: This is a PNG formatted as .ico (works in modern browsers)")
    return True


def icon_filenames():
    """(size, filename) pairs for every transparent PNG icon."""
    names = [(size, f"favicon-{size}x{size}.png") for size in FAVICON_SIZES]
    names += [(size, f"icon-{size}x{size}.png") for size in ICON_SIZES]
    return names


def generate_icon_set(logo_path: str, output_dir: str) -> list:
    """
    Generate the favicon-NxN.png and PWA icon-NxN.png files.
    A failing size is logged and skipped. Returns the paths written.
    """
    logger.info("Generating PNG icons...")
    if not os.path.exists(logo_path):
        logger.error(f"Error generating icons: logo not found at {logo_path}")
        return []

    try:
        logo = load_svg_image(logo_path)
    except Exception as e:
        logger.error(f"Error generating icons: {e}", exc_info=True)
        return []

    written = []
    for size, filename in icon_filenames():
        path = os.path.join(output_dir, filename)
        try:
            icon = fit_square(logo, size, TRANSPARENT_BACKGROUND)
            write_atomic(path, encode_png(icon))
            written.append(path)
            logger.info(f"Generated: {filename}")
        except Exception as e:
            logger.error(f"Error generating {filename}: {e}", exc_info=True)
    return written
