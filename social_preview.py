"""
Social preview (Open Graph) image for link sharing.

The card is laid out as an SVG document and rasterized to a 1200x630 PNG.
"""
import os
import logging
import html as html_module

from constants import (
    SOCIAL_WIDTH, SOCIAL_HEIGHT,
    MIDNIGHT_NAVY, DEEP_NAVY, AURORA_TEAL, GLACIER_BLUE, ICE_WHITE,
    SOCIAL_TITLE, SOCIAL_TAGLINE, SOCIAL_BADGE,
)
from imaging import rasterize_svg, write_atomic

logger = logging.getLogger(__name__)

SOCIAL_SVG_TEMPLATE = """<svg width="{width}" height="{height}" xmlns="http://www.w3.org/2000/svg">
  <defs>
    <linearGradient id="grad" x1="0%" y1="0%" x2="100%" y2="100%">
      <stop offset="0%" style="stop-color:{gradient_start};stop-opacity:1" />
      <stop offset="100%" style="stop-color:{gradient_end};stop-opacity:1" />
    </linearGradient>
  </defs>
  <rect width="{width}" height="{height}" fill="url(#grad)"/>

  <!-- Aurora -->
  <circle cx="200" cy="150" r="300" fill="{teal}" opacity="0.1"/>
  <circle cx="1000" cy="500" r="250" fill="{blue}" opacity="0.08"/>

  <text x="{center}" y="280" text-anchor="middle"
        font-family="'Outfit', sans-serif" font-size="72"
        font-weight="700" fill="{title_color}">{title}</text>

  <text x="{center}" y="350" text-anchor="middle"
        font-family="'Inter', sans-serif" font-size="32"
        font-weight="400" fill="{teal}">{tagline}</text>

  <rect x="480" y="420" width="240" height="50" rx="25"
        fill="{teal}" opacity="0.2"/>
  <text x="{center}" y="453" text-anchor="middle"
        font-family="'Inter', sans-serif" font-size="20"
        font-weight="600" fill="{teal}">{badge}</text>
</svg>
"""


def build_social_svg() -> str:
    """Return the social preview card as SVG text."""
    return SOCIAL_SVG_TEMPLATE.format(
        width=SOCIAL_WIDTH,
        height=SOCIAL_HEIGHT,
        center=SOCIAL_WIDTH // 2,
        gradient_start=MIDNIGHT_NAVY,
        gradient_end=DEEP_NAVY,
        teal=AURORA_TEAL,
        blue=GLACIER_BLUE,
        title_color=ICE_WHITE,
        title=html_module.escape(SOCIAL_TITLE),
        tagline=html_module.escape(SOCIAL_TAGLINE),
        badge=html_module.escape(SOCIAL_BADGE),
    )


def generate_social_preview(output_path: str) -> bool:
    """Rasterize the social card to output_path. Returns True on success."""
    logger.info("Generating social preview...")
    try:
        svg = build_social_svg()
        png_bytes = rasterize_svg(svg.encode("utf-8"), width=SOCIAL_WIDTH, height=SOCIAL_HEIGHT)
        write_atomic(output_path, png_bytes)
    except Exception as e:
        logger.error(f"Error generating social preview: {e}", exc_info=True)
        return False

    logger.info(f"Generated: {os.path.basename(output_path)} ({SOCIAL_WIDTH}x{SOCIAL_HEIGHT})")
    return True
