"""
Image helpers shared by the asset generators.
SVG rasterization (cairosvg), square fitting (Pillow) and atomic file writes.
"""
import os
import logging
from io import BytesIO

import cairosvg
from PIL import Image, ImageOps

from constants import LOGO_RENDER_WIDTH

logger = logging.getLogger(__name__)


def rasterize_svg(svg_bytes: bytes, width: int | None = None, height: int | None = None) -> bytes:
    """Render SVG bytes to PNG bytes. With only a width, aspect ratio is kept."""
    return cairosvg.svg2png(
        bytestring=svg_bytes,
        output_width=width,
        output_height=height,
    )


def load_svg_image(svg_path: str) -> Image.Image:
    """Read an SVG file and return it as a high resolution RGBA image."""
    with open(svg_path, "rb") as f:
        svg_bytes = f.read()
    png_bytes = rasterize_svg(svg_bytes, width=LOGO_RENDER_WIDTH)
    img = Image.open(BytesIO(png_bytes))
    img.load()
    return img.convert("RGBA")


def fit_square(img: Image.Image, size: int, background: tuple) -> Image.Image:
    """
    Scale img to fit inside a size x size square, keeping aspect ratio,
    and center it on a canvas filled with background (RGBA).
    """
    img = img.convert("RGBA")
    fitted = ImageOps.contain(img, (size, size), Image.Resampling.LANCZOS)
    canvas = Image.new("RGBA", (size, size), background)
    left = (size - fitted.width) // 2
    top = (size - fitted.height) // 2
    canvas.alpha_composite(fitted, (left, top))
    return canvas


def encode_png(img: Image.Image) -> bytes:
    buf = BytesIO()
    img.save(buf, "PNG", optimize=True)
    return buf.getvalue()


def write_atomic(path: str, data: bytes, temp_path: str | None = None) -> str:
    """
    Write bytes to a temp file next to path, then rename it into place.
    Returns path.
    """
    if temp_path is None:
        base, _ = os.path.splitext(path)
        temp_path = f"{base}-temp.png"
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    try:
        with open(temp_path, "wb") as f:
            f.write(data)
        os.replace(temp_path, path)
    finally:
        if os.path.exists(temp_path):
            os.remove(temp_path)
    return path
