"""
Asset generation constants for True North Navigator
"""
import os

# Project root (paths below are relative to it)
PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))

# Input / output locations
LOGO_PATH = os.path.join('client', 'public', 'logo-icon.svg')
PUBLIC_DIR = os.path.join('client', 'public')
FAVICON_PATH = os.path.join('client', 'public', 'favicon.ico')
SOCIAL_PREVIEW_PATH = os.path.join('client', 'public', 'social-preview.png')
INDEX_HTML_PATH = os.path.join('client', 'index.html')
MANIFEST_PATH = os.path.join('client', 'public', 'manifest.json')

# Favicon Configuration
FAVICON_SIZE = 32
FAVICON_BACKGROUND = (11, 26, 43, 255)  # Midnight Navy, used instead of transparency
TRANSPARENT_BACKGROUND = (11, 26, 43, 0)
LOGO_RENDER_WIDTH = 512  # SVG is rasterized at this width before downscaling

# Icon sets referenced by the favicon links and manifest.json
FAVICON_SIZES = [16, 32]
ICON_SIZES = [72, 96, 128, 144, 152, 192, 384, 512]
MASKABLE_MIN_SIZE = 192

# Social Preview Configuration (Open Graph card)
SOCIAL_WIDTH = 1200
SOCIAL_HEIGHT = 630

# Brand colors
MIDNIGHT_NAVY = '#0B1A2B'
DEEP_NAVY = '#1a3346'
AURORA_TEAL = '#2E8B8B'
GLACIER_BLUE = '#5B9BD5'
ICE_WHITE = '#E8F4F4'

# Social preview copy
SOCIAL_TITLE = 'True North Navigator'
SOCIAL_TAGLINE = 'Community-Guided Waters of the North'
SOCIAL_BADGE = 'NWT • CANADA'

# index.html patching
FAVICON_MARKER = 'favicon.ico'
FAVICON_LINKS = '\n'.join([
    '    <link rel="icon" type="image/x-icon" href="/favicon.ico">',
    '    <link rel="icon" type="image/png" sizes="16x16" href="/favicon-16x16.png">',
    '    <link rel="icon" type="image/png" sizes="32x32" href="/favicon-32x32.png">',
    '    <link rel="apple-touch-icon" sizes="192x192" href="/icon-192x192.png">',
])


def resolve(root: str, relative_path: str) -> str:
    """Join a project-relative asset path onto root."""
    return os.path.join(root, relative_path)
