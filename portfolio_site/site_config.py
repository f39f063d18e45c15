# site_config.py
# Paths and branding shared by the renderer, the build script and the preview app.

from pathlib import Path

# -----------------------------
# Branding / Site config
# -----------------------------
SITE_TITLE = "Projects"

# templates/ and static/ ship inside the package as package data
SITE_ROOT = Path(__file__).resolve().parent
TEMPLATES_DIR = SITE_ROOT / "templates"
STATIC_ROOT = SITE_ROOT / "static"
STYLESHEET = STATIC_ROOT / "styles.css"

# Shown on project cards that have no image, or whose image is missing on disk
PLACEHOLDER_IMAGE = "/static/images/placeholder.svg"

# -----------------------------
# Static build
# -----------------------------
DEFAULT_OUTPUT = "portfolio.html"

# The build swaps this exact tag for an inline <style> block
STYLESHEET_LINK = '<link rel="stylesheet" href="/static/styles.css" />'
