"""File and directory path constants."""

from pathlib import Path

# Package directories
PACKAGE_DIR = Path(__file__).parent.parent
STATIC_DIR = PACKAGE_DIR / "static"

# Page template
INDEX_TEMPLATE_PATH = STATIC_DIR / "index.html"
STYLESHEET_PATH = STATIC_DIR / "style.css"

# Default output for `anisched render`
DEFAULT_OUTPUT_PATH = Path("anime-schedule.html")
