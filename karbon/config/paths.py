"""Path configuration for the carbon footprint application."""

from datetime import datetime
from pathlib import Path

def ensure_dir(p: Path):
    """Ensure directory exists, handling conflicts by renaming existing files."""
    if p.exists() and not p.is_dir():
        backup = p.with_name(f"{p.name}.conflict.{datetime.now().strftime('%Y%m%d%H%M%S')}")
        p.rename(backup)
    p.mkdir(parents=True, exist_ok=True)

# Base directories
APP_DIR = Path.cwd()
ASSETS = APP_DIR / "assets"
ensure_dir(ASSETS)

LOGS_DIR = ASSETS / "logs"
ensure_dir(LOGS_DIR)

LANG_FILE_DIR = ASSETS / "i18n"
ensure_dir(LANG_FILE_DIR)

# Hero background candidates
HERO_IMAGE_CANDIDATES = [
    ASSETS / "hero-earth.jpg",
    Path("hero-earth.jpg"),
]
