import os
from dotenv import load_dotenv

# Load Environment Variables (may include a UTF-8 BOM if file saved with BOM)
load_dotenv()

_BOM = "\ufeff"

DEFAULT_IMG_SIZE = 800
DEFAULT_PADDING = 20
DEFAULT_BACKGROUND = "black"

# Rendering work grows with leads * bights
MAX_LEADS = 32
MAX_BIGHTS = 32
RENDER_CACHE_SIZE = 128

DEFAULT_KNOT = {
    "leads": 3,
    "bights": 5,
    "inner_radius": 40.0,
    "outer_radius": 60.0,
    "line_width": 2.0,
}


def get_env(name, default=None):
    """Read an environment variable, tolerating a BOM on the name or the value.

    A .env file saved with a UTF-8 BOM makes python-dotenv register the first
    key as '\\ufeffNAME', so both spellings are tried.
    """
    value = os.environ.get(name)
    if value is None:
        value = os.environ.get(f"{_BOM}{name}")
    if value is None:
        return default
    return value.lstrip(_BOM).strip()


def _get_int(name, default):
    raw = get_env(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def get_render_defaults():
    size = _get_int("TURKSHEAD_IMG_SIZE", DEFAULT_IMG_SIZE)
    if size <= 0:
        size = DEFAULT_IMG_SIZE
    return {
        "img_size": (size, size),
        "padding": max(0, _get_int("TURKSHEAD_PADDING", DEFAULT_PADDING)),
        "background": get_env("TURKSHEAD_BACKGROUND") or DEFAULT_BACKGROUND,
    }
