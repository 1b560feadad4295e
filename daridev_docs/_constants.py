"""Common literal values used across daridev_docs.

These constants keep default paths, plugin names, and the Catppuccin palette
centralized so the renderer, serializer, content checks, and tests import the
same values without drifting. Intended for internal use within the
daridev_docs package.

Examples
--------
>>> from daridev_docs import _constants
>>> "macchiato" in _constants.CATPPUCCIN_FLAVORS
True
>>> _constants.STARLIGHT_PLUGIN
'starlight'
"""

from pathlib import Path

DEFAULT_CONFIG = Path("config/site.yaml")
DEFAULT_CONTENT_DIR = Path("src/content/docs")
DEFAULT_ASTRO_CONFIG = Path("astro.config.mjs")

STARLIGHT_PLUGIN = "starlight"
CATPPUCCIN_PLUGIN = "catppuccin"

CONTENT_EXTENSIONS = frozenset({".md", ".mdx", ".mdoc"})

CATPPUCCIN_FLAVORS = ("latte", "frappe", "macchiato", "mocha")
CATPPUCCIN_ACCENTS = (
    "rosewater",
    "flamingo",
    "pink",
    "mauve",
    "red",
    "maroon",
    "peach",
    "yellow",
    "green",
    "teal",
    "sky",
    "sapphire",
    "blue",
    "lavender",
)
