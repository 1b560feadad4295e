"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ

from ruamel.yaml import YAML

from .helpers import (
    _build_sidebar,
    _build_theme_setting,
    _reject_unknown_keys,
    _require_mapping,
    _text_field,
)
from .models import SiteConfig

if typ.TYPE_CHECKING:
    from pathlib import Path

TOP_LEVEL_KEYS = frozenset({"title", "sidebar", "theme"})
THEME_SECTION_KEYS = frozenset({"dark", "light"})


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML file describing the documentation site.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration (for example,
        ``config/site.yaml``).

    Returns
    -------
    SiteConfig
        Parsed configuration with the title, ordered sidebar groups, and the
        dark and light theme settings.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If required fields are missing, a sidebar group defines both or
        neither of ``items`` and ``autogenerate``, or unknown keys appear.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from daridev_docs.config import load_site_config
    >>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> config.title  # doctest: +SKIP
    'Daridev Docs'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    return build_site_config(loaded)


def build_site_config(raw: typ.Mapping[str, typ.Any]) -> SiteConfig:
    """Build a SiteConfig from an already parsed ``site.yaml`` mapping."""
    _reject_unknown_keys(raw, TOP_LEVEL_KEYS, "configuration")
    title = _text_field(raw, "title", "configuration")
    sidebar = _build_sidebar(raw.get("sidebar"))

    theme = _require_mapping(raw.get("theme") or {}, "theme")
    _reject_unknown_keys(theme, THEME_SECTION_KEYS, "theme")
    return SiteConfig(
        title=title,
        sidebar=sidebar,
        dark=_build_theme_setting("dark", theme.get("dark"), "theme.dark"),
        light=_build_theme_setting("light", theme.get("light"), "theme.light"),
    )


__all__ = ["build_site_config", "load_site_config"]
