"""Load and validate the Starlight site configuration.

This subpackage parses the project's ``site.yaml`` file into immutable
dataclasses (:class:`SiteConfig`, :class:`SidebarGroup`, etc.) that the
renderer, serializer, and content checks consume. The primary entry point is
:func:`load_site_config`; :func:`default_site_config` returns the configuration
the published site is built with.

Examples
--------
>>> from pathlib import Path
>>> from daridev_docs.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> site.get_group("Reference").autogenerate.directory  # doctest: +SKIP
'reference'
"""

from .defaults import SITE_TITLE, default_site_config
from .loader import build_site_config, load_site_config
from .models import (
    THEME_MODES,
    Autogenerate,
    SidebarGroup,
    SidebarItem,
    SiteConfig,
    SiteConfigError,
    ThemeMode,
    ThemeSetting,
)

__all__ = [
    "SITE_TITLE",
    "THEME_MODES",
    "Autogenerate",
    "SidebarGroup",
    "SidebarItem",
    "SiteConfig",
    "SiteConfigError",
    "ThemeMode",
    "ThemeSetting",
    "build_site_config",
    "default_site_config",
    "load_site_config",
]
