"""Express a :class:`SiteConfig` in the shape the site framework consumes.

The framework receives ``{"integrations": [starlight(options)]}`` where the
Starlight options carry ``title``, ``sidebar`` and ``plugins``, and the single
plugin is the Catppuccin colour theme with ``dark`` and ``light`` settings.
Plugin invocations are modelled as single-key mappings naming the plugin, so
the structure survives JSON unchanged:

>>> from daridev_docs.config import default_site_config
>>> mapping = to_framework_mapping(default_site_config())
>>> list(mapping["integrations"][0])
['starlight']
>>> mapping["integrations"][0]["starlight"]["plugins"][0]["catppuccin"]["dark"]
{'flavor': 'macchiato', 'accent': 'sky'}
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

import msgspec
import msgspec.json as msgspec_json

from ._constants import CATPPUCCIN_PLUGIN, STARLIGHT_PLUGIN
from .config.helpers import (
    _build_sidebar,
    _build_theme_setting,
    _reject_unknown_keys,
    _require_list,
    _require_mapping,
    _text_field,
)
from .config.models import SidebarGroup, SiteConfig, SiteConfigError, ThemeSetting

STARLIGHT_OPTION_KEYS = frozenset({"title", "sidebar", "plugins"})
CATPPUCCIN_OPTION_KEYS = frozenset({"dark", "light"})


def sidebar_group_to_mapping(group: SidebarGroup) -> dict[str, typ.Any]:
    """Return ``{label, items}`` or ``{label, autogenerate}`` for ``group``."""
    if group.autogenerate is not None:
        return {
            "label": group.label,
            "autogenerate": {"directory": group.autogenerate.directory},
        }
    return {
        "label": group.label,
        "items": [{"label": item.label, "slug": item.slug} for item in group.items or ()],
    }


def theme_setting_to_mapping(setting: ThemeSetting) -> dict[str, str]:
    """Return the colour plugin parameters for one mode (``mode`` is implied)."""
    return {"flavor": setting.flavor, "accent": setting.accent}


def to_starlight_options(config: SiteConfig) -> dict[str, typ.Any]:
    """Return the options passed to the Starlight integration."""
    return {
        "title": config.title,
        "sidebar": [sidebar_group_to_mapping(group) for group in config.sidebar],
        "plugins": [
            {
                CATPPUCCIN_PLUGIN: {
                    "dark": theme_setting_to_mapping(config.dark),
                    "light": theme_setting_to_mapping(config.light),
                }
            }
        ],
    }


def to_framework_mapping(config: SiteConfig) -> dict[str, typ.Any]:
    """Return the complete framework configuration for ``config``."""
    return {"integrations": [{STARLIGHT_PLUGIN: to_starlight_options(config)}]}


def to_site_yaml_mapping(config: SiteConfig) -> dict[str, typ.Any]:
    """Return the ``site.yaml`` document that loads back into ``config``."""
    return {
        "title": config.title,
        "sidebar": [sidebar_group_to_mapping(group) for group in config.sidebar],
        "theme": {
            setting.mode: theme_setting_to_mapping(setting) for setting in config.themes
        },
    }


def _find_invocation(
    invocations: list[typ.Any], name: str, where: str
) -> cabc.Mapping[str, typ.Any]:
    """Return the parameters of the single invocation of plugin ``name``."""
    matches: list[cabc.Mapping[str, typ.Any]] = []
    for index, invocation in enumerate(invocations):
        entry = _require_mapping(invocation, f"{where}[{index}]")
        if len(entry) != 1:
            msg = f"{where}[{index}] must name exactly one plugin."
            raise SiteConfigError(msg)
        if name not in entry:
            other = next(iter(entry))
            msg = f"{where}[{index}] invokes '{other}', which is not modelled; only '{name}' is."
            raise SiteConfigError(msg)
        matches.append(_require_mapping(entry[name], f"{where}[{index}].{name}"))
    if len(matches) != 1:
        msg = f"{where} must contain exactly one '{name}' invocation, found {len(matches)}."
        raise SiteConfigError(msg)
    return matches[0]


def from_framework_mapping(mapping: cabc.Mapping[str, typ.Any]) -> SiteConfig:
    """Parse the framework configuration shape back into a SiteConfig.

    Raises
    ------
    SiteConfigError
        If the mapping does not follow the integration/plugin shape produced
        by :func:`to_framework_mapping`, or carries options this package does
        not model.
    """
    root = _require_mapping(mapping, "configuration")
    _reject_unknown_keys(root, frozenset({"integrations"}), "configuration")
    integrations = _require_list(root.get("integrations"), "integrations")
    options = _find_invocation(integrations, STARLIGHT_PLUGIN, "integrations")
    where = f"integrations.{STARLIGHT_PLUGIN}"
    _reject_unknown_keys(options, STARLIGHT_OPTION_KEYS, where)

    plugins = _require_list(options.get("plugins"), f"{where}.plugins")
    theme = _find_invocation(plugins, CATPPUCCIN_PLUGIN, f"{where}.plugins")
    theme_where = f"{where}.plugins.{CATPPUCCIN_PLUGIN}"
    _reject_unknown_keys(theme, CATPPUCCIN_OPTION_KEYS, theme_where)

    return SiteConfig(
        title=_text_field(options, "title", where),
        sidebar=_build_sidebar(options.get("sidebar"), f"{where}.sidebar"),
        dark=_build_theme_setting("dark", theme.get("dark"), f"{theme_where}.dark"),
        light=_build_theme_setting("light", theme.get("light"), f"{theme_where}.light"),
    )


def dumps_json(config: SiteConfig, *, indent: int = 2) -> str:
    """Encode ``config`` as framework-shaped JSON text."""
    encoded = msgspec_json.encode(to_framework_mapping(config))
    if indent > 0:
        encoded = msgspec_json.format(encoded, indent=indent)
    return encoded.decode("utf-8")


def loads_json(data: str | bytes) -> SiteConfig:
    """Decode framework-shaped JSON text into a SiteConfig."""
    try:
        payload = msgspec_json.decode(data)
    except msgspec.DecodeError as exc:
        msg = f"Invalid configuration JSON: {exc}"
        raise SiteConfigError(msg) from exc
    return from_framework_mapping(payload)


__all__ = [
    "dumps_json",
    "from_framework_mapping",
    "loads_json",
    "sidebar_group_to_mapping",
    "theme_setting_to_mapping",
    "to_framework_mapping",
    "to_site_yaml_mapping",
    "to_starlight_options",
]
