"""Utility helpers shared by the configuration loader and JSON parser."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from .models import (
    Autogenerate,
    SidebarGroup,
    SidebarItem,
    SiteConfigError,
    ThemeMode,
    ThemeSetting,
)

GROUP_KEYS = frozenset({"label", "items", "autogenerate"})
ITEM_KEYS = frozenset({"label", "slug"})
AUTOGENERATE_KEYS = frozenset({"directory"})
THEME_KEYS = frozenset({"flavor", "accent"})


def _require_mapping(value: object, where: str) -> cabc.Mapping[str, typ.Any]:
    """Return ``value`` when it is a mapping, otherwise raise SiteConfigError."""
    if not isinstance(value, cabc.Mapping):
        msg = f"{where} must be a mapping, got {type(value).__name__}."
        raise SiteConfigError(msg)
    return value


def _require_list(value: object, where: str) -> list[typ.Any]:
    """Return ``value`` as a list when it is a non-string sequence."""
    if isinstance(value, str | bytes) or not isinstance(value, cabc.Sequence):
        msg = f"{where} must be a list, got {type(value).__name__}."
        raise SiteConfigError(msg)
    return list(value)


def _reject_unknown_keys(
    payload: cabc.Mapping[str, typ.Any], allowed: frozenset[str], where: str
) -> None:
    """Fail on keys outside ``allowed`` so typos do not vanish silently."""
    unknown = sorted(str(key) for key in payload if key not in allowed)
    if unknown:
        msg = f"{where} has unknown keys: {', '.join(unknown)}."
        raise SiteConfigError(msg)


def _text_field(payload: cabc.Mapping[str, typ.Any], key: str, where: str) -> str:
    """Return a required, non-blank string field exactly as written."""
    value = payload.get(key)
    if value is None:
        msg = f"{where} is missing '{key}'."
        raise SiteConfigError(msg)
    if not isinstance(value, str):
        msg = f"{where}.{key} must be a string, got {type(value).__name__}."
        raise SiteConfigError(msg)
    if not value.strip():
        msg = f"{where}.{key} must not be empty."
        raise SiteConfigError(msg)
    return value


def _build_item(payload: object, where: str) -> SidebarItem:
    """Build a SidebarItem from a ``{label, slug}`` mapping."""
    mapping = _require_mapping(payload, where)
    _reject_unknown_keys(mapping, ITEM_KEYS, where)
    return SidebarItem(
        label=_text_field(mapping, "label", where),
        slug=_text_field(mapping, "slug", where),
    )


def _build_group(payload: object, where: str) -> SidebarGroup:
    """Build a SidebarGroup, enforcing the items/autogenerate exclusivity."""
    mapping = _require_mapping(payload, where)
    _reject_unknown_keys(mapping, GROUP_KEYS, where)
    label = _text_field(mapping, "label", where)
    has_items = "items" in mapping
    has_autogenerate = "autogenerate" in mapping
    if has_items == has_autogenerate:
        msg = f"{where} ('{label}') must define exactly one of 'items' or 'autogenerate'."
        raise SiteConfigError(msg)

    if has_items:
        raw_items = _require_list(mapping["items"], f"{where}.items")
        items = tuple(
            _build_item(raw, f"{where}.items[{index}]")
            for index, raw in enumerate(raw_items)
        )
        return SidebarGroup(label=label, items=items)

    auto_where = f"{where}.autogenerate"
    auto = _require_mapping(mapping["autogenerate"], auto_where)
    _reject_unknown_keys(auto, AUTOGENERATE_KEYS, auto_where)
    directory = _text_field(auto, "directory", auto_where)
    return SidebarGroup(label=label, autogenerate=Autogenerate(directory=directory))


def _build_sidebar(payload: object, where: str = "sidebar") -> tuple[SidebarGroup, ...]:
    """Build the ordered sidebar from a list of group mappings."""
    if payload is None:
        return ()
    raw_groups = _require_list(payload, where)
    return tuple(
        _build_group(raw, f"{where}[{index}]") for index, raw in enumerate(raw_groups)
    )


def _build_theme_setting(mode: ThemeMode, payload: object, where: str) -> ThemeSetting:
    """Build the ThemeSetting for ``mode`` from a ``{flavor, accent}`` mapping."""
    if payload is None:
        msg = f"{where} is missing."
        raise SiteConfigError(msg)
    mapping = _require_mapping(payload, where)
    _reject_unknown_keys(mapping, THEME_KEYS, where)
    return ThemeSetting(
        mode=mode,
        flavor=_text_field(mapping, "flavor", where),
        accent=_text_field(mapping, "accent", where),
    )


def _normalize_slug(slug: str) -> str:
    """Return ``slug`` without surrounding slashes, for comparisons."""
    return slug.strip().strip("/")


__all__ = [
    "AUTOGENERATE_KEYS",
    "GROUP_KEYS",
    "ITEM_KEYS",
    "THEME_KEYS",
    "_build_group",
    "_build_item",
    "_build_sidebar",
    "_build_theme_setting",
    "_normalize_slug",
    "_reject_unknown_keys",
    "_require_list",
    "_require_mapping",
    "_text_field",
]
