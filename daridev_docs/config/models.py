"""Typed dataclasses describing the Starlight site configuration."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

ThemeMode = typ.Literal["dark", "light"]
THEME_MODES: tuple[ThemeMode, ...] = ("dark", "light")


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


def _require_text(value: object, where: str) -> str:
    if not isinstance(value, str) or not value.strip():
        msg = f"{where} must be a non-empty string."
        raise SiteConfigError(msg)
    if value != value.strip():
        msg = f"{where} must not start or end with whitespace: {value!r}."
        raise SiteConfigError(msg)
    return value


@dc.dataclass(frozen=True, slots=True)
class SidebarItem:
    """A single navigation entry pointing at a content page."""

    label: str
    slug: str

    def __post_init__(self) -> None:
        _require_text(self.label, "Sidebar item label")
        _require_text(self.slug, f"Slug for sidebar item '{self.label}'")


@dc.dataclass(frozen=True, slots=True)
class Autogenerate:
    """Request that the framework lists every page found in ``directory``."""

    directory: str

    def __post_init__(self) -> None:
        _require_text(self.directory, "Autogenerate directory")


@dc.dataclass(frozen=True, slots=True)
class SidebarGroup:
    """A labelled sidebar section.

    A group either lists its pages explicitly (``items``) or asks the
    framework to derive them from a content directory (``autogenerate``).
    Exactly one of the two is set.
    """

    label: str
    items: tuple[SidebarItem, ...] | None = None
    autogenerate: Autogenerate | None = None

    def __post_init__(self) -> None:
        _require_text(self.label, "Sidebar group label")
        if (self.items is None) == (self.autogenerate is None):
            msg = (
                f"Sidebar group '{self.label}' must define exactly one of "
                "'items' or 'autogenerate'."
            )
            raise SiteConfigError(msg)
        if self.items is not None and not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))

    @property
    def is_autogenerated(self) -> bool:
        """Return ``True`` when the framework derives this group's pages."""
        return self.autogenerate is not None


@dc.dataclass(frozen=True, slots=True)
class ThemeSetting:
    """Catppuccin flavor and accent applied in one display mode."""

    mode: ThemeMode
    flavor: str
    accent: str

    def __post_init__(self) -> None:
        if self.mode not in THEME_MODES:
            msg = f"Theme mode must be one of {', '.join(THEME_MODES)}; got {self.mode!r}."
            raise SiteConfigError(msg)
        _require_text(self.flavor, f"Theme flavor ({self.mode})")
        _require_text(self.accent, f"Theme accent ({self.mode})")


@dc.dataclass(frozen=True, slots=True)
class SiteConfig:
    """Root record handed to the site framework at build time."""

    title: str
    sidebar: tuple[SidebarGroup, ...]
    dark: ThemeSetting
    light: ThemeSetting

    def __post_init__(self) -> None:
        _require_text(self.title, "Site title")
        if not isinstance(self.sidebar, tuple):
            object.__setattr__(self, "sidebar", tuple(self.sidebar))
        if self.dark.mode != "dark":
            msg = f"Dark theme setting carries mode {self.dark.mode!r}."
            raise SiteConfigError(msg)
        if self.light.mode != "light":
            msg = f"Light theme setting carries mode {self.light.mode!r}."
            raise SiteConfigError(msg)

    @property
    def themes(self) -> tuple[ThemeSetting, ThemeSetting]:
        """Return the dark and light settings, in that order."""
        return (self.dark, self.light)

    def get_group(self, label: str) -> SidebarGroup:
        """Return the sidebar group called ``label``."""
        for group in self.sidebar:
            if group.label == label:
                return group
        available = ", ".join(group.label for group in self.sidebar)
        msg = f"Unknown sidebar group '{label}'. Known groups: {available}"
        raise KeyError(msg)

    def iter_items(self) -> typ.Iterator[tuple[SidebarGroup, SidebarItem]]:
        """Yield every explicit sidebar item alongside its group."""
        for group in self.sidebar:
            for item in group.items or ():
                yield group, item


__all__ = [
    "THEME_MODES",
    "Autogenerate",
    "SidebarGroup",
    "SidebarItem",
    "SiteConfig",
    "SiteConfigError",
    "ThemeMode",
    "ThemeSetting",
]
