"""Unit tests for the site configuration dataclasses.

These tests pin the structural invariants the site framework relies on: every
sidebar group carries exactly one of ``items`` or ``autogenerate``, labels and
slugs are non-empty, and the configuration holds one dark and one light theme
setting.
"""

from __future__ import annotations

import dataclasses as dc

import pytest

from daridev_docs.config import (
    Autogenerate,
    SidebarGroup,
    SidebarItem,
    SiteConfig,
    SiteConfigError,
    ThemeSetting,
    default_site_config,
)


def _themes() -> tuple[ThemeSetting, ThemeSetting]:
    return (
        ThemeSetting(mode="dark", flavor="macchiato", accent="sky"),
        ThemeSetting(mode="light", flavor="latte", accent="sky"),
    )


def test_group_rejects_both_items_and_autogenerate() -> None:
    """A group listing pages and auto-generating them is ambiguous."""
    with pytest.raises(SiteConfigError, match="exactly one"):
        SidebarGroup(
            label="Guides",
            items=(SidebarItem("Example Guide", "guides/example"),),
            autogenerate=Autogenerate("guides"),
        )


def test_group_rejects_neither_items_nor_autogenerate() -> None:
    """A group without a page source cannot be rendered."""
    with pytest.raises(SiteConfigError, match="exactly one"):
        SidebarGroup(label="Empty")


def test_group_accepts_explicit_empty_items() -> None:
    """An explicit empty items list still counts as the items variant."""
    group = SidebarGroup(label="Soon", items=())
    assert group.items == (), f"expected empty items tuple, got {group.items!r}"
    assert not group.is_autogenerated, "expected items group not to autogenerate"


def test_group_coerces_items_to_tuple() -> None:
    """Items passed as a list are stored as an immutable tuple."""
    group = SidebarGroup(label="Guides", items=[SidebarItem("A", "a")])  # type: ignore[arg-type]
    assert isinstance(group.items, tuple), (
        f"expected tuple items, got {type(group.items).__name__}"
    )


@pytest.mark.parametrize(
    ("label", "slug"),
    [("", "guides/example"), ("Example", ""), ("   ", "guides/example")],
)
def test_item_requires_label_and_slug(label: str, slug: str) -> None:
    """Sidebar items need both a label and a slug."""
    with pytest.raises(SiteConfigError):
        SidebarItem(label=label, slug=slug)


def test_autogenerate_requires_directory() -> None:
    """Auto-generation needs a directory to read."""
    with pytest.raises(SiteConfigError, match="directory"):
        Autogenerate(directory="")


def test_theme_setting_rejects_unknown_mode() -> None:
    """Only dark and light modes exist."""
    with pytest.raises(SiteConfigError, match="mode"):
        ThemeSetting(mode="sepia", flavor="latte", accent="sky")  # type: ignore[arg-type]


def test_site_config_requires_matching_modes() -> None:
    """The dark slot must carry the dark setting and vice versa."""
    dark, light = _themes()
    with pytest.raises(SiteConfigError, match="Dark theme"):
        SiteConfig(title="Docs", sidebar=(), dark=light, light=dark)


def test_site_config_is_immutable() -> None:
    """Configuration values are fixed for the lifetime of a build."""
    config = default_site_config()
    with pytest.raises(dc.FrozenInstanceError):
        config.title = "Other"  # type: ignore[misc]


def test_get_group_reports_known_labels() -> None:
    """Unknown group lookups list the labels that do exist."""
    config = default_site_config()
    assert config.get_group("Reference").is_autogenerated, (
        "expected Reference group to auto-generate"
    )
    with pytest.raises(KeyError, match="Guides"):
        config.get_group("Missing")


def test_default_config_matches_published_site() -> None:
    """The canonical configuration keeps the published sidebar order and theme."""
    config = default_site_config()
    labels = [group.label for group in config.sidebar]
    assert labels == ["Guides", "Reference", "Frontend", "Backend", "Coolify"], (
        f"unexpected sidebar order {labels!r}"
    )
    slugs = [item.slug for _, item in config.iter_items()]
    assert slugs == [
        "guides/example",
        "frontend/container",
        "frontend/componentes",
        "frontend/deploy-astro-coolify",
        "backend/deploy-django-cooolify",
        "coolify/enable-auto-deploy",
    ], f"unexpected slugs {slugs!r}"
    assert (config.dark.flavor, config.dark.accent) == ("macchiato", "sky")
    assert (config.light.flavor, config.light.accent) == ("latte", "sky")
