"""Unit tests for the framework-shaped mapping and its JSON encoding.

The scenarios here pin the interface handed to the site framework: the
integration and plugin nesting, the two sidebar group shapes, and theme values
reaching the colour plugin untouched.
"""

from __future__ import annotations

import msgspec.json as msgspec_json
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
from daridev_docs.serialization import (
    dumps_json,
    from_framework_mapping,
    loads_json,
    to_framework_mapping,
    to_site_yaml_mapping,
)

GUIDES_AND_REFERENCE = [
    {"label": "Guides", "items": [{"label": "Example Guide", "slug": "guides/example"}]},
    {"label": "Reference", "autogenerate": {"directory": "reference"}},
]


@pytest.fixture
def small_config() -> SiteConfig:
    """Return a configuration with one items group and one autogenerate group."""
    return SiteConfig(
        title="Daridev Docs",
        sidebar=(
            SidebarGroup(
                label="Guides",
                items=(SidebarItem(label="Example Guide", slug="guides/example"),),
            ),
            SidebarGroup(label="Reference", autogenerate=Autogenerate("reference")),
        ),
        dark=ThemeSetting(mode="dark", flavor="macchiato", accent="sky"),
        light=ThemeSetting(mode="light", flavor="latte", accent="sky"),
    )


def test_framework_mapping_shape(small_config: SiteConfig) -> None:
    """The mapping nests Starlight options and the Catppuccin plugin verbatim."""
    mapping = to_framework_mapping(small_config)
    assert list(mapping) == ["integrations"], f"unexpected top-level keys {list(mapping)!r}"
    (integration,) = mapping["integrations"]
    options = integration["starlight"]
    assert list(options) == ["title", "sidebar", "plugins"], (
        f"unexpected starlight option order {list(options)!r}"
    )
    assert options["sidebar"] == GUIDES_AND_REFERENCE, (
        f"unexpected sidebar serialization {options['sidebar']!r}"
    )


def test_theme_settings_reach_plugin_unmodified(small_config: SiteConfig) -> None:
    """Dark and light settings appear as written, without a mode field."""
    mapping = to_framework_mapping(small_config)
    plugin = mapping["integrations"][0]["starlight"]["plugins"][0]["catppuccin"]
    assert plugin == {
        "dark": {"flavor": "macchiato", "accent": "sky"},
        "light": {"flavor": "latte", "accent": "sky"},
    }, f"unexpected colour plugin parameters {plugin!r}"


def test_json_round_trip_preserves_order(small_config: SiteConfig) -> None:
    """Serializing and re-parsing yields an identical configuration."""
    text = dumps_json(small_config)
    parsed = loads_json(text)
    assert parsed == small_config, "expected JSON round trip to be lossless"
    decoded = msgspec_json.decode(text)
    sidebar = decoded["integrations"][0]["starlight"]["sidebar"]
    assert sidebar == GUIDES_AND_REFERENCE, f"unexpected JSON sidebar {sidebar!r}"


def test_compact_json_has_no_newlines() -> None:
    """An indent of zero produces single-line JSON."""
    assert "\n" not in dumps_json(default_site_config(), indent=0)


def test_site_yaml_mapping_uses_mode_keys() -> None:
    """The site.yaml document groups theme settings under dark and light."""
    document = to_site_yaml_mapping(default_site_config())
    assert list(document) == ["title", "sidebar", "theme"]
    assert document["theme"]["light"] == {"flavor": "latte", "accent": "sky"}


@pytest.mark.parametrize(
    ("mapping", "fragment"),
    [
        ({}, "integrations"),
        ({"integrations": []}, "exactly one 'starlight'"),
        (
            {"integrations": [{"starlight": {"title": "Docs", "plugins": []}}]},
            "exactly one 'catppuccin'",
        ),
        (
            {
                "integrations": [
                    {
                        "starlight": {
                            "title": "Docs",
                            "social": {},
                            "plugins": [],
                        }
                    }
                ]
            },
            "social",
        ),
        ({"integrations": [{"starlight": {}, "mdx": {}}]}, "exactly one plugin"),
        (
            {
                "integrations": [
                    {"starlight": {"title": "Docs", "plugins": []}},
                    {"sitemap": {}},
                ]
            },
            "'sitemap', which is not modelled",
        ),
        (
            {
                "integrations": [
                    {
                        "starlight": {
                            "title": "Docs",
                            "plugins": [
                                {"catppuccin": {}},
                                {"starlightLinksValidator": {}},
                            ],
                        }
                    }
                ]
            },
            "'starlightLinksValidator', which is not modelled",
        ),
    ],
)
def test_from_framework_mapping_rejects_other_shapes(
    mapping: dict[str, object], fragment: str
) -> None:
    """Unexpected nesting or unmodelled options are reported, not dropped."""
    with pytest.raises(SiteConfigError) as excinfo:
        from_framework_mapping(mapping)
    assert fragment in str(excinfo.value), (
        f"expected {fragment!r} in error message, got {excinfo.value}"
    )


def test_loads_json_wraps_decode_errors() -> None:
    """Malformed JSON surfaces as a configuration error."""
    with pytest.raises(SiteConfigError, match="Invalid configuration JSON"):
        loads_json("{not json")


@pytest.mark.parametrize("value", ["Daridev Docs ", " Intro", "guides/example\n"])
def test_padded_strings_are_rejected_by_models(value: str) -> None:
    """Values with surrounding whitespace never enter a configuration."""
    with pytest.raises(SiteConfigError, match="whitespace"):
        SidebarItem(label=value, slug="guides/example")
    with pytest.raises(SiteConfigError, match="whitespace"):
        SidebarItem(label="Intro", slug=value)


def test_padded_title_in_json_is_rejected_not_stripped(small_config: SiteConfig) -> None:
    """Parsing keeps values as written, so padding fails instead of vanishing."""
    mapping = to_framework_mapping(small_config)
    mapping["integrations"][0]["starlight"]["title"] = "Daridev Docs "
    mapping["integrations"][0]["starlight"]["sidebar"][0]["items"][0]["label"] = " Intro"
    with pytest.raises(SiteConfigError, match="whitespace"):
        from_framework_mapping(mapping)


def test_parsed_strings_match_rendered_values(small_config: SiteConfig) -> None:
    """Every string read back equals the one written, character for character."""
    parsed = loads_json(dumps_json(small_config))
    assert parsed.title == small_config.title, f"unexpected title {parsed.title!r}"
    assert [g.label for g in parsed.sidebar] == [g.label for g in small_config.sidebar], (
        "expected group labels to survive unchanged"
    )
    assert [i.label for _, i in parsed.iter_items()] == [
        i.label for _, i in small_config.iter_items()
    ], "expected item labels to survive unchanged"
