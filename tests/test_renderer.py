"""Unit tests for rendering ``astro.config.mjs``."""

from __future__ import annotations

import typing as typ

from daridev_docs.config import (
    SidebarGroup,
    SidebarItem,
    SiteConfig,
    ThemeSetting,
    default_site_config,
)
from daridev_docs.renderer import AstroConfigRenderer, js_literal

if typ.TYPE_CHECKING:
    from pathlib import Path


def test_render_includes_framework_imports() -> None:
    """The module imports the framework, the docs theme, and the colour plugin."""
    text = AstroConfigRenderer(default_site_config()).render()
    for line in (
        "import { defineConfig } from 'astro/config';",
        "import starlight from '@astrojs/starlight';",
        "import catppuccin from '@catppuccin/starlight';",
        "export default defineConfig({",
    ):
        assert line in text, f"expected {line!r} in rendered config"


def test_render_emits_both_group_shapes() -> None:
    """Items groups list entries; autogenerate groups name their directory."""
    text = AstroConfigRenderer(default_site_config()).render()
    assert '{ label: "Example Guide", slug: "guides/example" },' in text
    assert 'autogenerate: { directory: "reference" },' in text
    assert text.index('"Guides"') < text.index('"Reference"') < text.index('"Coolify"'), (
        "expected sidebar groups to keep their configured order"
    )


def test_render_passes_theme_settings_verbatim() -> None:
    """Both theme modes are handed to the colour plugin as configured."""
    text = AstroConfigRenderer(default_site_config()).render()
    assert 'dark: { flavor: "macchiato", accent: "sky" },' in text
    assert 'light: { flavor: "latte", accent: "sky" },' in text


def test_render_escapes_string_values() -> None:
    """Quotes and backslashes in labels cannot break out of the literal."""
    config = SiteConfig(
        title='Docs "beta"',
        sidebar=(
            SidebarGroup(label="It's", items=(SidebarItem("C:\\path", "guides/path"),)),
        ),
        dark=ThemeSetting(mode="dark", flavor="mocha", accent="red"),
        light=ThemeSetting(mode="light", flavor="latte", accent="red"),
    )
    text = AstroConfigRenderer(config).render()
    assert 'title: "Docs \\"beta\\"",' in text, "expected escaped title literal"
    assert '{ label: "C:\\\\path", slug: "guides/path" },' in text


def test_js_literal_uses_json_escaping() -> None:
    """JavaScript literals follow JSON string escaping."""
    assert js_literal('a"b') == '"a\\"b"'


def test_run_writes_file_with_trailing_newline(tmp_path: Path) -> None:
    """The rendered module is written as UTF-8 ending in a newline."""
    output = tmp_path / "site" / "astro.config.mjs"
    written = AstroConfigRenderer(default_site_config(), source="site.yaml").run(output)
    text = written.read_text(encoding="utf-8")
    assert written == output, f"expected {output}, got {written}"
    assert text.endswith("});\n"), "expected module to end with a single newline"
    assert "Generated by docs-config from site.yaml" in text
