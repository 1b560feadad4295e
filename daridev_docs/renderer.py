"""Render the Astro configuration module for the documentation site.

This module turns a :class:`~daridev_docs.config.SiteConfig` into the
``astro.config.mjs`` file the site framework reads at build time. The main
entry point is :class:`AstroConfigRenderer`, which loads the packaged Jinja
template, emits every string through a JavaScript literal filter, and writes
the result to disk:

>>> from pathlib import Path
>>> from daridev_docs.config import default_site_config
>>> renderer = AstroConfigRenderer(default_site_config())
>>> "catppuccin({" in renderer.render()
True
>>> renderer.run(Path("astro.config.mjs"))  # doctest: +SKIP
PosixPath('astro.config.mjs')

Side effects are limited to reading the template and writing the output file.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import msgspec.json as msgspec_json
from jinja2 import Environment, FileSystemLoader, StrictUndefined

if typ.TYPE_CHECKING:
    from .config import SiteConfig

TEMPLATE_NAME = "astro.config.mjs.jinja"


def js_literal(value: str) -> str:
    """Return ``value`` as a JavaScript string literal."""
    return msgspec_json.encode(value).decode("utf-8")


class AstroConfigRenderer:
    """Render ``astro.config.mjs`` from structured site configuration."""

    def __init__(
        self,
        config: SiteConfig,
        *,
        source: str = "config/site.yaml",
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the renderer and its Jinja environment.

        Parameters
        ----------
        config : SiteConfig
            Validated site configuration to express as framework config.
        source : str, optional
            Name of the source-of-truth file, mentioned in the generated
            header comment.
        templates_dir : Path, optional
            Directory containing ``astro.config.mjs.jinja``. Defaults to the
            ``daridev_docs/templates`` directory.
        """
        self.config = config
        self.source = source
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(self.templates_dir),
            autoescape=False,  # noqa: S701 - output is JavaScript, not HTML
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        self.env.filters["js"] = js_literal
        self.template = self.env.get_template(TEMPLATE_NAME)

    def render(self) -> str:
        """Return the rendered module text, ending with a newline."""
        text = self.template.render(config=self.config, source=self.source)
        if not text.endswith("\n"):
            text += "\n"
        return text

    def run(self, output_path: Path) -> Path:
        """Render and write the module to ``output_path``, returning the path."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render(), encoding="utf-8")
        return output_path


__all__ = ["TEMPLATE_NAME", "AstroConfigRenderer", "js_literal"]
