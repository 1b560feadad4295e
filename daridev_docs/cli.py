"""Cyclopts CLI entrypoint for managing the documentation site configuration.

The ``docs-config`` console script defined here keeps ``config/site.yaml`` the
single source of truth for the Starlight site: it renders ``astro.config.mjs``
from it, exports it as JSON, checks its sidebar references against the content
tree, and applies sidebar edits without losing comments. Typical usage runs
``docs-config check`` and ``docs-config generate`` before ``astro build``.

Examples
--------
Render the framework configuration with the defaults:

>>> from daridev_docs.cli import main
>>> main()  # doctest: +SKIP

Switch a group over to directory auto-generation:

>>> from daridev_docs.cli import app
>>> app(
...     ["autogenerate", "--group", "Frontend", "--directory", "frontend"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import DEFAULT_ASTRO_CONFIG, DEFAULT_CONFIG, DEFAULT_CONTENT_DIR
from .config import default_site_config, load_site_config
from .content import ContentIndex, check_site_config
from .edit import add_sidebar_item, autogenerate_group, write_site_config
from .renderer import AstroConfigRenderer
from .serialization import dumps_json

app = App(name="docs-config", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]

ConfigOption = typ.Annotated[
    Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Render astro.config.mjs from the site configuration.")
def generate(
    *,
    config: ConfigOption = DEFAULT_CONFIG,
    output: typ.Annotated[
        Path, Parameter(help="Where to write the Astro config", env_var="INPUT_OUTPUT")
    ] = DEFAULT_ASTRO_CONFIG,
) -> None:
    """Render the framework configuration module.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    output : Path, optional
        Destination of the rendered module; defaults to ``astro.config.mjs``.
    """
    site_config = load_site_config(config)
    renderer = AstroConfigRenderer(site_config, source=config.as_posix())
    written = renderer.run(output)
    print(f"wrote {_format_path(written)}")


@app.command(help="Export the framework configuration as JSON.")
def export(
    *,
    config: ConfigOption = DEFAULT_CONFIG,
    output: typ.Annotated[
        Path | None, Parameter(help="Write JSON here instead of stdout")
    ] = None,
) -> None:
    """Print or write the configuration in the framework's JSON shape."""
    text = dumps_json(load_site_config(config)) + "\n"
    if output is None:
        sys.stdout.write(text)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    print(f"wrote {_format_path(output)}")


@app.command(help="Check sidebar slugs, directories, and theme names.")
def check(
    *,
    config: ConfigOption = DEFAULT_CONFIG,
    content_dir: typ.Annotated[
        Path,
        Parameter(help="Starlight content root", env_var="INPUT_CONTENT_DIR"),
    ] = DEFAULT_CONTENT_DIR,
) -> None:
    """Report references the site build would reject.

    Raises
    ------
    SystemExit
        With status 1 when at least one problem is found.
    """
    site_config = load_site_config(config)
    problems = check_site_config(site_config, ContentIndex.scan(content_dir))
    for problem in problems:
        print(problem, file=sys.stderr)
    if problems:
        raise SystemExit(1)
    print(f"{_format_path(config)}: ok")


@app.command(name="add-item", help="Add a page to an explicit sidebar group.")
def add_item(
    *,
    group: typ.Annotated[str, Parameter(help="Sidebar group label")],
    label: typ.Annotated[str, Parameter(help="Navigation label")],
    slug: typ.Annotated[str, Parameter(help="Content page slug")],
    config: ConfigOption = DEFAULT_CONFIG,
) -> None:
    """Append (or relabel) a sidebar item and persist ``site.yaml``."""
    add_sidebar_item(config, group=group, label=label, slug=slug)
    print(f"{group}: {label} -> {slug}")


@app.command(help="Let the framework list a group's pages from a directory.")
def autogenerate(
    *,
    group: typ.Annotated[str, Parameter(help="Sidebar group label")],
    directory: typ.Annotated[str, Parameter(help="Content directory to list")],
    config: ConfigOption = DEFAULT_CONFIG,
) -> None:
    """Replace a group's explicit items with directory auto-generation."""
    autogenerate_group(config, group=group, directory=directory)
    print(f"{group}: autogenerate from {directory}")


@app.command(help="Write the canonical site configuration.")
def init(
    *,
    config: ConfigOption = DEFAULT_CONFIG,
    force: bool = False,
) -> None:
    """Create ``site.yaml`` holding the published site's configuration."""
    written = write_site_config(config, default_site_config(), force=force)
    print(f"wrote {_format_path(written)}")


def main() -> None:
    """Invoke the Cyclopts application that powers ``docs-config``.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
