"""Check sidebar references and theme names before the site framework does.

The framework fails the build when a sidebar slug or an auto-generated
directory does not resolve to content, or when the colour theme receives a
name outside its palette. :func:`check_site_config` reports the same
conditions up front, as a list of :class:`ConfigProblem` records, by comparing
the configuration with a :class:`ContentIndex` of the content tree.

>>> from pathlib import Path
>>> from daridev_docs.config import default_site_config
>>> index = ContentIndex(slugs=frozenset({"guides/example"}))
>>> [p.code for p in check_site_config(default_site_config(), index)][:2]
['missing-directory', 'missing-slug']
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path, PurePosixPath

from ._constants import (
    CATPPUCCIN_ACCENTS,
    CATPPUCCIN_FLAVORS,
    CONTENT_EXTENSIONS,
    DEFAULT_CONTENT_DIR,
)
from .config.helpers import _normalize_slug

if typ.TYPE_CHECKING:
    from .config import SiteConfig


@dc.dataclass(frozen=True, slots=True)
class ConfigProblem:
    """A configuration reference the framework would reject at build time."""

    code: str
    location: str
    message: str

    def __str__(self) -> str:
        return f"{self.code}: {self.location}: {self.message}"


def slug_for_document(relative: PurePosixPath) -> str:
    """Return the page slug for a document path relative to the content root.

    The extension is dropped, segments are lower-cased, and an ``index``
    document takes its directory's slug.

    >>> slug_for_document(PurePosixPath("Guides/Example.md"))
    'guides/example'
    >>> slug_for_document(PurePosixPath("reference/index.mdx"))
    'reference'
    >>> slug_for_document(PurePosixPath("index.md"))
    ''
    """
    parts = [part.lower() for part in relative.with_suffix("").parts]
    if parts and parts[-1] == "index":
        parts.pop()
    return "/".join(parts)


@dc.dataclass(frozen=True, slots=True)
class ContentIndex:
    """Slugs and directories found under the documentation content root."""

    slugs: frozenset[str] = frozenset()
    directories: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        if not self.directories and self.slugs:
            object.__setattr__(self, "directories", _parent_directories(self.slugs))

    @classmethod
    def scan(cls, content_dir: Path = DEFAULT_CONTENT_DIR) -> ContentIndex:
        """Walk ``content_dir`` and index every Markdown-family document.

        Raises
        ------
        FileNotFoundError
            If ``content_dir`` does not exist or is not a directory.
        """
        if not content_dir.is_dir():
            msg = f"Content directory '{content_dir}' not found."
            raise FileNotFoundError(msg)
        slugs: set[str] = set()
        directories: set[str] = set()
        for path in sorted(content_dir.rglob("*")):
            if not path.is_file() or path.suffix.lower() not in CONTENT_EXTENSIONS:
                continue
            relative = PurePosixPath(path.relative_to(content_dir).as_posix())
            slugs.add(slug_for_document(relative))
            directories.update(_parent_directories([relative.as_posix().lower()]))
        return cls(slugs=frozenset(slugs), directories=frozenset(directories))

    def has_slug(self, slug: str) -> bool:
        """Return ``True`` when a document answers to ``slug``."""
        return _normalize_slug(slug) in self.slugs

    def has_directory(self, directory: str) -> bool:
        """Return ``True`` when ``directory`` holds at least one document."""
        return _normalize_slug(directory) in self.directories


def _parent_directories(paths: typ.Iterable[str]) -> frozenset[str]:
    """Return every ancestor directory of the given POSIX paths."""
    found: set[str] = set()
    for path in paths:
        parents = PurePosixPath(path).parents
        found.update(str(parent) for parent in parents if str(parent) != ".")
    return frozenset(found)


def check_site_config(config: SiteConfig, index: ContentIndex) -> list[ConfigProblem]:
    """Return every problem the framework would report, in sidebar order."""
    problems: list[ConfigProblem] = []
    seen: dict[str, str] = {}
    for group_index, group in enumerate(config.sidebar):
        where = f"sidebar[{group_index}]"
        if group.autogenerate is not None:
            directory = group.autogenerate.directory
            if not index.has_directory(directory):
                problems.append(
                    ConfigProblem(
                        "missing-directory",
                        f"{where}.autogenerate",
                        f"group '{group.label}' auto-generates from '{directory}', "
                        "which contains no documents",
                    )
                )
            continue
        for item_index, item in enumerate(group.items or ()):
            item_where = f"{where}.items[{item_index}]"
            key = _normalize_slug(item.slug)
            if key in seen:
                problems.append(
                    ConfigProblem(
                        "duplicate-slug",
                        item_where,
                        f"slug '{item.slug}' is already listed at {seen[key]}",
                    )
                )
            else:
                seen[key] = item_where
            if not index.has_slug(item.slug):
                problems.append(
                    ConfigProblem(
                        "missing-slug",
                        item_where,
                        f"'{item.label}' points at '{item.slug}', which has no document",
                    )
                )
    problems.extend(check_theme(config))
    return problems


def check_theme(config: SiteConfig) -> list[ConfigProblem]:
    """Return problems for flavors or accents outside the Catppuccin palette."""
    problems: list[ConfigProblem] = []
    for setting in config.themes:
        where = f"theme.{setting.mode}"
        if setting.flavor not in CATPPUCCIN_FLAVORS:
            problems.append(
                ConfigProblem(
                    "unknown-flavor",
                    f"{where}.flavor",
                    f"'{setting.flavor}' is not one of {', '.join(CATPPUCCIN_FLAVORS)}",
                )
            )
        if setting.accent not in CATPPUCCIN_ACCENTS:
            problems.append(
                ConfigProblem(
                    "unknown-accent",
                    f"{where}.accent",
                    f"'{setting.accent}' is not a Catppuccin accent colour",
                )
            )
    return problems


__all__ = [
    "ConfigProblem",
    "ContentIndex",
    "check_site_config",
    "check_theme",
    "slug_for_document",
]
