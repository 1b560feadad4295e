"""Helpers for editing the sidebar in ``site.yaml`` without losing comments.

The sidebar grows by hand-written entries and, once a section is large
enough, gets switched over to directory auto-generation. The functions here
apply both edits to the YAML source of truth through ruamel.yaml's round-trip
loader, so comments, quoting, and key order survive, and then reload the
result to make sure it still describes a valid site.

Example
-------
.. code-block:: python

    from pathlib import Path
    from daridev_docs.edit import add_sidebar_item, autogenerate_group

    add_sidebar_item(
        Path("config/site.yaml"),
        group="Coolify",
        label="Enable Auto Deploy in Coolify",
        slug="coolify/enable-auto-deploy",
    )
    autogenerate_group(Path("config/site.yaml"), group="Reference", directory="reference")
"""

from __future__ import annotations

import typing as typ

from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap, CommentedSeq

from .config import SiteConfig, SiteConfigError, load_site_config
from .serialization import to_site_yaml_mapping

if typ.TYPE_CHECKING:
    from pathlib import Path


def _build_roundtrip_yaml() -> YAML:
    yaml = YAML()
    yaml.preserve_quotes = True
    yaml.width = 120
    yaml.indent(mapping=2, sequence=4, offset=2)
    return yaml


def _load_document(config_path: Path, yaml: YAML) -> CommentedMap:
    if not config_path.exists():
        msg = f"Configuration file '{config_path}' not found."
        raise FileNotFoundError(msg)
    with config_path.open("r", encoding="utf-8") as handle:
        document = yaml.load(handle) or CommentedMap()
    if not isinstance(document, CommentedMap):
        msg = "Top-level configuration must be a mapping"
        raise SiteConfigError(msg)
    return document


def _sidebar(document: CommentedMap) -> CommentedSeq:
    sidebar = document.get("sidebar")
    if sidebar is None:
        sidebar = CommentedSeq()
        document["sidebar"] = sidebar
    if not isinstance(sidebar, CommentedSeq):
        msg = "'sidebar' must be a list"
        raise SiteConfigError(msg)
    return sidebar


def _find_group(sidebar: CommentedSeq, label: str) -> CommentedMap | None:
    for group in sidebar:
        if isinstance(group, CommentedMap) and group.get("label") == label:
            return group
    return None


def _save(config_path: Path, yaml: YAML, document: CommentedMap) -> SiteConfig:
    """Write ``document`` and return the reloaded, validated configuration.

    The original text is restored when writing fails or the edited document
    does not load.
    """
    original = config_path.read_text(encoding="utf-8")
    try:
        with config_path.open("w", encoding="utf-8") as handle:
            yaml.dump(document, handle)
        return load_site_config(config_path)
    except Exception:
        config_path.write_text(original, encoding="utf-8")
        raise


def add_sidebar_item(
    config_path: Path, *, group: str, label: str, slug: str
) -> SiteConfig:
    """Append ``label``/``slug`` to the ``group`` items and persist the file.

    The group is created at the end of the sidebar when it does not exist. If
    the slug is already listed in the group its label is updated in place.

    Raises
    ------
    SiteConfigError
        If ``group`` auto-generates its pages, or the edited file no longer
        describes a valid configuration.
    """
    yaml = _build_roundtrip_yaml()
    document = _load_document(config_path, yaml)
    sidebar = _sidebar(document)

    entry = _find_group(sidebar, group)
    if entry is None:
        entry = CommentedMap([("label", group), ("items", CommentedSeq())])
        sidebar.append(entry)
    if "autogenerate" in entry:
        msg = f"Sidebar group '{group}' is auto-generated; it has no items to extend."
        raise SiteConfigError(msg)

    items = entry.get("items")
    if items is None:
        items = CommentedSeq()
        entry["items"] = items
    if not isinstance(items, CommentedSeq):
        msg = f"Sidebar group '{group}' items must be a list"
        raise SiteConfigError(msg)

    for item in items:
        if isinstance(item, CommentedMap) and item.get("slug") == slug:
            item["label"] = label
            break
    else:
        items.append(CommentedMap([("label", label), ("slug", slug)]))

    return _save(config_path, yaml, document)


def autogenerate_group(config_path: Path, *, group: str, directory: str) -> SiteConfig:
    """Replace the ``group`` items with auto-generation from ``directory``.

    The group is created at the end of the sidebar when it does not exist;
    ``autogenerate`` takes the position ``items`` held.
    """
    yaml = _build_roundtrip_yaml()
    document = _load_document(config_path, yaml)
    sidebar = _sidebar(document)
    value = CommentedMap([("directory", directory)])

    entry = _find_group(sidebar, group)
    if entry is None:
        sidebar.append(CommentedMap([("label", group), ("autogenerate", value)]))
        return _save(config_path, yaml, document)

    if "items" in entry:
        position = list(entry.keys()).index("items")
        del entry["items"]
        entry.insert(position, "autogenerate", value)
    else:
        entry["autogenerate"] = value
    return _save(config_path, yaml, document)


def _to_commented(value: typ.Any) -> typ.Any:
    if isinstance(value, dict):
        return CommentedMap((key, _to_commented(item)) for key, item in value.items())
    if isinstance(value, list):
        return CommentedSeq(_to_commented(item) for item in value)
    return value


def write_site_config(
    config_path: Path, config: SiteConfig, *, force: bool = False
) -> Path:
    """Write ``config`` as a fresh ``site.yaml`` document.

    Raises
    ------
    FileExistsError
        If ``config_path`` exists and ``force`` is not set.
    """
    if config_path.exists() and not force:
        msg = f"Configuration file '{config_path}' already exists; pass force to overwrite."
        raise FileExistsError(msg)
    config_path.parent.mkdir(parents=True, exist_ok=True)
    yaml = _build_roundtrip_yaml()
    with config_path.open("w", encoding="utf-8") as handle:
        yaml.dump(_to_commented(to_site_yaml_mapping(config)), handle)
    return config_path


__all__ = ["add_sidebar_item", "autogenerate_group", "write_site_config"]
