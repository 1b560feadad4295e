"""Typed configuration for the Daridev Docs Starlight site.

This package owns ``config/site.yaml`` and exposes the CLI used by
``uv run docs-config`` to render ``astro.config.mjs``, export JSON, check
sidebar references, and edit the sidebar.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from daridev_docs import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
