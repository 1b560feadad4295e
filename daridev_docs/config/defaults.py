"""The canonical Daridev Docs site configuration."""

from __future__ import annotations

from .models import Autogenerate, SidebarGroup, SidebarItem, SiteConfig, ThemeSetting

SITE_TITLE = "Daridev Docs"


def default_site_config() -> SiteConfig:
    """Return the configuration the published documentation site is built with."""
    return SiteConfig(
        title=SITE_TITLE,
        sidebar=(
            SidebarGroup(
                label="Guides",
                items=(SidebarItem(label="Example Guide", slug="guides/example"),),
            ),
            SidebarGroup(
                label="Reference",
                autogenerate=Autogenerate(directory="reference"),
            ),
            SidebarGroup(
                label="Frontend",
                items=(
                    SidebarItem(label="Container", slug="frontend/container"),
                    SidebarItem(label="Components", slug="frontend/componentes"),
                    SidebarItem(
                        label="Deploy Astro to Coolify",
                        slug="frontend/deploy-astro-coolify",
                    ),
                ),
            ),
            SidebarGroup(
                label="Backend",
                items=(
                    SidebarItem(
                        label="Deploy Django in Coolify",
                        slug="backend/deploy-django-cooolify",
                    ),
                ),
            ),
            SidebarGroup(
                label="Coolify",
                items=(
                    SidebarItem(
                        label="Enable Auto Deploy in Coolify",
                        slug="coolify/enable-auto-deploy",
                    ),
                ),
            ),
        ),
        dark=ThemeSetting(mode="dark", flavor="macchiato", accent="sky"),
        light=ThemeSetting(mode="light", flavor="latte", accent="sky"),
    )


__all__ = ["SITE_TITLE", "default_site_config"]
