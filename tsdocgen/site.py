"""Jekyll site scaffold: home page, modules index, theme config and module pages."""

from __future__ import annotations

import os
import re
from typing import List, Sequence

from .config import Settings
from .filesystem import File, FileSystem
from .markdown import print_module
from .models import Module
from .templating import render

_REMOTE_THEME = re.compile(r"^remote_theme:.*$", re.MULTILINE)
_SEARCH_ENABLED = re.compile(r"^search_enabled:.*$", re.MULTILINE)
_AUX_LINK = re.compile(r"^  '\S* on GitHub':\n    - '.*'", re.MULTILINE)


def home_page(out_dir: str) -> File:
    return File(os.path.join(out_dir, "index.md"), render("home.md.j2"), overwrite=False)


def modules_index(out_dir: str) -> File:
    return File(os.path.join(out_dir, "modules", "index.md"), render("modules_index.md.j2"), overwrite=False)


def _aux_entry(label: str, homepage: str) -> str:
    return f"  '{label}':\n    - '{homepage}'"


def aux_link(settings: Settings) -> str:
    homepage = settings.project_homepage
    label = f"{settings.project_name} on GitHub" if "github" in homepage.lower() else "Homepage"
    return _aux_entry(label, homepage)


def site_config(settings: Settings) -> str:
    return render(
        "config.yml.j2",
        theme=settings.theme,
        search_enabled=str(settings.enable_search).lower(),
        aux_link=aux_link(settings),
    )


def patch_site_config(existing: str, settings: Settings) -> str:
    """Update theme, search and aux link lines in place, leaving the rest untouched.

    A patched aux link is always labelled `<project> on GitHub`.
    """
    patched = _REMOTE_THEME.sub(lambda _: f"remote_theme: {settings.theme}", existing)
    patched = _SEARCH_ENABLED.sub(lambda _: f"search_enabled: {str(settings.enable_search).lower()}", patched)
    github_link = _aux_entry(f"{settings.project_name} on GitHub", settings.project_homepage)
    return _AUX_LINK.sub(lambda _: github_link, patched)


async def config_file(settings: Settings, file_system: FileSystem) -> File:
    path = os.path.join(settings.out_dir, "_config.yml")
    if await file_system.exists(path):
        existing = await file_system.read_file(path)
        return File(path, patch_site_config(existing, settings), overwrite=True)
    return File(path, site_config(settings), overwrite=False)


def module_page_path(module: Module, out_dir: str) -> str:
    return os.path.join(out_dir, "modules", os.sep.join(module.path[1:]) + ".md")


def module_pages(modules: Sequence[Module], out_dir: str) -> List[File]:
    return [
        File(module_page_path(module, out_dir), print_module(module, order), overwrite=True)
        for order, module in enumerate(modules)
    ]


def stale_pages_pattern(out_dir: str) -> str:
    return os.path.join(out_dir, "**", "*.ts.md")


__all__ = [
    "aux_link",
    "config_file",
    "home_page",
    "module_page_path",
    "module_pages",
    "modules_index",
    "patch_site_config",
    "site_config",
    "stale_pages_pattern",
]
