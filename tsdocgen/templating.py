"""Jinja2 environment for the page templates shipped with tsdocgen."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined

TEMPLATES_DIR = Path(__file__).with_name("templates")


@lru_cache(maxsize=1)
def get_environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )


def render(template_name: str, **context: Any) -> str:
    return get_environment().get_template(template_name).render(**context)


__all__ = ["TEMPLATES_DIR", "get_environment", "render"]
