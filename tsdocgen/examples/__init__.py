"""Example verification: harvest, rewrite, type-check."""

from __future__ import annotations

from .harvester import examples_dir, harvest_examples
from .imports import add_assert_import, prepare_examples, rewrite_imports
from .runner import ExampleRunner, spawn

__all__ = [
    "ExampleRunner",
    "add_assert_import",
    "examples_dir",
    "harvest_examples",
    "prepare_examples",
    "rewrite_imports",
    "spawn",
]
