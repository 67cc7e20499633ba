"""Declaration extractors, one per module collection."""

from __future__ import annotations

from typing import Tuple

from .base import Extractor, ParserContext, signature_before_body, strip_import_types
from .classes import ClassExtractor
from .constants import ConstantExtractor
from .exports import ExportExtractor
from .functions import FunctionExtractor
from .interfaces import InterfaceExtractor
from .module_docs import module_documentation, module_name
from .type_aliases import TypeAliasExtractor


def default_extractors() -> Tuple[Extractor, ...]:
    """Return one extractor per `Module` collection."""
    return (
        ClassExtractor(),
        InterfaceExtractor(),
        FunctionExtractor(),
        TypeAliasExtractor(),
        ConstantExtractor(),
        ExportExtractor(),
    )


__all__ = [
    "ClassExtractor",
    "ConstantExtractor",
    "ExportExtractor",
    "Extractor",
    "FunctionExtractor",
    "InterfaceExtractor",
    "ParserContext",
    "TypeAliasExtractor",
    "default_extractors",
    "module_documentation",
    "module_name",
    "signature_before_body",
    "strip_import_types",
]
