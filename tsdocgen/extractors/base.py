"""Shared pieces for declaration extractors."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Iterable, List, Sequence, Tuple, TypeVar

from ..comments import Comment, parse_comment
from ..config import Settings
from ..models import Documentable
from ..policy import CommentInfo, validate
from ..syntax.base import CallSignature, SourceFile
from ..validation import Validation

T = TypeVar("T")

_IMPORT_TYPE = re.compile(r'import\("(?:(?!").)*"\)\.')


@dataclass(frozen=True)
class ParserContext:
    """Where a declaration lives and which policies apply to it."""

    path: Tuple[str, ...]
    settings: Settings

    @property
    def location(self) -> str:
        return "/".join(self.path)


class Extractor(ABC):
    """Turns one kind of declaration of a source file into model records."""

    field: str

    @abstractmethod
    def extract(self, source: SourceFile, context: ParserContext) -> Validation[Tuple[Any, ...]]:
        """Return the records for `field`, or every error found while building them."""


def strip_import_types(text: str) -> str:
    """Drop inline import qualifiers: `import("./a").Foo` -> `Foo`."""
    return _IMPORT_TYPE.sub("", text)


def signature_before_body(form: CallSignature) -> str:
    """Source text of a function-like form up to, not including, its body."""
    if form.body_start is None:
        return form.text.rstrip().rstrip(";")
    return form.text[: form.body_start - form.start].rstrip()


def overload_signatures(overloads: Sequence[CallSignature], implementation: CallSignature) -> List[str]:
    return [signature_before_body(form) for form in overloads] + [signature_before_body(implementation)]


def last_comment(jsdocs: Sequence[str]) -> Comment:
    return parse_comment(jsdocs[-1] if jsdocs else "")


def comment_info(
    name: str, comment: Comment, context: ParserContext, *, is_module: bool = False
) -> Validation[CommentInfo]:
    return validate(name, context.path, comment, is_module=is_module, settings=context.settings)


def documentable(name: str, info: CommentInfo) -> Documentable:
    return Documentable(
        name=name,
        description=info.description,
        since=info.since,
        deprecated=info.deprecated,
        examples=info.examples,
        category=info.category,
    )


def sort_by_name(records: Iterable[T]) -> Tuple[T, ...]:
    return tuple(sorted(records, key=lambda record: record.doc.name))  # type: ignore[attr-defined]


def missing_name(kind: str, context: ParserContext) -> Validation[Any]:
    return Validation.failure(f"Missing {kind} name in module {context.location}")


__all__ = [
    "Extractor",
    "ParserContext",
    "comment_info",
    "documentable",
    "last_comment",
    "missing_name",
    "overload_signatures",
    "signature_before_body",
    "sort_by_name",
    "strip_import_types",
]
