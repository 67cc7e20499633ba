"""Named export specifiers (`export { a, b as c }`)."""

from __future__ import annotations

from typing import Tuple

from ..comments import parse_comment
from ..models import Export
from ..policy import should_ignore
from ..syntax.base import ExportSpecifierNode, SourceFile
from ..validation import Validation, collect
from .base import Extractor, ParserContext, comment_info, documentable
from .constants import variable_signature


class ExportExtractor(Extractor):
    """Every specifier needs a comment directly in front of it; exports keep source order."""

    field = "exports"

    def extract(self, source: SourceFile, context: ParserContext) -> Validation[Tuple[Export, ...]]:
        results = []
        for specifier in source.exports:
            if not specifier.leading_comments:
                results.append(
                    Validation.failure(f"Missing {specifier.name} documentation in {context.location}")
                )
                continue
            if should_ignore(parse_comment(specifier.leading_comments[0])):
                continue
            results.append(self._export(specifier, context))
        return collect(results).map(tuple)

    @staticmethod
    def _export(specifier: ExportSpecifierNode, context: ParserContext) -> Validation[Export]:
        comment = parse_comment(specifier.leading_comments[0])
        signature = variable_signature(specifier.name, specifier.type_text)
        return comment_info(specifier.name, comment, context).map(
            lambda info: Export(doc=documentable(specifier.name, info), signature=signature)
        )
