"""Exported type aliases."""

from __future__ import annotations

from typing import Tuple

from ..models import TypeAlias
from ..policy import should_ignore
from ..syntax.base import SourceFile
from ..validation import Validation, collect
from .base import Extractor, ParserContext, comment_info, documentable, last_comment, sort_by_name, strip_import_types


class TypeAliasExtractor(Extractor):
    field = "type_aliases"

    def extract(self, source: SourceFile, context: ParserContext) -> Validation[Tuple[TypeAlias, ...]]:
        results = []
        for node in source.type_aliases:
            if not node.exported:
                continue
            comment = last_comment(node.jsdocs)
            if should_ignore(comment):
                continue
            signature = strip_import_types(node.text)
            results.append(
                comment_info(node.name, comment, context).map(
                    lambda info, name=node.name, signature=signature: TypeAlias(
                        doc=documentable(name, info), signature=signature
                    )
                )
            )
        return collect(results).map(sort_by_name)
