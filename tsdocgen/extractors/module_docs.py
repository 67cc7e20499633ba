"""Documentation of the module itself."""

from __future__ import annotations

from pathlib import PurePosixPath

from ..comments import parse_comment
from ..policy import CommentInfo
from ..syntax.base import SourceFile
from ..validation import Validation
from .base import ParserContext, comment_info

_UNDOCUMENTED = CommentInfo(description=None, since=None, category=None, examples=(), deprecated=False)


def module_name(context: ParserContext) -> str:
    return PurePosixPath(context.path[-1]).stem


def module_documentation(source: SourceFile, context: ParserContext) -> Validation[CommentInfo]:
    """Validate the first comment leading the file's first statement."""
    if source.leading_comments:
        comment = parse_comment(source.leading_comments[0])
        return comment_info(module_name(context), comment, context, is_module=True)
    settings = context.settings
    if settings.enforce_descriptions or settings.enforce_version:
        return Validation.failure(f"Missing documentation in {context.location} module")
    return Validation.success(_UNDOCUMENTED)
