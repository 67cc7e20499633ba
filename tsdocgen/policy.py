"""Enforcement policies applied to parsed documentation comments."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .comments import Comment
from .config import Settings
from .validation import Validation, combine

_IGNORE_TAGS = ("internal", "ignore")


@dataclass(frozen=True)
class CommentInfo:
    """Validated summary of a declaration's documentation."""

    description: Optional[str]
    since: Optional[str]
    category: Optional[str]
    examples: Tuple[str, ...]
    deprecated: bool


def should_ignore(comment: Comment) -> bool:
    """Return True when the declaration is tagged `@internal` or `@ignore`."""
    return any(comment.has_tag(tag) for tag in _IGNORE_TAGS)


def validate(
    name: str,
    path: Sequence[str],
    comment: Comment,
    *,
    is_module: bool = False,
    settings: Settings,
) -> Validation[CommentInfo]:
    """Run every documentation check for `name`, accumulating all failures."""
    where = f"{'/'.join(path)}#{name}"
    checks = combine(
        since=_since(comment, where, settings),
        category=_category(comment, where),
        description=_description(comment, where, settings),
        examples=_examples(comment, where, settings, is_module),
    )
    return checks.map(
        lambda values: CommentInfo(
            description=values["description"],
            since=values["since"],
            category=values["category"],
            examples=values["examples"],
            deprecated=comment.has_tag("deprecated"),
        )
    )


def _since(comment: Comment, where: str, settings: Settings) -> Validation[Optional[str]]:
    since = comment.first("since")
    if since is None and settings.enforce_version:
        return Validation.failure(f'Missing "@since" tag in {where} documentation')
    return Validation.success(since)


def _category(comment: Comment, where: str) -> Validation[Optional[str]]:
    if not comment.has_tag("category"):
        return Validation.success(None)
    category = comment.first("category")
    if category is None:
        return Validation.failure(f"Missing @category value in {where} documentation")
    return Validation.success(category)


def _description(comment: Comment, where: str, settings: Settings) -> Validation[Optional[str]]:
    if comment.description is None and settings.enforce_descriptions:
        return Validation.failure(f"Missing description in {where} documentation")
    return Validation.success(comment.description)


def _examples(
    comment: Comment, where: str, settings: Settings, is_module: bool
) -> Validation[Tuple[str, ...]]:
    examples = tuple(value for value in comment.tags.get("example", []) if value)
    if settings.enforce_examples and not is_module and not examples:
        return Validation.failure(f"Missing examples in {where} documentation")
    return Validation.success(examples)


__all__ = ["CommentInfo", "should_ignore", "validate"]
