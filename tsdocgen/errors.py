"""Exception hierarchy surfaced at pipeline stage boundaries."""

from __future__ import annotations

from typing import Iterable, Tuple


class DocsError(RuntimeError):
    """Base class for failures that terminate a tsdocgen run."""


class ParseError(DocsError):
    """Raised when source validation produced one or more errors."""

    def __init__(self, errors: Iterable[str]) -> None:
        self.errors: Tuple[str, ...] = tuple(errors)
        super().__init__("\n".join(self.errors))


class ExampleVerificationError(DocsError):
    """Raised when the example type-check process exits unsuccessfully."""

    def __init__(self, stderr: str) -> None:
        self.stderr = stderr
        super().__init__(stderr)


class ResourceError(DocsError):
    """Raised when a filesystem operation fails for a given path."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(message)


__all__ = ["DocsError", "ExampleVerificationError", "ParseError", "ResourceError"]
