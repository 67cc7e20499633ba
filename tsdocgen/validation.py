"""Error-accumulating validation results.

`Validation` differs from exceptions in that independent checks are combined
applicatively: when several of them fail, every error is kept. Exceptions are
still used between pipeline stages, where the first failure wins; see
`Validation.unwrap`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, Iterable, List, Optional, Tuple, TypeVar

from .errors import ParseError

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Validation(Generic[T]):
    """Either a value or a non-empty tuple of error messages."""

    value: Optional[T] = None
    errors: Tuple[str, ...] = ()

    @classmethod
    def success(cls, value: T) -> "Validation[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, *errors: str) -> "Validation[Any]":
        if not errors:
            raise ValueError("A failed validation needs at least one error")
        return cls(errors=tuple(errors))

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def message(self) -> str:
        return "\n".join(self.errors)

    def map(self, fn: Callable[[T], U]) -> "Validation[U]":
        if self.errors:
            return Validation(errors=self.errors)
        return Validation.success(fn(self.value))  # type: ignore[arg-type]

    def bind(self, fn: Callable[[T], "Validation[U]"]) -> "Validation[U]":
        """Sequence a dependent step; stops at the first failure."""
        if self.errors:
            return Validation(errors=self.errors)
        return fn(self.value)  # type: ignore[arg-type]

    def unwrap(self) -> T:
        """Return the value or raise `ParseError` with every accumulated error."""
        if self.errors:
            raise ParseError(self.errors)
        return self.value  # type: ignore[return-value]


def collect(validations: Iterable[Validation[T]]) -> Validation[List[T]]:
    """Gather values in order, or the concatenation of every error."""
    values: List[T] = []
    errors: List[str] = []
    for validation in validations:
        if validation.errors:
            errors.extend(validation.errors)
        else:
            values.append(validation.value)  # type: ignore[arg-type]
    if errors:
        return Validation.failure(*errors)
    return Validation.success(values)


def traverse(items: Iterable[U], fn: Callable[[U], Validation[T]]) -> Validation[List[T]]:
    return collect(fn(item) for item in items)


def combine(**fields: Validation[Any]) -> Validation[Dict[str, Any]]:
    """Combine named validations into a dict, accumulating errors in argument order."""
    errors: List[str] = []
    values: Dict[str, Any] = {}
    for key, validation in fields.items():
        if validation.errors:
            errors.extend(validation.errors)
        else:
            values[key] = validation.value
    if errors:
        return Validation.failure(*errors)
    return Validation.success(values)


__all__ = ["Validation", "collect", "combine", "traverse"]
