"""Runtime value model: type tags, boxed primitives, symbols and the
failure sentinel shared by every coercer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Final, Protocol, runtime_checkable

from valnorm.constants import (
    TAG_BOOLEAN,
    TAG_FUNCTION,
    TAG_NUMBER,
    TAG_OBJECT,
    TAG_STRING,
    TAG_SYMBOL,
    TAG_UNDEFINED,
)


class _NoMatch:
    __slots__ = ()
    _instance: _NoMatch | None = None

    def __new__(cls) -> _NoMatch:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_MATCH"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        # Resolved as a module global, so unpickling yields the singleton.
        return "NO_MATCH"

    def __copy__(self) -> _NoMatch:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> _NoMatch:
        return self


NO_MATCH: Final = _NoMatch()


def is_match(result: Any) -> bool:
    return result is not NO_MATCH


class Symbol:
    """Unique identity token. Two symbols are equal only if they are the same object."""

    __slots__ = ("description",)

    def __init__(self, description: str | None = None) -> None:
        self.description = description

    def __repr__(self) -> str:
        if self.description is None:
            return "Symbol()"
        return f"Symbol({self.description!r})"


@runtime_checkable
class SupportsValueOf(Protocol):
    def value_of(self) -> Any: ...


@dataclass(slots=True, frozen=True)
class Boxed:
    """Object wrapper around a primitive, unwrapped by `primitive`."""

    value: Any

    def value_of(self) -> Any:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


def box(value: Any) -> Boxed:
    return Boxed(value)


def type_of(value: Any) -> str:
    if value is None:
        return TAG_UNDEFINED
    # bool subclasses int, so it has to be checked first.
    if isinstance(value, bool):
        return TAG_BOOLEAN
    if isinstance(value, int | float):
        return TAG_NUMBER
    if isinstance(value, str):
        return TAG_STRING
    if isinstance(value, Symbol):
        return TAG_SYMBOL
    if callable(value):
        return TAG_FUNCTION
    return TAG_OBJECT


def primitive(value: Any) -> Any:
    """Unwrap one level of boxing via `value_of()`; non-objects pass through."""
    if type_of(value) == TAG_OBJECT and callable(getattr(value, "value_of", None)):
        return value.value_of()
    return value


__all__ = [
    "NO_MATCH",
    "Boxed",
    "SupportsValueOf",
    "Symbol",
    "box",
    "is_match",
    "primitive",
    "type_of",
]
