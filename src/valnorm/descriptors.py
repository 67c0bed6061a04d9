from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeAlias

from valnorm.constants import PRIMITIVE_TAGS
from valnorm.errors import InvalidDescriptorError

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class TypeTag:
    name: str


@dataclass(slots=True, frozen=True)
class Predicate:
    """Accepts the value unchanged when `check` returns a truthy result."""

    check: Callable[..., Any]


@dataclass(slots=True, frozen=True)
class Coercer:
    """Returns whatever `convert` returns; `NO_MATCH` rejects the value."""

    convert: Callable[..., Any]


@dataclass(slots=True, frozen=True)
class OneOf:
    options: tuple[Descriptor, ...]


Descriptor: TypeAlias = "TypeTag | Predicate | Coercer | OneOf"

# Parses to a list with no options, which rejects every value.
NEVER = OneOf(())


def _invalid(message: str, raw: Any, *, strict: bool) -> Descriptor:
    if strict:
        raise InvalidDescriptorError(message)
    logger.warning("Ignoring invalid descriptor %r: %s", raw, message)
    return NEVER


def parse_descriptor(raw: Any, *, strict: bool = True) -> Descriptor:
    """Turn shorthand (tag name, callable, list of either) into a descriptor.

    Already-parsed descriptors are returned as is. With `strict` disabled an
    invalid descriptor never matches instead of raising.
    """
    if isinstance(raw, TypeTag | Predicate | Coercer | OneOf):
        return raw
    if isinstance(raw, str):
        if raw not in PRIMITIVE_TAGS:
            supported = ", ".join(PRIMITIVE_TAGS)
            return _invalid(f"Unknown type tag '{raw}'. Supported tags: {supported}", raw, strict=strict)
        return TypeTag(raw)
    if callable(raw):
        return Predicate(raw)
    if isinstance(raw, list | tuple):
        if not raw:
            return _invalid("Descriptor list must contain at least one descriptor", raw, strict=strict)
        return OneOf(tuple(parse_descriptor(item, strict=strict) for item in raw))
    return _invalid(
        f"Descriptor must be a type tag, a callable or a list of descriptors, got {type(raw).__name__}",
        raw,
        strict=strict,
    )


__all__ = [
    "NEVER",
    "Coercer",
    "Descriptor",
    "OneOf",
    "Predicate",
    "TypeTag",
    "parse_descriptor",
]
