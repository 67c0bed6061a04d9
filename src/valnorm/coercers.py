"""Builtin coercers, one per type tag that needs more than a type check.

Each coercer receives the already thunk-evaluated value and returns either
the coerced value or `NO_MATCH`.
"""

from __future__ import annotations

import datetime as dt
import math
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from valnorm.config import NormalizerConfig
from valnorm.constants import (
    TAG_BOOLEAN,
    TAG_DATE,
    TAG_NUMBER,
    TAG_OBJECT,
    TAG_STRING,
)
from valnorm.values import NO_MATCH, primitive, type_of

BuiltinCoercer = Callable[[Any, NormalizerConfig], Any]

EPOCH = dt.datetime(1970, 1, 1, tzinfo=dt.timezone.utc)


def match_type(tag: str, value: Any) -> Any:
    if type_of(value) == tag:
        return value
    return NO_MATCH


def coerce_string(value: Any, config: NormalizerConfig) -> Any:
    if type_of(value) == TAG_OBJECT:
        # Called through the type so a __str__ returning a non-string is
        # rejected below rather than raising TypeError.
        value = type(value).__str__(value)
    return match_type(TAG_STRING, primitive(value))


def coerce_number(value: Any, config: NormalizerConfig) -> Any:
    return match_type(TAG_NUMBER, primitive(value))


def coerce_boolean(value: Any, config: NormalizerConfig) -> Any:
    return match_type(TAG_BOOLEAN, primitive(value))


def coerce_object(value: Any, config: NormalizerConfig) -> Any:
    if value is None and config.object_accepts_none:
        return value
    return match_type(TAG_OBJECT, value)


def coerce_date(value: Any, config: NormalizerConfig) -> Any:
    value = primitive(value)
    if isinstance(value, dt.date):
        return value
    if type_of(value) != TAG_NUMBER:
        return NO_MATCH
    try:
        if not math.isfinite(value):
            return NO_MATCH
        return EPOCH + dt.timedelta(milliseconds=value)
    except OverflowError:
        # Too large for a float, or outside the datetime range (years 1..9999).
        return NO_MATCH


BUILTIN_COERCERS: Mapping[str, BuiltinCoercer] = MappingProxyType(
    {
        TAG_STRING: coerce_string,
        TAG_NUMBER: coerce_number,
        TAG_BOOLEAN: coerce_boolean,
        TAG_OBJECT: coerce_object,
        TAG_DATE: coerce_date,
    }
)


__all__ = [
    "BUILTIN_COERCERS",
    "EPOCH",
    "BuiltinCoercer",
    "coerce_boolean",
    "coerce_date",
    "coerce_number",
    "coerce_object",
    "coerce_string",
    "match_type",
]
