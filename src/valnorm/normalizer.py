from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Final

from valnorm.coercers import BUILTIN_COERCERS, match_type
from valnorm.config import DEFAULT_CONFIG, NormalizerConfig
from valnorm.constants import (
    TAG_BOOLEAN,
    TAG_DATE,
    TAG_FUNCTION,
    TAG_NUMBER,
    TAG_OBJECT,
    TAG_STRING,
    TAG_SYMBOL,
    TAG_UNDEFINED,
)
from valnorm.descriptors import Coercer, Descriptor, OneOf, Predicate, TypeTag, parse_descriptor
from valnorm.errors import CoercionMismatchError
from valnorm.values import NO_MATCH

logger = logging.getLogger(__name__)


class _Unbound:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<unbound>"


UNBOUND: Final = _Unbound()

_FUNCTION_TAG = TypeTag(TAG_FUNCTION)


def invoke(fn: Callable[..., Any], context: Any, *args: Any) -> Any:
    """Call `fn`, passing `context` first when one is bound (like `self`)."""
    if context is UNBOUND:
        return fn(*args)
    return fn(context, *args)


def _tag_entry_point(tag: str) -> Callable[..., Any]:
    def entry_point(self: Normalizer, value: Any, *args: Any, context: Any = UNBOUND) -> Any:
        return self(tag, value, *args, context=context)

    entry_point.__name__ = tag
    entry_point.__qualname__ = f"Normalizer.{tag}"
    entry_point.__doc__ = f"Normalize `value` against the `{tag}` tag."
    return entry_point


@dataclass(slots=True, frozen=True)
class Normalizer:
    """Coerce values into the shape named by a descriptor.

    A descriptor is a type tag (`"string"`, `"number"`, ...), a predicate
    callable, a `Coercer`, or a list of descriptors tried left to right.
    Invocable values are called as thunks before coercion. Failed coercion
    returns `NO_MATCH`.

    `context`, when given, is passed as the first argument to thunks,
    predicates and coercers.
    """

    config: NormalizerConfig = DEFAULT_CONFIG

    def __call__(self, descriptor: Any, value: Any, *args: Any, context: Any = UNBOUND) -> Any:
        parsed, value = self._evaluate(descriptor, value, args, context)
        return self.coerce(parsed, value, context=context)

    def _evaluate(self, descriptor: Any, value: Any, args: tuple[Any, ...], context: Any) -> tuple[Descriptor, Any]:
        parsed = parse_descriptor(descriptor, strict=self.config.strict_descriptors)
        if callable(value) and self._should_invoke(parsed):
            logger.debug("Invoking thunk %r with %d extra argument(s)", value, len(args))
            value = invoke(value, context, *args)
        return parsed, value

    def _should_invoke(self, descriptor: Descriptor) -> bool:
        if not self.config.invoke_thunks:
            return False
        return not (self.config.defer_function_tag and descriptor == _FUNCTION_TAG)

    def coerce(self, descriptor: Any, value: Any, *, context: Any = UNBOUND) -> Any:
        """Dispatch on the descriptor without evaluating `value` as a thunk."""
        parsed = parse_descriptor(descriptor, strict=self.config.strict_descriptors)
        if isinstance(parsed, TypeTag):
            builtin = BUILTIN_COERCERS.get(parsed.name)
            if builtin is None:
                result = match_type(parsed.name, value)
            else:
                result = builtin(value, self.config)
        elif isinstance(parsed, Predicate):
            result = value if invoke(parsed.check, context, value) else NO_MATCH
        elif isinstance(parsed, Coercer):
            result = invoke(parsed.convert, context, value)
        else:
            result = self._first_match(parsed, value, context)
        if result is NO_MATCH:
            logger.debug("Descriptor %r rejected value %r", parsed, value)
        return result

    def _first_match(self, descriptor: OneOf, value: Any, context: Any) -> Any:
        for option in descriptor.options:
            result = self.coerce(option, value, context=context)
            if result is not NO_MATCH:
                return result
        return NO_MATCH

    def require(self, descriptor: Any, value: Any, *args: Any, context: Any = UNBOUND) -> Any:
        """Like calling the normalizer, but raise instead of returning `NO_MATCH`.

        The error carries the rejected value, i.e. the thunk result when
        `value` was invoked.
        """
        parsed, value = self._evaluate(descriptor, value, args, context)
        result = self.coerce(parsed, value, context=context)
        if result is NO_MATCH:
            raise CoercionMismatchError(descriptor=descriptor, value=value)
        return result

    def with_config(self, **changes: Any) -> Normalizer:
        return Normalizer(config=self.config.replace(**changes))

    # Defined last: these names shadow the `object` builtin in the class body.
    object = _tag_entry_point(TAG_OBJECT)
    number = _tag_entry_point(TAG_NUMBER)
    string = _tag_entry_point(TAG_STRING)
    symbol = _tag_entry_point(TAG_SYMBOL)
    boolean = _tag_entry_point(TAG_BOOLEAN)
    date = _tag_entry_point(TAG_DATE)
    function = _tag_entry_point(TAG_FUNCTION)
    undefined = _tag_entry_point(TAG_UNDEFINED)


DEFAULT_NORMALIZER = Normalizer()

normalize = DEFAULT_NORMALIZER


__all__ = [
    "DEFAULT_NORMALIZER",
    "UNBOUND",
    "Normalizer",
    "invoke",
    "normalize",
]
