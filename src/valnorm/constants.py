from __future__ import annotations

from typing import Literal

# Runtime type tags. The set is closed; `date` is a coercion target only and
# is never reported by `type_of`.
TAG_OBJECT = "object"
TAG_NUMBER = "number"
TAG_STRING = "string"
TAG_SYMBOL = "symbol"
TAG_BOOLEAN = "boolean"
TAG_DATE = "date"
TAG_FUNCTION = "function"
TAG_UNDEFINED = "undefined"

TagName = Literal[
    "object",
    "number",
    "string",
    "symbol",
    "boolean",
    "date",
    "function",
    "undefined",
]

PRIMITIVE_TAGS: tuple[str, ...] = (
    TAG_OBJECT,
    TAG_NUMBER,
    TAG_STRING,
    TAG_SYMBOL,
    TAG_BOOLEAN,
    TAG_DATE,
    TAG_FUNCTION,
    TAG_UNDEFINED,
)
