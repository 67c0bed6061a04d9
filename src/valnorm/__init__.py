"""valnorm — coerce runtime values into the shape named by a descriptor."""

from valnorm.config import DEFAULT_CONFIG, NormalizerConfig, load_config
from valnorm.constants import PRIMITIVE_TAGS
from valnorm.descriptors import Coercer, Descriptor, OneOf, Predicate, TypeTag, parse_descriptor
from valnorm.errors import (
    CoercionMismatchError,
    ConfigError,
    InvalidDescriptorError,
    ValnormError,
)
from valnorm.normalizer import DEFAULT_NORMALIZER, Normalizer, normalize
from valnorm.values import NO_MATCH, Boxed, SupportsValueOf, Symbol, box, is_match, primitive, type_of

__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_NORMALIZER",
    "NO_MATCH",
    "PRIMITIVE_TAGS",
    "Boxed",
    "Coercer",
    "CoercionMismatchError",
    "ConfigError",
    "Descriptor",
    "InvalidDescriptorError",
    "Normalizer",
    "NormalizerConfig",
    "OneOf",
    "Predicate",
    "SupportsValueOf",
    "Symbol",
    "TypeTag",
    "ValnormError",
    "box",
    "is_match",
    "load_config",
    "normalize",
    "parse_descriptor",
    "primitive",
    "type_of",
]
