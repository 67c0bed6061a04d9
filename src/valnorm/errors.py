from __future__ import annotations

from dataclasses import dataclass
from typing import Any

ERROR_CODE_INVALID_DESCRIPTOR = "INVALID_DESCRIPTOR"
ERROR_CODE_COERCION_MISMATCH = "COERCION_MISMATCH"
ERROR_CODE_INVALID_CONFIG = "INVALID_CONFIG"


class ValnormError(Exception):
    code = "VALNORM_ERROR"


class InvalidDescriptorError(ValnormError, TypeError):
    code = ERROR_CODE_INVALID_DESCRIPTOR


class ConfigError(ValnormError, ValueError):
    code = ERROR_CODE_INVALID_CONFIG


@dataclass(slots=True, eq=False)
class CoercionMismatchError(ValnormError, ValueError):
    descriptor: Any
    value: Any

    code = ERROR_CODE_COERCION_MISMATCH

    def to_payload(self) -> dict[str, object]:
        return {
            "code": self.code,
            "descriptor": repr(self.descriptor),
            "value": repr(self.value),
            "value_type": type(self.value).__name__,
        }

    def __str__(self) -> str:
        return f"{self.code}: descriptor={self.descriptor!r} rejected value={self.value!r}"


__all__ = [
    "ERROR_CODE_COERCION_MISMATCH",
    "ERROR_CODE_INVALID_CONFIG",
    "ERROR_CODE_INVALID_DESCRIPTOR",
    "CoercionMismatchError",
    "ConfigError",
    "InvalidDescriptorError",
    "ValnormError",
]
