from __future__ import annotations

from valnorm.errors import (
    ERROR_CODE_COERCION_MISMATCH,
    ERROR_CODE_INVALID_CONFIG,
    ERROR_CODE_INVALID_DESCRIPTOR,
    CoercionMismatchError,
    ConfigError,
    InvalidDescriptorError,
    ValnormError,
)


def test_error_codes_are_stable() -> None:
    assert ERROR_CODE_INVALID_DESCRIPTOR == "INVALID_DESCRIPTOR"
    assert ERROR_CODE_COERCION_MISMATCH == "COERCION_MISMATCH"
    assert ERROR_CODE_INVALID_CONFIG == "INVALID_CONFIG"


def test_error_hierarchy() -> None:
    assert issubclass(InvalidDescriptorError, ValnormError)
    assert issubclass(InvalidDescriptorError, TypeError)
    assert issubclass(ConfigError, ValueError)
    assert issubclass(CoercionMismatchError, ValueError)
    assert InvalidDescriptorError("bad").code == "INVALID_DESCRIPTOR"


def test_coercion_mismatch_payload() -> None:
    error = CoercionMismatchError(descriptor=["number", "boolean"], value="7")

    payload = error.to_payload()
    assert payload == {
        "code": "COERCION_MISMATCH",
        "descriptor": "['number', 'boolean']",
        "value": "'7'",
        "value_type": "str",
    }
    assert str(error) == "COERCION_MISMATCH: descriptor=['number', 'boolean'] rejected value='7'"
