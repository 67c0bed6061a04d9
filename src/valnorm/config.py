from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any

from valnorm.errors import ConfigError


@dataclass(slots=True, frozen=True)
class NormalizerConfig:
    invoke_thunks: bool = True
    # Lets `function` return the callable itself instead of its result.
    defer_function_tag: bool = True
    object_accepts_none: bool = False
    strict_descriptors: bool = True

    def replace(self, **changes: Any) -> NormalizerConfig:
        return config_from_mapping({**_as_dict(self), **changes})


DEFAULT_CONFIG = NormalizerConfig()

_FIELD_NAMES = tuple(item.name for item in fields(NormalizerConfig))


def _as_dict(config: NormalizerConfig) -> dict[str, Any]:
    return {name: getattr(config, name) for name in _FIELD_NAMES}


def _load_yaml(text: str) -> dict[str, Any]:
    import yaml

    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Normalizer config is not valid YAML: {exc}") from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigError("Normalizer config must be a mapping")
    return loaded


def config_from_mapping(data: Mapping[str, Any]) -> NormalizerConfig:
    unknown = sorted(str(key) for key in data if key not in _FIELD_NAMES)
    if unknown:
        supported = ", ".join(_FIELD_NAMES)
        raise ConfigError(f"Unknown normalizer config keys: {', '.join(unknown)}. Supported keys: {supported}")
    for key, value in data.items():
        if not isinstance(value, bool):
            raise ConfigError(f"Normalizer config `{key}` must be a boolean, got {type(value).__name__}")
    return replace(DEFAULT_CONFIG, **dict(data))


def load_config(source: NormalizerConfig | Mapping[str, Any] | str | None = None) -> NormalizerConfig:
    """Build a config from a mapping or YAML text. Never reads files."""
    if source is None:
        return DEFAULT_CONFIG
    if isinstance(source, NormalizerConfig):
        return source
    if isinstance(source, str):
        return config_from_mapping(_load_yaml(source))
    if isinstance(source, Mapping):
        return config_from_mapping(source)
    raise ConfigError(f"Unsupported normalizer config source: {type(source).__name__}")


__all__ = [
    "DEFAULT_CONFIG",
    "NormalizerConfig",
    "config_from_mapping",
    "load_config",
]
