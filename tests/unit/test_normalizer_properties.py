"""Seeded property checks for the normalizer:
- Tag semantics: a tag matches iff the (unboxed) runtime type equals it
- Short-circuit: a descriptor list returns the first non-failing entry
- Idempotence: re-normalizing a result with the same tag returns it unchanged
"""

from __future__ import annotations

import random
from typing import Any

from valnorm import NO_MATCH, PRIMITIVE_TAGS, Symbol, box, normalize, type_of

SEED = 42
NUM_TRIALS = 200

_TAGS_WITHOUT_DATE = tuple(tag for tag in PRIMITIVE_TAGS if tag != "date")


def _random_value(rng: random.Random) -> Any:
    choices = [
        lambda: None,
        lambda: rng.choice([True, False]),
        lambda: rng.randint(-1000, 1000),
        lambda: rng.uniform(-1e6, 1e6),
        lambda: rng.choice([float("nan"), float("inf"), float("-inf")]),
        lambda: "".join(rng.choice("abcxyz") for _ in range(rng.randint(0, 6))),
        lambda: Symbol(str(rng.random())),
        lambda: {"key": rng.random()},
        lambda: [rng.random()],
        lambda: box(rng.randint(0, 10)),
        lambda: box(rng.choice([True, False])),
        lambda: box("boxed"),
    ]
    return rng.choice(choices)()


def _random_descriptor_list(rng: random.Random) -> list[str]:
    return rng.sample(PRIMITIVE_TAGS, rng.randint(1, len(PRIMITIVE_TAGS)))


def _same(left: Any, right: Any) -> bool:
    if left is right:
        return True
    if isinstance(left, float) and isinstance(right, float) and left != left and right != right:
        return True
    # Dates are built fresh per call, so compare by value.
    return type(left) is type(right) and left == right


def test_plain_tags_match_runtime_type() -> None:
    rng = random.Random(SEED)
    for _ in range(NUM_TRIALS):
        value = _random_value(rng)
        for tag in ("symbol", "function", "undefined", "number", "boolean"):
            result = normalize(tag, value)
            if type_of(value) == tag:
                assert _same(result, value)
            elif tag in {"symbol", "function", "undefined"}:
                assert result is NO_MATCH


def test_list_returns_first_non_failing_entry() -> None:
    rng = random.Random(SEED)
    for _ in range(NUM_TRIALS):
        value = _random_value(rng)
        descriptors = _random_descriptor_list(rng)
        expected: Any = NO_MATCH
        for tag in descriptors:
            candidate = normalize(tag, value)
            if candidate is not NO_MATCH:
                expected = candidate
                break
        result = normalize(descriptors, value)
        assert _same(result, expected), f"{descriptors!r} on {value!r}: expected {expected!r}, got {result!r}"


def test_results_are_idempotent_per_tag() -> None:
    rng = random.Random(SEED)
    for _ in range(NUM_TRIALS):
        value = _random_value(rng)
        for tag in (*_TAGS_WITHOUT_DATE, "date"):
            first = normalize(tag, value)
            if first is NO_MATCH:
                continue
            second = normalize(tag, first)
            assert _same(second, first), f"{tag} drifted on {value!r}: {first!r} -> {second!r}"


def test_thunk_wrapped_values_match_like_direct_values() -> None:
    rng = random.Random(SEED)
    for _ in range(NUM_TRIALS):
        value = _random_value(rng)
        tag = rng.choice(_TAGS_WITHOUT_DATE)
        if tag == "function":
            continue
        direct = normalize(tag, value)
        deferred = normalize(tag, lambda current=value: current)
        assert _same(direct, deferred) or (direct is NO_MATCH and deferred is NO_MATCH)
