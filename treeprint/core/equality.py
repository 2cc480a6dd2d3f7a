"""Deep structural equality for node payloads.

Node values and metadata are arbitrary objects. Searching for them compares
structure, not identity: two separately built lists with the same items
match, while values of different types never do (``1`` does not match
``1.0`` and ``True`` does not match ``1``).
"""

import dataclasses
from collections.abc import Mapping
from typing import Any, Set, Tuple


def deep_equal(a: Any, b: Any) -> bool:
    """Compare two payloads structurally.

    Self-referencing payloads are supported: a pair of objects already
    being compared further up the recursion is taken as equal.

    Args:
        a: First payload
        b: Second payload

    Returns:
        True if both payloads have the same type and equal structure
    """
    return _deep_equal(a, b, set())


def _deep_equal(a: Any, b: Any, visited: Set[Tuple[int, int]]) -> bool:
    if a is b:
        return True

    if type(a) is not type(b):
        return False

    if isinstance(a, (Mapping, list, tuple)) or dataclasses.is_dataclass(a) \
            or hasattr(a, '__dict__'):
        pair = (id(a), id(b))
        if pair in visited:
            return True
        visited.add(pair)

    if isinstance(a, Mapping):
        if a.keys() != b.keys():
            return False
        return all(_deep_equal(a[key], b[key], visited) for key in a)

    if isinstance(a, (list, tuple)):
        if len(a) != len(b):
            return False
        return all(_deep_equal(x, y, visited) for x, y in zip(a, b))

    if isinstance(a, (set, frozenset)):
        return a == b

    if dataclasses.is_dataclass(a):
        return all(
            _deep_equal(getattr(a, f.name), getattr(b, f.name), visited)
            for f in dataclasses.fields(a)
        )

    # Plain objects without their own __eq__ compare by attributes
    if type(a).__eq__ is object.__eq__ and hasattr(a, '__dict__'):
        return _deep_equal(vars(a), vars(b), visited)

    return a == b
