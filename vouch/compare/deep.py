"""
Equality used by the predicates.

`strict_equal` mirrors identity-or-same-primitive semantics: containers and
objects compare by identity; numbers, strings, bytes, booleans and None
compare by value within their own kind. `deep_equal` walks structures.
"""
from __future__ import annotations
import re
from collections.abc import Mapping, Set
from datetime import date
from numbers import Number
from typing import Any, Optional

def _primitive_kind(value: Any) -> Optional[str]:
    if value is None:
        return "none"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, Number):
        return "number"
    if isinstance(value, str):
        return "str"
    if isinstance(value, bytes):
        return "bytes"
    return None

def strict_equal(a: Any, b: Any) -> bool:
    if a is b:
        return True
    kind = _primitive_kind(a)
    if kind is None or kind != _primitive_kind(b):
        return False
    return bool(a == b)

def deep_equal(a: Any, b: Any, _seen: Optional[set] = None) -> bool:
    if strict_equal(a, b):
        return True
    if _primitive_kind(a) or _primitive_kind(b):
        return False
    # cyclic structures: a pair already under comparison is assumed equal
    seen = _seen if _seen is not None else set()
    pair = (id(a), id(b))
    if pair in seen:
        return True
    seen.add(pair)

    if isinstance(a, Mapping) or isinstance(b, Mapping):
        if not (isinstance(a, Mapping) and isinstance(b, Mapping)):
            return False
        if set(a.keys()) != set(b.keys()):
            return False
        return all(deep_equal(a[k], b[k], seen) for k in a)
    if isinstance(a, (list, tuple)) or isinstance(b, (list, tuple)):
        if isinstance(a, list) != isinstance(b, list) or isinstance(a, tuple) != isinstance(b, tuple):
            return False
        if len(a) != len(b):
            return False
        return all(deep_equal(x, y, seen) for x, y in zip(a, b))
    if isinstance(a, Set) and isinstance(b, Set):
        return a == b
    if isinstance(a, date) and isinstance(b, date):
        return type(a) is type(b) and a == b
    if isinstance(a, re.Pattern) and isinstance(b, re.Pattern):
        return a.pattern == b.pattern and a.flags == b.flags
    if type(a) is not type(b):
        return False
    if hasattr(a, "__dict__") and hasattr(b, "__dict__") and not callable(a):
        return deep_equal(vars(a), vars(b), seen)
    return bool(a == b)
