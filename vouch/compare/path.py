"""
Dotted/bracket path resolution: ``"foo.bar[1].baz"``.

Mappings resolve by key, sequences by non-negative index, everything else by
attribute. Any missing step yields ``MISSING``.
"""
from __future__ import annotations
import re
from collections.abc import Mapping, Sequence
from typing import Any, List, Union

class _Missing:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "MISSING"

    def __bool__(self):
        return False

MISSING: Any = _Missing()

_PART = re.compile(r"\[(\d+)\]|([^.\[\]]+)")

def parse_path(path: str) -> List[Union[str, int]]:
    parts: List[Union[str, int]] = []
    for m in _PART.finditer(path):
        index, name = m.groups()
        parts.append(int(index) if index is not None else name)
    return parts

def _step(obj: Any, part: Union[str, int]) -> Any:
    if isinstance(obj, Mapping):
        if part in obj:
            return obj[part]
        if isinstance(part, int) and str(part) in obj:
            return obj[str(part)]
        return MISSING
    if isinstance(obj, Sequence) and not isinstance(obj, (str, bytes, bytearray)):
        if isinstance(part, str) and part.isdigit():
            part = int(part)
        if isinstance(part, int):
            return obj[part] if 0 <= part < len(obj) else MISSING
    if isinstance(part, int):
        return MISSING
    return getattr(obj, part, MISSING)

def get_path_value(path: str, obj: Any) -> Any:
    value = obj
    for part in parse_path(path):
        if value is MISSING or value is None:
            return MISSING
        value = _step(value, part)
    return value
