"""
Per-assertion flag store.

Each Assertion owns exactly one store; flags stay absent until first set and
are never removed.
"""
from __future__ import annotations
from typing import Any, Dict

from vouch.core.errors import UsageError

FLAG_NAMES = ("object", "negate", "contains", "tense", "message", "ssfi")

class FlagStore:
    __slots__ = FLAG_NAMES

    def _check(self, key: str):
        if key not in FLAG_NAMES:
            raise UsageError(f"unknown flag {key!r} (known: {', '.join(FLAG_NAMES)})")

    def get(self, key: str) -> Any:
        self._check(key)
        return getattr(self, key, None)

    def set(self, key: str, value: Any) -> Any:
        self._check(key)
        setattr(self, key, value)
        return value

    def has(self, key: str) -> bool:
        self._check(key)
        return hasattr(self, key)

    def all(self) -> Dict[str, Any]:
        return {k: getattr(self, k) for k in FLAG_NAMES if hasattr(self, k)}

    def __repr__(self):
        shown = {k: v for k, v in self.all().items() if k != "ssfi"}
        return f"FlagStore({shown!r})"
