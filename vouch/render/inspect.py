"""
Value rendering for failure messages.

`inspect` gives the full one-line debug form of a value; `object_display`
shortens it once it reaches the configured truncation threshold.
"""
from __future__ import annotations
import inspect as _pyinspect
from functools import partial
from collections.abc import Mapping
from typing import Any

from rich.pretty import pretty_repr

from vouch.system.settings import settings

_ONE_LINE = 1 << 16

def _is_plain_function(value: Any) -> bool:
    return _pyinspect.isroutine(value) or isinstance(value, partial)

def _function_label(value: Any) -> str:
    if isinstance(value, partial):
        value = value.func
    name = getattr(value, "__name__", "")
    return f"[Function: {name}]" if name and name != "<lambda>" else "[Function]"

def inspect(value: Any) -> str:
    if _is_plain_function(value):
        return _function_label(value)
    if isinstance(value, type):
        return f"[class {value.__name__}]"
    return pretty_repr(value, max_width=_ONE_LINE, max_depth=settings.data.inspect_depth)

def object_display(value: Any) -> str:
    text = inspect(value)
    if len(text) < settings.data.truncate_threshold:
        return text
    if isinstance(value, (list, tuple)):
        return f"[ {type(value).__name__}({len(value)}) ]"
    if isinstance(value, Mapping):
        keys = [str(k) for k in value.keys()]
        shown = ", ".join(keys[:2]) + (", ..." if len(keys) > 2 else "")
        return f"{{ {type(value).__name__} ({shown}) }}"
    return text
