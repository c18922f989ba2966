"""Runtime type tags for values under test.

Provides:
  TYPE_TAGS: ordered (tag, predicate) pairs; first match wins
  TYPE_SYNONYMS: lowercase user-facing name -> canonical tag
  type_tag(value): canonical tag of a value (falls back to its class name)
  normalize_type_name(name): canonical tag for a user-supplied name
  is_array / is_arguments / is_function / is_mapping helpers
"""
from __future__ import annotations
import re
from collections.abc import Mapping, Set
from datetime import date, datetime
from numbers import Number
from typing import Any, Callable, Dict, Tuple

def _is_function(v: Any) -> bool:
    return callable(v) and not isinstance(v, BaseException)

# bool before Number: bool subclasses int
TYPE_TAGS: Tuple[Tuple[str, Callable[[Any], bool]], ...] = (
    ("None", lambda v: v is None),
    ("Boolean", lambda v: isinstance(v, bool)),
    ("Number", lambda v: isinstance(v, Number)),
    ("String", lambda v: isinstance(v, str)),
    ("Bytes", lambda v: isinstance(v, (bytes, bytearray))),
    ("Array", lambda v: isinstance(v, list)),
    ("Arguments", lambda v: isinstance(v, tuple)),
    ("RegExp", lambda v: isinstance(v, re.Pattern)),
    ("Date", lambda v: isinstance(v, (datetime, date))),
    ("Error", lambda v: isinstance(v, BaseException)),
    ("Function", _is_function),
    ("Object", lambda v: isinstance(v, Mapping)),
    ("Set", lambda v: isinstance(v, Set)),
)

TYPE_SYNONYMS: Dict[str, str] = {
    "none": "None", "null": "None", "undefined": "None", "nonetype": "None",
    "bool": "Boolean", "boolean": "Boolean",
    "number": "Number", "int": "Number", "float": "Number", "complex": "Number",
    "str": "String", "string": "String",
    "bytes": "Bytes", "bytearray": "Bytes",
    "array": "Array", "list": "Array",
    "arguments": "Arguments", "tuple": "Arguments",
    "regexp": "RegExp", "regex": "RegExp", "pattern": "RegExp",
    "date": "Date", "datetime": "Date",
    "error": "Error", "exception": "Error",
    "function": "Function", "callable": "Function",
    "object": "Object", "dict": "Object", "mapping": "Object",
    "set": "Set", "frozenset": "Set",
}

def type_tag(value: Any) -> str:
    for tag, test in TYPE_TAGS:
        if test(value):
            return tag
    return type(value).__name__

def normalize_type_name(name: str) -> str:
    canonical = TYPE_SYNONYMS.get(name.lower())
    if canonical:
        return canonical
    return name[:1].upper() + name[1:]

def is_array(value: Any) -> bool:
    return type_tag(value) == "Array"

def is_arguments(value: Any) -> bool:
    return type_tag(value) == "Arguments"

def is_function(value: Any) -> bool:
    return type_tag(value) == "Function"

def is_mapping(value: Any) -> bool:
    return type_tag(value) == "Object"
