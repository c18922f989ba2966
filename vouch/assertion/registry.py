from __future__ import annotations
import inspect as _pyinspect
from typing import Any, Callable, Tuple

from vouch.core.errors import UsageError
from vouch.core.logging import logger

# (canonical, alias): the alias is bound to the very same class attribute
ALIASES: Tuple[Tuple[str, str], ...] = (
    ("equal", "eq"),
    ("above", "mt"),
    ("below", "lt"),
    ("length", "lengthOf"),
    ("keys", "key"),
    ("own_property", "haveOwnProperty"),
    ("above", "greaterThan"),
    ("below", "lessThan"),
    ("throw", "throws"),
    ("throw", "Throw"),
    ("instance_of", "instanceof"),
    ("instance_of", "instanceOf"),
    ("own_property", "ownProperty"),
    ("own_property", "have_own_property"),
    ("length", "length_of"),
    ("above", "greater_than"),
    ("below", "less_than"),
    ("respond_to", "respondTo"),
    ("close_to", "closeTo"),
    ("throw", "raises"),
)

def apply_aliases(cls: type) -> type:
    for canonical, alias in ALIASES:
        setattr(cls, alias, _pyinspect.getattr_static(cls, canonical))
    return cls

def _check_free(cls: type, name: str):
    if not name.isidentifier():
        raise UsageError(f"addon name {name!r} is not a valid identifier")
    if hasattr(cls, name):
        raise UsageError(f"{cls.__name__} already defines {name!r}")

def add_method(cls: type, name: str, fn: Callable[..., Any]):
    """Install a predicate. `fn(self, *args)` should report via `self.assert_` and return `self`."""
    _check_free(cls, name)
    setattr(cls, name, fn)
    logger.debug("AddonRegistered", name=name, kind="method")

def add_property(cls: type, name: str, getter: Callable[[Any], Any]):
    """Install a zero-argument word: a chain connector or a property-style predicate."""
    _check_free(cls, name)
    setattr(cls, name, property(getter))
    logger.debug("AddonRegistered", name=name, kind="property")
