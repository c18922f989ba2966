"""
vouch: chainable, natural-language assertions.

    from vouch import expect
    expect("tea").to.be.a("string")
    expect({"foo": {"bar": 1}}).to.have.property("foo").to.have.property("bar", 1)

Modules:
- core (flags, errors, logging, type tags)
- system.settings (process-wide configuration, e.g. include_stack)
- render (inspector, message templates)
- compare (strict/deep equality, path resolution)
- assertion (engine, predicates, alias/addon registry)
"""
from typing import Any, Callable, List

from .assertion.engine import Assertion, ChainHandle, expect
from .assertion.registry import ALIASES, add_method, add_property
from .compare.path import MISSING
from .core.errors import AssertionFailure, StackAnchor, UsageError, VouchError
from .core.logging import logger
from .system.settings import Settings, SettingsData, settings

_used: List[Callable[[type], Any]] = []

def use(plugin: Callable[[type], Any]) -> None:
    """Run `plugin(Assertion)` once; later calls with the same plugin are ignored."""
    if plugin in _used:
        return
    plugin(Assertion)
    _used.append(plugin)
    logger.debug("PluginUsed", plugin=getattr(plugin, "__name__", repr(plugin)))

__all__ = [
    "expect", "use", "Assertion", "ChainHandle", "ALIASES", "add_method", "add_property",
    "MISSING", "AssertionFailure", "StackAnchor", "UsageError", "VouchError",
    "logger", "Settings", "SettingsData", "settings",
]
