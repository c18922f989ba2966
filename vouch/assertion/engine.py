"""
Assertion engine: one flag store per chain, grammatical chain words, and the
single `assert_` primitive every predicate reports through.
"""
from __future__ import annotations
import sys
import traceback
from typing import Any, Callable, Optional

from vouch.assertion.predicates import Predicates
from vouch.assertion.registry import apply_aliases
from vouch.compare.path import MISSING
from vouch.core.errors import AssertionFailure, StackAnchor
from vouch.core.flags import FlagStore
from vouch.core.logging import logger
from vouch.core.types import normalize_type_name, type_tag
from vouch.render.inspect import inspect
from vouch.render.message import get_message
from vouch.system.settings import settings

def frame_anchor(frame) -> StackAnchor:
    code = frame.f_code
    return StackAnchor(code.co_filename, frame.f_lineno, code.co_name)

class ChainHandle:
    """Returned by `a`/`an` and `include`/`contain`.

    Calling it runs the predicate; any other attribute resolves on the
    assertion, so the word still reads as a plain chain connector.
    """
    __slots__ = ("_assertion", "_fn")

    def __init__(self, assertion: "Assertion", fn: Callable[..., "Assertion"]):
        self._assertion = assertion
        self._fn = fn

    def __call__(self, *args, **kwargs):
        return self._fn(*args, **kwargs)

    def __getattr__(self, name: str):
        return getattr(self._assertion, name)

    def __repr__(self):
        return f"<ChainHandle {self._fn.__name__} of {self._assertion!r}>"

class Assertion(Predicates):
    def __init__(self, obj: Any, message: Optional[str] = None, stack: Optional[StackAnchor] = None):
        self._flags = FlagStore()
        self._flags.set("ssfi", stack or frame_anchor(sys._getframe(1)))
        self._flags.set("object", obj)
        self._flags.set("message", message)

    @property
    def flags(self) -> FlagStore:
        return self._flags

    def assert_(self, expr: Any, msg: str, negate_msg: str, expected: Any = MISSING, actual: Any = MISSING):
        __tracebackhide__ = not settings.data.include_stack
        negate = bool(self._flags.get("negate"))
        ok = not expr if negate else bool(expr)
        caller = sys._getframe(1)
        if ok:
            logger.debug("AssertionPassed", predicate=caller.f_code.co_name, negate=negate)
            return
        if actual is MISSING:
            actual = self._flags.get("object")
        exp = None if expected is MISSING else expected
        message = get_message(self._flags, negate_msg if negate else msg, actual, exp)
        if settings.data.include_stack:
            anchor = frame_anchor(caller)
            stack = "".join(traceback.format_stack(caller)).rstrip()
        else:
            anchor = self._flags.get("ssfi")
            stack = None
        logger.debug("AssertionFailed", predicate=caller.f_code.co_name, anchor=anchor)
        raise AssertionFailure(message, expected=exp, actual=actual, stack_anchor=anchor,
                               stack=stack, show_diff=expected is not MISSING)

    # Language chains: no effect, readability only
    @property
    def to(self): return self

    @property
    def be(self): return self

    @property
    def is_(self): return self

    @property
    def and_(self): return self

    @property
    def have(self): return self

    @property
    def with_(self): return self

    @property
    def not_(self):
        self._flags.set("negate", True)
        return self

    @property
    def been(self):
        # consulted by addons only
        self._flags.set("tense", "past")
        return self

    def _type_check(self, type_name: str) -> "Assertion":
        obj = self._flags.get("object")
        expected = normalize_type_name(type_name)
        actual = type_tag(obj)
        self.assert_(
            actual == expected,
            "expected #{this} to be a " + type_name,
            "expected #{this} not to be a " + type_name,
            expected,
            actual,
        )
        return self

    def _a(self) -> ChainHandle:
        return ChainHandle(self, self._type_check)

    a = property(_a)
    an = a

    def _include_value(self, val: Any) -> "Assertion":
        obj = self._flags.get("object")
        self.assert_(
            val in obj,
            "expected #{this} to include " + inspect(val),
            "expected #{this} to not include " + inspect(val),
        )
        return self

    def _include(self) -> ChainHandle:
        self._flags.set("contains", True)
        return ChainHandle(self, self._include_value)

    include = property(_include)
    contain = include

    def __repr__(self):
        return f"<Assertion {inspect(self._flags.get('object'))}>"

apply_aliases(Assertion)

def expect(obj: Any, message: Optional[str] = None) -> Assertion:
    return Assertion(obj, message, frame_anchor(sys._getframe(1)))
