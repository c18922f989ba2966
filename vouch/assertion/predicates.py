"""
Terminal predicates.

Each one reads the current subject (flag ``object``), evaluates its condition
and reports through ``assert_`` so negation and custom messages apply the same
way everywhere. All return the assertion for further chaining; ``property``
additionally moves the subject to the resolved value.
"""
from __future__ import annotations
import re
from collections.abc import Mapping, Sized
from typing import Any, Callable, List

from vouch.compare.deep import deep_equal, strict_equal
from vouch.compare.path import MISSING, get_path_value
from vouch.core.errors import UsageError
from vouch.core.types import is_arguments, is_array, is_function, is_mapping, type_tag
from vouch.render.inspect import inspect

def _own_keys(obj: Any) -> List[Any]:
    if isinstance(obj, Mapping):
        return list(obj.keys())
    return list(getattr(obj, "__dict__", {}))

def _slot_names(klass: type) -> List[str]:
    names: List[str] = []
    for base in klass.__mro__:
        slots = base.__dict__.get("__slots__", ())
        names.extend([slots] if isinstance(slots, str) else slots)
    return names

def _set_slots(obj: Any) -> List[str]:
    return [n for n in _slot_names(type(obj))
            if n not in ("__dict__", "__weakref__") and hasattr(obj, n)]

def _class_name(cls: Any) -> str:
    if isinstance(cls, tuple):
        return " or ".join(_class_name(c) for c in cls)
    return getattr(cls, "__name__", None) or inspect(cls)

class Predicates:
    """Mixin holding the predicate surface of `Assertion`."""

    def _fresh(self, obj: Any):
        # Sub-checks start clean (no negation, no custom message) but keep the call-site anchor
        return type(self)(obj, None, self._flags.get("ssfi"))

    @property
    def ok(self):
        self.assert_(
            self._flags.get("object"),
            "expected #{this} to be truthy",
            "expected #{this} to be falsy")
        return self

    @property
    def true(self):
        self.assert_(
            self._flags.get("object") is True,
            "expected #{this} to be true",
            "expected #{this} to be false",
            not self._flags.get("negate"))
        return self

    @property
    def false(self):
        self.assert_(
            self._flags.get("object") is False,
            "expected #{this} to be false",
            "expected #{this} to be true",
            bool(self._flags.get("negate")))
        return self

    @property
    def exist(self):
        self.assert_(
            self._flags.get("object") is not None,
            "expected #{this} to exist",
            "expected #{this} to not exist")
        return self

    @property
    def empty(self):
        obj = self._flags.get("object")
        if isinstance(obj, Sized):
            expected = len(obj)
        elif not callable(obj) and (hasattr(obj, "__dict__") or _slot_names(type(obj))):
            expected = len(_own_keys(obj)) + len(_set_slots(obj))
        else:
            expected = obj
        self.assert_(
            not expected,
            "expected #{this} to be empty",
            "expected #{this} not to be empty")
        return self

    @property
    def arguments(self):
        obj = self._flags.get("object")
        self.assert_(
            is_arguments(obj),
            "expected #{this} to be arguments",
            "expected #{this} to not be arguments",
            "Arguments",
            type_tag(obj))
        return self

    def equal(self, val: Any):
        self.assert_(
            strict_equal(val, self._flags.get("object")),
            "expected #{this} to equal #{exp}",
            "expected #{this} to not equal #{exp}",
            val)
        return self

    def eql(self, obj: Any):
        self.assert_(
            deep_equal(obj, self._flags.get("object")),
            "expected #{this} to deeply equal #{exp}",
            "expected #{this} to not deeply equal #{exp}",
            obj)
        return self

    def above(self, val: Any):
        self.assert_(
            self._flags.get("object") > val,
            f"expected #{{this}} to be above {val}",
            f"expected #{{this}} to be below {val}")
        return self

    def below(self, val: Any):
        self.assert_(
            self._flags.get("object") < val,
            f"expected #{{this}} to be below {val}",
            f"expected #{{this}} to be above {val}")
        return self

    def within(self, start: Any, finish: Any):
        obj = self._flags.get("object")
        span = f"{start}..{finish}"
        self.assert_(
            start <= obj <= finish,
            "expected #{this} to be within " + span,
            "expected #{this} to not be within " + span)
        return self

    def instance_of(self, cls: Any):
        name = _class_name(cls)
        try:
            matched = isinstance(self._flags.get("object"), cls)
        except TypeError as e:
            raise UsageError(f"instance_of() expects a class or a tuple of classes, got {inspect(cls)}") from e
        self.assert_(
            matched,
            "expected #{this} to be an instance of " + name,
            "expected #{this} to not be an instance of " + name)
        return self

    def own_property(self, name: str):
        obj = self._flags.get("object")
        if isinstance(obj, Mapping):
            has = name in obj
        else:
            has = name in getattr(obj, "__dict__", {}) or name in _set_slots(obj)
        self.assert_(
            has,
            "expected #{this} to have own property " + inspect(name),
            "expected #{this} to not have own property " + inspect(name))
        return self

    def length(self, n: int):
        obj = self._flags.get("object")
        self._fresh(obj).assert_(
            isinstance(obj, Sized),
            "expected #{this} to have a property '__len__'",
            "expected #{this} to not have property '__len__'")
        actual = len(obj)
        self.assert_(
            actual == n,
            "expected #{this} to have a length of #{exp} but got #{act}",
            "expected #{this} to not have a length of #{act}",
            n,
            actual)
        return self

    def match(self, pattern: Any):
        obj = self._flags.get("object")
        regex = re.compile(pattern) if isinstance(pattern, (str, bytes)) else pattern
        self.assert_(
            regex.search(obj),
            "expected #{this} to match " + inspect(regex),
            "expected #{this} not to match " + inspect(regex))
        return self

    def string(self, text: str):
        obj = self._flags.get("object")
        self._fresh(obj).is_.a("string")
        self.assert_(
            text in obj,
            "expected #{this} to contain " + inspect(text),
            "expected #{this} to not contain " + inspect(text))
        return self

    def keys(self, *keys: Any):
        obj = self._flags.get("object")
        if len(keys) == 1 and is_array(keys[0]):
            keys = tuple(keys[0])
        if not keys:
            raise UsageError("keys required")

        actual = _own_keys(obj)
        contains = bool(self._flags.get("contains"))

        # Inclusion
        ok = all(k in actual for k in keys)
        # Exact match
        if not self._flags.get("negate") and not contains:
            ok = ok and len(keys) == len(actual)

        shown = [inspect(k) for k in keys]
        if len(shown) > 1:
            text = "keys " + ", ".join(shown[:-1]) + ", and " + shown[-1]
        else:
            text = "key " + shown[0]
        text = ("contain " if contains else "have ") + text

        self.assert_(
            ok,
            "expected #{this} to " + text,
            "expected #{this} to not " + text,
            list(keys),
            actual)
        return self

    def throw(self, expected: Any = None, message: Any = None):
        """Assert that calling the subject with no arguments raises.

        ``expected`` may be an exception class (isinstance check, optionally
        followed by ``message``), an exception instance (identity check), or a
        str / compiled pattern matched against ``str(error)``. Checks run in
        that priority order and the first deciding one ends the assertion.
        When negated, each given check is negated independently; to require a
        type but rule out a message, chain them:
        ``expect(fn).to.throw(KeyError).and_.not_.throw("good")``.
        """
        obj = self._flags.get("object")
        self._fresh(obj).is_.a("function")

        desired = None
        constructor = None
        name = None
        if isinstance(expected, (str, re.Pattern)):
            message = expected
        elif isinstance(expected, BaseException):
            desired = expected
            message = None
        elif isinstance(expected, type) and issubclass(expected, BaseException):
            constructor = expected
            name = expected.__name__
        elif expected is not None:
            raise UsageError(
                "throw() expects an exception class, an exception instance, a str or a compiled pattern, "
                f"got {inspect(expected)}")

        catch: tuple = (Exception,)
        wanted = constructor or (type(desired) if desired is not None else None)
        if wanted is not None and not issubclass(wanted, Exception):
            catch = (Exception, wanted)

        thrown = False
        try:
            obj()
        except catch as err:
            if desired is not None:
                self.assert_(
                    err is desired,
                    "expected #{this} to throw " + inspect(desired) + " but " + inspect(err) + " was thrown",
                    "expected #{this} to not throw " + inspect(desired))
                return self
            if constructor is not None:
                self.assert_(
                    isinstance(err, constructor),
                    f"expected #{{this}} to throw {name} but a {type(err).__name__} was thrown",
                    f"expected #{{this}} to not throw {name}")
                if message is None:
                    return self
            text = str(err)
            if text and isinstance(message, re.Pattern):
                self.assert_(
                    message.search(text),
                    "expected #{this} to throw error matching " + inspect(message) + " but got " + inspect(text),
                    "expected #{this} to throw error not matching " + inspect(message))
                return self
            if text and isinstance(message, str):
                self.assert_(
                    message in text,
                    "expected #{this} to throw error including #{exp} but got #{act}",
                    "expected #{this} to throw error not including #{act}",
                    message,
                    text)
                return self
            thrown = True

        expected_thrown = name or (inspect(desired) if desired is not None else "an error")
        self.assert_(
            thrown,
            "expected #{this} to throw " + expected_thrown,
            "expected #{this} to not throw " + expected_thrown)
        return self

    def respond_to(self, method: str):
        obj = self._flags.get("object")
        if is_mapping(obj) and method in obj:
            context = obj[method]
        else:
            context = getattr(obj, method, None)
        self.assert_(
            is_function(context),
            "expected #{this} to respond to " + inspect(method),
            "expected #{this} to not respond to " + inspect(method),
            "Function",
            type_tag(context))
        return self

    def satisfy(self, matcher: Callable[[Any], Any]):
        result = matcher(self._flags.get("object"))
        self.assert_(
            result,
            "expected #{this} to satisfy " + inspect(matcher),
            "expected #{this} to not satisfy " + inspect(matcher),
            result,
            result)
        return self

    def close_to(self, expected: Any, delta: Any):
        obj = self._flags.get("object")
        # exact endpoints only, not the interval between them
        self.assert_(
            obj == expected - delta or obj == expected + delta,
            f"expected #{{this}} to be close to {expected} +/- {delta}",
            f"expected #{{this}} not to be close to {expected} +/- {delta}")
        return self

    # Shadows the builtin `property` for the rest of this class body
    def property(self, name: str, value: Any = MISSING):
        obj = self._flags.get("object")
        resolved = get_path_value(name, obj)

        if self._flags.get("negate") and value is not MISSING:
            if resolved is MISSING:
                raise UsageError(f"{inspect(obj)} has no property {inspect(name)}")
        else:
            self.assert_(
                resolved is not MISSING,
                "expected #{this} to have a property " + inspect(name),
                "expected #{this} to not have property " + inspect(name))

        if value is not MISSING:
            self.assert_(
                strict_equal(value, resolved),
                "expected #{this} to have a property " + inspect(name) + " of #{exp}, but got #{act}",
                "expected #{this} to not have a property " + inspect(name) + " of #{act}",
                value,
                resolved)

        self._flags.set("object", resolved)
        return self
