"""Fluent ``expect(actual)`` wrapper over the assertion primitives.

Instead of remembering argument order::

    strict_equal(actual, expected, message)

write::

    expect(actual).to_be(expected, message)
"""

from __future__ import annotations

import logging
import re
import types
import typing
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from expectpy import primitives
from expectpy.primitives import ErrorMatcher, is_sequence
from expectpy.render import inspect_value

logger = logging.getLogger(__name__)

Comparator = Callable[[Any, Any], Any]


def _is_union(type_: Any) -> bool:
    return isinstance(type_, types.UnionType) or typing.get_origin(type_) is typing.Union


def _is_type_spec(type_: Any) -> bool:
    """True for anything ``isinstance`` accepts: classes, unions, nested tuples."""
    if isinstance(type_, type) or _is_union(type_):
        return True
    return isinstance(type_, tuple) and bool(type_) and all(_is_type_spec(t) for t in type_)


def _type_name(type_: Any) -> str:
    if isinstance(type_, tuple):
        return " or ".join(_type_name(t) for t in type_)
    if _is_union(type_):
        return " or ".join(_type_name(t) for t in typing.get_args(type_))
    return getattr(type_, "__name__", None) or str(type_)


def sequence_contains(sequence: Sequence[Any], comparator: Comparator, value: Any) -> bool:
    """Return True if any item of *sequence* matches *value* under *comparator*.

    A comparator signals a non-match by returning ``False`` or by raising;
    any other result is a match. This lets raising checks such as
    ``primitives.deep_equal`` double as predicates. Stops at the first match.
    """
    for item in sequence:
        try:
            if comparator(item, value) is not False:
                return True
        except Exception as exc:
            logger.debug(f"Comparator raised {type(exc).__name__}, counted as no match")
    return False


@dataclass(frozen=True, eq=False)
class Expectation:
    """Wraps one value and exposes checks against it.

    Every check returns ``None`` on success and raises
    ``ExpectationFailed`` (an ``AssertionError``) on failure.
    """

    actual: Any

    def to_be(self, expected: Any, message: str | None = None) -> None:
        primitives.strict_equal(self.actual, expected, message)

    def to_not_be(self, expected: Any, message: str | None = None) -> None:
        primitives.not_strict_equal(self.actual, expected, message)

    def to_equal(self, expected: Any, message: str | None = None) -> None:
        primitives.deep_equal(self.actual, expected, message)

    def to_not_equal(self, expected: Any, message: str | None = None) -> None:
        primitives.not_deep_equal(self.actual, expected, message)

    def to_throw(self, expected: ErrorMatcher = None, message: str | None = None) -> None:
        primitives.throws(self.actual, expected, message)

    def to_not_throw(self, expected: ErrorMatcher = None, message: str | None = None) -> None:
        primitives.does_not_throw(self.actual, expected, message)

    def to_be_a(self, type_: type | tuple[type, ...], message: str | None = None) -> None:
        """Check that the value is an instance of *type_*.

        *type_* is anything ``isinstance`` accepts: a class, a non-empty
        tuple of classes (tuples may nest), or a ``X | Y`` or
        ``typing.Union`` union.
        """
        primitives.ok(_is_type_spec(type_), "The type used in to_be_a must be a class")

        message = message or f"{inspect_value(self.actual)} is not a {_type_name(type_)}"
        primitives.ok(isinstance(self.actual, type_), message)

    to_be_an = to_be_a

    def to_match(self, pattern: re.Pattern, message: str | None = None) -> None:
        """Check that *pattern* is found somewhere in ``str(actual)``."""
        primitives.ok(
            isinstance(pattern, re.Pattern),
            "The pattern used in to_match must be a compiled regular expression",
        )

        message = message or f"{inspect_value(self.actual)} does not match {inspect_value(pattern)}"
        primitives.ok(pattern.search(str(self.actual)) is not None, message)

    def to_be_less_than(self, value: Any, message: str | None = None) -> None:
        message = message or f"{inspect_value(self.actual)} is not less than {inspect_value(value)}"
        primitives.ok(self.actual < value, message)

    to_be_fewer_than = to_be_less_than

    def to_be_greater_than(self, value: Any, message: str | None = None) -> None:
        message = message or f"{inspect_value(self.actual)} is not greater than {inspect_value(value)}"
        primitives.ok(self.actual > value, message)

    to_be_more_than = to_be_greater_than

    def to_include(self, value: Any, comparator: Comparator | None = None, message: str | None = None) -> None:
        """Check that some item of the sequence matches *value*.

        *comparator* defaults to structural equality; see
        ``sequence_contains`` for how its result is read.
        """
        primitives.ok(
            is_sequence(self.actual),
            "The actual value used in to_contain/to_include must be a sequence",
        )

        message = message or f"{inspect_value(self.actual)} does not include {inspect_value(value)}"
        if comparator is None:
            comparator = primitives.deep_equals
        logger.debug(f"to_include: scanning {len(self.actual)} items")
        primitives.ok(sequence_contains(self.actual, comparator, value), message)

    to_contain = to_include

    def to_exclude(self, value: Any, comparator: Comparator | None = None, message: str | None = None) -> None:
        primitives.ok(
            is_sequence(self.actual),
            "The actual value used in to_not_contain/to_exclude must be a sequence",
        )

        message = message or f"{inspect_value(self.actual)} includes {inspect_value(value)}"
        if comparator is None:
            comparator = primitives.deep_equals
        logger.debug(f"to_exclude: scanning {len(self.actual)} items")
        primitives.ok(not sequence_contains(self.actual, comparator, value), message)

    to_not_contain = to_exclude


def expect(actual: Any) -> Expectation:
    """Wrap *actual* for a fluent check, e.g. ``expect(result).to_equal(42)``."""
    return Expectation(actual)
