"""Assertion primitives the fluent wrapper delegates to.

Each primitive takes the value under test first and raises
``ExpectationFailed`` when its condition does not hold.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Mapping, Sequence
from typing import Any, Union

from expectpy.render import inspect_value

logger = logging.getLogger(__name__)

# Values compared by type and value under strict equality; everything else by identity.
_SCALAR_TYPES = (type(None), bool, int, float, complex, str, bytes)


class ExpectationFailed(AssertionError):
    """Raised when a check fails.

    Attributes:
        message: The caller's message, or the generated one.
        actual: The value under test.
        expected: The value or matcher it was checked against.
        operator: Name of the relation that was asserted (e.g. "is", "==").
        generated_message: True when no message was supplied by the caller.
    """

    def __init__(
        self,
        message: str,
        *,
        actual: Any = None,
        expected: Any = None,
        operator: str | None = None,
        generated_message: bool = False,
    ):
        super().__init__(message)
        self.message = message
        self.actual = actual
        self.expected = expected
        self.operator = operator
        self.generated_message = generated_message


def _fail(actual: Any, expected: Any, message: str | None, operator: str, default: Callable[[], str]) -> None:
    # default is only rendered when the caller gave no message
    raise ExpectationFailed(
        message or default(),
        actual=actual,
        expected=expected,
        operator=operator,
        generated_message=not message,
    )


def is_sequence(value: Any) -> bool:
    """True for ordered, indexable collections other than text and bytes."""
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def ok(value: Any, message: str | None = None) -> None:
    """Fail unless *value* is truthy."""
    if not value:
        _fail(value, True, message, "==", lambda: f"{inspect_value(value)} == True")


def _strictly_equal(actual: Any, expected: Any) -> bool:
    if actual is expected:
        return True
    if type(actual) is type(expected) and isinstance(actual, _SCALAR_TYPES):
        return actual == expected
    return False


def strict_equal(actual: Any, expected: Any, message: str | None = None) -> None:
    if not _strictly_equal(actual, expected):
        _fail(actual, expected, message, "is", lambda: f"{inspect_value(actual)} is not {inspect_value(expected)}")


def not_strict_equal(actual: Any, expected: Any, message: str | None = None) -> None:
    if _strictly_equal(actual, expected):
        _fail(actual, expected, message, "is not", lambda: f"{inspect_value(actual)} is {inspect_value(expected)}")


def _deep_equal(actual: Any, expected: Any, seen: set[tuple[int, int]]) -> bool:
    if actual is expected:
        return True
    key = (id(actual), id(expected))
    if key in seen:
        return True

    if isinstance(actual, Mapping) and isinstance(expected, Mapping):
        seen.add(key)
        if actual.keys() != expected.keys():
            return False
        return all(_deep_equal(actual[k], expected[k], seen) for k in actual)

    if is_sequence(actual) and is_sequence(expected):
        seen.add(key)
        if len(actual) != len(expected):
            return False
        return all(_deep_equal(a, e, seen) for a, e in zip(actual, expected))

    if actual == expected:
        return True

    # Plain objects without __eq__ compare their attributes
    if type(actual) is type(expected) and hasattr(actual, "__dict__") and hasattr(expected, "__dict__"):
        seen.add(key)
        return _deep_equal(vars(actual), vars(expected), seen)

    return False


def deep_equals(actual: Any, expected: Any) -> bool:
    """Predicate form of ``deep_equal``; renders nothing."""
    return _deep_equal(actual, expected, set())


def deep_equal(actual: Any, expected: Any, message: str | None = None) -> None:
    """Fail unless *actual* and *expected* are structurally equal.

    Mappings and sequences are compared element by element, and objects of
    the same type fall back to comparing their attributes.
    """
    if not _deep_equal(actual, expected, set()):
        _fail(actual, expected, message, "==", lambda: f"{inspect_value(actual)} != {inspect_value(expected)}")


def not_deep_equal(actual: Any, expected: Any, message: str | None = None) -> None:
    if _deep_equal(actual, expected, set()):
        _fail(actual, expected, message, "!=", lambda: f"{inspect_value(actual)} == {inspect_value(expected)}")


ErrorMatcher = Union[type, tuple, re.Pattern, Callable[[BaseException], Any], None]


def _error_matches(exc: BaseException, expected: ErrorMatcher) -> bool:
    if expected is None:
        return True
    if isinstance(expected, re.Pattern):
        return expected.search(str(exc)) is not None
    if isinstance(expected, (type, tuple)):
        return isinstance(exc, expected)
    return expected(exc) is True


def _suffix(name: str | None, message: str | None) -> str:
    text = f" ({name})." if name else "."
    if message:
        text = f"{text} {message}"
    return text


def throws(block: Callable[[], Any], expected: ErrorMatcher = None, message: str | None = None) -> None:
    """Fail unless calling *block* raises an exception matching *expected*.

    *expected* may be an exception class (or tuple of classes), a compiled
    pattern searched in the exception text, or a predicate that must return
    ``True``. A raised exception that does not match is re-raised as is.
    """
    if not callable(block):
        raise TypeError(f"block must be callable, got {type(block).__name__}")

    try:
        block()
    except Exception as exc:
        if not _error_matches(exc, expected):
            raise
        logger.debug(f"throws: caught expected {type(exc).__name__}")
        return

    name = expected.__name__ if isinstance(expected, type) else None
    raise ExpectationFailed(
        "Missing expected exception" + _suffix(name, message),
        actual=None,
        expected=expected,
        operator="throws",
        generated_message=not message,
    )


def does_not_throw(block: Callable[[], Any], expected: ErrorMatcher = None, message: str | None = None) -> None:
    """Fail if calling *block* raises an exception matching *expected*.

    Exceptions that do not match *expected* are re-raised unchanged.
    """
    if not callable(block):
        raise TypeError(f"block must be callable, got {type(block).__name__}")

    try:
        block()
    except Exception as exc:
        if not _error_matches(exc, expected):
            raise
        raise ExpectationFailed(
            "Got unwanted exception" + _suffix(type(exc).__name__, message),
            actual=exc,
            expected=expected,
            operator="does_not_throw",
            generated_message=not message,
        ) from exc
