"""Tests for the assertion primitives."""

import re

import pytest

from expectpy.primitives import (
    ExpectationFailed,
    deep_equal,
    deep_equals,
    does_not_throw,
    is_sequence,
    not_deep_equal,
    not_strict_equal,
    ok,
    strict_equal,
    throws,
)


# --- ExpectationFailed ---


def test_expectation_failed_is_assertion_error():
    assert issubclass(ExpectationFailed, AssertionError)


def test_failure_carries_operands():
    with pytest.raises(ExpectationFailed) as exc_info:
        strict_equal(1, 2)
    err = exc_info.value
    assert err.actual == 1
    assert err.expected == 2
    assert err.operator == "is"
    assert err.generated_message is True


def test_failure_with_caller_message():
    with pytest.raises(ExpectationFailed) as exc_info:
        deep_equal([1], [2], "lists differ")
    assert exc_info.value.message == "lists differ"
    assert exc_info.value.generated_message is False
    assert exc_info.value.operator == "=="


# --- ok ---


def test_ok_pass():
    ok(True)
    ok([0])


def test_ok_fail_default_message():
    with pytest.raises(ExpectationFailed) as exc_info:
        ok(0)
    assert str(exc_info.value) == "0 == True"


def test_ok_fail_custom_message():
    with pytest.raises(ExpectationFailed, match="^custom$"):
        ok(None, "custom")


# --- strict equality ---


def test_strict_equal_scalars():
    strict_equal(1, 1)
    strict_equal("a", "a")
    strict_equal(b"x", b"x")
    strict_equal(2.5, 2.5)


def test_strict_equal_requires_same_type():
    with pytest.raises(ExpectationFailed):
        strict_equal(1, 1.0)


def test_strict_equal_nan_is_not_equal_to_itself_by_value():
    with pytest.raises(ExpectationFailed):
        strict_equal(float("nan"), float("nan"))


def test_not_strict_equal():
    not_strict_equal({}, {})
    with pytest.raises(ExpectationFailed, match="'a' is 'a'"):
        not_strict_equal("a", "a")


# --- deep equality ---


def test_deep_equal_nested():
    deep_equal({"a": [1, 2, {"b": None}]}, {"a": [1, 2, {"b": None}]})


def test_deep_equal_mapping_key_mismatch():
    with pytest.raises(ExpectationFailed):
        deep_equal({"a": 1}, {"b": 1})


def test_deep_equal_sequence_length_mismatch():
    with pytest.raises(ExpectationFailed):
        deep_equal([1, 2], [1, 2, 3])


def test_deep_equal_sets():
    deep_equal({1, 2}, {2, 1})


def test_deep_equal_handles_cycles():
    a = [1]
    a.append(a)
    b = [1]
    b.append(b)
    deep_equal(a, b)


def test_deep_equal_different_types_without_eq():
    class A:
        pass

    class B:
        pass

    with pytest.raises(ExpectationFailed):
        deep_equal(A(), B())


def test_not_deep_equal():
    not_deep_equal([1], [2])
    with pytest.raises(ExpectationFailed, match=r"\[1\] == \[1\]"):
        not_deep_equal([1], [1])


# --- throws / does_not_throw ---


def _raise_value_error():
    raise ValueError("bad input")


def test_throws_tuple_of_types():
    throws(_raise_value_error, (KeyError, ValueError))


def test_throws_pattern_mismatch_reraises():
    with pytest.raises(ValueError):
        throws(_raise_value_error, re.compile("unrelated"))


def test_throws_predicate_must_return_true():
    with pytest.raises(ValueError):
        throws(_raise_value_error, lambda e: "truthy but not True")


def test_throws_missing_exception_message():
    with pytest.raises(ExpectationFailed) as exc_info:
        throws(lambda: None, ValueError)
    assert str(exc_info.value) == "Missing expected exception (ValueError)."


def test_throws_missing_exception_with_message():
    with pytest.raises(ExpectationFailed) as exc_info:
        throws(lambda: None, None, "should have failed")
    assert str(exc_info.value) == "Missing expected exception. should have failed"
    assert exc_info.value.generated_message is False


def test_throws_rejects_non_callable():
    with pytest.raises(TypeError, match="callable"):
        throws("not a function")


def test_does_not_throw_message_and_cause():
    with pytest.raises(ExpectationFailed) as exc_info:
        does_not_throw(_raise_value_error, ValueError, "keep quiet")
    assert str(exc_info.value) == "Got unwanted exception (ValueError). keep quiet"
    assert isinstance(exc_info.value.__cause__, ValueError)


def test_does_not_throw_rejects_non_callable():
    with pytest.raises(TypeError):
        does_not_throw(None)


# --- is_sequence ---


@pytest.mark.parametrize("value", [[], (), range(3)])
def test_is_sequence_true(value):
    assert is_sequence(value) is True


@pytest.mark.parametrize("value", ["abc", b"abc", bytearray(b"a"), {"a": 1}, {1}, 5, None])
def test_is_sequence_false(value):
    assert is_sequence(value) is False


# --- lazy default messages ---


def test_caller_message_skips_rendering(monkeypatch):
    rendered = []
    monkeypatch.setattr(
        "expectpy.primitives.inspect_value", lambda value: rendered.append(value) or "x"
    )

    with pytest.raises(ExpectationFailed, match="^custom$"):
        deep_equal([1], [2], "custom")
    with pytest.raises(ExpectationFailed, match="^custom$"):
        strict_equal(1, 2, "custom")
    assert rendered == []

    with pytest.raises(ExpectationFailed):
        deep_equal([1], [2])
    assert rendered == [[1], [2]]


def test_deep_equals_predicate():
    assert deep_equals({"a": [1]}, {"a": [1]}) is True
    assert deep_equals([1], [2]) is False
