"""Fluent expect() assertions."""

from expectpy.expectation import Expectation, expect
from expectpy.primitives import ExpectationFailed

__all__ = ["Expectation", "ExpectationFailed", "expect"]
