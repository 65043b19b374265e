"""Expectations over scalar types: booleans, integers and strings."""

from __future__ import annotations

import operator
from typing import Any, Callable

from expectator.expectations.base import Expectation


def _when_set(rule: Callable[[Any, Any], bool]) -> Callable[[Any, Any], bool]:
    """Wrap *rule* so it fails, instead of raising, on an unset expected value."""
    return lambda e, a: e is not None and rule(e, a)


class BooleanExpectation(Expectation[bool]):
    def expect_true(self) -> BooleanExpectation:
        return self.expect_equals(True)

    def expect_false(self) -> BooleanExpectation:
        return self.expect_equals(False)


class IntExpectation(Expectation[int]):
    def expect_greater_than(self, actual: int) -> IntExpectation:
        return self.expect(
            _when_set(operator.gt),
            actual,
            "expected {expected} to be greater than {actual}",
        )

    def expect_greater_than_or_equal_to(self, actual: int) -> IntExpectation:
        return self.expect(
            _when_set(operator.ge),
            actual,
            "expected {expected} to be greater than or equal to {actual}",
        )

    def expect_less_than(self, actual: int) -> IntExpectation:
        return self.expect(
            _when_set(operator.lt),
            actual,
            "expected {expected} to be less than {actual}",
        )

    def expect_less_than_or_equal_to(self, actual: int) -> IntExpectation:
        return self.expect(
            _when_set(operator.le),
            actual,
            "expected {expected} to be less than or equal to {actual}",
        )


class StringExpectation(Expectation[str]):
    """Expectation whose expected value is a string.

    Failure messages quote both values, e.g.
    ``expected 'minimum' to start with 'max' but it does not``.
    """

    def expect_same_length(self, actual: str) -> StringExpectation:
        return self.expect(
            _when_set(lambda e, a: len(e) == len(a)),
            actual,
            "expected '{expected}' to be the same length as '{actual}' but they are not",
        )

    def expect_starts_with(self, actual: str) -> StringExpectation:
        return self.expect(
            _when_set(lambda e, a: e.startswith(a)),
            actual,
            "expected '{expected}' to start with '{actual}' but it does not",
        )

    def expect_ends_with(self, actual: str) -> StringExpectation:
        return self.expect(
            _when_set(lambda e, a: e.endswith(a)),
            actual,
            "expected '{expected}' to end with '{actual}' but it does not",
        )

    def expect_contains(self, actual: str) -> StringExpectation:
        return self.expect(
            _when_set(lambda e, a: a in e),
            actual,
            "expected '{expected}' to contain '{actual}' but it does not",
        )

    def expect_does_not_contain(self, actual: str) -> StringExpectation:
        return self.expect(
            _when_set(lambda e, a: a not in e),
            actual,
            "expected '{expected}' to not contain '{actual}' but it does",
        )

    def expect_empty(self) -> StringExpectation:
        return self.expect_equals("")

    def expect_not_empty(self) -> StringExpectation:
        return self.expect_not_equals("")
