"""Expectations over collections (lists, tuples, sets, ...)."""

from __future__ import annotations

from typing import Any, Collection, Container, Iterable

from expectator.expectations.base import Expectation


def contains(container: Container[Any], item: Any) -> bool:
    """Membership test that treats an unhashable item as not contained.

    ``item in container`` raises TypeError for hash-based containers (sets,
    dict keys) when the item is unhashable; such an item cannot be a member.
    """
    try:
        return item in container
    except TypeError:
        return False


class CollectionExpectation(Expectation[Collection[Any]]):
    """Expectation whose expected value is a sized container.

    Every rule fails, rather than raising, while the expected value is unset.
    """

    def expect_contains(self, actual: Any) -> CollectionExpectation:
        return self.expect(
            lambda e, a: e is not None and contains(e, a),
            actual,
            "expected {expected} to contain {actual}",
        )

    def expect_does_not_contain(self, actual: Any) -> CollectionExpectation:
        return self.expect(
            lambda e, a: e is not None and not contains(e, a),
            actual,
            "expected {expected} to not contain {actual}",
        )

    def expect_contains_all(self, actual: Iterable[Any]) -> CollectionExpectation:
        """Expect every item of *actual* to be in the expected collection."""
        return self.expect(
            lambda e, a: e is not None and all(contains(e, item) for item in a),
            list(actual),
            "expected {expected} to contain all of {actual}",
        )

    def expect_does_not_contain_any(
        self, actual: Iterable[Any]
    ) -> CollectionExpectation:
        """Expect no item of *actual* to be in the expected collection."""
        return self.expect(
            lambda e, a: e is not None and not any(contains(e, item) for item in a),
            list(actual),
            "expected {expected} to contain none of {actual}",
        )

    def expect_size(self, actual: int) -> CollectionExpectation:
        return self.expect(
            lambda e, a: e is not None and len(e) == a,
            actual,
            "expected {expected} to have a size of {actual}",
        )

    def expect_empty(self) -> CollectionExpectation:
        return self.expect_size(0)
