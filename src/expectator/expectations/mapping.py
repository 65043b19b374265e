"""Expectations over mappings."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from expectator.expectations.base import Expectation
from expectator.expectations.collection import contains


def _keys(actual: Iterable[Any] | Mapping[Any, Any]) -> list[Any]:
    return list(actual.keys()) if isinstance(actual, Mapping) else list(actual)


def _values(actual: Iterable[Any] | Mapping[Any, Any]) -> list[Any]:
    return list(actual.values()) if isinstance(actual, Mapping) else list(actual)


class MapExpectation(Expectation[Mapping[Any, Any]]):
    """Expectation whose expected value is a mapping.

    The ``*_all`` and ``*_any`` builders accept either an iterable or a
    mapping; for a mapping, its keys or values (matching the builder) are
    used as the actual items. Every rule fails while the expected value is
    unset, and an unhashable key is never contained.
    """

    def expect_keys_contain(self, actual: Any) -> MapExpectation:
        return self.expect(
            lambda e, a: e is not None and contains(e, a),
            actual,
            "expected {expected} to have keys which contain {actual}",
        )

    def expect_values_contain(self, actual: Any) -> MapExpectation:
        return self.expect(
            lambda e, a: e is not None and a in e.values(),
            actual,
            "expected {expected} to have values which contain {actual}",
        )

    def expect_keys_do_not_contain(self, actual: Any) -> MapExpectation:
        return self.expect(
            lambda e, a: e is not None and not contains(e, a),
            actual,
            "expected {expected} to not have keys which contain {actual}",
        )

    def expect_values_do_not_contain(self, actual: Any) -> MapExpectation:
        return self.expect(
            lambda e, a: e is not None and a not in e.values(),
            actual,
            "expected {expected} to not have values which contain {actual}",
        )

    def expect_keys_contain_all(
        self, actual: Iterable[Any] | Mapping[Any, Any]
    ) -> MapExpectation:
        return self.expect(
            lambda e, a: e is not None and all(contains(e, key) for key in a),
            _keys(actual),
            "expected {expected} keys to contain all of {actual}",
        )

    def expect_values_contain_all(
        self, actual: Iterable[Any] | Mapping[Any, Any]
    ) -> MapExpectation:
        return self.expect(
            lambda e, a: e is not None and all(value in e.values() for value in a),
            _values(actual),
            "expected {expected} values to contain all of {actual}",
        )

    def expect_keys_do_not_contain_any(
        self, actual: Iterable[Any] | Mapping[Any, Any]
    ) -> MapExpectation:
        return self.expect(
            lambda e, a: e is not None and not any(contains(e, key) for key in a),
            _keys(actual),
            "expected the keys of {expected} to contain none of these keys: {actual}",
        )

    def expect_values_do_not_contain_any(
        self, actual: Iterable[Any] | Mapping[Any, Any]
    ) -> MapExpectation:
        return self.expect(
            lambda e, a: e is not None
            and not any(value in e.values() for value in a),
            _values(actual),
            "expected the values in {expected} to contain none of these values: {actual}",
        )

    def expect_size(self, actual: int) -> MapExpectation:
        return self.expect(
            lambda e, a: e is not None and len(e) == a,
            actual,
            "expected {expected} to have a size of {actual}",
        )

    def expect_empty(self) -> MapExpectation:
        return self.expect_size(0)
