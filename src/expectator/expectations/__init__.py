"""Expectation containers: the base expectation and its typed variants."""

from expectator.expectations.base import (
    NO_EXPECTATOR_ENTRIES_FOUND,
    ConfirmationResult,
    Expectation,
    ExpectationInterface,
)
from expectator.expectations.collection import CollectionExpectation
from expectator.expectations.mapping import MapExpectation
from expectator.expectations.scalar import (
    BooleanExpectation,
    IntExpectation,
    StringExpectation,
)

__all__ = [
    "NO_EXPECTATOR_ENTRIES_FOUND",
    "BooleanExpectation",
    "CollectionExpectation",
    "ConfirmationResult",
    "Expectation",
    "ExpectationInterface",
    "IntExpectation",
    "MapExpectation",
    "StringExpectation",
]
