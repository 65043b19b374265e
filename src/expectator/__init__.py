"""Named expectations with deferred, confirmable comparison rules."""

from expectator.config import ExpectatorSettings, load_settings
from expectator.entries import Expectator, ExpectatorEntries, ExpectatorEntry
from expectator.exceptions import (
    ExpectationFailedError,
    ExpectatorError,
    NoExpectatorsError,
)
from expectator.expectations import (
    NO_EXPECTATOR_ENTRIES_FOUND,
    BooleanExpectation,
    CollectionExpectation,
    ConfirmationResult,
    Expectation,
    ExpectationInterface,
    IntExpectation,
    MapExpectation,
    StringExpectation,
)
from expectator.messages import FailureMessageBuilder, describe, render

__all__ = [
    "NO_EXPECTATOR_ENTRIES_FOUND",
    "BooleanExpectation",
    "CollectionExpectation",
    "ConfirmationResult",
    "ExpectationFailedError",
    "Expectation",
    "ExpectationInterface",
    "Expectator",
    "ExpectatorEntries",
    "ExpectatorEntry",
    "ExpectatorError",
    "ExpectatorSettings",
    "FailureMessageBuilder",
    "IntExpectation",
    "MapExpectation",
    "NoExpectatorsError",
    "StringExpectation",
    "describe",
    "load_settings",
    "render",
]
