"""Errors raised while confirming expectations."""

from __future__ import annotations

from typing import Any, TYPE_CHECKING

if TYPE_CHECKING:
    from expectator.expectations.base import Expectation


class ExpectatorError(Exception):
    """Base error carrying the owning expectation and failure details.

    The string form is the expectation's name followed by the details,
    e.g. ``"size check: expected [1, 2, 3] to have a size of 2"``.
    """

    def __init__(self, expectation: Expectation[Any], details: str) -> None:
        self.expectation = expectation
        self.details = details
        super().__init__(self._format())

    def _format(self) -> str:
        separator = self.expectation.settings.name_separator
        return f"{self.expectation.name}{separator}{self.details}"


class ExpectationFailedError(ExpectatorError, AssertionError):
    """An expectator evaluated to false during confirmation."""


class NoExpectatorsError(ExpectatorError):
    """``confirm()`` was called on an expectation with nothing attached."""
