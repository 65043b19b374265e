"""Expectator entries: one rule bound to an actual value and a message."""

from __future__ import annotations

import logging
import weakref
from dataclasses import dataclass, field
from typing import Any, Generic, Iterator, Protocol, TypeVar, TYPE_CHECKING

from expectator.exceptions import ExpectationFailedError
from expectator.messages import describe, render

if TYPE_CHECKING:
    from expectator.expectations.base import Expectation

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)
A_contra = TypeVar("A_contra", contravariant=True)


class Expectator(Protocol[T_contra, A_contra]):
    """A rule comparing an expected value with an actual value."""

    def __call__(self, expected: T_contra, actual: A_contra, /) -> bool: ...


@dataclass(frozen=True, eq=False)
class ExpectatorEntry(Generic[T]):
    """Binds one expectator to an actual value and a failure message template.

    The parent expectation is held weakly; entries never keep it alive.
    Equality and hashing are by identity, so identical rules attached twice
    remain two entries.

    Attributes:
        expectator: Rule called with ``(expected, actual)`` on confirmation.
        actual: The value the expected value is compared against.
        message: Failure template with ``{expected}``/``{actual}`` tokens.
    """

    expectator: Expectator[T, Any]
    actual: Any
    message: str
    _parent: weakref.ReferenceType[Expectation[T]] = field(repr=False)

    @classmethod
    def create(
        cls,
        expectation: Expectation[T],
        expectator: Expectator[T, Any],
        actual: Any,
        message: str,
    ) -> ExpectatorEntry[T]:
        return cls(expectator, actual, message, weakref.ref(expectation))

    @property
    def expectation(self) -> Expectation[T]:
        parent = self._parent()
        if parent is None:
            raise ReferenceError("expectation for this entry no longer exists")
        return parent

    def outcome_details(self) -> str:
        """Render the failure message from the current expected and actual values."""
        parent = self.expectation
        return render(
            self.message,
            describe(parent.expected_value),
            describe(self.actual),
            null_text=parent.settings.null_text,
        )

    def check(self) -> bool:
        return bool(self.expectator(self.expectation.expected_value, self.actual))

    def confirm(self, logger: logging.Logger | None = None) -> None:
        """Run the expectator; raise ExpectationFailedError if it does not hold.

        The expectator is not called until this method runs.
        """
        if logger is None:
            logger = logging.getLogger(__name__)

        extra = {"expectation": self.expectation.name}
        if self.check():
            logger.debug(
                f"Entry passed: {self.message!r} actual={self.actual!r}", extra=extra
            )
            return

        details = self.outcome_details()
        logger.debug(f"Entry failed: {details}", extra=extra)
        raise ExpectationFailedError(self.expectation, details)


class ExpectatorEntries(Generic[T]):
    """The entries attached to one expectation.

    With ``ordered=True`` entries are confirmed in insertion order. Otherwise
    they are confirmed in set iteration order, which is unspecified.
    """

    def __init__(self, ordered: bool = True) -> None:
        self.ordered = ordered
        # dict keys keep insertion order and give identity membership
        self._entries: dict[ExpectatorEntry[T], None] = {}

    def add(self, entry: ExpectatorEntry[T]) -> None:
        self._entries[entry] = None

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __contains__(self, entry: object) -> bool:
        return entry in self._entries

    def __iter__(self) -> Iterator[ExpectatorEntry[T]]:
        if self.ordered:
            return iter(list(self._entries))
        return iter(set(self._entries))

    def confirm(self, logger: logging.Logger | None = None) -> None:
        """Confirm every entry, stopping at the first failure."""
        for entry in self:
            entry.confirm(logger=logger)
