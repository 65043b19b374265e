"""Base expectation: a named expected value plus the rules to check it."""

from __future__ import annotations

import logging
import operator
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from expectator.config import ExpectatorSettings
from expectator.entries import Expectator, ExpectatorEntries, ExpectatorEntry
from expectator.exceptions import ExpectatorError, NoExpectatorsError

T = TypeVar("T")
E = TypeVar("E", bound="Expectation[Any]")

NO_EXPECTATOR_ENTRIES_FOUND = (
    "Cannot confirm expectator when no expectations have been specified!"
)


@dataclass
class ConfirmationResult:
    """Outcome of confirming one expectation without raising.

    Attributes:
        name: Name of the confirmed expectation.
        passed: Whether every attached expectator held.
        message: Rendered failure message, or "confirmed" on success.
        error: The error ``confirm()`` raised, if any. A NoExpectatorsError
            here means nothing was ever asserted.
    """

    name: str
    passed: bool
    message: str
    error: ExpectatorError | None = None


class ExpectationInterface(ABC, Generic[T]):
    @property
    @abstractmethod
    def name(self) -> str:
        """Name used to prefix failure messages."""
        ...

    @property
    @abstractmethod
    def expected_value(self) -> T | None:
        """Value every attached expectator is checked against."""
        ...

    @expected_value.setter
    @abstractmethod
    def expected_value(self, value: T | None) -> None: ...

    @abstractmethod
    def expect(
        self, expectator: Expectator[T, Any], actual: Any, message: str
    ) -> ExpectationInterface[T]:
        """Attach an expectator to be run on confirmation."""
        ...

    @abstractmethod
    def confirm(self) -> None:
        """Run every attached expectator, raising on the first failure."""
        ...


class Expectation(ExpectationInterface[T]):
    """A named, mutable expected value with expectators attached to it.

    Expectators are not run when attached; ``confirm()`` runs them against
    whatever the expected value is at that moment::

        Expectation("answer", 42).expect_equals(42).confirm()
    """

    def __init__(
        self,
        name: str,
        expected_value: T | None = None,
        *,
        settings: ExpectatorSettings | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._name = name
        self._expected_value = expected_value
        self._settings = settings if settings is not None else ExpectatorSettings()
        self.logger = logger if logger is not None else logging.getLogger(__name__)
        self.entries: ExpectatorEntries[T] = ExpectatorEntries(
            ordered=self._settings.ordered
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self._name!r}, "
            f"expected_value={self._expected_value!r}, entries={len(self.entries)})"
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def _log_extra(self) -> dict[str, str]:
        return {"expectation": self._name}

    @property
    def settings(self) -> ExpectatorSettings:
        """Settings fixed at construction; ordering is baked into ``entries``."""
        return self._settings

    @property
    def expected_value(self) -> T | None:
        return self._expected_value

    @expected_value.setter
    def expected_value(self, value: T | None) -> None:
        self._expected_value = value

    def expect(
        self: E, expectator: Expectator[T, Any], actual: Any, message: str
    ) -> E:
        """Attach *expectator*, called as ``expectator(expected, actual)`` on confirm.

        *message* is the failure template; ``{expected}`` and ``{actual}`` are
        replaced with the values in force at confirmation time. No check is
        made against rules already attached.
        """
        self.entries.add(ExpectatorEntry.create(self, expectator, actual, message))
        return self

    def expect_equals(self: E, actual: Any) -> E:
        return self.expect(operator.eq, actual, "expected {expected} to equal {actual}")

    def expect_not_equals(self: E, actual: Any) -> E:
        return self.expect(
            operator.ne, actual, "expected {expected} to not equal {actual}"
        )

    def expect_null(self: E) -> E:
        """Expect the expected value itself to be None."""
        return self.expect(
            lambda e, a: e is None, None, "expected {expected} to be null"
        )

    def expect_not_null(self: E) -> E:
        """Expect the expected value itself not to be None."""
        return self.expect(
            lambda e, a: e is not None,
            None,
            "expected {expected} value to not equal null",
        )

    def confirm(self) -> None:
        """Confirm every attached expectator.

        Raises:
            NoExpectatorsError: nothing has been attached.
            ExpectationFailedError: the first expectator that does not hold.
        """
        if not self.entries:
            self.logger.info(
                f"No expectators attached to '{self._name}'", extra=self._log_extra
            )
            raise NoExpectatorsError(self, NO_EXPECTATOR_ENTRIES_FOUND)

        self.logger.debug(
            f"Confirming {len(self.entries)} expectator(s) for '{self._name}'",
            extra=self._log_extra,
        )
        self.entries.confirm(logger=self.logger)
        self.logger.debug(f"Expectation '{self._name}' confirmed", extra=self._log_extra)

    def check(self) -> ConfirmationResult:
        """Confirm and capture the outcome instead of raising."""
        try:
            self.confirm()
        except ExpectatorError as e:
            return ConfirmationResult(
                name=self._name, passed=False, message=str(e), error=e
            )
        return ConfirmationResult(name=self._name, passed=True, message="confirmed")
