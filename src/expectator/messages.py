"""Failure message rendering for expectator entries."""

from __future__ import annotations

import re
from typing import Any

EXPECTED_TOKEN = "{expected}"
ACTUAL_TOKEN = "{actual}"

_TOKEN_RE = re.compile(re.escape(EXPECTED_TOKEN) + "|" + re.escape(ACTUAL_TOKEN))


def describe(value: Any) -> str | None:
    """Return the string form of *value* used in failure messages.

    ``None`` stays ``None`` so the renderer can substitute its own text for it.
    Top-level booleans render as ``true``/``false``; values nested in a
    container keep their ``str()`` form, so ``[True]`` renders as ``[True]``.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class FailureMessageBuilder:
    """Build a failure message from a template with ``{expected}``/``{actual}`` tokens.

    Example template: ``"The value {expected} does not equal {actual}"``.
    Neither token is required; a template without them renders unchanged.
    """

    def __init__(self, null_text: str = "") -> None:
        self.null_text = null_text
        self._expected: str | None = None
        self._actual: str | None = None

    def _value(self, value: str | None) -> str:
        return self.null_text if value is None else value

    @property
    def expected(self) -> str:
        return self._value(self._expected)

    @property
    def actual(self) -> str:
        return self._value(self._actual)

    def set_expected(self, expected: str | None) -> FailureMessageBuilder:
        self._expected = expected
        return self

    def set_actual(self, actual: str | None) -> FailureMessageBuilder:
        self._actual = actual
        return self

    def build(self, template: str) -> str:
        # Single pass, so substituted values are never rescanned for tokens.
        values = {EXPECTED_TOKEN: self.expected, ACTUAL_TOKEN: self.actual}
        return _TOKEN_RE.sub(lambda m: values[m.group(0)], template)


def render(
    template: str,
    expected: str | None,
    actual: str | None,
    null_text: str = "",
) -> str:
    """Render *template*, substituting ``null_text`` for missing values."""
    return (
        FailureMessageBuilder(null_text=null_text)
        .set_expected(expected)
        .set_actual(actual)
        .build(template)
    )
