from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, field_validator


class ExpectatorSettings(BaseModel):
    """Per-expectation behaviour settings.

    Attributes:
        ordered: Confirm entries in insertion order. When False, entries are
            confirmed in unspecified set order.
        null_text: Text substituted for ``None`` values in failure messages.
        name_separator: Placed between the expectation name and the message.
    """

    model_config = ConfigDict(extra="forbid")

    ordered: bool = True
    null_text: str = ""
    name_separator: str = ": "

    @field_validator("name_separator")
    @classmethod
    def separator_must_not_be_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("name_separator must not be empty")
        return v


def _expand(value: Any) -> Any:
    if isinstance(value, str):
        return expandvars(value, nounset=True)
    if isinstance(value, dict):
        return {k: _expand(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_expand(v) for v in value]
    return value


def load_settings(path: Path) -> ExpectatorSettings:
    """Load and validate expectator settings from a YAML file.

    ``${VAR}`` references in string values are expanded from the environment;
    a reference without a default to an unset variable raises.
    """
    with open(path) as f:
        raw = yaml.safe_load(f)

    if raw is None:
        return ExpectatorSettings()
    if not isinstance(raw, dict):
        raise ValueError(f"Settings file {path} must contain a mapping")

    return ExpectatorSettings(**_expand(raw))
