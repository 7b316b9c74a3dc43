"""
Tokens component input/output models.

The token tree itself stays as parsed JSON (nested dicts); only the alias
map, which is authored by hand, gets a schema.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field

TokenTree = dict[str, Any]

# --- Error Codes ---


class ErrorCode(str, Enum):
    """Stable finding codes consumers pattern-match on."""

    MODE_MISSING = "TOKEN_MODE_MISSING"
    ALIAS_RAW_VALUE = "TOKEN_ALIAS_RAW_VALUE"
    ALIAS_MISSING = "TOKEN_ALIAS_MISSING"
    ALIAS_VALUE_MISSING = "TOKEN_ALIAS_VALUE_MISSING"
    ALIAS_COMPUTED_VALUE_NOT_ALLOWED = "TOKEN_ALIAS_COMPUTED_VALUE_NOT_ALLOWED"
    ALIAS_NON_COLOR_BRAND_PATH = "TOKEN_ALIAS_NON_COLOR_BRAND_PATH"
    CONTRAST_FAIL = "TOKEN_CONTRAST_FAIL"


# --- Validation Error ---


@dataclass(frozen=True)
class TokenValidationError:
    """One detected token violation."""

    code: ErrorCode
    message: str
    suggestion: str

    def to_dict(self) -> dict[str, str]:
        return {"code": self.code.value, "message": self.message, "suggestion": self.suggestion}


# --- Alias Map ---


class PathRef(BaseModel):
    """Alias pointing at a dotted path in the token tree."""

    path: str

    model_config = ConfigDict(frozen=True, extra="forbid")


class ValueRef(BaseModel):
    """Alias carrying a literal value instead of a token path."""

    value: str | int | float

    model_config = ConfigDict(frozen=True, extra="forbid")


AliasRef = Union[PathRef, ValueRef]


class AliasMap(BaseModel):
    """
    Semantic alias names mapped onto the token tree.

    Color aliases are mode-qualified: color[category][token][mode].
    Every other category is unmoded: <category>[token].
    """

    color: dict[str, dict[str, dict[str, AliasRef]]] = Field(default_factory=dict)
    space: dict[str, AliasRef] = Field(default_factory=dict)
    radius: dict[str, AliasRef] = Field(default_factory=dict)
    shadow: dict[str, AliasRef] = Field(default_factory=dict)
    size: dict[str, AliasRef] = Field(default_factory=dict)
    type: dict[str, AliasRef] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True, extra="forbid")

    def category(self, name: str) -> dict[str, AliasRef]:
        """Unmoded aliases for a non-color category."""
        result: dict[str, AliasRef] = getattr(self, name)
        return result


# --- Input Models ---


@dataclass(frozen=True)
class ValidateTokensInput:
    """Input for a validation run. Unset paths are resolved from env/defaults."""

    tokens_path: Path | str | None = None
    alias_map_path: Path | str | None = None
    rules_path: Path | str | None = None


# --- Output Models ---


@dataclass(frozen=True)
class ValidateTokensOutput:
    """Output of a validation run; an empty error list is a clean pass."""

    errors: list[TokenValidationError] = field(default_factory=list)
    tokens_path: Path | None = None

    @property
    def success(self) -> bool:
        return len(self.errors) == 0

    def to_dict(self) -> dict[str, Any]:
        return {"errors": [e.to_dict() for e in self.errors]}
