from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tokenguard.components.color_contrast import AA_NORMAL_TEXT

COLOR_CATEGORIES = ("background", "text", "icon", "border", "accent", "interactive")
NON_COLOR_CATEGORIES = ("space", "radius", "shadow", "size", "type")
DEFAULT_MODES = ("light", "dark")

LiteralValue = str | int | float


class ContrastPair(BaseModel):
    """A background/text alias pair and its minimum WCAG ratio."""

    background: str
    text: str
    min: float = AA_NORMAL_TEXT

    model_config = ConfigDict(frozen=True)

    @field_validator("background", "text")
    @classmethod
    def _category_and_token(cls, v: str) -> str:
        category, sep, token = v.partition(".")
        if not sep or not category or not token or "." in token:
            raise ValueError(f"expected '<category>.<token>', got '{v}'")
        return v


def _default_pairs() -> list[ContrastPair]:
    return [
        ContrastPair(background="background.primary", text="text.primary", min=4.5),
        ContrastPair(background="background.secondary", text="text.primary", min=4.5),
        ContrastPair(background="background.tertiary", text="text.secondary", min=4.5),
    ]


class ValidatorRules(BaseModel):
    color_categories: list[str] = Field(default_factory=lambda: list(COLOR_CATEGORIES))
    modes: list[str] = Field(default_factory=lambda: list(DEFAULT_MODES), min_length=1)
    contrast_pairs: list[ContrastPair] = Field(default_factory=_default_pairs)
    alias_value_allowlist: dict[str, list[LiteralValue]] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("alias_value_allowlist")
    @classmethod
    def _known_categories(cls, v: dict[str, list[LiteralValue]]) -> dict[str, list[LiteralValue]]:
        unknown = sorted(set(v) - set(NON_COLOR_CATEGORIES))
        if unknown:
            raise ValueError(f"allowlist categories must be non-color categories, got {unknown}")
        return v

    @property
    def reference_mode(self) -> str:
        return self.modes[0]

    def allowlist(self) -> Mapping[str, frozenset[LiteralValue]]:
        """Immutable category -> allowed literal values view; every non-color category present."""
        return MappingProxyType(
            {
                category: frozenset(self.alias_value_allowlist.get(category, ()))
                for category in NON_COLOR_CATEGORIES
            }
        )
