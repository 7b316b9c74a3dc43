"""
Validator rules: which categories, modes, contrast pairs and literal
allow-lists the token validation enforces.
"""

from tokenguard.rules.loader import load_rules
from tokenguard.rules.models import (
    COLOR_CATEGORIES,
    DEFAULT_MODES,
    NON_COLOR_CATEGORIES,
    ContrastPair,
    LiteralValue,
    ValidatorRules,
)

__all__ = [
    "load_rules",
    "ValidatorRules",
    "ContrastPair",
    "LiteralValue",
    "COLOR_CATEGORIES",
    "NON_COLOR_CATEGORIES",
    "DEFAULT_MODES",
]
