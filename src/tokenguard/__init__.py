"""
tokenguard - design token source validation.

Checks a DTCG token tree against its hand-authored alias map: mode symmetry,
alias resolution, alias coverage and WCAG contrast.
"""

from tokenguard.components.tokens import (
    ErrorCode,
    TokenValidationError,
    ValidateTokensInput,
    ValidateTokensOutput,
    run,
    validate_tokens,
)

__version__ = "0.1.0"

__all__ = [
    "ErrorCode",
    "TokenValidationError",
    "ValidateTokensInput",
    "ValidateTokensOutput",
    "run",
    "validate_tokens",
]
