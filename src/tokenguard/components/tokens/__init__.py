"""
Tokens component - Design token source validation against the alias map.
"""

from ._impl import (
    check_alias_allowlist,
    check_alias_coverage,
    check_alias_path_prefix,
    check_alias_resolution,
    check_contrast,
    check_mode_completeness,
    resolve_alias_color,
    run_checks,
)
from ._tree import has_value, is_token_group, leaf_value, resolve_path, token_at
from .component import (
    load_alias_map,
    load_token_tree,
    parse_alias_map,
    resolve_alias_map_path,
    resolve_tokens_path,
    run,
    run_validate,
    validate_tokens,
)
from .models import (
    AliasMap,
    AliasRef,
    ErrorCode,
    PathRef,
    TokenTree,
    TokenValidationError,
    ValidateTokensInput,
    ValidateTokensOutput,
    ValueRef,
)
from .ports import EnvironmentPort, FileSystemPort

__all__ = [
    # Entry points
    "run",
    "run_validate",
    "validate_tokens",
    # Loading
    "load_token_tree",
    "load_alias_map",
    "parse_alias_map",
    "resolve_tokens_path",
    "resolve_alias_map_path",
    # Checks
    "check_mode_completeness",
    "check_alias_resolution",
    "check_alias_allowlist",
    "check_alias_path_prefix",
    "check_alias_coverage",
    "check_contrast",
    "resolve_alias_color",
    "run_checks",
    # Tree helpers
    "resolve_path",
    "token_at",
    "is_token_group",
    "has_value",
    "leaf_value",
    # Models
    "AliasMap",
    "AliasRef",
    "PathRef",
    "ValueRef",
    "ErrorCode",
    "TokenTree",
    "TokenValidationError",
    "ValidateTokensInput",
    "ValidateTokensOutput",
    # Ports
    "FileSystemPort",
    "EnvironmentPort",
]
