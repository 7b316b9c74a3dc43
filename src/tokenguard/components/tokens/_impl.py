"""
Token validation checks.

Every check is a pure function from (token tree, alias map, configuration)
to a list of findings. Findings are appended in iteration order and never
sorted; checks never raise on oddly shaped trees.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence

from tokenguard.components.color_contrast import contrast_ratio, meets_minimum
from tokenguard.rules.models import (
    COLOR_CATEGORIES,
    DEFAULT_MODES,
    NON_COLOR_CATEGORIES,
    ContrastPair,
    LiteralValue,
    ValidatorRules,
)

from ._tree import has_value, is_token_group, mapping_at, string_value, token_at
from .models import AliasMap, ErrorCode, PathRef, TokenTree, TokenValidationError, ValueRef

logger = logging.getLogger(__name__)

ALIAS_MISSING_SUGGESTION = "Update the alias map or add the missing token to the token source."
RAW_VALUE_SUGGESTION = "Replace raw values with a token path reference in the alias map."


def _join(items: Iterable[str]) -> str:
    return ", ".join(items) or "none"


def _human_join(items: Sequence[str]) -> str:
    if len(items) <= 2:
        return " and ".join(items)
    return f"{', '.join(items[:-1])}, and {items[-1]}"


# --- Mode completeness ---


def check_mode_completeness(
    root: TokenTree,
    *,
    categories: Sequence[str] = COLOR_CATEGORIES,
    modes: Sequence[str] = DEFAULT_MODES,
) -> list[TokenValidationError]:
    """One finding per color category whose modes do not share the same key set."""
    errors: list[TokenValidationError] = []

    for category in categories:
        keys_by_mode = {mode: sorted(mapping_at(root, "color", category, mode)) for mode in modes}
        all_keys = sorted(set().union(*keys_by_mode.values()))
        missing = {
            mode: [key for key in all_keys if key not in keys_by_mode[mode]] for mode in modes
        }

        if not any(missing.values()):
            continue

        details = " ".join(f"Missing {mode}: {_join(keys)}." for mode, keys in missing.items())
        errors.append(
            TokenValidationError(
                code=ErrorCode.MODE_MISSING,
                message=f"Color mode mismatch in '{category}'.",
                suggestion=(
                    f"Ensure {_human_join(list(modes))} mode tokens have matching keys. "
                    f"{details}"
                ),
            )
        )

    return errors


# --- Alias resolution ---


def check_alias_resolution(root: TokenTree, alias_map: AliasMap) -> list[TokenValidationError]:
    """
    Every alias must point at a token that exists.

    Colors: the alias map drives iteration (category, token, mode); a literal
    is always rejected. Other categories: literals are left to
    check_alias_allowlist, and "type" aliases may target a composite group.
    """
    errors: list[TokenValidationError] = []

    for category, tokens in alias_map.color.items():
        for token_name, modes in tokens.items():
            for mode, ref in modes.items():
                alias_id = f"{category}.{token_name}.{mode}"
                if isinstance(ref, ValueRef):
                    errors.append(
                        TokenValidationError(
                            code=ErrorCode.ALIAS_RAW_VALUE,
                            message=f"Alias '{alias_id}' uses a raw value instead of a token path.",
                            suggestion=RAW_VALUE_SUGGESTION,
                        )
                    )
                    continue
                if not has_value(token_at(root, ref.path)):
                    errors.append(
                        TokenValidationError(
                            code=ErrorCode.ALIAS_MISSING,
                            message=f"Alias '{alias_id}' references missing path '{ref.path}'.",
                            suggestion=ALIAS_MISSING_SUGGESTION,
                        )
                    )

    for category in NON_COLOR_CATEGORIES:
        for token_name, ref in alias_map.category(category).items():
            if not isinstance(ref, PathRef):
                continue
            node = token_at(root, ref.path)
            if has_value(node):
                continue
            if category == "type" and is_token_group(node):
                continue
            alias_id = f"{category}.{token_name}"
            errors.append(
                TokenValidationError(
                    code=ErrorCode.ALIAS_MISSING,
                    message=f"Alias '{alias_id}' references missing path '{ref.path}'.",
                    suggestion=ALIAS_MISSING_SUGGESTION,
                )
            )

    return errors


def check_alias_allowlist(
    alias_map: AliasMap,
    allowlist: Mapping[str, frozenset[LiteralValue]],
) -> list[TokenValidationError]:
    """Non-color literal aliases must be pre-approved for their category."""
    errors: list[TokenValidationError] = []

    for category in NON_COLOR_CATEGORIES:
        allowed = allowlist.get(category, frozenset())
        for token_name, ref in alias_map.category(category).items():
            if isinstance(ref, ValueRef) and ref.value not in allowed:
                errors.append(
                    TokenValidationError(
                        code=ErrorCode.ALIAS_COMPUTED_VALUE_NOT_ALLOWED,
                        message=(
                            f"Alias '{category}.{token_name}' uses computed value "
                            f"'{ref.value}' outside the allowlist."
                        ),
                        suggestion=(
                            f"Prefer a token path reference ({category}.*) or add the value "
                            f"to the {category} allowlist in the validator rules."
                        ),
                    )
                )

    return errors


def check_alias_path_prefix(alias_map: AliasMap) -> list[TokenValidationError]:
    """Non-color path aliases must stay inside their own category."""
    errors: list[TokenValidationError] = []

    for category in NON_COLOR_CATEGORIES:
        prefix = f"{category}."
        for token_name, ref in alias_map.category(category).items():
            if isinstance(ref, PathRef) and not ref.path.startswith(prefix):
                errors.append(
                    TokenValidationError(
                        code=ErrorCode.ALIAS_NON_COLOR_BRAND_PATH,
                        message=(
                            f"Alias '{category}.{token_name}' must reference a path "
                            f"starting with '{prefix}'."
                        ),
                        suggestion=(
                            f"Update the alias to reference a {category} token "
                            f"(for example: {prefix}{token_name})."
                        ),
                    )
                )

    return errors


# --- Alias coverage ---


def check_alias_coverage(
    root: TokenTree,
    alias_map: AliasMap,
    *,
    categories: Sequence[str] = COLOR_CATEGORIES,
    reference_mode: str = DEFAULT_MODES[0],
) -> list[TokenValidationError]:
    """One finding per color category listing reference-mode tokens without an alias."""
    errors: list[TokenValidationError] = []

    for category in categories:
        aliased = alias_map.color.get(category, {})
        reference = mapping_at(root, "color", category, reference_mode)
        missing = [key for key in reference if key not in aliased]

        if missing:
            errors.append(
                TokenValidationError(
                    code=ErrorCode.ALIAS_VALUE_MISSING,
                    message=f"Alias map missing {category} tokens: {', '.join(missing)}.",
                    suggestion="Update the alias map to cover all tokens.",
                )
            )

    return errors


# --- Contrast ---


def resolve_alias_color(
    root: TokenTree,
    alias_map: AliasMap,
    category: str,
    token_name: str,
    mode: str,
) -> str | None:
    """Follow a color alias to its string value, or None if it does not resolve."""
    ref = alias_map.color.get(category, {}).get(token_name, {}).get(mode)
    if ref is None:
        return None
    if isinstance(ref, ValueRef):
        return ref.value if isinstance(ref.value, str) else None
    return string_value(token_at(root, ref.path))


def check_contrast(
    root: TokenTree,
    alias_map: AliasMap,
    *,
    pairs: Sequence[ContrastPair],
    modes: Sequence[str] = DEFAULT_MODES,
) -> list[TokenValidationError]:
    """
    Each pair must meet its minimum ratio in every mode.

    Pairs whose aliases do not resolve, or whose values are not #RRGGBB,
    are skipped: the alias checks already report them.
    """
    errors: list[TokenValidationError] = []

    for pair in pairs:
        bg_category, bg_token = pair.background.split(".", 1)
        text_category, text_token = pair.text.split(".", 1)

        for mode in modes:
            background = resolve_alias_color(root, alias_map, bg_category, bg_token, mode)
            text = resolve_alias_color(root, alias_map, text_category, text_token, mode)
            if background is None or text is None:
                logger.debug(
                    "Skipping contrast %s on %s (%s): unresolved", pair.text, pair.background, mode
                )
                continue

            ratio = contrast_ratio(text, background)
            if ratio is None:
                logger.debug(
                    "Skipping contrast %s on %s (%s): not #RRGGBB", pair.text, pair.background, mode
                )
                continue
            if not meets_minimum(ratio, pair.min):
                errors.append(
                    TokenValidationError(
                        code=ErrorCode.CONTRAST_FAIL,
                        message=(
                            f"Contrast ratio {ratio:.2f} for {pair.text} on {pair.background} "
                            f"({mode}) is below {pair.min:g}."
                        ),
                        suggestion="Adjust token values or update the contrast pair thresholds.",
                    )
                )

    return errors


# --- All checks ---


def run_checks(
    root: TokenTree,
    alias_map: AliasMap,
    rules: ValidatorRules,
) -> list[TokenValidationError]:
    """Run every check in a fixed order and concatenate the findings."""
    checks = [
        (
            "mode_completeness",
            lambda: check_mode_completeness(
                root, categories=rules.color_categories, modes=rules.modes
            ),
        ),
        ("alias_resolution", lambda: check_alias_resolution(root, alias_map)),
        ("alias_allowlist", lambda: check_alias_allowlist(alias_map, rules.allowlist())),
        ("alias_path_prefix", lambda: check_alias_path_prefix(alias_map)),
        (
            "alias_coverage",
            lambda: check_alias_coverage(
                root,
                alias_map,
                categories=rules.color_categories,
                reference_mode=rules.reference_mode,
            ),
        ),
        (
            "contrast",
            lambda: check_contrast(root, alias_map, pairs=rules.contrast_pairs, modes=rules.modes),
        ),
    ]

    errors: list[TokenValidationError] = []
    for name, check in checks:
        found = check()
        logger.debug("Check %s: %d finding(s)", name, len(found))
        errors.extend(found)
    return errors
