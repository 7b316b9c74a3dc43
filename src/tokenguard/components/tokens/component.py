"""
Tokens component - Validate a design token source against its alias map.

Loads the DTCG token tree and the alias map, runs every check in a fixed
order and returns all findings at once.

Invariants:
- light and dark color modes carry the same keys per category
- every path alias resolves to a token with a value
- color aliases never carry literal values
- every reference-mode color token has an alias
- configured background/text pairs meet their minimum contrast

Load failures (missing file, malformed JSON/YAML) raise; findings never do.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from tokenguard.rules import ValidatorRules, load_rules

from ._impl import run_checks
from .adapters import default_environment, default_filesystem
from .models import AliasMap, TokenTree, ValidateTokensInput, ValidateTokensOutput
from .ports import EnvironmentPort, FileSystemPort

logger = logging.getLogger(__name__)

PACKAGE_TOKENS_DIR = Path(__file__).resolve().parent.parent.parent / "tokens"
MODULE_TOKENS_PATH = PACKAGE_TOKENS_DIR / "index.dtcg.json"
DEFAULT_ALIAS_MAP_PATH = PACKAGE_TOKENS_DIR / "alias_map.yaml"
CWD_TOKENS_PATH = Path("src") / "tokens" / "index.dtcg.json"

TOKENS_PATH_ENV = "TOKENS_PATH"
ALIAS_MAP_PATH_ENV = "ALIAS_MAP_PATH"
RULES_PATH_ENV = "RULES_PATH"


# --- Path resolution ---


def resolve_tokens_path(
    explicit: Path | str | None = None,
    *,
    fs: FileSystemPort = default_filesystem,
    env: EnvironmentPort = default_environment,
) -> Path:
    """
    Locate the token source.

    Order: explicit path, TOKENS_PATH, the packaged index.dtcg.json when it
    exists as a local file, then <cwd>/src/tokens/index.dtcg.json.
    """
    if explicit is not None:
        return Path(explicit)

    env_path = env.get(TOKENS_PATH_ENV)
    if env_path:
        return Path(env_path)

    if fs.exists(MODULE_TOKENS_PATH):
        return MODULE_TOKENS_PATH

    return env.cwd() / CWD_TOKENS_PATH


def resolve_alias_map_path(
    explicit: Path | str | None = None,
    *,
    env: EnvironmentPort = default_environment,
) -> Path:
    if explicit is not None:
        return Path(explicit)
    env_path = env.get(ALIAS_MAP_PATH_ENV)
    if env_path:
        return Path(env_path)
    return DEFAULT_ALIAS_MAP_PATH


# --- Loading ---


def load_token_tree(path: Path, *, fs: FileSystemPort = default_filesystem) -> TokenTree:
    """
    Read and parse the token source.
    Raises FileNotFoundError if file missing.
    Raises ValueError if the JSON is malformed or not an object.
    """
    if not fs.exists(path):
        raise FileNotFoundError(f"Token source not found at: {path}")

    try:
        data = fs.read_json(path)
    except ValueError as e:
        # json.JSONDecodeError and UnicodeDecodeError are both ValueErrors
        raise ValueError(f"Invalid JSON in token source {path}: {e}") from e

    if not isinstance(data, dict):
        kind = type(data).__name__
        raise ValueError(f"Token source {path} must contain a JSON object, got {kind}")

    tree: TokenTree = data
    return tree


def _stringify_keys(data: Any) -> Any:
    # YAML reads unquoted names like `4:` as ints; token names are strings
    if isinstance(data, dict):
        return {str(key): _stringify_keys(value) for key, value in data.items()}
    return data


def parse_alias_map(data: Any) -> AliasMap:
    """Validate a raw alias map document. Raises ValueError on schema errors."""
    if data is None:
        data = {}
    try:
        return AliasMap.model_validate(_stringify_keys(data))
    except ValidationError as e:
        raise ValueError(f"Alias map validation failed:\n{e}") from e


def load_alias_map(path: Path, *, fs: FileSystemPort = default_filesystem) -> AliasMap:
    """
    Read an alias map file (YAML, or JSON since YAML is a superset).
    Raises FileNotFoundError if file missing.
    Raises ValueError if the document is malformed.
    """
    if not fs.exists(path):
        raise FileNotFoundError(f"Alias map not found at: {path}")

    try:
        data = fs.read_yaml(path)
    except (yaml.YAMLError, ValueError) as e:
        # UnicodeDecodeError is a ValueError
        raise ValueError(f"Failed to parse alias map {path}: {e}") from e

    return parse_alias_map(data)


def _load_rules_for(
    inp: ValidateTokensInput,
    env: EnvironmentPort,
) -> ValidatorRules:
    rules_path = inp.rules_path or env.get(RULES_PATH_ENV)
    if not rules_path:
        return ValidatorRules()
    return load_rules(Path(rules_path))


# --- Component Entry Points ---


def run_validate(
    root: TokenTree,
    alias_map: AliasMap,
    *,
    rules: ValidatorRules | None = None,
) -> ValidateTokensOutput:
    """
    Validate an already-loaded token tree.

    Pure function - no I/O operations.

    Args:
        root: Parsed token tree.
        alias_map: Alias map under test.
        rules: Validator rules. Uses defaults if None.

    Returns:
        ValidateTokensOutput with every finding (empty if valid).
    """
    if rules is None:
        rules = ValidatorRules()

    return ValidateTokensOutput(errors=run_checks(root, alias_map, rules))


def run(
    inp: ValidateTokensInput,
    *,
    alias_map: AliasMap | None = None,
    rules: ValidatorRules | None = None,
    fs: FileSystemPort = default_filesystem,
    env: EnvironmentPort = default_environment,
) -> ValidateTokensOutput:
    """
    Load the token source and validate it.

    This is the synchronous entry point for the tokens component. The token
    tree is read fresh on every call.

    Args:
        inp: Input with optional token, alias map and rules paths.
        alias_map: Alias map to validate. Loaded from file if None.
        rules: Validator rules. Loaded from file (or defaults) if None.
        fs: File system port for reading files.
        env: Environment port for reading env vars.

    Returns:
        ValidateTokensOutput with every finding.

    Raises:
        FileNotFoundError: A source file is missing.
        ValueError: A source file is malformed.
    """
    if rules is None:
        rules = _load_rules_for(inp, env)
    if alias_map is None:
        alias_map = load_alias_map(resolve_alias_map_path(inp.alias_map_path, env=env), fs=fs)

    tokens_path = resolve_tokens_path(inp.tokens_path, fs=fs, env=env)
    logger.info("Validating tokens from %s", tokens_path)
    root = load_token_tree(tokens_path, fs=fs)

    result = run_validate(root, alias_map, rules=rules)
    return ValidateTokensOutput(errors=result.errors, tokens_path=tokens_path)


async def validate_tokens(
    inp: ValidateTokensInput | None = None,
    *,
    alias_map: AliasMap | None = None,
    rules: ValidatorRules | None = None,
    fs: FileSystemPort = default_filesystem,
    env: EnvironmentPort = default_environment,
) -> ValidateTokensOutput:
    """
    Async entry point for build pipelines.

    File reads happen off the event loop; the checks themselves are pure and
    run after loading completes. Concurrent calls share no state.
    """
    return await asyncio.to_thread(
        run,
        inp or ValidateTokensInput(),
        alias_map=alias_map,
        rules=rules,
        fs=fs,
        env=env,
    )
