import argparse
import asyncio
import json
import logging
import sys

from tokenguard.components.tokens import (
    TokenValidationError,
    ValidateTokensInput,
    validate_tokens,
)

logger = logging.getLogger("cli")

EXIT_OK = 0
EXIT_FINDINGS = 1
EXIT_LOAD_ERROR = 2


def format_report(errors: list[TokenValidationError]) -> str:
    if not errors:
        return "Token validation passed."

    lines = [f"Token validation failed with {len(errors)} error(s):"]
    for error in errors:
        lines.append(f"{error.code.value}: {error.message}")
        lines.append(f"    {error.suggestion}")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tokenguard",
        description="Validate a design token source against its alias map",
    )
    parser.add_argument(
        "--tokens", help="Path to the DTCG token JSON (default: TOKENS_PATH or packaged)"
    )
    parser.add_argument(
        "--alias-map", help="Path to the alias map YAML/JSON (default: ALIAS_MAP_PATH or packaged)"
    )
    parser.add_argument(
        "--rules", help="Path to validator rules YAML (default: RULES_PATH or built-in)"
    )
    parser.add_argument("--json", action="store_true", help="Print findings as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    inp = ValidateTokensInput(
        tokens_path=args.tokens,
        alias_map_path=args.alias_map,
        rules_path=args.rules,
    )

    try:
        result = asyncio.run(validate_tokens(inp))
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Could not load token sources: {e}")
        return EXIT_LOAD_ERROR

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(format_report(result.errors))

    return EXIT_OK if result.success else EXIT_FINDINGS


if __name__ == "__main__":
    sys.exit(main())
