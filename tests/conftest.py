from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
import yaml

from tokenguard.components.tokens import AliasMap, parse_alias_map


def _write_sources(
    directory: Path,
    tree: dict[str, Any],
    alias_map: dict[str, Any],
) -> tuple[Path, Path]:
    tokens_path = directory / "index.dtcg.json"
    alias_path = directory / "alias_map.yaml"
    tokens_path.write_text(json.dumps(tree), encoding="utf-8")
    alias_path.write_text(yaml.safe_dump(alias_map, sort_keys=False), encoding="utf-8")
    return tokens_path, alias_path


@pytest.fixture
def write_sources() -> Callable[[Path, dict[str, Any], dict[str, Any]], tuple[Path, Path]]:
    """Writes a token tree and alias map to disk, returning their paths."""
    return _write_sources


@pytest.fixture(autouse=True)
def isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer environment overrides out of the tests."""
    for key in ("TOKENS_PATH", "ALIAS_MAP_PATH", "RULES_PATH"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def clean_tree() -> dict[str, Any]:
    """
    Smallest tree that passes every check: one background and one text
    color per mode, with black/white contrast.
    """
    return {
        "color": {
            "background": {
                "light": {"primary": {"$value": "#FFFFFF", "$type": "color"}},
                "dark": {"primary": {"$value": "#000000", "$type": "color"}},
            },
            "text": {
                "light": {"primary": {"$value": "#000000", "$type": "color"}},
                "dark": {"primary": {"$value": "#FFFFFF", "$type": "color"}},
            },
        },
        "space": {"s8": {"$value": {"value": 8, "unit": "px"}, "$type": "dimension"}},
        "type": {
            "body": {
                "size": {"$value": {"value": 16, "unit": "px"}, "$type": "dimension"},
                "weight": {"$value": 400, "$type": "fontWeight"},
            }
        },
    }


@pytest.fixture
def clean_alias_data() -> dict[str, Any]:
    """Raw alias map matching clean_tree."""
    return {
        "color": {
            "background": {
                "primary": {
                    "light": {"path": "color.background.light.primary"},
                    "dark": {"path": "color.background.dark.primary"},
                }
            },
            "text": {
                "primary": {
                    "light": {"path": "color.text.light.primary"},
                    "dark": {"path": "color.text.dark.primary"},
                }
            },
        },
        "space": {"sm": {"path": "space.s8"}},
        "type": {"body": {"path": "type.body"}},
    }


@pytest.fixture
def clean_alias_map(clean_alias_data: dict[str, Any]) -> AliasMap:
    return parse_alias_map(clean_alias_data)
