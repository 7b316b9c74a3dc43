"""
Token tree navigation.

A token tree is parsed DTCG JSON: nested dicts whose leaves carry a
"$value" key (or "value" in hand-written trees). Anything that is not a
dict is opaque and stops navigation.
"""

from __future__ import annotations

from typing import Any

VALUE_KEYS = ("$value", "value")


def resolve_path(root: Any, path: str) -> Any | None:
    """
    Walk a dotted path through the tree.

    Returns the node found, or None as soon as a non-mapping is reached
    or a segment is absent. Empty segments are looked up as "" keys.
    """
    current = root
    for part in path.split("."):
        if not isinstance(current, dict):
            return None
        current = current.get(part)
    return current


def token_at(root: Any, path: str) -> Any | None:
    """
    Resolve a path that names a token or token group.

    "$"-prefixed segments address DTCG token properties ($value, $type),
    not tokens, so a path through one never resolves. This keeps a
    dimension payload such as {"value": 8, "unit": "px"} from passing as
    a plain-"value" leaf.
    """
    if any(part.startswith("$") for part in path.split(".")):
        return None
    return resolve_path(root, path)


def has_value(node: Any) -> bool:
    """True if node is a leaf carrying a value key."""
    return isinstance(node, dict) and any(key in node for key in VALUE_KEYS)


def leaf_value(node: Any) -> Any | None:
    if not isinstance(node, dict):
        return None
    for key in VALUE_KEYS:
        if key in node:
            return node[key]
    return None


def string_value(node: Any) -> str | None:
    value = leaf_value(node)
    return value if isinstance(value, str) else None


def is_token_group(node: Any) -> bool:
    """
    True if at least one direct child is a leaf.

    A composite typography token ({"size": {...}, "weight": {...}}) is a
    group; an empty mapping or a pure namespace node is not.
    """
    if not isinstance(node, dict):
        return False
    return any(has_value(entry) for entry in node.values())


def mapping_at(node: Any, *keys: str) -> dict[str, Any]:
    """Descend through keys, treating anything absent or non-mapping as {}."""
    current = node
    for key in keys:
        if not isinstance(current, dict):
            return {}
        current = current.get(key)
    return current if isinstance(current, dict) else {}
