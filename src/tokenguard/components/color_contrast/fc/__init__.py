"""
Color contrast functional core: pure WCAG 2.x color math.

No I/O operations - all functions are pure and deterministic.
Malformed colors yield None instead of raising.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# ═══════════════════════════════════════════════════════════════════════════
# COLOR SYSTEM
# WCAG 2.x AA: 4.5:1 for normal text
# ═══════════════════════════════════════════════════════════════════════════

# sRGB transfer function constants as published in WCAG 2.x
SRGB_LINEAR_THRESHOLD = 0.03928
SRGB_LINEAR_DIVISOR = 12.92
SRGB_OFFSET = 0.055
SRGB_SCALE = 1.055
SRGB_GAMMA = 2.4

# ITU-R BT.709 luminance coefficients
LUMINANCE_WEIGHTS = (0.2126, 0.7152, 0.0722)

AA_NORMAL_TEXT = 4.5

HEX_DIGITS_PATTERN = re.compile(r"^[0-9A-Fa-f]{6}$")


@dataclass(frozen=True)
class RGB:
    """8-bit sRGB channels."""

    r: int
    g: int
    b: int


def hex_to_rgb(hex_color: str) -> RGB | None:
    """
    Decode a #RRGGBB color.

    A leading '#' is stripped and surrounding whitespace trimmed. Anything
    other than exactly six hex digits (including #RGB shorthand and #RRGGBBAA)
    returns None.
    """
    clean = hex_color.replace("#", "", 1).strip()
    if not HEX_DIGITS_PATTERN.match(clean):
        return None

    return RGB(
        r=int(clean[0:2], 16),
        g=int(clean[2:4], 16),
        b=int(clean[4:6], 16),
    )


def _linearize(channel: int) -> float:
    normalized = channel / 255
    if normalized <= SRGB_LINEAR_THRESHOLD:
        return normalized / SRGB_LINEAR_DIVISOR
    return float(((normalized + SRGB_OFFSET) / SRGB_SCALE) ** SRGB_GAMMA)


def relative_luminance(rgb: RGB) -> float:
    """
    Calculate relative luminance per WCAG 2.x.

    Formula: L = 0.2126 * R + 0.7152 * G + 0.0722 * B
    Where R, G, B are sRGB values normalized and linearized.
    """
    wr, wg, wb = LUMINANCE_WEIGHTS
    return wr * _linearize(rgb.r) + wg * _linearize(rgb.g) + wb * _linearize(rgb.b)


def contrast_ratio(fg: str, bg: str) -> float | None:
    """
    Calculate WCAG contrast ratio between two colors.

    Args:
        fg: Foreground color in hex format
        bg: Background color in hex format

    Returns:
        Contrast ratio (1.0 to 21.0), or None if either color fails to parse
    """
    fg_rgb = hex_to_rgb(fg)
    bg_rgb = hex_to_rgb(bg)
    if fg_rgb is None or bg_rgb is None:
        return None

    l1 = relative_luminance(fg_rgb)
    l2 = relative_luminance(bg_rgb)

    lighter = max(l1, l2)
    darker = min(l1, l2)

    return (lighter + 0.05) / (darker + 0.05)


def meets_minimum(ratio: float, minimum: float) -> bool:
    """A ratio passes when it is at least the minimum; the boundary passes."""
    return not ratio < minimum

