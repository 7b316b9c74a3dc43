"""
Color contrast component: WCAG color math used by the token contrast rules.
"""

from tokenguard.components.color_contrast.fc import (
    AA_NORMAL_TEXT,
    RGB,
    contrast_ratio,
    hex_to_rgb,
    meets_minimum,
    relative_luminance,
)

__all__ = [
    "RGB",
    "hex_to_rgb",
    "relative_luminance",
    "contrast_ratio",
    "meets_minimum",
    "AA_NORMAL_TEXT",
]
