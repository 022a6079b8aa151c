"""Core color math and transforms for hueflip."""

from hueflip.core.conversions import HSL, UnitRGB, hsl_to_rgb, rgb_to_hsl
from hueflip.core.transform import invert_hue_rotate, transform_color, transform_colors
from hueflip.core.validation import calculate_contrast_ratio, validate_color_contrast

__all__ = [
    "HSL",
    "UnitRGB",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "invert_hue_rotate",
    "transform_color",
    "transform_colors",
    "calculate_contrast_ratio",
    "validate_color_contrast",
]
