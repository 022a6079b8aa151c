"""Readability checks for transformed colors.

The invert + hue-rotate transform is typically used to derive dark-mode
colors, so each result can be checked against the background it will sit
on.
"""

import logging

from pptx.dml.color import RGBColor

logger = logging.getLogger(__name__)


def calculate_luminance(color: RGBColor) -> float:
    """Calculate relative luminance per WCAG 2.0 standard.

    Args:
        color: RGB color to analyze.

    Returns:
        Relative luminance value (0.0 to 1.0).

    Reference:
        https://www.w3.org/TR/WCAG20/#relativeluminancedef
    """
    r, g, b = color[0] / 255.0, color[1] / 255.0, color[2] / 255.0

    def linearize(c: float) -> float:
        if c <= 0.03928:
            return c / 12.92
        return ((c + 0.055) / 1.055) ** 2.4

    return 0.2126 * linearize(r) + 0.7152 * linearize(g) + 0.0722 * linearize(b)


def calculate_contrast_ratio(foreground: RGBColor, background: RGBColor) -> float:
    """Calculate WCAG contrast ratio between two colors.

    Order of the arguments does not matter.

    Returns:
        Contrast ratio from 1.0 (same luminance) to 21.0 (black and white).

    Reference:
        https://www.w3.org/TR/WCAG20/#contrast-ratiodef
    """
    lum_fg = calculate_luminance(foreground)
    lum_bg = calculate_luminance(background)

    lighter = max(lum_fg, lum_bg)
    darker = min(lum_fg, lum_bg)

    return (lighter + 0.05) / (darker + 0.05)


def validate_color_contrast(
    foreground: RGBColor,
    background: RGBColor,
    minimum: float = 4.5,
) -> list[str]:
    """Validate color contrast and return warnings if contrast is poor.

    Args:
        foreground: Transformed color.
        background: Background the color will be shown on.
        minimum: Lowest acceptable contrast ratio.

    Returns:
        List of warning messages. Empty if colors have acceptable contrast.
    """
    warnings = []
    contrast = calculate_contrast_ratio(foreground, background)
    logger.debug(f"Contrast #{foreground} on #{background}: {contrast:.2f}")

    if contrast < 1.5:
        warnings.append(
            f"Colors are very similar (contrast ratio: {contrast:.1f}). "
            "Text may be difficult to read against the background."
        )
    elif contrast < minimum:
        warnings.append(
            f"Contrast ratio is {contrast:.1f}, below the required {minimum:.1f}:1 "
            "against the background."
        )

    return warnings
