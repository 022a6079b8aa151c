"""Configuration models and hex color parsing for hueflip."""

import string
from dataclasses import dataclass
from typing import Self

from pptx.dml.color import RGBColor


class InvalidFormat(ValueError):
    """Raised when a string is not a ``#RRGGBB`` color."""

    def __init__(self, hex_color: str, reason: str = "6 characters"):
        self.hex_color = hex_color
        super().__init__(
            f'Invalid color format: "{hex_color}". Expected "#RRGGBB" ({reason}).'
        )


@dataclass
class TransformConfig:
    """Settings for the invert + hue-rotate transform.

    Attributes:
        invert: Whether to invert each channel before rotating the hue.
        hue_rotation: Degrees added to the hue, kept in [0, 360).
        background_color: Optional background that transformed colors are
            checked against for readability.
        min_contrast: Contrast ratio below which a transformed color gets a
            warning. 4.5 is the WCAG AA level for normal text.
    """

    invert: bool = True
    hue_rotation: float = 180.0
    background_color: RGBColor | None = None
    min_contrast: float = 4.5

    @classmethod
    def from_options(
        cls,
        invert: bool = True,
        hue_rotation: float = 180.0,
        bg_hex: str | None = None,
        min_contrast: float = 4.5,
    ) -> Self:
        """Create config from command-line style options.

        Args:
            invert: Whether to invert channels.
            hue_rotation: Hue rotation in degrees, any real number.
            bg_hex: Background color as hex string (e.g., "#1E1E1E"), or None.
            min_contrast: Minimum acceptable contrast ratio.

        Returns:
            TransformConfig with the rotation reduced into [0, 360).

        Raises:
            InvalidFormat: If bg_hex is not a valid hex color.
        """
        return cls(
            invert=invert,
            hue_rotation=hue_rotation % 360,
            background_color=hex_to_rgb(bg_hex) if bg_hex is not None else None,
            min_contrast=min_contrast,
        )

    def validate(self) -> list[str]:
        """Check the configuration for settings that are probably mistakes.

        Returns:
            List of warning messages. Empty if nothing looks off.
        """
        warnings = []

        if not self.invert and self.hue_rotation % 360 == 0:
            warnings.append(
                "Inversion is off and hue rotation is 0 degrees; "
                "every color will come out unchanged."
            )

        if not 1.0 <= self.min_contrast <= 21.0:
            warnings.append(
                f"Minimum contrast {self.min_contrast:.1f} is outside the "
                "1-21 range of WCAG contrast ratios."
            )

        return warnings


def hex_to_rgb(hex_color: str) -> RGBColor:
    """Convert a hex color string to RGBColor.

    Args:
        hex_color: Color as hex string, with or without a single '#' prefix.
            Letter case does not matter.

    Returns:
        RGBColor instance.

    Raises:
        InvalidFormat: If hex_color is not 6 characters after the prefix, or
            contains anything but hex digits.

    Examples:
        >>> hex_to_rgb("#FF0000")
        RGBColor(0xff, 0x00, 0x00)
        >>> hex_to_rgb("00ff00")
        RGBColor(0x00, 0xff, 0x00)
    """
    digits = hex_color.removeprefix("#").upper()

    if len(digits) != 6:
        raise InvalidFormat(hex_color)

    if any(char not in string.hexdigits for char in digits):
        raise InvalidFormat(hex_color, "hex digits 0-9, A-F only")

    return RGBColor.from_string(digits)


def rgb_to_hex(color: RGBColor) -> str:
    """Convert RGBColor to hex string.

    Args:
        color: RGBColor instance.

    Returns:
        Uppercase hex color string with '#' prefix.
    """
    # RGBColor string representation is like "RRGGBB"
    return f"#{str(color)}"
