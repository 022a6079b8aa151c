"""Invert + hue-rotate transform for hueflip.

``invert_hue_rotate`` reproduces the CSS filter chain
``invert(1) hue-rotate(180deg)`` on a single ``#RRGGBB`` color.
``transform_colors`` runs the configurable version over several inputs and
collects per-color results instead of stopping at the first bad one.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Callable, Iterable

from pptx.dml.color import RGBColor

from hueflip.core.conversions import hsl_to_rgb, rgb_to_hsl
from hueflip.core.validation import validate_color_contrast
from hueflip.models.config import InvalidFormat, TransformConfig, hex_to_rgb, rgb_to_hex

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int, str], None]


@dataclass
class TransformResult:
    """Result of transforming a single color."""

    source: str
    success: bool
    output: str | None
    warnings: list[str] = field(default_factory=list)


@dataclass
class BatchResult:
    """Result of transforming multiple colors."""

    results: list[TransformResult]

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def successful(self) -> int:
        return sum(1 for r in self.results if r.success)

    @property
    def all_warnings(self) -> list[str]:
        """Get all warnings from all colors."""
        warnings = []
        for result in self.results:
            for warning in result.warnings:
                warnings.append(f"{result.source}: {warning}")
        return warnings


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _to_channel(value: float) -> int:
    """Map a [0, 1] float to a clamped 0-255 integer channel."""
    return max(0, min(255, _round_half_away(value * 255)))


def _apply(color: RGBColor, config: TransformConfig) -> RGBColor:
    r, g, b = color
    if config.invert:
        r, g, b = 255 - r, 255 - g, 255 - b

    hsl = rgb_to_hsl(r / 255, g / 255, b / 255)
    hue = (hsl.h + config.hue_rotation) % 360
    rgb = hsl_to_rgb(hue, hsl.s, hsl.l)

    return RGBColor(_to_channel(rgb.r), _to_channel(rgb.g), _to_channel(rgb.b))


def transform_color(hex_color: str, config: TransformConfig) -> str:
    """Transform one hex color according to config.

    Args:
        hex_color: Color like "#123456" or "abcdef".
        config: Which steps to run and by how many degrees to rotate.

    Returns:
        Resulting color as "#RRGGBB" with uppercase digits.

    Raises:
        InvalidFormat: If hex_color is not a 6-digit hex color.
    """
    result = _apply(hex_to_rgb(hex_color), config)
    output = rgb_to_hex(result)
    logger.debug(f"{hex_color} -> {output}")
    return output


def invert_hue_rotate(hex_color: str) -> str:
    """Invert a color, then rotate its hue by 180 degrees.

    Equivalent to ``filter: invert(1) hue-rotate(180deg)``. The result keeps
    the hue of the input and flips its lightness, so applying it twice gives
    back the original color.

    Raises:
        InvalidFormat: If hex_color is not a 6-digit hex color.
    """
    return transform_color(hex_color, TransformConfig())


def transform_colors(
    colors: Iterable[str],
    config: TransformConfig,
    progress_callback: ProgressCallback | None = None,
) -> BatchResult:
    """Transform several colors, recording failures instead of raising.

    When the config has a background color, every transformed color is
    also checked for contrast against it.

    Args:
        colors: Hex color strings.
        config: Transform configuration.
        progress_callback: Optional callback(current, total, source).

    Returns:
        BatchResult with one TransformResult per input, in input order.
    """
    sources = list(colors)
    total = len(sources)
    results: list[TransformResult] = []

    for idx, source in enumerate(sources):
        try:
            transformed = _apply(hex_to_rgb(source), config)
        except InvalidFormat as e:
            logger.warning(f"Skipping {source!r}: {e}")
            results.append(
                TransformResult(source=source, success=False, output=None, warnings=[str(e)])
            )
        else:
            warnings: list[str] = []
            if config.background_color is not None:
                warnings = validate_color_contrast(
                    transformed, config.background_color, config.min_contrast
                )
            results.append(
                TransformResult(
                    source=source,
                    success=True,
                    output=rgb_to_hex(transformed),
                    warnings=warnings,
                )
            )

        if progress_callback:
            progress_callback(idx + 1, total, source)

    return BatchResult(results=results)
