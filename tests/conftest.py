"""Pytest configuration and shared fixtures."""

import colorsys
import math

import pytest
from pptx.dml.color import RGBColor

from hueflip.models.config import TransformConfig


def reference_invert_hue_rotate(hex_color: str) -> str:
    """Independent invert + hue-rotate(180) built on the standard colorsys module."""
    digits = hex_color.lstrip("#")
    channels = [255 - int(digits[i:i + 2], 16) for i in (0, 2, 4)]
    h, l, s = colorsys.rgb_to_hls(*(c / 255 for c in channels))
    rotated = colorsys.hls_to_rgb((h + 0.5) % 1.0, l, s)
    out = [int(math.floor(c * 255 + 0.5)) for c in rotated]
    return "#" + "".join(f"{c:02X}" for c in out)


@pytest.fixture
def default_config() -> TransformConfig:
    """Default configuration: invert, then rotate the hue by 180 degrees."""
    return TransformConfig()


@pytest.fixture
def dark_background_config() -> TransformConfig:
    """Default transform, checked against a dark editor background."""
    return TransformConfig(background_color=RGBColor(0x1E, 0x1E, 0x1E))


@pytest.fixture
def sample_colors() -> list[str]:
    """A mix of chromatic, achromatic and edge-case colors."""
    return [
        "#123456",
        "#ABCDEF",
        "#FF0000",
        "#00FF00",
        "#0000FF",
        "#FFFF00",
        "#808080",
        "#000000",
        "#FFFFFF",
        "#010203",
        "#FEFDFC",
        "#7F8081",
    ]
