"""Tests for contrast validation module."""

from pptx.dml.color import RGBColor

from hueflip.core.validation import (
    calculate_contrast_ratio,
    calculate_luminance,
    validate_color_contrast,
)


class TestCalculateLuminance:
    """Tests for luminance calculation."""

    def test_white(self):
        """Test luminance of white."""
        assert abs(calculate_luminance(RGBColor(255, 255, 255)) - 1.0) < 0.01

    def test_black(self):
        """Test luminance of black."""
        assert calculate_luminance(RGBColor(0, 0, 0)) == 0.0

    def test_red(self):
        """Test luminance of red."""
        lum = calculate_luminance(RGBColor(255, 0, 0))
        assert 0.0 < lum < 0.3

    def test_green(self):
        """Test luminance of green."""
        lum = calculate_luminance(RGBColor(0, 255, 0))
        assert 0.5 < lum < 0.8

    def test_blue(self):
        """Test luminance of blue."""
        lum = calculate_luminance(RGBColor(0, 0, 255))
        assert 0.0 < lum < 0.2

    def test_low_values_use_linear_segment(self):
        """Test very dark channels use the linear part of the curve."""
        lum = calculate_luminance(RGBColor(10, 10, 10))
        assert abs(lum - (10 / 255) / 12.92) < 1e-9


class TestCalculateContrastRatio:
    """Tests for WCAG contrast ratio calculation."""

    def test_black_on_white(self):
        """Test maximum contrast (black on white)."""
        contrast = calculate_contrast_ratio(RGBColor(0, 0, 0), RGBColor(255, 255, 255))
        assert abs(contrast - 21.0) < 0.01

    def test_order_does_not_matter(self):
        """Test swapping foreground and background gives the same ratio."""
        a = RGBColor(0x12, 0x34, 0x56)
        b = RGBColor(0xA9, 0xCB, 0xED)
        assert calculate_contrast_ratio(a, b) == calculate_contrast_ratio(b, a)

    def test_same_colors(self):
        """Test contrast of identical colors."""
        red = RGBColor(255, 0, 0)
        assert abs(calculate_contrast_ratio(red, red) - 1.0) < 0.01

    def test_black_on_dark_gray(self):
        """Test black against a dark gray is low, not maximal."""
        contrast = calculate_contrast_ratio(RGBColor(0, 0, 0), RGBColor(0x1E, 0x1E, 0x1E))
        assert 1.0 < contrast < 1.5

    def test_low_contrast_colors(self):
        """Test colors with poor contrast."""
        contrast = calculate_contrast_ratio(RGBColor(200, 200, 200), RGBColor(255, 255, 255))
        assert contrast < 2.0


class TestValidateColorContrast:
    """Tests for color contrast validation."""

    def test_good_contrast(self):
        """Test colors with good contrast return no warnings."""
        assert validate_color_contrast(RGBColor(0, 0, 0), RGBColor(255, 255, 255)) == []

    def test_poor_contrast_warning(self):
        """Test colors with poor contrast produce warnings."""
        warnings = validate_color_contrast(RGBColor(200, 200, 200), RGBColor(255, 255, 255))
        assert len(warnings) == 1
        assert "contrast ratio" in warnings[0].lower()

    def test_very_similar_colors_warning(self):
        """Test nearly identical colors produce warnings."""
        warnings = validate_color_contrast(RGBColor(100, 100, 100), RGBColor(101, 101, 101))
        assert len(warnings) == 1
        assert "similar" in warnings[0].lower()

    def test_aa_level_achieved(self):
        """Test colors that meet AA are accepted at the default threshold."""
        assert validate_color_contrast(RGBColor(33, 33, 33), RGBColor(255, 255, 255)) == []

    def test_custom_minimum(self):
        """Test a stricter minimum flags colors that pass AA."""
        # #767676 on white is about 4.5:1, short of AAA.
        warnings = validate_color_contrast(
            RGBColor(0x76, 0x76, 0x76), RGBColor(255, 255, 255), minimum=7.0
        )
        assert len(warnings) == 1
        assert "7.0:1" in warnings[0]
