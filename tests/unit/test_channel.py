"""
Tests for 8-bit channel helpers.

Covers normalization, the sRGB transfer curve, and interpolation.
"""

from __future__ import annotations

import pytest

# =============================================================================
# Normalization
# =============================================================================


class TestNormalization:
    """Tests for byte <-> normalized conversions."""

    def test_clamp_to_byte_rounds_half_to_even(self):
        from tonecraft.core.channel import clamp_to_byte

        # 0.5 * 255 = 127.5 rounds to the even neighbour
        assert clamp_to_byte(0.5) == 128
        assert clamp_to_byte(0.0) == 0
        assert clamp_to_byte(1.0) == 255

    def test_clamp_to_byte_clamps(self):
        from tonecraft.core.channel import clamp_to_byte

        assert clamp_to_byte(-3.0) == 0
        assert clamp_to_byte(7.5) == 255

    def test_from_normalized_rejects_out_of_range(self):
        from tonecraft.core.channel import from_normalized
        from tonecraft.core.errors import InvalidArgumentRange

        with pytest.raises(InvalidArgumentRange):
            from_normalized(1.5)
        with pytest.raises(InvalidArgumentRange):
            from_normalized(float("nan"))

    def test_try_from_normalized(self):
        from tonecraft.core.channel import try_from_normalized

        assert try_from_normalized(1.0) == (True, 255)
        assert try_from_normalized(-0.1) == (False, 0)

    def test_validate_channel_rejects_bool_and_float(self):
        from tonecraft.core.channel import validate_channel
        from tonecraft.core.errors import InvalidArgumentRange

        with pytest.raises(InvalidArgumentRange):
            validate_channel(True)
        with pytest.raises(InvalidArgumentRange):
            validate_channel(12.0)  # type: ignore[arg-type]
        with pytest.raises(InvalidArgumentRange):
            validate_channel(256)


# =============================================================================
# Transfer curve and interpolation
# =============================================================================


class TestTransferCurve:
    """Tests for sRGB linearization."""

    def test_endpoints(self):
        from tonecraft.core.channel import linear_to_srgb, srgb_to_linear

        assert srgb_to_linear(0) == 0.0
        assert srgb_to_linear(255) == pytest.approx(1.0)
        assert linear_to_srgb(0.0) == 0
        assert linear_to_srgb(1.0) == 255

    def test_round_trip_every_byte(self):
        from tonecraft.core.channel import linear_to_srgb, srgb_to_linear

        for byte in range(256):
            assert linear_to_srgb(srgb_to_linear(byte)) == byte


class TestInterpolation:
    """Tests for plain and gamma-correct lerp."""

    def test_lerp_byte_midpoint(self):
        from tonecraft.core.channel import lerp_byte

        assert lerp_byte(0, 255, 0.5) == 128
        assert lerp_byte(10, 20, 0.0) == 10
        assert lerp_byte(10, 20, 1.0) == 20

    def test_lerp_clamps_factor(self):
        from tonecraft.core.channel import lerp_byte

        assert lerp_byte(10, 20, 4.0) == 20
        assert lerp_byte(10, 20, -1.0) == 10

    def test_non_finite_factor_keeps_start(self):
        from tonecraft.core.channel import lerp_byte, lerp_linear_byte

        assert lerp_byte(10, 200, float("nan")) == 10
        assert lerp_linear_byte(10, 200, float("inf")) == 10

    def test_linear_midpoint_is_brighter_than_plain(self):
        from tonecraft.core.channel import lerp_byte, lerp_linear_byte

        linear = lerp_linear_byte(0, 255, 0.5)
        assert 185 < linear < 190
        assert linear > lerp_byte(0, 255, 0.5)
