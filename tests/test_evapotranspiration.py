"""
Tests for reference evapotranspiration formulas.
"""

import math
import warnings

import numpy as np
import pytest  # type: ignore

from agrometeo import (
    ShapeMismatchError,
    hargreaves_et0,
    hargreaves_et0_extraterrestrial,
    hargreaves_et0_terrestrial,
    radiation_to_evapotranspiration_unit_conversion,
)


class TestHargreavesET0:
    """Test the FAO-56 Hargreaves equation."""

    def test_reference_value(self):
        """Known inputs give the FAO-56 equation 52 value."""
        r_integrated = 300 * 86400 / 2.45e6
        expected = 0.0023 * (20 + 17.8) * math.sqrt(10) * r_integrated
        assert hargreaves_et0(20, 25, 15, 300) == pytest.approx(expected, rel=1e-12)

    def test_plausible_summer_day(self):
        """A warm summer day gives a few mm/day."""
        et0 = hargreaves_et0(20, 27, 13, 480)
        assert 3 < et0 < 8, f"Unexpected ET0: {et0:.2f} mm/day"

    def test_zero_temperature_range(self):
        """No temperature range means no evapotranspiration."""
        assert hargreaves_et0(20, 20, 20, 300) == 0.0

    def test_inverted_range_is_nan(self):
        """T_max below T_min has no square root and yields NaN."""
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert math.isnan(hargreaves_et0(20, 15, 25, 300))

    def test_array_input(self):
        """Arrays are processed elementwise, NaN only where the range is negative."""
        result = hargreaves_et0(
            np.array([20.0, 20.0]),
            np.array([25.0, 15.0]),
            np.array([15.0, 25.0]),
            300.0
        )
        assert result[0] == pytest.approx(hargreaves_et0(20, 25, 15, 300))
        assert math.isnan(result[1])

    def test_shape_mismatch(self):
        """Temperature arrays of different lengths are rejected."""
        with pytest.raises(ShapeMismatchError):
            hargreaves_et0([20, 21], [25, 26, 27], [15, 16], 300)


class TestHargreavesSamani:
    """Test the terrestrial and extraterrestrial Hargreaves-Samani forms."""

    def test_terrestrial_value(self):
        """Original Hargreaves-Samani equation."""
        expected = 0.0135 * (200 * 86400 / 2.45e6) * (15 + 17.8)
        assert hargreaves_et0_terrestrial(15, 200) == pytest.approx(expected, rel=1e-12)

    def test_extraterrestrial_composes_terrestrial(self):
        """Extraterrestrial form equals the terrestrial form exactly."""
        assert hargreaves_et0_extraterrestrial(20, 25, 15, 300) == \
            hargreaves_et0_terrestrial(20, 300 * 0.17 * math.sqrt(10))

    def test_close_to_fao(self):
        """Both derivations differ only by 0.0023 vs 0.0135 * 0.17."""
        fao = hargreaves_et0(18, 26, 10, 420)
        samani = hargreaves_et0_extraterrestrial(18, 26, 10, 420)
        assert fao / samani == pytest.approx(0.0023 / (0.0135 * 0.17), rel=1e-12)

    def test_inverted_range_is_nan(self):
        """Negative temperature range propagates NaN."""
        assert math.isnan(hargreaves_et0_extraterrestrial(20, 10, 12, 300))

    def test_freezing_point_offset(self):
        """ET0 vanishes at -17.8 °C mean temperature."""
        assert hargreaves_et0_terrestrial(-17.8, 200) == pytest.approx(0.0, abs=1e-12)


class TestUnitConversion:
    """Test W/m² to mm/day conversion."""

    def test_value(self):
        """One W/m² evaporates about 0.035 mm per day."""
        assert radiation_to_evapotranspiration_unit_conversion(1.0) == pytest.approx(0.0352512)

    def test_linear(self):
        """Conversion is linear in radiation."""
        convert = radiation_to_evapotranspiration_unit_conversion
        assert convert(250.0) == pytest.approx(2.5 * convert(100.0), rel=1e-12)
        assert convert(0.0) == 0.0

    def test_consistent_with_latent_heat(self):
        """0.408 is the reciprocal of the latent heat 2.45 MJ/kg."""
        convert = radiation_to_evapotranspiration_unit_conversion
        assert convert(300.0) == pytest.approx(300.0 * 86400 / 2.45e6, rel=1e-3)
