"""
Unit tests for mission input validation.

Author: Arthur Allex Feliphe Barbosa Moreno
Institution: IME - Instituto Militar de Engenharia - 2025
"""

import pytest

from mission_planner.dynamics.orbit_state import OrbitState
from mission_planner.mission.validation import (
    OrbitInputs, clamp_orbit_inputs, create_validated_orbit, parse_float,
    validate_orbit_inputs
)
from mission_planner.utils.constants import (
    DEFAULT_SEMI_MAJOR_AXIS, DEFAULT_TARGET_RADIUS, EARTH_MU
)


class TestParseFloat:
    """Test cases for numeric form parsing."""

    def test_missing_and_blank_use_default(self):
        """Test default for missing or blank values."""
        assert parse_float(None, 1.5) == 1.5
        assert parse_float('', 2.5) == 2.5
        assert parse_float('   ', 3.5) == 3.5

    def test_thousands_separator_and_whitespace(self):
        """Test commas and surrounding whitespace are ignored."""
        assert parse_float(' 42,164 ', 0.0) == 42164.0
        assert parse_float('1e-3', 0.0) == 0.001

    def test_non_numeric_raises(self):
        """Test invalid numeric input."""
        with pytest.raises(ValueError, match="Invalid numeric value"):
            parse_float('abc', 0.0)


class TestClampOrbitInputs:
    """Test cases for input clamping."""

    def test_valid_inputs_unchanged(self, recwarn):
        """Test in-range inputs pass through without warnings."""
        assert clamp_orbit_inputs(7000.0, 0.1) == (7000.0, 0.1)
        assert len(recwarn) == 0

    def test_semi_major_axis_lower_clamp(self):
        """Test semi-major axis clamped to 1600 km."""
        with pytest.warns(UserWarning, match="Semi-major axis"):
            a, e = clamp_orbit_inputs(100.0, 0.1)

        assert a == 1600.0
        assert e == 0.1

    def test_eccentricity_clamp(self):
        """Test eccentricity clamped into [0, 0.9999]."""
        with pytest.warns(UserWarning, match="Eccentricity"):
            _, e_high = clamp_orbit_inputs(7000.0, 1.2)
        with pytest.warns(UserWarning, match="Eccentricity"):
            _, e_low = clamp_orbit_inputs(7000.0, -0.3)

        assert e_high == 0.9999
        assert e_low == 0.0


class TestValidateOrbitInputs:
    """Test cases for orbit validation."""

    def test_valid_orbit(self):
        """Test no errors for a LEO orbit."""
        assert validate_orbit_inputs(6771.0, 0.001) == []

    def test_below_earth_radius(self):
        """Test semi-major axis inside the central body."""
        errors = validate_orbit_inputs(6000.0, 0.0)

        assert len(errors) == 1
        assert "larger than the central body radius" in errors[0]

    def test_unbound_eccentricity(self):
        """Test eccentricity outside [0, 1)."""
        assert len(validate_orbit_inputs(7000.0, 1.0)) == 1
        assert len(validate_orbit_inputs(7000.0, -0.1)) == 1
        assert len(validate_orbit_inputs(5000.0, 1.0)) == 2

    def test_custom_body_radius(self):
        """Test validation against another central body."""
        assert validate_orbit_inputs(2000.0, 0.0, body_radius=1737.4) == []

    def test_create_validated_orbit(self):
        """Test orbit creation after validation."""
        orbit = create_validated_orbit(7000.0, 0.1, i=51.6)

        assert isinstance(orbit, OrbitState)
        assert orbit.mu == EARTH_MU
        assert orbit.i == 51.6

    def test_create_validated_orbit_rejects(self):
        """Test invalid elements raise ValueError."""
        with pytest.raises(ValueError, match="Eccentricity"):
            create_validated_orbit(7000.0, 1.5)
        with pytest.raises(ValueError, match="Gravitational parameter"):
            create_validated_orbit(7000.0, 0.1, mu=-1.0)


class TestOrbitInputs:
    """Test cases for OrbitInputs form parsing."""

    def test_defaults(self):
        """Test empty form yields the default mission."""
        inputs = OrbitInputs.from_form({})

        assert inputs == OrbitInputs()
        assert inputs.a == DEFAULT_SEMI_MAJOR_AXIS
        assert inputs.target_radius == DEFAULT_TARGET_RADIUS
        assert inputs.errors() == []

    def test_form_values(self):
        """Test parsed form values."""
        inputs = OrbitInputs.from_form({
            'a': '8,000', 'e': '0.2', 'i': '51.6', 'target_radius': '20000', 't': '600'
        })

        assert inputs.a == 8000.0
        assert inputs.e == 0.2
        assert inputs.i == 51.6
        assert inputs.target_radius == 20000.0
        assert inputs.t == 600.0

    def test_clamped_form_still_fails_validation(self):
        """Test clamped semi-major axis is still below the Earth radius."""
        with pytest.warns(UserWarning):
            inputs = OrbitInputs.from_form({'a': '1000'})

        assert inputs.a == 1600.0
        assert len(inputs.errors()) == 1
        with pytest.raises(ValueError):
            inputs.to_orbit()

    def test_to_orbit(self):
        """Test orbit built from inputs."""
        orbit = OrbitInputs(a=7000.0, e=0.05, i=10.0).to_orbit()

        assert orbit.a == 7000.0
        assert orbit.e == 0.05
        assert orbit.i == 10.0


if __name__ == "__main__":
    pytest.main([__file__])
