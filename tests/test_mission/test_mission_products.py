"""
Unit tests for telemetry, timeline and report generation.

Author: Arthur Allex Feliphe Barbosa Moreno
Institution: IME - Instituto Militar de Engenharia - 2025
"""

from datetime import datetime, timedelta
from unittest.mock import patch

import pytest
import numpy as np

from mission_planner.dynamics.kepler_solver import KeplerSolver
from mission_planner.dynamics.orbit_state import OrbitState
from mission_planner.maneuvers.hohmann import compute_transfer
from mission_planner.mission import (
    build_mission_timeline, format_timeline, format_transfer_summary,
    generate_mission_report, telemetry_snapshot
)
from mission_planner.utils.constants import EARTH_MU


@pytest.fixture
def leo_orbit():
    return OrbitState(mu=EARTH_MU, a=6771.0, e=0.001, i=28.5)


@pytest.fixture
def geo_transfer():
    return compute_transfer(EARTH_MU, 6771.0, 42164.0)


class TestTelemetry:
    """Test cases for telemetry snapshots."""

    def test_snapshot_at_epoch(self, leo_orbit):
        """Test snapshot at periapsis."""
        snapshot = telemetry_snapshot(leo_orbit, 0.0)

        assert snapshot.mean_anomaly == 0.0
        assert snapshot.range == pytest.approx(leo_orbit.periapsis_radius)
        assert snapshot.speed == pytest.approx(
            leo_orbit.velocity_at_radius(leo_orbit.periapsis_radius))

    def test_snapshot_half_period(self, leo_orbit):
        """Test snapshot at apoapsis."""
        snapshot = telemetry_snapshot(leo_orbit, leo_orbit.period / 2)

        assert snapshot.range == pytest.approx(leo_orbit.apoapsis_radius)
        assert snapshot.position.mag() == pytest.approx(snapshot.range)

    def test_speed_consistent_with_energy(self):
        """Test speed and range satisfy vis-viva energy."""
        orbit = OrbitState(mu=EARTH_MU, a=15000.0, e=0.3)
        snapshot = telemetry_snapshot(orbit, 1234.0)

        energy = snapshot.speed**2 / 2 - EARTH_MU / snapshot.range
        assert energy == pytest.approx(orbit.specific_energy)

    def test_single_kepler_solve(self):
        """Test snapshot solves Kepler's equation once."""
        orbit = OrbitState(mu=EARTH_MU, a=20000.0, e=0.6)
        original_solve = KeplerSolver.solve

        with patch.object(KeplerSolver, 'solve', autospec=True,
                          side_effect=original_solve) as mock_solve:
            snapshot = telemetry_snapshot(orbit, 2500.0)

        assert mock_solve.call_count == 1
        expected = orbit.position_at_time(2500.0)
        np.testing.assert_allclose(snapshot.position.to_array(), expected.to_array(),
                                   atol=1e-9)

    def test_to_dict(self, leo_orbit):
        """Test dictionary export."""
        data = telemetry_snapshot(leo_orbit, 600.0).to_dict()

        assert set(data) == {'time', 'mean_anomaly', 'x', 'y', 'range', 'speed'}
        assert np.hypot(data['x'], data['y']) == pytest.approx(data['range'])


class TestMissionTimeline:
    """Test cases for mission timeline generation."""

    def test_event_sequence(self, geo_transfer):
        """Test event titles and offsets from launch."""
        launch = datetime(2026, 1, 1, 12, 0)
        events = build_mission_timeline(geo_transfer, launch_time=launch)

        assert [event.title for event in events] == [
            'Launch (T+0)',
            'Parking orbit insertion',
            'Transfer burn (Δv1)',
            'Apogee arrival / Circularize (Δv2)',
            'Mission ops begin',
        ]
        assert events[0].time == launch
        assert events[1].time == launch + timedelta(minutes=30)
        assert events[2].time == launch + timedelta(hours=2)
        assert events[3].time == launch + timedelta(seconds=int(geo_transfer.time_of_flight))
        assert events[4].time == events[3].time + timedelta(hours=1)

    def test_burn_descriptions(self, geo_transfer):
        """Test burn magnitudes are quoted in the descriptions."""
        events = build_mission_timeline(geo_transfer, launch_time=datetime(2026, 1, 1))

        assert f"{geo_transfer.dv1:.5f} km/s" in events[2].description
        assert f"{geo_transfer.dv2:.5f} km/s" in events[3].description

    def test_default_launch_time(self, geo_transfer):
        """Test default launch is three days from now."""
        before = datetime.now()
        events = build_mission_timeline(geo_transfer)

        delay = events[0].time - before
        assert timedelta(days=3) - timedelta(seconds=2) <= delay <= timedelta(days=3, seconds=2)


class TestMissionReport:
    """Test cases for report text."""

    def test_transfer_summary(self, geo_transfer):
        """Test transfer summary lines."""
        summary = format_transfer_summary(geo_transfer)

        assert "Target radius: 42,164.00 km" in summary
        assert "Total Δv: 3.85669 km/s" in summary
        assert len(summary.splitlines()) == 5

    def test_format_timeline(self, geo_transfer):
        """Test timeline rendering."""
        events = build_mission_timeline(geo_transfer, launch_time=datetime(2026, 3, 4, 5, 6))
        text = format_timeline(events)

        assert text.splitlines()[0].startswith("2026-03-04 05:06  Launch (T+0)")
        assert len(text.splitlines()) == 5

    def test_generate_mission_report(self, leo_orbit, geo_transfer):
        """Test report content."""
        report = generate_mission_report(leo_orbit, geo_transfer, mission_name="GEO Demo")

        assert report.startswith("MISSION REPORT\n")
        assert "Mission: GEO Demo" in report
        assert "Semi-major axis (a): 6,771.00 km" in report
        assert "Eccentricity: 0.001000" in report
        assert f"Orbital period: {leo_orbit.period / 3600:.6f} hours" in report
        assert "Δv_total=3.856689 km/s" in report
        assert "Telemetry" not in report

    def test_report_with_telemetry(self, leo_orbit, geo_transfer):
        """Test telemetry line is appended when given."""
        snapshot = telemetry_snapshot(leo_orbit, 0.0)
        report = generate_mission_report(leo_orbit, geo_transfer, telemetry=snapshot)

        assert "Telemetry at t=0.0 s" in report


if __name__ == "__main__":
    pytest.main([__file__])
