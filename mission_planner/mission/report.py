"""
Mission Report Generation

Plain-text summaries of an orbit, its Hohmann transfer and the mission
timeline.

Author: Arthur Allex Feliphe Barbosa Moreno
Institution: IME - Instituto Militar de Engenharia - 2025
"""

from typing import List, Optional

from ..dynamics.orbit_state import OrbitState
from ..maneuvers.hohmann import TransferResult
from .telemetry import TelemetrySnapshot
from .timeline import MissionEvent


def format_transfer_summary(transfer: TransferResult) -> str:
    """Transfer report, one quantity per line."""
    lines = [
        f"Target radius: {transfer.r2:,.2f} km",
        f"Δv1 (kick): {transfer.dv1:.5f} km/s",
        f"Δv2 (circularize): {transfer.dv2:.5f} km/s",
        f"Total Δv: {transfer.dv_total:.5f} km/s",
        f"Time of flight (half period): {transfer.time_of_flight_hours:.5f} hours",
    ]
    return "\n".join(lines)


def format_timeline(events: List[MissionEvent]) -> str:
    """Render timeline events as 'YYYY-MM-DD HH:MM  title: description' lines."""
    return "\n".join(
        f"{event.time.strftime('%Y-%m-%d %H:%M')}  {event.title}: {event.description}"
        for event in events
    )


def generate_mission_report(orbit: OrbitState,
                            transfer: TransferResult,
                            mission_name: str = "Orbital Transfer Demo",
                            telemetry: Optional[TelemetrySnapshot] = None) -> str:
    """
    Generate the copy-paste mission report.

    Args:
        orbit: Departure orbit
        transfer: Hohmann transfer from the departure orbit
        mission_name: Name printed in the report header
        telemetry: Optional telemetry snapshot to append

    Returns:
        Multi-line report text
    """
    report = "MISSION REPORT\n"
    report += f"Mission: {mission_name}\n"
    report += f"Semi-major axis (a): {orbit.a:,.2f} km\n"
    report += f"Eccentricity: {orbit.e:.6f}\n"
    report += f"Inclination: {orbit.i:.2f} deg\n"
    report += f"Orbital period: {orbit.period / 3600:.6f} hours\n"
    report += f"Mean motion: {orbit.mean_motion:.8f} rad/s\n"
    report += (f"Hohmann transfer to r={transfer.r2:,.2f} km -> "
               f"Δv_total={transfer.dv_total:.6f} km/s, "
               f"TOF={transfer.time_of_flight_hours:.6f} hours\n")

    if telemetry is not None:
        report += (f"Telemetry at t={telemetry.time:.1f} s: "
                   f"range={telemetry.range:,.3f} km, "
                   f"speed={telemetry.speed:.5f} km/s\n")

    report += "Notes: Kepler solver uses Newton-Raphson iteration on the planar two-body orbit.\n"
    return report
