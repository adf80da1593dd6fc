"""
Mission Planning Module

This module turns orbits and transfers into mission products: validated
inputs, telemetry snapshots, the mission timeline and the text report.

Author: Arthur Allex Feliphe Barbosa Moreno
Institution: IME - Instituto Militar de Engenharia - 2025
"""

from .validation import (
    OrbitInputs,
    parse_float,
    clamp_orbit_inputs,
    validate_orbit_inputs,
    create_validated_orbit
)

from .telemetry import (
    TelemetrySnapshot,
    telemetry_snapshot
)

from .timeline import (
    MissionEvent,
    build_mission_timeline
)

from .report import (
    format_transfer_summary,
    format_timeline,
    generate_mission_report
)

__all__ = [
    # Validation
    'OrbitInputs',
    'parse_float',
    'clamp_orbit_inputs',
    'validate_orbit_inputs',
    'create_validated_orbit',

    # Telemetry
    'TelemetrySnapshot',
    'telemetry_snapshot',

    # Timeline
    'MissionEvent',
    'build_mission_timeline',

    # Report
    'format_transfer_summary',
    'format_timeline',
    'generate_mission_report'
]
