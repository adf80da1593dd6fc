"""
Telemetry Snapshot

Spacecraft range and speed at a time offset along a planar orbit.

Author: Arthur Allex Feliphe Barbosa Moreno
Institution: IME - Instituto Militar de Engenharia - 2025
"""

from dataclasses import dataclass
from typing import Dict

from ..dynamics.orbit_state import OrbitState
from ..utils.vector import Vector2


@dataclass(frozen=True)
class TelemetrySnapshot:
    """
    Spacecraft state at a given time.

    Attributes:
        time: Time since epoch [s]
        mean_anomaly: Mean anomaly [rad]
        position: Planar position in the perifocal frame [km]
        range: Distance from the central body [km]
        speed: Orbital speed [km/s]
    """
    time: float
    mean_anomaly: float
    position: Vector2
    range: float
    speed: float

    def to_dict(self) -> Dict[str, float]:
        return {
            'time': self.time,
            'mean_anomaly': self.mean_anomaly,
            'x': self.position.x,
            'y': self.position.y,
            'range': self.range,
            'speed': self.speed,
        }


def telemetry_snapshot(orbit: OrbitState, t: float = 0.0) -> TelemetrySnapshot:
    """
    Compute the telemetry snapshot t seconds after periapsis passage.

    Args:
        orbit: Spacecraft orbit
        t: Time since epoch [s]

    Returns:
        Telemetry snapshot
    """
    M = orbit.mean_anomaly_at_time(t)
    E = orbit.eccentric_anomaly(M)
    r = orbit.radius_from_eccentric_anomaly(E)

    return TelemetrySnapshot(
        time=t,
        mean_anomaly=M,
        position=orbit.position_from_eccentric_anomaly(E),
        range=r,
        speed=orbit.velocity_at_radius(r)
    )
