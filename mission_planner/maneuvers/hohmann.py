"""
Hohmann Transfer Planner

Coplanar, circular-to-circular Hohmann transfer: the two burn magnitudes,
total delta-v, transfer ellipse and time of flight. Works for raising and
lowering transfers alike.

Preconditions (mu, r1, r2 > 0) are not checked here.

Author: Arthur Allex Feliphe Barbosa Moreno
Institution: IME - Instituto Militar de Engenharia - 2025
"""

from dataclasses import dataclass
from typing import Dict

import numpy as np

from ..dynamics.orbit_state import OrbitState
from ..utils.constants import EARTH_MU, PI


@dataclass(frozen=True)
class TransferResult:
    """
    Hohmann transfer solution.

    Attributes:
        dv1: Departure burn magnitude [km/s]
        dv2: Arrival (circularization) burn magnitude [km/s]
        dv_total: dv1 + dv2 [km/s]
        time_of_flight: Half the transfer ellipse period [s]
        transfer_semi_major_axis: Transfer ellipse semi-major axis [km]
        r1: Departure orbit radius [km]
        r2: Arrival orbit radius [km]
    """
    dv1: float
    dv2: float
    dv_total: float
    time_of_flight: float
    transfer_semi_major_axis: float
    r1: float
    r2: float

    @property
    def time_of_flight_hours(self) -> float:
        return self.time_of_flight / 3600.0

    @property
    def transfer_eccentricity(self) -> float:
        """Eccentricity of the transfer ellipse [-]."""
        return abs(self.r2 - self.r1) / (self.r1 + self.r2)

    def to_dict(self) -> Dict[str, float]:
        return {
            'dv1': self.dv1,
            'dv2': self.dv2,
            'dv_total': self.dv_total,
            'time_of_flight': self.time_of_flight,
            'transfer_semi_major_axis': self.transfer_semi_major_axis,
        }


def compute_transfer(mu: float, r1: float, r2: float) -> TransferResult:
    """
    Compute a Hohmann transfer between two coplanar circular orbits.

    Args:
        mu: Gravitational parameter [km³/s²]
        r1: Departure orbit radius [km]
        r2: Arrival orbit radius [km]

    Returns:
        Transfer burns, time of flight and transfer ellipse
    """
    # Circular velocities
    v1 = np.sqrt(mu / r1)
    v2 = np.sqrt(mu / r2)

    a_transfer = 0.5 * (r1 + r2)

    # Vis-viva at each apse of the transfer ellipse
    v_departure = np.sqrt(mu * (2 / r1 - 1 / a_transfer))
    v_arrival = np.sqrt(mu * (2 / r2 - 1 / a_transfer))

    dv1 = abs(v_departure - v1)
    dv2 = abs(v2 - v_arrival)

    time_of_flight = PI * np.sqrt(a_transfer**3 / mu)

    return TransferResult(
        dv1=float(dv1),
        dv2=float(dv2),
        dv_total=float(dv1 + dv2),
        time_of_flight=float(time_of_flight),
        transfer_semi_major_axis=float(a_transfer),
        r1=float(r1),
        r2=float(r2)
    )


class HohmannPlanner:
    """Hohmann transfer planner bound to a central body."""

    def __init__(self, mu: float = EARTH_MU):
        """
        Initialize planner.

        Args:
            mu: Gravitational parameter of the central body [km³/s²]
        """
        self.mu = mu

    def compute_transfer(self, r1: float, r2: float) -> TransferResult:
        """Transfer from circular radius r1 to circular radius r2 [km]."""
        return compute_transfer(self.mu, r1, r2)

    def from_orbit(self, orbit: OrbitState, target_radius: float) -> TransferResult:
        """
        Transfer from an orbit to a circular target orbit.

        The departure orbit is treated as circular with radius equal to its
        semi-major axis.

        Args:
            orbit: Departure orbit
            target_radius: Target circular orbit radius [km]

        Returns:
            Transfer solution

        Raises:
            ValueError: If the orbit is about a different central body
        """
        if not np.isclose(orbit.mu, self.mu):
            raise ValueError(
                f"Orbit gravitational parameter {orbit.mu} does not match planner {self.mu}")

        return compute_transfer(self.mu, orbit.a, target_radius)
