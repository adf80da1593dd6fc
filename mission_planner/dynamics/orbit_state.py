"""
Planar Keplerian Orbit State

This module implements the planar two-body orbit used by the mission
planner: period, mean motion, position reconstruction from mean anomaly
through Kepler's equation, and the vis-viva speed.

The orbit trusts its caller. Elements are not validated here (see
mission_planner.mission.validation); results for a <= 0, mu <= 0 or e >= 1
are unspecified.

Author: Arthur Allex Feliphe Barbosa Moreno
Institution: IME - Instituto Militar de Engenharia - 2025
"""

from dataclasses import dataclass, field

import numpy as np

from ..utils.constants import DEFAULT_PATH_SAMPLES, EARTH_MU, PI, TWO_PI
from ..utils.math_utils import wrap_to_2pi
from ..utils.vector import Vector2
from .kepler_solver import KeplerSolver


@dataclass(frozen=True)
class OrbitState:
    """
    Planar Keplerian orbit.

    Attributes:
        mu: Gravitational parameter [km³/s²]
        a: Semi-major axis [km]
        e: Eccentricity [-]
        i: Inclination [deg], reporting only
        raan: Right ascension of ascending node [deg], reporting only
        argp: Argument of periapsis [deg], reporting only
        solver: Kepler equation solver settings
    """
    mu: float
    a: float
    e: float = 0.0
    i: float = 0.0
    raan: float = 0.0
    argp: float = 0.0
    solver: KeplerSolver = field(default_factory=KeplerSolver,
                                 repr=False, compare=False)

    @property
    def period(self) -> float:
        """Orbital period [s]."""
        return float(2 * PI * np.sqrt(self.a**3 / self.mu))

    @property
    def mean_motion(self) -> float:
        """Mean motion [rad/s]."""
        return float(np.sqrt(self.mu / self.a**3))

    @property
    def periapsis_radius(self) -> float:
        """Periapsis radius [km]."""
        return self.a * (1 - self.e)

    @property
    def apoapsis_radius(self) -> float:
        """Apoapsis radius [km]."""
        return self.a * (1 + self.e)

    @property
    def specific_energy(self) -> float:
        """Specific orbital energy [km²/s²]."""
        return -self.mu / (2 * self.a)

    def eccentric_anomaly(self, mean_anomaly: float) -> float:
        """Eccentric anomaly [rad] for the given mean anomaly [rad]."""
        return self.solver.solve(mean_anomaly, self.e)

    def radius_from_eccentric_anomaly(self, eccentric_anomaly: float) -> float:
        """Orbital radius [km] at the given eccentric anomaly [rad]."""
        return float(self.a * (1 - self.e * np.cos(eccentric_anomaly)))

    def true_anomaly_from_eccentric_anomaly(self, eccentric_anomaly: float) -> float:
        """
        True anomaly from eccentric anomaly.

        Args:
            eccentric_anomaly: Eccentric anomaly [rad]

        Returns:
            True anomaly [rad] in (-π, π]
        """
        E = eccentric_anomaly
        denominator = 1 - self.e * np.cos(E)
        cos_f = (np.cos(E) - self.e) / denominator
        sin_f = np.sqrt(1 - self.e**2) * np.sin(E) / denominator
        return float(np.arctan2(sin_f, cos_f))

    def true_anomaly(self, mean_anomaly: float) -> float:
        """True anomaly [rad] for the given mean anomaly [rad]."""
        return self.true_anomaly_from_eccentric_anomaly(
            self.eccentric_anomaly(mean_anomaly))

    def radius_from_mean_anomaly(self, mean_anomaly: float) -> float:
        """Orbital radius [km] for the given mean anomaly [rad]."""
        return self.radius_from_eccentric_anomaly(
            self.eccentric_anomaly(mean_anomaly))

    def position_from_mean_anomaly(self, mean_anomaly: float) -> Vector2:
        """
        Position in the orbital plane for a given mean anomaly.

        The position is expressed in the perifocal frame with x toward
        periapsis. Its magnitude lies in [a(1-e), a(1+e)].

        Args:
            mean_anomaly: Mean anomaly [rad]

        Returns:
            Planar position [km]
        """
        return self.position_from_eccentric_anomaly(self.eccentric_anomaly(mean_anomaly))

    def position_from_eccentric_anomaly(self, eccentric_anomaly: float) -> Vector2:
        """Perifocal position [km] at the given eccentric anomaly [rad]."""
        r = self.radius_from_eccentric_anomaly(eccentric_anomaly)
        f = self.true_anomaly_from_eccentric_anomaly(eccentric_anomaly)

        return Vector2(float(r * np.cos(f)), float(r * np.sin(f)))

    def velocity_at_radius(self, r: float) -> float:
        """
        Speed from the vis-viva equation.

        No check is made that r belongs to this orbit; outside
        [a(1-e), a(1+e)] the result may be NaN.

        Args:
            r: Orbital radius [km]

        Returns:
            Speed [km/s]
        """
        return float(np.sqrt(self.mu * (2 / r - 1 / self.a)))

    def mean_anomaly_at_time(self, t: float, mean_anomaly_at_epoch: float = 0.0) -> float:
        """
        Mean anomaly after t seconds, wrapped to [0, 2π).

        Args:
            t: Time since epoch [s]
            mean_anomaly_at_epoch: Mean anomaly at t = 0 [rad]

        Returns:
            Mean anomaly [rad]
        """
        return wrap_to_2pi(mean_anomaly_at_epoch + self.mean_motion * t)

    def position_at_time(self, t: float, mean_anomaly_at_epoch: float = 0.0) -> Vector2:
        """Planar position [km] t seconds after epoch."""
        return self.position_from_mean_anomaly(
            self.mean_anomaly_at_time(t, mean_anomaly_at_epoch))

    def sample_path(self, num_points: int = DEFAULT_PATH_SAMPLES) -> np.ndarray:
        """
        Sample the orbit at evenly spaced mean anomalies.

        Args:
            num_points: Number of samples, M = 2πk/N for k = 0..N-1

        Returns:
            Positions [km], shape (N, 2)
        """
        if num_points < 1:
            raise ValueError("Number of path samples must be positive")

        mean_anomalies = TWO_PI * np.arange(num_points) / num_points
        path = np.empty((num_points, 2))
        for k, M in enumerate(mean_anomalies):
            path[k] = self.position_from_mean_anomaly(M).to_array()
        return path


def create_earth_orbit(a: float, e: float = 0.0, i: float = 0.0,
                       raan: float = 0.0, argp: float = 0.0) -> OrbitState:
    """Create an orbit about the Earth."""
    return OrbitState(mu=EARTH_MU, a=a, e=e, i=i, raan=raan, argp=argp)
