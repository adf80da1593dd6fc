"""
Orbit Visualization Module

This module plots planar orbits, the spacecraft position along them and
Hohmann transfers between circular orbits.

Author: Arthur Allex Feliphe Barbosa Moreno
Institution: IME - Instituto Militar de Engenharia - 2025
"""

from typing import Optional, Tuple

import matplotlib.pyplot as plt
import numpy as np

from ..dynamics.orbit_state import OrbitState
from ..maneuvers.hohmann import compute_transfer
from ..utils.constants import DEFAULT_PATH_SAMPLES, EARTH_RADIUS, PI, TWO_PI


class OrbitVisualizer:
    """Planar orbit and transfer visualization."""

    def __init__(self, figsize: Tuple[int, int] = (10, 10),
                 body_radius: float = EARTH_RADIUS):
        """Initialize visualizer."""
        self.figsize = figsize
        self.body_radius = body_radius
        self.fig = None
        self.ax = None

    def plot_orbit(self,
                   orbit: OrbitState,
                   t_now: Optional[float] = None,
                   num_points: int = DEFAULT_PATH_SAMPLES,
                   save_path: Optional[str] = None) -> plt.Figure:
        """Plot orbit path in the perifocal frame with optional spacecraft marker."""

        self.fig, self.ax = plt.subplots(figsize=self.figsize)

        path = orbit.sample_path(num_points)
        closed_path = np.vstack([path, path[:1]])
        self.ax.plot(closed_path[:, 0], closed_path[:, 1], 'b-', linewidth=1.5,
                     label='Orbit')

        self._draw_central_body()

        # Periapsis marker (x axis points to periapsis)
        self.ax.scatter([orbit.periapsis_radius], [0.0], color='green', s=40,
                        label='Periapsis', marker='o')

        if t_now is not None:
            position = orbit.position_at_time(t_now)
            self.ax.scatter([position.x], [position.y], color='orange', s=80,
                            label=f'Spacecraft (t = {t_now:.0f} s)', marker='*')

        self.ax.set_xlabel('X [km]')
        self.ax.set_ylabel('Y [km]')
        self.ax.set_title(f'Orbit: a = {orbit.a:.1f} km, e = {orbit.e:.4f}')
        self._finish_axes()

        if save_path:
            self.fig.savefig(save_path, dpi=300, bbox_inches='tight')
            print(f"Orbit plot saved to {save_path}")

        return self.fig

    def plot_hohmann_transfer(self,
                              mu: float,
                              r1: float,
                              r2: float,
                              num_points: int = DEFAULT_PATH_SAMPLES,
                              save_path: Optional[str] = None) -> plt.Figure:
        """Plot departure and arrival circular orbits and the transfer arc."""

        transfer = compute_transfer(mu, r1, r2)

        self.fig, self.ax = plt.subplots(figsize=self.figsize)

        theta = np.linspace(0.0, TWO_PI, num_points)
        self.ax.plot(r1 * np.cos(theta), r1 * np.sin(theta), 'b-',
                     linewidth=1.5, label=f'Departure orbit ({r1:.0f} km)')
        self.ax.plot(r2 * np.cos(theta), r2 * np.sin(theta), 'r-',
                     linewidth=1.5, label=f'Arrival orbit ({r2:.0f} km)')

        # Half transfer ellipse, periapsis on +x
        a_t = transfer.transfer_semi_major_axis
        e_t = transfer.transfer_eccentricity
        f = np.linspace(0.0, PI, max(2, num_points // 2))
        r = a_t * (1 - e_t**2) / (1 + e_t * np.cos(f))
        self.ax.plot(r * np.cos(f), r * np.sin(f), 'g--',
                     linewidth=2, label='Transfer arc')

        # Lowering transfers depart from apoapsis on -x
        sign = 1.0 if r2 >= r1 else -1.0

        self.ax.scatter([sign * r1], [0.0], color='green', s=60, marker='^',
                        label=f'Δv1 = {transfer.dv1:.3f} km/s')
        self.ax.scatter([-sign * r2], [0.0], color='magenta', s=60, marker='v',
                        label=f'Δv2 = {transfer.dv2:.3f} km/s')

        self._draw_central_body()

        self.ax.set_xlabel('X [km]')
        self.ax.set_ylabel('Y [km]')
        self.ax.set_title(f'Hohmann Transfer: Δv = {transfer.dv_total:.3f} km/s, '
                          f'TOF = {transfer.time_of_flight_hours:.2f} h')
        self._finish_axes()

        if save_path:
            self.fig.savefig(save_path, dpi=300, bbox_inches='tight')
            print(f"Transfer plot saved to {save_path}")

        return self.fig

    def close(self):
        """Close the current figure."""
        if self.fig is not None:
            plt.close(self.fig)
            self.fig = None
            self.ax = None

    def _draw_central_body(self):
        body = plt.Circle((0.0, 0.0), self.body_radius, color='royalblue',
                          alpha=0.6, label='Central body')
        self.ax.add_patch(body)

    def _finish_axes(self):
        self.ax.set_aspect('equal', adjustable='datalim')
        self.ax.grid(True, alpha=0.3)
        self.ax.legend(loc='upper right')
