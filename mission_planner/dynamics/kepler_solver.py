"""
Kepler Equation Solver

This module solves Kepler's equation E - e·sin(E) = M for the eccentric
anomaly of a bound orbit using Newton-Raphson iteration.

The solver is best-effort: when the iteration budget runs out it returns the
last iterate instead of raising. Callers that need a stricter guarantee can
use KeplerSolver.solve_with_diagnostics and check the residual.

Author: Arthur Allex Feliphe Barbosa Moreno
Institution: IME - Instituto Militar de Engenharia - 2025
"""

from dataclasses import dataclass

import numpy as np

from ..utils.constants import (CIRCULAR_ECCENTRICITY_THRESHOLD,
                               HIGH_ECCENTRICITY_GUESS_THRESHOLD,
                               KEPLER_MAX_ITERATIONS, KEPLER_TOLERANCE, PI,
                               TWO_PI)


@dataclass(frozen=True)
class KeplerSolution:
    """
    Result of a Kepler equation solve.

    Attributes:
        eccentric_anomaly: Final iterate E [rad]
        iterations: Number of Newton steps taken
        residual: |E - e·sin(E) - M| at the final iterate [rad]
        converged: True if the last Newton step was below tolerance
    """
    eccentric_anomaly: float
    iterations: int
    residual: float
    converged: bool


@dataclass(frozen=True)
class KeplerSolver:
    """
    Newton-Raphson solver for Kepler's equation.

    Attributes:
        tolerance: Absolute step tolerance [rad]
        max_iterations: Iteration budget
    """
    tolerance: float = KEPLER_TOLERANCE
    max_iterations: int = KEPLER_MAX_ITERATIONS

    def solve(self, mean_anomaly: float, eccentricity: float) -> float:
        """
        Solve Kepler's equation for the eccentric anomaly.

        Args:
            mean_anomaly: Mean anomaly [rad], need not be reduced
            eccentricity: Orbital eccentricity, 0 <= e < 1

        Returns:
            Eccentric anomaly [rad]
        """
        return self.solve_with_diagnostics(mean_anomaly, eccentricity).eccentric_anomaly

    def solve_with_diagnostics(self, mean_anomaly: float,
                               eccentricity: float) -> KeplerSolution:
        """
        Solve Kepler's equation and report convergence information.

        Args:
            mean_anomaly: Mean anomaly [rad]
            eccentricity: Orbital eccentricity, 0 <= e < 1

        Returns:
            KeplerSolution with the final iterate and its residual
        """
        M = float(mean_anomaly)
        e = float(eccentricity)

        # Circular orbit: E = M exactly
        if e < CIRCULAR_ECCENTRICITY_THRESHOLD:
            return KeplerSolution(eccentric_anomaly=M, iterations=0,
                                  residual=abs(e * np.sin(M)), converged=True)

        # Iterate on one revolution, restore whole turns afterwards
        revolutions = np.floor(M / TWO_PI)
        M_reduced = M - TWO_PI * revolutions

        E = M_reduced if e < HIGH_ECCENTRICITY_GUESS_THRESHOLD else PI

        converged = False
        iterations = 0
        for iterations in range(1, self.max_iterations + 1):
            f = E - e * np.sin(E) - M_reduced
            df = 1 - e * np.cos(E)

            delta_E = -f / df
            E += delta_E

            if abs(delta_E) < self.tolerance:
                converged = True
                break

        E += TWO_PI * revolutions
        residual = abs(E - e * np.sin(E) - M)
        return KeplerSolution(eccentric_anomaly=float(E), iterations=iterations,
                              residual=float(residual), converged=converged)


def solve_kepler_equation(mean_anomaly: float, eccentricity: float,
                          tolerance: float = KEPLER_TOLERANCE,
                          max_iterations: int = KEPLER_MAX_ITERATIONS) -> float:
    """
    Solve Kepler's equation for eccentric anomaly using Newton-Raphson method.

    Args:
        mean_anomaly: Mean anomaly [rad]
        eccentricity: Orbital eccentricity
        tolerance: Convergence tolerance
        max_iterations: Maximum number of iterations

    Returns:
        Eccentric anomaly [rad], the last iterate if not converged
    """
    solver = KeplerSolver(tolerance=tolerance, max_iterations=max_iterations)
    return solver.solve(mean_anomaly, eccentricity)
