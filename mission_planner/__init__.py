"""
Orbital Mission Planner

Planar two-body Keplerian orbit engine and coplanar Hohmann transfer
planner, with mission timeline, telemetry and report generation.

Author: Arthur Allex Feliphe Barbosa Moreno
Institution: IME - Instituto Militar de Engenharia - 2025
"""

__version__ = "1.0.0"
__author__ = "Arthur Allex Feliphe Barbosa Moreno"
__email__ = "arthur.moreno@ime.eb.br"

from .dynamics.kepler_solver import KeplerSolution, KeplerSolver, solve_kepler_equation
from .dynamics.orbit_state import OrbitState
from .maneuvers.hohmann import HohmannPlanner, TransferResult, compute_transfer
from .utils.constants import *
from .utils.vector import Vector2
