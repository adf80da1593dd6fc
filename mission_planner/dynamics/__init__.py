"""Dynamics module for planar Keplerian orbits."""

from .kepler_solver import *
from .orbit_state import *
