"""
Physical and Mathematical Constants for the Mission Planner

This module contains the constants and default settings used throughout the
planar orbital mechanics engine and the mission planning layer. All lengths
are in kilometres and all times in seconds.

Author: Arthur Allex Feliphe Barbosa Moreno
Institution: IME - Instituto Militar de Engenharia - 2025
"""

import numpy as np

# Earth Physical Constants
EARTH_MU = 398600.4418  # Earth gravitational parameter [km³/s²]
EARTH_RADIUS = 6371.0   # Earth mean radius [km]

# Mathematical Constants
PI = np.pi
TWO_PI = 2.0 * np.pi
DEG_TO_RAD = np.pi / 180.0
RAD_TO_DEG = 180.0 / np.pi

# Kepler Solver Settings
KEPLER_TOLERANCE = 1e-9            # Newton step tolerance [rad]
KEPLER_MAX_ITERATIONS = 200        # Iteration budget
CIRCULAR_ECCENTRICITY_THRESHOLD = 1e-8  # Below this, E = M
HIGH_ECCENTRICITY_GUESS_THRESHOLD = 0.8  # At or above this, start from E = π

# Input Limits (applied by the mission layer, never by the engine)
MIN_SEMI_MAJOR_AXIS_INPUT = 1600.0  # Lower clamp for semi-major axis [km]
MAX_ECCENTRICITY_INPUT = 0.9999     # Upper clamp for eccentricity [-]

# Mission Defaults
DEFAULT_SEMI_MAJOR_AXIS = 6771.0   # LEO, ~400 km altitude [km]
DEFAULT_ECCENTRICITY = 0.001       # Nearly circular [-]
DEFAULT_INCLINATION = 28.5         # Cape Canaveral latitude [deg]
DEFAULT_RAAN = 0.0                 # [deg]
DEFAULT_ARG_PERIAPSIS = 0.0        # [deg]
DEFAULT_TARGET_RADIUS = 42164.0    # GEO radius [km]

# Mission Timeline Offsets
DEFAULT_LAUNCH_DELAY = 3 * 86400.0       # Launch three days from now [s]
PARKING_ORBIT_INSERTION_OFFSET = 1800.0  # After launch [s]
TRANSFER_BURN_OFFSET = 7200.0            # After launch [s]
MISSION_OPS_OFFSET = 3600.0              # After arrival [s]

# Visualization Parameters
DEFAULT_PATH_SAMPLES = 720  # Points per orbit path
