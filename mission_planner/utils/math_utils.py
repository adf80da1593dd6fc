"""
Mathematical Utilities for Orbital Mechanics

This module provides the angle helpers used by the planar orbital
mechanics engine.

Author: Arthur Allex Feliphe Barbosa Moreno
Institution: IME - Instituto Militar de Engenharia - 2025
"""

import numpy as np
from .constants import TWO_PI


def wrap_to_2pi(angle: float) -> float:
    """
    Wrap angle to [0, 2π) range.

    Args:
        angle: Input angle [rad]

    Returns:
        Wrapped angle [rad]
    """
    wrapped = float(angle - TWO_PI * np.floor(angle / TWO_PI))
    # Tiny negative inputs round up to exactly 2π
    if wrapped >= TWO_PI:
        wrapped = 0.0
    return wrapped
