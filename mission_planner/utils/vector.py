"""
Planar Vector Type

Minimal immutable 2D vector used for positions [km] and velocities [km/s]
in the orbital plane.

Author: Arthur Allex Feliphe Barbosa Moreno
Institution: IME - Instituto Militar de Engenharia - 2025
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Vector2:
    """
    Immutable planar vector.

    Attributes:
        x: First component (toward periapsis in the perifocal frame)
        y: Second component
    """
    x: float = 0.0
    y: float = 0.0

    def add(self, other: 'Vector2') -> 'Vector2':
        return Vector2(self.x + other.x, self.y + other.y)

    def sub(self, other: 'Vector2') -> 'Vector2':
        return Vector2(self.x - other.x, self.y - other.y)

    def mul(self, scalar: float) -> 'Vector2':
        return Vector2(self.x * scalar, self.y * scalar)

    def mag(self) -> float:
        """Euclidean norm."""
        return float(np.hypot(self.x, self.y))

    def __add__(self, other: 'Vector2') -> 'Vector2':
        return self.add(other)

    def __sub__(self, other: 'Vector2') -> 'Vector2':
        return self.sub(other)

    def __mul__(self, scalar: float) -> 'Vector2':
        return self.mul(scalar)

    __rmul__ = __mul__

    def __neg__(self) -> 'Vector2':
        return self.mul(-1.0)

    def to_array(self) -> np.ndarray:
        """Convert to numpy array [x, y]."""
        return np.array([self.x, self.y])

    @classmethod
    def from_array(cls, array: np.ndarray) -> 'Vector2':
        if np.shape(array) != (2,):
            raise ValueError("Input must be a 2D vector")
        return cls(float(array[0]), float(array[1]))
