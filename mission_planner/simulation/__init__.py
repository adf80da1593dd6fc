"""Visualization of planar orbits and transfers."""

from .visualization import OrbitVisualizer

__all__ = ['OrbitVisualizer']
