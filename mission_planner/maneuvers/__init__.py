"""Orbital maneuver planning."""

from .hohmann import *
