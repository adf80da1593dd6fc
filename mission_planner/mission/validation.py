"""
Mission Input Validation

This module parses, clamps and validates user-supplied orbital elements
before they reach the orbital mechanics engine, which does not check its
own preconditions.

Author: Arthur Allex Feliphe Barbosa Moreno
Institution: IME - Instituto Militar de Engenharia - 2025
"""

import warnings
from dataclasses import dataclass
from typing import List, Mapping, Optional, Tuple

from ..dynamics.orbit_state import OrbitState
from ..utils.constants import (DEFAULT_ARG_PERIAPSIS, DEFAULT_ECCENTRICITY,
                               DEFAULT_INCLINATION, DEFAULT_RAAN,
                               DEFAULT_SEMI_MAJOR_AXIS, DEFAULT_TARGET_RADIUS,
                               EARTH_MU, EARTH_RADIUS, MAX_ECCENTRICITY_INPUT,
                               MIN_SEMI_MAJOR_AXIS_INPUT)


def parse_float(raw: Optional[str], default: float) -> float:
    """
    Parse a numeric form value.

    Missing or blank values fall back to the default. Surrounding whitespace
    and thousands separators are ignored.

    Args:
        raw: Raw input value
        default: Value used when the input is missing or blank

    Returns:
        Parsed value

    Raises:
        ValueError: If the value is not numeric
    """
    if raw is None:
        return default

    value = str(raw).strip()
    if value == '':
        return default

    value = value.replace(',', '')
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"Invalid numeric value: {raw!r}") from None


def clamp_orbit_inputs(a: float, e: float) -> Tuple[float, float]:
    """
    Clamp semi-major axis and eccentricity into the accepted input range.

    Args:
        a: Semi-major axis [km]
        e: Eccentricity [-]

    Returns:
        Clamped (a, e)
    """
    a_clamped = max(MIN_SEMI_MAJOR_AXIS_INPUT, a)
    e_clamped = max(0.0, min(MAX_ECCENTRICITY_INPUT, e))

    if a_clamped != a:
        warnings.warn(f"Semi-major axis {a} km clamped to {a_clamped} km")
    if e_clamped != e:
        warnings.warn(f"Eccentricity {e} clamped to {e_clamped}")

    return a_clamped, e_clamped


def validate_orbit_inputs(a: float, e: float,
                          body_radius: float = EARTH_RADIUS) -> List[str]:
    """
    Check orbital elements against the bound-orbit requirements.

    Args:
        a: Semi-major axis [km]
        e: Eccentricity [-]
        body_radius: Central body radius [km]

    Returns:
        List of error messages, empty if the inputs are valid
    """
    errors = []
    if a <= body_radius:
        errors.append(
            f"Semi-major axis a must be larger than the central body radius ({body_radius:g} km).")
    if not (0 <= e < 1):
        errors.append("Eccentricity must satisfy 0 <= e < 1 for bound orbit.")
    return errors


def create_validated_orbit(a: float, e: float = 0.0, i: float = 0.0,
                           raan: float = 0.0, argp: float = 0.0,
                           mu: float = EARTH_MU,
                           body_radius: float = EARTH_RADIUS) -> OrbitState:
    """
    Create an orbit after validating its elements.

    Raises:
        ValueError: If the elements do not describe a bound orbit above
            the central body
    """
    if mu <= 0:
        raise ValueError("Gravitational parameter must be positive")

    errors = validate_orbit_inputs(a, e, body_radius)
    if errors:
        raise ValueError(" ".join(errors))

    return OrbitState(mu=mu, a=a, e=e, i=i, raan=raan, argp=argp)


@dataclass(frozen=True)
class OrbitInputs:
    """
    Mission planner inputs after parsing and clamping.

    Attributes:
        a: Semi-major axis [km]
        e: Eccentricity [-]
        i: Inclination [deg]
        raan: Right ascension of ascending node [deg]
        argp: Argument of periapsis [deg]
        target_radius: Hohmann target orbit radius [km]
        t: Time offset for the spacecraft position [s]
    """
    a: float = DEFAULT_SEMI_MAJOR_AXIS
    e: float = DEFAULT_ECCENTRICITY
    i: float = DEFAULT_INCLINATION
    raan: float = DEFAULT_RAAN
    argp: float = DEFAULT_ARG_PERIAPSIS
    target_radius: float = DEFAULT_TARGET_RADIUS
    t: float = 0.0

    @classmethod
    def from_form(cls, form: Mapping[str, str]) -> 'OrbitInputs':
        """Parse a form mapping, applying defaults and input clamps."""
        a, e = clamp_orbit_inputs(
            parse_float(form.get('a'), DEFAULT_SEMI_MAJOR_AXIS),
            parse_float(form.get('e'), DEFAULT_ECCENTRICITY)
        )
        return cls(
            a=a,
            e=e,
            i=parse_float(form.get('i'), DEFAULT_INCLINATION),
            raan=parse_float(form.get('raan'), DEFAULT_RAAN),
            argp=parse_float(form.get('argp'), DEFAULT_ARG_PERIAPSIS),
            target_radius=parse_float(form.get('target_radius'), DEFAULT_TARGET_RADIUS),
            t=parse_float(form.get('t'), 0.0)
        )

    def errors(self, body_radius: float = EARTH_RADIUS) -> List[str]:
        return validate_orbit_inputs(self.a, self.e, body_radius)

    def to_orbit(self, mu: float = EARTH_MU) -> OrbitState:
        """Build the orbit, raising ValueError if the inputs are invalid."""
        return create_validated_orbit(self.a, self.e, self.i, self.raan,
                                      self.argp, mu=mu)
