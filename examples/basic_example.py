"""
Basic Example: LEO to GEO Mission

This example demonstrates the basic usage of the mission planner: orbit
creation, position reconstruction, the Hohmann transfer to GEO, and the
mission timeline and report.

Author: Arthur Allex Feliphe Barbosa Moreno
Institution: IME - Instituto Militar de Engenharia - 2025
"""

from mission_planner.dynamics.orbit_state import OrbitState
from mission_planner.maneuvers.hohmann import HohmannPlanner
from mission_planner.mission import (OrbitInputs, build_mission_timeline,
                                     format_timeline, format_transfer_summary,
                                     generate_mission_report,
                                     telemetry_snapshot)
from mission_planner.utils.constants import (DEG_TO_RAD, EARTH_MU, EARTH_RADIUS,
                                             RAD_TO_DEG)


def main():
    """Main example function."""
    print("=== Orbital Mission Planner - Basic Example ===\n")

    # Default planner inputs, as a form would submit them
    print("1. Parsing mission inputs:")
    inputs = OrbitInputs.from_form({'a': '6,771', 'e': '0.001', 't': '1200'})
    orbit = inputs.to_orbit(EARTH_MU)

    print(f"  Semi-major axis: {orbit.a:.1f} km")
    print(f"  Eccentricity: {orbit.e:.6f}")
    print(f"  Inclination: {orbit.i:.1f}°")
    print(f"  Orbital period: {orbit.period/3600:.4f} hours")
    print(f"  Mean motion: {orbit.mean_motion:.8f} rad/s")

    print("\n2. Positions along the orbit:")
    for M_deg in [0, 90, 180, 270]:
        M = M_deg * DEG_TO_RAD
        position = orbit.position_from_mean_anomaly(M)
        f_deg = orbit.true_anomaly(M) * RAD_TO_DEG
        r = position.mag()
        v = orbit.velocity_at_radius(r)
        altitude = r - EARTH_RADIUS
        print(f"  M = {M_deg:3d}°: f = {f_deg:7.2f}°, r = {r:.1f} km, v = {v:.4f} km/s, alt = {altitude:.1f} km")

    print("\n3. Telemetry snapshot:")
    snapshot = telemetry_snapshot(orbit, inputs.t)
    print(f"  t = {snapshot.time:.0f} s: range = {snapshot.range:.3f} km, "
          f"speed = {snapshot.speed:.5f} km/s")

    print("\n4. Hohmann transfer to GEO:")
    planner = HohmannPlanner(EARTH_MU)
    transfer = planner.from_orbit(orbit, inputs.target_radius)
    for line in format_transfer_summary(transfer).splitlines():
        print(f"  {line}")

    print("\n5. Mission timeline:")
    for line in format_timeline(build_mission_timeline(transfer)).splitlines():
        print(f"  {line}")

    print("\n6. Mission report:")
    print(generate_mission_report(orbit, transfer, telemetry=snapshot))

    # Elliptical orbit check
    molniya = OrbitState(mu=EARTH_MU, a=26600.0, e=0.74, i=63.4)
    print(f"Molniya-like orbit: periapsis {molniya.periapsis_radius:.1f} km, "
          f"apoapsis {molniya.apoapsis_radius:.1f} km, "
          f"period {molniya.period/3600:.2f} hours")

    print("\n=== Example completed successfully! ===")


if __name__ == "__main__":
    main()
