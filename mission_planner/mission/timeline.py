"""
Mission Timeline

Builds the event sequence of a Hohmann transfer mission, from launch to the
start of operations in the target orbit. Event times are approximate.

Author: Arthur Allex Feliphe Barbosa Moreno
Institution: IME - Instituto Militar de Engenharia - 2025
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import List, Optional

from ..maneuvers.hohmann import TransferResult
from ..utils.constants import (DEFAULT_LAUNCH_DELAY, MISSION_OPS_OFFSET,
                               PARKING_ORBIT_INSERTION_OFFSET,
                               TRANSFER_BURN_OFFSET)


@dataclass(frozen=True)
class MissionEvent:
    """Single timeline event."""
    time: datetime
    title: str
    description: str


def build_mission_timeline(transfer: TransferResult,
                           launch_time: Optional[datetime] = None,
                           launch_delay: float = DEFAULT_LAUNCH_DELAY) -> List[MissionEvent]:
    """
    Generate the mission timeline for a transfer.

    Args:
        transfer: Hohmann transfer solution
        launch_time: Launch date; defaults to now plus launch_delay
        launch_delay: Delay from now to launch when no launch time is given [s]

    Returns:
        Events in mission order
    """
    if launch_time is None:
        launch_time = datetime.now().replace(microsecond=0) + timedelta(seconds=launch_delay)

    # Arrival is measured from launch, whole seconds of flight
    arrival_time = launch_time + timedelta(seconds=int(transfer.time_of_flight))

    return [
        MissionEvent(launch_time, 'Launch (T+0)',
                     'Ground launch to parking orbit'),
        MissionEvent(launch_time + timedelta(seconds=PARKING_ORBIT_INSERTION_OFFSET),
                     'Parking orbit insertion',
                     'Circularize to parking orbit'),
        MissionEvent(launch_time + timedelta(seconds=TRANSFER_BURN_OFFSET),
                     'Transfer burn (Δv1)',
                     f'First burn to enter transfer ellipse, Δv ≈ {transfer.dv1:.5f} km/s'),
        MissionEvent(arrival_time,
                     'Apogee arrival / Circularize (Δv2)',
                     f'Second burn to circularize, Δv ≈ {transfer.dv2:.5f} km/s'),
        MissionEvent(arrival_time + timedelta(seconds=MISSION_OPS_OFFSET),
                     'Mission ops begin',
                     'Begin mission operations and telemetry'),
    ]
