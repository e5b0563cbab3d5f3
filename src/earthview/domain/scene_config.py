# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Scene configuration.

Immutable settings fixed at startup: globe tessellation, texture
sources, time-model switches, trajectory sampling and the tracked
object's initial state.
"""
from dataclasses import dataclass
from datetime import datetime, timezone

from earthview.domain.orbital_mechanics import StateVector

# ISS-like 400 km orbit at 51.6° inclination.
DEFAULT_TRACKED_STATE = StateVector(
    r=(6778.137, 0.0, 0.0),
    v=(0.0, 4.7608, 6.0113),
    epoch=datetime(2026, 1, 1, 0, 0, 0, tzinfo=timezone.utc),
)


@dataclass(frozen=True)
class SceneConfig:
    """Startup configuration for the globe view."""
    n_lon: int = 150
    n_lat: int = 150
    ellipsoid_a: float = 2.0  # equatorial radius, render units
    ellipsoid_b: float = 2.0  # polar radius, render units
    day_texture: str = "8k_earth_daymap.jpg"
    night_texture: str = "8k_earth_nightmap.jpg"
    nutation_correction: float = 0.0  # degrees, equation of the equinoxes
    # Texture rows run north to south, so shading sees latitude mirrored
    # and the declination uniform is negated to match.
    invert_texture_latitude: bool = True
    trajectory_duration_s: float = 5580.0
    trajectory_step_s: float = 60.0
    tracked_state: StateVector = DEFAULT_TRACKED_STATE
