# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Coordinate frame conversions.

Pure mathematical transformations between the inertial, Earth-fixed
and geodetic frames.

Reference frames:
    Inertial — Earth-centred, non-rotating, equator and equinox of date
    ECEF — Earth-Centered Earth-Fixed (rotating with Earth)
    Geodetic — Longitude, Latitude, Altitude (WGS84 ellipsoid)

The inertial→ECEF rotation is a single polar-axis rotation by the
sidereal angle. Precession, nutation and polar motion are not modelled;
the resulting frame is adequate for visualisation, not for geodesy.
ECEF→Geodetic uses the iterative Bowring method on the WGS84 ellipsoid.
"""
import math
from dataclasses import dataclass

import numpy as np

from earthview.domain.errors import ConvergenceError
from earthview.domain.orbital_mechanics import OrbitalConstants, StateVector

GEODETIC_TOLERANCE_RAD: float = 1e-12  # ~6 µm on the surface
GEODETIC_MAX_ITERATIONS: int = 10


@dataclass(frozen=True)
class GeodeticPosition:
    """Position on the WGS84 ellipsoid."""
    lon: float  # radians, (-π, π]
    lat: float  # radians, [-π/2, π/2]
    alt: float  # km above the ellipsoid

    @property
    def lon_deg(self) -> float:
        return math.degrees(self.lon)

    @property
    def lat_deg(self) -> float:
        return math.degrees(self.lat)


def rotation_z(angle_rad: float) -> np.ndarray:
    """Frame rotation R3(angle): components of a vector in a frame turned by +angle."""
    c = math.cos(angle_rad)
    s = math.sin(angle_rad)
    return np.array([
        [c, s, 0.0],
        [-s, c, 0.0],
        [0.0, 0.0, 1.0],
    ])


def to_earth_fixed(state: StateVector, sidereal_angle_rad: float) -> StateVector:
    """
    Rotate an inertial state into the Earth-fixed frame.

    The rotation R_z(-θ) rotates from inertial to Earth-fixed:
        [x_ecef]   [ cos(θ)  sin(θ)  0] [x_eci]
        [y_ecef] = [-sin(θ)  cos(θ)  0] [y_eci]
        [z_ecef]   [   0       0     1] [z_eci]

    Velocity also loses the transport term of the rotating frame:
        v_ecef = R·v_eci - ω_earth × r_ecef

    Args:
        state: Inertial StateVector (km, km/s).
        sidereal_angle_rad: Sidereal angle θ in radians.

    Returns:
        Earth-fixed StateVector at the same epoch.
    """
    rotation = rotation_z(sidereal_angle_rad)
    pos = rotation @ np.asarray(state.r, dtype=float)
    vel = rotation @ np.asarray(state.v, dtype=float)

    omega = np.array([0.0, 0.0, OrbitalConstants.EARTH_ROTATION_RATE_RAD_S])
    vel = vel - np.cross(omega, pos)

    return StateVector(
        r=(float(pos[0]), float(pos[1]), float(pos[2])),
        v=(float(vel[0]), float(vel[1]), float(vel[2])),
        epoch=state.epoch,
    )


def to_geodetic(r_fixed) -> GeodeticPosition:
    """
    Convert an ECEF position to geodetic coordinates (WGS84 ellipsoid).

    Bowring iteration on the parametric latitude form
        lat ← atan2(z + e²·N(lat)·sin(lat), p)
    from the initial estimate atan2(z, p·(1 - e²)). Altitude uses
        h = p·cos(lat) + z·sin(lat) - a·sqrt(1 - e²·sin²(lat)),
    which stays finite at the poles.

    Args:
        r_fixed: ECEF position (x, y, z) in km.

    Returns:
        GeodeticPosition (lon, lat in radians; alt in km).

    Raises:
        ConvergenceError: If latitude has not settled within the budget.
    """
    c = OrbitalConstants
    a = c.R_EARTH_EQUATORIAL_KM
    e2 = c.E_SQUARED

    x, y, z = (float(r_fixed[0]), float(r_fixed[1]), float(r_fixed[2]))
    p = math.hypot(x, y)

    lon = math.atan2(y, x)
    lat = math.atan2(z, p * (1.0 - e2))

    for _ in range(GEODETIC_MAX_ITERATIONS):
        sin_lat = math.sin(lat)
        n = a / math.sqrt(1.0 - e2 * sin_lat**2)
        new_lat = math.atan2(z + e2 * n * sin_lat, p)
        delta = abs(new_lat - lat)
        lat = new_lat
        if delta < GEODETIC_TOLERANCE_RAD:
            break
    else:
        raise ConvergenceError("Geodetic latitude", GEODETIC_MAX_ITERATIONS, delta)

    sin_lat = math.sin(lat)
    alt = p * math.cos(lat) + z * sin_lat - a * math.sqrt(1.0 - e2 * sin_lat**2)

    return GeodeticPosition(lon=lon, lat=lat, alt=alt)


def geodetic_to_ecef(position: GeodeticPosition) -> tuple[float, float, float]:
    """
    Convert geodetic coordinates to ECEF position (WGS84 ellipsoid).

    Inverse of to_geodetic.

    Args:
        position: GeodeticPosition (radians, km).

    Returns:
        (x, y, z) in km, ECEF frame.
    """
    c = OrbitalConstants
    a = c.R_EARTH_EQUATORIAL_KM
    e2 = c.E_SQUARED

    sin_lat = math.sin(position.lat)
    cos_lat = math.cos(position.lat)

    n = a / math.sqrt(1.0 - e2 * sin_lat**2)

    x = (n + position.alt) * cos_lat * math.cos(position.lon)
    y = (n + position.alt) * cos_lat * math.sin(position.lon)
    z = (n * (1.0 - e2) + position.alt) * sin_lat

    return x, y, z
