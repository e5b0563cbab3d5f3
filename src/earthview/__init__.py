# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Earthview

Time-accurate day/night globe computations: Julian and sidereal time,
analytical Sun and Moon ephemeris, two-body orbit conversion and
propagation, inertial → Earth-fixed → WGS84 geodetic transforms, and
the solar-altitude twilight model that drives day/night shading.
"""

from earthview.domain.errors import (
    EarthviewError,
    DegenerateOrbitError,
    ConvergenceError,
)
from earthview.domain.time_conversions import (
    JulianTime,
    compute_julian_day,
    compute_julian_time,
    compute_sidereal_time,
    sidereal_angle_rad,
)
from earthview.domain.celestial_ephemeris import (
    EquatorialCoordinates,
    sun_equatorial,
    moon_equatorial,
)
from earthview.domain.orbital_mechanics import (
    OrbitalConstants,
    StateVector,
    KeplerElements,
    angle_from_vectors,
    solve_kepler,
    state_to_elements,
    propagate,
    orbital_period,
)
from earthview.domain.coordinate_frames import (
    GeodeticPosition,
    to_earth_fixed,
    to_geodetic,
    geodetic_to_ecef,
)
from earthview.domain.illumination import (
    IlluminationBand,
    IlluminationSample,
    local_altitude_deg,
    classify_altitude,
    blend_weights,
    sample_illumination,
)
from earthview.domain.propagation import (
    GroundTrackPoint,
    sample_trajectory,
    ground_track,
)
from earthview.domain.geometry import (
    EllipsoidMesh,
    ViewState,
    build_ellipsoid_mesh,
    view_projection_matrix,
)
from earthview.domain.scene_config import SceneConfig
from earthview.domain.frame import (
    FrameUniforms,
    FrameState,
    compute_frame,
    tracked_elements_from_config,
)

__version__ = "1.0.0"

__all__ = [
    "EarthviewError",
    "DegenerateOrbitError",
    "ConvergenceError",
    "JulianTime",
    "compute_julian_day",
    "compute_julian_time",
    "compute_sidereal_time",
    "sidereal_angle_rad",
    "EquatorialCoordinates",
    "sun_equatorial",
    "moon_equatorial",
    "OrbitalConstants",
    "StateVector",
    "KeplerElements",
    "angle_from_vectors",
    "solve_kepler",
    "state_to_elements",
    "propagate",
    "orbital_period",
    "GeodeticPosition",
    "to_earth_fixed",
    "to_geodetic",
    "geodetic_to_ecef",
    "IlluminationBand",
    "IlluminationSample",
    "local_altitude_deg",
    "classify_altitude",
    "blend_weights",
    "sample_illumination",
    "GroundTrackPoint",
    "sample_trajectory",
    "ground_track",
    "EllipsoidMesh",
    "ViewState",
    "build_ellipsoid_mesh",
    "view_projection_matrix",
    "SceneConfig",
    "FrameUniforms",
    "FrameState",
    "compute_frame",
    "tracked_elements_from_config",
]
