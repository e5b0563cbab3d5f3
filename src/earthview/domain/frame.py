# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Per-frame computation pipeline.

One pass, in order: time → Sun/Moon ephemeris → orbit propagation →
Earth-fixed/geodetic transform → illumination uniforms. The pass is a
pure function of the wall-clock time, the immutable tracked-object
elements and the view state, so any frame can be recomputed or
retried without side effects.

Uniform scalars are narrowed to float32 only here, at the renderer
boundary; everything upstream stays in double precision.
"""
from dataclasses import dataclass
from datetime import datetime, timedelta

import numpy as np

from earthview.domain.celestial_ephemeris import (
    EquatorialCoordinates,
    moon_equatorial,
    sun_equatorial,
)
from earthview.domain.coordinate_frames import (
    GeodeticPosition,
    to_earth_fixed,
    to_geodetic,
)
from earthview.domain.geometry import ViewState, view_projection_matrix
from earthview.domain.orbital_mechanics import (
    KeplerElements,
    StateVector,
    propagate,
    state_to_elements,
)
from earthview.domain.propagation import GroundTrackPoint, ground_track
from earthview.domain.scene_config import SceneConfig
from earthview.domain.time_conversions import (
    JulianTime,
    compute_julian_time,
    compute_sidereal_time,
    sidereal_angle_rad,
)


@dataclass(frozen=True)
class FrameUniforms:
    """Values handed to the renderer for one draw."""
    view_projection: np.ndarray  # 4×4 float32
    sun_ra: np.float32
    sun_decl: np.float32
    lst: np.float32


@dataclass(frozen=True)
class FrameState:
    """Everything computed for one animation frame."""
    time: datetime
    julian_time: JulianTime
    sidereal_deg: float
    sidereal_rad: float
    sun: EquatorialCoordinates
    moon: EquatorialCoordinates
    inertial: StateVector
    earth_fixed: StateVector
    geodetic: GeodeticPosition
    trajectory: tuple[GroundTrackPoint, ...]
    uniforms: FrameUniforms


def tracked_elements_from_config(config: SceneConfig) -> KeplerElements:
    """Kepler elements of the configured tracked object (computed once at startup)."""
    state = config.tracked_state
    return state_to_elements(state.r, state.v, state.epoch)


def compute_frame(
    now: datetime,
    tracked: KeplerElements,
    view_state: ViewState,
    aspect: float,
    config: SceneConfig = SceneConfig(),
) -> FrameState:
    """
    Run the full per-frame pipeline for one wall-clock instant.

    Args:
        now: Current UTC datetime.
        tracked: Immutable elements of the tracked object.
        view_state: Camera parameters for this session.
        aspect: Viewport width / height.
        config: Scene configuration.

    Returns:
        FrameState with the renderer uniforms.

    Raises:
        DegenerateOrbitError, ConvergenceError: From the orbit and
            frame solvers; no partial frame is returned.
        ValueError: If aspect is not positive.
    """
    julian_time = compute_julian_time(now)
    sidereal_deg = compute_sidereal_time(
        config.nutation_correction, julian_time.jd, julian_time.jt,
    )
    lst = sidereal_angle_rad(julian_time, config.nutation_correction)

    sun = sun_equatorial(julian_time.jt, julian_time.jd)
    moon = moon_equatorial(julian_time.jt, julian_time.jd)

    inertial = propagate(tracked, now)
    earth_fixed = to_earth_fixed(inertial, lst)
    geodetic = to_geodetic(earth_fixed.r)

    trajectory: tuple[GroundTrackPoint, ...] = ()
    if config.trajectory_duration_s > 0.0:
        trajectory = tuple(ground_track(
            tracked,
            now,
            timedelta(seconds=config.trajectory_duration_s),
            timedelta(seconds=config.trajectory_step_s),
            config.nutation_correction,
        ))

    sun_decl = -sun.decl if config.invert_texture_latitude else sun.decl
    uniforms = FrameUniforms(
        view_projection=view_projection_matrix(view_state, aspect),
        sun_ra=np.float32(sun.ra),
        sun_decl=np.float32(sun_decl),
        lst=np.float32(lst),
    )

    return FrameState(
        time=now,
        julian_time=julian_time,
        sidereal_deg=sidereal_deg,
        sidereal_rad=lst,
        sun=sun,
        moon=moon,
        inertial=inertial,
        earth_fixed=earth_fixed,
        geodetic=geodetic,
        trajectory=trajectory,
        uniforms=uniforms,
    )
