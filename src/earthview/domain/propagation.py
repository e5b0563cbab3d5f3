# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Trajectory sampling.

Batch evaluation of two-body propagation over a time grid, and the
ground track obtained through the sidereal → Earth-fixed → geodetic
pipeline. Every sample is computed independently from the immutable
elements; no state carries from one sample to the next.

No external dependencies — only stdlib math/dataclasses/datetime.
"""
from dataclasses import dataclass
from datetime import datetime, timedelta

from earthview.domain.coordinate_frames import (
    GeodeticPosition,
    to_earth_fixed,
    to_geodetic,
)
from earthview.domain.orbital_mechanics import (
    KeplerElements,
    StateVector,
    propagate,
)
from earthview.domain.time_conversions import (
    compute_julian_time,
    sidereal_angle_rad,
)


@dataclass(frozen=True)
class GroundTrackPoint:
    """A single point on an object's ground track."""
    time: datetime
    position: GeodeticPosition


def _sample_times(start: datetime, duration: timedelta, step: timedelta) -> list[datetime]:
    step_seconds = step.total_seconds()
    if step_seconds <= 0:
        raise ValueError(f"Step must be positive, got {step}")

    duration_seconds = duration.total_seconds()
    count = int(duration_seconds / step_seconds + 1e-9) + 1
    return [start + i * step for i in range(max(count, 1))]


def sample_trajectory(
    elements: KeplerElements,
    start: datetime,
    duration: timedelta,
    step: timedelta,
) -> list[StateVector]:
    """
    Inertial states from start to start+duration at a fixed step.

    Args:
        elements: Orbit to sample.
        start: UTC datetime of the first sample.
        duration: Total time span.
        step: Time between consecutive samples.

    Returns:
        List of StateVector, first at start.

    Raises:
        ValueError: If step is zero or negative.
    """
    return [propagate(elements, t) for t in _sample_times(start, duration, step)]


def ground_track(
    elements: KeplerElements,
    start: datetime,
    duration: timedelta,
    step: timedelta,
    nutation_correction: float = 0.0,
) -> list[GroundTrackPoint]:
    """
    Geodetic ground track of an orbit over a time interval.

    Pipeline per sample: propagate → sidereal angle → to_earth_fixed →
    to_geodetic.

    Args:
        elements: Orbit to sample.
        start: UTC datetime for the first point.
        duration: Total time span.
        step: Time between consecutive points.
        nutation_correction: Equation of the equinoxes in degrees.

    Returns:
        List of GroundTrackPoint from start to start+duration.

    Raises:
        ValueError: If step is zero or negative.
    """
    points: list[GroundTrackPoint] = []
    for state in sample_trajectory(elements, start, duration, step):
        theta = sidereal_angle_rad(compute_julian_time(state.epoch), nutation_correction)
        fixed = to_earth_fixed(state, theta)
        points.append(GroundTrackPoint(time=state.epoch, position=to_geodetic(fixed.r)))
    return points
