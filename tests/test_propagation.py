# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Tests for trajectory sampling and ground tracks.
"""
import math
from datetime import datetime, timedelta, timezone

import pytest

from earthview.domain.orbital_mechanics import (
    KeplerElements,
    OrbitalConstants,
    StateVector,
    propagate,
)
from earthview.domain.propagation import GroundTrackPoint, ground_track, sample_trajectory

EPOCH = datetime(2026, 3, 20, 12, 0, 0, tzinfo=timezone.utc)
SIDEREAL_RATE_RAD_S = math.radians(360.98564736629) / 86400.0


def _leo(inclination_deg=51.6, a=6778.137):
    return KeplerElements(
        a=a, e=0.0, i=math.radians(inclination_deg),
        raan=0.0, argp=0.0, m0=0.0, epoch=EPOCH,
    )


class TestSampleTrajectory:

    def test_sample_count_and_times(self):
        states = sample_trajectory(_leo(), EPOCH, timedelta(minutes=10), timedelta(seconds=60))
        assert len(states) == 11
        assert all(isinstance(s, StateVector) for s in states)
        assert states[0].epoch == EPOCH
        assert states[-1].epoch == EPOCH + timedelta(minutes=10)

    def test_samples_match_direct_propagation(self):
        el = _leo()
        states = sample_trajectory(el, EPOCH, timedelta(minutes=5), timedelta(seconds=150))
        for state in states:
            assert state.r == pytest.approx(propagate(el, state.epoch).r)

    def test_zero_duration_gives_single_sample(self):
        states = sample_trajectory(_leo(), EPOCH, timedelta(0), timedelta(seconds=60))
        assert len(states) == 1

    @pytest.mark.parametrize("step", [timedelta(0), timedelta(seconds=-60)])
    def test_non_positive_step_raises(self, step):
        with pytest.raises(ValueError):
            sample_trajectory(_leo(), EPOCH, timedelta(minutes=10), step)


class TestGroundTrack:

    def test_points(self):
        points = ground_track(_leo(), EPOCH, timedelta(minutes=92), timedelta(minutes=1))
        assert len(points) == 93
        assert all(isinstance(p, GroundTrackPoint) for p in points)
        assert points[0].time == EPOCH

    def test_altitude_of_circular_leo(self):
        """400 km above the equatorial radius; the ellipsoid adds up to ~21 km near the poles."""
        for p in ground_track(_leo(), EPOCH, timedelta(minutes=92), timedelta(minutes=2)):
            assert 395.0 < p.position.alt < 425.0

    def test_latitude_bounded_by_inclination(self):
        points = ground_track(_leo(), EPOCH, timedelta(minutes=92), timedelta(minutes=1))
        lats = [p.position.lat_deg for p in points]
        assert max(abs(x) for x in lats) < 52.0
        assert max(lats) > 50.0
        assert min(lats) < -50.0

    def test_equatorial_orbit_stays_on_equator(self):
        for p in ground_track(_leo(inclination_deg=0.0), EPOCH, timedelta(hours=1), timedelta(minutes=5)):
            assert p.position.lat_deg == pytest.approx(0.0, abs=1e-9)

    def test_geostationary_longitude_fixed(self):
        """Mean motion equal to Earth's sidereal rate holds longitude."""
        a = (OrbitalConstants.MU_EARTH_KM3_S2 / SIDEREAL_RATE_RAD_S**2) ** (1.0 / 3.0)
        el = KeplerElements(a=a, e=0.0, i=0.0, raan=0.0, argp=0.0, m0=0.0, epoch=EPOCH)
        points = ground_track(el, EPOCH, timedelta(hours=6), timedelta(minutes=30))
        lons = [p.position.lon_deg for p in points]
        assert max(lons) - min(lons) < 0.01
        assert points[0].position.alt == pytest.approx(35786.0, abs=5.0)

    def test_nutation_correction_shifts_longitude(self):
        base = ground_track(_leo(), EPOCH, timedelta(0), timedelta(minutes=1))[0]
        shifted = ground_track(_leo(), EPOCH, timedelta(0), timedelta(minutes=1), nutation_correction=0.01)[0]
        delta = math.remainder(math.radians(base.position.lon_deg - shifted.position.lon_deg), 2 * math.pi)
        assert math.degrees(delta) == pytest.approx(0.01, abs=1e-9)
