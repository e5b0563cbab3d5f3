# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Solar illumination of the Earth's surface.

Local solar altitude from the hour angle, twilight banding, and the
day/night texture blend the shading stage applies per surface point.

Banding uses strict '>' thresholds evaluated from the top, so a point
exactly on a boundary falls into the darker band (-6.0° is nautical
twilight, not civil).
"""
import math
from dataclasses import dataclass
from enum import Enum

import numpy as np

from earthview.domain.celestial_ephemeris import EquatorialCoordinates
from earthview.domain.coordinate_frames import GeodeticPosition


class IlluminationBand(Enum):
    DAY = "day"
    CIVIL_TWILIGHT = "civil_twilight"
    NAUTICAL_TWILIGHT = "nautical_twilight"
    ASTRONOMICAL_TWILIGHT = "astronomical_twilight"
    NIGHT = "night"


# (lower altitude bound in degrees, band), checked top-down with '>'.
_BAND_THRESHOLDS: tuple[tuple[float, IlluminationBand], ...] = (
    (0.0, IlluminationBand.DAY),
    (-6.0, IlluminationBand.CIVIL_TWILIGHT),
    (-12.0, IlluminationBand.NAUTICAL_TWILIGHT),
    (-18.0, IlluminationBand.ASTRONOMICAL_TWILIGHT),
)

# (day-texture weight, night-texture weight)
_BLEND_WEIGHTS: dict[IlluminationBand, tuple[float, float]] = {
    IlluminationBand.DAY: (1.0, 0.0),
    IlluminationBand.CIVIL_TWILIGHT: (0.75, 0.25),
    IlluminationBand.NAUTICAL_TWILIGHT: (0.5, 0.5),
    IlluminationBand.ASTRONOMICAL_TWILIGHT: (0.25, 0.75),
    IlluminationBand.NIGHT: (0.0, 1.0),
}


@dataclass(frozen=True)
class IlluminationSample:
    """Illumination at one surface point."""
    altitude_deg: float
    band: IlluminationBand
    day_weight: float
    night_weight: float


def local_altitude_deg(
    lon: float,
    lat: float,
    sun_ra: float,
    sun_decl: float,
    lst: float,
) -> float:
    """
    Altitude of the Sun above the local horizon.

    h = LST + lon - RA
    alt = asin(cos(h)·cos(decl)·cos(lat) + sin(decl)·sin(lat))

    Args:
        lon: East longitude (rad).
        lat: Latitude (rad).
        sun_ra: Solar right ascension (rad).
        sun_decl: Solar declination (rad).
        lst: Greenwich sidereal angle (rad).

    Returns:
        Solar altitude in degrees, [-90, 90].
    """
    h = lst + lon - sun_ra
    sin_alt = (
        math.cos(h) * math.cos(sun_decl) * math.cos(lat)
        + math.sin(sun_decl) * math.sin(lat)
    )
    return math.degrees(math.asin(max(-1.0, min(1.0, sin_alt))))


def classify_altitude(altitude_deg: float) -> IlluminationBand:
    """Illumination band for a solar altitude in degrees."""
    for lower_bound, band in _BAND_THRESHOLDS:
        if altitude_deg > lower_bound:
            return band
    return IlluminationBand.NIGHT


def blend_weights(band: IlluminationBand) -> tuple[float, float]:
    """(day weight, night weight) for a band; weights sum to 1."""
    return _BLEND_WEIGHTS[band]


def sample_illumination(
    lon: float,
    lat: float,
    sun: EquatorialCoordinates,
    lst: float,
) -> IlluminationSample:
    """Altitude, band and blend weights at a surface point."""
    altitude = local_altitude_deg(lon, lat, sun.ra, sun.decl, lst)
    band = classify_altitude(altitude)
    day_weight, night_weight = blend_weights(band)
    return IlluminationSample(
        altitude_deg=altitude,
        band=band,
        day_weight=day_weight,
        night_weight=night_weight,
    )


def subsolar_point(sun: EquatorialCoordinates, lst: float) -> GeodeticPosition:
    """Surface point with the Sun at zenith (hour angle zero)."""
    lon = math.remainder(sun.ra - lst, 2.0 * math.pi)
    return GeodeticPosition(lon=lon, lat=sun.decl, alt=0.0)


def blend_color(band: IlluminationBand, day_rgb, night_rgb) -> np.ndarray:
    """
    Mix day and night texels with a band's weights.

    Accepts scalars, single colours or whole images; numpy broadcasting
    applies the same weights to every element.
    """
    day_weight, night_weight = blend_weights(band)
    return day_weight * np.asarray(day_rgb, dtype=float) + night_weight * np.asarray(night_rgb, dtype=float)
