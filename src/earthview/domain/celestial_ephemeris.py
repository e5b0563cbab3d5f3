# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Analytical Sun and Moon ephemeris.

Low-precision apparent equatorial coordinates from Meeus "Astronomical
Algorithms": Ch. 25 for the Sun (~0.01°), a truncated Ch. 47 series for
the Moon (~0.3°). Every term is a smooth trigonometric function of
time, so positions are continuous with no series-boundary jumps.

Both functions take the split Julian time (fractional day jt plus day
number jd) and are pure functions of it.
"""
from dataclasses import dataclass

import numpy as np

from earthview.domain.time_conversions import julian_centuries_j2000

AU_KM: float = 1.495978707e8  # Astronomical unit in km

_TWO_PI = 2.0 * np.pi

# Moon: (D, M, M', F) multipliers and coefficients, Meeus Table 47.A/47.B
# truncated to terms above ~0.03° (longitude/latitude) and ~100 km (distance).
_MOON_LONGITUDE_TERMS = (
    (0, 0, 1, 0, 6.288774),
    (2, 0, -1, 0, 1.274027),
    (2, 0, 0, 0, 0.658314),
    (0, 0, 2, 0, 0.213618),
    (0, 1, 0, 0, -0.185116),
    (0, 0, 0, 2, -0.114332),
    (2, 0, -2, 0, 0.058793),
    (2, -1, -1, 0, 0.057066),
    (2, 0, 1, 0, 0.053322),
    (2, -1, 0, 0, 0.045758),
    (0, 1, -1, 0, -0.040923),
    (1, 0, 0, 0, -0.034720),
    (0, 1, 1, 0, -0.030383),
)

_MOON_LATITUDE_TERMS = (
    (0, 0, 0, 1, 5.128122),
    (0, 0, 1, 1, 0.280602),
    (0, 0, 1, -1, 0.277693),
    (2, 0, 0, -1, 0.173237),
    (2, 0, -1, 1, 0.055413),
    (2, 0, -1, -1, 0.046271),
    (2, 0, 0, 1, 0.032573),
)

_MOON_DISTANCE_TERMS = (
    (0, 0, 1, 0, -20905.355),
    (2, 0, -1, 0, -3699.111),
    (2, 0, 0, 0, -2956.349),
    (0, 0, 2, 0, -569.925),
    (2, 0, -2, 0, 246.158),
    (2, -1, 0, 0, -204.586),
    (2, 0, 1, 0, -170.733),
    (2, -1, -1, 0, -152.138),
    (0, 1, -1, 0, -129.620),
    (1, 0, 0, 0, 108.743),
    (0, 1, 1, 0, 104.755),
)


@dataclass(frozen=True)
class EquatorialCoordinates:
    """Geocentric apparent equatorial coordinates of a body."""
    ra: float  # right ascension, radians in [0, 2π)
    decl: float  # declination, radians in [-π/2, π/2]
    distance_km: float = 0.0


def _mean_obliquity_deg(t: float) -> float:
    """Mean obliquity of the ecliptic (Meeus 22.2)."""
    return 23.0 + (26.0 + (21.448 - t * (46.8150 + t * (0.00059 - t * 0.001813))) / 60.0) / 60.0


def _ecliptic_to_equatorial(lam_rad: float, beta_rad: float, eps_rad: float) -> tuple[float, float]:
    """Ecliptic longitude/latitude to right ascension/declination."""
    sin_eps = float(np.sin(eps_rad))
    cos_eps = float(np.cos(eps_rad))
    ra = float(np.arctan2(
        np.sin(lam_rad) * cos_eps - np.tan(beta_rad) * sin_eps,
        np.cos(lam_rad),
    ))
    sin_dec = float(np.sin(beta_rad)) * cos_eps + float(np.cos(beta_rad)) * sin_eps * float(np.sin(lam_rad))
    decl = float(np.arcsin(np.clip(sin_dec, -1.0, 1.0)))
    return ra % _TWO_PI, decl


def sun_equatorial(jt: float, jd: int) -> EquatorialCoordinates:
    """Apparent right ascension and declination of the Sun.

    Meeus Ch. 25 low-accuracy method: geometric mean longitude, mean
    anomaly, equation of centre, then aberration and nutation in
    longitude folded into one correction on the apparent longitude.

    Args:
        jt: Fractional UT day.
        jd: Julian Day Number of the civil date.

    Returns:
        EquatorialCoordinates with distance in km.
    """
    t = julian_centuries_j2000(jd, jt)

    l0_deg = (280.46646 + t * (36000.76983 + t * 0.0003032)) % 360.0
    m_deg = (357.52911 + t * (35999.05029 - t * 0.0001537)) % 360.0
    m_rad = float(np.radians(m_deg))

    centre_deg = (
        (1.914602 - t * (0.004817 + t * 0.000014)) * float(np.sin(m_rad))
        + (0.019993 - t * 0.000101) * float(np.sin(2.0 * m_rad))
        + 0.000289 * float(np.sin(3.0 * m_rad))
    )
    true_long_deg = l0_deg + centre_deg
    true_anom_rad = float(np.radians(m_deg + centre_deg))

    omega_rad = float(np.radians(125.04 - 1934.136 * t))
    lam_deg = true_long_deg - 0.00569 - 0.00478 * float(np.sin(omega_rad))
    eps_deg = _mean_obliquity_deg(t) + 0.00256 * float(np.cos(omega_rad))

    ra, decl = _ecliptic_to_equatorial(
        float(np.radians(lam_deg)), 0.0, float(np.radians(eps_deg)),
    )

    ecc = 0.016708634 - t * (0.000042037 + t * 0.0000001267)
    r_au = 1.000001018 * (1.0 - ecc**2) / (1.0 + ecc * float(np.cos(true_anom_rad)))

    return EquatorialCoordinates(ra=ra, decl=decl, distance_km=r_au * AU_KM)


def moon_equatorial(jt: float, jd: int) -> EquatorialCoordinates:
    """Apparent right ascension and declination of the Moon.

    Truncated Meeus Ch. 47 periodic series over the fundamental
    arguments D, M, M', F. The eccentricity factor E on terms in M is
    applied as in the full theory.

    Args:
        jt: Fractional UT day.
        jd: Julian Day Number of the civil date.

    Returns:
        EquatorialCoordinates with distance in km.
    """
    t = julian_centuries_j2000(jd, jt)

    l_prime = 218.3164477 + 481267.88123421 * t
    args = np.radians(np.array([
        297.8501921 + 445267.1114034 * t,   # D, mean elongation
        357.5291092 + 35999.0502909 * t,    # M, Sun mean anomaly
        134.9633964 + 477198.8675055 * t,   # M', Moon mean anomaly
        93.2720950 + 483202.0175233 * t,    # F, argument of latitude
    ]) % 360.0)
    e_factor = 1.0 - t * (0.002516 + t * 0.0000074)

    def _series(terms, trig) -> float:
        total = 0.0
        for d, m, mp, f, coeff in terms:
            angle = d * args[0] + m * args[1] + mp * args[2] + f * args[3]
            total += coeff * e_factor ** abs(m) * float(trig(angle))
        return total

    lam_deg = l_prime + _series(_MOON_LONGITUDE_TERMS, np.sin)
    beta_deg = _series(_MOON_LATITUDE_TERMS, np.sin)
    distance_km = 385000.56 + _series(_MOON_DISTANCE_TERMS, np.cos)

    ra, decl = _ecliptic_to_equatorial(
        float(np.radians(lam_deg % 360.0)),
        float(np.radians(beta_deg)),
        float(np.radians(_mean_obliquity_deg(t))),
    )
    return EquatorialCoordinates(ra=ra, decl=decl, distance_km=distance_km)

