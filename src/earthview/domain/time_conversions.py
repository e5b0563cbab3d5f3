# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Civil time to Julian time and sidereal rotation angle.

The Julian date is kept split into an integer day number and a
fractional UT day. A single float Julian date (~2.46e6) leaves only
~1e-10 day of resolution, and the split survives any later narrowing
to 32-bit shader uniforms.

No external dependencies — only stdlib calendar/math/dataclasses/datetime.
"""
import calendar
import math
from dataclasses import dataclass
from datetime import datetime, timezone

J2000_JDN: int = 2451545
"""Julian Day Number of 2000-01-01 (J2000.0 is noon of this day)."""

DAYS_PER_JULIAN_CENTURY: float = 36525.0

# Earth rotation relative to the equinox, degrees per UT day.
SIDEREAL_RATE_DEG_PER_DAY: float = 360.98564736629

_DAYS_IN_MONTH = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


@dataclass(frozen=True)
class JulianTime:
    """Julian time split into day number and fractional UT day.

    jd is the Julian Day Number of the civil date. That day count starts
    at the preceding noon, so 0h UT of the date is ``jd - 0.5``.
    """
    jd: int
    jt: float

    @property
    def jd_midnight(self) -> float:
        """Julian date at 0h UT of the civil date; ceil() gives back jd."""
        return self.jd - 0.5

    @property
    def julian_date(self) -> float:
        """Full Julian date as one float (loses precision; display only)."""
        return self.jd_midnight + self.jt

    def days_since_j2000(self) -> float:
        """Days elapsed since J2000.0, with the integer part formed exactly."""
        return (self.jd - J2000_JDN) + (self.jt - 0.5)


def compute_julian_day(year: int, month: int, day: int) -> int:
    """
    Julian Day Number of a Gregorian calendar date.

    January and February count as months 13 and 14 of the previous
    year so the leap day falls at the end of the counting year.

    Args:
        year: Gregorian year (astronomical numbering).
        month: Month 1-12.
        day: Day of month.

    Returns:
        Integer Julian Day Number (2451545 for 2000-01-01).

    Raises:
        ValueError: If month or day is out of range.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")
    days_in_month = _DAYS_IN_MONTH[month - 1]
    if month == 2 and not calendar.isleap(year):
        days_in_month = 28
    if not 1 <= day <= days_in_month:
        raise ValueError(f"day {day} out of range for {year}-{month:02d}")

    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    return (
        day
        + (153 * m + 2) // 5
        + 365 * y
        + y // 4
        - y // 100
        + y // 400
        - 32045
    )


def compute_julian_time(date: datetime) -> JulianTime:
    """
    Split a civil datetime into Julian day number and fractional day.

    Naive datetimes are treated as UTC; aware ones are converted to UTC.

    Args:
        date: Civil date and time.

    Returns:
        JulianTime(jd, jt) with jt = (h + m/60 + s/3600 + ms/3.6e6) / 24.
    """
    if date.tzinfo is None:
        date = date.replace(tzinfo=timezone.utc)
    else:
        date = date.astimezone(timezone.utc)

    jd = compute_julian_day(date.year, date.month, date.day)
    ms = date.microsecond / 1000.0
    jt = (
        date.hour
        + date.minute / 60.0
        + date.second / 3600.0
        + ms / 3.6e6
    ) / 24.0
    return JulianTime(jd=jd, jt=jt)


def julian_centuries_j2000(jd: int, jt: float) -> float:
    """Julian centuries since J2000.0 for a split Julian time."""
    return JulianTime(jd, jt).days_since_j2000() / DAYS_PER_JULIAN_CENTURY


def compute_sidereal_time(nutation_correction: float, jd: int, jt: float) -> float:
    """
    Greenwich sidereal time.

    Mean sidereal time at 0h UT from the IAU 1982 polynomial in Julian
    centuries, advanced by the Earth-rotation term for the elapsed
    fraction of the day:

        GMST0 = 100.46061837 + 36000.770053608 T + 0.000387933 T² - T³/38710000
        GST   = GMST0 + 360.98564736629 · jt + nutation_correction

    Args:
        nutation_correction: Equation of the equinoxes (degrees); 0 for
            mean sidereal time.
        jd: Julian Day Number of the civil date.
        jt: Fractional UT day.

    Returns:
        Sidereal time in degrees, reduced to [0, 360).
    """
    t = ((jd - J2000_JDN) - 0.5) / DAYS_PER_JULIAN_CENTURY
    st0 = (
        100.46061837
        + 36000.770053608 * t
        + 0.000387933 * t**2
        - t**3 / 38710000.0
    )
    st = st0 + SIDEREAL_RATE_DEG_PER_DAY * jt + nutation_correction
    return st % 360.0


def sidereal_angle_rad(julian_time: JulianTime, nutation_correction: float = 0.0) -> float:
    """Sidereal rotation angle in radians, reduced to [0, 2π) for float32 use."""
    st_deg = compute_sidereal_time(nutation_correction, julian_time.jd, julian_time.jt)
    return math.radians(st_deg) % (2.0 * math.pi)
