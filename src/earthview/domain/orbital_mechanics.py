# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Orbital mechanics functions.

Two-body conversions between Cartesian state and classical Kepler
elements, Kepler's equation, and analytic propagation. All values are
immutable; every function is a pure transform.

Units: km, km/s, km³/s², radians, UTC datetimes.

Degenerate geometry convention for state_to_elements:
    near-equatorial (sin i < 1e-10): Ω = 0, ω measured from the
        inertial x-axis in the direction of motion;
    near-circular (e < 1e-10): ω = 0, M0 measured from the ascending
        node (argument of latitude);
    both: Ω = ω = 0, M0 is the true longitude.
Passing strict=True raises DegenerateOrbitError instead.
"""
import math
from dataclasses import dataclass
from datetime import datetime, timezone

import numpy as np

from earthview.domain.errors import ConvergenceError, DegenerateOrbitError


@dataclass(frozen=True)
class _OrbitalConstants:
    """Standard orbital constants (IAU/WGS84 values), km-based."""
    MU_EARTH_KM3_S2: float = 398600.4418        # km³/s² — gravitational parameter
    EARTH_ROTATION_RATE_RAD_S: float = 7.2921159e-5  # rad/s — sidereal rotation rate
    # WGS84 ellipsoid
    R_EARTH_EQUATORIAL_KM: float = 6378.137       # km — semi-major axis
    R_EARTH_POLAR_KM: float = 6356.752314245      # km — semi-minor axis
    FLATTENING: float = 1.0 / 298.257223563       # WGS84 flattening
    E_SQUARED: float = 0.00669437999014           # first eccentricity squared


OrbitalConstants: _OrbitalConstants = _OrbitalConstants()

_TWO_PI = 2.0 * math.pi
_ECCENTRICITY_TOL = 1e-10
_NODE_TOL = 1e-10

KEPLER_TOLERANCE_RAD: float = 1e-12
KEPLER_MAX_ITERATIONS: int = 50


@dataclass(frozen=True)
class StateVector:
    """Osculating Cartesian state at an epoch."""
    r: tuple[float, float, float]  # km
    v: tuple[float, float, float]  # km/s
    epoch: datetime

    @property
    def radius_km(self) -> float:
        return math.sqrt(self.r[0]**2 + self.r[1]**2 + self.r[2]**2)

    @property
    def speed_km_s(self) -> float:
        return math.sqrt(self.v[0]**2 + self.v[1]**2 + self.v[2]**2)


@dataclass(frozen=True)
class KeplerElements:
    """Classical elements of a closed two-body orbit."""
    a: float      # semi-major axis, km
    e: float      # eccentricity, 0 <= e < 1
    i: float      # inclination, rad
    raan: float   # right ascension of ascending node Ω, rad
    argp: float   # argument of periapsis ω, rad
    m0: float     # mean anomaly at epoch, rad
    epoch: datetime
    mu: float = OrbitalConstants.MU_EARTH_KM3_S2

    @property
    def mean_motion(self) -> float:
        """Mean motion in rad/s."""
        return mean_motion(self.a, self.mu)

    @property
    def period(self) -> float:
        """Orbital period in seconds."""
        return orbital_period(self.a, self.mu)


def _as_utc(dt: datetime) -> datetime:
    """Ensure datetime is timezone-aware (treat naive as UTC)."""
    return dt if dt.tzinfo else dt.replace(tzinfo=timezone.utc)


def _check_closed_orbit(a: float, e: float) -> None:
    if not 0.0 <= e < 1.0:
        raise DegenerateOrbitError(f"eccentricity must be in [0, 1), got {e}")
    if not a > 0.0:
        raise DegenerateOrbitError(f"semi-major axis must be positive, got {a}")


def orbital_period(a: float, mu: float = OrbitalConstants.MU_EARTH_KM3_S2) -> float:
    """Orbital period 2π·sqrt(a³/μ) in seconds."""
    return _TWO_PI * math.sqrt(a**3 / mu)


def mean_motion(a: float, mu: float = OrbitalConstants.MU_EARTH_KM3_S2) -> float:
    """Mean motion sqrt(μ/a³) in rad/s."""
    return math.sqrt(mu / a**3)


def angle_from_vectors(u, w, sign_reference: float) -> float:
    """
    Angle from u to w in [0, 2π), with the half-plane chosen by a sign.

    The unsigned angle comes from atan2(|u×w|, u·w), which stays
    accurate near 0 and π where acos loses digits. When sign_reference
    is negative the reflex angle 2π - θ is returned. This is the
    quadrant rule behind Ω (sign of n_y), ω (sign of e_z) and ν
    (sign of r·v).

    Args:
        u: Reference 3-vector.
        w: Target 3-vector.
        sign_reference: Scalar whose sign selects the half-plane.

    Returns:
        Angle in radians, [0, 2π).
    """
    u = np.asarray(u, dtype=float)
    w = np.asarray(w, dtype=float)
    theta = float(np.arctan2(np.linalg.norm(np.cross(u, w)), np.dot(u, w)))
    if sign_reference < 0.0:
        theta = _TWO_PI - theta
    return theta % _TWO_PI


def eccentric_from_true(nu: float, e: float) -> float:
    """Eccentric anomaly from true anomaly (same half-turn)."""
    return 2.0 * math.atan2(
        math.sqrt(1.0 - e) * math.sin(nu / 2.0),
        math.sqrt(1.0 + e) * math.cos(nu / 2.0),
    )


def true_from_eccentric(ecc_anomaly: float, e: float) -> float:
    """True anomaly from eccentric anomaly (same half-turn)."""
    return 2.0 * math.atan2(
        math.sqrt(1.0 + e) * math.sin(ecc_anomaly / 2.0),
        math.sqrt(1.0 - e) * math.cos(ecc_anomaly / 2.0),
    )


def solve_kepler(
    mean_anomaly: float,
    e: float,
    tol: float = KEPLER_TOLERANCE_RAD,
    max_iter: int = KEPLER_MAX_ITERATIONS,
) -> float:
    """
    Solve Kepler's equation M = E - e·sin(E) for E.

    Newton-Raphson from Danby's starter M + 0.85·e·sign(sin M), kept
    inside the bracket [M - e, M + e] that always contains the root.
    A Newton step leaving the bracket is replaced by bisection, so the
    iteration converges for every 0 <= e < 1.

    Args:
        mean_anomaly: Mean anomaly (rad); wrapped to [0, 2π).
        e: Eccentricity.
        tol: Convergence threshold on the step size (rad).
        max_iter: Iteration budget.

    Returns:
        Eccentric anomaly E (rad).

    Raises:
        DegenerateOrbitError: If e is outside [0, 1).
        ConvergenceError: If the step is still above tol after max_iter.
    """
    if not 0.0 <= e < 1.0:
        raise DegenerateOrbitError(f"Kepler's equation needs 0 <= e < 1, got {e}")

    m = mean_anomaly % _TWO_PI
    if e == 0.0:
        return m

    lo = m - e
    hi = m + e
    ecc_anomaly = m + 0.85 * e * math.copysign(1.0, math.sin(m))

    for _ in range(max_iter):
        f = ecc_anomaly - e * math.sin(ecc_anomaly) - m
        if f > 0.0:
            hi = ecc_anomaly
        elif f < 0.0:
            lo = ecc_anomaly
        else:
            return ecc_anomaly

        candidate = ecc_anomaly - f / (1.0 - e * math.cos(ecc_anomaly))
        if not lo <= candidate <= hi:
            candidate = 0.5 * (lo + hi)
        step = candidate - ecc_anomaly
        ecc_anomaly = candidate
        if abs(step) < tol:
            return ecc_anomaly

    residual = abs(ecc_anomaly - e * math.sin(ecc_anomaly) - m)
    raise ConvergenceError("Kepler solver", max_iter, residual)


def kepler_to_cartesian(
    a: float,
    e: float,
    i_rad: float,
    omega_big_rad: float,
    omega_small_rad: float,
    nu_rad: float,
    mu: float = OrbitalConstants.MU_EARTH_KM3_S2,
) -> tuple[tuple[float, float, float], tuple[float, float, float]]:
    """
    Convert Keplerian orbital elements to inertial Cartesian position/velocity.

    Perifocal (PQW) state rotated by R3(-Ω)·R1(-i)·R3(-ω).

    Args:
        a: Semi-major axis (km)
        e: Eccentricity (0 for circular)
        i_rad: Inclination (radians)
        omega_big_rad: RAAN / longitude of ascending node (radians)
        omega_small_rad: Argument of perigee (radians)
        nu_rad: True anomaly (radians)
        mu: Gravitational parameter (km³/s²)

    Returns:
        (position [x,y,z] in km, velocity [vx,vy,vz] in km/s)
    """
    cos_nu = math.cos(nu_rad)
    sin_nu = math.sin(nu_rad)

    p = a * (1 - e**2)
    r = p / (1 + e * cos_nu)

    p_factor = math.sqrt(mu / p)
    pos_pqw = np.array([r * cos_nu, r * sin_nu, 0.0])
    vel_pqw = np.array([
        -p_factor * sin_nu,
        p_factor * (e + cos_nu),
        0.0,
    ])

    cO = math.cos(omega_big_rad)
    sO = math.sin(omega_big_rad)
    co = math.cos(omega_small_rad)
    so = math.sin(omega_small_rad)
    ci = math.cos(i_rad)
    si = math.sin(i_rad)

    rotation = np.array([
        [cO * co - sO * so * ci, -cO * so - sO * co * ci, sO * si],
        [sO * co + cO * so * ci, -sO * so + cO * co * ci, -cO * si],
        [so * si, co * si, ci],
    ])

    pos = rotation @ pos_pqw
    vel = rotation @ vel_pqw

    return (
        (float(pos[0]), float(pos[1]), float(pos[2])),
        (float(vel[0]), float(vel[1]), float(vel[2])),
    )


def state_to_elements(
    r,
    v,
    epoch: datetime,
    mu: float = OrbitalConstants.MU_EARTH_KM3_S2,
    strict: bool = False,
) -> KeplerElements:
    """
    Convert a Cartesian state to classical Kepler elements.

    h = r×v, e_vec = (v×h)/μ - r/|r|, n = ẑ×h, 1/a = 2/|r| - |v|²/μ.
    Angles use angle_from_vectors for quadrant resolution. See the
    module docstring for the near-equatorial/near-circular convention.

    Args:
        r: Position 3-vector (km).
        v: Velocity 3-vector (km/s).
        epoch: Epoch of the state.
        mu: Gravitational parameter (km³/s²).
        strict: Raise instead of applying the degenerate-angle convention.

    Returns:
        KeplerElements at epoch.

    Raises:
        DegenerateOrbitError: Zero position, rectilinear motion, e >= 1,
            or (with strict) an undefined node or periapsis.
    """
    r_vec = np.asarray(r, dtype=float).reshape(3)
    v_vec = np.asarray(v, dtype=float).reshape(3)

    r_mag = float(np.linalg.norm(r_vec))
    v_mag = float(np.linalg.norm(v_vec))
    if r_mag == 0.0:
        raise DegenerateOrbitError("position vector is zero")

    h_vec = np.cross(r_vec, v_vec)
    h_mag = float(np.linalg.norm(h_vec))
    if h_mag <= 1e-12 * r_mag * max(v_mag, 1e-300):
        raise DegenerateOrbitError("angular momentum is zero (rectilinear motion)")

    inv_a = 2.0 / r_mag - v_mag**2 / mu
    if inv_a <= 0.0:
        raise DegenerateOrbitError(
            f"orbit is not closed (vis-viva 1/a = {inv_a:.3e} km⁻¹)"
        )
    a = 1.0 / inv_a

    e_vec = np.cross(v_vec, h_vec) / mu - r_vec / r_mag
    e = float(np.linalg.norm(e_vec))
    if e >= 1.0:
        raise DegenerateOrbitError(f"eccentricity {e:.6f} is not elliptical")

    n_vec = np.array([-h_vec[1], h_vec[0], 0.0])
    n_mag = float(np.linalg.norm(n_vec))
    inc = float(np.arctan2(n_mag, h_vec[2]))

    equatorial = n_mag < _NODE_TOL * h_mag
    circular = e < _ECCENTRICITY_TOL
    if strict and equatorial:
        raise DegenerateOrbitError("ascending node undefined for equatorial orbit")
    if strict and circular:
        raise DegenerateOrbitError("periapsis undefined for circular orbit")

    x_hat = np.array([1.0, 0.0, 0.0])
    h_sign = 1.0 if h_vec[2] >= 0.0 else -1.0

    if equatorial:
        raan = 0.0
        ref = x_hat

        def in_plane_sign(vec):
            return vec[1] * h_sign
    else:
        raan = angle_from_vectors(x_hat, n_vec, n_vec[1])
        ref = n_vec

        def in_plane_sign(vec):
            return vec[2]

    if circular:
        argp = 0.0
        nu = angle_from_vectors(ref, r_vec, in_plane_sign(r_vec))
    else:
        argp = angle_from_vectors(ref, e_vec, in_plane_sign(e_vec))
        nu = angle_from_vectors(e_vec, r_vec, float(np.dot(r_vec, v_vec)))

    ecc_anomaly = eccentric_from_true(nu, e)
    m0 = (ecc_anomaly - e * math.sin(ecc_anomaly)) % _TWO_PI

    return KeplerElements(
        a=a, e=e, i=inc, raan=raan, argp=argp, m0=m0,
        epoch=epoch, mu=mu,
    )


def mean_anomaly_at(elements: KeplerElements, target_time: datetime) -> float:
    """Mean anomaly M0 + n·(t - epoch), wrapped to [0, 2π)."""
    dt = (_as_utc(target_time) - _as_utc(elements.epoch)).total_seconds()
    return (elements.m0 + elements.mean_motion * dt) % _TWO_PI


def propagate(elements: KeplerElements, target_time: datetime) -> StateVector:
    """
    Propagate Kepler elements to a target time (forward or backward).

    Args:
        elements: Orbit to propagate.
        target_time: Target UTC datetime.

    Returns:
        Inertial StateVector at target_time.

    Raises:
        DegenerateOrbitError: If e >= 1 or a <= 0.
        ConvergenceError: If Kepler's equation does not converge.
    """
    _check_closed_orbit(elements.a, elements.e)

    m = mean_anomaly_at(elements, target_time)
    ecc_anomaly = solve_kepler(m, elements.e)
    nu = true_from_eccentric(ecc_anomaly, elements.e)

    pos, vel = kepler_to_cartesian(
        a=elements.a,
        e=elements.e,
        i_rad=elements.i,
        omega_big_rad=elements.raan,
        omega_small_rad=elements.argp,
        nu_rad=nu,
        mu=elements.mu,
    )
    return StateVector(r=pos, v=vel, epoch=target_time)
