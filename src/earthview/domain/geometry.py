# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Renderer-facing geometry.

Static ellipsoid mesh with texture coordinates, and the view-projection
matrix built from an explicit per-session ViewState. Matrices are
row-major numpy arrays acting on column vectors; upload them transposed
to column-major graphics APIs.
"""
import math
from dataclasses import dataclass, replace

import numpy as np


@dataclass(frozen=True)
class EllipsoidMesh:
    """Triangle list for an ellipsoid of revolution."""
    positions: np.ndarray  # (n_lon·n_lat·6, 3) float32
    texcoords: np.ndarray  # (n_lon·n_lat·6, 2) float32
    n_lon: int
    n_lat: int

    @property
    def vertex_count(self) -> int:
        return self.n_lon * self.n_lat * 6


@dataclass(frozen=True)
class ViewState:
    """Camera parameters for one viewing session."""
    distance: float = 8.0
    rot_x: float = math.radians(90.0)
    rot_y: float = 0.0
    rot_z: float = 0.0
    fov_rad: float = math.radians(30.0)
    z_near: float = 0.1
    z_far: float = 5000.0

    def rotated(self, d_rot_x: float = 0.0, d_rot_y: float = 0.0, d_rot_z: float = 0.0) -> "ViewState":
        """New ViewState turned by the given increments (radians)."""
        return replace(
            self,
            rot_x=self.rot_x + d_rot_x,
            rot_y=self.rot_y + d_rot_y,
            rot_z=self.rot_z + d_rot_z,
        )

    def zoomed(self, d_distance: float) -> "ViewState":
        """New ViewState moved along the view axis, never through the near plane."""
        return replace(self, distance=max(self.z_near, self.distance + d_distance))


def build_ellipsoid_mesh(n_lon: int, n_lat: int, a: float, b: float) -> EllipsoidMesh:
    """
    Tessellate an ellipsoid into n_lon × n_lat quads, two triangles each.

    Quad corners 1..4 are (lon0, lat0), (lon1, lat0), (lon1, lat1),
    (lon0, lat1); triangles (1, 2, 3) and (1, 3, 4) are counter-clockwise
    seen from outside. Quads are ordered latitude-fastest. Texture
    coordinates are u = 1 - lon/2π, v = lat/π + 0.5.

    Args:
        n_lon: Longitude subdivisions over [0, 2π).
        n_lat: Latitude subdivisions over [-π/2, π/2].
        a: Equatorial radius.
        b: Polar radius.

    Returns:
        EllipsoidMesh with float32 arrays.

    Raises:
        ValueError: If a subdivision count is not a positive integer.
    """
    if n_lon < 1 or n_lat < 1:
        raise ValueError(f"Subdivisions must be positive, got n_lon={n_lon}, n_lat={n_lat}")

    lon_edges = 2.0 * np.pi * np.arange(n_lon + 1) / n_lon
    lat_edges = np.pi * (-0.5 + np.arange(n_lat + 1) / n_lat)

    lon0, lat0 = np.meshgrid(lon_edges[:-1], lat_edges[:-1], indexing="ij")
    lon1, lat1 = np.meshgrid(lon_edges[1:], lat_edges[1:], indexing="ij")

    # (quad, corner) in triangle order 1,2,3,1,3,4
    lon = np.stack([lon0, lon1, lon1, lon0, lon1, lon0], axis=-1).reshape(-1, 6)
    lat = np.stack([lat0, lat0, lat1, lat0, lat1, lat1], axis=-1).reshape(-1, 6)

    positions = np.stack([
        a * np.cos(lat) * np.cos(lon),
        a * np.cos(lat) * np.sin(lon),
        b * np.sin(lat),
    ], axis=-1).reshape(-1, 3)
    texcoords = np.stack([
        1.0 - lon / (2.0 * np.pi),
        lat / np.pi + 0.5,
    ], axis=-1).reshape(-1, 2)

    return EllipsoidMesh(
        positions=positions.astype(np.float32),
        texcoords=texcoords.astype(np.float32),
        n_lon=n_lon,
        n_lat=n_lat,
    )


def perspective(fov_rad: float, aspect: float, near: float, far: float) -> np.ndarray:
    """OpenGL-style perspective projection."""
    f = 1.0 / math.tan(fov_rad / 2.0)
    proj = np.zeros((4, 4))
    proj[0, 0] = f / aspect
    proj[1, 1] = f
    proj[2, 2] = (far + near) / (near - far)
    proj[2, 3] = (2 * far * near) / (near - far)
    proj[3, 2] = -1.0
    return proj


def look_at(eye, target, up) -> np.ndarray:
    """View matrix (inverse camera matrix) for a camera at eye."""
    eye = np.asarray(eye, dtype=float)
    forward = np.asarray(target, dtype=float) - eye
    forward /= np.linalg.norm(forward)
    right = np.cross(forward, np.asarray(up, dtype=float))
    right /= np.linalg.norm(right)
    real_up = np.cross(right, forward)
    view = np.identity(4)
    view[0, :3] = right
    view[1, :3] = real_up
    view[2, :3] = -forward
    view[:3, 3] = -view[:3, :3] @ eye
    return view


def _axis_rotation(axis: int, angle_rad: float) -> np.ndarray:
    """4×4 active rotation about x (0), y (1) or z (2)."""
    c = math.cos(angle_rad)
    s = math.sin(angle_rad)
    j, k = [(1, 2), (2, 0), (0, 1)][axis]
    rot = np.identity(4)
    rot[j, j] = c
    rot[j, k] = -s
    rot[k, j] = s
    rot[k, k] = c
    return rot


def view_projection_matrix(view_state: ViewState, aspect: float) -> np.ndarray:
    """
    Model-view-projection matrix for the globe.

    projection · view(camera at (0, 0, distance) looking at the origin,
    up +y) · Rx(rot_x) · Ry(rot_y) · Rz(rot_z).

    Args:
        view_state: Camera parameters.
        aspect: Viewport width / height.

    Returns:
        4×4 float32 matrix.

    Raises:
        ValueError: If aspect is not positive.
    """
    if not aspect > 0.0:
        raise ValueError(f"Aspect ratio must be positive, got {aspect}")

    projection = perspective(view_state.fov_rad, aspect, view_state.z_near, view_state.z_far)
    view = look_at((0.0, 0.0, view_state.distance), (0.0, 0.0, 0.0), (0.0, 1.0, 0.0))

    matrix = projection @ view
    matrix = matrix @ _axis_rotation(0, view_state.rot_x)
    matrix = matrix @ _axis_rotation(1, view_state.rot_y)
    matrix = matrix @ _axis_rotation(2, view_state.rot_z)
    return matrix.astype(np.float32)
