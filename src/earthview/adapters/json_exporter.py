# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
JSON frame exporter.

Writes one computed frame (time, Sun/Moon coordinates, sidereal angle,
tracked object, renderer uniforms) as a JSON document.
"""
import json
import math
from typing import Any

from earthview.ports.export import FrameExporter
from earthview.domain.frame import FrameState


def frame_to_dict(frame: FrameState) -> dict[str, Any]:
    """JSON-ready dictionary for a frame. Angles are given in degrees."""
    uniforms = frame.uniforms
    return {
        'time': frame.time.isoformat(),
        'julian_day': frame.julian_time.jd,
        'julian_fraction': frame.julian_time.jt,
        'sidereal_deg': frame.sidereal_deg,
        'sun': {
            'ra_deg': math.degrees(frame.sun.ra),
            'decl_deg': math.degrees(frame.sun.decl),
            'distance_km': frame.sun.distance_km,
        },
        'moon': {
            'ra_deg': math.degrees(frame.moon.ra),
            'decl_deg': math.degrees(frame.moon.decl),
            'distance_km': frame.moon.distance_km,
        },
        'tracked': {
            'position_km': list(frame.inertial.r),
            'velocity_km_s': list(frame.inertial.v),
            'lon_deg': frame.geodetic.lon_deg,
            'lat_deg': frame.geodetic.lat_deg,
            'alt_km': frame.geodetic.alt,
        },
        'trajectory': [
            [p.position.lon_deg, p.position.lat_deg, p.position.alt]
            for p in frame.trajectory
        ],
        'uniforms': {
            'u_matrix': uniforms.view_projection.T.reshape(-1).tolist(),
            'u_rA': float(uniforms.sun_ra),
            'u_decl': float(uniforms.sun_decl),
            'u_LST': float(uniforms.lst),
        },
    }


class FrameJsonExporter(FrameExporter):
    """Exports a computed frame to JSON."""

    def export(self, frame: FrameState, path: str) -> None:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(frame_to_dict(frame), f, indent=2)
