# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for the day/night globe pipeline.

Usage:
    # Sun, Moon, sidereal angle and tracked object right now
    earthview

    # A fixed instant, with a custom tracked object and textures
    earthview --config scene.json --at 2026-06-21T12:00:00Z

    # Export the frame and its ground track
    earthview --export-json frame.json --export-csv track.csv

    # Run the headless frame loop for 120 frames
    earthview --frames 120
"""
import argparse
import json
import logging
import math
import os
import sys
from datetime import datetime, timezone

from earthview.domain.errors import EarthviewError
from earthview.domain.frame import FrameState, compute_frame, tracked_elements_from_config
from earthview.domain.geometry import ViewState
from earthview.domain.scene_config import SceneConfig
from earthview.adapters.json_io import JsonConfigReader
from earthview.adapters.json_exporter import FrameJsonExporter
from earthview.adapters.csv_exporter import TrajectoryCsvExporter
from earthview.adapters.system_clock import FixedClock, SystemClock
from earthview.adapters.recording_renderer import RecordingRenderer
from earthview.adapters.frame_loop import FrameLoop


def _fail(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


def _load_config(path: str | None) -> SceneConfig:
    if path is None:
        return SceneConfig()
    if not os.path.exists(path):
        _fail(f"Config file not found: {path}")
    try:
        return JsonConfigReader().read_config(path)
    except (OSError, json.JSONDecodeError, UnicodeDecodeError, ValueError) as e:
        _fail(f"Invalid config file: {e}")


def _parse_time(value: str | None) -> datetime:
    if value is None:
        return datetime.now(tz=timezone.utc)
    text = value[:-1] + "+00:00" if value.endswith("Z") else value
    try:
        dt = datetime.fromisoformat(text)
    except ValueError:
        _fail(f"Invalid --at time '{value}', expected ISO 8601")
    return dt if dt.tzinfo else dt.replace(tzinfo=timezone.utc)


def _print_summary(frame: FrameState) -> None:
    geo = frame.geodetic
    print(f"Time:            {frame.time.isoformat()}")
    print(f"Julian day:      {frame.julian_time.jd} + {frame.julian_time.jt:.8f}")
    print(f"Sidereal angle:  {frame.sidereal_deg:.6f} deg")
    print(f"Sun  RA/Dec:     {math.degrees(frame.sun.ra):.4f} / {math.degrees(frame.sun.decl):.4f} deg")
    print(f"Moon RA/Dec:     {math.degrees(frame.moon.ra):.4f} / {math.degrees(frame.moon.decl):.4f} deg")
    print(f"Tracked object:  lon {geo.lon_deg:.4f} deg, lat {geo.lat_deg:.4f} deg, alt {geo.alt:.3f} km")
    print(f"Trajectory:      {len(frame.trajectory)} points")


def run(
    config: SceneConfig,
    at: datetime,
    aspect: float = 1.0,
    export_json: str | None = None,
    export_csv: str | None = None,
) -> FrameState:
    """
    Compute one frame for a fixed instant and write requested exports.

    Returns:
        The computed FrameState.
    """
    tracked = tracked_elements_from_config(config)
    frame = compute_frame(at, tracked, ViewState(), aspect, config)

    if export_json:
        FrameJsonExporter().export(frame, export_json)
        print(f"Exported frame to {export_json}")
    if export_csv:
        count = TrajectoryCsvExporter().export(list(frame.trajectory), export_csv)
        print(f"Exported {count} ground-track points to {export_csv}")

    return frame


def run_frames(config: SceneConfig, frames: int, at: datetime | None, aspect: float = 1.0) -> int:
    """Run the headless frame loop; returns the number of frames drawn."""
    clock = FixedClock(at) if at is not None else SystemClock()
    renderer = RecordingRenderer()
    renderer.load_textures(config.day_texture, config.night_texture)
    try:
        loop = FrameLoop(renderer, clock, config)
        loop.run(max_frames=frames, aspect=aspect)
    finally:
        renderer.close()
    return loop.frames_drawn


def main():
    parser = argparse.ArgumentParser(
        description="Time-accurate day/night globe: Sun, Moon, sidereal time and a tracked orbit"
    )
    parser.add_argument(
        '--config', '-c',
        help="Path to scene configuration JSON (tracked object, textures, mesh)"
    )
    parser.add_argument(
        '--at',
        help="UTC instant to compute (ISO 8601, default: now)"
    )
    parser.add_argument(
        '--aspect', type=float, default=1.0,
        help="Viewport aspect ratio width/height (default: 1.0)"
    )
    parser.add_argument(
        '--frames', type=int, default=0,
        help="Run the headless frame loop for N frames"
    )

    export_group = parser.add_argument_group('export')
    export_group.add_argument(
        '--export-json',
        help="Export the computed frame (ephemeris, tracked object, uniforms) to JSON"
    )
    export_group.add_argument(
        '--export-csv',
        help="Export the tracked object's ground track to CSV"
    )

    log_group = parser.add_mutually_exclusive_group()
    log_group.add_argument('--verbose', '-v', action='store_true', help="Debug logging")
    log_group.add_argument('--quiet', '-q', action='store_true', help="Errors only")

    args = parser.parse_args()

    level = logging.DEBUG if args.verbose else logging.ERROR if args.quiet else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    config = _load_config(args.config)
    at = _parse_time(args.at)

    try:
        frame = run(
            config,
            at,
            aspect=args.aspect,
            export_json=args.export_json,
            export_csv=args.export_csv,
        )
    except (EarthviewError, ValueError) as e:
        _fail(str(e))

    _print_summary(frame)

    if args.frames > 0:
        drawn = run_frames(config, args.frames, at if args.at else None, aspect=args.aspect)
        print(f"Frame loop: {drawn}/{args.frames} frames drawn")


if __name__ == "__main__":
    main()
