# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for frame and trajectory export.
"""
from typing import Protocol, runtime_checkable

from earthview.domain.frame import FrameState
from earthview.domain.propagation import GroundTrackPoint


@runtime_checkable
class FrameExporter(Protocol):
    """Port for writing one computed frame to a file."""

    def export(self, frame: FrameState, path: str) -> None:
        """Write the frame's ephemeris, tracked object and uniforms."""
        ...


@runtime_checkable
class TrajectoryExporter(Protocol):
    """Port for writing a ground track to a file."""

    def export(self, points: list[GroundTrackPoint], path: str) -> int:
        """
        Write ground-track points.

        Returns:
            Number of points written.
        """
        ...
