# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for the time source, renderer and exporters.

Adapters implement these; the domain layer never imports them.
"""
from datetime import datetime
from typing import Protocol, runtime_checkable

from earthview.ports.renderer import Renderer
from earthview.ports.export import FrameExporter, TrajectoryExporter


@runtime_checkable
class Clock(Protocol):
    """Port for the wall-clock time source."""

    def now(self) -> datetime:
        """Current time as a timezone-aware UTC datetime."""
        ...


__all__ = [
    "Clock",
    "Renderer",
    "FrameExporter",
    "TrajectoryExporter",
]
