# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Adapters for configuration I/O, export, time, textures and the frame loop.

External dependencies (json, csv, file I/O, threads) are confined to this layer.
"""
from earthview.adapters.json_io import JsonConfigReader
from earthview.adapters.json_exporter import FrameJsonExporter
from earthview.adapters.csv_exporter import TrajectoryCsvExporter
from earthview.adapters.system_clock import SystemClock, FixedClock
from earthview.adapters.texture_loader import TextureLoader
from earthview.adapters.recording_renderer import RecordingRenderer
from earthview.adapters.frame_loop import FrameLoop

__all__ = [
    "JsonConfigReader",
    "FrameJsonExporter",
    "TrajectoryCsvExporter",
    "SystemClock",
    "FixedClock",
    "TextureLoader",
    "RecordingRenderer",
    "FrameLoop",
]
