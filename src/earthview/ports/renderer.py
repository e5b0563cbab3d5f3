# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interface for the graphics back end.

The renderer owns shader programs, GPU buffers and textures. It receives
the static ellipsoid mesh once and per-frame uniforms on every draw.
"""
from typing import Protocol, runtime_checkable

from earthview.domain.frame import FrameUniforms
from earthview.domain.geometry import EllipsoidMesh


@runtime_checkable
class Renderer(Protocol):
    """Port for drawing the globe."""

    def upload_mesh(self, mesh: EllipsoidMesh) -> None:
        """Upload static globe geometry."""
        ...

    def textures_ready(self) -> bool:
        """True once both the day and the night texture are loaded."""
        ...

    def draw(self, uniforms: FrameUniforms) -> None:
        """Draw one frame with the given uniforms."""
        ...
