# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Headless renderer.

Implements the Renderer port without a graphics context: it records the
uploaded mesh and every set of uniforms it is asked to draw. Used for
offline runs and tests. Drawing is skipped, not queued, until both the
day and the night texture have loaded.
"""
import logging
from concurrent.futures import Future

from earthview.ports.renderer import Renderer
from earthview.domain.frame import FrameUniforms
from earthview.domain.geometry import EllipsoidMesh
from earthview.adapters.texture_loader import TextureLoader

logger = logging.getLogger(__name__)

DAY_TEXTURE = 0
NIGHT_TEXTURE = 1


class RecordingRenderer(Renderer):
    """Renderer that stores draw calls instead of issuing them."""

    def __init__(self, loader: TextureLoader | None = None):
        self._loader = loader or TextureLoader()
        self._textures: dict[int, Future] = {}
        self._failed: set[int] = set()
        self.mesh: EllipsoidMesh | None = None
        self.draws: list[FrameUniforms] = []

    def load_textures(self, day_path: str, night_path: str) -> None:
        """Start loading the day and night textures."""
        self._textures[DAY_TEXTURE] = self._loader.load(day_path)
        self._textures[NIGHT_TEXTURE] = self._loader.load(night_path)

    def upload_mesh(self, mesh: EllipsoidMesh) -> None:
        self.mesh = mesh
        logger.debug("Mesh uploaded: %d vertices", mesh.vertex_count)

    def textures_ready(self) -> bool:
        ready = 0
        for index, future in self._textures.items():
            if not future.done():
                continue
            error = future.exception()
            if error is None:
                ready += 1
            elif index not in self._failed:
                self._failed.add(index)
                logger.error("Texture %d failed to load: %s", index, error)
        return ready == 2

    def draw(self, uniforms: FrameUniforms) -> None:
        if not self.textures_ready():
            return
        self.draws.append(uniforms)

    def close(self) -> None:
        self._loader.shutdown()
