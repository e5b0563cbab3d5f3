# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Frame-synchronised animation loop.

One compute pass per tick, strictly ordered through compute_frame, then
a hand-off to the renderer. Drawing is skipped while textures are still
loading. Frames share no mutable state: a frame that fails is logged
and dropped, and the next tick starts again from the current time.
Cancellation is stop(): the loop simply requests no further frames.
"""
import logging
import time
from typing import Callable

from earthview.ports import Clock
from earthview.ports.renderer import Renderer
from earthview.domain.errors import EarthviewError
from earthview.domain.frame import FrameState, compute_frame, tracked_elements_from_config
from earthview.domain.geometry import ViewState, build_ellipsoid_mesh
from earthview.domain.orbital_mechanics import KeplerElements
from earthview.domain.scene_config import SceneConfig

logger = logging.getLogger(__name__)


class FrameLoop:
    """
    Drives compute_frame and the renderer from a clock.

    Args:
        renderer: Renderer port implementation.
        clock: Wall-clock source.
        config: Scene configuration.
        view_state: Initial camera for this session.
        tracked: Elements of the tracked object; derived from
            config.tracked_state when omitted.
    """

    def __init__(
        self,
        renderer: Renderer,
        clock: Clock,
        config: SceneConfig = SceneConfig(),
        view_state: ViewState = ViewState(),
        tracked: KeplerElements | None = None,
    ):
        self._renderer = renderer
        self._clock = clock
        self._config = config
        self._tracked = tracked if tracked is not None else tracked_elements_from_config(config)
        self.view_state = view_state
        self.frames_drawn = 0
        self.frames_failed = 0
        self._running = False

        renderer.upload_mesh(build_ellipsoid_mesh(
            config.n_lon, config.n_lat, config.ellipsoid_a, config.ellipsoid_b,
        ))

    @property
    def tracked(self) -> KeplerElements:
        return self._tracked

    def tick(self, aspect: float = 1.0) -> FrameState | None:
        """
        Compute one frame and draw it if the renderer is ready.

        Returns:
            The computed FrameState, or None if the computation failed.
        """
        now = self._clock.now()
        try:
            frame = compute_frame(now, self._tracked, self.view_state, aspect, self._config)
        except (EarthviewError, ValueError):
            self.frames_failed += 1
            logger.exception("Frame at %s failed; skipping", now.isoformat())
            return None

        if not self._renderer.textures_ready():
            logger.debug("Textures not loaded; skipping draw at %s", now.isoformat())
            return frame

        self._renderer.draw(frame.uniforms)
        self.frames_drawn += 1
        if self.frames_drawn == 1:
            logger.info("First frame drawn at %s", now.isoformat())
        return frame

    def run(
        self,
        max_frames: int | None = None,
        aspect: float = 1.0,
        interval_s: float = 1.0 / 60.0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> int:
        """
        Tick until stopped or max_frames ticks have run.

        Returns:
            Number of ticks executed.
        """
        self._running = True
        ticks = 0
        while self._running and (max_frames is None or ticks < max_frames):
            self.tick(aspect)
            ticks += 1
            if self._running and (max_frames is None or ticks < max_frames):
                sleep(interval_s)
        self._running = False
        return ticks

    def stop(self) -> None:
        """Stop requesting frames; the current tick completes."""
        self._running = False
