# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Asynchronous texture loading.

Reads texture files on a small ThreadPoolExecutor so startup does not
block the frame loop. Callers poll the returned futures; nothing waits
on them inside the per-frame path.
"""
import logging
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path

_log = logging.getLogger(__name__)


def _read_texture(path: str) -> bytes:
    data = Path(path).read_bytes()
    _log.debug("Read texture %s (%d bytes)", path, len(data))
    return data


class TextureLoader:
    """
    Loads texture files in background threads.

    Args:
        max_workers: Thread pool size (one per texture is enough).
    """

    def __init__(self, max_workers: int = 2):
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="texture",
        )

    def load(self, path: str) -> "Future[bytes]":
        """Start reading a texture file; the future resolves to its bytes."""
        _log.info("Loading texture %s", path)
        return self._executor.submit(_read_texture, path)

    def shutdown(self) -> None:
        self._executor.shutdown(wait=True)
