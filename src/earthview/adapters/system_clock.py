# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Wall-clock time source.
"""
from datetime import datetime, timezone

from earthview.ports import Clock


class SystemClock(Clock):
    """Host wall clock, in UTC."""

    def now(self) -> datetime:
        return datetime.now(tz=timezone.utc)


class FixedClock(Clock):
    """Clock frozen at one instant, for reproducible frames."""

    def __init__(self, instant: datetime):
        self._instant = instant if instant.tzinfo else instant.replace(tzinfo=timezone.utc)

    def now(self) -> datetime:
        return self._instant
