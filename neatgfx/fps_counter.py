"""Frames-per-second measurement over fixed intervals."""

from __future__ import annotations

import logging
import time

logger = logging.getLogger(__name__)


class FPSCounter:
    """Counts frames and updates the rate each time ``interval_seconds`` passes."""

    def __init__(self, interval_seconds=1.0, clock=time.monotonic):
        if interval_seconds <= 0:
            raise ValueError("interval must be positive")
        self._interval = interval_seconds
        self._clock = clock
        self._fps = 0.0
        self._frame_count = 0
        self._start = clock()

    @property
    def fps(self):
        return self._fps

    @property
    def frame_count(self):
        """Frames counted in the current interval."""
        return self._frame_count

    @property
    def interval(self):
        return self._interval

    def start(self):
        """Restart the interval timer."""
        self._start = self._clock()

    def add_frame(self):
        """Count a frame, updating the rate once the interval has elapsed."""
        self._frame_count += 1
        now = self._clock()
        if now - self._start > self._interval:
            self._start = now
            self._fps = self._frame_count / self._interval
            self._frame_count = 0
            logger.debug("FPS: %s", self._fps)