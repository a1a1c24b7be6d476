"""Instantaneous frame-rate measurement."""

import time
from typing import Callable

import cv2
import numpy as np


FPS_ORIGIN = (10, 30)
FPS_COLOR = (0, 255, 0)
FPS_FONT_SCALE = 0.8
FPS_THICKNESS = 2


def fps_from_elapsed(elapsed_ms: float) -> float:
    """Convert one inter-frame interval to frames per second.

    Non-positive intervals (clock resolution artifacts) report 0.
    """
    if elapsed_ms > 0:
        return 1000.0 / elapsed_ms
    return 0.0


def format_fps(fps: float) -> str:
    return f"FPS: {fps:.1f}"


class FrameRateMonitor:
    """Track the interval between presented frames.

    Each reading reflects only the preceding interval; there is no
    smoothing.
    """

    def __init__(self, clock: Callable[[], float] = time.perf_counter):
        """Initialize the monitor.

        Args:
            clock: Monotonic clock returning seconds. The first interval is
                measured from construction time.
        """
        self._clock = clock
        self._last_tick = clock()
        self.fps = 0.0

    @property
    def last_tick(self) -> float:
        return self._last_tick

    def tick(self) -> float:
        """Record a presented frame and return the updated FPS."""
        now = self._clock()
        elapsed_ms = (now - self._last_tick) * 1000.0
        self._last_tick = now
        self.fps = fps_from_elapsed(elapsed_ms)
        return self.fps

    def draw(self, frame: np.ndarray) -> None:
        """Stamp the current FPS in the top-left corner of a frame."""
        cv2.putText(
            frame,
            format_fps(self.fps),
            FPS_ORIGIN,
            cv2.FONT_HERSHEY_SIMPLEX,
            FPS_FONT_SCALE,
            FPS_COLOR,
            FPS_THICKNESS,
        )
