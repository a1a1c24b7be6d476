from typing import List, Optional

import numpy as np
import pytest

from plateview.detection.base import DetectedObject


class FakeEngine:
    """Engine returning scripted detections and recording every call."""

    def __init__(self, results=None, model_width=640, model_height=640):
        self.model_width = model_width
        self.model_height = model_height
        self.results = list(results or [])
        self.calls = []

    def infer(self, frame: np.ndarray, detect_color: int) -> List[DetectedObject]:
        self.calls.append((frame.shape, detect_color))
        return list(self.results)


class FakeReader:
    def __init__(self, frames):
        self.frames = list(frames)
        self.reads = 0

    def read_frame(self):
        self.reads += 1
        if not self.frames:
            return False, None
        return True, self.frames.pop(0)


class FakeDisplay:
    """Display with scripted key presses.

    ``on_block`` is called whenever the display is asked to wait forever.
    """

    def __init__(self, keys=None, on_block=None):
        self.keys = list(keys or [])
        self.on_block = on_block
        self.shown = []
        self.delays = []
        self.closed = False

    def show(self, frame):
        self.shown.append(frame)

    def poll_key(self, delay_ms: int) -> int:
        self.delays.append(delay_ms)
        if delay_ms == 0 and self.on_block is not None:
            self.on_block()
        if self.keys:
            return self.keys.pop(0)
        return -1

    def close(self):
        self.closed = True


@pytest.fixture
def plate():
    return DetectedObject(
        label=0,
        prob=0.87,
        color=1,
        landmarks=[10, 10, 20, 10, 20, 20, 10, 20],
    )


@pytest.fixture
def make_engine():
    def factory(results: Optional[list] = None, **kwargs):
        return FakeEngine(results, **kwargs)
    return factory


@pytest.fixture
def make_reader():
    return FakeReader


@pytest.fixture
def make_display():
    return FakeDisplay
