"""Interactive playback with an on-screen window."""

import logging
from enum import Enum
from typing import Optional, Protocol

import cv2
import numpy as np

from ..config import AppConfig
from ..core.io import SnapshotSink, VideoReader
from ..detection.base import InferenceEngine
from ..detection.loader import load_engine
from ..pipeline import FrameContext, FramePipeline

logger = logging.getLogger(__name__)

NO_KEY = -1
KEY_ESC = 27
QUIT_KEYS = {KEY_ESC, ord("q"), ord("Q")}
PAUSE_KEY = ord(" ")
SNAPSHOT_KEY = ord("s")


class PlaybackState(Enum):
    """States of the playback loop."""

    RUNNING = "running"
    PAUSED = "paused"
    STOPPED = "stopped"


class Display(Protocol):
    """Protocol for presenting frames and reading keys."""

    def show(self, frame: np.ndarray) -> None:
        """Present an RGB frame."""
        ...

    def poll_key(self, delay_ms: int) -> int:
        """Wait up to delay_ms for a key (0 waits forever).

        Returns:
            Key code, or -1 if no key was pressed.
        """
        ...

    def close(self) -> None:
        """Release the window."""
        ...


class OpenCVDisplay:
    """Display backed by an OpenCV HighGUI window."""

    def __init__(self, window_name: str = "RP24 Detection"):
        self.window_name = window_name

    def show(self, frame: np.ndarray) -> None:
        cv2.imshow(self.window_name, cv2.cvtColor(frame, cv2.COLOR_RGB2BGR))

    def poll_key(self, delay_ms: int) -> int:
        key = cv2.waitKey(delay_ms)
        if key == NO_KEY:
            return NO_KEY
        return key & 0xFF

    def close(self) -> None:
        cv2.destroyAllWindows()


class PlaybackController:
    """Drive the capture-infer-render loop and react to key presses.

    Keys:
        q, Q, Esc: stop.
        space: pause until any key is pressed.
        s: write the current annotated frame to the snapshot sink.

    Attributes:
        state: Current PlaybackState.
        frame_count: Frames presented so far.
        last_context: FrameContext of the most recent frame.
    """

    def __init__(
        self,
        reader: VideoReader,
        pipeline: FramePipeline,
        display: Display,
        snapshot_sink: SnapshotSink,
        poll_interval_ms: int = 1,
    ):
        """Initialize the controller.

        Args:
            reader: Frame source.
            pipeline: Per-frame pipeline.
            display: Window used to present frames and read keys.
            snapshot_sink: Destination for snapshots.
            poll_interval_ms: Key poll timeout after each frame.
        """
        self.reader = reader
        self.pipeline = pipeline
        self.display = display
        self.snapshot_sink = snapshot_sink
        self.poll_interval_ms = poll_interval_ms
        self.state = PlaybackState.RUNNING
        self.frame_count = 0
        self.last_context: Optional[FrameContext] = None

    def step(self) -> PlaybackState:
        """Run one loop iteration.

        Returns:
            State after the iteration.
        """
        if self.state is PlaybackState.STOPPED:
            return self.state

        ret, frame = self.reader.read_frame()
        if not ret:
            logger.info("End of stream after %d frames", self.frame_count)
            self.state = PlaybackState.STOPPED
            return self.state

        context = self.pipeline.process(frame)
        self.frame_count += 1
        self.last_context = context

        self.display.show(context.display)
        key = self.display.poll_key(self.poll_interval_ms)
        self.handle_key(key, context)
        return self.state

    def handle_key(self, key: int, context: FrameContext) -> None:
        """Apply a key press to the playback state."""
        if key in QUIT_KEYS:
            logger.info("Quit requested")
            self.state = PlaybackState.STOPPED
        elif key == PAUSE_KEY:
            self.pause()
        elif key == SNAPSHOT_KEY:
            self.snapshot_sink.write(context.display)

    def pause(self) -> None:
        """Block until any key is pressed, then resume."""
        self.state = PlaybackState.PAUSED
        logger.info("Paused; press any key to resume")
        self.display.poll_key(0)
        self.state = PlaybackState.RUNNING

    def run(self) -> int:
        """Loop until the stream ends or the user quits.

        Returns:
            Number of frames presented.
        """
        while self.step() is not PlaybackState.STOPPED:
            pass
        return self.frame_count


def run_interactive(
    config: AppConfig,
    engine: Optional[InferenceEngine] = None,
    display: Optional[Display] = None,
) -> int:
    """Play a source in a window with detection overlays.

    Args:
        config: Application configuration.
        engine: Preloaded engine; loaded from config.engine when omitted.
        display: Display to use; an OpenCV window when omitted.

    Returns:
        Number of frames presented.

    Raises:
        IOError: If the source cannot be opened.
    """
    engine = engine or load_engine(config.engine, config.model)
    pipeline = FramePipeline.from_config(config, engine)
    display = display or OpenCVDisplay(config.playback.window_name)
    sink = SnapshotSink(config.playback.snapshot_path)

    with VideoReader(config.source.path) as reader:
        controller = PlaybackController(
            reader,
            pipeline,
            display,
            sink,
            poll_interval_ms=config.playback.poll_interval_ms,
        )
        try:
            return controller.run()
        finally:
            display.close()
