"""Frame source and snapshot I/O."""

import logging
from pathlib import Path
from typing import BinaryIO, Iterator, Tuple, Union

import cv2
import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)

VIDEO_EXTENSIONS = {".mp4", ".avi", ".mov", ".mkv"}


def is_video_file(filename: str) -> bool:
    """Check if filename has a video extension.

    Args:
        filename: Path to file.

    Returns:
        True if file has a video extension.
    """
    return Path(filename).suffix.lower() in VIDEO_EXTENSIONS


def is_camera_source(source: str) -> bool:
    """Check if a source string names a camera index such as ``"0"``."""
    return source.isdigit()


class VideoReader:
    """Read frames from a video file, a camera or a still image."""

    def __init__(self, path: str):
        """Initialize the reader.

        Args:
            path: Path to a video or image file, or a camera index.

        Raises:
            IOError: If the source cannot be opened.
        """
        self.path = path
        self.is_camera = is_camera_source(path)
        self.is_video = self.is_camera or is_video_file(path)
        self._cap = None
        self._image = None
        self._frame_count = 1

        if self.is_video:
            self._cap = cv2.VideoCapture(int(path) if self.is_camera else path)
            if not self._cap.isOpened():
                raise IOError(f"Cannot open video source: {path}")
            # Cameras report 0 or -1 here
            self._frame_count = max(0, int(self._cap.get(cv2.CAP_PROP_FRAME_COUNT)))
        else:
            self._image = np.array(Image.open(path).convert("RGB"))

    @property
    def frame_count(self) -> int:
        """Get total frame count (1 for images, 0 when unknown)."""
        return self._frame_count

    def read_frame(self) -> Tuple[bool, np.ndarray | None]:
        """Read the next frame.

        Returns:
            Tuple of (success, frame). Frame is RGB numpy array.
        """
        if self.is_video:
            ret, frame = self._cap.read()
            if ret:
                frame = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
            return ret, frame
        else:
            if self._image is not None:
                img = self._image
                self._image = None  # Only return once
                return True, img
            return False, None

    def __iter__(self) -> Iterator[np.ndarray]:
        """Iterate over frames."""
        while True:
            ret, frame = self.read_frame()
            if not ret:
                break
            yield frame

    def close(self):
        """Release resources."""
        if self._cap is not None:
            self._cap.release()
            self._cap = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


class SnapshotSink:
    """Write annotated frames as JPEG images.

    The target is either a filesystem path, overwritten on every write, or
    a writable binary stream.
    """

    def __init__(self, target: Union[str, Path, BinaryIO], quality: int = 95):
        """Initialize the sink.

        Args:
            target: Output path or binary stream.
            quality: JPEG quality (1-95).
        """
        self.target = target
        self.quality = quality

    def write(self, frame: np.ndarray) -> None:
        """Encode an RGB frame and write it to the target.

        Args:
            frame: RGB numpy array.
        """
        image = Image.fromarray(np.ascontiguousarray(frame, dtype=np.uint8))
        image.save(self.target, format="JPEG", quality=self.quality)
        if isinstance(self.target, (str, Path)):
            logger.info("Snapshot saved to: %s", self.target)
        else:
            logger.info("Snapshot written to stream")
