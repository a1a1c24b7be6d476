"""Detection data structures and the inference engine protocol."""

from dataclasses import dataclass, field
from typing import List, Protocol, Sequence, Tuple

import numpy as np


NUM_KEYPOINTS = 4

DEFAULT_CLASS_NAMES = ("G", "1", "2", "3", "4", "5", "O", "Bs", "Bb")


@dataclass(frozen=True)
class DetectedObject:
    """A single detection in model-space coordinates.

    Keypoints run clockwise as seen on screen, starting at the top-left
    corner: top-left, top-right, bottom-right, bottom-left.

    Attributes:
        label: Class index into a ClassCatalog.
        prob: Confidence score (0.0 to 1.0).
        color: Color attribute; 1 is red, 0 is blue, anything else is unknown.
        landmarks: Flat (x0, y0, x1, y1, x2, y2, x3, y3) keypoint coordinates.
    """

    label: int
    prob: float
    color: int
    landmarks: Tuple[float, ...] = field(default=(0.0,) * (2 * NUM_KEYPOINTS))

    def __post_init__(self):
        landmarks = tuple(float(v) for v in self.landmarks)
        if len(landmarks) != 2 * NUM_KEYPOINTS:
            raise ValueError(
                f"Expected {2 * NUM_KEYPOINTS} landmark values, got {len(landmarks)}"
            )
        object.__setattr__(self, "landmarks", landmarks)

    @property
    def keypoints(self) -> np.ndarray:
        """Keypoints as a (4, 2) float array."""
        return np.asarray(self.landmarks, dtype=np.float64).reshape(NUM_KEYPOINTS, 2)


@dataclass(frozen=True)
class ClassCatalog:
    """Ordered, read-only mapping from class index to display name."""

    names: Tuple[str, ...] = DEFAULT_CLASS_NAMES

    def __post_init__(self):
        object.__setattr__(self, "names", tuple(self.names))

    @classmethod
    def from_names(cls, names: Sequence[str]) -> "ClassCatalog":
        return cls(names=tuple(names))

    def __len__(self) -> int:
        return len(self.names)

    def name_for(self, label: int) -> str:
        """Resolve a class index, falling back to the number itself."""
        if 0 <= label < len(self.names):
            return self.names[label]
        return str(label)


class InferenceEngine(Protocol):
    """Protocol for the external detector feeding the overlay.

    Attributes:
        model_width: Input width the engine expects.
        model_height: Input height the engine expects.
    """

    model_width: int
    model_height: int

    def infer(self, frame: np.ndarray, detect_color: int) -> List[DetectedObject]:
        """Run detection on a frame resized to the model resolution.

        Args:
            frame: Input frame (RGB) of shape (model_height, model_width, 3).
            detect_color: Color mode flag passed through to the engine.

        Returns:
            Detections in model-space coordinates. The list belongs to the
            caller.
        """
        ...
