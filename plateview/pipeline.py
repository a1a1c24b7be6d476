"""Per-frame capture-infer-render pipeline."""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np

from .config import AppConfig
from .core.geometry import scale_factors
from .core.utils import resize_to_model
from .detection.base import ClassCatalog, DetectedObject, InferenceEngine
from .render.fps import FrameRateMonitor
from .render.overlay import OverlayRenderer

logger = logging.getLogger(__name__)


@dataclass
class FrameContext:
    """Buffers and results for one processed frame.

    Attributes:
        raw: Frame as captured; never drawn on.
        model_input: Resized copy handed to the engine.
        display: Annotated copy of the raw frame.
        scale: (scale_x, scale_y) from model space to display space.
        detections: Engine results for this frame.
        fps: Frame rate measured when this frame was stamped.
    """

    raw: np.ndarray
    model_input: np.ndarray
    display: np.ndarray
    scale: Tuple[float, float]
    detections: List[DetectedObject] = field(default_factory=list)
    fps: float = 0.0


class FramePipeline:
    """Run one frame through the engine and draw the results.

    Attributes:
        engine: External inference engine.
        renderer: Detection overlay renderer.
        monitor: Frame-rate monitor stamped on every frame.
        detect_color: Color mode flag forwarded to the engine.
    """

    def __init__(
        self,
        engine: InferenceEngine,
        renderer: Optional[OverlayRenderer] = None,
        monitor: Optional[FrameRateMonitor] = None,
        detect_color: int = 1,
    ):
        self.engine = engine
        self.renderer = renderer or OverlayRenderer()
        self.monitor = monitor or FrameRateMonitor()
        self.detect_color = detect_color

    @classmethod
    def from_config(cls, config: AppConfig, engine: InferenceEngine) -> "FramePipeline":
        """Create a FramePipeline from AppConfig.

        Args:
            config: Application configuration.
            engine: Loaded inference engine.

        Returns:
            Pipeline with a renderer for the configured class names.
        """
        return cls(
            engine=engine,
            renderer=OverlayRenderer(ClassCatalog.from_names(config.class_names)),
            detect_color=config.detect_color,
        )

    def process(self, frame: np.ndarray) -> FrameContext:
        """Infer on a frame and return its annotated display copy.

        Args:
            frame: Raw frame (RGB) at source resolution.

        Returns:
            FrameContext holding the separate raw, model input and display
            buffers.
        """
        model_w = self.engine.model_width
        model_h = self.engine.model_height

        model_input = resize_to_model(frame, model_w, model_h)
        detections = list(self.engine.infer(model_input, self.detect_color))

        display = frame.copy()
        # Source resolution may change between frames
        scale = scale_factors(frame.shape, model_w, model_h)
        self.renderer.draw(display, detections, scale)

        fps = self.monitor.tick()
        self.monitor.draw(display)

        if detections:
            logger.debug(
                "Detected %d objects: %s",
                len(detections),
                ", ".join(self.renderer.catalog.name_for(d.label) for d in detections),
            )

        return FrameContext(
            raw=frame,
            model_input=model_input,
            display=display,
            scale=scale,
            detections=detections,
            fps=fps,
        )
