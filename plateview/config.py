"""Configuration dataclasses for plateview."""

from dataclasses import dataclass, field
from typing import List, Optional

from .detection.base import DEFAULT_CLASS_NAMES


def derive_bin_path(xml_path: str) -> str:
    """Derive the weights file path that sits next to a model XML file.

    Args:
        xml_path: Path to the model description.

    Returns:
        ``model.xml`` -> ``model.bin``; any other path gets ``.bin`` appended.
    """
    if xml_path.endswith(".xml"):
        return xml_path[: -len(".xml")] + ".bin"
    return xml_path + ".bin"


@dataclass
class ModelConfig:
    """Configuration for the inference engine's model files."""

    xml_path: str = "Model/0526.xml"
    bin_path: str = "Model/0526.bin"
    device: str = "CPU"


@dataclass
class SourceConfig:
    """Configuration for the frame source."""

    path: str = "video_test/red/v2.avi"


@dataclass
class PlaybackConfig:
    """Configuration for the display loop."""

    window_name: str = "RP24 Detection"
    poll_interval_ms: int = 1
    snapshot_path: str = "result.jpg"
    display: bool = True


@dataclass
class AppConfig:
    """Combined configuration for a run."""

    engine: str
    model: ModelConfig
    source: SourceConfig
    playback: PlaybackConfig
    detect_color: int = 1
    class_names: List[str] = field(default_factory=lambda: list(DEFAULT_CLASS_NAMES))
    log_level: str = "INFO"

    @classmethod
    def from_args(
        cls,
        engine: str,
        source_path: str,
        model_xml: str = "Model/0526.xml",
        model_bin: Optional[str] = None,
        device: str = "CPU",
        detect_color: int = 1,
        class_names: Optional[List[str]] = None,
        # Playback config
        window_name: str = "RP24 Detection",
        poll_interval_ms: int = 1,
        snapshot_path: str = "result.jpg",
        display: bool = True,
        log_level: str = "INFO",
    ) -> "AppConfig":
        """Create AppConfig from CLI arguments."""
        return cls(
            engine=engine,
            model=ModelConfig(
                xml_path=model_xml,
                bin_path=model_bin or derive_bin_path(model_xml),
                device=device,
            ),
            source=SourceConfig(path=source_path),
            playback=PlaybackConfig(
                window_name=window_name,
                poll_interval_ms=poll_interval_ms,
                snapshot_path=snapshot_path,
                display=display,
            ),
            detect_color=detect_color,
            class_names=list(class_names) if class_names else list(DEFAULT_CLASS_NAMES),
            log_level=log_level,
        )
