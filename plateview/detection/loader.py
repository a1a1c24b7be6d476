"""Resolve an inference engine from an import spec."""

import importlib
import logging

from ..config import ModelConfig
from .base import InferenceEngine

logger = logging.getLogger(__name__)


def resolve_factory(spec: str):
    """Import the object named by a ``"package.module:attribute"`` spec.

    Args:
        spec: Import spec, e.g. ``"myengine.openvino:OpenvinoInfer"``.

    Returns:
        The imported attribute.

    Raises:
        ValueError: If the spec is malformed or the attribute is missing.
        ImportError: If the module cannot be imported.
    """
    module_name, sep, attr_path = spec.partition(":")
    if not sep or not module_name or not attr_path:
        raise ValueError(f"Engine spec must look like 'module:factory', got {spec!r}")

    target = importlib.import_module(module_name)
    for attr in attr_path.split("."):
        try:
            target = getattr(target, attr)
        except AttributeError:
            raise ValueError(f"{module_name!r} has no attribute {attr_path!r}") from None

    if not callable(target):
        raise ValueError(f"Engine factory {spec!r} is not callable")
    return target


def load_engine(spec: str, model: ModelConfig) -> InferenceEngine:
    """Build an inference engine from a factory spec and model config.

    The factory is called as ``factory(xml_path, bin_path, device)``.

    Raises:
        ValueError: If the spec is invalid or the engine lacks a model size.
    """
    factory = resolve_factory(spec)
    logger.info("Loading engine %s on %s", spec, model.device)
    engine = factory(model.xml_path, model.bin_path, model.device)

    for attr in ("model_width", "model_height"):
        value = getattr(engine, attr, None)
        if not isinstance(value, int) or value <= 0:
            raise ValueError(f"Engine {spec!r} must expose a positive integer {attr}")
    logger.info("Engine input size: %dx%d", engine.model_width, engine.model_height)
    return engine
