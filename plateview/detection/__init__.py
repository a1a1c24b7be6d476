"""Detection results and the inference engine boundary."""

from .base import DEFAULT_CLASS_NAMES, ClassCatalog, DetectedObject, InferenceEngine

# Lazy import; the loader pulls in the config layer
def __getattr__(name):
    if name in ("load_engine", "resolve_factory"):
        from . import loader
        return getattr(loader, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

__all__ = [
    "DEFAULT_CLASS_NAMES",
    "ClassCatalog",
    "DetectedObject",
    "InferenceEngine",
    "load_engine",
    "resolve_factory",
]
