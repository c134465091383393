"""Convenience exports for configuration loading."""

from __future__ import annotations

from .loader import load_inference_config
from .models import DEFAULT_ENGINE, DEFAULT_MODEL_PATH, InferenceConfig

__all__ = [
    "load_inference_config",
    "InferenceConfig",
    "DEFAULT_ENGINE",
    "DEFAULT_MODEL_PATH",
]
