"""Track candidate classification with a pre-trained MLP."""

from __future__ import annotations

from .classifier import TrackClassifier, predict_track_probability
from .features import FEATURE_COUNT, FEATURE_NAMES, FeatureVector, InvalidInputError
from .inference import (
    BATCH_SIZE,
    InferenceAdapter,
    InferenceFailure,
    MalformedOutputError,
    ModelAdapter,
)
from .runtimes import ModelLoadError, ModelRuntime, load_runtime

__all__ = [
    "BATCH_SIZE",
    "FEATURE_COUNT",
    "FEATURE_NAMES",
    "FeatureVector",
    "InferenceAdapter",
    "InferenceFailure",
    "InvalidInputError",
    "MalformedOutputError",
    "ModelAdapter",
    "ModelLoadError",
    "ModelRuntime",
    "TrackClassifier",
    "load_runtime",
    "predict_track_probability",
]
