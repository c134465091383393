"""Session layer owning a loaded model for repeated track predictions."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from .config.models import DEFAULT_ENGINE, DEFAULT_MODEL_PATH, InferenceConfig
from .features import FEATURE_COUNT, FeatureVector
from .inference import InferenceAdapter, ModelAdapter
from .runtimes import ModelRuntime, load_runtime

LOGGER = logging.getLogger(__name__)


class TrackClassifier:
    """Predict track probabilities with a runtime held for a scoped lifetime."""

    def __init__(
        self,
        runtime: ModelRuntime,
        *,
        adapter: ModelAdapter | None = None,
        warmup: bool = False,
    ) -> None:
        """Bind a runtime and adapter.

        Args:
            runtime: Model runtime, loaded on :meth:`__enter__` if needed.
            adapter: Payload/output adapter. Defaults to :class:`InferenceAdapter`.
            warmup: Run one zero-valued forward pass right after loading.
        """
        self._runtime = runtime
        self._adapter = adapter or InferenceAdapter()
        self._warmup = warmup

    @classmethod
    def from_config(cls, config: InferenceConfig) -> "TrackClassifier":
        """Create a classifier for the model described by ``config``."""
        runtime = load_runtime(config.model_path, config.engine)
        return cls(runtime, warmup=config.warmup)

    def __enter__(self) -> "TrackClassifier":
        """Load the runtime, releasing it again if warmup fails."""
        self._runtime.load()
        if self._warmup:
            try:
                self._runtime.warmup(FEATURE_COUNT)
            except Exception:
                self._runtime.release()
                raise
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        """Release the runtime."""
        self._runtime.release()

    @property
    def runtime(self) -> ModelRuntime:
        """Return the runtime executing forward passes."""
        return self._runtime

    def predict(self, features: FeatureVector | Iterable[float]) -> float:
        """Return the probability that ``features`` describe a genuine track.

        Raises:
            InvalidInputError: When ``features`` do not hold eleven numbers.
            InferenceFailure: When the forward pass fails.
            MalformedOutputError: When the output is not a single scalar.
        """
        vector = features if isinstance(features, FeatureVector) else FeatureVector(features)
        probability = self._adapter.predict(vector, self._runtime)
        if LOGGER.isEnabledFor(logging.DEBUG):
            LOGGER.debug("Track probability %.4f for %s", probability, vector.as_dict())
        return probability


def predict_track_probability(
    features: Iterable[float],
    *,
    runtime: ModelRuntime | None = None,
    model_path: str | Path = DEFAULT_MODEL_PATH,
    engine: str = DEFAULT_ENGINE,
) -> float:
    """Predict a single track probability.

    The feature vector is validated before any model is touched. When
    ``runtime`` is omitted a runtime for ``model_path`` is loaded for this call
    and released before returning, including on failure. A supplied runtime is
    used as is and left loaded.

    Raises:
        InvalidInputError: When ``features`` do not hold eleven numbers.
        ModelLoadError: When the model cannot be loaded.
        InferenceFailure: When the forward pass fails.
    """
    vector = FeatureVector(features)
    if runtime is not None:
        return TrackClassifier(runtime).predict(vector)
    with TrackClassifier(load_runtime(model_path, engine)) as classifier:
        return classifier.predict(vector)
