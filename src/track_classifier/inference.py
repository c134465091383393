"""Adapters binding feature vectors to model runtimes."""

from __future__ import annotations

import abc
import logging
from typing import Any

import numpy as np

from .errors import InferenceFailure, MalformedOutputError
from .features import FEATURE_COUNT, FeatureVector
from .runtimes.base import ModelRuntime

LOGGER = logging.getLogger(__name__)

# Single-sample inference only; payloads always have shape (BATCH_SIZE, FEATURE_COUNT).
BATCH_SIZE = 1


class ModelAdapter(abc.ABC):
    """Translate between domain samples and the tensors a runtime consumes."""

    @abc.abstractmethod
    def prepare_payload(self, sample: Any) -> np.ndarray:
        """Return the tensor fed to :meth:`ModelRuntime.forward`."""

    @abc.abstractmethod
    def decode_output(self, raw_output: Any) -> Any:
        """Convert runtime output into the domain result."""

    def predict(self, sample: Any, runtime: ModelRuntime) -> Any:
        """Prepare ``sample``, run one forward pass, and decode the output.

        Raises:
            InferenceFailure: When the runtime raises. The original exception
                is attached as ``__cause__``.
            MalformedOutputError: When the output cannot be decoded.
        """
        payload = self.prepare_payload(sample)
        try:
            raw_output = runtime.forward(payload)
        except Exception as exc:
            raise InferenceFailure(
                f"{type(runtime).__name__} forward pass failed: {exc}"
            ) from exc
        return self.decode_output(raw_output)


class InferenceAdapter(ModelAdapter):
    """Adapter for the track MLP: ``(1, 11)`` float32 in, probability out."""

    def prepare_payload(self, sample: FeatureVector) -> np.ndarray:
        """Reshape the normalised features into a single-row tensor."""
        return np.asarray(sample.normalized, dtype=np.float32).reshape(BATCH_SIZE, FEATURE_COUNT)

    def decode_output(self, raw_output: Any) -> float:
        """Return the first scalar of the first output row.

        Accepts a ``(1, k)`` tensor or a flat ``(k,)`` tensor with ``k >= 1``.
        When ``raw_output`` is a list of tensors (one per model head) the first
        tensor is used.

        Raises:
            MalformedOutputError: On empty output, more than one row, or a
                rank other than 1 or 2.
        """
        if isinstance(raw_output, (list, tuple)) and raw_output and hasattr(raw_output[0], "shape"):
            raw_output = raw_output[0]
        try:
            array = np.asarray(raw_output)
        except (TypeError, ValueError) as exc:
            raise MalformedOutputError(f"Runtime output is not a tensor: {exc}") from exc
        if array.size == 0:
            raise MalformedOutputError(f"Runtime returned an empty tensor with shape {array.shape}")
        if array.ndim == 2:
            if array.shape[0] != BATCH_SIZE:
                raise MalformedOutputError(
                    f"Expected {BATCH_SIZE} output row, got shape {array.shape}"
                )
            value = array[0, 0]
        elif array.ndim == 1:
            value = array[0]
        else:
            raise MalformedOutputError(f"Unexpected output rank {array.ndim} (shape {array.shape})")
        try:
            probability = float(value)
        except (TypeError, ValueError) as exc:
            raise MalformedOutputError(f"Output value {value!r} is not numeric") from exc
        LOGGER.debug("Decoded track probability %.6f", probability)
        return probability

    def predict(self, sample: FeatureVector, runtime: ModelRuntime) -> float:
        """Return the probability that ``sample`` is a genuine track."""
        return super().predict(sample, runtime)
