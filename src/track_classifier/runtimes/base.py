"""Base interface for model runtimes executing the track classifier."""

from __future__ import annotations

import abc
import logging
from pathlib import Path

import numpy as np

from ..errors import ModelLoadError

LOGGER = logging.getLogger(__name__)


class ModelRuntime(abc.ABC):
    """Engine that owns a loaded model and runs single forward passes.

    Concrete runtimes implement :meth:`_load`, :meth:`_forward` and
    :meth:`_release`. The public methods enforce the load/release lifecycle
    so a runtime can be used as a context manager.
    """

    engine: str = ""

    def __init__(self, model_path: str | Path | None = None) -> None:
        """Record the artifact location without loading it.

        Args:
            model_path: Filesystem path to the serialized model. Runtimes that
                do not read an artifact may leave this unset.
        """
        self._model_path = Path(model_path).expanduser() if model_path is not None else None
        self._loaded = False

    def __enter__(self) -> "ModelRuntime":
        """Load the model when entering a context manager."""
        self.load()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        """Release the model on every exit path."""
        self.release()

    @property
    def model_path(self) -> Path | None:
        """Return the artifact path supplied at construction."""
        return self._model_path

    @property
    def is_loaded(self) -> bool:
        """Return ``True`` between :meth:`load` and :meth:`release`."""
        return self._loaded

    def load(self) -> None:
        """Load the model artifact. Calling twice is a no-op.

        Raises:
            ModelLoadError: When the artifact is missing or malformed.
        """
        if self._loaded:
            return
        self._load()
        self._loaded = True
        LOGGER.info("Loaded %s model from %s", self.engine or type(self).__name__, self._model_path)

    def forward(self, payload: np.ndarray) -> np.ndarray:
        """Run one forward pass and return the first model output.

        Raises:
            RuntimeError: If the runtime has not been loaded.
        """
        if not self._loaded:
            raise RuntimeError(f"{type(self).__name__} used before load()")
        return self._forward(np.asarray(payload, dtype=np.float32))

    def release(self) -> None:
        """Drop the loaded model. Safe to call when nothing is loaded."""
        if not self._loaded:
            return
        try:
            self._release()
        finally:
            self._loaded = False
            LOGGER.info("Released %s model", self.engine or type(self).__name__)

    def warmup(self, input_width: int) -> None:
        """Run a zero-valued forward pass to prime the engine."""
        self.forward(np.zeros((1, input_width), dtype=np.float32))

    def _artifact(self) -> Path:
        """Return the resolved artifact path or raise :class:`ModelLoadError`."""
        if self._model_path is None:
            raise ModelLoadError(f"{type(self).__name__} requires a model path")
        path = self._model_path.resolve()
        if not path.is_file():
            raise ModelLoadError(f"Model artifact not found: {path}")
        return path

    @abc.abstractmethod
    def _load(self) -> None:
        """Load the underlying model."""

    @abc.abstractmethod
    def _forward(self, payload: np.ndarray) -> np.ndarray:
        """Execute the model on a ``float32`` payload."""

    def _release(self) -> None:
        """Free engine resources (optional)."""
