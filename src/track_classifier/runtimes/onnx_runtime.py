"""ONNX model runtime backed by onnxruntime."""

from __future__ import annotations

import numpy as np

from .base import ModelLoadError, ModelRuntime

try:  # pragma: no cover - optional dependency
    import onnxruntime as ort
except ImportError:  # pragma: no cover - environments without onnxruntime
    ort = None


class ONNXRuntime(ModelRuntime):
    """Runtime executing an exported ONNX graph through an inference session."""

    engine = "OnnxRuntime"

    def __init__(self, model_path, *, providers: list[str] | None = None) -> None:
        """Prepare an ONNX runtime.

        Args:
            model_path: Path to the ``.onnx`` file.
            providers: Execution providers passed to the session. Defaults to
                the CPU provider.
        """
        super().__init__(model_path)
        self._providers = list(providers) if providers else ["CPUExecutionProvider"]
        self._session = None
        self._input_name: str | None = None

    def _load(self) -> None:
        path = self._artifact()
        if ort is None:
            raise ModelLoadError("onnxruntime is required for ONNX models")
        try:
            session = ort.InferenceSession(path.read_bytes(), providers=self._providers)
        except Exception as exc:
            raise ModelLoadError(f"Malformed ONNX artifact {path}: {exc}") from exc
        self._session = session
        self._input_name = session.get_inputs()[0].name

    def _forward(self, payload: np.ndarray) -> np.ndarray:
        outputs = self._session.run(None, {self._input_name: payload})
        return np.asarray(outputs[0])

    def _release(self) -> None:
        self._session = None
        self._input_name = None
