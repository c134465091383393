"""Model runtimes executing the track classifier."""

from __future__ import annotations

from pathlib import Path

from .base import ModelLoadError, ModelRuntime
from .mock import MockRuntime

__all__ = [
    "ModelLoadError",
    "ModelRuntime",
    "MockRuntime",
    "ONNXRuntime",
    "TorchscriptRuntime",
    "load_runtime",
]

_ENGINES = {
    "pytorch": "torchscript",
    "torchscript": "torchscript",
    "onnxruntime": "onnx",
    "onnx": "onnx",
}


def load_runtime(model_path: str | Path, engine: str = "PyTorch") -> ModelRuntime:
    """Create the runtime registered for ``engine`` without loading it.

    Args:
        model_path: Filesystem path to the model artifact.
        engine: Engine identifier, case-insensitive (``PyTorch``,
            ``TorchScript``, ``OnnxRuntime`` or ``ONNX``).

    Raises:
        ModelLoadError: When the engine is unknown or its library is missing.
    """
    backend = _ENGINES.get(str(engine).lower())
    if backend == "torchscript":
        try:
            from .torchscript import TorchscriptRuntime as _TorchscriptRuntime
        except ImportError as exc:
            raise ModelLoadError("PyTorch is not available for TorchScript models") from exc
        return _TorchscriptRuntime(model_path)
    if backend == "onnx":
        from .onnx_runtime import ONNXRuntime as _ONNXRuntime

        return _ONNXRuntime(model_path)
    raise ModelLoadError(f"Unsupported engine '{engine}'")


def __getattr__(name: str):
    if name == "ONNXRuntime":
        from .onnx_runtime import ONNXRuntime as _ONNXRuntime

        return _ONNXRuntime
    if name == "TorchscriptRuntime":
        from .torchscript import TorchscriptRuntime as _TorchscriptRuntime

        return _TorchscriptRuntime
    raise AttributeError(name)
