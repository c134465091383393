"""TorchScript model runtime."""

from __future__ import annotations

import numpy as np
import torch

from .base import ModelLoadError, ModelRuntime


class TorchscriptRuntime(ModelRuntime):
    """Runtime executing a TorchScript module on the CPU."""

    engine = "PyTorch"

    def __init__(self, model_path, *, device: str = "cpu") -> None:
        """Prepare a TorchScript runtime.

        Args:
            model_path: Path to a module saved with ``torch.jit.save``.
            device: Torch device used for the forward pass.
        """
        super().__init__(model_path)
        self._device = torch.device(device)
        self._module: torch.jit.ScriptModule | None = None

    def _load(self) -> None:
        path = self._artifact()
        try:
            module = torch.jit.load(str(path), map_location=self._device)
        except (RuntimeError, ValueError) as exc:
            raise ModelLoadError(f"Malformed TorchScript artifact {path}: {exc}") from exc
        module.eval()
        self._module = module

    def _forward(self, payload: np.ndarray) -> np.ndarray:
        tensor = torch.from_numpy(payload).to(self._device)
        with torch.inference_mode():
            output = self._module(tensor)
        if isinstance(output, (tuple, list)):
            output = output[0]
        return output.detach().cpu().numpy()

    def _release(self) -> None:
        self._module = None
