"""Configuration models for track classifier sessions."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

DEFAULT_MODEL_PATH = Path("nets/mlp_default.pt")
DEFAULT_ENGINE = "PyTorch"


@dataclass(slots=True)
class InferenceConfig:
    """Declarative description of the model a session should load.

    Args:
        model_path: Path to the serialized model artifact.
        engine: Runtime engine identifier passed to ``load_runtime``.
        warmup: Run one zero-valued forward pass after loading.
        log_level: Logging level name applied by command line entry points.
    """

    model_path: Path = DEFAULT_MODEL_PATH
    engine: str = DEFAULT_ENGINE
    warmup: bool = False
    log_level: str = "INFO"

    def logging_level(self) -> int:
        """Return the numeric logging level for :attr:`log_level`."""
        level = logging.getLevelName(self.log_level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown logging level '{self.log_level}'")
        return level
