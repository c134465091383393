"""Mock runtime for adapter and classifier unit tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List

import numpy as np

from .base import ModelRuntime


@dataclass
class MockRuntime(ModelRuntime):
    """Return a fixed output for every payload and record what it received."""

    output: Any = 0.5
    fail_with: BaseException | None = None
    payloads: List[np.ndarray] = field(default_factory=list)

    engine = "Mock"

    def __post_init__(self) -> None:
        ModelRuntime.__init__(self)

    def _load(self) -> None:
        return None

    def _forward(self, payload: np.ndarray) -> np.ndarray:
        self.payloads.append(payload.copy())
        if self.fail_with is not None:
            raise self.fail_with
        if np.ndim(self.output) == 0:
            return np.array([[self.output]], dtype=np.float64)
        return np.asarray(self.output)

    @property
    def call_count(self) -> int:
        """Return the number of forward passes executed."""
        return len(self.payloads)
