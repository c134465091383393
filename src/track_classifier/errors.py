"""Exceptions raised while preparing or running a track prediction."""

from __future__ import annotations


class InferenceFailure(RuntimeError):  # noqa: N818
    """Raised when a prediction cannot be produced."""


class MalformedOutputError(InferenceFailure):
    """Raised when runtime output cannot be read as a single scalar."""


class ModelLoadError(InferenceFailure):
    """Raised when a model artifact cannot be loaded by a runtime."""
