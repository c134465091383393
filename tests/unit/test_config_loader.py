"""Tests covering YAML configuration loading."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from track_classifier.config import (
    DEFAULT_ENGINE,
    DEFAULT_MODEL_PATH,
    InferenceConfig,
    load_inference_config,
)


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "classifier.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_full_profile(tmp_path) -> None:
    path = _write(
        tmp_path,
        """
model:
  path: nets/mlp_default.onnx
  engine: OnnxRuntime
  warmup: true
logging:
  level: debug
""",
    )
    config = load_inference_config(path)
    assert config.model_path == tmp_path / "nets" / "mlp_default.onnx"
    assert config.engine == "OnnxRuntime"
    assert config.warmup is True
    assert config.logging_level() == logging.DEBUG


def test_defaults_apply_when_optional_fields_absent(tmp_path) -> None:
    absolute = tmp_path / "abs" / "model.pt"
    config = load_inference_config(_write(tmp_path, f"model:\n  path: {absolute}\n"))
    assert config.model_path == absolute
    assert config.engine == DEFAULT_ENGINE
    assert config.warmup is False
    assert config.logging_level() == logging.INFO


def test_missing_file_raises(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_inference_config(tmp_path / "missing.yaml")


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("", "'model' mapping"),
        ("model: nets/mlp_default.pt\n", "'model' mapping"),
        ("model:\n  engine: PyTorch\n", "'path'"),
        ("model:\n  path: m.pt\nlogging: verbose\n", "'logging'"),
        ("model:\n  path: m.pt\nlogging:\n  level: LOUD\n", "Unknown logging level"),
    ],
)
def test_invalid_profiles_rejected(tmp_path, text: str, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        load_inference_config(_write(tmp_path, text))


def test_default_config_matches_reference_model() -> None:
    config = InferenceConfig()
    assert config.model_path == DEFAULT_MODEL_PATH == Path("nets/mlp_default.pt")
    assert config.engine == "PyTorch"
