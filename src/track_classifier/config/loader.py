"""Load track classifier configuration from YAML files."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import yaml

from .models import DEFAULT_ENGINE, InferenceConfig


def load_inference_config(path: str | Path) -> InferenceConfig:
    """Parse a YAML file describing the model to load.

    Args:
        path: Filesystem path to the configuration YAML file.

    Returns:
        InferenceConfig: Parsed configuration. Relative model paths are
        resolved against the directory containing the YAML file.

    Raises:
        FileNotFoundError: If the configuration path does not exist.
        ValueError: When required sections or fields are missing.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(config_path)
    with config_path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle) or {}
    if not isinstance(raw, Mapping):
        raise ValueError("Configuration YAML must be a mapping")

    model_section = raw.get("model")
    if not isinstance(model_section, Mapping):
        raise ValueError("Configuration YAML missing top-level 'model' mapping")
    model_path_raw = model_section.get("path")
    if not model_path_raw:
        raise ValueError("'model' mapping must include a 'path' entry")
    model_path = Path(str(model_path_raw)).expanduser()
    if not model_path.is_absolute():
        model_path = config_path.parent / model_path

    logging_section: Any = raw.get("logging", {}) or {}
    if not isinstance(logging_section, Mapping):
        raise ValueError("'logging' section must be a mapping")

    config = InferenceConfig(
        model_path=model_path,
        engine=str(model_section.get("engine", DEFAULT_ENGINE)),
        warmup=bool(model_section.get("warmup", False)),
        log_level=str(logging_section.get("level", "INFO")),
    )
    config.logging_level()
    return config
