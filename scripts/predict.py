"""Command line helper predicting the probability of a single track candidate."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

# Ensure local sources are importable without installation
REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = REPO_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

import yaml  # noqa: E402

from track_classifier import (  # noqa: E402
    InvalidInputError,
    ModelLoadError,
    TrackClassifier,
)
from track_classifier.config import InferenceConfig, load_inference_config  # noqa: E402

LOGGER = logging.getLogger("track_classifier.scripts.predict")

DEFAULT_CONFIG_PATH = Path(__file__).with_name("track_classifier.yaml")
EXAMPLE_FEATURES = (
    21.75, 19.0, 18.4286, 15.3333, 14.5,
    -0.2316, -0.2478, -0.2987, -0.3164, -0.2833,
    1.0,
)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for the prediction helper."""
    parser = argparse.ArgumentParser(description="Predict the probability that a track is genuine")
    parser.add_argument(
        "--config",
        type=Path,
        default=DEFAULT_CONFIG_PATH,
        help="Path to the classifier configuration YAML",
    )
    parser.add_argument(
        "--model",
        type=Path,
        default=None,
        help="Override the model artifact path from the configuration",
    )
    parser.add_argument(
        "--engine",
        type=str,
        default=None,
        help="Override the runtime engine (PyTorch or OnnxRuntime)",
    )
    parser.add_argument(
        "--features",
        type=float,
        nargs="+",
        default=list(EXAMPLE_FEATURES),
        help="Eleven raw features: 5 average wires, 5 slopes, missing superlayer",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def _configure_logging(level: int) -> None:
    logging.basicConfig(level=level, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    logging.getLogger("torch").setLevel(max(level, logging.WARNING))


def _resolve_config(args: argparse.Namespace) -> InferenceConfig:
    if args.config.exists() or args.config != DEFAULT_CONFIG_PATH:
        config = load_inference_config(args.config)
    else:
        config = InferenceConfig()
    if args.model is not None:
        config.model_path = args.model.expanduser()
    if args.engine is not None:
        config.engine = args.engine
    return config


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the prediction CLI."""
    args = parse_args(argv)
    try:
        config = _resolve_config(args)
    except FileNotFoundError as exc:
        _configure_logging(logging.INFO)
        LOGGER.error("Configuration file not found: %s", exc)
        return 1
    except (ValueError, yaml.YAMLError) as exc:
        _configure_logging(logging.INFO)
        LOGGER.error("Invalid configuration: %s", exc)
        return 1
    _configure_logging(logging.DEBUG if args.verbose else config.logging_level())

    try:
        with TrackClassifier.from_config(config) as classifier:
            probability = classifier.predict(args.features)
    except InvalidInputError as exc:
        LOGGER.error("Invalid features: %s", exc)
        return 1
    except ModelLoadError as exc:
        LOGGER.error("Model could not be loaded: %s", exc)
        return 1
    except Exception:
        LOGGER.exception("Track prediction failed")
        return 2

    LOGGER.info("Predicted track probability: %.4f", probability)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
