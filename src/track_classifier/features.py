"""Feature vectors consumed by the track classifier MLP."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping

FEATURE_COUNT = 11
AVG_WIRE_SLOTS = range(0, 5)
SLOPE_SLOTS = range(5, 10)
MISSING_SUPERLAYER_SLOT = 10

# Wires per layer and superlayers per sector in the drift chambers the
# model was trained on.
AVG_WIRE_SCALE = 112.0
SUPERLAYER_SCALE = 6.0

FEATURE_NAMES: tuple[str, ...] = (
    *(f"avg_wire_{i}" for i in AVG_WIRE_SLOTS),
    *(f"slope_{i - SLOPE_SLOTS.start}" for i in SLOPE_SLOTS),
    "missing_superlayer",
)


class InvalidInputError(ValueError):
    """Raised when raw features cannot form a valid feature vector."""


def normalize(raw: Iterable[float]) -> tuple[float, ...]:
    """Scale raw features into the numeric domain used during training.

    Args:
        raw: Ordered raw features. Must hold exactly :data:`FEATURE_COUNT`
            values.

    Returns:
        tuple[float, ...]: Average wire positions divided by
        :data:`AVG_WIRE_SCALE`, slopes unchanged, and the missing superlayer
        divided by :data:`SUPERLAYER_SCALE`.
    """
    values = _coerce(raw)
    normalized = list(values)
    for idx in AVG_WIRE_SLOTS:
        normalized[idx] = values[idx] / AVG_WIRE_SCALE
    normalized[MISSING_SUPERLAYER_SLOT] = values[MISSING_SUPERLAYER_SLOT] / SUPERLAYER_SCALE
    return tuple(normalized)


def _coerce(raw: Iterable[float]) -> tuple[float, ...]:
    if isinstance(raw, (str, bytes)):
        raise InvalidInputError("Features must be a sequence of numbers, not a string")
    try:
        values = tuple(float(value) for value in raw)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"Features must be real numbers: {exc}") from exc
    if len(values) != FEATURE_COUNT:
        raise InvalidInputError(f"Expected {FEATURE_COUNT} features, got {len(values)}")
    return values


@dataclass(frozen=True, slots=True)
class FeatureVector:
    """One validated, normalised track sample.

    Args:
        raw: Eleven raw measurements ordered as in :data:`FEATURE_NAMES`.
            NaN and infinite values are not rejected.

    Raises:
        InvalidInputError: When ``raw`` does not hold exactly eleven numbers.
    """

    raw: tuple[float, ...]
    normalized: tuple[float, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        values = _coerce(self.raw)
        object.__setattr__(self, "raw", values)
        object.__setattr__(self, "normalized", normalize(values))

    @classmethod
    def from_mapping(cls, features: Mapping[str, float]) -> "FeatureVector":
        """Build a vector from features keyed by :data:`FEATURE_NAMES`."""
        missing = [name for name in FEATURE_NAMES if name not in features]
        if missing:
            raise InvalidInputError("Missing features: " + ", ".join(missing))
        return cls(tuple(features[name] for name in FEATURE_NAMES))

    def as_dict(self) -> dict[str, float]:
        """Return the normalised features keyed by name."""
        return dict(zip(FEATURE_NAMES, self.normalized))
