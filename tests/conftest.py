"""Pytest configuration ensuring the project src directory is importable."""

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

EXAMPLE_FEATURES = [
    21.75, 19.0, 18.4286, 15.3333, 14.5,
    -0.2316, -0.2478, -0.2987, -0.3164, -0.2833,
    1.0,
]


@pytest.fixture
def example_features() -> list[float]:
    """Raw features of a genuine track candidate missing a superlayer 1 cluster."""
    return list(EXAMPLE_FEATURES)


@pytest.fixture
def torchscript_model(tmp_path: Path) -> Path:
    """Save a small seeded MLP as TorchScript and return its path."""
    torch = pytest.importorskip("torch")
    torch.manual_seed(7)
    model = torch.nn.Sequential(
        torch.nn.Linear(11, 8),
        torch.nn.ReLU(),
        torch.nn.Linear(8, 1),
        torch.nn.Sigmoid(),
    ).eval()
    path = tmp_path / "mlp_default.pt"
    torch.jit.script(model).save(str(path))
    return path
