"""Tests exercising the ONNX runtime."""

from __future__ import annotations

import numpy as np
import pytest

from track_classifier.runtimes import ModelLoadError
from track_classifier.runtimes import onnx_runtime
from track_classifier.runtimes.onnx_runtime import ONNXRuntime


def test_missing_artifact_raises_model_load_error(tmp_path) -> None:
    with pytest.raises(ModelLoadError, match="not found"):
        ONNXRuntime(tmp_path / "mlp_default.onnx").load()


def test_missing_onnxruntime_raises_model_load_error(tmp_path, monkeypatch) -> None:
    artifact = tmp_path / "mlp_default.onnx"
    artifact.write_bytes(b"graph")
    monkeypatch.setattr(onnx_runtime, "ort", None)
    with pytest.raises(ModelLoadError, match="onnxruntime is required"):
        ONNXRuntime(artifact).load()


def test_malformed_artifact_raises_model_load_error(tmp_path) -> None:
    pytest.importorskip("onnxruntime")
    artifact = tmp_path / "broken.onnx"
    artifact.write_bytes(b"not an onnx graph")
    runtime = ONNXRuntime(artifact)
    with pytest.raises(ModelLoadError, match="Malformed"):
        runtime.load()
    assert not runtime.is_loaded


def _write_logistic_graph(path, weights: np.ndarray, bias: float) -> None:
    onnx = pytest.importorskip("onnx")
    from onnx import TensorProto, helper, numpy_helper

    graph = helper.make_graph(
        [
            helper.make_node("MatMul", ["features", "W"], ["z"]),
            helper.make_node("Add", ["z", "B"], ["logit"]),
            helper.make_node("Sigmoid", ["logit"], ["probability"]),
        ],
        "track_mlp",
        [helper.make_tensor_value_info("features", TensorProto.FLOAT, [1, 11])],
        [helper.make_tensor_value_info("probability", TensorProto.FLOAT, [1, 1])],
        initializer=[
            numpy_helper.from_array(weights.reshape(11, 1), "W"),
            numpy_helper.from_array(np.array([bias], dtype=np.float32), "B"),
        ],
    )
    model = helper.make_model(graph, opset_imports=[helper.make_opsetid("", 13)])
    model.ir_version = 8
    onnx.checker.check_model(model)
    path.write_bytes(model.SerializeToString())


def test_logistic_graph_runs_single_sample(tmp_path) -> None:
    pytest.importorskip("onnxruntime")
    weights = np.linspace(-0.5, 0.5, 11, dtype=np.float32)
    artifact = tmp_path / "mlp_default.onnx"
    _write_logistic_graph(artifact, weights, bias=0.1)
    payload = np.full((1, 11), 0.25, dtype=np.float32)
    with ONNXRuntime(artifact) as runtime:
        output = runtime.forward(payload)
    expected = 1.0 / (1.0 + np.exp(-(payload @ weights.reshape(11, 1) + 0.1)))
    assert output.shape == (1, 1)
    np.testing.assert_allclose(output, expected, rtol=1e-5)
