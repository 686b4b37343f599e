"""Structural tests for the namecheck benchmark modules."""
from __future__ import annotations

import importlib
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent.parent / "benchmarks"))


def test_bench_throughput_importable() -> None:
    """Verify bench_throughput module can be imported."""
    mod = importlib.import_module("bench_throughput")
    assert hasattr(mod, "bench_classify_throughput")
    assert hasattr(mod, "bench_engine_throughput")


def test_bench_latency_importable() -> None:
    """Verify bench_latency module can be imported."""
    mod = importlib.import_module("bench_latency")
    assert hasattr(mod, "bench_match_suggest_latency")


def test_classify_throughput_returns_expected_keys() -> None:
    from bench_throughput import bench_classify_throughput

    result = bench_classify_throughput()
    assert result["operation"] == "classify_throughput"
    for key in ("iterations", "total_seconds", "ops_per_second", "avg_latency_ms"):
        assert key in result
    assert float(result["ops_per_second"]) > 0  # type: ignore[arg-type]


def test_engine_throughput_with_workers() -> None:
    from bench_throughput import bench_engine_throughput

    result = bench_engine_throughput(workers=2)
    assert result["operation"] == "engine_throughput_workers_2"
    assert int(result["iterations"]) > 0  # type: ignore[call-overload]


def test_match_suggest_latency_percentiles() -> None:
    """Verify the latency benchmark reports ordered percentiles."""
    from bench_latency import bench_match_suggest_latency

    result = bench_match_suggest_latency()
    assert "avg_latency_ms" in result
    assert float(result["p50_ms"]) <= float(result["p95_ms"])  # type: ignore[arg-type]
