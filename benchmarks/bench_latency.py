"""Benchmark: per-identifier match and suggest latency (p50/p95/mean)."""
from __future__ import annotations

import json
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import namecheck

_WARMUP: int = 200
_ITERATIONS: int = 3_000

_RULE_DOCUMENT = {
    "language": "typescript",
    "rules": [
        {
            "name": "boolean-property",
            "kinds": ["booleanProperty"],
            "casing": ["camelCase"],
            "prefix": ["is", "has", "can"],
        }
    ],
}


def bench_match_suggest_latency() -> dict[str, object]:
    """Benchmark match plus suggest on a failing boolean property name.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms, p50_ms, p95_ms.
    """
    rule = namecheck.load_rules(_RULE_DOCUMENT)[0]

    for _ in range(_WARMUP):
        namecheck.suggest("is_active", rule)

    latencies_ms: list[float] = []
    for _ in range(_ITERATIONS):
        t0 = time.perf_counter()
        if not namecheck.match("is_active", rule).passed:
            namecheck.suggest("is_active", rule)
        latencies_ms.append((time.perf_counter() - t0) * 1000)

    sorted_lats = sorted(latencies_ms)
    n = len(sorted_lats)
    total = sum(latencies_ms) / 1000

    result: dict[str, object] = {
        "operation": "match_suggest_latency",
        "iterations": _ITERATIONS,
        "total_seconds": round(total, 4),
        "ops_per_second": round(_ITERATIONS / total, 1),
        "avg_latency_ms": round(sum(latencies_ms) / n, 4),
        "p50_ms": round(sorted_lats[int(n * 0.50)], 4),
        "p95_ms": round(sorted_lats[min(int(n * 0.95), n - 1)], 4),
    }
    print(
        f"[bench_latency] {result['operation']}: "
        f"p50={result['p50_ms']:.4f}ms  p95={result['p95_ms']:.4f}ms  "
        f"mean={result['avg_latency_ms']:.4f}ms"
    )
    return result


if __name__ == "__main__":
    result = bench_match_suggest_latency()
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)
    output_path = results_dir / "latency_baseline.json"
    with open(output_path, "w", encoding="utf-8") as fh:
        json.dump(result, fh, indent=2)
    print(f"Results saved to {output_path}")
