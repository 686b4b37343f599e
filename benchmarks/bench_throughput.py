"""Benchmark: classification and engine throughput.

Measures how many identifiers per second the case classifier and the
full compliance engine (resolve, match, suggest) get through, using the
TypeScript preset and a mixed batch of conforming and failing names.
"""
from __future__ import annotations

import json
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import namecheck
from namecheck.engine import ComplianceEngine, IdentifierRecord
from namecheck.presets import PresetLibrary
from namecheck.rules import ConstructKind

_CLASSIFY_ITERATIONS: int = 20_000
_ENGINE_BATCHES: int = 50

_SAMPLE_NAMES = [
    "userId", "UserService", "MAX_RETRIES", "is_active", "HTTPServer",
    "parse-config", "IUserRepository", "v2Api", "user_name", "TValue",
]

_SAMPLE_RECORDS = [
    IdentifierRecord(text="userId", kind=ConstructKind.VARIABLE, language="typescript"),
    IdentifierRecord(text="user_name", kind=ConstructKind.VARIABLE, language="typescript"),
    IdentifierRecord(text="UserService", kind=ConstructKind.CLASS, language="typescript"),
    IdentifierRecord(text="IUserRepository", kind=ConstructKind.INTERFACE, language="typescript"),
    IdentifierRecord(text="is_active", kind=ConstructKind.BOOLEAN_PROPERTY, language="typescript"),
    IdentifierRecord(text="hasAccess", kind=ConstructKind.BOOLEAN_PROPERTY, language="typescript"),
    IdentifierRecord(text="MAX_RETRIES", kind=ConstructKind.CONSTANT, language="typescript"),
    IdentifierRecord(text="fetch_user", kind=ConstructKind.FUNCTION, language="typescript"),
    IdentifierRecord(text="NotFound", kind=ConstructKind.EXCEPTION, language="typescript"),
    IdentifierRecord(text="Value", kind=ConstructKind.TYPE_PARAMETER, language="typescript"),
] * 20


def _result(operation: str, iterations: int, total: float) -> dict[str, object]:
    result: dict[str, object] = {
        "operation": operation,
        "iterations": iterations,
        "total_seconds": round(total, 4),
        "ops_per_second": round(iterations / total, 1),
        "avg_latency_ms": round(total / iterations * 1000, 4),
    }
    print(
        f"[bench_throughput] {result['operation']}: "
        f"{result['ops_per_second']:,.0f} ops/sec  "
        f"avg {result['avg_latency_ms']:.4f} ms"
    )
    return result


def bench_classify_throughput() -> dict[str, object]:
    """Benchmark ``namecheck.classify`` over a fixed set of names.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms.
    """
    names = _SAMPLE_NAMES
    start = time.perf_counter()
    for index in range(_CLASSIFY_ITERATIONS):
        namecheck.classify(names[index % len(names)])
    total = time.perf_counter() - start
    return _result("classify_throughput", _CLASSIFY_ITERATIONS, total)


def bench_engine_throughput(workers: int = 1) -> dict[str, object]:
    """Benchmark identifiers checked per second by ``ComplianceEngine.run``.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms.
    """
    engine = ComplianceEngine(workers=workers)
    engine.load([PresetLibrary().load_document("typescript")])

    start = time.perf_counter()
    for _ in range(_ENGINE_BATCHES):
        engine.run(_SAMPLE_RECORDS)
    total = time.perf_counter() - start
    return _result(
        f"engine_throughput_workers_{workers}",
        _ENGINE_BATCHES * len(_SAMPLE_RECORDS),
        total,
    )


if __name__ == "__main__":
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)

    for bench_fn, fname in [
        (bench_classify_throughput, "classify_throughput_baseline.json"),
        (bench_engine_throughput, "engine_throughput_baseline.json"),
        (lambda: bench_engine_throughput(workers=4), "engine_throughput_4_workers.json"),
    ]:
        result = bench_fn()
        output_path = results_dir / fname
        with open(output_path, "w", encoding="utf-8") as fh:
            json.dump(result, fh, indent=2)
        print(f"Results saved to {output_path}")
