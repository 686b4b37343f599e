#!/usr/bin/env python3
"""Example: Presets, layered rules and reports

Load the built-in C++ preset, override one rule at the project layer,
run the engine on a thread pool and serialize the report.

Usage:
    python examples/02_presets_and_reports.py
"""
from __future__ import annotations

from namecheck.engine import ComplianceEngine
from namecheck.presets import PresetLibrary
from namecheck.report import ReportSerializer

PROJECT_RULES = {
    "layer": "project",
    "language": "cpp",
    "rules": [
        {
            "name": "house-private-field",
            "kinds": ["privateField"],
            "casing": ["snake_case", "camelCase"],
            "prefix": "m_",
        }
    ],
}

RECORDS = [
    {"text": "m_count", "kind": "privateField", "language": "cpp", "file": "counter.h", "line": 12},
    {"text": "count_", "kind": "privateField", "language": "cpp", "file": "counter.h", "line": 13},
    {"text": "HttpClient", "kind": "class", "language": "cpp", "file": "http.h", "line": 3},
    {"text": "__reserved", "kind": "variable", "language": "cpp", "file": "http.cc", "line": 40},
    {"text": "MAX_SIZE", "kind": "constant", "language": "cpp", "file": "http.cc", "line": 5},
    {"text": "", "kind": "variable", "language": "cpp"},
]


def main() -> None:
    library = PresetLibrary()
    print("Presets:", ", ".join(library.list_names()))

    engine = ComplianceEngine(workers=4)
    engine.load([library.load_document("cpp"), PROJECT_RULES])
    report = engine.run(RECORDS)

    print(f"Status: {report.status.value} (exit code {report.exit_code})")
    for violation in report.violations:
        print(f"  {violation}")
    for skipped in report.skipped:
        print(f"  skipped #{skipped.sequence}: {skipped.reason}")

    print("\nYAML report:")
    print(ReportSerializer(include_rules=False).to_yaml(report))


if __name__ == "__main__":
    main()
