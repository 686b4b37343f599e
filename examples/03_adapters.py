#!/usr/bin/env python3
"""Example: Importing ESLint and clang-tidy naming settings

Translate existing tool configuration into namecheck rule documents.

Usage:
    python examples/03_adapters.py
"""
from __future__ import annotations

import yaml

from namecheck.adapters import get_adapter, list_adapters
from namecheck.engine import ComplianceEngine

ESLINT_CONFIG = {
    "rules": {
        "@typescript-eslint/naming-convention": [
            "error",
            {"selector": "default", "format": ["camelCase"]},
            {"selector": "typeLike", "format": ["PascalCase"]},
            {"selector": "variable", "modifiers": ["const"], "format": ["UPPER_CASE", "camelCase"]},
        ]
    }
}

CLANG_TIDY_CONFIG = {
    "CheckOptions": [
        {"key": "readability-identifier-naming.ClassCase", "value": "CamelCase"},
        {"key": "readability-identifier-naming.PrivateMemberCase", "value": "lower_case"},
        {"key": "readability-identifier-naming.PrivateMemberSuffix", "value": "_"},
    ]
}


def main() -> None:
    print("Adapters:", ", ".join(list_adapters()))

    eslint_doc = get_adapter("eslint").translate(ESLINT_CONFIG, origin=".eslintrc.json")
    tidy_doc = get_adapter("clang-tidy").translate(CLANG_TIDY_CONFIG, origin=".clang-tidy")
    print(yaml.dump(eslint_doc, default_flow_style=False, sort_keys=False))

    report = ComplianceEngine().check(
        [eslint_doc, tidy_doc],
        [
            {"text": "user_service", "kind": "class", "language": "typescript"},
            {"text": "maxRetries", "kind": "constant", "language": "typescript"},
            {"text": "count", "kind": "privateField", "language": "cpp"},
        ],
    )
    for violation in report.violations:
        print(violation)


if __name__ == "__main__":
    main()
