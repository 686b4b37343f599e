#!/usr/bin/env python3
"""Example: Quickstart for namecheck

Minimal working example: classify identifiers, re-case one, check a
name against a rule and ask for a fix.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install namecheck
"""
from __future__ import annotations

import namecheck
from namecheck import CasingStyle

RULES = {
    "language": "typescript",
    "rules": [
        {
            "name": "boolean-property",
            "kinds": ["booleanProperty"],
            "casing": ["camelCase"],
            "prefix": ["is", "has", "can"],
        },
        {
            "name": "interface",
            "kinds": ["interface"],
            "casing": ["PascalCase"],
            "forbidden": ["^I[A-Z]"],
        },
    ],
}


def main() -> None:
    print(f"namecheck version: {namecheck.__version__}")

    # Step 1: Classify a few identifiers
    for text in ["userId", "user_id", "HTTPServer", "count", "user-Name"]:
        styles = sorted(s.value for s in namecheck.classify(text)) or ["(none)"]
        print(f"  {text:<12} -> {', '.join(styles)}")

    # Step 2: Re-case an identifier
    print(f"\nuserId as snake_case: {namecheck.transform('userId', None, CasingStyle.SNAKE_CASE)}")

    # Step 3: Match against a rule and suggest a fix
    boolean_rule, interface_rule = namecheck.load_rules(RULES)
    result = namecheck.match("is_active", boolean_rule)
    print(f"\nis_active: passed={result.passed} reason={result.reason.value if result.reason else None}")
    print(f"  suggestions: {namecheck.suggest('is_active', boolean_rule)}")

    result = namecheck.match("IUserRepository", interface_rule)
    print(f"IUserRepository: passed={result.passed} reason={result.reason.value if result.reason else None}")
    print(f"  suggestions: {namecheck.suggest('IUserRepository', interface_rule)}")

    # Step 4: Check a batch of identifiers
    report = namecheck.check(
        [
            {"text": "is_active", "kind": "booleanProperty", "language": "typescript"},
            {"text": "hasAccess", "kind": "booleanProperty", "language": "typescript"},
            {"text": "IUserRepository", "kind": "interface", "language": "typescript"},
        ],
        [RULES],
    )
    print(f"\nChecked {report.summary.total_checked}, violations: {report.summary.total_violations}")
    for violation in report.violations:
        print(f"  {violation}")


if __name__ == "__main__":
    main()
