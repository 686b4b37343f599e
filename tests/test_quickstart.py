"""Test that the quickstart API works for namecheck."""
from __future__ import annotations

from typing import Any


def test_quickstart_import() -> None:
    import namecheck

    assert callable(namecheck.classify)
    assert callable(namecheck.check)


def test_quickstart_version(expected_version: str) -> None:
    import namecheck

    assert namecheck.__version__ == expected_version


def test_quickstart_classify() -> None:
    import namecheck

    assert namecheck.classify("userId") == frozenset({namecheck.CasingStyle.CAMEL_CASE})
    assert namecheck.classify("user_Id") == frozenset()


def test_quickstart_transform() -> None:
    import namecheck

    assert namecheck.transform("userId", None, namecheck.CasingStyle.SNAKE_CASE) == "user_id"


def test_quickstart_match_and_suggest(boolean_property_document: dict[str, Any]) -> None:
    import namecheck

    rules = namecheck.load_rules(boolean_property_document)
    assert len(rules) == 1
    assert not namecheck.match("is_active", rules[0]).passed
    assert namecheck.match("isActive", rules[0]).passed
    assert namecheck.suggest("is_active", rules[0]) == ["isActive"]


def test_quickstart_check(boolean_property_document: dict[str, Any]) -> None:
    import namecheck

    rules = namecheck.load_rules(boolean_property_document)
    report = namecheck.check(
        [
            {"text": "is_active", "kind": "booleanProperty", "language": "php"},
            {"text": "hasChildren", "kind": "booleanProperty", "language": "php"},
        ],
        rules,
    )
    assert report.summary.total_checked == 2
    assert report.summary.total_violations == 1
    assert report.exit_code == 1


def test_quickstart_check_reports_bad_rules() -> None:
    import namecheck

    report = namecheck.check([{"text": "x", "kind": "variable"}], [{"rules": [{"name": "r", "casing": "nope"}]}])
    assert report.exit_code == 2
    assert report.errors
