"""Unit tests for namecheck.engine: records, the compliance engine and its report."""
from __future__ import annotations

import logging
from typing import Any

import pytest

from namecheck.engine import (
    ComplianceEngine,
    ComplianceReport,
    EngineState,
    IdentifierRecord,
    InvalidRecordError,
    RunStatus,
    SourceLocation,
    check_identifiers,
)
from namecheck.matcher import ReasonCode
from namecheck.report import ReportSerializer
from namecheck.rules import (
    AmbiguousRuleError,
    ConstructKind,
    MalformedRuleError,
    NamingRule,
    RuleSource,
    Scope,
    Severity,
)


def _records(language: str = "typescript") -> list[dict[str, Any]]:
    return [
        {"text": "first_name", "kind": "variable", "language": language, "file": "a.ts", "line": 3},
        {"text": "IUserRepository", "kind": "interface", "language": language},
        {"text": "UserNotFoundException", "kind": "exception", "language": language},
        {"text": "is_active", "kind": "booleanProperty", "language": language},
        {"text": "userName", "kind": "variable", "language": language},
    ]


# ===========================================================================
# IdentifierRecord
# ===========================================================================


class TestIdentifierRecord:
    def test_from_dict_flat_location(self) -> None:
        record = IdentifierRecord.from_dict(
            {"text": "m_count", "kind": "private_field", "language": "CPP", "file": "a.cpp", "line": "7"}
        )
        assert record.kind is ConstructKind.PRIVATE_FIELD
        assert record.language == "cpp"
        assert record.location == SourceLocation(file="a.cpp", line=7)
        assert str(record.location) == "a.cpp:7"

    def test_from_dict_nested_location_and_scope(self) -> None:
        record = IdentifierRecord.from_dict({
            "text": "user_id",
            "constructKind": "foreignKey",
            "scope": {"table": "orders"},
            "location": {"file": "schema.sql", "line": 12, "column": 5},
        })
        assert record.scope == Scope.of(table="orders")
        assert str(record.location) == "schema.sql:12:5"

    def test_unknown_location(self) -> None:
        assert str(SourceLocation()) == "<unknown>"

    @pytest.mark.parametrize(
        "data, fragment",
        [
            ({"kind": "variable"}, "no identifier text"),
            ({"text": "", "kind": "variable"}, "no identifier text"),
            ({"text": "x"}, "no construct kind"),
            ({"text": "x", "kind": "widget"}, "Unknown construct kind"),
            ({"text": "x", "kind": "variable", "scope": ["class"]}, "scope must be a mapping"),
            ({"text": "x", "kind": "variable", "line": "ten"}, "expected an integer"),
            ("x", "must be a mapping"),
        ],
    )
    def test_invalid(self, data: Any, fragment: str) -> None:
        with pytest.raises(InvalidRecordError, match=fragment):
            IdentifierRecord.from_dict(data)

    def test_as_dict(self) -> None:
        record = IdentifierRecord("userId", ConstructKind.VARIABLE, language="ts")
        assert record.as_dict()["kind"] == "variable"
        assert record.as_dict()["location"] == {"file": None, "line": None, "column": None}


# ===========================================================================
# ComplianceEngine
# ===========================================================================


class TestComplianceEngine:
    def test_initial_state(self) -> None:
        engine = ComplianceEngine()
        assert engine.state is EngineState.IDLE
        assert len(engine.rule_set) == 0
        assert engine.workers == 1

    def test_workers_must_be_positive(self) -> None:
        with pytest.raises(ValueError, match="workers"):
            ComplianceEngine(workers=0)

    def test_run_reports_violations_in_order(self, mixed_document: dict[str, Any]) -> None:
        engine = ComplianceEngine()
        engine.load([mixed_document])
        report = engine.run(_records())

        assert report.status is RunStatus.VIOLATIONS
        assert [v.record.text for v in report.violations] == ["first_name", "IUserRepository", "is_active"]
        assert [v.sequence for v in report.violations] == [0, 1, 3]
        first, interface, boolean = report.violations
        assert first.reason is ReasonCode.WRONG_CASING
        assert first.suggestions == ("firstName",)
        assert interface.reason is ReasonCode.FORBIDDEN_PATTERN
        assert interface.suggestions == ()
        assert boolean.suggestions == ("isActive",)
        assert boolean.severity is Severity.WARNING

    def test_summary(self, mixed_document: dict[str, Any]) -> None:
        engine = ComplianceEngine()
        engine.load([mixed_document])
        summary = engine.run(_records()).summary
        assert summary.total_checked == 5
        assert summary.total_violations == 3
        assert summary.by_reason_code == {ReasonCode.FORBIDDEN_PATTERN: 1, ReasonCode.WRONG_CASING: 2}
        assert list(summary.by_reason_code) == [ReasonCode.FORBIDDEN_PATTERN, ReasonCode.WRONG_CASING]

    def test_exit_codes(self, mixed_document: dict[str, Any]) -> None:
        engine = ComplianceEngine()
        engine.load([mixed_document])
        report = engine.run(_records())
        assert report.error_count == 2
        assert report.warning_count == 1
        assert report.exit_code == 1

        warnings_only = engine.run([{"text": "is_active", "kind": "booleanProperty", "language": "typescript"}])
        assert warnings_only.exit_code == 0
        assert not warnings_only

    def test_state_returns_to_idle(self, mixed_document: dict[str, Any]) -> None:
        engine = ComplianceEngine()
        engine.load([mixed_document])
        assert engine.state is EngineState.IDLE
        engine.run(_records())
        assert engine.state is EngineState.IDLE

    def test_record_objects_are_accepted(self) -> None:
        engine = ComplianceEngine()
        engine.load([{"rules": [{"name": "var", "kinds": ["variable"], "casing": "camelCase"}]}])
        report = engine.run([IdentifierRecord("first_name", ConstructKind.VARIABLE)])
        assert report.summary.total_violations == 1

    def test_unconfigured_kinds_fall_back(self) -> None:
        report = ComplianceEngine().run([
            {"text": "$$$ weird", "kind": "macro", "language": "cpp"},
            {"text": "x", "kind": "table"},
        ])
        assert report.status is RunStatus.CLEAN
        assert bool(report) is True
        assert report.exit_code == 0

    def test_bad_records_are_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        engine = ComplianceEngine()
        engine.load([{"rules": [{"name": "var", "kinds": ["variable"], "casing": "camelCase"}]}])
        records = [
            {"text": "first_name", "kind": "variable"},
            {"text": "", "kind": "variable"},
            {"text": "whatever", "kind": "gizmo"},
            {"text": "lastName", "kind": "variable"},
        ]
        with caplog.at_level(logging.WARNING, logger="namecheck"):
            report = engine.run(records)
        assert report.summary.total_checked == 2
        assert [s.sequence for s in report.skipped] == [1, 2]
        assert "gizmo" in report.skipped[1].reason
        assert "Skipping record #2" in caplog.text

    def test_ready_made_record_without_kind_is_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        engine = ComplianceEngine()
        records = [
            IdentifierRecord(text="fooBar", kind=None),  # type: ignore[arg-type]
            IdentifierRecord(text="bar_baz", kind="variable"),  # type: ignore[arg-type]
            IdentifierRecord(text="quxQuux", kind=ConstructKind.VARIABLE),
        ]
        with caplog.at_level(logging.WARNING, logger="namecheck"):
            report = engine.run(records)
        assert report.status is RunStatus.CLEAN
        assert report.summary.total_checked == 1
        assert [s.sequence for s in report.skipped] == [0, 1]
        assert "no construct kind" in report.skipped[0].reason
        assert "Skipping record #0" in caplog.text

    @pytest.mark.parametrize("workers", [1, 4])
    def test_parallel_run_keeps_input_order(self, workers: int) -> None:
        engine = ComplianceEngine(workers=workers)
        engine.load([{"rules": [{"name": "var", "kinds": ["variable"], "casing": "camelCase"}]}])
        records = [{"text": f"name_{i}", "kind": "variable"} for i in range(200)]
        report = engine.run(records)
        assert [v.sequence for v in report.violations] == list(range(200))
        assert report.violations[17].suggestions == ("name17",)

    def test_parallel_and_serial_reports_serialize_identically(self, mixed_document: dict[str, Any]) -> None:
        serializer = ReportSerializer()
        outputs = set()
        for workers in (1, 3):
            engine = ComplianceEngine(workers=workers)
            engine.load([mixed_document])
            outputs.add(serializer.to_json(engine.run(_records() * 10)))
        assert len(outputs) == 1

    def test_failed_load_keeps_previous_rules(self, mixed_document: dict[str, Any]) -> None:
        engine = ComplianceEngine()
        engine.load([mixed_document])
        with pytest.raises(MalformedRuleError):
            engine.load([{"rules": [{"name": "broken", "casing": "Title Case"}]}])
        assert engine.state is EngineState.IDLE
        assert len(engine.rule_set) == 4

    def test_load_default_layer(self) -> None:
        engine = ComplianceEngine()
        rule_set = engine.load([[{"name": "r", "casing": "camelCase"}]], default_layer=RuleSource.PRESET)
        assert next(iter(rule_set)).source is RuleSource.PRESET


class TestCheck:
    def test_configuration_error_report(self) -> None:
        documents = [
            {"rules": [{"name": "a", "kinds": ["method"], "casing": "camelCase"}]},
            {"rules": [{"name": "b", "kinds": ["method"], "casing": "snake_case"}]},
        ]
        report = ComplianceEngine().check(documents, _records())
        assert report.status is RunStatus.CONFIGURATION_ERROR
        assert report.exit_code == 2
        assert report.violations == ()
        assert report.summary.total_checked == 0
        assert "Ambiguous rule set" in report.errors[0]

    def test_rule_that_cannot_fail_is_a_configuration_error(self) -> None:
        report = ComplianceEngine().check([NamingRule(name="x")], _records())
        assert report.status is RunStatus.CONFIGURATION_ERROR
        assert "accepts every identifier" in report.errors[0]

    def test_load_rejects_rule_that_cannot_fail(self) -> None:
        engine = ComplianceEngine()
        with pytest.raises(MalformedRuleError):
            engine.load([NamingRule(name="x", severity=Severity.WARNING)])
        assert engine.state is EngineState.IDLE

    def test_check_identifiers(self, boolean_property_document: dict[str, Any]) -> None:
        report = check_identifiers(
            [{"text": "is_active", "kind": "booleanProperty", "language": "php"}],
            [boolean_property_document],
        )
        (violation,) = report.violations
        assert violation.reason is ReasonCode.WRONG_CASING
        assert violation.suggestions == ("isActive",)
        assert violation.rule.name == "boolean-property"

    def test_check_identifiers_without_rules(self) -> None:
        report = check_identifiers([{"text": "anything_Goes", "kind": "class"}])
        assert report.status is RunStatus.CLEAN

    def test_configuration_error_factory(self) -> None:
        report = ComplianceReport.configuration_error("one", "two")
        assert report.errors == ("one", "two")
        assert report.exit_code == 2


class TestLayeredScenarios:
    def test_project_rule_overrides_preset(self) -> None:
        preset = {
            "layer": "preset",
            "language": "cpp",
            "rules": [{"name": "preset-private", "kinds": ["privateField"], "casing": "snake_case", "suffix": "_"}],
        }
        project = {
            "layer": "project",
            "language": "cpp",
            "rules": [{"name": "project-private", "kinds": ["privateField"], "casing": "camelCase", "prefix": "m_"}],
        }
        engine = ComplianceEngine()
        engine.load([preset, project])
        report = engine.run([
            {"text": "m_count", "kind": "privateField", "language": "cpp"},
            {"text": "count_", "kind": "privateField", "language": "cpp"},
        ])
        (violation,) = report.violations
        assert violation.record.text == "count_"
        assert violation.rule.name == "project-private"

    def test_ambiguity_at_run_time_aborts(self) -> None:
        engine = ComplianceEngine()
        engine.load([{"rules": [{"name": "a", "kinds": ["method"], "casing": "camelCase"}]}])
        # bypass RuleSet validation to simulate a tie reaching the resolver
        engine.resolver._rule_set = [  # type: ignore[assignment]
            *engine.rule_set,
            *engine.rule_set,
        ]
        with pytest.raises(AmbiguousRuleError):
            engine.run([{"text": "doThing", "kind": "method"}])
        assert engine.state is EngineState.IDLE
