"""Report serialization to plain data, JSON and YAML.

The serialized form is a plain dict/list structure that maps naturally
to both formats.  Output is deterministic: the same report always
serializes to the same bytes, so two runs over the same input can be
compared with ``diff``.

Usage
-----
::

    from namecheck.report import ReportSerializer

    serializer = ReportSerializer()
    print(serializer.to_json(report))
"""
from __future__ import annotations

import json
from typing import Any

import yaml

from namecheck.engine.report import ComplianceReport, SkippedRecord, Summary, Violation
from namecheck.rules.model import NamingRule


class ReportSerializer:
    """Converts ``ComplianceReport`` objects to dicts, JSON and YAML.

    Parameters
    ----------
    include_rules:
        If ``True`` (default), each violation carries a description of
        the effective rule, not just its name.
    """

    def __init__(self, include_rules: bool = True) -> None:
        self._include_rules = include_rules

    # ------------------------------------------------------------------
    # Dict helpers
    # ------------------------------------------------------------------

    def _rule_to_dict(self, rule: NamingRule) -> dict[str, Any]:
        data: dict[str, Any] = {
            "name": rule.name,
            "source": rule.source.value,
            "severity": rule.severity.value,
        }
        if self._include_rules:
            data["casing"] = [c.value for c in rule.allowed_casings]
            if rule.prefix is not None:
                data["prefix"] = rule.prefix.describe()
            if rule.suffix is not None:
                data["suffix"] = rule.suffix.describe()
            if rule.pattern is not None:
                data["pattern"] = rule.pattern.pattern
        return data

    def _violation_to_dict(self, violation: Violation) -> dict[str, Any]:
        return {
            "sequence": violation.sequence,
            "text": violation.record.text,
            "kind": violation.record.kind.value,
            "language": violation.record.language,
            "scope": violation.record.scope.as_dict(),
            "location": violation.record.location.as_dict(),
            "reason": violation.reason.value,
            "severity": violation.severity.value,
            "detail": violation.detail,
            "suggestions": list(violation.suggestions),
            "rule": self._rule_to_dict(violation.rule),
        }

    def _summary_to_dict(self, summary: Summary) -> dict[str, Any]:
        return {
            "total_checked": summary.total_checked,
            "total_violations": summary.total_violations,
            "by_reason_code": {
                code.value: count for code, count in summary.by_reason_code.items()
            },
        }

    def _skipped_to_dict(self, skipped: SkippedRecord) -> dict[str, Any]:
        return {"sequence": skipped.sequence, "reason": skipped.reason}

    def to_dict(self, report: ComplianceReport) -> dict[str, Any]:
        """Convert ``report`` to a plain dict."""
        return {
            "status": report.status.value,
            "exit_code": report.exit_code,
            "summary": self._summary_to_dict(report.summary),
            "violations": [self._violation_to_dict(v) for v in report.violations],
            "skipped": [self._skipped_to_dict(s) for s in report.skipped],
            "errors": list(report.errors),
        }

    # ------------------------------------------------------------------
    # JSON / YAML
    # ------------------------------------------------------------------

    def to_json(self, report: ComplianceReport, indent: int = 2) -> str:
        """Serialize ``report`` to a JSON string."""
        return json.dumps(self.to_dict(report), indent=indent, ensure_ascii=False)

    def to_yaml(self, report: ComplianceReport) -> str:
        """Serialize ``report`` to a YAML string."""
        return yaml.dump(self.to_dict(report), default_flow_style=False, allow_unicode=True)
