"""Report model: violations and the per-run compliance report.

The engine never formats text; consumers (the CLI, editor integrations,
:class:`namecheck.report.ReportSerializer`) read these structures only.
"""
from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from namecheck.engine.records import IdentifierRecord
from namecheck.matcher.matcher import ReasonCode
from namecheck.rules.model import NamingRule, Severity


class RunStatus(Enum):
    """Outcome of a run, distinguishing "nothing to fix" from "could not run"."""

    CLEAN = "clean"
    VIOLATIONS = "violations"
    CONFIGURATION_ERROR = "configurationError"


@dataclass(frozen=True)
class Violation:
    """One identifier that failed its effective rule.

    Parameters
    ----------
    record:
        The offending identifier record.
    rule:
        The effective rule it was checked against.
    reason:
        Which sub-check failed.
    suggestions:
        Replacement identifiers, best first.  Empty for reserved words and
        forbidden patterns.
    detail:
        Human-readable explanation from the matcher.
    sequence:
        Position of the record in the input stream.
    """

    record: IdentifierRecord
    rule: NamingRule
    reason: ReasonCode
    suggestions: tuple[str, ...] = ()
    detail: str = ""
    sequence: int = 0

    @property
    def severity(self) -> Severity:
        return self.rule.severity

    @property
    def is_error(self) -> bool:
        return self.rule.severity is Severity.ERROR

    def __str__(self) -> str:
        hint = f" (did you mean {self.suggestions[0]!r}?)" if self.suggestions else ""
        return (
            f"{self.record.location}: {self.severity.value} [{self.reason.value}] "
            f"{self.record.text!r}: {self.detail}{hint}"
        )


@dataclass(frozen=True)
class SkippedRecord:
    """An input record the engine could not check."""

    sequence: int
    reason: str
    data: Any = None


@dataclass(frozen=True)
class Summary:
    """Aggregate counts for one run."""

    total_checked: int = 0
    total_violations: int = 0
    by_reason_code: dict[ReasonCode, int] = field(default_factory=dict)

    @classmethod
    def from_violations(cls, total_checked: int, violations: Iterable[Violation]) -> "Summary":
        counts = Counter(v.reason for v in violations)
        # Fixed key order keeps serialized reports byte-identical across runs.
        by_reason = {code: counts[code] for code in ReasonCode if counts[code]}
        return cls(
            total_checked=total_checked,
            total_violations=sum(by_reason.values()),
            by_reason_code=by_reason,
        )


@dataclass(frozen=True)
class ComplianceReport:
    """Result of one engine run.

    Parameters
    ----------
    violations:
        Violations in input order.
    summary:
        Aggregate counts.
    status:
        Run outcome.
    skipped:
        Records that could not be checked.
    errors:
        Configuration error messages; non-empty only when ``status`` is
        ``CONFIGURATION_ERROR``.
    """

    violations: tuple[Violation, ...] = ()
    summary: Summary = field(default_factory=Summary)
    status: RunStatus = RunStatus.CLEAN
    skipped: tuple[SkippedRecord, ...] = ()
    errors: tuple[str, ...] = ()

    @classmethod
    def configuration_error(cls, *messages: str) -> "ComplianceReport":
        """Return a report for a run that could not start."""
        return cls(status=RunStatus.CONFIGURATION_ERROR, errors=tuple(messages))

    @property
    def error_count(self) -> int:
        return sum(1 for v in self.violations if v.is_error)

    @property
    def warning_count(self) -> int:
        return sum(1 for v in self.violations if not v.is_error)

    @property
    def exit_code(self) -> int:
        """Process exit code: 0 clean or warnings only, 1 errors, 2 unusable configuration."""
        if self.status is RunStatus.CONFIGURATION_ERROR:
            return 2
        return 1 if self.error_count else 0

    def __bool__(self) -> bool:
        return self.status is RunStatus.CLEAN
