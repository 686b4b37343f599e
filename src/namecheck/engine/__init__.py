"""Compliance engine module.

Exports ``ComplianceEngine``, the ``IdentifierRecord`` input type and the
report model.
"""
from __future__ import annotations

from namecheck.engine.engine import ComplianceEngine, EngineState, check_identifiers
from namecheck.engine.records import IdentifierRecord, InvalidRecordError, SourceLocation
from namecheck.engine.report import (
    ComplianceReport,
    RunStatus,
    SkippedRecord,
    Summary,
    Violation,
)

__all__ = [
    "ComplianceEngine",
    "EngineState",
    "check_identifiers",
    "IdentifierRecord",
    "InvalidRecordError",
    "SourceLocation",
    "ComplianceReport",
    "RunStatus",
    "SkippedRecord",
    "Summary",
    "Violation",
]
