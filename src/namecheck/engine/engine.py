"""Compliance engine: check a stream of identifiers against a rule set.

A run moves through ``IDLE -> LOADING -> SCANNING -> REPORTING -> IDLE``.
Loading builds an immutable ``RuleSet`` and aborts the run on any
configuration problem.  Scanning resolves, matches and (on failure)
suggests for every record independently; with ``workers > 1`` records
are spread over a thread pool and the results are merged back in input
order.  A bad record is skipped with a warning and never stops the run.

Usage
-----
::

    from namecheck.engine import ComplianceEngine

    engine = ComplianceEngine(workers=4)
    engine.load([{"language": "cpp", "rules": [...]}])
    report = engine.run(records)
    print(report.summary.total_violations)
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from concurrent.futures import ThreadPoolExecutor
from enum import Enum
from typing import Any

from namecheck.engine.records import IdentifierRecord, InvalidRecordError
from namecheck.engine.report import (
    ComplianceReport,
    RunStatus,
    SkippedRecord,
    Summary,
    Violation,
)
from namecheck.matcher.matcher import match
from namecheck.rules.constructs import ConstructKind
from namecheck.rules.errors import ConfigurationError
from namecheck.rules.loader import build_rule_set
from namecheck.rules.model import NamingRule, RuleSource
from namecheck.rules.resolver import RuleResolver, RuleSet
from namecheck.suggest.generator import suggest

logger = logging.getLogger(__name__)


class EngineState(Enum):
    """Lifecycle state of a ``ComplianceEngine``."""

    IDLE = "idle"
    LOADING = "loading"
    SCANNING = "scanning"
    REPORTING = "reporting"


class ComplianceEngine:
    """Orchestrates resolver, matcher and suggestion generator.

    Parameters
    ----------
    rule_set:
        Pre-built rules.  Defaults to an empty set, under which every
        identifier resolves to the universal default rule.
    workers:
        Number of worker threads used by :meth:`run`.  ``1`` checks
        records on the calling thread.
    fallback:
        Rule used for targets no configured rule matches.
    """

    def __init__(
        self,
        rule_set: RuleSet | None = None,
        workers: int = 1,
        fallback: NamingRule | None = None,
    ) -> None:
        if workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")
        self._workers = workers
        self._fallback = fallback
        self._state = EngineState.IDLE
        self._resolver = RuleResolver(rule_set or RuleSet(), fallback=fallback)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def rule_set(self) -> RuleSet:
        return self._resolver.rule_set

    @property
    def resolver(self) -> RuleResolver:
        return self._resolver

    @property
    def workers(self) -> int:
        return self._workers

    def _transition(self, state: EngineState) -> None:
        logger.debug("Engine state %s -> %s", self._state.value, state.value)
        self._state = state

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(
        self,
        documents: Iterable[Mapping[str, Any] | list[Any] | NamingRule],
        default_layer: RuleSource = RuleSource.PROJECT,
    ) -> RuleSet:
        """Replace the engine's rules with those of ``documents``.

        Parameters
        ----------
        documents:
            Rule documents (mappings or bare rule lists) and/or ready-made
            ``NamingRule`` objects.
        default_layer:
            Layer for documents that do not declare one.

        Raises
        ------
        ConfigurationError
            If any rule is malformed or the rules are ambiguous.  The
            previously loaded rules stay in place.
        """
        self._transition(EngineState.LOADING)
        try:
            rule_set = build_rule_set(documents, default_layer=default_layer)
        finally:
            self._transition(EngineState.IDLE)
        self._resolver = RuleResolver(rule_set, fallback=self._fallback)
        logger.info("Loaded %d naming rule(s)", len(rule_set))
        return rule_set

    # ------------------------------------------------------------------
    # Scanning
    # ------------------------------------------------------------------

    def check_record(self, record: IdentifierRecord, sequence: int = 0) -> Violation | None:
        """Check one record; return its violation or ``None`` if it conforms.

        Raises
        ------
        AmbiguousRuleError
            If the record's target has no single effective rule.
        """
        rule = self._resolver.resolve(record.kind, record.scope, record.language)
        result = match(record.text, rule)
        if result.passed or result.reason is None:
            return None
        return Violation(
            record=record,
            rule=rule,
            reason=result.reason,
            suggestions=tuple(suggest(record.text, rule, result)),
            detail=result.detail,
            sequence=sequence,
        )

    def _check_indexed(self, item: tuple[int, IdentifierRecord]) -> Violation | None:
        sequence, record = item
        return self.check_record(record, sequence)

    def _coerce(
        self, records: Iterable[IdentifierRecord | Mapping[str, Any]]
    ) -> tuple[list[tuple[int, IdentifierRecord]], list[SkippedRecord]]:
        accepted: list[tuple[int, IdentifierRecord]] = []
        skipped: list[SkippedRecord] = []
        for sequence, item in enumerate(records):
            try:
                record = item if isinstance(item, IdentifierRecord) else IdentifierRecord.from_dict(item)
                if not record.text:
                    raise InvalidRecordError("record has no identifier text")
                if not isinstance(record.kind, ConstructKind):
                    raise InvalidRecordError(f"record {record.text!r} has no construct kind")
            except InvalidRecordError as exc:
                logger.warning("Skipping record #%d: %s", sequence, exc)
                skipped.append(SkippedRecord(sequence=sequence, reason=str(exc), data=item))
                continue
            accepted.append((sequence, record))
        return accepted, skipped

    def run(self, records: Iterable[IdentifierRecord | Mapping[str, Any]]) -> ComplianceReport:
        """Check every record and return the report.

        Parameters
        ----------
        records:
            ``IdentifierRecord`` objects or mappings accepted by
            :meth:`IdentifierRecord.from_dict`.

        Returns
        -------
        ComplianceReport
            Violations in input order.

        Raises
        ------
        ConfigurationError
            If rule resolution fails for some record; the whole run is
            aborted.
        """
        self._transition(EngineState.SCANNING)
        try:
            accepted, skipped = self._coerce(records)
            if self._workers > 1 and len(accepted) > 1:
                with ThreadPoolExecutor(
                    max_workers=self._workers, thread_name_prefix="namecheck_worker"
                ) as pool:
                    # map() yields in submission order, so input order is kept
                    outcomes = list(pool.map(self._check_indexed, accepted))
            else:
                outcomes = [self._check_indexed(item) for item in accepted]

            self._transition(EngineState.REPORTING)
            violations = tuple(v for v in outcomes if v is not None)
            report = ComplianceReport(
                violations=violations,
                summary=Summary.from_violations(len(accepted), violations),
                status=RunStatus.VIOLATIONS if violations else RunStatus.CLEAN,
                skipped=tuple(skipped),
            )
        finally:
            self._transition(EngineState.IDLE)
        logger.info(
            "Checked %d identifier(s): %d violation(s), %d skipped",
            report.summary.total_checked,
            report.summary.total_violations,
            len(report.skipped),
        )
        return report

    def check(
        self,
        documents: Iterable[Mapping[str, Any] | list[Any] | NamingRule],
        records: Iterable[IdentifierRecord | Mapping[str, Any]],
    ) -> ComplianceReport:
        """Load ``documents`` and run ``records`` without raising on bad configuration.

        A configuration error yields a report with status
        ``CONFIGURATION_ERROR``, zero violations and the error message.
        """
        try:
            self.load(documents)
            return self.run(records)
        except ConfigurationError as exc:
            logger.error("Configuration error: %s", exc)
            return ComplianceReport.configuration_error(str(exc))


def check_identifiers(
    records: Iterable[IdentifierRecord | Mapping[str, Any]],
    documents: Iterable[Mapping[str, Any] | list[Any] | NamingRule] = (),
    workers: int = 1,
) -> ComplianceReport:
    """Convenience function: check ``records`` against ``documents``.

    Configuration errors are reported, not raised; see
    :meth:`ComplianceEngine.check`.
    """
    return ComplianceEngine(workers=workers).check(documents, records)
