"""namecheck: cross-language naming-convention compliance engine.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import namecheck

    namecheck.classify("userId")
    # frozenset({<CasingStyle.CAMEL_CASE: 'camelCase'>})

    namecheck.transform("userId", None, namecheck.CasingStyle.SNAKE_CASE)
    # 'user_id'

    rules = namecheck.load_rules({
        "language": "typescript",
        "rules": [{"name": "bools", "kinds": ["booleanProperty"],
                   "casing": ["camelCase"], "prefix": ["is", "has", "can"]}],
    })
    result = namecheck.match("is_active", rules[0])
    namecheck.suggest("is_active", rules[0])
    # ['isActive']

    report = namecheck.check(
        [{"text": "is_active", "kind": "booleanProperty", "language": "typescript"}],
        rules,
    )
    report.summary.total_violations
    # 1

    namecheck.__version__
    # '0.1.0'
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from namecheck.casing.styles import CasingStyle

# Import the subpackage eagerly so that the ``suggest`` function defined
# below, not the ``namecheck.suggest`` subpackage, is the bound attribute.
import namecheck.suggest.generator  # noqa: E402,F401

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from namecheck.engine.records import IdentifierRecord
    from namecheck.engine.report import ComplianceReport
    from namecheck.matcher.matcher import MatchResult
    from namecheck.rules.model import NamingRule


def classify(text: str) -> frozenset[CasingStyle]:
    """Return every casing style ``text`` conforms to (possibly none)."""
    from namecheck.casing.classifier import classify as _classify

    return _classify(text)


def transform(text: str, source: CasingStyle | None, target: CasingStyle) -> str:
    """Re-case ``text`` from ``source`` (detected when ``None``) into ``target``."""
    from namecheck.casing.classifier import transform as _transform

    return _transform(text, source, target)


def match(text: str, rule: "NamingRule") -> "MatchResult":
    """Check ``text`` against ``rule``.

    Parameters
    ----------
    text:
        The identifier.
    rule:
        The effective naming rule.

    Returns
    -------
    MatchResult
        Pass/fail with the failing reason code and a diagnostic.
    """
    from namecheck.matcher.matcher import match as _match

    return _match(text, rule)


def suggest(text: str, rule: "NamingRule") -> list[str]:
    """Return conforming replacements for ``text``, best first."""
    from namecheck.suggest.generator import suggest as _suggest

    return _suggest(text, rule)


def load_rules(source: Any) -> list["NamingRule"]:
    """Load rules from a rule document, a list of rule entries, or a file path.

    Raises
    ------
    namecheck.rules.ConfigurationError
        If the rules are malformed.
    """
    from pathlib import Path

    from namecheck.rules.loader import load_rule_document, load_rule_file

    if isinstance(source, (str, Path)):
        return load_rule_file(source)
    return load_rule_document(source)


def check(
    records: Iterable["IdentifierRecord | Mapping[str, Any]"],
    rules: Iterable[Any] = (),
    workers: int = 1,
) -> "ComplianceReport":
    """Check identifier records against rules and return the report.

    Parameters
    ----------
    records:
        ``IdentifierRecord`` objects or plain mappings.
    rules:
        Rule documents and/or ``NamingRule`` objects.
    workers:
        Worker threads to spread records over.

    Returns
    -------
    ComplianceReport
        The report.  Configuration problems give a report with status
        ``CONFIGURATION_ERROR`` instead of an exception.
    """
    from namecheck.engine.engine import check_identifiers

    return check_identifiers(records, rules, workers=workers)


__all__ = [
    "__version__",
    "CasingStyle",
    "classify",
    "transform",
    "match",
    "suggest",
    "load_rules",
    "check",
]
