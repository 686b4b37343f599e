"""Error types raised while loading and resolving naming rules.

Configuration errors are fatal for a run: they abort the loading phase
before any identifier is scanned.  Naming violations are never raised;
they are reported as ``Violation`` values.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from namecheck.rules.model import NamingRule


class NamecheckError(Exception):
    """Base class for all namecheck errors."""


class ConfigurationError(NamecheckError):
    """The rule set is unusable; the run cannot proceed."""


class MalformedRuleError(ConfigurationError):
    """A rule document entry cannot be turned into a ``NamingRule``.

    Parameters
    ----------
    rule_name:
        Name (or positional label) of the offending rule.
    reason:
        Human-readable description of the problem.
    """

    def __init__(self, rule_name: str, reason: str) -> None:
        self.rule_name = rule_name
        self.reason = reason
        super().__init__(f"Malformed rule {rule_name!r}: {reason}")


class UnknownConstructKindError(MalformedRuleError):
    """A rule's ``applies_to`` names a construct kind that does not exist."""

    def __init__(self, rule_name: str, kind: str) -> None:
        self.kind = kind
        super().__init__(rule_name, f"unknown construct kind {kind!r}")


class AmbiguousRuleError(ConfigurationError):
    """Two or more rules tie on specificity and layer for the same target.

    Parameters
    ----------
    rules:
        The tied rules.
    target:
        Description of the (kind, scope, language) the tie occurs for.
    """

    def __init__(self, rules: tuple["NamingRule", ...], target: str) -> None:
        self.rules = rules
        self.target = target
        names = ", ".join(repr(r.name) for r in rules)
        super().__init__(
            f"Ambiguous rule set for {target}: rules {names} tie on specificity "
            f"and layer {rules[0].source.value!r}. Make one rule more specific "
            "or move it to a different layer."
        )


class RuleFileError(ConfigurationError):
    """A rule file could not be read or parsed."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load rule file {path}: {reason}")


class AdapterError(ConfigurationError):
    """A third-party tool configuration cannot be translated into rules."""

    def __init__(self, adapter: str, reason: str) -> None:
        self.adapter = adapter
        self.reason = reason
        super().__init__(f"{adapter} adapter: {reason}")
