"""Rule model, loading and resolution.

Exports the ``NamingRule`` model, the rule-document loader and the
``RuleResolver`` that picks one effective rule per identifier.
"""
from __future__ import annotations

from namecheck.rules.constructs import ConstructKind
from namecheck.rules.errors import (
    AdapterError,
    AmbiguousRuleError,
    ConfigurationError,
    MalformedRuleError,
    NamecheckError,
    RuleFileError,
    UnknownConstructKindError,
)
from namecheck.rules.loader import (
    build_rule_set,
    load_rule_document,
    load_rule_file,
    parse_rule,
    read_document,
)
from namecheck.rules.model import (
    Affix,
    AppliesTo,
    NamingRule,
    RuleSource,
    Scope,
    Severity,
    universal_default_rule,
)
from namecheck.rules.resolver import Candidate, RuleResolver, RuleSet

__all__ = [
    # Model
    "Affix",
    "AppliesTo",
    "ConstructKind",
    "NamingRule",
    "RuleSource",
    "Scope",
    "Severity",
    "universal_default_rule",
    # Resolution
    "Candidate",
    "RuleResolver",
    "RuleSet",
    # Loading
    "build_rule_set",
    "load_rule_document",
    "load_rule_file",
    "parse_rule",
    "read_document",
    # Errors
    "AdapterError",
    "AmbiguousRuleError",
    "ConfigurationError",
    "MalformedRuleError",
    "NamecheckError",
    "RuleFileError",
    "UnknownConstructKindError",
]
