"""Naming rule model.

A ``NamingRule`` is one policy statement: which identifiers it targets
(``AppliesTo``), which casing styles satisfy it, which affixes are
required, and which spellings are always rejected.  Rules are frozen
dataclasses so a loaded rule set can be shared between worker threads
without copying or locking.
"""
from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum

from namecheck.casing.styles import CasingStyle
from namecheck.rules.constructs import ConstructKind
from namecheck.rules.errors import MalformedRuleError


class RuleSource(Enum):
    """The configuration layer a rule came from, lowest priority first."""

    DEFAULT = "default"
    PRESET = "preset"
    PROJECT = "project"
    INLINE = "inline"

    @property
    def priority(self) -> int:
        """Tie-break rank: ``inline > project > preset > default``."""
        return _SOURCE_PRIORITY[self]


_SOURCE_PRIORITY = {
    RuleSource.DEFAULT: 0,
    RuleSource.PRESET: 1,
    RuleSource.PROJECT: 2,
    RuleSource.INLINE: 3,
}


class Severity(Enum):
    """How seriously a violation of the rule should be treated."""

    ERROR = "error"
    WARNING = "warning"


# ---------------------------------------------------------------------------
# Scope
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Scope:
    """An immutable mapping of scope dimensions to values.

    Entries are kept sorted by key so that equal scopes compare and hash
    equal regardless of construction order.

    Parameters
    ----------
    entries:
        ``(dimension, value)`` pairs, e.g. ``(("class", "User"),
        ("visibility", "private"))``.
    """

    entries: tuple[tuple[str, str], ...] = ()

    @classmethod
    def of(cls, mapping: Mapping[str, object] | None = None, **dimensions: object) -> "Scope":
        """Build a ``Scope`` from a mapping and/or keyword arguments."""
        merged: dict[str, str] = {}
        for key, value in {**(mapping or {}), **dimensions}.items():
            if value is None:
                continue
            merged[str(key)] = str(value)
        return cls(entries=tuple(sorted(merged.items())))

    def get(self, key: str, default: str | None = None) -> str | None:
        for entry_key, value in self.entries:
            if entry_key == key:
                return value
        return default

    def as_dict(self) -> dict[str, str]:
        return dict(self.entries)

    def covers(self, other: "Scope") -> bool:
        """Return True if every dimension of ``other`` is present here with the same value."""
        mine = self.as_dict()
        return all(mine.get(key) == value for key, value in other.entries)

    def compatible_with(self, other: "Scope") -> bool:
        """Return True if no dimension present in both scopes disagrees."""
        mine = self.as_dict()
        return all(mine.get(key, value) == value for key, value in other.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[str]:
        return (key for key, _ in self.entries)

    def __contains__(self, key: object) -> bool:
        return any(entry_key == key for entry_key, _ in self.entries)


# ---------------------------------------------------------------------------
# Affixes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Affix:
    """A required prefix or suffix.

    Parameters
    ----------
    literals:
        Alternative literal spellings, any one of which satisfies the
        requirement (e.g. ``("is", "has", "can")``).  Literals are
        compared case-sensitively and the longest match wins.
    pattern:
        Optional regex alternative.  A prefix pattern must match at the
        start of the identifier, a suffix pattern at its end.
    """

    literals: tuple[str, ...] = ()
    pattern: re.Pattern[str] | None = None

    def find_prefix(self, text: str) -> str | None:
        """Return the prefix present at the start of ``text``, or ``None``."""
        for literal in sorted(self.literals, key=len, reverse=True):
            if text.startswith(literal):
                return literal
        if self.pattern is not None:
            found = self.pattern.match(text)
            if found is not None:
                return found.group(0)
        return None

    def find_suffix(self, text: str) -> str | None:
        """Return the suffix present at the end of ``text``, or ``None``."""
        for literal in sorted(self.literals, key=len, reverse=True):
            if text.endswith(literal):
                return literal
        if self.pattern is not None:
            found = re.search(rf"(?:{self.pattern.pattern})\Z", text, self.pattern.flags)
            if found is not None:
                return found.group(0)
        return None

    @property
    def preferred(self) -> str | None:
        """The literal used when an affix has to be added to a suggestion."""
        return self.literals[0] if self.literals else None

    def describe(self) -> str:
        parts = [repr(lit) for lit in self.literals]
        if self.pattern is not None:
            parts.append(f"/{self.pattern.pattern}/")
        return " | ".join(parts)


# ---------------------------------------------------------------------------
# Targeting
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AppliesTo:
    """Predicate over ``(kind, scope, language)``.

    An empty ``kinds`` set, a ``None`` language and an empty scope each
    mean "any".
    """

    kinds: frozenset[ConstructKind] = field(default_factory=frozenset)
    language: str | None = None
    scope: Scope = field(default_factory=Scope)

    def matches(self, kind: ConstructKind, scope: Scope, language: str | None) -> bool:
        if self.kinds and kind not in self.kinds:
            return False
        if self.language is not None and self.language != (language or "").lower():
            return False
        return scope.covers(self.scope)

    @property
    def specificity(self) -> int:
        """Score of this predicate against any target it matches.

        Language 2 points, construct kind 2 points, 1 point per scope
        dimension.  The score is constant over every matching target.
        """
        score = 0
        if self.language is not None:
            score += 2
        if self.kinds:
            score += 2
        return score + len(self.scope)

    def overlaps(self, other: "AppliesTo") -> bool:
        """Return True if some target could satisfy both predicates."""
        if self.kinds and other.kinds and not (self.kinds & other.kinds):
            return False
        if self.language is not None and other.language is not None and self.language != other.language:
            return False
        return self.scope.compatible_with(other.scope)

    def describe(self) -> str:
        kinds = ", ".join(sorted(k.value for k in self.kinds)) or "any kind"
        language = self.language or "any language"
        scope = ", ".join(f"{k}={v}" for k, v in self.scope.entries)
        return f"{kinds} in {language}" + (f" where {scope}" if scope else "")


# ---------------------------------------------------------------------------
# NamingRule
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class NamingRule:
    """A single naming policy statement.

    Parameters
    ----------
    name:
        Identifier of the rule, used in reports and error messages.
    applies_to:
        Which identifiers the rule targets.
    allowed_casings:
        Non-empty ordered tuple of styles; any one satisfies the rule.
        The first style is the primary suggestion target.
    prefix / suffix:
        Optional required affixes.
    forbidden_patterns:
        Regexes that reject an identifier regardless of its casing.
    reserved_words:
        Words that may never be used as the identifier (compared
        case-insensitively).
    pattern:
        Optional regex the whole identifier must match.
    severity:
        Severity of violations of this rule.
    source:
        Configuration layer the rule came from.
    description:
        Free-form explanation shown to users.
    """

    name: str
    applies_to: AppliesTo = field(default_factory=AppliesTo)
    allowed_casings: tuple[CasingStyle, ...] = (CasingStyle.ANY,)
    prefix: Affix | None = None
    suffix: Affix | None = None
    forbidden_patterns: tuple[re.Pattern[str], ...] = ()
    reserved_words: frozenset[str] = field(default_factory=frozenset)
    pattern: re.Pattern[str] | None = None
    severity: Severity = Severity.ERROR
    source: RuleSource = RuleSource.PROJECT
    description: str = ""

    def __post_init__(self) -> None:
        if not self.allowed_casings:
            raise MalformedRuleError(self.name, "allowed_casings must not be empty")
        # reserved words are matched case-insensitively
        object.__setattr__(
            self, "reserved_words", frozenset(w.casefold() for w in self.reserved_words)
        )

    @property
    def specificity(self) -> int:
        return self.applies_to.specificity

    @property
    def accepts_any_casing(self) -> bool:
        return CasingStyle.ANY in self.allowed_casings

    @property
    def can_fail(self) -> bool:
        """Return False for rules that no identifier could ever violate."""
        return bool(
            not self.accepts_any_casing
            or self.prefix is not None
            or self.suffix is not None
            or self.forbidden_patterns
            or self.reserved_words
            or self.pattern is not None
        )

    def explain(self) -> str:
        """Return a one-line, human-readable account of what the rule requires."""
        parts = [" or ".join(c.value for c in self.allowed_casings)]
        if self.prefix is not None:
            parts.append(f"prefix {self.prefix.describe()}")
        if self.suffix is not None:
            parts.append(f"suffix {self.suffix.describe()}")
        if self.pattern is not None:
            parts.append(f"matching /{self.pattern.pattern}/")
        return (
            f"{self.name} [{self.source.value}] for {self.applies_to.describe()}: "
            + ", ".join(parts)
        )


def universal_default_rule() -> NamingRule:
    """The rule applied to targets no configured rule matches: anything passes."""
    return NamingRule(
        name="universal-default",
        source=RuleSource.DEFAULT,
        severity=Severity.WARNING,
        description="Fallback for unconfigured constructs; accepts every identifier.",
    )
