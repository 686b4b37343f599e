"""Rule resolver: pick the one effective rule for an identifier.

Among the rules whose ``applies_to`` predicate matches a
``(kind, scope, language)`` target, the resolver ranks by specificity
(language 2, kind 2, +1 per scope dimension), then by layer priority
(``inline > project > preset > default``).  A tie that survives both is
a configuration error; the resolver never guesses.  Targets no rule
matches fall back to the universal default rule, so unconfigured
constructs are never rejected.

Because a predicate's specificity does not depend on the target it
matches, every possible tie can be found when the ``RuleSet`` is built.
``RuleSet`` therefore rejects ambiguous configurations up front, before
a single identifier is scanned.

Usage
-----
::

    from namecheck.rules import RuleResolver, RuleSet

    resolver = RuleResolver(RuleSet(rules))
    rule = resolver.resolve(ConstructKind.PRIVATE_FIELD, Scope.of(), "cpp")
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import combinations

from namecheck.rules.constructs import ConstructKind
from namecheck.rules.errors import AmbiguousRuleError
from namecheck.rules.model import NamingRule, Scope, universal_default_rule

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Candidate:
    """A rule that matches a target, with its ranking key."""

    rule: NamingRule
    specificity: int

    @property
    def rank(self) -> tuple[int, int]:
        return (self.specificity, self.rule.source.priority)


class RuleSet:
    """An immutable, validated collection of naming rules.

    Parameters
    ----------
    rules:
        The rules, in any order.

    Raises
    ------
    AmbiguousRuleError
        If two rules in the same layer with equal specificity could both
        match some target.
    """

    def __init__(self, rules: Iterable[NamingRule] = ()) -> None:
        self._rules: tuple[NamingRule, ...] = tuple(rules)
        self._check_unambiguous()

    def _check_unambiguous(self) -> None:
        for first, second in combinations(self._rules, 2):
            if first.source is not second.source:
                continue
            if first.specificity != second.specificity:
                continue
            if first.applies_to.overlaps(second.applies_to):
                raise AmbiguousRuleError(
                    (first, second),
                    f"targets matching both {first.applies_to.describe()!r} "
                    f"and {second.applies_to.describe()!r}",
                )

    @property
    def rules(self) -> tuple[NamingRule, ...]:
        return self._rules

    def merged(self, other: "RuleSet") -> "RuleSet":
        """Return a new rule set containing the rules of both sets."""
        return RuleSet((*self._rules, *other.rules))

    def __iter__(self) -> Iterator[NamingRule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"RuleSet({len(self._rules)} rule(s))"


class RuleResolver:
    """Resolves the effective ``NamingRule`` for identifier targets.

    The resolver holds no mutable state, so one instance may be shared
    by any number of worker threads.

    Parameters
    ----------
    rule_set:
        The validated rules to resolve against.
    fallback:
        Rule returned when nothing matches.  Defaults to the universal
        default rule.
    """

    def __init__(self, rule_set: RuleSet, fallback: NamingRule | None = None) -> None:
        self._rule_set = rule_set
        self._fallback = fallback if fallback is not None else universal_default_rule()

    @property
    def rule_set(self) -> RuleSet:
        return self._rule_set

    @property
    def fallback(self) -> NamingRule:
        return self._fallback

    def candidates(
        self, kind: ConstructKind, scope: Scope, language: str | None
    ) -> list[Candidate]:
        """Return every matching rule, best first.

        Parameters
        ----------
        kind:
            The identifier's construct kind.
        scope:
            The identifier's scope.
        language:
            The identifier's language tag.

        Returns
        -------
        list[Candidate]
            Sorted by descending specificity, then descending layer
            priority.  Rules keep their configuration order within a rank.
        """
        matched = [
            Candidate(rule=rule, specificity=rule.specificity)
            for rule in self._rule_set
            if rule.applies_to.matches(kind, scope, language)
        ]
        matched.sort(key=lambda c: c.rank, reverse=True)
        return matched

    def explain(self, kind: ConstructKind, scope: Scope, language: str | None) -> list[str]:
        """Return one line per candidate rule, best first, for diagnostics."""
        ranked = self.candidates(kind, scope, language)
        if not ranked:
            return [f"(fallback) {self._fallback.explain()}"]
        return [
            f"specificity={c.specificity} layer={c.rule.source.value}: {c.rule.explain()}"
            for c in ranked
        ]

    def resolve(self, kind: ConstructKind, scope: Scope, language: str | None) -> NamingRule:
        """Return the single effective rule for a target.

        Raises
        ------
        AmbiguousRuleError
            If the two best candidates tie on specificity and layer.
        """
        ranked = self.candidates(kind, scope, language)
        if not ranked:
            logger.debug(
                "No rule matches %s/%s; using %r", kind.value, language, self._fallback.name
            )
            return self._fallback
        best = ranked[0]
        if len(ranked) > 1 and ranked[1].rank == best.rank:
            tied = tuple(c.rule for c in ranked if c.rank == best.rank)
            raise AmbiguousRuleError(
                tied, f"{kind.value} in {language or 'any language'}"
            )
        return best.rule
