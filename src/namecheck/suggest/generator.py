"""Suggestion generator: propose conforming replacements for a failing name.

For every allowed casing of the rule (in authoring order, so the
primary style comes first) the generator re-renders the words of the
identifier's core and re-applies the required prefix and suffix.  Each
candidate is matched against the rule again and dropped if it still
fails, so a transform bug can never surface as advice.

No suggestions are produced for reserved words or forbidden patterns:
those need a human to pick a new name.
"""
from __future__ import annotations

import logging
import re

from namecheck.casing.classifier import primary_style, split_words
from namecheck.casing.styles import CasingStyle
from namecheck.matcher.matcher import MatchResult, is_attached_prefix, is_attached_suffix, match
from namecheck.rules.model import Affix, NamingRule

logger = logging.getLogger(__name__)

_NON_ALNUM = re.compile(r"[^a-z0-9]")


def _bare(text: str) -> str:
    return _NON_ALNUM.sub("", text.casefold())


def _affix_words(affix: Affix | None) -> set[str]:
    if affix is None:
        return set()
    return {_bare(lit) for lit in affix.literals if _bare(lit)}


class _Plan:
    """Prefix, core words and suffix to assemble candidates from."""

    def __init__(self, prefix: str, words: list[str], suffix: str) -> None:
        self.prefix = prefix
        self.words = words
        self.suffix = suffix


def _plan(text: str, rule: NamingRule, result: MatchResult) -> _Plan | None:
    """Work out which affixes to use and which words form the core.

    Returns ``None`` when a required affix is missing and only a regex
    describes it, since there is no literal to insert.
    """
    remainder = text
    prefix = ""
    suffix = ""
    add_prefix = False
    add_suffix = False

    if rule.prefix is not None:
        found = result.prefix if result.prefix is not None else rule.prefix.find_prefix(text)
        if found is not None:
            prefix = found
            remainder = remainder[len(found):]
        elif rule.prefix.preferred is None:
            return None
        else:
            prefix = rule.prefix.preferred
            add_prefix = True

    if rule.suffix is not None:
        found = rule.suffix.find_suffix(remainder)
        if found is not None:
            suffix = found
            remainder = remainder[: len(remainder) - len(found)]
        elif rule.suffix.preferred is None:
            return None
        else:
            suffix = rule.suffix.preferred
            add_suffix = True

    words = split_words(remainder, primary_style(remainder))
    # ``IsActive`` under a missing ``is`` prefix becomes ``isActive``, not ``isIsActive``
    if add_prefix and words and _bare(words[0]) in _affix_words(rule.prefix):
        words = words[1:]
    if add_suffix and words and _bare(words[-1]) in _affix_words(rule.suffix):
        words = words[:-1]
    return _Plan(prefix, words, suffix)


def _render_body(style: CasingStyle, words: list[str], prefixed: bool, suffixed: bool) -> str:
    """Render ``words`` as they would appear between the affixes.

    An attached affix is stood in for by a placeholder word during
    rendering and then cut off again, so the core picks up the casing it
    has in position (``Active`` after ``is`` in camelCase, ``_active``
    after ``is`` in snake_case).
    """
    head = ["x"] if prefixed else []
    tail = ["x"] if suffixed else []
    rendered = style.render(head + words + tail)
    if prefixed:
        rendered = rendered[1:]
    if suffixed:
        rendered = rendered[:-1]
    return rendered


def _assemble(style: CasingStyle, plan: _Plan, fallback: CasingStyle) -> str:
    render_style = fallback if style is CasingStyle.ANY else style
    body = _render_body(
        render_style,
        plan.words,
        is_attached_prefix(plan.prefix),
        is_attached_suffix(plan.suffix),
    )
    separator = render_style.separator
    if separator:
        if plan.prefix.endswith(separator) and body.startswith(separator):
            body = body[len(separator):]
        if plan.suffix.startswith(separator) and body.endswith(separator):
            body = body[: -len(separator)]
    return plan.prefix + body + plan.suffix


def suggest(text: str, rule: NamingRule, result: MatchResult | None = None) -> list[str]:
    """Return replacement identifiers for ``text`` that satisfy ``rule``.

    Parameters
    ----------
    text:
        The identifier as written.
    rule:
        The effective rule ``text`` was checked against.
    result:
        The ``MatchResult`` for ``text`` if the caller already has it.

    Returns
    -------
    list[str]
        Candidates, best first: one per allowed casing in the rule's
        order.  Empty when ``text`` already passes, when the failure is a
        reserved word or forbidden pattern, or when no candidate passes
        the rule.
    """
    if result is None:
        result = match(text, rule)
    if result.passed or result.reason is None or not result.reason.fixable:
        return []

    plan = _plan(text, rule, result)
    if plan is None:
        return []

    fallback = primary_style(text) or CasingStyle.CAMEL_CASE
    suggestions: list[str] = []
    for style in rule.allowed_casings:
        candidate = _assemble(style, plan, fallback)
        if not candidate or candidate == text or candidate in suggestions:
            continue
        if match(candidate, rule).passed:
            suggestions.append(candidate)
        else:
            logger.debug("Dropped suggestion %r for %r under rule %r", candidate, text, rule.name)
    return suggestions
