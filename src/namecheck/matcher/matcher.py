"""Pattern matcher: check one identifier against one ``NamingRule``.

Checks run in a fixed order and the first failure wins:

1. forbidden patterns, then reserved words (``FORBIDDEN_PATTERN`` /
   ``RESERVED_WORD``), which reject an identifier however well it is
   cased;
2. required prefix, then suffix (``MISSING_AFFIX``); a present affix is
   stripped before casing is checked;
3. casing of the stripped core (``WRONG_CASING``);
4. the rule's full-text pattern, if any (``PATTERN_MISMATCH``).

The casing stage checks the core *in position*: an attached prefix or
suffix (one that runs straight into the core, like ``is`` or
``Exception``) is replaced by a one-letter placeholder that is
well-cased in the candidate style.  Affixes ending or starting in a
separator or symbol (``m_``, ``--``, ``_id``) leave the core to be
checked on its own.  This makes ``isActive`` camelCase under a required
``is`` prefix while ``is_active`` is not, and checks
``UserNotFoundException`` as ``UserNotFound`` under a required
``Exception`` suffix.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from namecheck.casing.classifier import classify
from namecheck.rules.model import NamingRule


class ReasonCode(Enum):
    """Which sub-check an identifier failed."""

    FORBIDDEN_PATTERN = "forbiddenPattern"
    RESERVED_WORD = "reservedWord"
    MISSING_AFFIX = "missingAffix"
    WRONG_CASING = "wrongCasing"
    PATTERN_MISMATCH = "patternMismatch"

    @property
    def fixable(self) -> bool:
        """Return False for failures a mechanical rename cannot fix."""
        return self not in (ReasonCode.FORBIDDEN_PATTERN, ReasonCode.RESERVED_WORD)


@dataclass(frozen=True)
class MatchResult:
    """Verdict of matching one identifier against one rule.

    Parameters
    ----------
    passed:
        ``True`` when every stage passed.
    reason:
        The failing stage's reason code, ``None`` on success.
    subcheck:
        Name of the failing sub-check: ``"reserved"``, ``"forbidden"``,
        ``"prefix"``, ``"suffix"``, ``"casing"`` or ``"pattern"``.
    detail:
        Human-readable explanation of the failure.
    core:
        The identifier with any present affixes removed.
    prefix / suffix:
        The affixes found in the identifier, if any.
    """

    passed: bool
    reason: ReasonCode | None = None
    subcheck: str | None = None
    detail: str = ""
    core: str = ""
    prefix: str | None = None
    suffix: str | None = None

    def __bool__(self) -> bool:
        return self.passed


def _fail(
    reason: ReasonCode,
    subcheck: str,
    detail: str,
    core: str,
    prefix: str | None = None,
    suffix: str | None = None,
) -> MatchResult:
    return MatchResult(
        passed=False,
        reason=reason,
        subcheck=subcheck,
        detail=detail,
        core=core,
        prefix=prefix,
        suffix=suffix,
    )


def is_attached_prefix(prefix: str | None) -> bool:
    """Return True if ``prefix`` runs straight into the core (``is`` in ``isActive``).

    A prefix ending in a separator or symbol (``m_``, ``--``, ``$``) leaves
    the core to be cased as a leading word.
    """
    return prefix is not None and prefix[-1:].isalnum()


def is_attached_suffix(suffix: str | None) -> bool:
    """Return True if ``suffix`` follows the core directly (``Exception``)."""
    return suffix is not None and suffix[:1].isalnum()


def casing_satisfied(core: str, rule: NamingRule, prefixed: bool, suffixed: bool) -> bool:
    """Return True if ``core`` satisfies one of the rule's casings in position.

    Parameters
    ----------
    core:
        Identifier text with affixes removed.
    rule:
        The rule whose ``allowed_casings`` are tried.
    prefixed / suffixed:
        Whether an attached prefix or suffix was stripped from in front of
        / behind ``core``.
    """
    if rule.accepts_any_casing:
        return True
    for style in rule.allowed_casings:
        probe = (
            (style.placeholder(leading=True) if prefixed else "")
            + core
            + (style.placeholder(leading=False) if suffixed else "")
        )
        if style in classify(probe):
            return True
    return False


def match(text: str, rule: NamingRule) -> MatchResult:
    """Check ``text`` against ``rule``.

    Parameters
    ----------
    text:
        The identifier as written.
    rule:
        The effective rule for the identifier.

    Returns
    -------
    MatchResult
        ``passed=True`` or the first failing stage.
    """
    for forbidden in rule.forbidden_patterns:
        if forbidden.search(text):
            return _fail(
                ReasonCode.FORBIDDEN_PATTERN,
                "forbidden",
                f"{text!r} matches forbidden pattern /{forbidden.pattern}/",
                core=text,
            )

    if rule.reserved_words and text.casefold() in rule.reserved_words:
        return _fail(ReasonCode.RESERVED_WORD, "reserved", f"{text!r} is a reserved word", core=text)

    core = text
    found_prefix: str | None = None
    found_suffix: str | None = None

    if rule.prefix is not None:
        found_prefix = rule.prefix.find_prefix(core)
        if found_prefix is None:
            return _fail(
                ReasonCode.MISSING_AFFIX,
                "prefix",
                f"{text!r} lacks required prefix {rule.prefix.describe()}",
                core=text,
            )
        core = core[len(found_prefix):]

    if rule.suffix is not None:
        found_suffix = rule.suffix.find_suffix(core)
        if found_suffix is None:
            return _fail(
                ReasonCode.MISSING_AFFIX,
                "suffix",
                f"{text!r} lacks required suffix {rule.suffix.describe()}",
                core=core,
                prefix=found_prefix,
            )
        core = core[: len(core) - len(found_suffix)]

    if not casing_satisfied(core, rule, is_attached_prefix(found_prefix), is_attached_suffix(found_suffix)):
        styles = " or ".join(s.value for s in rule.allowed_casings)
        shown = f"{text!r}" if core == text else f"{core!r} (from {text!r})"
        return _fail(
            ReasonCode.WRONG_CASING,
            "casing",
            f"{shown} is not {styles}",
            core=core,
            prefix=found_prefix,
            suffix=found_suffix,
        )

    if rule.pattern is not None and rule.pattern.fullmatch(text) is None:
        return _fail(
            ReasonCode.PATTERN_MISMATCH,
            "pattern",
            f"{text!r} does not match /{rule.pattern.pattern}/",
            core=core,
            prefix=found_prefix,
            suffix=found_suffix,
        )

    return MatchResult(passed=True, core=core, prefix=found_prefix, suffix=found_suffix)
