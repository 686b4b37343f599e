"""Rule document loading.

Rule documents are plain mappings, so YAML, JSON and TOML files all map
onto the same shape::

    layer: project            # default | preset | project | inline
    language: cpp             # default language for the rules below
    rules:
      - name: cpp-private-field
        applies_to:
          kinds: [privateField]
          scope: {visibility: private}
        casing: [snake_case, camelCase]
        prefix: m_
        forbidden: ["^__", "__$"]
        severity: warning

``prefix`` and ``suffix`` accept a string, a list of alternative
strings, or a mapping with ``literals`` and/or ``pattern``.  Every
problem found here is a ``ConfigurationError``: loading stops before any
identifier is scanned.
"""
from __future__ import annotations

import json
import logging
import re
import tomllib
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import yaml

from namecheck.casing.styles import CasingStyle
from namecheck.rules.constructs import ConstructKind
from namecheck.rules.errors import MalformedRuleError, RuleFileError, UnknownConstructKindError
from namecheck.rules.model import Affix, AppliesTo, NamingRule, RuleSource, Scope, Severity
from namecheck.rules.resolver import RuleSet

logger = logging.getLogger(__name__)

RuleDocument = Mapping[str, Any]

_RULE_KEYS = frozenset({
    "name",
    "description",
    "applies_to",
    "kind",
    "kinds",
    "casing",
    "prefix",
    "suffix",
    "forbidden",
    "reserved",
    "pattern",
    "severity",
})
_APPLIES_TO_KEYS = frozenset({"kind", "kinds", "language", "scope"})
_DOCUMENT_KEYS = frozenset({"layer", "language", "rules", "name", "description"})


def _as_list(value: Any) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def _compile(rule_name: str, what: str, pattern: Any) -> re.Pattern[str]:
    if not isinstance(pattern, str):
        raise MalformedRuleError(rule_name, f"{what} must be a string regex, got {pattern!r}")
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise MalformedRuleError(rule_name, f"invalid {what} regex {pattern!r}: {exc}") from None


def _parse_layer(value: Any, origin: str) -> RuleSource:
    try:
        return RuleSource(str(value).lower())
    except ValueError:
        layers = ", ".join(s.value for s in RuleSource)
        raise MalformedRuleError(origin, f"unknown layer {value!r}; expected one of {layers}") from None


def _parse_kinds(rule_name: str, value: Any) -> frozenset[ConstructKind]:
    kinds: set[ConstructKind] = set()
    for item in _as_list(value):
        try:
            kinds.add(ConstructKind.from_name(str(item)))
        except ValueError:
            raise UnknownConstructKindError(rule_name, str(item)) from None
    return frozenset(kinds)


def _parse_casings(rule_name: str, value: Any) -> tuple[CasingStyle, ...]:
    styles: list[CasingStyle] = []
    for item in _as_list(value):
        try:
            style = CasingStyle.from_name(str(item))
        except ValueError as exc:
            raise MalformedRuleError(rule_name, str(exc)) from None
        if style not in styles:
            styles.append(style)
    return tuple(styles)


def _parse_affix(rule_name: str, what: str, value: Any) -> Affix | None:
    if value is None:
        return None
    if isinstance(value, Mapping):
        unknown = set(value) - {"literals", "pattern"}
        if unknown:
            raise MalformedRuleError(rule_name, f"unknown {what} keys: {sorted(unknown)}")
        literals = tuple(str(v) for v in _as_list(value.get("literals")))
        raw_pattern = value.get("pattern")
        pattern = _compile(rule_name, what, raw_pattern) if raw_pattern is not None else None
    else:
        literals = tuple(str(v) for v in _as_list(value))
        pattern = None
    if any(not lit for lit in literals):
        raise MalformedRuleError(rule_name, f"{what} literals must not be empty strings")
    if not literals and pattern is None:
        raise MalformedRuleError(rule_name, f"{what} needs at least one literal or a pattern")
    return Affix(literals=literals, pattern=pattern)


def _parse_applies_to(rule_name: str, entry: Mapping[str, Any], language: str | None) -> AppliesTo:
    raw = entry.get("applies_to") or {}
    if not isinstance(raw, Mapping):
        raise MalformedRuleError(rule_name, "applies_to must be a mapping")
    unknown = set(raw) - _APPLIES_TO_KEYS
    if unknown:
        raise MalformedRuleError(rule_name, f"unknown applies_to keys: {sorted(unknown)}")

    kind_values = [
        *_as_list(raw.get("kinds")),
        *_as_list(raw.get("kind")),
        *_as_list(entry.get("kinds")),
        *_as_list(entry.get("kind")),
    ]
    scope_raw = raw.get("scope") or {}
    if not isinstance(scope_raw, Mapping):
        raise MalformedRuleError(rule_name, "applies_to.scope must be a mapping")
    rule_language = raw.get("language", language)
    return AppliesTo(
        kinds=_parse_kinds(rule_name, kind_values),
        language=str(rule_language).lower() if rule_language else None,
        scope=Scope.of(scope_raw),
    )


def _require_can_fail(rule: NamingRule) -> None:
    if not rule.can_fail:
        raise MalformedRuleError(
            rule.name,
            "rule accepts every identifier (no casing restriction, affix, "
            "forbidden pattern, reserved word or pattern)",
        )


def parse_rule(
    entry: Mapping[str, Any],
    layer: RuleSource = RuleSource.PROJECT,
    language: str | None = None,
    label: str = "rule",
) -> NamingRule:
    """Build one ``NamingRule`` from a rule-document entry.

    Parameters
    ----------
    entry:
        The rule mapping.
    layer:
        Layer of the enclosing document.
    language:
        Default language of the enclosing document.
    label:
        Fallback rule name used when ``entry`` has no ``name``.

    Raises
    ------
    MalformedRuleError
        If the entry is invalid or describes a rule that can never fail.
    UnknownConstructKindError
        If a construct kind is not recognised.
    """
    if not isinstance(entry, Mapping):
        raise MalformedRuleError(label, f"rule entries must be mappings, got {type(entry).__name__}")
    name = str(entry.get("name") or label)
    unknown = set(entry) - _RULE_KEYS
    if unknown:
        raise MalformedRuleError(name, f"unknown keys: {sorted(unknown)}")

    casings = _parse_casings(name, entry.get("casing")) or (CasingStyle.ANY,)
    severity_raw = str(entry.get("severity", "error")).lower()
    try:
        severity = Severity(severity_raw)
    except ValueError:
        raise MalformedRuleError(name, f"unknown severity {severity_raw!r}") from None

    raw_pattern = entry.get("pattern")
    rule = NamingRule(
        name=name,
        applies_to=_parse_applies_to(name, entry, language),
        allowed_casings=casings,
        prefix=_parse_affix(name, "prefix", entry.get("prefix")),
        suffix=_parse_affix(name, "suffix", entry.get("suffix")),
        forbidden_patterns=tuple(
            _compile(name, "forbidden", p) for p in _as_list(entry.get("forbidden"))
        ),
        reserved_words=frozenset(str(w) for w in _as_list(entry.get("reserved"))),
        pattern=_compile(name, "pattern", raw_pattern) if raw_pattern is not None else None,
        severity=severity,
        source=layer,
        description=str(entry.get("description", "")),
    )
    _require_can_fail(rule)
    return rule


def load_rule_document(
    document: RuleDocument | list[Any],
    default_layer: RuleSource = RuleSource.PROJECT,
    origin: str = "<document>",
) -> list[NamingRule]:
    """Convert one rule document into ``NamingRule`` objects.

    Parameters
    ----------
    document:
        A mapping with ``rules`` (and optionally ``layer`` and
        ``language``), or a bare list of rule entries.
    default_layer:
        Layer used when the document does not name one.
    origin:
        Where the document came from, for error messages and rule labels.
    """
    if isinstance(document, list):
        document = {"rules": document}
    if not isinstance(document, Mapping):
        raise MalformedRuleError(origin, "a rule document must be a mapping or a list of rules")
    unknown = set(document) - _DOCUMENT_KEYS
    if unknown:
        raise MalformedRuleError(origin, f"unknown document keys: {sorted(unknown)}")
    origin = str(document.get("name") or origin)

    layer = _parse_layer(document["layer"], origin) if "layer" in document else default_layer
    language = document.get("language")
    entries = document.get("rules") or []
    if not isinstance(entries, list):
        raise MalformedRuleError(origin, "'rules' must be a list")

    rules = [
        parse_rule(entry, layer=layer, language=language, label=f"{origin}#{index}")
        for index, entry in enumerate(entries, start=1)
    ]
    logger.debug("Loaded %d rule(s) from %s (layer=%s)", len(rules), origin, layer.value)
    return rules


def read_document(path: str | Path) -> Any:
    """Read a YAML, JSON or TOML file into plain Python data.

    Raises
    ------
    RuleFileError
        If the file cannot be read or parsed.
    """
    file_path = Path(path)
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise RuleFileError(str(file_path), str(exc)) from None

    suffix = file_path.suffix.lower()
    try:
        if suffix == ".json":
            return json.loads(text)
        if suffix == ".toml":
            return tomllib.loads(text)
        return yaml.safe_load(text)
    except (json.JSONDecodeError, tomllib.TOMLDecodeError, yaml.YAMLError) as exc:
        raise RuleFileError(str(file_path), f"parse error: {exc}") from None


def load_rule_file(path: str | Path, default_layer: RuleSource = RuleSource.PROJECT) -> list[NamingRule]:
    """Load the rules of one rule file."""
    data = read_document(path)
    if data is None:
        return []
    return load_rule_document(data, default_layer=default_layer, origin=str(path))


def build_rule_set(
    documents: Iterable[RuleDocument | list[Any] | NamingRule],
    default_layer: RuleSource = RuleSource.PROJECT,
) -> RuleSet:
    """Build a validated ``RuleSet`` from documents and/or ready-made rules.

    Raises
    ------
    ConfigurationError
        If any document is malformed, a ready-made rule can never fail, or
        the combined rules are ambiguous.
    """
    rules: list[NamingRule] = []
    for index, document in enumerate(documents, start=1):
        if isinstance(document, NamingRule):
            _require_can_fail(document)
            rules.append(document)
        else:
            rules.extend(
                load_rule_document(document, default_layer=default_layer, origin=f"document-{index}")
            )
    return RuleSet(rules)
