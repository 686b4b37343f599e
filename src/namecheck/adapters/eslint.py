"""ESLint ``naming-convention`` adapter.

Translates the options of ``@typescript-eslint/naming-convention`` into
namecheck rules.  Each option object names a ``selector`` (or a list of
them), a ``format`` list and optional ``prefix`` / ``suffix`` /
``leadingUnderscore`` / ``custom`` settings.

ESLint resolves overlapping selectors by picking the most specific one
(individual selector, then group selector such as ``variableLike``,
then ``default``).  namecheck rejects same-layer ties instead, so the
adapter assigns each construct kind to the first option that claims it
in that order and drops it from later, broader options.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from namecheck.adapters.base import ConfigAdapter, adapter_registry
from namecheck.rules.errors import AdapterError

logger = logging.getLogger(__name__)

RULE_NAMES = ("@typescript-eslint/naming-convention", "naming-convention")

_INDIVIDUAL: dict[str, list[str]] = {
    "variable": ["variable"],
    "function": ["function"],
    "parameter": ["parameter"],
    "classProperty": ["property"],
    "objectLiteralProperty": ["property"],
    "typeProperty": ["property"],
    "parameterProperty": ["property"],
    "classMethod": ["method"],
    "objectLiteralMethod": ["method"],
    "typeMethod": ["method"],
    "accessor": ["property"],
    "enumMember": ["enumMember"],
    "class": ["class"],
    "interface": ["interface"],
    "typeAlias": ["typeAlias"],
    "enum": ["enum"],
    "typeParameter": ["typeParameter"],
    "import": ["module"],
}

_GROUPS: dict[str, list[str]] = {
    "variableLike": ["variable", "function", "parameter"],
    "memberLike": ["property", "method", "enumMember", "privateField"],
    "typeLike": ["class", "interface", "typeAlias", "enum", "typeParameter"],
    "property": ["property"],
    "method": ["method"],
}

_FORMATS = {
    "camelCase": "camelCase",
    "strictCamelCase": "camelCase",
    "PascalCase": "PascalCase",
    "StrictPascalCase": "PascalCase",
    "snake_case": "snake_case",
    "UPPER_CASE": "SCREAMING_SNAKE_CASE",
}

_SEVERITIES = {"error": "error", "2": "error", "warn": "warning", "1": "warning"}


def _kinds_for(option: Mapping[str, Any]) -> tuple[int, list[str]]:
    """Return ``(rank, kinds)`` for an option; lower rank is more specific."""
    selectors = option.get("selector", "default")
    if isinstance(selectors, str):
        selectors = [selectors]
    modifiers = set(option.get("modifiers") or [])
    types = set(option.get("types") or [])
    rank = 0
    kinds: list[str] = []
    for selector in selectors:
        if selector in _INDIVIDUAL:
            found = list(_INDIVIDUAL[selector])
        elif selector in _GROUPS:
            rank = max(rank, 1)
            found = list(_GROUPS[selector])
        elif selector == "default":
            return 2, []
        else:
            raise AdapterError("eslint", f"unknown selector {selector!r}")
        kinds.extend(k for k in found if k not in kinds)

    # Modifiers and types narrow a selector to a more specific construct kind.
    if "const" in modifiers and "variable" in kinds:
        kinds = ["constant" if k == "variable" else k for k in kinds]
    if "#private" in modifiers or "private" in modifiers:
        kinds = ["privateField" if k == "property" else k for k in kinds]
    if "static" in modifiers:
        kinds = ["staticField" if k == "property" else k for k in kinds]
    if types == {"boolean"}:
        kinds = [
            {"variable": "booleanVariable", "property": "booleanProperty"}.get(k, k)
            for k in kinds
        ]
    return rank, list(dict.fromkeys(kinds))


def _translate_option(option: Mapping[str, Any], name: str, severity: str) -> dict[str, Any] | None:
    rule: dict[str, Any] = {"name": name, "severity": severity}
    formats = option.get("format")
    if formats:
        casings = []
        for fmt in formats:
            if fmt not in _FORMATS:
                raise AdapterError("eslint", f"unknown format {fmt!r} in {name}")
            casings.append(_FORMATS[fmt])
        rule["casing"] = casings
    if option.get("prefix"):
        rule["prefix"] = list(option["prefix"])
    if option.get("suffix"):
        rule["suffix"] = list(option["suffix"])

    forbidden: list[str] = []
    leading = option.get("leadingUnderscore")
    if leading == "forbid":
        forbidden.append("^_")
    elif leading in ("require", "requireDouble"):
        marker = "__" if leading == "requireDouble" else "_"
        rule["prefix"] = [marker + p for p in rule.get("prefix", [])] or [marker]
    if option.get("trailingUnderscore") == "forbid":
        forbidden.append("_$")

    custom = option.get("custom")
    if isinstance(custom, Mapping) and custom.get("regex"):
        regex = str(custom["regex"])
        if custom.get("match", True):
            # ESLint searches; namecheck patterns match the whole name
            rule["pattern"] = f".*(?:{regex}).*"
        else:
            forbidden.append(regex)
    if forbidden:
        rule["forbidden"] = forbidden

    if option.get("filter") is not None:
        logger.debug("Ignoring eslint filter on %s; namecheck rules have no name filters", name)
    if len(rule) == 2:
        return None
    return rule


@adapter_registry.register("eslint")
class EslintAdapter(ConfigAdapter):
    """Adapter for ``.eslintrc`` naming-convention settings."""

    tool = "eslint"
    language = "typescript"
    description = "@typescript-eslint/naming-convention options"

    def __init__(self, language: str | None = None) -> None:
        if language is not None:
            self.language = language

    def _options(self, config: Mapping[str, Any]) -> tuple[str, list[Mapping[str, Any]]]:
        rules = config.get("rules") or {}
        for rule_name in RULE_NAMES:
            if rule_name in rules:
                setting = rules[rule_name]
                break
        else:
            return "off", []
        if not isinstance(setting, list):
            setting = [setting]
        level = str(setting[0]).lower() if setting else "off"
        if level in ("off", "0"):
            return "off", []
        if level not in _SEVERITIES:
            raise AdapterError("eslint", f"unknown rule level {setting[0]!r}")
        options = [opt for opt in setting[1:] if isinstance(opt, Mapping)]
        return _SEVERITIES[level], options

    def translate(self, config: Mapping[str, Any], origin: str = "<config>") -> dict[str, Any]:
        severity, options = self._options(config)
        ranked = sorted(
            ((*_kinds_for(option), index, option) for index, option in enumerate(options)),
            key=lambda item: (item[0], item[2]),
        )

        claimed: set[str] = set()
        default_seen = False
        rules: list[dict[str, Any]] = []
        for rank, kinds, index, option in ranked:
            name = f"eslint-{index + 1}"
            if rank == 2:
                if default_seen:
                    logger.debug("Dropping repeated eslint default selector %s", name)
                    continue
                default_seen = True
            else:
                kinds = [k for k in kinds if k not in claimed]
                if not kinds:
                    logger.debug("eslint option %s is fully shadowed; dropped", name)
                    continue
                claimed.update(kinds)
            rule = _translate_option(option, name, severity)
            if rule is None:
                continue
            if kinds:
                rule["kinds"] = kinds
            rules.append(rule)
        return self._document(origin, rules)
