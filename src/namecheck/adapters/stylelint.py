"""stylelint adapter.

Translates the ``*-pattern`` rules of a stylelint configuration:

* ``selector-class-pattern`` -> ``cssClass``
* ``selector-id-pattern`` -> ``cssId``
* ``custom-property-pattern`` -> ``cssCustomProperty`` (stylelint checks
  the name after ``--``)
* ``plugin/selector-bem-pattern`` with ``preset: bem`` -> BEM block,
  element and modifier rules

stylelint searches its regexes while namecheck patterns match the whole
name, so unanchored ends of a regex are padded with ``.*``.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from namecheck.adapters.base import ConfigAdapter, adapter_registry
from namecheck.rules.errors import AdapterError

_PATTERN_RULES = {
    "selector-class-pattern": ("cssClass", ""),
    "selector-id-pattern": ("cssId", ""),
    "custom-property-pattern": ("cssCustomProperty", "--"),
}

_BEM_WORD = r"[a-z][a-z0-9]*(?:-[a-z0-9]+)*"
_BEM_RULES = [
    ("bemBlock", _BEM_WORD),
    ("bemElement", rf"{_BEM_WORD}__{_BEM_WORD}"),
    ("bemModifier", rf"{_BEM_WORD}(?:__{_BEM_WORD})?--{_BEM_WORD}"),
]


def full_match_pattern(regex: str, lead: str = "") -> str:
    """Rewrite a searched regex as one that matches a whole name.

    ``lead`` is a literal that precedes the part stylelint checks.
    """
    body = regex
    anchored_start = body.startswith("^")
    if anchored_start:
        body = body[1:]
    anchored_end = body.endswith("$") and not body.endswith("\\$")
    if anchored_end:
        body = body[:-1]
    head = "" if anchored_start else ".*"
    tail = "" if anchored_end else ".*"
    return f"{lead}{head}(?:{body}){tail}"


def _setting(value: Any) -> tuple[Any, Mapping[str, Any]]:
    if isinstance(value, list):
        primary = value[0] if value else None
        secondary = value[1] if len(value) > 1 and isinstance(value[1], Mapping) else {}
        return primary, secondary
    return value, {}


@adapter_registry.register("stylelint")
class StylelintAdapter(ConfigAdapter):
    """Adapter for ``.stylelintrc`` selector and custom-property patterns."""

    tool = "stylelint"
    language = "css"
    description = "selector-class/id-pattern, custom-property-pattern, selector-bem-pattern"

    def translate(self, config: Mapping[str, Any], origin: str = "<config>") -> dict[str, Any]:
        rules_cfg = config.get("rules") or {}
        if not isinstance(rules_cfg, Mapping):
            raise AdapterError(self.tool, "'rules' must be a mapping")
        default_severity = str(config.get("defaultSeverity", "error"))

        rules: list[dict[str, Any]] = []
        for rule_name, (kind, lead) in _PATTERN_RULES.items():
            primary, secondary = _setting(rules_cfg.get(rule_name))
            if primary is None:
                continue
            if not isinstance(primary, str):
                raise AdapterError(self.tool, f"{rule_name} must be a regex string")
            rules.append({
                "name": f"stylelint-{rule_name}",
                "kinds": [kind],
                "pattern": full_match_pattern(primary, lead),
                "severity": str(secondary.get("severity", default_severity)),
                "description": str(secondary.get("message", "")),
            })

        primary, secondary = _setting(rules_cfg.get("plugin/selector-bem-pattern"))
        bem = primary if isinstance(primary, Mapping) else secondary
        if bem:
            preset = bem.get("preset")
            if preset != "bem":
                raise AdapterError(self.tool, f"unsupported selector-bem-pattern preset {preset!r}")
            for kind, pattern in _BEM_RULES:
                rules.append({
                    "name": f"stylelint-bem-{kind}",
                    "kinds": [kind],
                    "pattern": pattern,
                    "severity": default_severity,
                })
        return self._document(origin, rules)
