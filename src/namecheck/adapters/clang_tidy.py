"""clang-tidy ``readability-identifier-naming`` adapter.

Reads ``CheckOptions`` from a ``.clang-tidy`` file, in either the list
form (``[{key: ..., value: ...}]``) or the mapping form, and translates
the ``<Kind>Case`` / ``<Kind>Prefix`` / ``<Kind>Suffix`` options.

clang-tidy has finer kinds than namecheck (``Struct`` and ``Class`` are
both classes).  Kinds are visited from most to least specific and the
first one configured for a construct kind owns it.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from namecheck.adapters.base import ConfigAdapter, adapter_registry
from namecheck.rules.errors import AdapterError

logger = logging.getLogger(__name__)

OPTION_PREFIX = "readability-identifier-naming."

# Most specific first.
_KINDS: list[tuple[str, str]] = [
    ("PrivateMember", "privateField"),
    ("ClassConstant", "constant"),
    ("StaticConstant", "constant"),
    ("ClassMember", "staticField"),
    ("StaticVariable", "staticField"),
    ("ConstexprVariable", "constant"),
    ("GlobalConstant", "constant"),
    ("Constant", "constant"),
    ("MemberVariable", "property"),
    ("PublicMember", "property"),
    ("Member", "property"),
    ("LocalVariable", "variable"),
    ("GlobalVariable", "variable"),
    ("Variable", "variable"),
    ("Parameter", "parameter"),
    ("ClassMethod", "method"),
    ("Method", "method"),
    ("GlobalFunction", "function"),
    ("Function", "function"),
    ("Class", "class"),
    ("Struct", "class"),
    ("Union", "class"),
    ("AbstractClass", "interface"),
    ("EnumConstant", "enumMember"),
    ("Enum", "enum"),
    ("TypeAlias", "typeAlias"),
    ("Typedef", "typeAlias"),
    ("TypeTemplateParameter", "typeParameter"),
    ("TemplateParameter", "typeParameter"),
    ("MacroDefinition", "macro"),
    ("Namespace", "namespace"),
]

_CASES = {
    "lower_case": "snake_case",
    "UPPER_CASE": "SCREAMING_SNAKE_CASE",
    "camelBack": "camelCase",
    "CamelCase": "PascalCase",
    "aNy_CasE": "any",
}


def _options(config: Mapping[str, Any]) -> dict[str, str]:
    raw = config.get("CheckOptions") or {}
    if isinstance(raw, Mapping):
        items = raw.items()
    elif isinstance(raw, list):
        items = []
        for entry in raw:
            if not isinstance(entry, Mapping) or "key" not in entry:
                raise AdapterError("clang-tidy", f"malformed CheckOptions entry {entry!r}")
            items.append((entry["key"], entry.get("value")))
    else:
        raise AdapterError("clang-tidy", "CheckOptions must be a list or a mapping")
    return {
        str(key)[len(OPTION_PREFIX):]: str(value)
        for key, value in items
        if str(key).startswith(OPTION_PREFIX) and value is not None
    }


@adapter_registry.register("clang-tidy")
class ClangTidyAdapter(ConfigAdapter):
    """Adapter for ``.clang-tidy`` identifier naming options."""

    tool = "clang-tidy"
    language = "cpp"
    description = "readability-identifier-naming CheckOptions"

    def translate(self, config: Mapping[str, Any], origin: str = "<config>") -> dict[str, Any]:
        options = _options(config)
        claimed: set[str] = set()
        rules: list[dict[str, Any]] = []
        for tidy_kind, kind in _KINDS:
            rule: dict[str, Any] = {}
            case = options.get(f"{tidy_kind}Case")
            if case is not None:
                if case not in _CASES:
                    logger.warning(
                        "clang-tidy case style %r for %s has no namecheck equivalent; ignored",
                        case,
                        tidy_kind,
                    )
                else:
                    rule["casing"] = [_CASES[case]]
            prefix = options.get(f"{tidy_kind}Prefix")
            if prefix:
                rule["prefix"] = prefix
            suffix = options.get(f"{tidy_kind}Suffix")
            if suffix:
                rule["suffix"] = suffix
            if not rule or (rule.get("casing") == ["any"] and len(rule) == 1):
                continue
            if kind in claimed:
                logger.debug("clang-tidy %s shadowed by a more specific kind for %s", tidy_kind, kind)
                continue
            claimed.add(kind)
            rules.append({"name": f"clang-tidy-{tidy_kind}", "kinds": [kind], **rule})
        return self._document(origin, rules)
