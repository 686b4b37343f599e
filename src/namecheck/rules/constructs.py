"""Construct kinds: the syntactic role an identifier plays.

The set is closed at run time (rule documents and records may only use
these names) and extended by adding members here.
"""
from __future__ import annotations

import re
from enum import Enum


class ConstructKind(Enum):
    """Identifier roles understood by the resolver.

    Member values are the wire names used in rule documents and
    identifier records.
    """

    # Program constructs
    VARIABLE = "variable"
    CONSTANT = "constant"
    FUNCTION = "function"
    METHOD = "method"
    CLASS = "class"
    INTERFACE = "interface"
    ENUM = "enum"
    ENUM_MEMBER = "enumMember"
    PARAMETER = "parameter"
    PROPERTY = "property"
    PRIVATE_FIELD = "privateField"
    STATIC_FIELD = "staticField"
    NAMESPACE = "namespace"
    EXCEPTION = "exception"
    BOOLEAN_PROPERTY = "booleanProperty"
    BOOLEAN_VARIABLE = "booleanVariable"
    TYPE_ALIAS = "typeAlias"
    TYPE_PARAMETER = "typeParameter"
    MACRO = "macro"
    DECORATOR = "decorator"
    MODULE = "module"

    # File system
    FILE = "file"
    DIRECTORY = "directory"

    # Database
    TABLE = "table"
    COLUMN = "column"
    PRIMARY_KEY = "primaryKey"
    FOREIGN_KEY = "foreignKey"
    INDEX = "index"
    CONSTRAINT = "constraint"
    VIEW = "view"
    TRIGGER = "trigger"
    STORED_PROCEDURE = "storedProcedure"

    # Markup and style sheets
    CSS_CLASS = "cssClass"
    CSS_ID = "cssId"
    CSS_CUSTOM_PROPERTY = "cssCustomProperty"
    BEM_BLOCK = "bemBlock"
    BEM_ELEMENT = "bemElement"
    BEM_MODIFIER = "bemModifier"
    HTML_DATA_ATTRIBUTE = "htmlDataAttribute"

    @classmethod
    def from_name(cls, name: str) -> "ConstructKind":
        """Look up a kind by wire name, member name, or snake/kebab spelling.

        ``"privateField"``, ``"PRIVATE_FIELD"``, ``"private_field"`` and
        ``"private-field"`` all resolve to ``PRIVATE_FIELD``.

        Raises
        ------
        ValueError
            If ``name`` does not name a known construct kind.
        """
        key = _normalize(name)
        try:
            return _BY_KEY[key]
        except KeyError:
            raise ValueError(f"Unknown construct kind {name!r}") from None


def _normalize(name: str) -> str:
    return re.sub(r"[^a-z0-9]", "", name.strip().lower())


_BY_KEY: dict[str, ConstructKind] = {_normalize(k.value): k for k in ConstructKind}
