"""Built-in naming presets.

Each entry is a tuple of (PresetMetadata, rule_document).  The registry
key equals PresetMetadata.name.  All documents load into the ``preset``
layer, so project and inline rules override them on equal specificity.

The conventions follow the usual community guides for each language:
ESLint ``@typescript-eslint/naming-convention`` defaults, stylelint
``selector-class-pattern`` / ``custom-property-pattern`` with BEM,
clang-tidy ``readability-identifier-naming`` in the Google flavour, PSR-1
/ PSR-12 for PHP, and common MySQL schema naming.
"""
from __future__ import annotations

from typing import Any

from namecheck.presets.library import PresetMetadata

_Entry = tuple[PresetMetadata, dict[str, Any]]

_BOOLEAN_PREFIXES = ["is", "has", "can", "should", "will", "did"]

# Leading double underscore and underscore-capital are reserved in C and C++.
_CPP_RESERVED = ["^__", "^_[A-Z]", "__$"]

_SQL_RESERVED = [
    "add", "all", "alter", "and", "as", "asc", "between", "by", "case",
    "check", "column", "constraint", "create", "database", "default",
    "delete", "desc", "distinct", "drop", "exists", "from", "group",
    "having", "in", "index", "insert", "into", "join", "key", "like",
    "limit", "not", "null", "or", "order", "primary", "references",
    "select", "set", "table", "union", "unique", "update", "user",
    "values", "where",
]

# ---------------------------------------------------------------------------
# 1. JavaScript
# ---------------------------------------------------------------------------

_JAVASCRIPT: _Entry = (
    PresetMetadata(
        name="javascript",
        language="javascript",
        description="camelCase values, PascalCase types, kebab-case files.",
        tags=("eslint", "web"),
    ),
    {
        "language": "javascript",
        "rules": [
            {"name": "js-variable", "kinds": ["variable", "parameter", "property"], "casing": ["camelCase"]},
            {"name": "js-constant", "kinds": ["constant"], "casing": ["SCREAMING_SNAKE_CASE", "camelCase"]},
            {"name": "js-function", "kinds": ["function", "method"], "casing": ["camelCase"]},
            {"name": "js-class", "kinds": ["class", "enum"], "casing": ["PascalCase"]},
            {"name": "js-enum-member", "kinds": ["enumMember"], "casing": ["PascalCase", "SCREAMING_SNAKE_CASE"]},
            {"name": "js-private-field", "kinds": ["privateField"], "casing": ["camelCase"], "prefix": "#"},
            {
                "name": "js-boolean",
                "kinds": ["booleanVariable", "booleanProperty"],
                "casing": ["camelCase"],
                "prefix": _BOOLEAN_PREFIXES,
            },
            {"name": "js-exception", "kinds": ["exception"], "casing": ["PascalCase"], "suffix": "Error"},
            {"name": "js-file", "kinds": ["file", "directory", "module"], "casing": ["kebab-case"]},
        ],
    },
)

# ---------------------------------------------------------------------------
# 2. TypeScript
# ---------------------------------------------------------------------------

_TYPESCRIPT: _Entry = (
    PresetMetadata(
        name="typescript",
        language="typescript",
        description="JavaScript conventions plus PascalCase types without an I prefix.",
        tags=("eslint", "typescript-eslint", "web"),
    ),
    {
        "language": "typescript",
        "rules": [
            {"name": "ts-variable", "kinds": ["variable", "parameter", "property"], "casing": ["camelCase"]},
            {"name": "ts-constant", "kinds": ["constant"], "casing": ["SCREAMING_SNAKE_CASE", "camelCase"]},
            {"name": "ts-function", "kinds": ["function", "method"], "casing": ["camelCase"]},
            {"name": "ts-class", "kinds": ["class", "enum", "typeAlias"], "casing": ["PascalCase"]},
            {
                "name": "ts-interface",
                "kinds": ["interface"],
                "casing": ["PascalCase"],
                "forbidden": ["^I[A-Z]"],
                "description": "Hungarian-style I prefixes are not used for interfaces.",
            },
            {"name": "ts-type-parameter", "kinds": ["typeParameter"], "casing": ["PascalCase"], "prefix": "T"},
            {"name": "ts-enum-member", "kinds": ["enumMember"], "casing": ["PascalCase"]},
            {"name": "ts-private-field", "kinds": ["privateField"], "casing": ["camelCase"], "forbidden": ["^_"]},
            {
                "name": "ts-boolean",
                "kinds": ["booleanVariable", "booleanProperty"],
                "casing": ["camelCase"],
                "prefix": _BOOLEAN_PREFIXES,
            },
            {"name": "ts-exception", "kinds": ["exception"], "casing": ["PascalCase"], "suffix": "Error"},
            {"name": "ts-decorator", "kinds": ["decorator"], "casing": ["PascalCase", "camelCase"]},
            {"name": "ts-file", "kinds": ["file", "directory", "module"], "casing": ["kebab-case"]},
        ],
    },
)

# ---------------------------------------------------------------------------
# 3. CSS / HTML (BEM)
# ---------------------------------------------------------------------------

_BEM_WORD = r"[a-z][a-z0-9]*(?:-[a-z0-9]+)*"

_CSS: _Entry = (
    PresetMetadata(
        name="css",
        language="css",
        description="kebab-case selectors and custom properties, BEM class structure.",
        tags=("stylelint", "bem", "html"),
    ),
    {
        "language": "css",
        "rules": [
            {"name": "css-class", "kinds": ["cssClass", "bemBlock"], "casing": ["kebab-case"]},
            {"name": "css-id", "kinds": ["cssId"], "casing": ["kebab-case"]},
            {
                "name": "css-bem-element",
                "kinds": ["bemElement"],
                "pattern": rf"{_BEM_WORD}__{_BEM_WORD}",
                "description": "block__element",
            },
            {
                "name": "css-bem-modifier",
                "kinds": ["bemModifier"],
                "pattern": rf"{_BEM_WORD}(?:__{_BEM_WORD})?--{_BEM_WORD}",
                "description": "block--modifier or block__element--modifier",
            },
            {"name": "css-custom-property", "kinds": ["cssCustomProperty"], "casing": ["kebab-case"], "prefix": "--"},
            {"name": "html-data-attribute", "kinds": ["htmlDataAttribute"], "casing": ["kebab-case"], "prefix": "data-"},
            {"name": "css-file", "kinds": ["file", "directory"], "casing": ["kebab-case"]},
        ],
    },
)

# ---------------------------------------------------------------------------
# 4. C++
# ---------------------------------------------------------------------------

_CPP: _Entry = (
    PresetMetadata(
        name="cpp",
        language="cpp",
        description="snake_case values, PascalCase types, kConstants, trailing-underscore members.",
        tags=("clang-tidy", "google"),
    ),
    {
        "language": "cpp",
        "rules": [
            {"name": "cpp-variable", "kinds": ["variable", "parameter"], "casing": ["snake_case"], "forbidden": _CPP_RESERVED},
            {
                "name": "cpp-function",
                "kinds": ["function", "method"],
                "casing": ["snake_case", "PascalCase"],
                "forbidden": _CPP_RESERVED,
                "description": "Both STL-style and Google-style function names are accepted.",
            },
            {"name": "cpp-class", "kinds": ["class", "enum", "typeAlias"], "casing": ["PascalCase"], "forbidden": _CPP_RESERVED},
            {
                "name": "cpp-exception",
                "kinds": ["exception"],
                "casing": ["PascalCase"],
                "suffix": ["Error", "Exception"],
                "forbidden": _CPP_RESERVED,
            },
            {"name": "cpp-constant", "kinds": ["constant"], "casing": ["PascalCase"], "prefix": "k"},
            {"name": "cpp-enum-member", "kinds": ["enumMember"], "casing": ["PascalCase", "SCREAMING_SNAKE_CASE"]},
            {"name": "cpp-private-field", "kinds": ["privateField"], "casing": ["snake_case"], "suffix": "_"},
            {"name": "cpp-static-field", "kinds": ["staticField"], "casing": ["snake_case"], "suffix": "_"},
            {"name": "cpp-macro", "kinds": ["macro"], "casing": ["SCREAMING_SNAKE_CASE"], "forbidden": _CPP_RESERVED},
            {"name": "cpp-namespace", "kinds": ["namespace"], "casing": ["snake_case"]},
            {"name": "cpp-file", "kinds": ["file"], "casing": ["snake_case"]},
        ],
    },
)

# ---------------------------------------------------------------------------
# 5. PHP
# ---------------------------------------------------------------------------

_PHP: _Entry = (
    PresetMetadata(
        name="php",
        language="php",
        description="PSR-1/PSR-12: PascalCase classes, camelCase methods, snake_case functions.",
        tags=("psr", "php-cs-fixer"),
    ),
    {
        "language": "php",
        "rules": [
            {"name": "php-class", "kinds": ["class", "enum", "namespace"], "casing": ["PascalCase"]},
            {"name": "php-interface", "kinds": ["interface"], "casing": ["PascalCase"], "suffix": "Interface"},
            {"name": "php-exception", "kinds": ["exception"], "casing": ["PascalCase"], "suffix": "Exception"},
            {
                "name": "php-method",
                "kinds": ["method"],
                "casing": ["camelCase"],
                "forbidden": ["^__"],
                "description": "Names starting with __ are reserved for magic methods.",
            },
            {"name": "php-function", "kinds": ["function"], "casing": ["snake_case"]},
            {"name": "php-variable", "kinds": ["variable", "parameter", "property", "privateField", "staticField"], "casing": ["camelCase"]},
            {
                "name": "php-boolean",
                "kinds": ["booleanVariable", "booleanProperty"],
                "casing": ["camelCase"],
                "prefix": _BOOLEAN_PREFIXES,
            },
            {"name": "php-constant", "kinds": ["constant", "enumMember"], "casing": ["SCREAMING_SNAKE_CASE"]},
        ],
    },
)

# ---------------------------------------------------------------------------
# 6. MySQL
# ---------------------------------------------------------------------------

_MYSQL: _Entry = (
    PresetMetadata(
        name="mysql",
        language="mysql",
        description="snake_case schema objects, typed prefixes for indexes and constraints.",
        tags=("sql", "sqlfluff", "database"),
    ),
    {
        "language": "mysql",
        "rules": [
            {"name": "sql-table", "kinds": ["table", "view"], "casing": ["snake_case"], "reserved": _SQL_RESERVED},
            {"name": "sql-column", "kinds": ["column"], "casing": ["snake_case"], "reserved": _SQL_RESERVED},
            {"name": "sql-primary-key", "kinds": ["primaryKey"], "casing": ["snake_case"], "pattern": r"id|[a-z][a-z0-9_]*_id"},
            {"name": "sql-foreign-key", "kinds": ["foreignKey"], "casing": ["snake_case"], "suffix": "_id"},
            {"name": "sql-index", "kinds": ["index"], "casing": ["snake_case"], "prefix": ["idx_", "ux_"]},
            {"name": "sql-constraint", "kinds": ["constraint"], "casing": ["snake_case"], "prefix": ["pk_", "fk_", "uq_", "chk_"]},
            {"name": "sql-trigger", "kinds": ["trigger"], "casing": ["snake_case"], "prefix": "trg_"},
            {
                "name": "sql-procedure",
                "kinds": ["storedProcedure"],
                "casing": ["snake_case"],
                "forbidden": ["^sp_"],
                "description": "sp_ is reserved for system procedures on several engines.",
            },
        ],
    },
)


BUILTIN_PRESETS: dict[str, _Entry] = {
    meta.name: (meta, document)
    for meta, document in (_JAVASCRIPT, _TYPESCRIPT, _CSS, _CPP, _PHP, _MYSQL)
}
