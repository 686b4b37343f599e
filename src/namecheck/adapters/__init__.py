"""Configuration adapters for existing naming tools.

Importing this package registers the built-in ``eslint``, ``stylelint``
and ``clang-tidy`` adapters.
"""
from __future__ import annotations

from namecheck.adapters.base import (
    ENTRY_POINT_GROUP,
    ConfigAdapter,
    adapter_registry,
    get_adapter,
    list_adapters,
)
from namecheck.adapters.clang_tidy import ClangTidyAdapter
from namecheck.adapters.eslint import EslintAdapter
from namecheck.adapters.stylelint import StylelintAdapter

__all__ = [
    "ENTRY_POINT_GROUP",
    "ConfigAdapter",
    "adapter_registry",
    "get_adapter",
    "list_adapters",
    "ClangTidyAdapter",
    "EslintAdapter",
    "StylelintAdapter",
]
