"""PresetLibrary: registry of language naming presets.

Provides :class:`PresetLibrary` for listing, retrieving and loading
rule documents by name.  Built-in presets cover JavaScript, TypeScript,
CSS/HTML, C++, PHP and MySQL and are sourced from
:mod:`namecheck.presets.builtin_presets`.

Usage
-----
::

    from namecheck.presets import PresetLibrary

    lib = PresetLibrary()
    print(lib.list_names())
    rules = lib.load_rules("typescript")

    # Register a house preset
    lib.register("house-js", document={"language": "javascript", "rules": [...]})
    assert "house-js" in lib
"""
from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any

from namecheck.rules.loader import load_rule_document
from namecheck.rules.model import NamingRule, RuleSource


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PresetMetadata:
    """Metadata for a single preset entry.

    Parameters
    ----------
    name:
        Unique registry key for this preset.
    language:
        Language tag the preset's rules apply to.
    description:
        One-sentence summary of the conventions it encodes.
    tags:
        Free-form labels for search/filtering.
    version:
        Version string for the preset itself.
    """

    name: str
    language: str
    description: str
    tags: tuple[str, ...] = ()
    version: str = "1.0"


@dataclass
class _PresetEntry:
    metadata: PresetMetadata
    document: dict[str, Any]


# ---------------------------------------------------------------------------
# PresetLibrary
# ---------------------------------------------------------------------------


class PresetLibrary:
    """Registry of naming presets indexed by name.

    Parameters
    ----------
    auto_load_builtins:
        If ``True`` (default), the built-in presets are registered at
        construction time.

    Raises
    ------
    KeyError
        When a lookup names an unknown preset.
    ValueError
        When :meth:`register` is called with a duplicate name and
        ``overwrite=False``.
    """

    def __init__(self, auto_load_builtins: bool = True) -> None:
        self._registry: dict[str, _PresetEntry] = {}
        if auto_load_builtins:
            self._load_builtins()

    def _load_builtins(self) -> None:
        from namecheck.presets.builtin_presets import BUILTIN_PRESETS

        for name, (meta, document) in BUILTIN_PRESETS.items():
            self._registry[name] = _PresetEntry(metadata=meta, document=document)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def register(
        self,
        name: str,
        document: dict[str, Any],
        description: str = "",
        tags: tuple[str, ...] = (),
        version: str = "1.0",
        overwrite: bool = False,
    ) -> None:
        """Register a rule document as preset *name*.

        The document's ``language`` becomes the preset's language.  The
        document is validated immediately so a broken preset fails at
        registration rather than at first use.

        Raises
        ------
        ValueError
            If *name* is already registered and *overwrite* is False.
        ConfigurationError
            If *document* is not a valid rule document.
        """
        if name in self._registry and not overwrite:
            raise ValueError(
                f"Preset '{name}' is already registered. "
                "Use overwrite=True to replace it."
            )
        load_rule_document(document, default_layer=RuleSource.PRESET, origin=name)
        meta = PresetMetadata(
            name=name,
            language=str(document.get("language", "")).lower(),
            description=description or str(document.get("description", "")),
            tags=tags,
            version=version,
        )
        self._registry[name] = _PresetEntry(metadata=meta, document=document)

    def load_document(self, name: str) -> dict[str, Any]:
        """Return a copy of the rule document for preset *name*.

        Raises
        ------
        KeyError
            If no preset with the given *name* is registered.
        """
        try:
            document = self._registry[name].document
        except KeyError:
            available = sorted(self._registry.keys())
            raise KeyError(
                f"Preset '{name}' not found. Available presets: {available}"
            ) from None
        return copy.deepcopy(document)

    def load_rules(self, name: str) -> list[NamingRule]:
        """Return the preset's rules, all in the ``preset`` layer."""
        document = self.load_document(name)
        document.pop("layer", None)
        return load_rule_document(document, default_layer=RuleSource.PRESET, origin=name)

    def get_metadata(self, name: str) -> PresetMetadata:
        try:
            return self._registry[name].metadata
        except KeyError:
            raise KeyError(f"Preset '{name}' not found.") from None

    def list_presets(self) -> list[PresetMetadata]:
        """Return metadata for all registered presets, sorted by name."""
        return [
            entry.metadata
            for entry in sorted(self._registry.values(), key=lambda e: e.metadata.name)
        ]

    def list_names(self) -> list[str]:
        return sorted(self._registry.keys())

    def for_language(self, language: str) -> list[PresetMetadata]:
        """Return presets whose language matches *language* (case-insensitive)."""
        wanted = language.lower()
        return [meta for meta in self.list_presets() if meta.language == wanted]

    def __len__(self) -> int:
        return len(self._registry)

    def __contains__(self, name: object) -> bool:
        return name in self._registry
