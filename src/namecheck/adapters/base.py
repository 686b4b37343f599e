"""Base class and registry for third-party configuration adapters.

An adapter reads the naming configuration of an existing tool (ESLint,
stylelint, clang-tidy, ...) and translates it into a namecheck rule
document.  Adapters live outside the core: the engine only ever sees
the canonical rule document.

Built-in adapters register with ``@adapter_registry.register(name)``.
Installed packages add more through the ``namecheck.adapters``
entry-point group; :func:`get_adapter` loads those on first use.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path
from typing import Any, ClassVar

from namecheck.plugins.registry import PluginRegistry
from namecheck.rules.errors import AdapterError
from namecheck.rules.loader import read_document

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "namecheck.adapters"


class ConfigAdapter(ABC):
    """Translates one tool's configuration into a rule document.

    Subclasses set ``tool`` and ``language`` and implement
    :meth:`translate`.
    """

    tool: ClassVar[str] = ""
    language: ClassVar[str | None] = None
    description: ClassVar[str] = ""

    @abstractmethod
    def translate(self, config: Mapping[str, Any], origin: str = "<config>") -> dict[str, Any]:
        """Return a rule document equivalent to ``config``.

        Parameters
        ----------
        config:
            The tool's parsed configuration.
        origin:
            Where the configuration came from, used to name the document.

        Raises
        ------
        AdapterError
            If the configuration cannot be translated.
        """

    def read(self, path: str | Path) -> Any:
        """Read the tool's configuration file.  JSON and YAML are accepted."""
        return read_document(path)

    def translate_file(self, path: str | Path) -> dict[str, Any]:
        """Read ``path`` and translate it."""
        config = self.read(path)
        if not isinstance(config, Mapping):
            raise AdapterError(self.tool, f"{path} does not contain a configuration mapping")
        return self.translate(config, origin=str(path))

    def _document(self, origin: str, rules: list[dict[str, Any]]) -> dict[str, Any]:
        logger.debug("%s adapter produced %d rule(s) from %s", self.tool, len(rules), origin)
        document: dict[str, Any] = {"name": f"{self.tool}:{origin}", "rules": rules}
        if self.language is not None:
            document["language"] = self.language
        return document


adapter_registry: PluginRegistry[ConfigAdapter] = PluginRegistry(ConfigAdapter, "adapter")

_entrypoints_loaded = False


def _ensure_entrypoints() -> None:
    global _entrypoints_loaded
    if not _entrypoints_loaded:
        _entrypoints_loaded = True
        adapter_registry.load_entrypoints(ENTRY_POINT_GROUP)


def get_adapter(name: str) -> ConfigAdapter:
    """Return a new instance of the adapter registered as ``name``.

    Raises
    ------
    PluginNotFoundError
        If no adapter of that name is built in or installed.
    """
    _ensure_entrypoints()
    return adapter_registry.create(name)


def list_adapters() -> list[str]:
    _ensure_entrypoints()
    return adapter_registry.list_plugins()
