"""Plugin registry for namecheck.

A ``PluginRegistry`` maps names to subclasses of one abstract base
class.  Built-in implementations register with the ``@register``
decorator at import time; third-party packages declare entry-points and
are picked up by :meth:`PluginRegistry.load_entrypoints`.

Example
-------
::

    from abc import ABC, abstractmethod
    from namecheck.plugins import PluginRegistry

    class BaseExporter(ABC):
        @abstractmethod
        def export(self, report) -> str: ...

    exporters: PluginRegistry[BaseExporter] = PluginRegistry(BaseExporter, "exporters")

    @exporters.register("sarif")
    class SarifExporter(BaseExporter):
        def export(self, report) -> str:
            ...

    exporters.load_entrypoints("namecheck.exporters")
    exporter = exporters.create("sarif")
"""
from __future__ import annotations

import importlib.metadata
import logging
from abc import ABC
from collections.abc import Callable, Iterator
from typing import Any, Generic, TypeVar

from namecheck.rules.errors import NamecheckError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=ABC)


class PluginNotFoundError(NamecheckError, KeyError):
    """Raised when a requested plugin name is not in the registry."""

    def __init__(self, name: str, registry_name: str, available: list[str] | None = None) -> None:
        self.plugin_name = name
        self.registry_name = registry_name
        self.available = available or []
        super().__init__(
            f"No {registry_name} plugin named {name!r}. "
            f"Available: {', '.join(self.available) or 'none'}."
        )

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class PluginAlreadyRegisteredError(NamecheckError, ValueError):
    """Raised when attempting to register a name that already exists."""

    def __init__(self, name: str, registry_name: str) -> None:
        self.plugin_name = name
        self.registry_name = registry_name
        super().__init__(
            f"A {registry_name} plugin named {name!r} is already registered; "
            "deregister it first or pick another name."
        )


class PluginRegistry(Generic[T]):
    """Name-indexed registry of plugin classes sharing a base class.

    Parameters
    ----------
    base_class:
        The abstract base class every plugin must subclass.
    name:
        Human-readable registry name used in log and error messages.
    """

    def __init__(self, base_class: type[T], name: str) -> None:
        self._base_class = base_class
        self._name = name
        self._plugins: dict[str, type[T]] = {}

    @property
    def name(self) -> str:
        return self._name

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def _add(self, name: str, cls: type[T]) -> None:
        if name in self._plugins:
            raise PluginAlreadyRegisteredError(name, self._name)
        if not (isinstance(cls, type) and issubclass(cls, self._base_class)):
            raise TypeError(
                f"{cls!r} cannot be registered as {name!r}: "
                f"not a subclass of {self._base_class.__name__}."
            )
        self._plugins[name] = cls
        logger.debug("Registered %s plugin %r -> %s", self._name, name, cls.__qualname__)

    def register(self, name: str) -> Callable[[type[T]], type[T]]:
        """Return a class decorator registering the class under ``name``.

        The class is returned unchanged.

        Raises
        ------
        PluginAlreadyRegisteredError
            If ``name`` is already in use.
        TypeError
            If the class does not subclass ``base_class``.
        """

        def decorator(cls: type[T]) -> type[T]:
            self._add(name, cls)
            return cls

        return decorator

    def register_class(self, name: str, cls: type[T]) -> None:
        """Register ``cls`` under ``name`` without decorator syntax."""
        self._add(name, cls)

    def deregister(self, name: str) -> None:
        """Remove the plugin registered under ``name``.

        Raises
        ------
        PluginNotFoundError
            If ``name`` is not registered.
        """
        if name not in self._plugins:
            raise PluginNotFoundError(name, self._name, self.list_plugins())
        del self._plugins[name]
        logger.debug("Deregistered %s plugin %r", self._name, name)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, name: str) -> type[T]:
        """Return the class registered under ``name``.

        Raises
        ------
        PluginNotFoundError
            If no plugin is registered under ``name``.
        """
        try:
            return self._plugins[name]
        except KeyError:
            raise PluginNotFoundError(name, self._name, self.list_plugins()) from None

    def create(self, name: str, *args: Any, **kwargs: Any) -> T:
        """Instantiate the plugin registered under ``name``."""
        return self.get(name)(*args, **kwargs)

    def list_plugins(self) -> list[str]:
        """Return registered plugin names in alphabetical order."""
        return sorted(self._plugins)

    def __iter__(self) -> Iterator[tuple[str, type[T]]]:
        return iter(sorted(self._plugins.items()))

    def __contains__(self, name: object) -> bool:
        return name in self._plugins

    def __len__(self) -> int:
        return len(self._plugins)

    def __repr__(self) -> str:
        return f"PluginRegistry({self._name!r}, plugins={self.list_plugins()})"

    # ------------------------------------------------------------------
    # Entry-point loading
    # ------------------------------------------------------------------

    def load_entrypoints(self, group: str) -> int:
        """Register plugins declared under the entry-point ``group``.

        Names that are already registered are skipped, so repeated calls
        are harmless.  An entry-point that fails to import or is not a
        valid plugin class is logged and skipped.

        Parameters
        ----------
        group:
            Entry-point group name, e.g. ``"namecheck.adapters"``.

        Returns
        -------
        int
            Number of plugins newly registered.

        Example
        -------
        In a downstream package's ``pyproject.toml``::

            [project.entry-points."namecheck.adapters"]
            rubocop = "my_package.adapters:RubocopAdapter"
        """
        added = 0
        for ep in importlib.metadata.entry_points(group=group):
            if ep.name in self._plugins:
                logger.debug("Entry-point %r already registered in %r; skipping.", ep.name, self._name)
                continue
            try:
                cls = ep.load()
            except Exception:
                logger.exception("Failed to load entry-point %r from group %r; skipping.", ep.name, group)
                continue
            try:
                self._add(ep.name, cls)
            except (PluginAlreadyRegisteredError, TypeError) as exc:
                logger.warning("Entry-point %r from group %r not registered: %s", ep.name, group, exc)
                continue
            added += 1
        return added
