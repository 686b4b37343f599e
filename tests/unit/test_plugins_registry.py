"""Unit tests for namecheck.plugins.registry: PluginRegistry, its errors and
entry-point loading.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from unittest.mock import MagicMock, patch

import pytest

from namecheck.plugins.registry import (
    PluginAlreadyRegisteredError,
    PluginNotFoundError,
    PluginRegistry,
)
from namecheck.rules import NamecheckError

ENTRY_POINTS = "namecheck.plugins.registry.importlib.metadata.entry_points"
LOGGER = "namecheck.plugins.registry"


# ---------------------------------------------------------------------------
# Sample plugin hierarchy
# ---------------------------------------------------------------------------


class Formatter(ABC):
    @abstractmethod
    def render(self, text: str) -> str: ...


class UpperFormatter(Formatter):
    def render(self, text: str) -> str:
        return text.upper()


class PrefixFormatter(Formatter):
    def __init__(self, prefix: str = "> ") -> None:
        self.prefix = prefix

    def render(self, text: str) -> str:
        return self.prefix + text


class Unrelated:
    """Not a Formatter."""


def _registry(name: str = "formatter") -> PluginRegistry[Formatter]:
    return PluginRegistry(Formatter, name)


def _entry_point(name: str, loaded: object = None, error: Exception | None = None) -> MagicMock:
    ep = MagicMock()
    ep.name = name
    if error is not None:
        ep.load.side_effect = error
    else:
        ep.load.return_value = loaded
    return ep


# ===========================================================================
# Errors
# ===========================================================================


class TestPluginErrors:
    def test_not_found_is_key_error_and_namecheck_error(self) -> None:
        error = PluginNotFoundError("sarif", "formatter", ["json", "yaml"])
        assert isinstance(error, KeyError)
        assert isinstance(error, NamecheckError)
        assert error.plugin_name == "sarif"
        assert error.registry_name == "formatter"
        assert error.available == ["json", "yaml"]

    def test_not_found_message_is_not_quoted(self) -> None:
        error = PluginNotFoundError("sarif", "formatter", ["json"])
        assert str(error) == "No formatter plugin named 'sarif'. Available: json."

    def test_not_found_without_plugins(self) -> None:
        assert str(PluginNotFoundError("x", "formatter")).endswith("Available: none.")

    def test_already_registered_is_value_error(self) -> None:
        error = PluginAlreadyRegisteredError("json", "formatter")
        assert isinstance(error, ValueError)
        assert isinstance(error, NamecheckError)
        assert "'json'" in str(error)
        assert error.registry_name == "formatter"


# ===========================================================================
# Registration
# ===========================================================================


class TestRegistration:
    def test_new_registry_is_empty(self) -> None:
        registry = _registry()
        assert len(registry) == 0
        assert registry.list_plugins() == []
        assert registry.name == "formatter"
        assert repr(registry) == "PluginRegistry('formatter', plugins=[])"

    def test_decorator_returns_class_unchanged(self) -> None:
        registry = _registry()

        @registry.register("upper")
        class Local(UpperFormatter):
            pass

        assert registry.get("upper") is Local
        assert "upper" in registry

    def test_register_class(self) -> None:
        registry = _registry()
        registry.register_class("upper", UpperFormatter)
        registry.register_class("prefix", PrefixFormatter)
        assert len(registry) == 2
        assert repr(registry) == "PluginRegistry('formatter', plugins=['prefix', 'upper'])"

    def test_duplicate_name(self) -> None:
        registry = _registry()
        registry.register_class("upper", UpperFormatter)
        with pytest.raises(PluginAlreadyRegisteredError):
            registry.register_class("upper", PrefixFormatter)
        with pytest.raises(PluginAlreadyRegisteredError):
            registry.register("upper")(PrefixFormatter)

    @pytest.mark.parametrize("candidate", [Unrelated, "UpperFormatter", UpperFormatter()])
    def test_non_subclass_rejected(self, candidate: object) -> None:
        registry = _registry()
        with pytest.raises(TypeError, match="not a subclass of Formatter"):
            registry.register_class("bad", candidate)  # type: ignore[arg-type]
        assert len(registry) == 0

    def test_registration_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        registry = _registry()
        with caplog.at_level(logging.DEBUG, logger=LOGGER):
            registry.register_class("upper", UpperFormatter)
        assert "'upper'" in caplog.text

    def test_deregister(self) -> None:
        registry = _registry()
        registry.register_class("upper", UpperFormatter)
        registry.register_class("prefix", PrefixFormatter)
        registry.deregister("upper")
        assert registry.list_plugins() == ["prefix"]
        with pytest.raises(PluginNotFoundError):
            registry.deregister("upper")


# ===========================================================================
# Lookup
# ===========================================================================


class TestLookup:
    def test_get_unknown_lists_available(self) -> None:
        registry = _registry()
        registry.register_class("upper", UpperFormatter)
        with pytest.raises(PluginNotFoundError) as exc_info:
            registry.get("sarif")
        assert exc_info.value.available == ["upper"]

    def test_create_passes_arguments(self) -> None:
        registry = _registry()
        registry.register_class("prefix", PrefixFormatter)
        formatter = registry.create("prefix", prefix="* ")
        assert isinstance(formatter, PrefixFormatter)
        assert formatter.render("x") == "* x"

    def test_iteration_is_sorted(self) -> None:
        registry = _registry()
        registry.register_class("zeta", UpperFormatter)
        registry.register_class("alpha", PrefixFormatter)
        assert list(registry) == [("alpha", PrefixFormatter), ("zeta", UpperFormatter)]


# ===========================================================================
# Entry points
# ===========================================================================


class TestLoadEntrypoints:
    def test_empty_group(self) -> None:
        registry = _registry()
        with patch(ENTRY_POINTS, return_value=[]):
            assert registry.load_entrypoints("namecheck.formatters") == 0
        assert len(registry) == 0

    def test_registers_valid_plugins(self) -> None:
        registry = _registry()
        eps = [_entry_point("upper", UpperFormatter), _entry_point("prefix", PrefixFormatter)]
        with patch(ENTRY_POINTS, return_value=eps) as entry_points:
            assert registry.load_entrypoints("namecheck.formatters") == 2
        entry_points.assert_called_once_with(group="namecheck.formatters")
        assert registry.get("upper") is UpperFormatter

    def test_existing_names_are_skipped_without_loading(self, caplog: pytest.LogCaptureFixture) -> None:
        registry = _registry()
        registry.register_class("upper", UpperFormatter)
        ep = _entry_point("upper", PrefixFormatter)
        with patch(ENTRY_POINTS, return_value=[ep]):
            with caplog.at_level(logging.DEBUG, logger=LOGGER):
                assert registry.load_entrypoints("namecheck.formatters") == 0
        ep.load.assert_not_called()
        assert registry.get("upper") is UpperFormatter
        assert "already registered" in caplog.text

    def test_import_failure_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        registry = _registry()
        ep = _entry_point("broken", error=ImportError("no module named broken_formatter"))
        with patch(ENTRY_POINTS, return_value=[ep, _entry_point("upper", UpperFormatter)]):
            with caplog.at_level(logging.ERROR, logger=LOGGER):
                assert registry.load_entrypoints("namecheck.formatters") == 1
        assert "broken" in caplog.text
        assert registry.list_plugins() == ["upper"]

    def test_wrong_type_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        registry = _registry()
        with patch(ENTRY_POINTS, return_value=[_entry_point("odd", Unrelated)]):
            with caplog.at_level(logging.WARNING, logger=LOGGER):
                assert registry.load_entrypoints("namecheck.formatters") == 0
        assert "not registered" in caplog.text
        assert len(registry) == 0

    def test_repeated_loading_is_harmless(self) -> None:
        registry = _registry()
        with patch(ENTRY_POINTS, return_value=[_entry_point("upper", UpperFormatter)]):
            assert registry.load_entrypoints("namecheck.formatters") == 1
            assert registry.load_entrypoints("namecheck.formatters") == 0
        assert len(registry) == 1
