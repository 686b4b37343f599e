"""Plugin subsystem for namecheck.

Third-party configuration adapters register through ``importlib.metadata``
entry-points under the ``namecheck.adapters`` group.

Example
-------
Declare an adapter in pyproject.toml:

.. code-block:: toml

    [project.entry-points."namecheck.adapters"]
    rubocop = "my_package.adapters:RubocopAdapter"
"""
from __future__ import annotations

from namecheck.plugins.registry import (
    PluginAlreadyRegisteredError,
    PluginNotFoundError,
    PluginRegistry,
)

__all__ = ["PluginAlreadyRegisteredError", "PluginNotFoundError", "PluginRegistry"]
