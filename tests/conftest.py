"""Shared test fixtures for namecheck.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

import pytest


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "namecheck"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def boolean_property_document() -> dict[str, Any]:
    """A one-rule document: camelCase boolean properties with is/has/can."""
    return {
        "language": "php",
        "rules": [
            {
                "name": "boolean-property",
                "kinds": ["booleanProperty"],
                "casing": ["camelCase"],
                "prefix": ["is", "has", "can"],
            }
        ],
    }


@pytest.fixture()
def mixed_document() -> dict[str, Any]:
    """A small TypeScript policy covering several reason codes."""
    return {
        "language": "typescript",
        "rules": [
            {"name": "variable", "kinds": ["variable"], "casing": ["camelCase"]},
            {
                "name": "interface",
                "kinds": ["interface"],
                "casing": ["PascalCase"],
                "forbidden": ["^I[A-Z]"],
            },
            {
                "name": "exception",
                "kinds": ["exception"],
                "casing": ["PascalCase"],
                "suffix": "Exception",
            },
            {
                "name": "boolean",
                "kinds": ["booleanProperty"],
                "casing": ["camelCase"],
                "prefix": ["is", "has", "can"],
                "severity": "warning",
            },
        ],
    }


@pytest.fixture(autouse=True)
def _reset_namecheck_logger() -> Iterator[None]:
    """Undo the CLI's logging setup so caplog sees namecheck records."""
    yield
    logger = logging.getLogger("namecheck")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
