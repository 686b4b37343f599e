"""Suggestion generator module.

Exports the ``suggest`` function.
"""
from __future__ import annotations

from namecheck.suggest.generator import suggest

__all__ = ["suggest"]
