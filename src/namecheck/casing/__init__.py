"""Case classifier module.

Exports ``CasingStyle`` and the ``classify`` / ``transform`` functions.
"""
from __future__ import annotations

from namecheck.casing.classifier import classify, primary_style, split_words, transform
from namecheck.casing.styles import CasingStyle

__all__ = [
    "CasingStyle",
    "classify",
    "primary_style",
    "split_words",
    "transform",
]
