"""Pattern matcher module.

Exports ``match``, ``MatchResult`` and ``ReasonCode``.
"""
from __future__ import annotations

from namecheck.matcher.matcher import (
    MatchResult,
    ReasonCode,
    casing_satisfied,
    is_attached_prefix,
    is_attached_suffix,
    match,
)

__all__ = [
    "match",
    "casing_satisfied",
    "is_attached_prefix",
    "is_attached_suffix",
    "MatchResult",
    "ReasonCode",
]
