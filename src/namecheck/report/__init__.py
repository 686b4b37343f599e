"""Report serialization module."""
from __future__ import annotations

from namecheck.report.serializer import ReportSerializer

__all__ = ["ReportSerializer"]
