"""Built-in and user-registered naming presets."""
from __future__ import annotations

from namecheck.presets.library import PresetLibrary, PresetMetadata

__all__ = ["PresetLibrary", "PresetMetadata"]
