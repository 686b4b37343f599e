"""Identifier records: the engine's input.

An ``IdentifierRecord`` is one occurrence of a name in source code, as
produced by an upstream extractor: the raw text, its syntactic role, the
scope it was declared in, and the language tag.  Records are immutable
and consumed exactly once.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from namecheck.rules.constructs import ConstructKind
from namecheck.rules.model import Scope


class InvalidRecordError(ValueError):
    """An input record cannot be turned into an ``IdentifierRecord``.

    This is an extraction problem, not a configuration problem: the engine
    skips the record with a warning and carries on.
    """


@dataclass(frozen=True)
class SourceLocation:
    """Where an identifier occurs.  Every field is optional."""

    file: str | None = None
    line: int | None = None
    column: int | None = None

    def __str__(self) -> str:
        parts = [self.file or "<unknown>"]
        if self.line is not None:
            parts.append(str(self.line))
            if self.column is not None:
                parts.append(str(self.column))
        return ":".join(parts)

    def as_dict(self) -> dict[str, Any]:
        return {"file": self.file, "line": self.line, "column": self.column}


@dataclass(frozen=True)
class IdentifierRecord:
    """A single identifier occurrence.

    Parameters
    ----------
    text:
        The identifier exactly as written.
    kind:
        Its syntactic role.
    scope:
        Enclosing scope dimensions (class, table, visibility, ...).
    language:
        Language tag, lower-cased on construction.
    location:
        Optional position in the source file.
    """

    text: str
    kind: ConstructKind
    scope: Scope = field(default_factory=Scope)
    language: str | None = None
    location: SourceLocation = field(default_factory=SourceLocation)

    def __post_init__(self) -> None:
        if self.language is not None:
            object.__setattr__(self, "language", self.language.lower())

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "IdentifierRecord":
        """Build a record from a plain mapping.

        Accepted keys are ``text``, ``kind`` (or ``construct_kind`` /
        ``constructKind``), ``scope``, ``language``, and either a nested
        ``location`` mapping or flat ``file`` / ``line`` / ``column`` keys.

        Raises
        ------
        InvalidRecordError
            If ``text`` or ``kind`` is missing or empty, or the kind is not
            a known construct kind.
        """
        if not isinstance(data, Mapping):
            raise InvalidRecordError(f"record must be a mapping, got {type(data).__name__}")
        text = data.get("text")
        if not text or not isinstance(text, str):
            raise InvalidRecordError("record has no identifier text")
        raw_kind = data.get("kind") or data.get("construct_kind") or data.get("constructKind")
        if not raw_kind:
            raise InvalidRecordError(f"record {text!r} has no construct kind")
        try:
            kind = raw_kind if isinstance(raw_kind, ConstructKind) else ConstructKind.from_name(str(raw_kind))
        except ValueError as exc:
            raise InvalidRecordError(f"record {text!r}: {exc}") from None

        scope_raw = data.get("scope") or {}
        if isinstance(scope_raw, Scope):
            scope = scope_raw
        elif isinstance(scope_raw, Mapping):
            scope = Scope.of(scope_raw)
        else:
            raise InvalidRecordError(f"record {text!r}: scope must be a mapping")

        loc_raw = data.get("location") or data
        location = SourceLocation(
            file=loc_raw.get("file"),
            line=_optional_int(loc_raw.get("line")),
            column=_optional_int(loc_raw.get("column")),
        )
        language = data.get("language")
        return cls(
            text=text,
            kind=kind,
            scope=scope,
            language=str(language) if language else None,
            location=location,
        )

    def as_dict(self) -> dict[str, Any]:
        return {
            "text": self.text,
            "kind": self.kind.value,
            "scope": self.scope.as_dict(),
            "language": self.language,
            "location": self.location.as_dict(),
        }


def _optional_int(value: Any) -> int | None:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise InvalidRecordError(f"expected an integer position, got {value!r}") from None
