"""Casing style definitions.

A ``CasingStyle`` names one of the identifier spelling conventions the
classifier recognises.  Each style carries its wire name (the spelling
used in rule documents) and knows how to render a list of words.
"""
from __future__ import annotations

from enum import Enum


class CasingStyle(Enum):
    """Identifier casing styles.

    ``ANY`` is a wildcard used by the universal default rule: it is
    never reported by ``classify`` but is satisfied by every string.
    """

    CAMEL_CASE = "camelCase"
    PASCAL_CASE = "PascalCase"
    SNAKE_CASE = "snake_case"
    SCREAMING_SNAKE_CASE = "SCREAMING_SNAKE_CASE"
    KEBAB_CASE = "kebab-case"
    LOWERFLAT = "lowerflat"
    ANY = "any"

    @property
    def separator(self) -> str:
        """Return the word separator used when rendering this style."""
        if self in (CasingStyle.SNAKE_CASE, CasingStyle.SCREAMING_SNAKE_CASE):
            return "_"
        if self is CasingStyle.KEBAB_CASE:
            return "-"
        return ""

    def render(self, words: list[str]) -> str:
        """Join ``words`` using this style's capitalisation and separator.

        Parameters
        ----------
        words:
            Case-agnostic words, e.g. ``["user", "ID"]``.

        Returns
        -------
        str
            The rendered identifier.  ``ANY`` renders as camelCase.
        """
        if not words:
            return ""
        if self in (CasingStyle.CAMEL_CASE, CasingStyle.ANY):
            return words[0].lower() + "".join(w.capitalize() for w in words[1:])
        if self is CasingStyle.PASCAL_CASE:
            return "".join(w.capitalize() for w in words)
        if self is CasingStyle.SCREAMING_SNAKE_CASE:
            return "_".join(w.upper() for w in words)
        if self is CasingStyle.LOWERFLAT:
            return "".join(w.lower() for w in words)
        return self.separator.join(w.lower() for w in words)

    def placeholder(self, leading: bool) -> str:
        """Return a one-letter word that is well-cased in this style.

        The matcher substitutes the placeholder for a stripped affix so
        that the remaining core is classified in its real position.

        Parameters
        ----------
        leading:
            ``True`` when the placeholder stands at the start of the
            identifier (a prefix), ``False`` when it follows other words.
        """
        if self in (CasingStyle.PASCAL_CASE, CasingStyle.SCREAMING_SNAKE_CASE):
            return "X"
        if self is CasingStyle.CAMEL_CASE and not leading:
            return "X"
        return "x"

    @classmethod
    def from_name(cls, name: str) -> "CasingStyle":
        """Look up a style by its wire name or enum member name.

        Raises
        ------
        ValueError
            If ``name`` does not name a known style.
        """
        key = name.strip()
        for style in cls:
            if key == style.value or key.upper() == style.name:
                return style
        for alias, style in _ALIASES.items():
            if key.lower() == alias:
                return style
        known = ", ".join(s.value for s in cls)
        raise ValueError(f"Unknown casing style {name!r}. Known styles: {known}")


_ALIASES: dict[str, CasingStyle] = {
    "camel": CasingStyle.CAMEL_CASE,
    "pascal": CasingStyle.PASCAL_CASE,
    "uppercamelcase": CasingStyle.PASCAL_CASE,
    "snake": CasingStyle.SNAKE_CASE,
    "kebab": CasingStyle.KEBAB_CASE,
    "screaming_snake": CasingStyle.SCREAMING_SNAKE_CASE,
    "upper_snake_case": CasingStyle.SCREAMING_SNAKE_CASE,
    "flat": CasingStyle.LOWERFLAT,
    "lowercase": CasingStyle.LOWERFLAT,
}
