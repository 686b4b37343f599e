"""Case classifier: detect and convert identifier casing styles.

The classifier splits a raw identifier into case-agnostic words and
decides which ``CasingStyle`` values it already satisfies.  A string may
satisfy several styles at once (``count`` is camelCase, snake_case,
kebab-case and lowerflat) or none at all (``user_Name``, ``2fa``).  An
empty classification is a normal result, not an error.

Word splitting
--------------
- ``_`` and ``-`` separate words.
- A lower-case letter followed by an upper-case letter starts a new
  word (``fooBar`` -> ``foo``, ``Bar``).
- An upper-case run followed by a lower-case letter ends one letter
  early (``HTTPServer`` -> ``HTTP``, ``Server``).
- Digits never start a word; they stay attached to the preceding one
  (``md5sum``, ``v2Api`` -> ``v2``, ``Api``).  After a digit, an
  upper-case letter starts a word only if the current word has a
  lower-case letter or the next letter is lower-case, so ``MD5SUM`` is
  one word and ``MD5Sum`` is two.

Usage
-----
::

    from namecheck.casing import classify, transform, CasingStyle

    classify("first_name")           # {SNAKE_CASE}
    transform("first_name", None, CasingStyle.CAMEL_CASE)  # "firstName"
"""
from __future__ import annotations

import re

from namecheck.casing.styles import CasingStyle

_VALID_CHARS = re.compile(r"^[A-Za-z0-9_-]+$")
_NON_WORD = re.compile(r"[^A-Za-z0-9]+")
_DIGIT_ACRONYM = re.compile(r"[A-Z][A-Z0-9]*[0-9][a-z0-9]*")

# Most informative first; lowerflat only wins for a single lower-case word.
_STYLE_PRIORITY: tuple[CasingStyle, ...] = (
    CasingStyle.SNAKE_CASE,
    CasingStyle.KEBAB_CASE,
    CasingStyle.SCREAMING_SNAKE_CASE,
    CasingStyle.CAMEL_CASE,
    CasingStyle.PASCAL_CASE,
    CasingStyle.LOWERFLAT,
)


def _split_segment(segment: str) -> list[str]:
    """Split a separator-free run of letters and digits on case boundaries."""
    words: list[str] = []
    current = ""
    for index, char in enumerate(segment):
        if not current:
            current = char
            continue
        prev = current[-1]
        nxt = segment[index + 1] if index + 1 < len(segment) else ""
        boundary = False
        if char.isupper():
            if prev.islower():
                boundary = True
            elif prev.isdigit():
                # ``v2Api`` and ``MD5Sum`` split, ``MD5SUM`` stays one word
                boundary = any(c.islower() for c in current) or nxt.islower()
            elif prev.isupper() and nxt.islower():
                boundary = True
        if boundary:
            words.append(current)
            current = char
        else:
            current += char
    if current:
        words.append(current)
    return words


def split_words(text: str, style: CasingStyle | None = None) -> list[str]:
    """Split ``text`` into case-agnostic words.

    Parameters
    ----------
    text:
        The raw identifier.
    style:
        The style ``text`` is known to be written in.  Separator styles
        split on their separator only; camel/Pascal and unknown styles
        also split on case boundaries.  Characters outside
        ``[A-Za-z0-9]`` always act as separators, so even unclassifiable
        input yields usable words.

    Returns
    -------
    list[str]
        The words, in order, with their original spelling.
    """
    if style in (CasingStyle.SNAKE_CASE, CasingStyle.KEBAB_CASE, CasingStyle.SCREAMING_SNAKE_CASE):
        return [w for w in _NON_WORD.split(text) if w]
    words: list[str] = []
    for segment in _NON_WORD.split(text):
        if segment:
            words.extend(_split_segment(segment))
    return words


def _is_lower(word: str) -> bool:
    return word == word.lower()


def _is_upper(word: str) -> bool:
    return word == word.upper()


def _is_capitalized(word: str) -> bool:
    return word[0].isupper() and _is_lower(word[1:])


def _is_capped(word: str) -> bool:
    """Capitalized, all-caps, or an acronym ending in digits with a lower tail (``XB1a``)."""
    return _is_capitalized(word) or _is_upper(word) or bool(_DIGIT_ACRONYM.fullmatch(word))


def classify(text: str) -> frozenset[CasingStyle]:
    """Return every casing style ``text`` already satisfies.

    Parameters
    ----------
    text:
        The raw identifier.

    Returns
    -------
    frozenset[CasingStyle]
        Possibly empty.  ``CasingStyle.ANY`` is never included.
    """
    if not text or not _VALID_CHARS.match(text) or text[0].isdigit():
        return frozenset()

    has_underscore = "_" in text
    has_hyphen = "-" in text
    if has_underscore and has_hyphen:
        return frozenset()

    if has_underscore or has_hyphen:
        separator = "_" if has_underscore else "-"
        segments = text.split(separator)
        if any(not segment for segment in segments):
            return frozenset()
        words = [w for segment in segments for w in _split_segment(segment)]
        if len(words) != len(segments):
            # a segment mixes cases, e.g. ``user_firstName``
            return frozenset()
        if all(_is_lower(w) for w in words):
            if separator == "_":
                return frozenset({CasingStyle.SNAKE_CASE})
            return frozenset({CasingStyle.KEBAB_CASE})
        if separator == "_" and all(_is_upper(w) for w in words):
            return frozenset({CasingStyle.SCREAMING_SNAKE_CASE})
        return frozenset()

    words = _split_segment(text)
    if len(words) == 1:
        word = words[0]
        if _is_lower(word):
            return frozenset({
                CasingStyle.CAMEL_CASE,
                CasingStyle.SNAKE_CASE,
                CasingStyle.KEBAB_CASE,
                CasingStyle.LOWERFLAT,
            })
        if _is_upper(word):
            return frozenset({CasingStyle.SCREAMING_SNAKE_CASE, CasingStyle.PASCAL_CASE})
        if _is_capped(word):
            return frozenset({CasingStyle.PASCAL_CASE})
        return frozenset()

    # Multi-word without separators: all-caps words are tolerated as acronyms.
    tail_ok = all(_is_capped(w) for w in words[1:])
    if not tail_ok:
        return frozenset()
    head = words[0]
    if _is_lower(head):
        return frozenset({CasingStyle.CAMEL_CASE})
    if _is_capped(head):
        return frozenset({CasingStyle.PASCAL_CASE})
    return frozenset()


def primary_style(text: str) -> CasingStyle | None:
    """Return the single most informative style ``text`` satisfies.

    Multi-word classifications are preferred over ``lowerflat``; ``None``
    is returned when ``text`` is unclassifiable.
    """
    styles = classify(text)
    for style in _STYLE_PRIORITY:
        if style in styles:
            return style
    return None


def transform(text: str, source: CasingStyle | None, target: CasingStyle) -> str:
    """Rewrite ``text`` from ``source`` style into ``target`` style.

    Parameters
    ----------
    text:
        The identifier to rewrite.
    source:
        The style ``text`` is written in, or ``None`` to detect it.
    target:
        The style to produce.

    Returns
    -------
    str
        ``text`` unchanged when it already satisfies ``target`` (so
        ``transform(x, A, A) == x``); otherwise the words of ``text``
        re-joined in ``target`` style.  Acronym capitalisation is not
        preserved across a round trip.
    """
    if target is CasingStyle.ANY or target in classify(text):
        return text
    if source is None:
        source = primary_style(text)
    return target.render(split_words(text, source))
