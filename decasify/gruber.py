"""Title casing after John Gruber's Daring Fireball rules."""

from __future__ import annotations

import itertools
import re

from decasify.content import Chunk, Separator
from decasify.types import Word

_SMALL_WORD = re.compile(
    r"[^\w]*(?:a|an|and|as|at|but|by|en|for|if|in|of|on|or|the|to|v\.?|via|vs\.?)[^\w]*"
)
_DOTTED = re.compile(r"\w\.\w")
_LETTER = re.compile(r"[^\W\d_]")
_CLAUSE_ENDINGS = (":", "?", "!")


def _has_internal_caps(word: str) -> bool:
    first = _LETTER.search(word)
    if first is None:
        return False
    return any(char.isupper() for char in word[first.end():])


def _capitalize(word: str) -> str:
    return _LETTER.sub(lambda m: m.group().title(), word, count=1)


def _process_word(word: str, first: bool, last: bool, after_clause: bool) -> str:
    if _DOTTED.search(word) or _has_internal_caps(word):
        return word
    lowered = word.lower()
    if not (first or last or after_clause) and _SMALL_WORD.fullmatch(lowered):
        return lowered
    return "-".join(_capitalize(part) for part in word.split("-"))


def titlecase(text: str) -> str:
    """Title-case ``text``; surrounding whitespace is trimmed, inner whitespace kept."""
    if not any(char.islower() for char in text):
        text = text.lower()
    segments = list(Chunk.from_str(text).segments)
    while segments and isinstance(segments[0], Separator):
        segments.pop(0)
    while segments and isinstance(segments[-1], Separator):
        segments.pop()
    chunk = Chunk(segments)
    last = sum(1 for _ in chunk.words()) - 1
    position = itertools.count()
    after_clause = False

    def convert(word: Word) -> str:
        nonlocal after_clause
        index = next(position)
        result = _process_word(word.word, index == 0, index == last, after_clause)
        after_clause = word.word.endswith(_CLAUSE_ENDINGS)
        return result

    return str(chunk.map_words(convert))