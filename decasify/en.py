"""English casing rules."""

from __future__ import annotations

import itertools
import sys
from typing import Union

from decasify import gruber
from decasify.content import Chunk, Separator
from decasify.types import DecasifyError, StyleGuide, StyleOptions, Word

_ARTICLES = frozenset({"a", "an", "the"})
_CONJUNCTIONS = frozenset(
    {
        "for", "and", "nor", "but", "or", "yet", "so", "both", "either", "neither",
        "not only", "whether", "after", "although", "as", "as if", "as long as",
        "as much as", "as soon as", "as though", "because", "before", "by the time",
        "even if", "even though", "if", "in order that", "in case",
        "in the event that", "lest", "now that", "once", "only", "only if",
        "provided that", "since", "supposing", "that", "than", "though", "till",
        "unless", "until", "when", "whenever", "where", "whereas", "wherever",
        "whether or not", "while",
    }
)
_PREPOSITIONS = frozenset(
    {
        "about", "above", "across", "after", "against", "along", "among", "around",
        "at", "before", "behind", "between", "beyond", "but", "by", "concerning",
        "despite", "down", "during", "except", "following", "for", "from", "in",
        "including", "into", "like", "near", "of", "off", "on", "onto", "out",
        "over", "past", "plus", "since", "throughout", "to", "towards", "under",
        "until", "up", "upon", "with", "within", "without",
    }
)
_RESERVED = _ARTICLES | _CONJUNCTIONS | _PREPOSITIONS


def titlecase(chunk, style: StyleGuide, opts: StyleOptions) -> str:
    """Title-case an English chunk according to ``style``."""
    chunk = Chunk.from_str(chunk)
    if style in (StyleGuide.LANGUAGE_DEFAULT, StyleGuide.DARING_FIREBALL):
        return _titlecase_gruber(chunk, opts)
    if style is StyleGuide.ASSOCIATED_PRESS:
        return _titlecase_ap(chunk)
    if style is StyleGuide.CHICAGO_MANUAL_OF_STYLE:
        return _titlecase_cmos(chunk)
    raise DecasifyError("English implementation doesn't support this style guide.")


def _titlecase_ap(chunk: Chunk) -> str:
    print("AP style guide not implemented, string returned as-is!", file=sys.stderr)
    return str(chunk)


def _titlecase_cmos(chunk: Chunk) -> str:
    last = sum(1 for _ in chunk.words()) - 1
    position = itertools.count()

    def convert(word: Word) -> str:
        index = next(position)
        if index in (0, last) or not is_reserved(word):
            return word.titlecase_lower_rest()
        return word.lowercase()

    return str(chunk.map_words(convert))


def _titlecase_gruber(chunk: Chunk, opts: StyleOptions) -> str:
    segments = chunk.segments
    leading = str(segments[0]) if segments and isinstance(segments[0], Separator) else ""
    trailing = (
        str(segments[-1]) if segments and isinstance(segments[-1], Separator) else ""
    )
    titled = gruber.titlecase(str(chunk))
    if opts.overrides is not None:
        titled = str(
            Chunk.from_str(titled).map_words(
                lambda word: opts.find_override(word, str.lower) or word
            )
        )
    return f"{leading}{titled}{trailing}"


def is_reserved(word: Union[Word, str]) -> bool:
    """Whether a word is an article, conjunction or preposition."""
    text = word.word if isinstance(word, Word) else word
    return text.lower() in _RESERVED


def lowercase(chunk) -> str:
    return str(Chunk.from_str(chunk).map_words(Word.lowercase))


def uppercase(chunk) -> str:
    return str(Chunk.from_str(chunk).map_words(Word.uppercase))


def sentencecase(chunk) -> str:
    position = itertools.count()

    def convert(word: Word) -> str:
        if next(position) == 0:
            return word.titlecase_lower_rest()
        return word.lowercase()

    return str(Chunk.from_str(chunk).map_words(convert))