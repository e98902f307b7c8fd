"""Turkish casing rules."""

from __future__ import annotations

import itertools
import re
from typing import Union

from decasify.content import Chunk
from decasify.types import DecasifyError, StyleGuide, StyleOptions, Word

_BAGLAC = re.compile(
    r"([Vv][Ee]|[İi][Ll][Ee]|[Yy][Aa]|[Yy][Aa][Hh][Uu][Tt]|[Kk][İi]|[Dd][AaEe])"
)
_SORUEK = re.compile(
    r"([Mm][İiIıUuÜü])([Dd][İiIıUuÜü][Rr]([Ll][AaEe][Rr])?|[Ss][İiIıUuÜü][Nn]"
    r"|[Yy][İiIıUuÜü][Zz]|[Ss][İiIıUuÜü][Nn][İiIıUuÜü][Zz]|[Ll][AaEe][Rr])?"
)


def _lower_tr(text: str) -> str:
    return Word(text).lowercase_tr_az()


def titlecase(chunk, style: StyleGuide, opts: StyleOptions) -> str:
    """Title-case a Turkish chunk according to ``style``."""
    if style in (StyleGuide.LANGUAGE_DEFAULT, StyleGuide.TURKISH_LANGUAGE_INSTITUTE):
        return _titlecase_tdk(Chunk.from_str(chunk), opts)
    raise DecasifyError("Turkish implementation doesn't support different style guides.")


def _titlecase_tdk(chunk: Chunk, opts: StyleOptions) -> str:
    done_first = False

    def convert(word: Word) -> Union[Word, str]:
        nonlocal done_first
        override = opts.find_override(word, _lower_tr)
        if override is not None:
            return override
        if not done_first:
            done_first = True
            return word.titlecase_tr_az_lower_rest()
        if is_reserved(word):
            return word.lowercase_tr_az()
        return word.titlecase_tr_az_lower_rest()

    return str(chunk.map_words(convert))


def is_reserved(word: Union[Word, str]) -> bool:
    """Whether a word is a conjunction or a question particle."""
    text = word.word if isinstance(word, Word) else word
    return bool(_BAGLAC.fullmatch(text) or _SORUEK.fullmatch(text))


def lowercase(chunk) -> str:
    return str(Chunk.from_str(chunk).map_words(Word.lowercase_tr_az))


def uppercase(chunk) -> str:
    return str(Chunk.from_str(chunk).map_words(Word.uppercase_tr_az))


def sentencecase(chunk) -> str:
    position = itertools.count()

    def convert(word: Word) -> str:
        if next(position) == 0:
            return word.titlecase_tr_az_lower_rest()
        return word.lowercase_tr_az()

    return str(Chunk.from_str(chunk).map_words(convert))