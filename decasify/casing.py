"""Locale-aware case conversion entry points."""

from __future__ import annotations

from decasify import en, tr
from decasify.content import Chunk
from decasify.types import Case, Locale, StyleGuide, StyleOptions, StyleOptionsBuilder

_TITLECASE = {Locale.EN: en.titlecase, Locale.TR: tr.titlecase}
_LOWERCASE = {Locale.EN: en.lowercase, Locale.TR: tr.lowercase}
_UPPERCASE = {Locale.EN: en.uppercase, Locale.TR: tr.uppercase}
_SENTENCECASE = {Locale.EN: en.sentencecase, Locale.TR: tr.sentencecase}


def _options(opts) -> StyleOptions:
    if opts is None or isinstance(opts, (StyleOptions, str, bytes, bytearray)):
        return StyleOptions.from_str(opts)
    return StyleOptionsBuilder().overrides(opts).build()


def case(chunk, case, locale, style=None, opts=None) -> str:
    """Convert text to a case following typesetting conventions for a locale.

    ``opts`` may be a :class:`StyleOptions`, an option name, or an iterable of
    override words.
    """
    target = Case.from_str(case)
    if target is Case.LOWER:
        return lowercase(chunk, locale)
    if target is Case.UPPER:
        return uppercase(chunk, locale)
    if target is Case.SENTENCE:
        return sentencecase(chunk, locale)
    return titlecase(chunk, locale, style, opts)


def titlecase(chunk, locale, style=None, opts=None) -> str:
    """Convert text to title case following typesetting conventions for a locale."""
    convert = _TITLECASE[Locale.from_str(locale)]
    return convert(Chunk.from_str(chunk), StyleGuide.from_str(style), _options(opts))


def lowercase(chunk, locale) -> str:
    """Convert text to lower case following the rules of a locale."""
    return _LOWERCASE[Locale.from_str(locale)](Chunk.from_str(chunk))


def uppercase(chunk, locale) -> str:
    """Convert text to upper case following the rules of a locale."""
    return _UPPERCASE[Locale.from_str(locale)](Chunk.from_str(chunk))


def sentencecase(chunk, locale) -> str:
    """Convert text to sentence case following the rules of a locale."""
    return _SENTENCECASE[Locale.from_str(locale)](Chunk.from_str(chunk))