"""Core value types: words, locales, target cases, style guides and style options."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Tuple, Union

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def _ascii_lower(text: str) -> str:
    return text.translate(_ASCII_LOWER)


def _coerce_text(value: object, kind: str) -> str:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8")
    if isinstance(value, str):
        return value
    raise TypeError(f"cannot interpret {type(value).__name__} as {kind}")


def _lower_tr_az(text: str) -> str:
    return text.replace("İ", "i").replace("I", "ı").lower()


def _upper_tr_az(text: str) -> str:
    return text.replace("i", "İ").upper()


def _title_char_tr_az(char: str) -> str:
    return "İ" if char == "i" else char.title()


class DecasifyError(ValueError):
    """Raised when a locale, case, style guide or option name is not recognised."""


@dataclass(frozen=True)
class Word:
    """Just a single word."""

    word: str

    def __str__(self) -> str:
        return self.word

    def lowercase(self) -> str:
        return self.word.lower()

    def uppercase(self) -> str:
        return self.word.upper()

    def titlecase(self) -> str:
        """Title-case the first character, leaving the rest untouched."""
        if not self.word:
            return ""
        return self.word[0].title() + self.word[1:]

    def titlecase_lower_rest(self) -> str:
        """Title-case the first character and lower-case the rest."""
        if not self.word:
            return ""
        return self.word[0].title() + self.word[1:].lower()

    def lowercase_tr_az(self) -> str:
        return _lower_tr_az(self.word)

    def uppercase_tr_az(self) -> str:
        return _upper_tr_az(self.word)

    def titlecase_tr_az_lower_rest(self) -> str:
        """Title-case with Turkish/Azeri dotted and dotless i rules."""
        if not self.word:
            return ""
        return _title_char_tr_az(self.word[0]) + _lower_tr_az(self.word[1:])


class Locale(enum.Enum):
    """Locale selector to change language support rules of case functions."""

    EN = "en"
    TR = "tr"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_str(cls, value) -> "Locale":
        if isinstance(value, cls):
            return value
        key = _ascii_lower(_coerce_text(value, "locale"))
        try:
            return _LOCALE_NAMES[key]
        except KeyError:
            raise DecasifyError(f"Invalid input language {key}") from None


class Case(enum.Enum):
    """Target case selector."""

    LOWER = "lower"
    SENTENCE = "sentence"
    TITLE = "title"
    UPPER = "upper"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_str(cls, value) -> "Case":
        if isinstance(value, cls):
            return value
        key = _ascii_lower(_coerce_text(value, "case"))
        while key.endswith("case"):
            key = key[: -len("case")]
        try:
            return _CASE_NAMES[key]
        except KeyError:
            raise DecasifyError(f"Invalid target case {key}") from None


class StyleGuide(enum.Enum):
    """Style guide selector to change grammar and context rules used for title casing."""

    ASSOCIATED_PRESS = "ap"
    CHICAGO_MANUAL_OF_STYLE = "cmos"
    DARING_FIREBALL = "gruber"
    LANGUAGE_DEFAULT = "default"
    TURKISH_LANGUAGE_INSTITUTE = "tdk"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_str(cls, value) -> "StyleGuide":
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.LANGUAGE_DEFAULT
        key = _ascii_lower(_coerce_text(value, "style guide"))
        try:
            return _STYLE_GUIDE_NAMES[key]
        except KeyError:
            raise DecasifyError(f"Invalid preferred style guide {key}") from None


_LOCALE_NAMES = {
    "en": Locale.EN,
    "english": Locale.EN,
    "en_en": Locale.EN,
    "tr": Locale.TR,
    "turkish": Locale.TR,
    "tr_tr": Locale.TR,
    "türkçe": Locale.TR,
}

_CASE_NAMES = {
    "lower": Case.LOWER,
    "sentence": Case.SENTENCE,
    "title": Case.TITLE,
    "upper": Case.UPPER,
}

_STYLE_GUIDE_NAMES = {
    "daringfireball": StyleGuide.DARING_FIREBALL,
    "gruber": StyleGuide.DARING_FIREBALL,
    "fireball": StyleGuide.DARING_FIREBALL,
    "associatedpress": StyleGuide.ASSOCIATED_PRESS,
    "ap": StyleGuide.ASSOCIATED_PRESS,
    "chicagoManualofstyle": StyleGuide.CHICAGO_MANUAL_OF_STYLE,
    "chicago": StyleGuide.CHICAGO_MANUAL_OF_STYLE,
    "cmos": StyleGuide.CHICAGO_MANUAL_OF_STYLE,
    "tdk": StyleGuide.TURKISH_LANGUAGE_INSTITUTE,
    "turkishlanguageinstitute": StyleGuide.TURKISH_LANGUAGE_INSTITUTE,
    "default": StyleGuide.LANGUAGE_DEFAULT,
    "languagedefault": StyleGuide.LANGUAGE_DEFAULT,
    "language": StyleGuide.LANGUAGE_DEFAULT,
    "none": StyleGuide.LANGUAGE_DEFAULT,
    "": StyleGuide.LANGUAGE_DEFAULT,
}


def _as_word(value: Union[Word, str]) -> Word:
    if isinstance(value, Word):
        return value
    if isinstance(value, str):
        return Word(value)
    raise TypeError(f"cannot interpret {type(value).__name__} as a word")


@dataclass(frozen=True)
class StyleOptions:
    """Options that adjust how a style guide is applied."""

    overrides: Optional[Tuple[Word, ...]] = None

    @classmethod
    def from_str(cls, value) -> "StyleOptions":
        if isinstance(value, cls):
            return value
        if value is None:
            return cls()
        key = _ascii_lower(_coerce_text(value, "style options"))
        if key in ("default", "none", ""):
            return cls()
        raise DecasifyError(f"Invalid style options {key}")

    def find_override(
        self, word: Union[Word, str], case_fn: Callable[[str], str]
    ) -> Optional[Word]:
        """Return the first override matching ``word`` once both are passed through ``case_fn``."""
        if self.overrides is None:
            return None
        target = case_fn(_as_word(word).word)
        return next((w for w in self.overrides if case_fn(w.word) == target), None)


class StyleOptionsBuilder:
    """Fluent builder for :class:`StyleOptions`."""

    def __init__(self) -> None:
        self._overrides: Optional[Tuple[Word, ...]] = None

    def overrides(self, words: Iterable[Union[Word, str]]) -> "StyleOptionsBuilder":
        self._overrides = tuple(_as_word(w) for w in words)
        return self

    def build(self) -> StyleOptions:
        return StyleOptions(overrides=self._overrides)