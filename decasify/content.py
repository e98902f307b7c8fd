"""Splitting text into word and whitespace segments and joining it back."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, Iterator, List, Union

from decasify.types import Word

# Characters with the Unicode White_Space property.
_WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000"
)
_SEGMENT_RE = re.compile(
    f"(?P<separator>[{_WHITESPACE}]+)|(?P<word>[^{_WHITESPACE}]+)"
)


@dataclass(frozen=True)
class Separator:
    """A run of whitespace between words."""

    text: str

    def __str__(self) -> str:
        return self.text


Segment = Union[Separator, Word]


@dataclass
class Chunk:
    """A piece of text as an ordered list of words and separators."""

    segments: List[Segment] = field(default_factory=list)

    @classmethod
    def from_str(cls, text) -> "Chunk":
        if isinstance(text, Chunk):
            return cls(list(text.segments))
        if isinstance(text, (bytes, bytearray)):
            text = bytes(text).decode("utf-8")
        if not isinstance(text, str):
            raise TypeError(f"cannot interpret {type(text).__name__} as text")
        return cls(
            [
                Separator(m["separator"])
                if m["separator"] is not None
                else Word(m["word"])
                for m in _SEGMENT_RE.finditer(text)
            ]
        )

    def __str__(self) -> str:
        return "".join(str(segment) for segment in self.segments)

    def words(self) -> Iterator[Word]:
        """Yield the words of the chunk in order."""
        for segment in self.segments:
            if isinstance(segment, Word):
                yield segment

    def map_words(self, func: Callable[[Word], Union[Word, str]]) -> "Chunk":
        """Return a new chunk with every word replaced by ``func(word)``."""

        def convert(segment: Segment) -> Segment:
            if not isinstance(segment, Word):
                return segment
            result = func(segment)
            return result if isinstance(result, Word) else Word(result)

        return Chunk([convert(segment) for segment in self.segments])