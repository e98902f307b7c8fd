import pytest

from decasify.content import Chunk, Separator
from decasify.types import Word


@pytest.mark.parametrize(
    "text",
    [
        "",
        "foo",
        "a b c",
        "  foo  bar  ",
        "  free  trolling\n  space  ",
        "Q&A with Steve Jobs: 'That's what happens in technology'",
        "aç\u00a0mısın\u3000İLE",
    ],
)
def test_round_trip(text):
    assert str(Chunk.from_str(text)) == text


def test_segments_of_simple_text():
    chunk = Chunk.from_str("a b")
    assert chunk.segments == [Word("a"), Separator(" "), Word("b")]


def test_leading_and_trailing_separators():
    chunk = Chunk.from_str("  foo  ")
    assert chunk.segments == [Separator("  "), Word("foo"), Separator("  ")]


def test_segments_alternate():
    chunk = Chunk.from_str(" x  y\tz\n")
    kinds = [type(segment) for segment in chunk.segments]
    assert all(a is not b for a, b in zip(kinds, kinds[1:]))


def test_empty_text_has_no_segments():
    assert Chunk.from_str("").segments == []


def test_unicode_whitespace_splits():
    words = [w.word for w in Chunk.from_str("a\u00a0b\u2003c").words()]
    assert words == ["a", "b", "c"]


def test_non_whitespace_control_does_not_split():
    words = [w.word for w in Chunk.from_str("a\x1cb").words()]
    assert words == ["a\x1cb"]


def test_words_skips_separators():
    chunk = Chunk.from_str("  serbest  serseri\n  boşluk  ")
    assert [w.word for w in chunk.words()] == ["serbest", "serseri", "boşluk"]


def test_map_words_preserves_separators():
    text = "  foo  bar  "
    original = Chunk.from_str(text)
    mapped = original.map_words(Word.uppercase)
    assert str(mapped) == text.upper()
    assert str(original) == text


def test_map_words_accepts_word_results():
    mapped = Chunk.from_str("foo bar").map_words(lambda w: Word(w.word[::-1]))
    assert [w.word for w in mapped.words()] == ["oof", "rab"]


def test_from_str_copies_chunk():
    chunk = Chunk.from_str("foo bar")
    copy = Chunk.from_str(chunk)
    copy.segments.pop()
    assert str(chunk) == "foo bar"


def test_from_bytes():
    assert str(Chunk.from_str("ilk DAVRANSIN".encode("utf-8"))) == "ilk DAVRANSIN"


def test_from_invalid_type():
    with pytest.raises(TypeError):
        Chunk.from_str(3)