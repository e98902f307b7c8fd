import pytest

from decasify.casing import case, lowercase, sentencecase, titlecase, uppercase
from decasify.types import (
    Case,
    DecasifyError,
    Locale,
    StyleGuide,
    StyleOptions,
    StyleOptionsBuilder,
)


def test_cast_from_str():
    assert titlecase("FIST", "en", "gruber", "default") == "Fist"
    assert titlecase("FIST", "tr", "", "default") == "Fıst"
    assert titlecase("FIST", "tr", "default", "default") == "Fıst"


def test_cast_from_legacy_option():
    assert titlecase("FIST", "en", StyleGuide.DARING_FIREBALL, StyleOptions()) == "Fist"
    assert titlecase("FIST", "en", None, StyleOptions()) == "Fist"


def test_custom_style_guide():
    options = StyleOptionsBuilder().overrides(["fOO"]).build()
    assert titlecase("foo bar", "tr", StyleGuide.LANGUAGE_DEFAULT, options) == "fOO Bar"


def test_overrides_as_word_list():
    assert titlecase("foo bar", "en", None, ["fOO"]) == "fOO Bar"


def test_string_conveniences():
    s = "WHY THE LONG FACE?"
    assert case(s, "sentence", "en", None) == "Why the long face?"
    assert lowercase(s, "en") == "why the long face?"


@pytest.mark.parametrize(
    "target, locale, text, expected",
    [
        (Case.TITLE, Locale.EN, "a b c", "A B C"),
        (Case.LOWER, Locale.EN, "A B C", "a b c"),
        (Case.TITLE, Locale.EN, "  foo  bar  ", "  Foo  Bar  "),
        (Case.TITLE, Locale.TR, "  foo  bar  ", "  Foo  Bar  "),
    ],
)
def test_case(target, locale, text, expected):
    assert case(text, target, locale, StyleGuide.LANGUAGE_DEFAULT, StyleOptions()) == expected


@pytest.mark.parametrize(
    "locale, style, text, expected",
    [
        (Locale.EN, StyleGuide.LANGUAGE_DEFAULT, "a b c", "A B C"),
        (Locale.EN, StyleGuide.CHICAGO_MANUAL_OF_STYLE, "a b c", "A B C"),
        (Locale.EN, StyleGuide.DARING_FIREBALL, "a b c", "A B C"),
        (Locale.EN, StyleGuide.CHICAGO_MANUAL_OF_STYLE, "Once UPON A time", "Once upon a Time"),
        (Locale.EN, StyleGuide.DARING_FIREBALL, "Once UPON A time", "Once UPON a Time"),
        (Locale.EN, StyleGuide.CHICAGO_MANUAL_OF_STYLE, "foo: a baz", "Foo: a Baz"),
        (Locale.EN, StyleGuide.DARING_FIREBALL, "foo: a baz", "Foo: A Baz"),
        (
            Locale.EN,
            StyleGuide.DARING_FIREBALL,
            "Q&A with Steve Jobs: 'That's what happens in technology'",
            "Q&A With Steve Jobs: 'That's What Happens in Technology'",
        ),
        (Locale.EN, StyleGuide.DARING_FIREBALL, "  free  trolling\n  space  ", "  Free  Trolling\n  Space  "),
        (Locale.TR, StyleGuide.LANGUAGE_DEFAULT, "aç mısın", "Aç mısın"),
        (Locale.TR, StyleGuide.LANGUAGE_DEFAULT, "dualarımızda minnettarlık", "Dualarımızda Minnettarlık"),
        (Locale.TR, StyleGuide.LANGUAGE_DEFAULT, "İLKİ ILIK ÖĞLEN", "İlki Ilık Öğlen"),
        (Locale.TR, StyleGuide.LANGUAGE_DEFAULT, "Sen VE ben ile o", "Sen ve Ben ile O"),
        (Locale.TR, StyleGuide.LANGUAGE_DEFAULT, "  serbest  serseri\n  boşluk  ", "  Serbest  Serseri\n  Boşluk  "),
    ],
)
def test_titlecase(locale, style, text, expected):
    assert titlecase(text, locale, style, StyleOptions()) == expected


@pytest.mark.parametrize(
    "locale, text, expected",
    [
        (Locale.EN, "foo BAR BaZ BIKE", "foo bar baz bike"),
        (Locale.TR, "foo BAR BaZ ILIK İLE", "foo bar baz ılık ile"),
    ],
)
def test_lowercase(locale, text, expected):
    assert lowercase(text, locale) == expected


@pytest.mark.parametrize(
    "locale, text, expected",
    [
        (Locale.EN, "foo BAR BaZ bike", "FOO BAR BAZ BIKE"),
        (Locale.TR, "foo BAR BaZ ILIK İLE", "FOO BAR BAZ ILIK İLE"),
    ],
)
def test_uppercase(locale, text, expected):
    assert uppercase(text, locale) == expected


@pytest.mark.parametrize(
    "locale, text, expected",
    [
        (Locale.EN, "insert BIKE here", "Insert bike here"),
        (Locale.TR, "ilk DAVRANSIN", "İlk davransın"),
    ],
)
def test_sentencecase(locale, text, expected):
    assert sentencecase(text, locale) == expected


def test_invalid_locale_raises():
    with pytest.raises(DecasifyError):
        lowercase("foo", "xx")


def test_invalid_case_raises():
    with pytest.raises(DecasifyError):
        case("foo", "camel", "en")


def test_invalid_options_raise():
    with pytest.raises(DecasifyError):
        titlecase("foo", "en", None, "bogus")