# decasify

Convert prose to other cases following locale specific typesetting rules.
Title casing follows a chosen style guide: Gruber's "Daring Fireball" rules
or the Chicago Manual of Style for English, and the Turkish Language
Institute (TDK) rules for Turkish. Turkish input gets correct dotted and
dotless *i* handling in every case.

## Command line

```sh
decasify "once upon a time"
# Once Upon a Time

decasify -l tr "İLKİ ILIK ÖĞLEN"
# İlki Ilık Öğlen

decasify -c sentence "insert BIKE here"
# Insert bike here

echo "foo bar" | decasify -O fOO
# fOO Bar
```

The options are:

- `-l`, `--locale`: the language of the input, `en` (default) or `tr`.
- `-c`, `--case`: the target case, one of `lower`, `sentence`, `title`
  (default) or `upper`.
- `-s`, `--style`: the style guide for title case, one of `default`
  (default), `gruber`, `cmos`, `ap` or `tdk`.
- `-O`, `--overrides`: words whose spelling is kept exactly as given in
  title case, whatever the style guide would do with them.
- `-V`, `--version`: print the version and exit.

Option values are matched without regard to letter case. All positional
arguments are joined with a space and processed as one string. With no
arguments, standard input is read and converted line by line, one output
line per input line.

## Library

```python
from decasify.casing import case, titlecase, lowercase, uppercase, sentencecase
from decasify.types import Case, Locale, StyleGuide, StyleOptionsBuilder

titlecase("Once UPON A time", Locale.EN, StyleGuide.CHICAGO_MANUAL_OF_STYLE)
# 'Once upon a Time'

lowercase("foo BAR BaZ ILIK İLE", "tr")
# 'foo bar baz ılık ile'

case("WHY THE LONG FACE?", Case.SENTENCE, "en")
# 'Why the long face?'

opts = StyleOptionsBuilder().overrides(["fOO"]).build()
titlecase("foo bar", "tr", StyleGuide.LANGUAGE_DEFAULT, opts)
# 'fOO Bar'
```

`case` and `titlecase` take an optional style guide (default:
`StyleGuide.LANGUAGE_DEFAULT`) and optional options. The options may be a
`StyleOptions`, one of the names `"default"`, `"none"` or `""`, or simply an
iterable of override words.

Locale, case and style guide values can be passed either as enum members or
as their names (`"en"`, `"turkish"`, `"title"`, `"titlecase"`, `"cmos"`,
`"chicago"`, and so on). An unknown name raises `DecasifyError`, a
`ValueError` subclass from `decasify.types`. So does asking for a style guide
the locale does not support, such as `cmos` for Turkish.

Leading and trailing whitespace, and the whitespace between words, is kept
exactly as it was in the input. Text is split into words and separators by
`decasify.content.Chunk`, which can also be used directly.

## Limitations

The Associated Press style guide (`ap`) is accepted but not applied: the text
is returned unchanged and a notice is written to standard error. Only English
and Turkish are supported.