"""Command line interface for converting prose to other cases."""

from __future__ import annotations

import argparse
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import Iterable, Iterator, List, Optional

from decasify.casing import lowercase, sentencecase, titlecase, uppercase
from decasify.types import Case, Locale, StyleGuide, StyleOptions, StyleOptionsBuilder

_DESCRIPTION = (
    "Convert prose strings to other cases following locale specific rule sets. "
    "Can convert input in any supported language from any case to any other case."
)


def _package_version() -> str:
    try:
        return version("decasify")
    except PackageNotFoundError:
        return "unknown"


def _choice(enum_cls):
    """Build an argparse type accepting an enum's names, ignoring case."""
    names = [member.value for member in enum_cls]

    def convert(value: str):
        lowered = value.lower()
        if lowered not in names:
            raise argparse.ArgumentTypeError(
                f"invalid value '{value}' (possible values: {', '.join(names)})"
            )
        return enum_cls.from_str(lowered)

    convert.__name__ = enum_cls.__name__.lower()
    return convert


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the command."""
    parser = argparse.ArgumentParser(prog="decasify", description=_DESCRIPTION)
    parser.add_argument(
        "-l",
        "--locale",
        type=_choice(Locale),
        default=Locale.EN,
        help="The locale of the input text (default: en)",
    )
    parser.add_argument(
        "-c",
        "--case",
        type=_choice(Case),
        default=Case.TITLE,
        help="The desired output case (default: title)",
    )
    parser.add_argument(
        "-s",
        "--style",
        type=_choice(StyleGuide),
        default=StyleGuide.LANGUAGE_DEFAULT,
        help="Preferred style guide (default: default)",
    )
    parser.add_argument(
        "-O",
        "--overrides",
        nargs="+",
        default=None,
        help="Words whose given casing is kept regardless of the target case",
    )
    parser.add_argument(
        "input",
        nargs="*",
        help="The input string or strings (note STDIN also accepted)",
    )
    parser.add_argument(
        "-V", "--version", action="version", version=f"%(prog)s {_package_version()}"
    )
    return parser


def process(
    strings: Iterable[str],
    locale: Locale,
    case: Case,
    style: StyleGuide,
    opts: StyleOptions,
) -> Iterator[str]:
    """Yield each input string converted to the target case."""
    for string in strings:
        if case is Case.TITLE:
            yield titlecase(string, locale, style, opts)
        elif case is Case.LOWER:
            yield lowercase(string, locale)
        elif case is Case.UPPER:
            yield uppercase(string, locale)
        else:
            yield sentencecase(string, locale)


def _stdin_lines() -> Iterator[str]:
    for line in sys.stdin:
        yield line.rstrip("\n").rstrip("\r")


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command with ``argv`` (defaults to the process arguments)."""
    args = build_parser().parse_args(argv)
    if args.overrides is not None:
        opts = StyleOptionsBuilder().overrides(args.overrides).build()
    else:
        opts = StyleOptions()
    strings: Iterable[str] = [" ".join(args.input)] if args.input else _stdin_lines()
    for output in process(strings, args.locale, args.case, args.style, opts):
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())