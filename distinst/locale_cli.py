"""List languages, their default locales and countries, with translated names."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from distinst.i18n import get_countries, get_default, get_language_codes
from distinst.iso_codes import (
    get_country_name,
    get_country_name_translated,
    get_language_name,
    get_language_name_translated,
)


def _debug(value: Optional[str]) -> str:
    if value is None:
        return "None"
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'Some("{escaped}")'


def describe_language(lang_code: str) -> str:
    """One line naming a language, its translated name and its default locale."""
    return (
        f"{lang_code}: {_debug(get_language_name(lang_code))} => "
        f"{_debug(get_language_name_translated(lang_code))}: "
        f"(default: {_debug(get_default(lang_code))})"
    )


def describe_country(country_code: str, lang_code: str) -> str:
    """One line naming a country and its name translated into a language."""
    return (
        f"{country_code}: {_debug(get_country_name(country_code))} => "
        f"{_debug(get_country_name_translated(country_code, lang_code))}"
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="distinst-locales",
        description="List supported languages with their countries and default locales.",
    )
    parser.add_argument(
        "languages", nargs="*", help="language codes to describe (default: all supported)"
    )
    args = parser.parse_args(argv)

    for lang_code in args.languages or get_language_codes():
        print(describe_language(lang_code))
        for country_code in get_countries(lang_code):
            print(f"    {describe_country(country_code, lang_code)}")
    return 0