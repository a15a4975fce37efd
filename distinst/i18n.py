"""Supported locales from the i18n SUPPORTED lists, and default locale selection."""

from __future__ import annotations

import functools
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Mapping, Optional, Union

from distinst.main_countries import get_main_country

SUPPORTED_PATHS = (
    Path("/usr/share/i18n/SUPPORTED"),
    Path("/usr/local/share/i18n/SUPPORTED"),
)


@dataclass(frozen=True)
class Codeset:
    """The codeset of a locale, such as ``UTF-8``; ``dot`` marks a ``.UTF-8`` suffix."""

    variant: str
    dot: bool


@dataclass(frozen=True)
class LocaleEntry:
    """One line of a SUPPORTED file: a language, an optional country and codeset."""

    language: str
    country: Optional[str] = None
    codeset: Optional[Codeset] = None


Locale = dict[Optional[str], list[Optional[Codeset]]]
Locales = dict[str, Locale]

_UTF8 = Codeset("UTF-8", True)


def _trim(value: str) -> Optional[str]:
    value = value.strip()
    if not value or "@" in value:
        return None
    return value


def parse_entry(line: str) -> Optional[LocaleEntry]:
    """Parse a line such as ``gv_GB.UTF-8 UTF-8``; blank lines give None."""
    words = line.split()
    if not words:
        return None

    codes = words[0].split("_")
    language = codes[0]
    if len(codes) == 1:
        return LocaleEntry(language)

    parts = codes[1].split(".")
    country = _trim(parts[0])
    if len(parts) > 1:
        return LocaleEntry(language, country, Codeset(parts[1], True))
    if len(words) > 1:
        return LocaleEntry(language, country, Codeset(words[1], False))
    return LocaleEntry(language, country)


def _country_key(country: Optional[str]) -> tuple[bool, str]:
    return (country is not None, country or "")


def parse_locales(
    paths: Iterable[Union[str, os.PathLike]] = SUPPORTED_PATHS,
) -> Locales:
    """Read the SUPPORTED files that exist and group codesets by language and country."""
    collected: dict[str, Locale] = {}
    for path in map(Path, paths):
        if not path.exists():
            continue
        with open(path, encoding="utf-8") as file:
            for line in file:
                entry = parse_entry(line)
                if entry is None:
                    continue
                codesets = collected.setdefault(entry.language, {}).setdefault(
                    entry.country, []
                )
                if entry.codeset not in codesets:
                    codesets.append(entry.codeset)

    return {
        language: {
            country: countries[country] for country in sorted(countries, key=_country_key)
        }
        for language, countries in sorted(collected.items())
    }


@functools.lru_cache(maxsize=None)
def get_locales() -> Locales:
    """The supported locales of this system, read once."""
    return parse_locales()


def _with_codeset(prefix: str, codesets: list[Optional[Codeset]]) -> str:
    if _UTF8 in codesets:
        return f"{prefix}.UTF-8"
    first = codesets[0] if codesets else None
    if first is not None and first.dot:
        return f"{prefix}.{first.variant}"
    return prefix


def get_default(
    lang: str,
    locales: Optional[Locales] = None,
    main_countries: Optional[Mapping[str, str]] = None,
) -> Optional[str]:
    """Return the default locale for a language, such as ``en_US.UTF-8``."""
    locales = get_locales() if locales is None else locales
    value = locales.get(lang)
    if value is None:
        return None

    country = main_countries.get(lang) if main_countries is not None else get_main_country(lang)
    if country is not None:
        codesets = value.get(country)
        prefix = f"{lang}_{country}"
        return prefix if codesets is None else _with_codeset(prefix, codesets)

    if not value:
        return lang

    first_country, codesets = next(iter(value.items()))
    prefix = f"{lang}_{first_country}" if first_country is not None else lang
    return _with_codeset(prefix, codesets)


def get_language_codes(locales: Optional[Locales] = None) -> list[str]:
    """Return every supported language code, sorted."""
    locales = get_locales() if locales is None else locales
    return list(locales)


def get_countries(lang: str, locales: Optional[Locales] = None) -> list[str]:
    """Return the countries of a language; a locale without country shows as ``None``."""
    locales = get_locales() if locales is None else locales
    return [country or "None" for country in locales.get(lang, {})]