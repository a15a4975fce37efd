"""ISO 3166-1 country names and ISO 639 language names, with translations."""

from __future__ import annotations

import functools
import gettext
import json
import os
from dataclasses import dataclass
from typing import Any, Optional

from distinst.i18n import get_default

COUNTRIES_JSON = "/usr/share/iso-codes/json/iso_3166-1.json"
LANGUAGES_3_JSON = "/usr/share/iso-codes/json/iso_639-3.json"
LANGUAGES_5_JSON = "/usr/share/iso-codes/json/iso_639-5.json"
LOCALE_DIR = "/usr/share/locale"


def _load_entries(path: str, key: str) -> list[dict[str, Any]]:
    with open(path, encoding="utf-8") as file:
        data = json.load(file)
    try:
        entries = data[key]
    except (KeyError, TypeError) as why:
        raise ValueError(f"{path!r} holds no {key!r} list") from why
    if not isinstance(entries, list):
        raise ValueError(f"{key!r} in {path!r} is not a list")
    return entries


@dataclass(frozen=True)
class Country:
    """An ISO 3166-1 country."""

    alpha_2: str
    alpha_3: str
    name: str
    numeric: str
    official_name: Optional[str] = None
    common_name: Optional[str] = None

    @classmethod
    def _from_json(cls, item: dict[str, Any]) -> "Country":
        try:
            return cls(
                alpha_2=item["alpha_2"],
                alpha_3=item["alpha_3"],
                name=item["name"],
                numeric=item["numeric"],
                official_name=item.get("official_name"),
                common_name=item.get("common_name"),
            )
        except (KeyError, TypeError) as why:
            raise ValueError(f"invalid country entry: {item!r}") from why

    @classmethod
    def all(cls) -> tuple["Country", ...]:
        """Every country listed in the system ISO 3166-1 file."""
        return _countries(os.fspath(COUNTRIES_JSON))

    @classmethod
    def from_alpha_2(cls, alpha_2: str) -> Optional["Country"]:
        """Find a country by its two-letter code."""
        return next((country for country in cls.all() if country.alpha_2 == alpha_2), None)

    def common(self) -> str:
        """The common name of the country, falling back to its name."""
        return self.common_name if self.common_name is not None else self.name


@dataclass(frozen=True)
class Language:
    """An ISO 639-3 language or ISO 639-5 language family."""

    alpha_3: str
    name: str
    alpha_2: Optional[str] = None

    @classmethod
    def _from_json(cls, item: dict[str, Any]) -> "Language":
        try:
            return cls(alpha_3=item["alpha_3"], name=item["name"], alpha_2=item.get("alpha_2"))
        except (KeyError, TypeError) as why:
            raise ValueError(f"invalid language entry: {item!r}") from why

    @classmethod
    def all(cls) -> tuple["Language", ...]:
        """Every language and language family from the system ISO 639 files."""
        return _languages(os.fspath(LANGUAGES_3_JSON), os.fspath(LANGUAGES_5_JSON))

    @classmethod
    def from_alpha_2(cls, alpha_2: str) -> Optional["Language"]:
        """Find a language by its two-letter code."""
        return next((lang for lang in cls.all() if lang.alpha_2 == alpha_2), None)

    @classmethod
    def from_alpha_3(cls, alpha_3: str) -> Optional["Language"]:
        """Find a language by its three-letter code."""
        return next((lang for lang in cls.all() if lang.alpha_3 == alpha_3), None)


@functools.lru_cache(maxsize=None)
def _countries(path: str) -> tuple[Country, ...]:
    return tuple(Country._from_json(item) for item in _load_entries(path, "3166-1"))


@functools.lru_cache(maxsize=None)
def _languages(path_3: str, path_5: str) -> tuple[Language, ...]:
    languages = [Language._from_json(item) for item in _load_entries(path_3, "639-3")]
    languages.extend(Language._from_json(item) for item in _load_entries(path_5, "639-5"))
    return tuple(languages)


def _translate(domain: str, message: str, lang_code: str) -> str:
    """Translate ``message`` into the default locale of ``lang_code``, or the environment's."""
    default = get_default(lang_code)
    languages = [default] if default else None
    catalog = gettext.translation(
        domain, localedir=os.fspath(LOCALE_DIR), languages=languages, fallback=True
    )
    return catalog.gettext(message)


def get_language_name(code: str) -> Optional[str]:
    """The ISO 639 name of a two- or three-letter language code."""
    if len(code) == 2:
        language = Language.from_alpha_2(code)
    elif len(code) == 3:
        language = Language.from_alpha_3(code)
    else:
        return None
    return language.name if language is not None else None


def get_language_name_translated(code: str) -> Optional[str]:
    """The name of a language, translated into that language."""
    name = get_language_name(code)
    if name is None:
        return None
    return _translate("iso_639_3", name, code)


def get_country(code: str) -> Optional[Country]:
    """The country of an ISO 3166 two-letter code."""
    return Country.from_alpha_2(code)


def get_country_name(code: str) -> Optional[str]:
    """The common name of an ISO 3166 two-letter country code."""
    country = get_country(code)
    return country.common() if country is not None else None


def get_country_name_translated(country_code: str, lang_code: str) -> Optional[str]:
    """The name of a country, translated into the given language."""
    name = get_country_name(country_code)
    if name is None:
        return None
    return _translate("iso_3166", name, lang_code)