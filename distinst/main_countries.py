"""The main country associated with each language code."""

from __future__ import annotations

import functools
import os
import sys
from typing import Iterable, Union

MAIN_COUNTRIES_PATH = "/usr/share/language-tools/main-countries"


def parse_main_countries(lines: Iterable[str]) -> dict[str, str]:
    """Map language codes to country codes from ``code locale`` lines, sorted by code."""
    countries: dict[str, str] = {}
    for line in lines:
        if line.startswith("#"):
            continue
        fields = line.split()
        if len(fields) < 2:
            continue
        code, locale = fields[0], fields[1]
        parts = locale.split("_")
        if len(parts) > 1:
            countries[code] = parts[1]
    return dict(sorted(countries.items()))


def _decoded_lines(data: bytes) -> Iterable[str]:
    for raw in data.splitlines():
        try:
            yield raw.decode("utf-8")
        except UnicodeDecodeError:
            continue


def get_main_countries(
    path: Union[str, os.PathLike] = MAIN_COUNTRIES_PATH,
) -> dict[str, str]:
    """Read the main-countries file; an unreadable file gives an empty mapping."""
    try:
        with open(path, "rb") as file:
            data = file.read()
    except OSError as why:
        print(
            f"{os.fspath(path)!r} could not be opened: {why}. returning empty collection.",
            file=sys.stderr,
        )
        return {}
    return parse_main_countries(_decoded_lines(data))


@functools.lru_cache(maxsize=None)
def _system_main_countries() -> dict[str, str]:
    return get_main_countries()


def get_main_country(code: str) -> str | None:
    """Return the main country for a language code, from the system list."""
    return _system_main_countries().get(code)