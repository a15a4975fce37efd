"""The os-release description of an installed or running system."""

from __future__ import annotations

import functools
import os
from dataclasses import dataclass, field
from typing import Union

OS_RELEASE_PATH = "/etc/os-release"

_FIELDS = {
    "BUG_REPORT_URL": "bug_report_url",
    "HOME_URL": "home_url",
    "ID_LIKE": "id_like",
    "ID": "id",
    "NAME": "name",
    "PRETTY_NAME": "pretty_name",
    "PRIVACY_POLICY_URL": "privacy_policy_url",
    "SUPPORT_URL": "support_url",
    "VERSION_CODENAME": "version_codename",
    "VERSION_ID": "version_id",
    "VERSION": "version",
}


def _unquote(value: str) -> str:
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value


@dataclass(frozen=True)
class OsRelease:
    """Fields of an os-release file; missing fields are empty strings."""

    bug_report_url: str = ""
    home_url: str = ""
    id_like: str = ""
    id: str = ""
    name: str = ""
    pretty_name: str = ""
    privacy_policy_url: str = ""
    support_url: str = ""
    version_codename: str = ""
    version_id: str = ""
    version: str = ""
    extra: dict[str, str] = field(default_factory=dict)

    @classmethod
    def parse(cls, text: str) -> "OsRelease":
        """Parse ``KEY=value`` lines; comments, blank lines and lines without ``=`` are skipped."""
        known: dict[str, str] = {}
        extra: dict[str, str] = {}
        for line in text.splitlines():
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key, value = line.split("=", 1)
            key = key.strip()
            value = _unquote(value)
            if key in _FIELDS:
                known[_FIELDS[key]] = value
            else:
                extra[key] = value
        return cls(**known, extra=extra)

    @classmethod
    def from_file(cls, path: Union[str, os.PathLike]) -> "OsRelease":
        """Read and parse an os-release file; it must be UTF-8."""
        with open(path, encoding="utf-8") as file:
            return cls.parse(file.read())

    @classmethod
    def current(cls) -> "OsRelease":
        """The os-release of the running system, read once."""
        return _current()


@functools.lru_cache(maxsize=None)
def _current() -> OsRelease:
    return OsRelease.from_file(OS_RELEASE_PATH)