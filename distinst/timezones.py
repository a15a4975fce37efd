"""Time zones and regions found in the system zoneinfo database."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Union

ZONEINFO_DIR = "/usr/share/zoneinfo/"


@dataclass(frozen=True, order=True)
class Region:
    """A region within a zone, such as ``Denver`` in ``America``."""

    name: str
    path: Path

    def install(self, dest: Union[str, os.PathLike]) -> None:
        """Point ``etc/timezone`` under ``dest`` at this region's zoneinfo file."""
        timezone = Path(dest) / "etc" / "timezone"
        timezone.unlink()
        timezone.symlink_to(self.path)


@dataclass(frozen=True, order=True)
class Zone:
    """A time zone directory and its sorted regions."""

    name: str
    regions: tuple[Region, ...] = ()

    def iter_regions(self) -> Iterator[Region]:
        """Iterate over the regions of this zone."""
        return iter(self.regions)


@dataclass(frozen=True)
class Timezones:
    """All zones of a zoneinfo database, sorted."""

    zones: tuple[Zone, ...] = field(default=())

    @classmethod
    def load(cls, root: Union[str, os.PathLike] = ZONEINFO_DIR) -> "Timezones":
        """Read every zone directory under ``root``; plain files at the top are skipped."""
        zones = []
        with os.scandir(root) as entries:
            for entry in entries:
                if not entry.is_dir():
                    continue
                with os.scandir(entry.path) as region_entries:
                    regions = sorted(
                        Region(region.name, Path(region.path)) for region in region_entries
                    )
                zones.append(Zone(entry.name, tuple(regions)))
        return cls(tuple(sorted(zones)))

    def iter_zones(self) -> Iterator[Zone]:
        """Iterate over the zones."""
        return iter(self.zones)