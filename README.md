# distinst

Pieces for writing a Linux distribution installer in Python. Everything is
read from the system's own data files; the package has no dependencies
outside the standard library.

## What is in it

- `distinst.i18n` — parses the supported-locale lists
  (`/usr/share/i18n/SUPPORTED` and `/usr/local/share/i18n/SUPPORTED`) and
  picks a default locale for a language code, such as `en_US.UTF-8`
  (`get_default`, `get_language_codes`, `get_countries`, `parse_entry`,
  `parse_locales`).
- `distinst.main_countries` — the main country of each language code, from
  `/usr/share/language-tools/main-countries` (`get_main_country`,
  `get_main_countries`, `parse_main_countries`). An unreadable file gives an
  empty mapping.
- `distinst.iso_codes` — language names (ISO 639-3 and 639-5) and country
  names (ISO 3166-1) from `/usr/share/iso-codes/json`, and their
  translations through gettext (`get_language_name`,
  `get_language_name_translated`, `get_country`, `get_country_name`,
  `get_country_name_translated`, `Country`, `Language`).
- `distinst.keyboard_layout` — keyboard layouts and their variants from
  `/usr/share/X11/xkb/rules/base.xml` (`get_keyboard_layouts`,
  `parse_keyboard_layouts`).
- `distinst.timezones` — zones and regions under `/usr/share/zoneinfo`
  (`Timezones.load`), and `Region.install`, which replaces `etc/timezone`
  under a target directory with a symlink to the region's zoneinfo file.
- `distinst.os_release` — parses os-release files (`OsRelease.parse`,
  `OsRelease.from_file`, `OsRelease.current` for `/etc/os-release`).
- `distinst.squashfs` — unpacks a `.squashfs` image with `unsquashfs`, or any
  other archive with `tar`, on a pseudo-terminal, and reports each new
  percentage the tool prints (`extract`, `build_command`, `progress_values`).
- `distinst.sector` — `Sector` positions on a device: start, end, absolute
  sector, sectors from the end, megabytes from the start or end, or a
  percentage from 0 to 100.
- `distinst.utils` — file helpers (`read`, `write`, `cp`, `canonicalize`),
  block-device lookups under `/sys` (`resolve_slave`, `resolve_to_physical`,
  `resolve_parent`, `device_maps`), a hash of the `/dev` layout, and `sed`,
  which applies an `s/find/replace/flags` expression to a file and rewrites
  it only when the text changed.

## Installing

```
pip install .
```

Python 3.10 or later is needed. Extraction also needs `unsquashfs` or `tar`
on the `PATH`.

## Listing locales

```
distinst-locales
distinst-locales en de
```

This prints each language code (all supported ones, or those given) with
its name, its translated name and its default locale, and under it each of
its countries with the country's name and its translation.

## Using the library

```python
from distinst.i18n import get_countries, get_default, get_language_codes
from distinst.main_countries import get_main_country

for lang in get_language_codes():
    print(lang, get_default(lang), get_countries(lang))

print(get_main_country("en"))
```

Timezones:

```python
from distinst.timezones import Timezones

for zone in Timezones.load().iter_zones():
    for region in zone.iter_regions():
        print(zone.name, region.name)
```

Keyboard layouts:

```python
from distinst.keyboard_layout import get_keyboard_layouts

for layout in get_keyboard_layouts():
    print(layout.name, layout.description)
    for variant in layout.variants or ():
        print("   ", variant.name, variant.description)
```

Extracting an image with progress; a non-zero exit status of the tool
raises `OSError`:

```python
from distinst.squashfs import extract

extract("filesystem.squashfs", "/mnt/target", lambda percent: print(percent, "%"))
```

## What it does not do

This package does not probe disks, read or write partition tables, format
file systems, detect operating systems already installed on a partition, or
run an installation from start to finish. `Sector` only describes a
position; nothing here turns it into a sector number on a real device.

## Running the tests

```
pip install .[test]
pytest
```