"""Building blocks for Linux distribution installers: locales, ISO names, keyboard layouts,
timezones, os-release parsing, sector positions and image extraction."""

__version__ = "0.1.0"

__all__ = [
    "i18n",
    "iso_codes",
    "keyboard_layout",
    "locale_cli",
    "main_countries",
    "os_release",
    "sector",
    "squashfs",
    "timezones",
    "utils",
]