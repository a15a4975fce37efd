"""Keyboard layouts and variants from the X11 xkb rules."""

from __future__ import annotations

import os
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Iterator, Optional, Union

from distinst.utils import read

X11_BASE_RULES = "/usr/share/X11/xkb/rules/base.xml"


@dataclass(frozen=True)
class ConfigItem:
    """The name and description of a layout or variant."""

    name: str
    description: str
    short_description: Optional[str] = None


@dataclass(frozen=True)
class KeyboardVariant:
    """A variant of a keyboard layout."""

    config_item: ConfigItem

    @property
    def name(self) -> str:
        return self.config_item.name

    @property
    def description(self) -> str:
        return self.config_item.description


@dataclass(frozen=True)
class KeyboardLayout:
    """A keyboard layout, with its variants if it has any."""

    config_item: ConfigItem
    variants: Optional[tuple[KeyboardVariant, ...]] = None

    @property
    def name(self) -> str:
        return self.config_item.name

    @property
    def description(self) -> str:
        return self.config_item.description


@dataclass(frozen=True)
class KeyboardLayouts:
    """All keyboard layouts of a rules file, in file order."""

    layouts: tuple[KeyboardLayout, ...] = ()

    def __iter__(self) -> Iterator[KeyboardLayout]:
        return iter(self.layouts)

    def __len__(self) -> int:
        return len(self.layouts)


def _text(element: ET.Element, tag: str) -> Optional[str]:
    child = element.find(tag)
    if child is None:
        return None
    return (child.text or "").strip()


def _config_item(element: ET.Element) -> ConfigItem:
    item = element.find("configItem")
    if item is None:
        raise ValueError(f"<{element.tag}> has no configItem")
    name = _text(item, "name")
    description = _text(item, "description")
    if name is None:
        raise ValueError("configItem has no name")
    if description is None:
        raise ValueError(f"configItem {name!r} has no description")
    return ConfigItem(name, description, _text(item, "shortDescription"))


def _layout(element: ET.Element) -> KeyboardLayout:
    variant_list = element.find("variantList")
    variants = None
    if variant_list is not None:
        found = tuple(
            KeyboardVariant(_config_item(variant)) for variant in variant_list.findall("variant")
        )
        variants = found or None
    return KeyboardLayout(_config_item(element), variants)


def parse_keyboard_layouts(source: Union[str, bytes]) -> KeyboardLayouts:
    """Parse the layout list out of an xkb rules document."""
    try:
        root = ET.fromstring(source)
    except ET.ParseError as why:
        raise ValueError(f"invalid keyboard rules: {why}") from why

    layout_list = root.find("layoutList")
    if layout_list is None:
        raise ValueError("keyboard rules have no layoutList")
    return KeyboardLayouts(tuple(_layout(layout) for layout in layout_list.findall("layout")))


def get_keyboard_layouts(path: Union[str, os.PathLike] = X11_BASE_RULES) -> KeyboardLayouts:
    """Read the keyboard layouts from an xkb rules file."""
    return parse_keyboard_layouts(read(path))