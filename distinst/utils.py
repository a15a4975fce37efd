"""Filesystem helpers shared by the installer modules."""

from __future__ import annotations

import hashlib
import os
import re
from pathlib import Path
from typing import Callable, Iterable, Iterator, Union

PathLike = Union[str, "os.PathLike[str]"]

_CHUNK = 64 * 1024


def _rewrap(why: OSError, message: str) -> OSError:
    """Build an error of the same kind as ``why`` carrying ``message``."""
    if why.errno is not None:
        return OSError(why.errno, message)
    return OSError(message)


def open_file(path: PathLike):
    """Open ``path`` for binary reading, naming the path in any error."""
    try:
        return open(path, "rb")
    except OSError as why:
        raise _rewrap(why, f"unable to open file at {os.fspath(path)!r}: {why}") from why


def create_file(path: PathLike):
    """Create (or truncate) ``path`` for binary writing, naming the path in any error."""
    try:
        return open(path, "wb")
    except OSError as why:
        raise _rewrap(why, f"unable to create file at {os.fspath(path)!r}: {why}") from why


def cp(src: PathLike, dst: PathLike) -> int:
    """Copy ``src`` to ``dst`` and return the number of bytes copied."""
    try:
        with open_file(src) as source, create_file(dst) as target:
            copied = 0
            for chunk in iter(lambda: source.read(_CHUNK), b""):
                target.write(chunk)
                copied += len(chunk)
            return copied
    except OSError as why:
        raise _rewrap(
            why, f"failed to copy {os.fspath(src)!r} to {os.fspath(dst)!r}: {why}"
        ) from why


def read(path: PathLike) -> bytes:
    """Return the whole contents of ``path``."""
    with open_file(path) as file:
        return file.read()


def write(path: PathLike, contents: Union[str, bytes]) -> None:
    """Replace the contents of ``path``; text is written as UTF-8."""
    data = contents.encode("utf-8") if isinstance(contents, str) else bytes(contents)
    with create_file(path) as file:
        file.write(data)


def device_layout_hash(root: PathLike = "/dev/") -> int:
    """Hash the entries of the device directory, so layout changes can be noticed."""
    digest = hashlib.blake2b(digest_size=8)
    try:
        with os.scandir(root) as it:
            entries = sorted(it, key=lambda entry: entry.name)
    except OSError:
        entries = []

    for entry in entries:
        digest.update(os.fsencode(entry.path))
        digest.update(b"\0")
        try:
            stat = entry.stat(follow_symlinks=False)
        except OSError:
            continue
        born = getattr(stat, "st_birthtime", None)
        if born is not None:
            digest.update(repr(born).encode())

    return int.from_bytes(digest.digest(), "big")


def hasher(key: object) -> int:
    """Return a stable 64-bit hash of ``key``'s representation."""
    digest = hashlib.blake2b(repr(key).encode("utf-8"), digest_size=8)
    return int.from_bytes(digest.digest(), "big")


def canonicalize(path: PathLike) -> Path:
    """Resolve ``path`` until it no longer changes; unresolvable paths come back as given."""
    original = Path(path)
    try:
        current = original.resolve(strict=True)
    except (OSError, RuntimeError):
        return original

    while True:
        try:
            resolved = current.resolve(strict=True)
        except (OSError, RuntimeError):
            break
        if resolved == current:
            break
        current = resolved
    return current


def concat_osstr(parts: Iterable[Union[str, bytes]]) -> Union[str, bytes]:
    """Concatenate path fragments; any bytes fragment makes the result bytes."""
    items = list(parts)
    if any(isinstance(item, bytes) for item in items):
        return b"".join(os.fsencode(item) for item in items)
    return "".join(os.fsdecode(item) for item in items)


def read_dirs(path: PathLike) -> Iterator[os.DirEntry]:
    """Yield the entries of a directory; OSError is raised once iteration starts."""
    with os.scandir(path) as entries:
        yield from entries


def device_maps(root: PathLike = "/dev/mapper") -> list[Path]:
    """Return the paths of all device maps."""
    return [Path(entry.path) for entry in read_dirs(root)]


def resolve_slave(
    name: str,
    sys_root: PathLike = "/sys/class/block",
    dev_root: PathLike = "/dev",
) -> Path | None:
    """Return the single device underneath ``name``, or the device itself if it has none."""
    slaves_dir = Path(sys_root) / name / "slaves"
    if not slaves_dir.exists():
        return Path(dev_root) / name

    try:
        slaves = [entry.name for entry in read_dirs(slaves_dir)]
    except OSError:
        return None

    if len(slaves) == 1:
        return Path(dev_root) / slaves[0]
    return None


def resolve_to_physical(
    name: str,
    sys_root: PathLike = "/sys/class/block",
    dev_root: PathLike = "/dev",
) -> Path | None:
    """Follow the chain of slave devices from ``name`` down to the physical device."""
    physical: Path | None = None
    while True:
        current = physical.name if physical is not None else name
        slave = resolve_slave(current, sys_root, dev_root)
        if slave is not None and slave != physical:
            physical = slave
            continue
        return physical


def resolve_parent(
    name: str,
    sys_root: PathLike = "/sys/block",
    dev_root: PathLike = "/dev",
) -> Path | None:
    """Return the block device whose name prefixes ``name``."""
    try:
        names = sorted(entry.name for entry in read_dirs(sys_root))
    except OSError:
        return None

    for block in names:
        if name.startswith(block):
            return Path(dev_root) / block
    return None


_FLAGS = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "x": re.VERBOSE,
}

_TEMPLATE = re.compile(r"\$(?:\$|(\d+)|\{(\w+)\})")


def _split_command(pattern: str) -> list[str]:
    if not pattern.startswith("s/"):
        raise ValueError(f"not a substitution expression: {pattern!r}")

    fields: list[str] = []
    current: list[str] = []
    escaped = False
    for char in pattern[2:]:
        if escaped:
            if char != "/":
                current.append("\\")
            current.append(char)
            escaped = False
        elif char == "\\":
            escaped = True
        elif char == "/":
            fields.append("".join(current))
            current = []
        else:
            current.append(char)
    if escaped:
        current.append("\\")
    fields.append("".join(current))

    if len(fields) == 2:
        fields.append("")
    if len(fields) != 3:
        raise ValueError(f"malformed substitution expression: {pattern!r}")
    return fields


def _compile_replacement(template: str) -> Callable[[re.Match], str]:
    pieces: list[tuple[bool, str]] = []
    position = 0
    for match in _TEMPLATE.finditer(template):
        pieces.append((False, template[position:match.start()]))
        if match.group(0) == "$$":
            pieces.append((False, "$"))
        else:
            pieces.append((True, match.group(1) or match.group(2)))
        position = match.end()
    pieces.append((False, template[position:]))

    def expand(match: re.Match) -> str:
        out = []
        for is_group, value in pieces:
            if not is_group:
                out.append(value)
                continue
            ref: Union[int, str] = int(value) if value.isdigit() else value
            try:
                out.append(match.group(ref) or "")
            except IndexError:
                pass
        return "".join(out)

    return expand


def sed_replace(text: str, pattern: str) -> str:
    """Apply a ``s/find/replace/flags`` expression to ``text``."""
    find, replacement, flag_text = _split_command(pattern)
    flags = 0
    count = 1
    for flag in flag_text:
        if flag == "g":
            count = 0
        elif flag in _FLAGS:
            flags |= _FLAGS[flag]
        else:
            raise ValueError(f"unknown substitution flag {flag!r} in {pattern!r}")

    try:
        regex = re.compile(find, flags)
    except re.error as why:
        raise ValueError(f"invalid expression {find!r}: {why}") from why
    return regex.sub(_compile_replacement(replacement), text, count=count)


def sed(path: PathLike, pattern: str) -> bool:
    """Apply a sed expression to a file, rewriting it only if it changed."""
    try:
        source = read(path).decode("utf-8")
    except UnicodeDecodeError as why:
        raise ValueError(f"{os.fspath(path)!r} contains non-UTF-8 data") from why

    replaced = sed_replace(source, pattern)
    if replaced == source:
        return False
    write(path, replaced)
    return True