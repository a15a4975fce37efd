"""Extract a squashfs image or tarball, reporting progress from the tool's output."""

from __future__ import annotations

import enum
import errno
import fcntl
import logging
import os
import struct
import subprocess
import termios
from pathlib import Path
from typing import Callable, Iterable, Iterator, Union

log = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]

_COLUMNS = 80
_LINES = 30
_READ_SIZE = 0x1000


class ExtractFormat(enum.Enum):
    """The kind of archive being extracted."""

    TAR = "tar"
    SQUASHFS = "squashfs"

    @classmethod
    def for_archive(cls, archive: PathLike) -> "ExtractFormat":
        """Squashfs for a ``.squashfs`` file, tar for anything else."""
        return cls.SQUASHFS if Path(archive).suffix == ".squashfs" else cls.TAR


def progress_values(chunks: Iterable[bytes]) -> Iterator[int]:
    """Yield each new percentage found in ``[...] NN%`` progress lines."""
    last = 0
    for chunk in chunks:
        try:
            text = chunk.decode("utf-8")
        except UnicodeDecodeError:
            continue
        for line in text.replace("\r", "\n").split("\n"):
            if len(line) < 4 or not line.startswith("[") or not line.endswith("%"):
                continue
            try:
                progress = int(line[-4:-1].strip())
            except ValueError:
                continue
            if progress != last:
                yield progress
                last = progress


def _quote(path: Path) -> str:
    return str(path).replace("'", "'\"'\"'")


def build_command(archive: PathLike, directory: PathLike) -> list[str]:
    """Return the extraction command; both paths must exist."""
    archive_path = Path(archive).resolve(strict=True)
    directory_path = Path(directory).resolve(strict=True)
    target = _quote(directory_path)
    source = _quote(archive_path)

    if ExtractFormat.for_archive(archive_path) is ExtractFormat.SQUASHFS:
        return ["unsquashfs", "-f", "-d", target, source]
    return ["tar", "--overwrite", "-xf", source, "-C", target]


def _set_window_size(fd: int, columns: int, lines: int) -> None:
    fcntl.ioctl(fd, termios.TIOCSWINSZ, struct.pack("HHHH", lines, columns, 0, 0))


def _claim_terminal() -> None:
    os.setsid()
    fcntl.ioctl(0, termios.TIOCSCTTY, 1)


def _read_chunks(fd: int) -> Iterator[bytes]:
    while True:
        try:
            data = os.read(fd, _READ_SIZE)
        except OSError as why:
            # EIO is how the master end learns the child closed the terminal.
            if why.errno != errno.EIO:
                log.error("handle error: %s", why)
            return
        if not data:
            return
        yield data


def extract(
    archive: PathLike, directory: PathLike, callback: Callable[[int], None]
) -> None:
    """Extract ``archive`` into ``directory``, calling ``callback`` with each new percentage."""
    command = build_command(archive, directory)
    log.debug("%s", command)

    master, slave = os.openpty()
    try:
        _set_window_size(master, _COLUMNS, _LINES)
        env = dict(os.environ, COLUMNS="", LINES="", TERM="xterm-256color")
        try:
            child = subprocess.Popen(
                command,
                stdin=slave,
                stdout=slave,
                stderr=slave,
                env=env,
                preexec_fn=_claim_terminal,
            )
        finally:
            os.close(slave)

        for progress in progress_values(_read_chunks(master)):
            callback(progress)
        status = child.wait()
    finally:
        os.close(master)

    if status != 0:
        raise OSError(f"archive extraction failed with status: {status}")