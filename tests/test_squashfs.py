import io
import tarfile

import pytest

from distinst.squashfs import ExtractFormat, build_command, extract, progress_values


def test_format_for_archive():
    assert ExtractFormat.for_archive("/cdrom/casper/filesystem.squashfs") is ExtractFormat.SQUASHFS
    assert ExtractFormat.for_archive("image.tar.gz") is ExtractFormat.TAR
    assert ExtractFormat.for_archive("squashfs") is ExtractFormat.TAR


def test_progress_values_reads_percentages():
    chunks = [b"[====]  12%\r[=====]  50%\n", b"noise\n[======] 100%"]
    assert list(progress_values(chunks)) == [12, 50, 100]


def test_progress_values_skips_bad_lines_and_chunks():
    chunks = [b"[abc%\n", b"\xff[== 30%\n", b"plain 40%\n", b"[==] 45%"]
    assert list(progress_values(chunks)) == [45]


def test_build_command_tar(tmp_path):
    archive = tmp_path / "image.tar"
    archive.write_bytes(b"")
    target = tmp_path / "out"
    target.mkdir()
    command = build_command(archive, target)
    assert command == [
        "tar", "--overwrite", "-xf", str(archive.resolve()), "-C", str(target.resolve()),
    ]


def test_build_command_squashfs_quotes(tmp_path):
    archive = tmp_path / "filesystem.squashfs"
    archive.write_bytes(b"")
    target = tmp_path / "it's"
    target.mkdir()
    command = build_command(archive, target)
    assert command[:3] == ["unsquashfs", "-f", "-d"]
    assert command[3] == str(target.resolve()).replace("'", "'\"'\"'")
    assert command[4] == str(archive.resolve())


def test_build_command_missing_archive(tmp_path):
    with pytest.raises(FileNotFoundError):
        build_command(tmp_path / "missing.tar", tmp_path)


def test_extract_tar(tmp_path):
    archive = tmp_path / "image.tar"
    content = b"hello installer\n"
    with tarfile.open(archive, "w") as tar:
        info = tarfile.TarInfo("etc/hostname")
        info.size = len(content)
        tar.addfile(info, io.BytesIO(content))
    target = tmp_path / "out"
    target.mkdir()

    seen = []
    extract(archive, target, seen.append)
    assert (target / "etc" / "hostname").read_bytes() == content
    assert all(0 < value <= 100 for value in seen)


def test_extract_failure(tmp_path):
    archive = tmp_path / "broken.tar"
    archive.write_bytes(b"this is not a tar archive" * 40)
    target = tmp_path / "out"
    target.mkdir()
    with pytest.raises(OSError, match="archive extraction failed"):
        extract(archive, target, lambda _progress: None)