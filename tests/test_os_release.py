import pytest

from distinst.os_release import OsRelease

SAMPLE = """\
NAME="Pop!_OS"
VERSION="22.04 LTS"
ID=pop
ID_LIKE="ubuntu debian"
PRETTY_NAME="Pop!_OS 22.04 LTS"
VERSION_ID="22.04"
HOME_URL="https://pop.example.com/"
SUPPORT_URL="https://support.example.com"
BUG_REPORT_URL="https://bugs.example.com"
PRIVACY_POLICY_URL="https://privacy.example.com"
VERSION_CODENAME=jammy
UBUNTU_CODENAME=jammy
LOGO=distributor-logo-pop-os
"""


def test_parse_known_fields():
    release = OsRelease.parse(SAMPLE)
    assert release.name == "Pop!_OS"
    assert release.version == "22.04 LTS"
    assert release.id == "pop"
    assert release.id_like == "ubuntu debian"
    assert release.pretty_name == "Pop!_OS 22.04 LTS"
    assert release.version_id == "22.04"
    assert release.version_codename == "jammy"
    assert release.bug_report_url == "https://bugs.example.com"
    assert release.privacy_policy_url == "https://privacy.example.com"


def test_parse_unknown_fields_go_to_extra():
    release = OsRelease.parse(SAMPLE)
    assert release.extra == {
        "UBUNTU_CODENAME": "jammy",
        "LOGO": "distributor-logo-pop-os",
    }


def test_comments_blank_and_malformed_lines_skipped():
    release = OsRelease.parse("# comment\n\nnot a pair\nID='arch'\n")
    assert release.id == "arch"
    assert release.name == ""
    assert release.extra == {}


def test_missing_fields_are_empty():
    release = OsRelease.parse("")
    assert release == OsRelease()
    assert release.support_url == ""


def test_from_file_round_trip(tmp_path):
    path = tmp_path / "os-release"
    path.write_text(SAMPLE, encoding="utf-8")
    assert OsRelease.from_file(path) == OsRelease.parse(SAMPLE)


def test_from_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        OsRelease.from_file(tmp_path / "missing")


def test_from_file_rejects_non_utf8(tmp_path):
    path = tmp_path / "os-release"
    path.write_bytes(b"NAME=\xff\xfe\n")
    with pytest.raises(UnicodeDecodeError):
        OsRelease.from_file(path)