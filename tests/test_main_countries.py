from distinst.main_countries import (
    get_main_countries,
    get_main_country,
    parse_main_countries,
)

EXAMPLE = """#
aa\taa_ET
ar\tar_EG
bn\tbn_BD
"""


def test_main_countries():
    assert parse_main_countries(EXAMPLE.splitlines()) == {
        "aa": "ET",
        "ar": "EG",
        "bn": "BD",
    }


def test_lines_without_country_are_skipped():
    lines = ["# comment", "xx", "yy yy", "zz zz_ZZ"]
    assert parse_main_countries(lines) == {"zz": "ZZ"}


def test_result_sorted_by_code():
    lines = ["bn\tbn_BD", "aa\taa_ET"]
    assert list(parse_main_countries(lines)) == ["aa", "bn"]


def test_get_main_countries_from_file(tmp_path):
    path = tmp_path / "main-countries"
    path.write_bytes(EXAMPLE.encode() + b"\xff\xfe bad\n")
    assert get_main_countries(path) == {"aa": "ET", "ar": "EG", "bn": "BD"}


def test_get_main_countries_missing_file(tmp_path, capsys):
    assert get_main_countries(tmp_path / "missing") == {}
    assert "could not be opened" in capsys.readouterr().err


def test_get_main_country_unknown_code_is_none():
    assert get_main_country("no-such-language-code") is None


def test_get_main_country_agrees_with_system_file():
    countries = get_main_countries()
    assert all(get_main_country(code) == country for code, country in countries.items())
    assert get_main_country("") is None