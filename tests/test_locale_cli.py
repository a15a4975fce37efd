import json

import pytest

from distinst import iso_codes
from distinst.locale_cli import describe_country, describe_language, main


@pytest.fixture
def iso_data(tmp_path, monkeypatch):
    countries = tmp_path / "iso_3166-1.json"
    countries.write_text(
        json.dumps(
            {
                "3166-1": [
                    {"alpha_2": "XA", "alpha_3": "XAA", "name": "Xaland", "numeric": "900"},
                    {"alpha_2": "XQ", "alpha_3": "XQQ", "name": 'Q"land', "numeric": "902"},
                ]
            }
        )
    )
    langs3 = tmp_path / "iso_639-3.json"
    langs3.write_text(json.dumps({"639-3": [{"alpha_3": "qaa", "name": "Testish"}]}))
    langs5 = tmp_path / "iso_639-5.json"
    langs5.write_text(json.dumps({"639-5": []}))
    locale_dir = tmp_path / "locale"
    locale_dir.mkdir()
    monkeypatch.setattr(iso_codes, "COUNTRIES_JSON", str(countries))
    monkeypatch.setattr(iso_codes, "LANGUAGES_3_JSON", str(langs3))
    monkeypatch.setattr(iso_codes, "LANGUAGES_5_JSON", str(langs5))
    monkeypatch.setattr(iso_codes, "LOCALE_DIR", str(locale_dir))


def test_describe_language(iso_data):
    assert describe_language("qaa") == 'qaa: Some("Testish") => Some("Testish"): (default: None)'


def test_describe_unknown_language(iso_data):
    assert describe_language("zzzz") == "zzzz: None => None: (default: None)"


def test_describe_country(iso_data):
    assert describe_country("XA", "qaa") == 'XA: Some("Xaland") => Some("Xaland")'
    assert describe_country("ZZ", "qaa") == "ZZ: None => None"


def test_describe_country_escapes_quotes(iso_data):
    assert describe_country("XQ", "qaa") == 'XQ: Some("Q\\"land") => Some("Q\\"land")'


def test_main_prints_requested_languages(iso_data, capsys):
    assert main(["qaa", "zzzz"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [describe_language("qaa"), describe_language("zzzz")]