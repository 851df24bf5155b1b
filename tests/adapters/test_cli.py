# tests\adapters\test_cli.py
import importlib
import json
import runpy
import sys

import pytest

from deinflector.adapters import cli


def test_lookup_prints_one_key_per_line(capsys):
    exit_code = cli.main(["lookup", "en", "studied"])

    lines = capsys.readouterr().out.splitlines()
    assert exit_code == 0
    assert lines[0] == "studied"
    assert "study" in lines


def test_lookup_joins_words(capsys):
    assert cli.main(["lookup", "en", "looked", "up"]) == 0
    assert "look up" in capsys.readouterr().out.splitlines()


def test_lookup_with_trace(capsys):
    assert cli.main(["lookup", "ko", "한글이다", "--trace"]) == 0

    rows = [line.split("\t") for line in capsys.readouterr().out.splitlines()]
    assert rows[0] == ["한글이다", "[-]", "(input)"]
    assert ["한글", "[n]", "copula#0"] in rows


def test_lookup_unknown_language(capsys):
    assert cli.main(["lookup", "xx", "cats"]) == 1
    assert "Error:" in capsys.readouterr().err


def test_health(capsys):
    assert cli.main(["health"]) == 0

    report = json.loads(capsys.readouterr().out)
    assert {lang["code"] for lang in report["languages"]} == {"en", "ja", "es", "ko"}
    assert all(lang["status"] == "ready" for lang in report["languages"])


def test_languages(capsys):
    assert cli.main(["languages"]) == 0
    out = capsys.readouterr().out
    assert "English" in out
    assert "Korean" in out


def test_missing_command():
    with pytest.raises(SystemExit):
        cli.main([])


def test_entry_module_is_import_safe():
    module = importlib.import_module("deinflector.__main__")
    assert module.main is cli.main


def test_entry_module_runs_as_script(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["deinflector", "languages"])

    with pytest.raises(SystemExit) as excinfo:
        runpy.run_module("deinflector", run_name="__main__")

    assert excinfo.value.code == 0
    assert "Japanese" in capsys.readouterr().out
