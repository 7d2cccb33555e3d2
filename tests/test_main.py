"""
Tests for the command line entry point.
"""
import pytest

from main import EXIT_INVALID_LINES, EXIT_OK, EXIT_SOURCE_NOT_FOUND, main

LINES = [
    "NL12ABNA0123456789\tEUR\t20230115\t1500,00\t1750,50\t20230116\t250,50\tX",
    "NL12ABNA0123456789\tEUR\t20230117\t1750,50\t1700,00\t20230117\t-50,50\t",
]


def test_prints_transfers(write_statement, capsys):
    path = write_statement(LINES)

    assert main([path]) == EXIT_OK

    out = capsys.readouterr().out
    assert "account_number" in out
    assert "250.50" in out
    assert "-50.50" in out


def test_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.tab")]) == EXIT_SOURCE_NOT_FOUND


def test_invalid_line_halts(write_statement):
    path = write_statement([LINES[0], "garbage"])
    assert main([path]) == EXIT_INVALID_LINES


def test_collect_errors(write_statement, capsys, caplog):
    path = write_statement(["garbage", LINES[1]])

    assert main([path, "--collect-errors"]) == EXIT_INVALID_LINES

    assert "-50.50" in capsys.readouterr().out
    assert "Line 1: [CFE_ABN_001]" in caplog.text


def test_export_output(write_statement, tmp_path):
    path = write_statement(LINES)
    output = tmp_path / "out.xlsx"

    assert main([path, "--output", str(output)]) == EXIT_OK
    assert output.exists()


def test_requires_path():
    with pytest.raises(SystemExit):
        main([])


def test_export_without_path_uses_export_dir(write_statement, tmp_path, monkeypatch):
    monkeypatch.setenv("EXPORT_PATH", str(tmp_path / "exports"))
    path = write_statement(LINES)

    assert main([path, "--output"]) == EXIT_OK

    exported = list((tmp_path / "exports").glob("statement_transfers_*.xlsx"))
    assert len(exported) == 1
