from pathlib import Path

import pytest

from formulaparse.cli import main
from formulaparse.parser import expand_formula, proton_number
from formulaparse.periodic import load_periodic_table

TABLE = "H 1\nC 6\nO 8\nNa 11\nCl 17\n"


@pytest.fixture
def files(tmp_path: Path):
    table = tmp_path / "table.txt"
    table.write_text(TABLE, encoding="utf-8")
    source = tmp_path / "input.txt"
    output = tmp_path / "output.txt"
    return table, source, output


def _run(table, flag, source, output):
    return main([str(table), flag, str(source), str(output)])


def test_too_few_arguments(capsys):
    assert main(["a", "-pn", "b"]) == 1
    assert "Usage:" in capsys.readouterr().err


def test_missing_input_file(files, capsys):
    table, source, output = files
    assert _run(table, "-pn", source, output) == 1
    assert "File error" in capsys.readouterr().err
    assert not output.exists()


def test_missing_table_file(files, tmp_path, capsys):
    _, source, output = files
    source.write_text("H2O\n", encoding="utf-8")
    assert _run(tmp_path / "nope.txt", "-pn", source, output) == 1
    assert "File error" in capsys.readouterr().err


def test_unknown_flag(files, capsys):
    table, source, output = files
    source.write_text("H2O\n", encoding="utf-8")
    assert _run(table, "-x", source, output) == 1
    assert "Unknown flag: -x" in capsys.readouterr().err


def test_extended_output(files, capsys):
    table, source, output = files
    source.write_text("H2O\nNaCl\n", encoding="utf-8")
    assert _run(table, "-ext", source, output) == 0
    assert output.read_text(encoding="utf-8") == "H H O \nNa Cl \n"
    out = capsys.readouterr().out
    assert f"Compute extended version of formulas in {source}" in out
    assert f"Writing formulas to {output}" in out


def test_extended_matches_expand_formula(files):
    table, source, output = files
    formulas = ["(CH3)2O", "C2H5OH"]
    source.write_text(" ".join(formulas), encoding="utf-8")
    assert _run(table, "-ext", source, output) == 0
    periodic = load_periodic_table(table)
    lines = output.read_text(encoding="utf-8").splitlines()
    assert [line.split() for line in lines] == [
        expand_formula(formula, periodic) for formula in formulas
    ]


def test_proton_numbers(files, capsys):
    table, source, output = files
    formulas = ["H2O", "(CH3)2O", "NaCl"]
    source.write_text("\n".join(formulas) + "\n", encoding="utf-8")
    assert _run(table, "-pn", source, output) == 0
    periodic = load_periodic_table(table)
    lines = output.read_text(encoding="utf-8").splitlines()
    assert lines == [str(proton_number(formula, periodic)) for formula in formulas]
    assert lines[0] == "10"
    assert "Compute total proton number" in capsys.readouterr().out


def test_output_is_appended(files):
    table, source, output = files
    source.write_text("H2O\n", encoding="utf-8")
    assert _run(table, "-ext", source, output) == 0
    assert _run(table, "-ext", source, output) == 0
    lines = output.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert lines[0] == lines[1]


def test_verify_reports_unbalanced_lines(files, capsys):
    table, source, output = files
    source.write_text("H2O\n(CH3\nNaCl)\n(OH)2\n", encoding="utf-8")
    assert _run(table, "-v", source, output) == 0
    out = capsys.readouterr().out
    assert f"Verify balanced parentheses in {source}" in out
    assert "Error: Unbalanced parenthesis at line 2" in out
    assert "Error: Unbalanced parenthesis at line 3" in out
    assert "line 1\n" not in out
    assert "line 4\n" not in out
    assert not output.exists()


def test_verify_all_balanced(files, capsys):
    table, source, output = files
    source.write_text("H2O (OH)2\n", encoding="utf-8")
    assert _run(table, "-v", source, output) == 0
    out = capsys.readouterr().out
    assert "Error" not in out
    assert "Parentheses are balanced for all chemical formulas" in out


def test_unmatched_close_is_an_error(files, capsys):
    table, source, output = files
    source.write_text("H)\n", encoding="utf-8")
    assert _run(table, "-pn", source, output) == 1
    assert "Error:" in capsys.readouterr().err


def test_extra_arguments_are_ignored(files):
    table, source, output = files
    source.write_text("H2O\n", encoding="utf-8")
    assert main([str(table), "-ext", str(source), str(output), "extra"]) == 0
    assert output.read_text(encoding="utf-8") == "H H O \n"