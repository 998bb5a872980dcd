"""Command-line entry point for processing chemical formulas."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from pathlib import Path

from formulaparse.parser import FormulaError, expand_formula, is_balanced, total_protons
from formulaparse.periodic import PeriodicTable, load_periodic_table

_PROGRAM = "formulaparse"
_USAGE = f"Usage: {_PROGRAM} <periodicTable.txt> [-pn|-ext|-v] <input.txt> <output.txt>"


def _formulas(path: Path) -> Iterator[str]:
    """Yield the whitespace-separated formulas of the file at ``path``."""
    with path.open(encoding="utf-8") as stream:
        for line in stream:
            yield from line.split()


def _format_atoms(atoms: list[str]) -> str:
    return "".join(f"{atom} " for atom in atoms)


def _write_results(
    flag: str, formulas: list[str], table: PeriodicTable, output: Path
) -> None:
    """Append one result line per formula to ``output``."""
    for formula in formulas:
        atoms = expand_formula(formula, table)
        if flag == "-ext":
            line = _format_atoms(atoms)
        else:
            line = str(total_protons(atoms, table))
        with output.open("a", encoding="utf-8") as stream:
            stream.write(f"{line}\n")


def _verify(formulas: list[str]) -> None:
    for line_number, formula in enumerate(formulas, start=1):
        if not is_balanced(formula):
            print(f"Error: Unbalanced parenthesis at line {line_number}")
    print("Parentheses are balanced for all chemical formulas")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the formula processor and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 4:
        print(_USAGE, file=sys.stderr)
        return 1

    table_path, flag, input_path, output_path = (args[0], args[1], args[2], args[3])

    try:
        formulas = list(_formulas(Path(input_path)))
        table = load_periodic_table(table_path)
    except OSError as exc:
        print(f"File error: {exc.strerror or exc}", file=sys.stderr)
        return 1

    if flag in ("-pn", "-ext"):
        if flag == "-pn":
            print(f"Compute total proton number of formulas in {input_path}")
        else:
            print(f"Compute extended version of formulas in {input_path}")
        try:
            _write_results(flag, formulas, table, Path(output_path))
        except FormulaError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        except OSError as exc:
            print(f"Unable to open file: {exc.strerror or exc}", file=sys.stderr)
            return 1
        print(f"Writing formulas to {output_path}")
    elif flag == "-v":
        print(f"Verify balanced parentheses in {input_path}")
        _verify(formulas)
    else:
        print(f"Unknown flag: {flag}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())