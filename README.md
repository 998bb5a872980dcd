# formulaparse

Work with chemical formulas written in the usual compact notation, such as
`H2O`, `Ca(OH)2` or `Mg3(PO4)2`, using a periodic table that you supply as a
plain text file.

It does three jobs:

* **Extend** a formula into one symbol for every atom, so `Ca(OH)2` becomes `Ca O H O H`.
* **Count protons** by adding up the atomic numbers of every atom in the formula.
* **Verify** that the parentheses in each formula are balanced.

## Installation

```
pip install .
```

To install with the test dependencies as well:

```
pip install .[test]
```

## The periodic table file

The periodic table file is a whitespace-separated list of pairs. Each pair is an
element symbol followed by its atomic number:

```
H 1
He 2
C 6
N 7
O 8
Na 11
Mg 12
P 15
Ca 20
```

Reading stops at the first pair whose number is not an integer. If a symbol
appears more than once, the first number given for it is used.

## Command line

```
formulaparse <periodicTable.txt> [-pn|-ext|-v] <input.txt> <output.txt>
```

The input file holds formulas separated by whitespace. The usual layout is one
formula per line.

* `-ext` appends the extended form of each formula to the output file, one line per formula. Each atom is followed by a space.
* `-pn` appends the total proton number of each formula to the output file, one line per formula.
* `-v` checks the parentheses of each formula. It prints
  `Error: Unbalanced parenthesis at line N` for every unbalanced formula, where
  `N` is the formula's position in the input counted from 1. After that it
  always prints `Parentheses are balanced for all chemical formulas`, even
  when errors were reported. The output file argument is required, but it is
  not written.

Results are appended to the output file. Use an empty or new file if you want
only the results of the current run.

The command exits with status 1 in these cases: fewer than four arguments, an
unknown flag, a file that cannot be opened, or a formula that cannot be
expanded. In the last case, the lines for the formulas before it have already
been written.

Example:

```
formulaparse table.txt -pn formulas.txt protons.txt
```

## Library use

```python
from formulaparse.periodic import load_periodic_table
from formulaparse.parser import expand_formula, proton_number, is_balanced

table = load_periodic_table("table.txt")

expand_formula("Ca(OH)2", table)   # ['Ca', 'O', 'H', 'O', 'H']
proton_number("H2O", table)        # 10
is_balanced("Ca(OH2")              # False
```

`read_periodic_table(stream)` reads a table from an open text stream instead of
a path.

You can also call the lower-level steps on their own:

* `tokenize(formula, table)` splits a formula into parentheses, counts and
  element symbols known to the table. Symbols are matched longest first, up to
  three characters. Counts are taken at most two digits at a time. Characters
  that match nothing are dropped.
* `expand(formula)` expands the counts and groups of a formula that has already
  been tokenized. An unclosed `(` is kept in the result.
* `total_protons(atoms, table)` adds up the atomic numbers of a list of atoms.
  Symbols not in the table count as 0.

`PeriodicTable` behaves like a read-only collection of symbols in the order
they were read. It supports `len()`, iteration and `in`. `table.symbols()`
returns the symbols as a list. `table.protons(symbol)` gives the atomic number
of an element, or 0 if the symbol is unknown.

`expand` and `expand_formula` raise `FormulaError`, a subclass of `ValueError`,
when a formula cannot be expanded. This happens when a closing parenthesis has
no opening one, or when a count has nothing before it to repeat.