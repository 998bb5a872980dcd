"""Parsing, expansion and proton counting of chemical formulas."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from string import ascii_letters, ascii_lowercase, digits

from formulaparse.periodic import PeriodicTable

_MAX_SYMBOL_LENGTH = 3


class FormulaError(ValueError):
    """Raised when a formula cannot be expanded."""


def is_balanced(formula: str) -> bool:
    """Return True if every parenthesis in ``formula`` is matched."""
    depth = 0
    for char in formula:
        if char == "(":
            depth += 1
        elif char == ")":
            if depth == 0:
                return False
            depth -= 1
    return depth == 0


def tokenize(formula: str, table: PeriodicTable) -> list[str]:
    """Split ``formula`` into parentheses, counts and known element symbols.

    Counts are taken at most two digits at a time. Element symbols are
    matched greedily, longest first; characters that match nothing are
    dropped.
    """
    tokens: list[str] = []
    position = 0
    length = len(formula)
    while position < length:
        char = formula[position]
        if char in "()":
            tokens.append(char)
            position += 1
        elif char in digits:
            width = 2 if position + 1 < length and formula[position + 1] in digits else 1
            tokens.append(formula[position:position + width])
            position += width
        else:
            for width in range(_MAX_SYMBOL_LENGTH, 0, -1):
                piece = formula[position:position + width]
                if len(piece) == width and piece in table:
                    tokens.append(piece)
                    position += width
                    break
            else:
                position += 1
    return tokens


def _lex(formula: str) -> list[str]:
    """Split a cleaned formula into items, scanning from the end."""
    items: list[str] = []
    position = len(formula) - 1
    while position >= 0:
        char = formula[position]
        if char in digits:
            end = position
            while position >= 0 and formula[position] in digits:
                position -= 1
            items.append(formula[position + 1:end + 1])
        elif char in ascii_lowercase and position > 0:
            items.append(formula[position - 1:position + 1])
            position -= 2
        else:
            items.append(char)
            position -= 1
    items.reverse()
    return items


def expand(formula: str) -> list[str]:
    """Expand counts and groups in ``formula`` into a flat list of atoms.

    An unclosed ``(`` is kept in the result as it stands.
    """
    items = deque(_lex(formula))
    stack: list[str] = []
    while items:
        item = items.popleft()
        head = item[0]
        if head in ascii_letters:
            stack.append(item)
        elif head in digits:
            if not stack:
                raise FormulaError(f"count {item} has nothing to repeat")
            atom = stack.pop()
            stack.extend([atom] * int(item))
        elif item == "(":
            stack.append(item)
        elif item == ")":
            try:
                opening = len(stack) - 1 - stack[::-1].index("(")
            except ValueError:
                raise FormulaError("unmatched ')'") from None
            group = stack[opening + 1:]
            del stack[opening:]
            count = 1
            if items and items[0][0] in digits:
                count = int(items.popleft())
            stack.extend(group * count)
    return stack


def total_protons(atoms: Iterable[str], table: PeriodicTable) -> int:
    """Return the sum of the proton numbers of ``atoms``."""
    return sum(table.protons(atom) for atom in atoms)


def expand_formula(formula: str, table: PeriodicTable) -> list[str]:
    """Tokenize ``formula`` against ``table`` and expand it into atoms."""
    return expand("".join(tokenize(formula, table)))


def proton_number(formula: str, table: PeriodicTable) -> int:
    """Return the total proton number of ``formula``."""
    return total_protons(expand_formula(formula, table), table)