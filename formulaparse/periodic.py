"""Periodic table data: element symbols and their proton numbers."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from os import PathLike
from typing import TextIO

_INTEGER = re.compile(r"[+-]?\d+")


class PeriodicTable:
    """An ordered collection of element symbols with their proton numbers."""

    def __init__(self, entries: Iterable[tuple[str, int]] = ()) -> None:
        self._entries: list[tuple[str, int]] = list(entries)
        self._protons: dict[str, int] = {}
        for symbol, protons in self._entries:
            self._protons.setdefault(symbol, protons)

    def protons(self, symbol: str) -> int:
        """Return the proton number of ``symbol``, or 0 if it is unknown."""
        return self._protons.get(symbol, 0)

    def symbols(self) -> list[str]:
        """Return the symbols in the order they were read."""
        return [symbol for symbol, _ in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.symbols())

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._protons

    def __repr__(self) -> str:
        return f"PeriodicTable({self._entries!r})"


def read_periodic_table(stream: TextIO) -> PeriodicTable:
    """Read whitespace-separated ``symbol number`` pairs from ``stream``.

    Reading stops at the first pair whose number is not an integer, or when
    fewer than two tokens remain.
    """
    tokens = stream.read().split()
    entries: list[tuple[str, int]] = []
    for symbol, number in zip(tokens[::2], tokens[1::2]):
        if not _INTEGER.fullmatch(number):
            break
        entries.append((symbol, int(number)))
    return PeriodicTable(entries)


def load_periodic_table(path: str | PathLike[str]) -> PeriodicTable:
    """Read a periodic table from the file at ``path``."""
    with open(path, encoding="utf-8") as stream:
        return read_periodic_table(stream)