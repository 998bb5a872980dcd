"""Expand chemical formulas, count their protons and check their parentheses."""

__version__ = "0.1.0"