"""Bit-set families, cube operations, sharp products, variable pairing and DIMACS solution parsing."""

__version__ = "0.1.0"