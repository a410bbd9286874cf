"""Parsing, arithmetic, simplification and a command line calculator for PS-form polynomials."""

__version__ = "0.1.0"