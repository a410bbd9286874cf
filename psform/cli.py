"""Command line calculator for polynomial sum forms.

Reads groups of three lines: an operation (+, -, *, /, =) and two forms,
and prints the simplified result of each operation.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from typing import TextIO

from psform.form import PSForm
from psform.operations import DivisionError, add_psf, compare_psf, div_psf, mul_psf, sub_psf
from psform.parser import ParseError, parse_psf

_OPERATIONS: dict[str, Callable[[PSForm, PSForm], PSForm]] = {
    "+": add_psf,
    "-": sub_psf,
    "*": mul_psf,
    "/": div_psf,
}


def run(stdin: TextIO, stdout: TextIO, stderr: TextIO) -> int:
    """Process operations from ``stdin`` until end of input; return the exit status."""
    while True:
        op_line = stdin.readline()
        if not op_line:
            return 0
        op = op_line[0]
        first = stdin.readline().rstrip("\n")
        second = stdin.readline().rstrip("\n")
        try:
            a, b = parse_psf(first), parse_psf(second)
        except ParseError:
            print("Invalid PS form", file=stderr)
            return 1

        if op == "=":
            print("equal" if compare_psf(a, b) else "not equal", file=stdout)
            continue

        operation = _OPERATIONS.get(op)
        if operation is None:
            print("error", file=stderr)
            return 1
        try:
            result = operation(a, b)
        except DivisionError:
            print("error", file=stderr)
            continue
        print(result.simplified(), file=stdout)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="psform",
        description="Read an operation and two forms per three input lines and print the result.",
    )
    parser.parse_args(argv)
    return run(sys.stdin, sys.stdout, sys.stderr)


if __name__ == "__main__":
    sys.exit(main())