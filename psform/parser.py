"""Reading polynomial sum forms from text such as ``2*x*y - 3*z + 5``."""

from __future__ import annotations

import string
from enum import Enum, auto

from psform.form import PSForm, Term

INT_MAX = 2**31 - 1

_SPACE = frozenset(string.whitespace)
_DIGITS = frozenset(string.digits)
_LETTERS = frozenset(string.ascii_letters)


class ParseError(ValueError):
    """Raised when text is not a valid polynomial sum form."""

    def __init__(self, message: str, position: int) -> None:
        super().__init__(f"{message} at position {position}")
        self.position = position


class _Sign(Enum):
    START = auto()
    AFTER_TERM = auto()
    PLUS = auto()
    MINUS = auto()


class _Last(Enum):
    CONSTANT = auto()
    STAR = auto()
    VARIABLE = auto()


def parse_term(text: str, pos: int = 0) -> tuple[Term, int]:
    """Read one term starting at ``pos``.

    Returns the term and the position of the first character not consumed:
    the sign that starts the next term, or the end of the text.
    """
    end = pos
    while end < len(text) and text[end] in _DIGITS:
        end += 1
    if end > pos:
        coefficient = int(text[pos:end])
        if coefficient > INT_MAX:
            raise ParseError("constant too large", pos)
    else:
        coefficient = 1

    variables: list[str] = []
    last = _Last.CONSTANT
    pos = end
    while pos < len(text):
        ch = text[pos]
        if ch in _SPACE:
            pass
        elif ch == "*":
            if last is _Last.STAR:
                raise ParseError("repeated '*'", pos)
            last = _Last.STAR
        elif ch in "+-":
            if last is _Last.STAR:
                raise ParseError("'*' without a variable", pos)
            break
        elif ch in _LETTERS:
            if last is not _Last.STAR:
                raise ParseError("variable without '*'", pos)
            variables.append(ch)
            last = _Last.VARIABLE
        else:
            raise ParseError(f"unexpected character {ch!r}", pos)
        pos += 1
    return Term(coefficient, tuple(variables)), pos


def parse_psf(text: str) -> PSForm:
    """Parse a whole form; raises ParseError on malformed text."""
    terms: list[Term] = []
    sign = _Sign.START
    pos = 0
    while pos < len(text):
        ch = text[pos]
        if ch in _SPACE:
            pos += 1
        elif ch == "+":
            if sign in (_Sign.START, _Sign.AFTER_TERM):
                sign = _Sign.PLUS
            pos += 1
        elif ch == "-":
            sign = _Sign.PLUS if sign is _Sign.MINUS else _Sign.MINUS
            pos += 1
        elif ch in _DIGITS or ch in _LETTERS:
            if sign is _Sign.AFTER_TERM:
                raise ParseError("missing operator between terms", pos)
            term, pos = parse_term(text, pos)
            terms.append(term.negated() if sign is _Sign.MINUS else term)
            sign = _Sign.AFTER_TERM
        else:
            raise ParseError(f"unexpected character {ch!r}", pos)
    return PSForm(tuple(terms))