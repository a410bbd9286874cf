"""Arithmetic and comparison of polynomial sum forms."""

from __future__ import annotations

from psform.form import PSForm, Term


class DivisionError(ArithmeticError):
    """Raised when one form cannot be divided exactly by another."""


def add_psf(a: PSForm, b: PSForm) -> PSForm:
    """The terms of ``a`` followed by those of ``b``."""
    return PSForm(a.terms + b.terms)


def sub_psf(a: PSForm, b: PSForm) -> PSForm:
    """The terms of ``a`` followed by the negated terms of ``b``."""
    return PSForm(a.terms + tuple(term.negated() for term in b.terms))


def mul_psf(a: PSForm, b: PSForm) -> PSForm:
    """Every term of ``a`` times every term of ``b``, grouped by the term of ``b``."""
    return PSForm(
        tuple(
            Term(x.coefficient * y.coefficient, x.variables + y.variables)
            for y in b.terms
            for x in a.terms
        )
    )


def _divide_term(term: Term, divisor: Term) -> Term:
    if divisor.coefficient == 0 or term.coefficient % divisor.coefficient != 0:
        raise DivisionError(f"{term} is not divisible by {divisor}")
    remaining = list(term.variables)
    for variable in divisor.variables:
        try:
            remaining.remove(variable)
        except ValueError:
            raise DivisionError(f"{term} is not divisible by {divisor}") from None
    return Term(term.coefficient // divisor.coefficient, tuple(remaining))


def div_psf(a: PSForm, b: PSForm) -> PSForm:
    """Divide every term of ``a`` exactly by the single term of ``b``."""
    if len(b.terms) != 1:
        raise DivisionError("divisor must consist of exactly one term")
    (divisor,) = b.terms
    return PSForm(tuple(_divide_term(term, divisor) for term in a.terms))


def terms_equal(t1: Term, t2: Term) -> bool:
    """Equal coefficients and the same variables regardless of order."""
    return t1.coefficient == t2.coefficient and t1.same_variables(t2)


def compare_psf(a: PSForm, b: PSForm) -> bool:
    """True when both forms have as many terms and each term of ``a`` occurs in ``b``."""
    if len(a.terms) != len(b.terms):
        return False
    return all(any(terms_equal(x, y) for y in b.terms) for x in a.terms)