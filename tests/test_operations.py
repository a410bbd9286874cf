import pytest

from psform.form import PSForm, Term
from psform.operations import (
    DivisionError,
    add_psf,
    compare_psf,
    div_psf,
    mul_psf,
    sub_psf,
    terms_equal,
)
from psform.parser import parse_psf


def test_add_concatenates_terms():
    a, b = parse_psf("2*x + 1"), parse_psf("3*y")
    assert add_psf(a, b).terms == a.terms + b.terms


def test_add_with_empty_forms():
    a = parse_psf("4*z")
    assert add_psf(PSForm(), a) == a
    assert add_psf(a, PSForm()) == a


def test_sub_matches_written_difference():
    assert sub_psf(parse_psf("2*x"), parse_psf("3*y - 4")) == parse_psf("2*x - 3*y + 4")


def test_sub_self_simplifies_to_empty():
    a = parse_psf("2*x*y + 5 - 3*z")
    assert sub_psf(a, a).simplified() == PSForm()


def test_mul_appends_variables_in_order():
    assert mul_psf(parse_psf("2*x + 3*y"), parse_psf("1*z")) == parse_psf("2*x*z + 3*y*z")


def test_mul_term_count():
    a, b = parse_psf("1*a + 2*b + 3"), parse_psf("4*c + 5")
    assert len(mul_psf(a, b).terms) == len(a.terms) * len(b.terms)


def test_mul_by_one_is_identity():
    a = parse_psf("2*x*y - 7")
    assert mul_psf(a, parse_psf("1")) == a


def test_mul_by_empty_is_empty():
    assert mul_psf(parse_psf("2*x"), PSForm()) == PSForm()
    assert mul_psf(PSForm(), parse_psf("2*x")) == PSForm()


def test_mul_commutes_after_simplification():
    a, b = parse_psf("2*x + 3*y"), parse_psf("5*x - 1")
    assert compare_psf(mul_psf(a, b).simplified(), mul_psf(b, a).simplified())


def test_div_pinned_value():
    assert div_psf(parse_psf("6*x*y"), parse_psf("3*x")) == PSForm((Term(2, ("y",)),))


def test_div_undoes_mul():
    a, b = parse_psf("2*x*y + 5*z"), parse_psf("3*x")
    assert compare_psf(div_psf(mul_psf(a, b), b), a)


@pytest.mark.parametrize(
    "dividend, divisor",
    [
        ("2*x", "1*x + 1"),
        ("2*x", ""),
        ("2*x", "0"),
        ("3*x", "2"),
        ("2*x", "1*y"),
        ("2*x", "1*x*x"),
    ],
)
def test_div_errors(dividend, divisor):
    with pytest.raises(DivisionError):
        div_psf(parse_psf(dividend), parse_psf(divisor))


def test_terms_equal_ignores_variable_order():
    assert terms_equal(Term(2, ("x", "y")), Term(2, ("y", "x")))


def test_terms_equal_checks_coefficient_and_multiplicity():
    assert not terms_equal(Term(2, ("x",)), Term(3, ("x",)))
    assert not terms_equal(Term(2, ("x", "x")), Term(2, ("x",)))


def test_compare_ignores_term_order():
    assert compare_psf(parse_psf("2*x*y + 1*z"), parse_psf("1*z + 2*y*x"))


def test_compare_different_term_counts():
    assert not compare_psf(parse_psf("2*x"), parse_psf("2*x + 1"))


def test_compare_does_not_simplify():
    assert not compare_psf(parse_psf("2*x + 3*x"), parse_psf("5*x + 0"))


def test_compare_empty_forms():
    assert compare_psf(PSForm(), PSForm())