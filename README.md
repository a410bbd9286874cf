# psform

Arithmetic on polynomials with integer coefficients, written as sums of
products (PS-forms), such as `3*x*y - 2*z + 5`.

## Writing a PS-form

A term is an integer constant, optionally followed by single-letter variables,
each introduced by `*`: `7`, `4*a*b`, `1*x`. A variable must always follow a
`*`, so a term cannot start with a bare letter; write `1*x`, not `x`. Terms are
joined with `+` and `-`. A run of `-` signs flips the sign once per `-`.
Spaces are ignored. Constants larger than 2147483647 are rejected.

## Command line

```
psform
```

This reads from standard input in blocks of three lines:

1. an operation: `+`, `-`, `*`, `/` or `=` (the first character of the line)
2. the first PS-form
3. the second PS-form

For `+`, `-`, `*` and `/`, the result is simplified and printed on a line of
its own. Terms with the same variables are combined, and terms whose constant
is zero are dropped. An empty result prints as an empty line. For `=`, the
program prints `equal` or `not equal`.

Division works only when the divisor is a single term that divides every term
of the dividend exactly. Otherwise the program writes `error` to standard
error and carries on with the next block. An unknown operation writes `error`
and stops the program with exit status 1. A line that is not a valid PS-form
writes `Invalid PS form` and stops with exit status 1. Reading stops at end of
input with exit status 0.

Example:

```
$ printf '*\n1*x + 1\n1*x - 1\n' | psform
x*x + -1
```

## Library

```python
from psform.parser import parse_psf
from psform.operations import add_psf, mul_psf, div_psf, compare_psf, DivisionError

a = parse_psf("2*x*y + 3")
b = parse_psf("1*x")

print(mul_psf(a, b).simplified())   # 2*x*y*x + 3*x
print(add_psf(a, a).simplified())   # 4*x*y + 6

try:
    div_psf(a, b)
except DivisionError:
    print("not divisible")
```

`psform.form`:

- `Term` holds a `coefficient` and a tuple of `variables`; `same_variables`
  compares variables regardless of order, `negated` flips the sign.
- `PSForm` holds a tuple of `terms`; `simplified` combines terms with the same
  variables into the first of them and drops zero terms.
- `simplify_psf` and `format_psf` are function forms of `simplified` and `str()`.

`psform.parser`:

- `parse_psf` reads a whole form and raises `ParseError` (a `ValueError`
  carrying the `position`) on malformed text.
- `parse_term` reads one term and returns it with the position where it ended.

`psform.operations`:

- `add_psf`, `sub_psf`, `mul_psf` and `div_psf` return new, unsimplified
  `PSForm` values.
- `div_psf` raises `DivisionError` when the division cannot be done exactly.
- `compare_psf` is true when both forms have the same number of terms and
  every term of the first occurs in the second, in any order. The forms are
  not simplified before comparing.
- `terms_equal` checks two terms for equal constants and the same variables.

## Limits

Variables are single letters and there are no exponents: `x*x` stays as
written. Results are never reordered or sorted beyond combining like terms.