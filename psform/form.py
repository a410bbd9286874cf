"""Polynomial sum forms: sums of terms, each a coefficient times variables."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass


@dataclass(frozen=True)
class Term:
    """One summand: an integer coefficient and a sequence of one-letter variables."""

    coefficient: int = 1
    variables: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "variables", tuple(self.variables))

    def same_variables(self, other: Term) -> bool:
        """True when both terms hold the same variables, counted with multiplicity."""
        return Counter(self.variables) == Counter(other.variables)

    def negated(self) -> Term:
        """The term with its coefficient's sign flipped."""
        return Term(-self.coefficient, self.variables)

    def __str__(self) -> str:
        parts: list[str] = []
        if self.coefficient != 1 or not self.variables:
            parts.append(str(self.coefficient))
        parts.extend(self.variables)
        return "*".join(parts)


@dataclass(frozen=True)
class PSForm:
    """A polynomial written as a sum of terms, kept in the order they were given."""

    terms: tuple[Term, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "terms", tuple(self.terms))

    def simplified(self) -> PSForm:
        """Merge terms with equal variables into the first of them and drop zero terms."""
        merged: list[Term] = []
        for term in self.terms:
            for index, kept in enumerate(merged):
                if kept.same_variables(term):
                    merged[index] = Term(kept.coefficient + term.coefficient, kept.variables)
                    break
            else:
                merged.append(term)
        return PSForm(tuple(term for term in merged if term.coefficient != 0))

    def __str__(self) -> str:
        return " + ".join(str(term) for term in self.terms)


def format_psf(form: PSForm) -> str:
    """Render a form as text; an empty form renders as an empty string."""
    return str(form)


def simplify_psf(form: PSForm) -> PSForm:
    """Return the canonical form of ``form``."""
    return form.simplified()