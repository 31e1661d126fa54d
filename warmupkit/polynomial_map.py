"""Sparse polynomials kept as a degree-to-coefficient mapping, lowest degree first."""

from __future__ import annotations

import operator
from collections.abc import Iterable
from os import PathLike

from warmupkit.polynomial_list import EPSILON, read_terms


def _format_coefficient(value: float) -> str:
    return f"{value:g}"


class PolynomialMap:
    """Polynomial stored as a mapping from degree to coefficient.

    Terms with equal degrees are summed and terms whose coefficient is
    smaller than ``EPSILON`` in magnitude are dropped on construction and by
    every arithmetic operation.  Terms are reported lowest degree first.
    """

    __slots__ = ("_terms",)

    def __init__(self, terms: Iterable[tuple[int, float]] = ()) -> None:
        self._terms: dict[int, float] = {}
        for degree, coefficient in terms:
            self._add_term(operator.index(degree), float(coefficient))
        self.compress()

    def _add_term(self, degree: int, coefficient: float) -> None:
        if degree not in self._terms:
            self._terms[degree] = coefficient
            return
        total = self._terms[degree] + coefficient
        if abs(total) < EPSILON:
            del self._terms[degree]
        else:
            self._terms[degree] = total

    @classmethod
    def from_file(cls, path: str | PathLike[str]) -> PolynomialMap:
        """Build a polynomial from a ``P n`` file of degree/coefficient pairs."""
        return cls(read_terms(path))

    @classmethod
    def from_degrees(
        cls, degrees: Iterable[int], coefficients: Iterable[float]
    ) -> PolynomialMap:
        """Build a polynomial from parallel sequences of degrees and coefficients."""
        degrees = list(degrees)
        coefficients = list(coefficients)
        if len(degrees) != len(coefficients):
            raise ValueError("Degree and coefficient vectors must have same size")
        return cls(zip(degrees, coefficients))

    def terms(self) -> list[tuple[int, float]]:
        """The ``(degree, coefficient)`` terms, lowest degree first."""
        return sorted(self._terms.items(), key=operator.itemgetter(0))

    def __getitem__(self, degree: int) -> float:
        return self._terms.get(operator.index(degree), 0.0)

    def __setitem__(self, degree: int, coefficient: float) -> None:
        self._terms[operator.index(degree)] = float(coefficient)

    def compress(self) -> None:
        """Drop terms whose coefficient is negligibly small."""
        self._terms = {
            degree: coefficient
            for degree, coefficient in self._terms.items()
            if abs(coefficient) >= EPSILON
        }

    def __add__(self, other: object) -> PolynomialMap:
        if not isinstance(other, PolynomialMap):
            return NotImplemented
        return type(self)([*self._terms.items(), *other._terms.items()])

    def __sub__(self, other: object) -> PolynomialMap:
        if not isinstance(other, PolynomialMap):
            return NotImplemented
        negated = ((degree, -coefficient) for degree, coefficient in other._terms.items())
        return type(self)([*self._terms.items(), *negated])

    def __mul__(self, other: object) -> PolynomialMap:
        if not isinstance(other, PolynomialMap):
            return NotImplemented
        product: dict[int, float] = {}
        for left_degree, left_coefficient in self._terms.items():
            for right_degree, right_coefficient in other._terms.items():
                degree = left_degree + right_degree
                product[degree] = (
                    product.get(degree, 0.0) + left_coefficient * right_coefficient
                )
        return type(self)(product.items())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PolynomialMap):
            return NotImplemented
        return self.terms() == other.terms()

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        terms = self.terms()
        if not terms:
            return "0"
        pieces = []
        for position, (degree, coefficient) in enumerate(terms):
            piece = ""
            if position:
                piece = " +" if coefficient > 0 else " "
            piece += _format_coefficient(coefficient)
            if degree > 0:
                piece += f"x^{degree}"
            pieces.append(piece)
        return "".join(pieces)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.terms()!r})"