"""Sparse polynomials kept as degree/coefficient terms, highest degree first."""

from __future__ import annotations

import operator
from collections.abc import Iterable
from os import PathLike
from pathlib import Path

EPSILON = 1.0e-10


class PolynomialFormatError(ValueError):
    """Raised when a polynomial file does not follow the ``P n`` term format."""


def read_terms(path: str | PathLike[str]) -> list[tuple[int, float]]:
    """Read ``(degree, coefficient)`` pairs from a polynomial file.

    The file starts with the letter ``P`` and a term count, followed by that
    many whitespace-separated degree/coefficient pairs.
    """
    text = Path(path).read_text().lstrip()
    if not text.startswith("P"):
        raise PolynomialFormatError("Invalid file format")
    tokens = text[1:].split()
    if not tokens:
        raise PolynomialFormatError("Invalid file format")
    try:
        count = int(tokens[0])
    except ValueError:
        raise PolynomialFormatError("Invalid file format") from None

    terms: list[tuple[int, float]] = []
    values = iter(tokens[1:])
    for degree_token, coefficient_token in zip(values, values):
        if len(terms) >= count:
            break
        try:
            terms.append((int(degree_token), float(coefficient_token)))
        except ValueError:
            break
    if len(terms) != count:
        raise PolynomialFormatError(
            f"Expected {count} terms but found {len(terms)}"
        )
    return terms


def _format_coefficient(value: float) -> str:
    return f"{value:g}"


class PolynomialList:
    """Polynomial whose terms are listed from the highest degree down.

    Terms with equal degrees are summed and terms whose coefficient is
    smaller than ``EPSILON`` in magnitude are dropped on construction and by
    every arithmetic operation.
    """

    __slots__ = ("_terms",)

    def __init__(self, terms: Iterable[tuple[int, float]] = ()) -> None:
        self._terms: dict[int, float] = {}
        for degree, coefficient in terms:
            degree = operator.index(degree)
            self._terms[degree] = self._terms.get(degree, 0.0) + float(coefficient)
        self.compress()

    @classmethod
    def from_file(cls, path: str | PathLike[str]) -> PolynomialList:
        """Build a polynomial from a file read by :func:`read_terms`."""
        return cls(read_terms(path))

    @classmethod
    def from_degrees(
        cls, degrees: Iterable[int], coefficients: Iterable[float]
    ) -> PolynomialList:
        """Build a polynomial from parallel sequences of degrees and coefficients."""
        degrees = list(degrees)
        coefficients = list(coefficients)
        if len(degrees) != len(coefficients):
            raise ValueError("Degree and coefficient vectors must have same size")
        return cls(zip(degrees, coefficients))

    def terms(self) -> list[tuple[int, float]]:
        """The ``(degree, coefficient)`` terms, highest degree first."""
        return sorted(self._terms.items(), key=operator.itemgetter(0), reverse=True)

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

    def __add__(self, other: object) -> PolynomialList:
        if not isinstance(other, PolynomialList):
            return NotImplemented
        return type(self)([*self._terms.items(), *other._terms.items()])

    def __sub__(self, other: object) -> PolynomialList:
        if not isinstance(other, PolynomialList):
            return NotImplemented
        negated = ((degree, -coefficient) for degree, coefficient in other._terms.items())
        return type(self)([*self._terms.items(), *negated])

    def __mul__(self, other: object) -> PolynomialList:
        if not isinstance(other, PolynomialList):
            return NotImplemented
        return type(self)(
            (left_degree + right_degree, left_coefficient * right_coefficient)
            for left_degree, left_coefficient in self._terms.items()
            for right_degree, right_coefficient in other._terms.items()
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PolynomialList):
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