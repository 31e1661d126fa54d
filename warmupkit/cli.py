"""Command-line demonstrations of the arrays, polynomials and a linear solve."""

from __future__ import annotations

import argparse
import random
import sys
import time
from collections.abc import Sequence
from dataclasses import dataclass
from os import PathLike
from typing import Any

import numpy as np

from warmupkit.darray import DArray
from warmupkit.polynomial_list import PolynomialFormatError, PolynomialList
from warmupkit.polynomial_map import PolynomialMap
from warmupkit.typed_array import TypedArray


def _array_scenario(make: Any, as_char: Any) -> list[str]:
    lines: list[str] = []
    a = make(float)
    a.insert(0, 2.1)
    lines.append(str(a))
    for value in (3.0, 3.1, 3.2):
        a.append(value)
    lines.append(str(a))
    a.delete(0)
    lines.append(str(a))
    a.insert(0, 4.1)
    lines.append(str(a))

    copy_a = a.copy()
    lines.append(str(copy_a))
    copy_b = a.copy()
    lines.append(str(copy_b))
    copy_c = a.copy()
    copy_d = copy_c.copy()
    lines.append(str(copy_c))
    lines.append(str(copy_d))

    b = make(int)
    b.append(21)
    lines.append(str(b))
    b.delete(0)
    lines.append(str(b))
    b.append(22)
    b.resize(5)
    lines.append(str(b))

    c = make(as_char)
    for letter in "abc":
        c.append(letter if as_char is str else ord(letter))
    c.insert(0, "d" if as_char is str else ord("d"))
    lines.append(str(c))
    return lines


def darray_demo() -> list[str]:
    """Run the array exercise on ``DArray`` and then ``TypedArray``; return the lines."""
    lines = _array_scenario(lambda _dtype: DArray(), float)
    lines.extend(_array_scenario(lambda dtype: TypedArray(dtype), str))
    return lines


def polynomial_demo(
    first_path: str | PathLike[str], second_path: str | PathLike[str]
) -> list[str]:
    """Load two polynomials and return them with their sum, difference and product."""
    first = PolynomialList.from_file(first_path)
    second = PolynomialList.from_file(second_path)
    return [
        str(first),
        str(second),
        str(first + second),
        str(first - second),
        str(first * second),
    ]


def generate_test_case(
    size: int, rng: random.Random | None = None
) -> tuple[list[int], list[float]]:
    """Random degrees below 10000 and whole coefficients below 100."""
    rng = rng if rng is not None else random.Random()
    degrees: list[int] = []
    coefficients: list[float] = []
    for _ in range(size):
        degrees.append(rng.randrange(10000))
        coefficients.append(float(rng.randrange(100)))
    return degrees, coefficients


@dataclass(frozen=True)
class BenchmarkResult:
    """Results of multiplying, adding and subtracting two polynomials."""

    product: Any
    total: Any
    difference: Any
    seconds: float


def benchmark_operations(
    polynomial_class: type,
    first: tuple[Sequence[int], Sequence[float]],
    second: tuple[Sequence[int], Sequence[float]],
) -> BenchmarkResult:
    """Build two polynomials and time their product, sum and difference."""
    start = time.perf_counter()
    left = polynomial_class.from_degrees(*first)
    right = polynomial_class.from_degrees(*second)
    product = left * right
    total = left + right
    difference = left - right
    return BenchmarkResult(product, total, difference, time.perf_counter() - start)


def solve_example() -> np.ndarray:
    """Solve ``A x = b`` with ``A`` the 4x4 identity and ``b`` columns of 1 and 2."""
    a = np.eye(4)
    b = np.column_stack([np.ones(4), np.full(4, 2.0)])
    solution, *_ = np.linalg.lstsq(a, b, rcond=None)
    return solution


def _run_benchmarks(seed: int | None) -> None:
    rng = random.Random(seed)
    kinds = (("Test List:", PolynomialList), ("Test Map: ", PolynomialMap))

    deg0, cof0 = generate_test_case(5, rng)
    _, cof1 = generate_test_case(5, rng)
    for label, cls in kinds:
        print(label)
        result = benchmark_operations(cls, (deg0, cof0), (deg0, cof1))
        print(result.product)
        print(result.total)
        print(result.difference)
        print(f"Test Constructor time: {result.seconds * 1000:.3f} ms")
        print()

    for size in (100, 150):
        first = generate_test_case(size, rng)
        second = generate_test_case(size, rng)
        for label, cls in kinds:
            print(label)
            result = benchmark_operations(cls, first, second)
            print(f"Test Constructor time: {result.seconds * 1000:.3f} ms")
            print()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="warmupkit")
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("darray", help="run the dynamic array exercise")
    poly = commands.add_parser("polynomial", help="combine two polynomial files")
    poly.add_argument("first")
    poly.add_argument("second")
    bench = commands.add_parser("benchmark", help="time list and map polynomials")
    bench.add_argument("--seed", type=int, default=None)
    commands.add_parser("solve", help="solve a small linear system")
    args = parser.parse_args(argv)

    if args.command == "darray":
        for line in darray_demo():
            print(line)
    elif args.command == "polynomial":
        try:
            lines = polynomial_demo(args.first, args.second)
        except (OSError, PolynomialFormatError) as error:
            print(f"Error: {error}", file=sys.stderr)
            return 1
        for line in lines:
            print(line)
    elif args.command == "benchmark":
        _run_benchmarks(args.seed)
    else:
        print(solve_example())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())