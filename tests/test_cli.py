import random

import numpy as np
import pytest

from warmupkit.cli import (
    benchmark_operations,
    darray_demo,
    generate_test_case,
    main,
    polynomial_demo,
    solve_example,
)
from warmupkit.polynomial_list import PolynomialList
from warmupkit.polynomial_map import PolynomialMap


def _write(path, terms):
    body = " ".join(f"{d} {c}" for d, c in terms)
    path.write_text(f"P {len(terms)}\n{body}\n")
    return path


@pytest.fixture
def poly_files(tmp_path):
    first = _write(tmp_path / "P3.txt", [(0, 1.0), (2, 3.0), (5, -2.0)])
    second = _write(tmp_path / "P4.txt", [(1, 4.0), (2, 1.0)])
    return first, second


def test_darray_demo_first_line():
    lines = darray_demo()
    assert lines[0] == "size = 1: 2.1"


def test_darray_demo_copies_match_original():
    lines = darray_demo()
    assert lines[4:8] == [lines[3]] * 4


def test_darray_demo_runs_both_arrays():
    lines = darray_demo()
    assert len(lines) == 24
    assert lines[-1].endswith("d a b c")


def test_polynomial_demo_matches_operations(poly_files):
    first, second = poly_files
    lines = polynomial_demo(first, second)
    p1 = PolynomialList.from_file(first)
    p2 = PolynomialList.from_file(second)
    assert lines == [str(p1), str(p2), str(p1 + p2), str(p1 - p2), str(p1 * p2)]


def test_generate_test_case_ranges_and_determinism():
    degrees, coefficients = generate_test_case(50, random.Random(7))
    assert len(degrees) == len(coefficients) == 50
    assert all(0 <= d < 10000 for d in degrees)
    assert all(0 <= c < 100 and c == int(c) for c in coefficients)
    assert generate_test_case(50, random.Random(7)) == (degrees, coefficients)


@pytest.mark.parametrize("cls", [PolynomialList, PolynomialMap])
def test_benchmark_operations_results(cls):
    rng = random.Random(3)
    first = generate_test_case(20, rng)
    second = generate_test_case(20, rng)
    result = benchmark_operations(cls, first, second)
    left = cls.from_degrees(*first)
    right = cls.from_degrees(*second)
    assert result.product == left * right
    assert result.total == left + right
    assert result.difference == left - right
    assert result.seconds >= 0


def test_solve_example_returns_right_hand_side():
    solution = solve_example()
    assert solution.shape == (4, 2)
    assert np.allclose(solution[:, 0], 1)
    assert np.allclose(solution[:, 1], 2)


def test_main_polynomial_prints_lines(poly_files, capsys):
    first, second = poly_files
    assert main(["polynomial", str(first), str(second)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == polynomial_demo(first, second)


def test_main_polynomial_missing_file(tmp_path, capsys):
    missing = tmp_path / "missing.txt"
    assert main(["polynomial", str(missing), str(missing)]) == 1
    assert "Error" in capsys.readouterr().err


def test_main_benchmark_reports_both_kinds(capsys):
    assert main(["benchmark", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert out.count("Test List:") == 3
    assert out.count("Test Map:") == 3


def test_main_darray_prints_demo(capsys):
    assert main(["darray"]) == 0
    assert capsys.readouterr().out.splitlines() == darray_demo()


def test_main_requires_command():
    with pytest.raises(SystemExit):
        main([])