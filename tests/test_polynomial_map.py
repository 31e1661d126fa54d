import random

import pytest

from warmupkit.polynomial_list import PolynomialFormatError, PolynomialList
from warmupkit.polynomial_map import PolynomialMap


def _random_terms(seed, size=20):
    rng = random.Random(seed)
    return [(rng.randrange(50), float(rng.randrange(1, 100))) for _ in range(size)]


@pytest.fixture
def p0():
    p = PolynomialMap()
    p[2] = 3
    p[0] = 5
    p[3] = 4
    return p


@pytest.fixture
def p1():
    p = PolynomialMap()
    p[3] = -4
    p[100] = 1
    return p


def test_missing_degree_reads_as_zero(p0):
    assert p0[7] == 0.0
    assert p0[2] == 3.0


def test_terms_are_sorted_ascending(p0):
    degrees = [degree for degree, _ in p0.terms()]
    assert degrees == sorted(degrees)


def test_product_with_empty_is_empty(p0):
    assert (p0 * PolynomialMap()).terms() == []


def test_empty_polynomial_prints_zero():
    assert str(PolynomialMap()) == "0"


def test_sum_cancels_opposite_terms(p0, p1):
    total = p0 + p1
    assert total[3] == 0.0
    assert 3 not in dict(total.terms())
    assert total[100] == 1.0


def test_subtraction_is_self_minus_other(p0, p1):
    assert (p0 - p1) + p1 == p0
    assert (p0 - p0).terms() == []


def test_addition_commutes(p0, p1):
    assert p0 + p1 == p1 + p0


def test_multiplication_commutes(p0, p1):
    assert p0 * p1 == p1 * p0


def test_multiply_by_one_is_identity(p0):
    one = PolynomialMap([(0, 1.0)])
    assert p0 * one == p0


def test_duplicate_degrees_are_summed():
    p = PolynomialMap([(2, 1.5), (2, 2.5)])
    assert p.terms() == [(2, 4.0)]


def test_small_coefficients_are_dropped():
    p = PolynomialMap([(1, 1e-12), (2, 1.0)])
    assert p.terms() == [(2, 1.0)]


def test_compress_removes_zeroed_term(p0):
    p0[2] = 0
    p0.compress()
    assert 2 not in dict(p0.terms())


def test_from_degrees_requires_equal_lengths():
    with pytest.raises(ValueError):
        PolynomialMap.from_degrees([1, 2], [1.0])


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_agrees_with_list_representation(seed):
    left_terms = _random_terms(seed)
    right_terms = _random_terms(seed + 100)
    left_map, right_map = PolynomialMap(left_terms), PolynomialMap(right_terms)
    left_list, right_list = PolynomialList(left_terms), PolynomialList(right_terms)
    assert (left_map * right_map).terms() == sorted((left_list * right_list).terms())
    assert (left_map + right_map).terms() == sorted((left_list + right_list).terms())
    assert (left_map - right_map).terms() == sorted((left_list - right_list).terms())


def test_from_file_round_trip(tmp_path, p0):
    path = tmp_path / "poly.txt"
    terms = p0.terms()
    body = " ".join(f"{degree} {coefficient}" for degree, coefficient in terms)
    path.write_text(f"P {len(terms)}\n{body}\n")
    assert PolynomialMap.from_file(path) == p0


def test_from_file_rejects_bad_header(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("Q 1\n0 1\n")
    with pytest.raises(PolynomialFormatError):
        PolynomialMap.from_file(path)


def test_str_uses_power_notation(p1):
    text = str(p1)
    assert text.startswith("-4x^3")
    assert text.endswith("+1x^100")