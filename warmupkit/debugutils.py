"""Debug logging, assertion helpers and sparse-matrix diagnostics."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from typing import Any

from scipy import sparse
from scipy.sparse import linalg as sparse_linalg

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class AssertionFailure(AssertionError):
    """Raised when a checked assertion does not hold."""

    def __init__(self, message: str, error_code: int = 1) -> None:
        super().__init__(message)
        self.error_code = error_code


def _format(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_debug_level(argv: Sequence[str] | None = None) -> int:
    """Return the level given after the last ``-d``/``--debug`` option, else 0."""
    args = list(sys.argv[1:] if argv is None else argv)
    level = 0
    for position, arg in enumerate(args):
        if arg in ("-d", "--debug") and position + 1 < len(args):
            level = _atoi(args[position + 1])
    return level


class Debugger:
    """Prints messages whose required level does not exceed its own."""

    def __init__(self, level: int = 0) -> None:
        self.level = level

    def log(self, required_level: int, *args: Any) -> bool:
        """Print the arguments joined without separators; return whether printed."""
        if self.level < required_level:
            return False
        print("".join(_format(arg) for arg in args))
        return True


def check(expression: str, value: Any, file_name: str, line: int) -> Any:
    """Raise :class:`AssertionFailure` unless ``value`` is truthy; return it."""
    if not value:
        raise AssertionFailure(f"{file_name}:{line}: Assert({expression}) failed")
    return value


def check_equal(
    expression_first: str,
    value_first: Any,
    expression_second: str,
    value_second: Any,
    file_name: str,
    line: int,
) -> Any:
    """Raise :class:`AssertionFailure` unless the two values are equal."""
    if value_first != value_second:
        raise AssertionFailure(
            f"{file_name}:{line}: AssertEqual({expression_first}, {expression_second})"
            f" failed ({_format(value_first)} != {_format(value_second)})"
        )
    return value_first


class RuntimeAssertions:
    """Assertions that can be switched on or off when the program starts."""

    def __init__(self, enabled: bool) -> None:
        self.enabled = bool(enabled)

    def check(self, expression: str, value: Any, file_name: str, line: int) -> Any:
        """Check ``value`` when enabled; always return it."""
        if self.enabled:
            check(expression, value, file_name, line)
        return value

    def check_equal(
        self,
        expression_first: str,
        value_first: Any,
        expression_second: str,
        value_second: Any,
        file_name: str,
        line: int,
    ) -> Any:
        """Check the values are equal when enabled; always return the first."""
        if self.enabled:
            check_equal(
                expression_first,
                value_first,
                expression_second,
                value_second,
                file_name,
                line,
            )
        return value_first


def _rows(matrix: Any) -> tuple[sparse.csr_matrix, list[list[tuple[int, float]]]]:
    csr = sparse.csr_matrix(matrix, dtype=float, copy=True)
    csr.sum_duplicates()
    rows = []
    for start, end in zip(csr.indptr[:-1], csr.indptr[1:]):
        rows.append(
            [
                (int(col), float(val))
                for col, val in zip(csr.indices[start:end], csr.data[start:end])
            ]
        )
    return csr, rows


def describe_sparse_matrix(matrix: Any, max_rows: int = 5) -> str:
    """Describe the size, stored entries and first rows of a sparse matrix."""
    csr, rows = _rows(matrix)
    n_rows, n_cols = csr.shape
    lines = [f"Matrix size: {n_rows}x{n_cols} (non-zeros: {csr.nnz})"]
    for k, entries in enumerate(rows[: max(max_rows, 0)]):
        cells = "".join(f"({col}:{_format(val)}) " for col, val in entries)
        lines.append(f"Row {k}: {cells}")
    return "\n".join(lines) + "\n"


def diagonal_dominance_warnings(matrix: Any) -> list[str]:
    """List the rows that lack a diagonal entry or are not diagonally dominant."""
    _, rows = _rows(matrix)
    warnings = []
    for k, entries in enumerate(rows):
        diagonal = None
        off_diagonal = 0.0
        for col, val in entries:
            if col == k:
                diagonal = abs(val)
            else:
                off_diagonal += abs(val)
        if diagonal is None:
            warnings.append(f"Row {k} has no diagonal element")
        elif diagonal <= off_diagonal:
            warnings.append(
                f"Row {k} is not diagonally dominant "
                f"({_format(diagonal)} <= {_format(off_diagonal)})"
            )
    return warnings


def symmetry_error(matrix: Any) -> float:
    """Frobenius norm of the difference between the matrix and its transpose."""
    csr = sparse.csr_matrix(matrix, dtype=float)
    if csr.shape[0] != csr.shape[1]:
        raise ValueError(f"matrix must be square, got shape {csr.shape}")
    return float(sparse_linalg.norm(csr - csr.T))