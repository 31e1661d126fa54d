# warmupkit

A small collection of data structures and helpers:

- `warmupkit.darray.DArray`: a growable array of floats with explicit
  capacity management. It supports `len()`, indexing, iteration and `==`, and
  has a `capacity` property and the methods `reserve`, `resize`, `append`,
  `insert`, `delete` and `copy`. Capacity grows by doubling, starting from 1.
- `warmupkit.typed_array.TypedArray`: the same container for one element
  type. Every stored value is passed through `dtype`, and new elements are
  `dtype()`.
- `warmupkit.bounded_array.BoundedArray`: an array of floats that can hold at
  most 15 elements. Growing it past that raises `ArrayCapacityError`.
  `FixedArray` is an array whose size is set with `allocate` and cleared with
  `release`. Its `lines()` method returns one printed line per element.
- `warmupkit.polynomial_list.PolynomialList` and
  `warmupkit.polynomial_map.PolynomialMap`: sparse polynomials that support
  `+`, `-`, `*` and `==`. A coefficient is read and written by degree
  (`p[3] = 2.0`). `terms()` lists the `(degree, coefficient)` pairs:
  `PolynomialList` gives them highest degree first and `PolynomialMap` gives
  them lowest degree first. Terms smaller than `1e-10` in magnitude are
  dropped. Polynomials are built with `from_degrees` or `from_file`.
  `read_terms` reads the raw pairs from a file and raises
  `PolynomialFormatError` on a malformed one.
- `warmupkit.image.Image`: an in-memory 8-bit pixel buffer with interleaved
  channels. It has bounds-checked `get_pixel` and `set_pixel`, a `data`
  property, and `copy`. `set_pixel` on a 4-channel image accepts 3 values and
  leaves alpha untouched.
- `warmupkit.debugutils` provides:
  - `Debugger`, which logs by level, and `parse_debug_level`, which reads
    `-d`/`--debug N` from arguments;
  - `check` and `check_equal`, which raise `AssertionFailure`, and
    `RuntimeAssertions`, which can switch these checks off;
  - sparse-matrix diagnostics: `describe_sparse_matrix`,
    `diagonal_dominance_warnings` and `symmetry_error`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from warmupkit.darray import DArray
from warmupkit.polynomial_map import PolynomialMap

a = DArray(3, 1.5)
a.append(2.0)
a.insert(0, 4.1)
print(a)            # size = 5: 4.1 1.5 1.5 1.5 2

p = PolynomialMap.from_degrees([0, 2], [5.0, 3.0])
q = PolynomialMap.from_degrees([2, 3], [1.0, -4.0])
print(p + q)
print(p * q)
```

Polynomial files start with the letter `P` and a term count. The count is
followed by that many pairs of degree and coefficient:

```
P 3
0 1.0
2 -2.5
5 4.0
```

## Command line

The `warmupkit` command has four subcommands:

```
warmupkit darray                      # walk through DArray and TypedArray operations
warmupkit polynomial FIRST SECOND     # print two polynomial files, their sum, difference and product
warmupkit benchmark [--seed N]        # time PolynomialList and PolynomialMap on random polynomials
warmupkit solve                       # solve a 4x4 identity system with two right-hand sides
```

## What it does not do

`Image` only holds pixels in memory. The package does not read or write
image files, and it does not display images or open any window.