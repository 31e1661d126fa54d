"""Dynamic arrays, sparse polynomials, raw images and debugging helpers."""

__version__ = "1.0.0"

__all__ = [
    "bounded_array",
    "cli",
    "darray",
    "debugutils",
    "image",
    "polynomial_list",
    "polynomial_map",
    "typed_array",
]