"""Dense nested-list arrays and helpers shared by the kernels."""

from __future__ import annotations

import math
from decimal import Decimal

__all__ = ["zeros", "array_nbytes", "make_positive_semi_definite", "format_array"]

_ALIGNMENT = 32


def zeros(shape, fill=0.0):
    """Return a nested list of the given shape filled with ``fill``."""
    shape = tuple(shape)
    if not shape:
        raise ValueError("shape must have at least one dimension")
    if any(dim < 0 for dim in shape):
        raise ValueError(f"negative dimension in shape {shape}")
    first, *rest = shape
    if rest:
        return [zeros(rest, fill) for _ in range(first)]
    return [fill] * first


def _round_up(size: int) -> int:
    return -(-size // _ALIGNMENT) * _ALIGNMENT


def array_nbytes(shape, itemsize):
    """Bytes taken by a dense array, each level padded to 32-byte alignment."""
    shape = tuple(shape)
    if not shape:
        raise ValueError("shape must have at least one dimension")
    if any(dim < 0 for dim in shape) or itemsize < 0:
        raise ValueError("dimensions and item size must be non-negative")
    size = itemsize
    for dim in reversed(shape):
        size = _round_up(dim * size)
    return size


def make_positive_semi_definite(a):
    """Replace the square matrix ``a`` in place by ``a @ a.T``."""
    n = len(a)
    if any(len(row) != n for row in a):
        raise ValueError("matrix must be square")
    product = [
        [sum(x * y for x, y in zip(row_r, row_s)) for row_s in a] for row_r in a
    ]
    for row, new_row in zip(a, product):
        row[:] = new_row


def _format_scalar(value) -> str:
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "inf" if value > 0 else "-inf"
        if value.is_integer():
            if value == 0 and math.copysign(1.0, value) < 0:
                return "-0"
            return str(int(value))
        text = repr(value)
        if "e" in text or "E" in text:
            return format(Decimal(text), "f")
        return text
    return str(value)


def format_array(a) -> str:
    """Render an array as ``[x, y, ...]``, nesting for inner dimensions."""
    if isinstance(a, (list, tuple)):
        if not a:
            raise ValueError("cannot format an empty array")
        return "[" + ", ".join(format_array(item) for item in a) + "]"
    return _format_scalar(a)