"""LU decomposition without pivoting."""

from __future__ import annotations

from ...ndarray import make_positive_semi_definite
from ...util import consume, time_function

__all__ = ["init_array", "kernel_lu", "bench"]


def _lower_entry(i, j, n):
    if j == i:
        return 1.0
    if j < i:
        return -j / n + 1.0
    return 0.0


def init_array(n):
    """Return an ``n`` x ``n`` positive semi-definite matrix ``a``."""
    a = [[_lower_entry(i, j, n) for j in range(n)] for i in range(n)]
    make_positive_semi_definite(a)
    return a


def kernel_lu(n, a):
    """Overwrite ``a`` in place with its unit-lower ``L`` and upper ``U`` factors."""
    for i in range(n):
        row_i = a[i]
        for j in range(i):
            acc = row_i[j]
            for k in range(j):
                acc -= row_i[k] * a[k][j]
            row_i[j] = acc / a[j][j]
        for j in range(i, n):
            acc = row_i[j]
            for k in range(i):
                acc -= row_i[k] * a[k][j]
            row_i[j] = acc


def bench(n):
    """Time the decomposition of an ``n`` x ``n`` matrix."""
    a = init_array(n)
    elapsed = time_function(lambda: kernel_lu(n, a))
    consume(a)
    return elapsed