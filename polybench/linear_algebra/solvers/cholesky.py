"""Cholesky decomposition of a symmetric positive definite matrix."""

from __future__ import annotations

import math

from ...ndarray import make_positive_semi_definite
from ...util import consume, time_function

__all__ = ["init_array", "kernel_cholesky", "bench"]


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


def _sqrt(value):
    return math.sqrt(value) if value >= 0.0 else math.nan


def kernel_cholesky(n, a):
    """Overwrite the lower triangle of ``a`` in place with its Cholesky factor."""
    for i in range(n):
        row_i = a[i]
        for j in range(i):
            row_j = a[j]
            acc = row_i[j]
            for k in range(j):
                acc -= row_i[k] * row_j[k]
            row_i[j] = acc / row_j[j]
        acc = row_i[i]
        for k in range(i):
            acc -= row_i[k] * row_i[k]
        row_i[i] = _sqrt(acc)


def bench(n):
    """Time the decomposition of an ``n`` x ``n`` matrix."""
    a = init_array(n)
    elapsed = time_function(lambda: kernel_cholesky(n, a))
    consume(a)
    return elapsed