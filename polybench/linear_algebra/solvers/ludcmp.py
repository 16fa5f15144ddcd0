"""Linear system solve by LU decomposition and substitution."""

from __future__ import annotations

from ...ndarray import make_positive_semi_definite
from ...util import consume, time_function

__all__ = ["init_array", "kernel_ludcmp", "bench"]


def _lower_entry(i, j, n):
    if j == i:
        return 1.0
    if j < i:
        return -j / n + 1.0
    return 0.0


def init_array(n):
    """Return ``(a, b, x, y)`` for a system of size ``n``."""
    float_n = float(n)
    x = [0.0] * n
    y = [0.0] * n
    b = [(i + 1) / float_n / 2.0 + 4.0 for i in range(n)]
    a = [[_lower_entry(i, j, n) for j in range(n)] for i in range(n)]
    make_positive_semi_definite(a)
    return a, b, x, y


def kernel_ludcmp(n, a, b, x, y):
    """Factor ``a`` in place and solve ``a x = b``, filling ``y`` and ``x``."""
    for i in range(n):
        row_i = a[i]
        for j in range(i):
            w = row_i[j]
            for k in range(j):
                w -= row_i[k] * a[k][j]
            row_i[j] = w / a[j][j]
        for j in range(i, n):
            w = row_i[j]
            for k in range(i):
                w -= row_i[k] * a[k][j]
            row_i[j] = w

    for i in range(n):
        row_i = a[i]
        w = b[i]
        for j in range(i):
            w -= row_i[j] * y[j]
        y[i] = w

    for i in reversed(range(n)):
        row_i = a[i]
        w = y[i]
        for j in range(i + 1, n):
            w -= row_i[j] * x[j]
        x[i] = w / row_i[i]


def bench(n):
    """Time the solve for a system of size ``n``."""
    a, b, x, y = init_array(n)
    elapsed = time_function(lambda: kernel_ludcmp(n, a, b, x, y))
    consume(x)
    return elapsed