"""Matrix transpose and vector multiplication: y = A^T*(A*x)."""

from __future__ import annotations

from ...util import consume, time_function

__all__ = ["init_array", "kernel_atax", "bench"]


def init_array(m, n):
    """Return ``(a, x)`` with ``a`` of shape ``m`` x ``n``."""
    float_n = float(n)
    x = [1.0 + (i / float_n) for i in range(n)]
    a = [[((i + j) % n) / (5 * m) for j in range(n)] for i in range(m)]
    return a, x


def kernel_atax(m, n, a, x):
    """Return ``a.T @ (a @ x)`` as a list of length ``n``."""
    y = [0.0] * n
    for i in range(m):
        a_row = a[i]
        tmp = 0.0
        for j in range(n):
            tmp = tmp + a_row[j] * x[j]
        for j in range(n):
            y[j] = y[j] + a_row[j] * tmp
    return y


def bench(m, n):
    """Time the kernel for an ``m`` x ``n`` matrix."""
    a, x = init_array(m, n)
    results = []
    elapsed = time_function(lambda: results.append(kernel_atax(m, n, a, x)))
    consume(results[0])
    return elapsed