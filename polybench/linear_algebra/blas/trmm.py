"""Triangular matrix multiply: B = alpha*A^T*B with A unit lower triangular."""

from __future__ import annotations

from ...util import consume, time_function

__all__ = ["init_array", "kernel_trmm", "bench"]


def _a_entry(i, j, m):
    if j < i:
        return ((i + j) % m) / m
    return 1.0 if j == i else 0.0


def init_array(m, n):
    """Return ``(alpha, a, b)`` with ``a`` of shape ``m`` x ``m``."""
    alpha = 1.5
    a = [[_a_entry(i, j, m) for j in range(m)] for i in range(m)]
    b = [[((n + i - j) % n) / n for j in range(n)] for i in range(m)]
    return alpha, a, b


def kernel_trmm(m, n, alpha, a, b):
    """Update ``b`` in place, reading ``a`` below its diagonal only."""
    for i in range(m):
        b_row = b[i]
        for j in range(n):
            acc = b_row[j]
            for k in range(i + 1, m):
                acc += a[k][i] * b[k][j]
            b_row[j] = alpha * acc


def bench(m, n):
    """Time the kernel for an ``m`` x ``n`` matrix ``b``."""
    alpha, a, b = init_array(m, n)
    elapsed = time_function(lambda: kernel_trmm(m, n, alpha, a, b))
    consume(b)
    return elapsed