"""Symmetric rank-k update: C = alpha*A*A^T + beta*C."""

from __future__ import annotations

from ...util import consume, time_function

__all__ = ["init_array", "kernel_syrk", "bench"]


def init_array(m, n):
    """Return ``(alpha, beta, c, a)`` with ``c`` of shape ``m`` x ``m``."""
    alpha = 1.5
    beta = 1.2
    a = [[((i * j + 1) % m) / m for j in range(n)] for i in range(m)]
    c = [[((i * j + 2) % n) / n for j in range(m)] for i in range(m)]
    return alpha, beta, c, a


def kernel_syrk(m, n, alpha, beta, c, a):
    """Update the lower triangle of ``c`` in place."""
    for i in range(m):
        c_row, a_row = c[i], a[i]
        for j in range(i + 1):
            c_row[j] *= beta
        for k in range(n):
            a_ik = a_row[k]
            for j in range(i + 1):
                c_row[j] += alpha * a_ik * a[j][k]


def bench(m, n):
    """Time the kernel for an ``m`` x ``m`` result with inner size ``n``."""
    alpha, beta, c, a = init_array(m, n)
    elapsed = time_function(lambda: kernel_syrk(m, n, alpha, beta, c, a))
    consume(c)
    return elapsed