"""Symmetric rank-2k update: C = alpha*A*B^T + alpha*B*A^T + beta*C."""

from __future__ import annotations

from ...util import consume, time_function

__all__ = ["init_array", "kernel_syr2k", "bench"]


def init_array(m, n):
    """Return ``(alpha, beta, c, a, b)`` with ``c`` of shape ``m`` x ``m``."""
    alpha = 1.5
    beta = 1.2
    a = [[((i * j + 1) % m) / m for j in range(n)] for i in range(m)]
    b = [[((i * j + 2) % n) / n for j in range(n)] for i in range(m)]
    c = [[((i * j + 3) % m) / n for j in range(m)] for i in range(m)]
    return alpha, beta, c, a, b


def kernel_syr2k(m, n, alpha, beta, c, a, b):
    """Update the lower triangle of ``c`` in place."""
    for i in range(m):
        c_row, a_row, b_row = c[i], a[i], b[i]
        for j in range(i + 1):
            c_row[j] *= beta
        for k in range(n):
            a_ik = a_row[k]
            b_ik = b_row[k]
            for j in range(i + 1):
                c_row[j] += a[j][k] * alpha * b_ik + b[j][k] * alpha * a_ik


def bench(m, n):
    """Time the kernel for an ``m`` x ``m`` result with inner size ``n``."""
    alpha, beta, c, a, b = init_array(m, n)
    elapsed = time_function(lambda: kernel_syr2k(m, n, alpha, beta, c, a, b))
    consume(c)
    return elapsed