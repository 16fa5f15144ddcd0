"""Symmetric matrix multiply: C = alpha*A*B + beta*C with A symmetric."""

from __future__ import annotations

from ...util import consume, time_function

__all__ = ["init_array", "kernel_symm", "bench"]


def init_array(m, n):
    """Return ``(alpha, beta, c, a, b)``; only the lower triangle of ``a`` is meaningful."""
    alpha = 1.5
    beta = 1.2
    c = [[((i + j) % 100) / m for j in range(n)] for i in range(m)]
    b = [[((n + i - j) % 100) / m for j in range(n)] for i in range(m)]
    a = [
        [((i + j) % 100) / m if j <= i else -999.0 for j in range(m)]
        for i in range(m)
    ]
    return alpha, beta, c, a, b


def kernel_symm(m, n, alpha, beta, c, a, b):
    """Update ``c`` in place, reading ``a`` from its lower triangle only."""
    for i in range(m):
        a_row, b_row, c_row = a[i], b[i], c[i]
        for j in range(n):
            b_ij = b_row[j]
            temp2 = 0.0
            for k in range(i):
                a_ik = a_row[k]
                c[k][j] += alpha * b_ij * a_ik
                temp2 += b[k][j] * a_ik
            c_row[j] = beta * c_row[j] + alpha * b_ij * a_row[i] + alpha * temp2


def bench(m, n):
    """Time the kernel for an ``m`` x ``n`` result."""
    alpha, beta, c, a, b = init_array(m, n)
    elapsed = time_function(lambda: kernel_symm(m, n, alpha, beta, c, a, b))
    consume(c)
    return elapsed