"""Scalar, vector and matrix multiplication: y = alpha*A*x + beta*B*x."""

from __future__ import annotations

from ...util import consume, time_function

__all__ = ["init_array", "kernel_gesummv", "bench"]


def init_array(n):
    """Return ``(alpha, beta, a, b, x)`` for size ``n``."""
    alpha = 1.5
    beta = 1.2
    x = [(i % n) / n for i in range(n)]
    a = [[((i * j + 1) % n) / n for j in range(n)] for i in range(n)]
    b = [[((i * j + 2) % n) / n for j in range(n)] for i in range(n)]
    return alpha, beta, a, b, x


def kernel_gesummv(n, alpha, beta, a, b, x):
    """Return ``alpha * a @ x + beta * b @ x`` as a list."""
    y = []
    for a_row, b_row in zip(a[:n], b):
        tmp = 0.0
        acc = 0.0
        for a_ij, b_ij, x_j in zip(a_row[:n], b_row, x):
            tmp = a_ij * x_j + tmp
            acc = b_ij * x_j + acc
        y.append(alpha * tmp + beta * acc)
    return y


def bench(n):
    """Time the kernel for size ``n``."""
    alpha, beta, a, b, x = init_array(n)
    results = []
    elapsed = time_function(
        lambda: results.append(kernel_gesummv(n, alpha, beta, a, b, x))
    )
    consume(results[0])
    return elapsed