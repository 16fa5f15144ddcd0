"""Vector multiplication and matrix addition (gemver)."""

from __future__ import annotations

from ...util import consume, time_function

__all__ = ["init_array", "kernel_gemver", "bench"]


def init_array(n):
    """Return ``(alpha, beta, a, u1, v1, u2, v2, w, x, y, z)``."""
    alpha = 1.5
    beta = 1.2
    float_n = float(n)
    u1 = [float(i) for i in range(n)]
    u2 = [((i + 1) / float_n) / 2.0 for i in range(n)]
    v1 = [((i + 1) / float_n) / 4.0 for i in range(n)]
    v2 = [((i + 1) / float_n) / 6.0 for i in range(n)]
    y = [((i + 1) / float_n) / 8.0 for i in range(n)]
    z = [((i + 1) / float_n) / 9.0 for i in range(n)]
    x = [0.0] * n
    w = [0.0] * n
    a = [[(i * j % n) / n for j in range(n)] for i in range(n)]
    return alpha, beta, a, u1, v1, u2, v2, w, x, y, z


def kernel_gemver(n, alpha, beta, a, u1, v1, u2, v2, w, x, y, z):
    """Update ``a``, ``x`` and ``w`` in place."""
    for a_row, u1_i, u2_i in zip(a[:n], u1, u2):
        a_row[:n] = [
            a_ij + u1_i * v1_j + u2_i * v2_j
            for a_ij, v1_j, v2_j in zip(a_row, v1, v2)
        ]

    rows = a[:n]
    for i in range(n):
        acc = x[i]
        for a_row, y_j in zip(rows, y):
            acc = acc + beta * a_row[i] * y_j
        x[i] = acc

    x[:n] = [x_i + z_i for x_i, z_i in zip(x[:n], z)]

    for i, a_row in enumerate(rows):
        acc = w[i]
        for a_ij, x_j in zip(a_row[:n], x):
            acc = acc + alpha * a_ij * x_j
        w[i] = acc


def bench(n):
    """Time the kernel for size ``n``."""
    alpha, beta, a, u1, v1, u2, v2, w, x, y, z = init_array(n)
    elapsed = time_function(
        lambda: kernel_gemver(n, alpha, beta, a, u1, v1, u2, v2, w, x, y, z)
    )
    consume(w)
    return elapsed