"""General matrix-matrix multiply: C = alpha*A*B + beta*C."""

from __future__ import annotations

from ...util import consume, time_function

__all__ = ["init_array", "kernel_gemm", "bench"]


def init_array(ni, nj, nk):
    """Return ``(alpha, beta, c, a, b)`` for the given dimensions."""
    alpha = 1.5
    beta = 1.2
    c = [[((i * j + 1) % ni) / ni for j in range(nj)] for i in range(ni)]
    a = [[(i * (j + 1) % nk) / nk for j in range(nk)] for i in range(ni)]
    b = [[(i * (j + 2) % nj) / nj for j in range(nj)] for i in range(nk)]
    return alpha, beta, c, a, b


def kernel_gemm(ni, nj, nk, alpha, beta, c, a, b):
    """Update ``c`` in place with ``alpha * a @ b + beta * c``."""
    b_rows = b[:nk]
    for c_row, a_row in zip(c[:ni], a):
        for j in range(nj):
            acc = c_row[j] * beta
            for a_ik, b_row in zip(a_row[:nk], b_rows):
                acc += alpha * a_ik * b_row[j]
            c_row[j] = acc


def bench(ni, nj, nk):
    """Time the kernel for an ``ni`` x ``nj`` result with inner size ``nk``."""
    alpha, beta, c, a, b = init_array(ni, nj, nk)
    elapsed = time_function(lambda: kernel_gemm(ni, nj, nk, alpha, beta, c, a, b))
    consume(c)
    return elapsed