"""Two chained matrix multiplications: D = alpha*A*B*C + beta*D."""

from __future__ import annotations

from ...util import consume, time_function

__all__ = ["init_array", "kernel_2mm", "bench"]


def init_array(ni, nj, nk, nl):
    """Return ``(alpha, beta, a, b, c, d)`` for the given dimensions."""
    alpha = 1.5
    beta = 1.2
    a = [[((i * j + 1) % ni) / ni for j in range(nk)] for i in range(ni)]
    b = [[(i * (j + 1) % nj) / nj for j in range(nj)] for i in range(nk)]
    c = [[((i * (j + 3) + 1) % nl) / nl for j in range(nl)] for i in range(nj)]
    d = [[(i * (j + 2) % nk) / nk for j in range(nl)] for i in range(ni)]
    return alpha, beta, a, b, c, d


def kernel_2mm(ni, nj, nk, nl, alpha, beta, a, b, c, d):
    """Update ``d`` in place with ``alpha * a @ b @ c + beta * d``."""
    tmp = []
    for i in range(ni):
        a_row = a[i]
        row = []
        for j in range(nj):
            acc = 0.0
            for k in range(nk):
                acc += alpha * a_row[k] * b[k][j]
            row.append(acc)
        tmp.append(row)

    for tmp_row, d_row in zip(tmp, d):
        for j in range(nl):
            acc = d_row[j] * beta
            for k in range(nj):
                acc += tmp_row[k] * c[k][j]
            d_row[j] = acc


def bench(ni, nj, nk, nl):
    """Time the kernel for the given dimensions."""
    alpha, beta, a, b, c, d = init_array(ni, nj, nk, nl)
    elapsed = time_function(
        lambda: kernel_2mm(ni, nj, nk, nl, alpha, beta, a, b, c, d)
    )
    consume(d)
    return elapsed