"""Three matrix multiplications: G = (A*B)*(C*D)."""

from __future__ import annotations

from ...util import consume, time_function

__all__ = ["init_array", "kernel_3mm", "bench"]


def init_array(ni, nj, nk, nl, nm):
    """Return ``(a, b, c, d)`` for the given dimensions."""
    a = [[((i * j + 1) % ni) / (5 * ni) for j in range(nk)] for i in range(ni)]
    b = [[((i * (j + 1) + 2) % nj) / (5 * nj) for j in range(nj)] for i in range(nk)]
    c = [[(i * (j + 3) % nl) / (5 * nl) for j in range(nm)] for i in range(nj)]
    d = [[((i * (j + 2) + 2) % nk) / (5 * nk) for j in range(nl)] for i in range(nm)]
    return a, b, c, d


def _matmul(x, y, rows, cols, inner):
    result = []
    for i in range(rows):
        x_row = x[i]
        row = []
        for j in range(cols):
            acc = 0.0
            for k in range(inner):
                acc += x_row[k] * y[k][j]
            row.append(acc)
        result.append(row)
    return result


def kernel_3mm(ni, nj, nk, nl, nm, a, b, c, d):
    """Return the ``ni`` x ``nl`` product ``(a @ b) @ (c @ d)``."""
    e = _matmul(a, b, ni, nj, nk)
    f = _matmul(c, d, nj, nl, nm)
    return _matmul(e, f, ni, nl, nj)


def bench(ni, nj, nk, nl, nm):
    """Time the kernel for the given dimensions."""
    a, b, c, d = init_array(ni, nj, nk, nl, nm)
    results = []
    elapsed = time_function(
        lambda: results.append(kernel_3mm(ni, nj, nk, nl, nm, a, b, c, d))
    )
    consume(results[0])
    return elapsed