"""Matrix-vector product and transpose: x1 += A*y1, x2 += A^T*y2."""

from __future__ import annotations

from ...util import consume, time_function

__all__ = ["init_array", "kernel_mvt", "bench"]


def init_array(n):
    """Return ``(x1, x2, y_1, y_2, a)`` for size ``n``."""
    x1 = [(i % n) / n for i in range(n)]
    x2 = [((i + 1) % n) / n for i in range(n)]
    y_1 = [((i + 3) % n) / n for i in range(n)]
    y_2 = [((i + 4) % n) / n for i in range(n)]
    a = [[(i * j % n) / n for j in range(n)] for i in range(n)]
    return x1, x2, y_1, y_2, a


def kernel_mvt(n, x1, x2, y_1, y_2, a):
    """Update ``x1`` and ``x2`` in place."""
    for i in range(n):
        a_row = a[i]
        acc = x1[i]
        for j in range(n):
            acc = acc + a_row[j] * y_1[j]
        x1[i] = acc
    for i in range(n):
        acc = x2[i]
        for j in range(n):
            acc = acc + a[j][i] * y_2[j]
        x2[i] = acc


def bench(n):
    """Time the kernel for size ``n``."""
    x1, x2, y_1, y_2, a = init_array(n)
    elapsed = time_function(lambda: kernel_mvt(n, x1, x2, y_1, y_2, a))
    consume(x1)
    consume(x2)
    return elapsed