"""Forward substitution for a lower triangular system."""

from __future__ import annotations

from ...util import consume, time_function

__all__ = ["init_array", "kernel_trisolv", "bench"]


def init_array(n):
    """Return ``(l, x, b)``; ``l`` is lower triangular with zeros above."""
    x = [-999.0] * n
    b = [float(i) for i in range(n)]
    l = [
        [(i + n - j + 1) * 2.0 / n if j <= i else 0.0 for j in range(n)]
        for i in range(n)
    ]
    return l, x, b


def kernel_trisolv(n, l, x, b):
    """Solve ``l x = b`` in place into ``x``."""
    for i in range(n):
        l_row = l[i]
        acc = b[i]
        for j in range(i):
            acc -= l_row[j] * x[j]
        x[i] = acc / l_row[i]


def bench(n):
    """Time the solve for a system of size ``n``."""
    l, x, b = init_array(n)
    elapsed = time_function(lambda: kernel_trisolv(n, l, x, b))
    consume(x)
    return elapsed