"""Two-dimensional Gauss-Seidel stencil."""

from __future__ import annotations

from ..util import consume, time_function

__all__ = ["init_array", "kernel_seidel_2d", "bench"]


def init_array(n):
    """Return the ``n`` x ``n`` grid ``a``."""
    return [[(i * (j + 2) + 2) / n for j in range(n)] for i in range(n)]


def kernel_seidel_2d(tsteps, n, a):
    """Run ``tsteps`` in-place nine-point sweeps over ``a``."""
    if tsteps > 0 and n < 1:
        raise ValueError("grid size must be positive")
    for _ in range(tsteps):
        for i in range(1, n - 1):
            up, row, down = a[i - 1], a[i], a[i + 1]
            for j in range(1, n - 1):
                row[j] = (
                    up[j - 1]
                    + up[j]
                    + up[j + 1]
                    + row[j - 1]
                    + row[j]
                    + row[j + 1]
                    + down[j - 1]
                    + down[j]
                    + down[j + 1]
                ) / 9.0


def bench(n, tsteps):
    """Time the kernel on an ``n`` x ``n`` grid."""
    a = init_array(n)
    elapsed = time_function(lambda: kernel_seidel_2d(tsteps, n, a))
    consume(a)
    return elapsed