"""Two-dimensional Jacobi stencil."""

from __future__ import annotations

from ..util import consume, time_function

__all__ = ["init_array", "kernel_jacobi_2d", "bench"]


def init_array(n):
    """Return the two ``n`` x ``n`` grids ``(a, b)``."""
    a = [[(i * (j + 2) + 2) / n for j in range(n)] for i in range(n)]
    b = [[(i * (j + 3) + 3) / n for j in range(n)] for i in range(n)]
    return a, b


def _sweep(src, dst, n):
    for i in range(1, n - 1):
        row, above, below = src[i], src[i + 1], src[i - 1]
        out = dst[i]
        for j in range(1, n - 1):
            out[j] = 0.2 * (row[j] + row[j - 1] + row[j + 1] + above[j] + below[j])


def kernel_jacobi_2d(tsteps, n, a, b):
    """Run ``tsteps`` double sweeps over ``a`` and ``b`` in place."""
    if tsteps > 0 and n < 1:
        raise ValueError("grid size must be positive")
    for _ in range(tsteps):
        _sweep(a, b, n)
        _sweep(b, a, n)


def bench(n, tsteps):
    """Time the kernel on an ``n`` x ``n`` grid."""
    a, b = init_array(n)
    elapsed = time_function(lambda: kernel_jacobi_2d(tsteps, n, a, b))
    consume(a)
    return elapsed