"""One-dimensional Jacobi stencil."""

from __future__ import annotations

from ..util import consume, time_function

__all__ = ["init_array", "kernel_jacobi_1d", "bench"]


def init_array(n):
    """Return the two length-``n`` arrays ``(a, b)``."""
    a = [(i + 2) / n for i in range(n)]
    b = [(i + 3) / n for i in range(n)]
    return a, b


def _sweep(src, dst, n):
    dst[1 : n - 1] = [
        0.33333 * (left + mid + right)
        for left, mid, right in zip(src[: n - 2], src[1 : n - 1], src[2:n])
    ]


def kernel_jacobi_1d(tsteps, n, a, b):
    """Run ``tsteps`` double sweeps over ``a`` and ``b`` in place."""
    if tsteps > 0 and n < 1:
        raise ValueError("array length must be positive")
    for _ in range(tsteps):
        _sweep(a, b, n)
        _sweep(b, a, n)


def bench(n, tsteps):
    """Time the kernel on arrays of length ``n``."""
    a, b = init_array(n)
    elapsed = time_function(lambda: kernel_jacobi_1d(tsteps, n, a, b))
    consume(a)
    return elapsed