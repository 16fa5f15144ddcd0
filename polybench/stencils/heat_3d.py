"""Heat equation on a three-dimensional grid."""

from __future__ import annotations

from ..util import consume, time_function

__all__ = ["init_array", "kernel_heat_3d", "bench"]


def init_array(n):
    """Return two equal ``n`` x ``n`` x ``n`` grids ``(a, b)``."""
    b = [
        [[(i + j + (n - k)) * 10.0 / n for k in range(n)] for j in range(n)]
        for i in range(n)
    ]
    a = [[list(row) for row in plane] for plane in b]
    return a, b


def _step(src, dst, n):
    for i in range(1, n - 1):
        prev, cur, nxt = src[i - 1], src[i], src[i + 1]
        out = dst[i]
        for j in range(1, n - 1):
            row, up, down = cur[j], cur[j + 1], cur[j - 1]
            above, below = nxt[j], prev[j]
            out_row = out[j]
            for k in range(1, n - 1):
                centre = row[k]
                out_row[k] = (
                    0.125 * (above[k] - 2.0 * centre + below[k])
                    + 0.125 * (up[k] - 2.0 * centre + down[k])
                    + 0.125 * (row[k + 1] - 2.0 * centre + row[k - 1])
                    + centre
                )


def kernel_heat_3d(tsteps, n, a, b):
    """Run ``tsteps - 1`` double sweeps over ``a`` and ``b`` in place."""
    if tsteps > 1 and n < 1:
        raise ValueError("grid size must be positive")
    for _ in range(1, tsteps):
        _step(a, b, n)
        _step(b, a, n)


def bench(n, tsteps):
    """Time the kernel on an ``n``-sided cube."""
    a, b = init_array(n)
    elapsed = time_function(lambda: kernel_heat_3d(tsteps, n, a, b))
    consume(a)
    return elapsed