"""Two-dimensional finite-difference time-domain electromagnetic kernel."""

from __future__ import annotations

from ..util import consume, time_function

__all__ = ["init_array", "kernel_fdtd_2d", "bench"]


def init_array(tmax, nx, ny):
    """Return ``(ex, ey, hz, fict)`` for an ``nx`` x ``ny`` field."""
    fict = [float(t) for t in range(tmax)]
    ex = [[(i * (j + 1)) / nx for j in range(ny)] for i in range(nx)]
    ey = [[(i * (j + 2)) / ny for j in range(ny)] for i in range(nx)]
    hz = [[(i * (j + 3)) / nx for j in range(ny)] for i in range(nx)]
    return ex, ey, hz, fict


def kernel_fdtd_2d(tmax, nx, ny, ex, ey, hz, fict):
    """Advance the fields ``tmax`` steps in place."""
    if tmax > 0 and (nx < 1 or ny < 1):
        raise ValueError("field dimensions must be positive")
    for t in range(tmax):
        ey[0][:ny] = [fict[t]] * ny
        for i in range(1, nx):
            ey_row, hz_row, hz_prev = ey[i], hz[i], hz[i - 1]
            for j in range(ny):
                ey_row[j] = ey_row[j] - 0.5 * (hz_row[j] - hz_prev[j])
        for ex_row, hz_row in zip(ex[:nx], hz):
            for j in range(1, ny):
                ex_row[j] = ex_row[j] - 0.5 * (hz_row[j] - hz_row[j - 1])
        for i in range(nx - 1):
            hz_row, ex_row, ey_row, ey_next = hz[i], ex[i], ey[i], ey[i + 1]
            for j in range(ny - 1):
                hz_row[j] = hz_row[j] - 0.7 * (
                    ex_row[j + 1] - ex_row[j] + ey_next[j] - ey_row[j]
                )


def bench(nx, ny, tmax):
    """Time the kernel on an ``nx`` x ``ny`` field for ``tmax`` steps."""
    ex, ey, hz, fict = init_array(tmax, nx, ny)
    elapsed = time_function(lambda: kernel_fdtd_2d(tmax, nx, ny, ex, ey, hz, fict))
    consume(ex)
    consume(ey)
    consume(hz)
    return elapsed