"""Alternating direction implicit solver for 2D heat diffusion."""

from __future__ import annotations

from ..ndarray import zeros
from ..util import consume, time_function

__all__ = ["init_array", "kernel_adi", "bench"]


def init_array(n):
    """Return the initial ``n`` x ``n`` grid ``u``."""
    return [[(i + n - j) / n for j in range(n)] for i in range(n)]


def kernel_adi(tsteps, n, u):
    """Run ``tsteps - 1`` ADI sweeps over ``u`` in place and return it."""
    if tsteps <= 1:
        return u
    if n < 1:
        raise ValueError("grid size must be positive")

    dx = 1.0 / n
    dy = 1.0 / n
    dt = 1.0 / tsteps
    b1 = 2.0
    b2 = 1.0
    mul1 = b1 * dt / (dx * dx)
    mul2 = b2 * dt / (dy * dy)

    a = -mul1 / 2.0
    b = 1.0 + mul1
    c = a
    d = -mul2 / 2.0
    e = 1.0 + mul2
    f = d

    v = zeros((n, n))
    p = zeros((n, n))
    q = zeros((n, n))
    last = n - 1

    for _ in range(1, tsteps):
        # Column sweep: solve for v.
        for i in range(1, last):
            p_row, q_row = p[i], q[i]
            v[0][i] = 1.0
            p_row[0] = 0.0
            q_row[0] = v[0][i]
            for j in range(1, last):
                denom = a * p_row[j - 1] + b
                p_row[j] = -c / denom
                q_row[j] = (
                    -d * u[j][i - 1]
                    + (1.0 + 2.0 * d) * u[j][i]
                    - f * u[j][i + 1]
                    - a * q_row[j - 1]
                ) / denom
            v[last][i] = 1.0
            for j in range(last - 1, 0, -1):
                v[j][i] = p_row[j] * v[j + 1][i] + q_row[j]

        # Row sweep: solve for u.
        for i in range(1, last):
            p_row, q_row, u_row = p[i], q[i], u[i]
            v_prev, v_cur, v_next = v[i - 1], v[i], v[i + 1]
            u_row[0] = 1.0
            p_row[0] = 0.0
            q_row[0] = u_row[0]
            for j in range(1, last):
                denom = d * p_row[j - 1] + e
                p_row[j] = -f / denom
                q_row[j] = (
                    -a * v_prev[j]
                    + (1.0 + 2.0 * a) * v_cur[j]
                    - c * v_next[j]
                    - d * q_row[j - 1]
                ) / denom
            u_row[last] = 1.0
            for j in range(last - 1, 0, -1):
                u_row[j] = p_row[j] * u_row[j + 1] + q_row[j]
    return u


def bench(n, tsteps):
    """Time the ADI kernel on an ``n`` x ``n`` grid."""
    u = init_array(n)
    elapsed = time_function(lambda: kernel_adi(tsteps, n, u))
    consume(u)
    return elapsed