"""Levinson-Durbin recursion for Toeplitz systems."""

from __future__ import annotations

import math

from ...util import consume, time_function

__all__ = ["init_array", "kernel_durbin", "bench"]


def init_array(n):
    """Return the length-``n`` autocorrelation vector ``r``."""
    return [float(n + 1 - i) for i in range(n)]


def _div(x, y):
    if y != 0.0:
        return x / y
    if x == 0.0 or math.isnan(x):
        return math.nan
    return math.copysign(math.inf, x) * math.copysign(1.0, y)


def kernel_durbin(n, r):
    """Return the solution ``y`` of the Yule-Walker system built from ``r``."""
    if n < 1:
        raise ValueError("durbin needs at least one coefficient")
    y = [0.0] * n
    y[0] = -r[0]
    beta = 1.0
    alpha = -r[0]
    for k in range(1, n):
        beta = (1.0 - alpha * alpha) * beta
        total = 0.0
        for r_val, y_val in zip(reversed(r[:k]), y[:k]):
            total += r_val * y_val
        alpha = _div(-(r[k] + total), beta)
        y[:k] = [y_i + alpha * y_rev for y_i, y_rev in zip(y[:k], reversed(y[:k]))]
        y[k] = alpha
    return y


def bench(n):
    """Time the recursion for length ``n``."""
    r = init_array(n)
    results = []
    elapsed = time_function(lambda: results.append(kernel_durbin(n, r)))
    consume(results[0])
    return elapsed