"""QR decomposition by modified Gram-Schmidt."""

from __future__ import annotations

import math

from ...ndarray import zeros
from ...util import consume, time_function

__all__ = ["init_array", "kernel_gramschmidt", "bench"]


def init_array(m, n):
    """Return ``(a, r, q)``: ``a`` is ``m`` x ``n``, ``r`` and ``q`` are zeroed."""
    a = [[(((i * j) % m) / m) * 100.0 + 10.0 for j in range(n)] for i in range(m)]
    r = zeros((n, n))
    q = zeros((m, n))
    return a, r, q


def _div(x, y):
    if y != 0.0:
        return x / y
    if x == 0.0 or math.isnan(x):
        return math.nan
    return math.copysign(math.inf, x) * math.copysign(1.0, y)


def kernel_gramschmidt(m, n, a, r, q):
    """Fill ``q`` and ``r`` with the QR factors of ``a``; ``a`` is overwritten."""
    a_rows = a[:m]
    q_rows = q[:m]
    for k in range(n):
        nrm = 0.0
        for a_row in a_rows:
            nrm += a_row[k] * a_row[k]
        r_row = r[k]
        r_row[k] = math.sqrt(nrm)
        for a_row, q_row in zip(a_rows, q_rows):
            q_row[k] = _div(a_row[k], r_row[k])
        for j in range(k + 1, n):
            acc = 0.0
            for a_row, q_row in zip(a_rows, q_rows):
                acc += q_row[k] * a_row[j]
            r_row[j] = acc
            for a_row, q_row in zip(a_rows, q_rows):
                a_row[j] = a_row[j] - q_row[k] * acc


def bench(m, n):
    """Time the decomposition of an ``m`` x ``n`` matrix."""
    a, r, q = init_array(m, n)
    elapsed = time_function(lambda: kernel_gramschmidt(m, n, a, r, q))
    consume(a)
    consume(r)
    consume(q)
    return elapsed