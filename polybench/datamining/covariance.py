"""Covariance matrix of a data set."""

from __future__ import annotations

from ..ndarray import zeros
from ..util import consume, time_function

__all__ = ["init_array", "kernel_covariance", "bench"]


def init_array(m, n):
    """Return ``(float_n, data)`` with ``data`` of shape ``m`` x ``n``."""
    float_n = float(n)
    data = [[(i * j) / n for j in range(n)] for i in range(m)]
    return float_n, data


def kernel_covariance(m, n, float_n, data):
    """Centre ``data`` in place and return its ``n`` x ``n`` covariance matrix."""
    rows = data[:m]
    mean = [sum(row[j] for row in rows) / float_n for j in range(n)]

    for row in rows:
        row[:n] = [value - mu for value, mu in zip(row, mean)]

    cov = zeros((n, n))
    for i in range(n):
        for j in range(i, n):
            total = sum(row[i] * row[j] for row in rows)
            total /= float_n - 1.0
            cov[i][j] = total
            cov[j][i] = total
    return cov


def bench(m, n):
    """Time the covariance kernel on an ``m`` x ``n`` data set."""
    float_n, data = init_array(m, n)
    results = []
    elapsed = time_function(
        lambda: results.append(kernel_covariance(m, n, float_n, data))
    )
    consume(results[0])
    return elapsed