"""Correlation matrix of a data set."""

from __future__ import annotations

import math

from ..ndarray import zeros
from ..util import consume, time_function

__all__ = ["init_array", "kernel_correlation", "bench"]


def init_array(m, n):
    """Return ``(float_n, data)`` with ``data`` of shape ``m`` x ``n``."""
    float_n = float(n)
    data = [[(i * j) / (n + i) for j in range(n)] for i in range(m)]
    return float_n, data


def kernel_correlation(m, n, float_n, data):
    """Normalise ``data`` in place and return its ``n`` x ``n`` correlation matrix."""
    if n < 1:
        raise ValueError("correlation needs at least one column")
    eps = 0.1
    rows = data[:m]
    columns = [[row[j] for row in rows] for j in range(n)]

    mean = [sum(column) / float_n for column in columns]

    stddev = []
    for column, mu in zip(columns, mean):
        sd = 0.0
        for value in column:
            diff = value - mu
            sd += diff * diff
            sd /= float_n
            sd = math.sqrt(sd)
            if sd <= eps:
                sd = 1.0
        stddev.append(sd)

    root = math.sqrt(float_n)
    for row in rows:
        row[:n] = [
            (value - mu) / (root * sd) for value, mu, sd in zip(row, mean, stddev)
        ]

    corr = zeros((n, n))
    for i in range(n - 1):
        corr[i][i] = 1.0
        for j in range(i + 1, n):
            total = sum(row[i] * row[j] for row in rows)
            corr[i][j] = total
            corr[j][i] = total
    corr[n - 1][n - 1] = 1.0
    return corr


def bench(m, n):
    """Time the correlation kernel on an ``m`` x ``n`` data set."""
    float_n, data = init_array(m, n)
    results = []
    elapsed = time_function(
        lambda: results.append(kernel_correlation(m, n, float_n, data))
    )
    consume(results[0])
    return elapsed