"""All-pairs shortest paths with the Floyd-Warshall algorithm."""

from __future__ import annotations

from ..util import consume, time_function

__all__ = ["init_array", "kernel_floyd_warshall", "bench"]


def _initial_weight(i, j):
    s = i + j
    if s % 13 == 0 or s % 7 == 0 or s % 11 == 0:
        return 999
    return i * j % 7 + 1


def init_array(n):
    """Return the ``n`` x ``n`` path weight matrix."""
    return [[_initial_weight(i, j) for j in range(n)] for i in range(n)]


def kernel_floyd_warshall(n, path):
    """Relax ``path`` in place to shortest path lengths."""
    for k in range(n):
        row_k = path[k]
        for row in path[:n]:
            for j in range(n):
                via = row[k] + row_k[j]
                if not row[j] < via:
                    row[j] = via


def bench(n):
    """Time the kernel on an ``n`` x ``n`` graph."""
    path = init_array(n)
    elapsed = time_function(lambda: kernel_floyd_warshall(n, path))
    consume(path)
    return elapsed