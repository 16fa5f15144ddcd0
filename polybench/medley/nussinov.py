"""Nussinov RNA folding by dynamic programming."""

from __future__ import annotations

from ..ndarray import zeros
from ..util import consume, time_function

__all__ = ["init_array", "kernel_nussinov", "bench"]


def init_array(n):
    """Return ``(seq, table)``: a base sequence and an ``n`` x ``n`` zero table."""
    seq = [(i + 1) % 4 for i in range(n)]
    table = zeros((n, n), fill=0)
    return seq, table


def kernel_nussinov(n, seq, table):
    """Fill the upper triangle of ``table`` in place with folding scores."""
    for i in reversed(range(n)):
        row = table[i]
        below = table[i + 1] if i + 1 < n else None
        for j in range(i + 1, n):
            row[j] = max(row[j], row[j - 1])
            if below is not None:
                row[j] = max(row[j], below[j])
                if i < j - 1:
                    paired = 1 if seq[i] + seq[j] == 3 else 0
                    row[j] = max(row[j], below[j - 1] + paired)
                else:
                    row[j] = max(row[j], below[j - 1])
            for k in range(i + 1, j):
                row[j] = max(row[j], row[k] + table[k + 1][j])


def bench(n):
    """Time the kernel on a sequence of length ``n``."""
    seq, table = init_array(n)
    elapsed = time_function(lambda: kernel_nussinov(n, seq, table))
    consume(table)
    return elapsed