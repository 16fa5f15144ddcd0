"""Multi-resolution analysis kernel: each row of A is multiplied by C4."""

from __future__ import annotations

from ...util import consume, time_function

__all__ = ["init_array", "kernel_doitgen", "bench"]


def init_array(nr, nq, np):
    """Return ``(a, c4)`` with ``a`` of shape ``nr`` x ``nq`` x ``np``."""
    a = [
        [[((i * j + k) % np) / np for k in range(np)] for j in range(nq)]
        for i in range(nr)
    ]
    c4 = [[(i * j % np) / np for j in range(np)] for i in range(np)]
    return a, c4


def kernel_doitgen(nr, nq, np, a, c4):
    """Replace every row ``a[r][q]`` in place by ``a[r][q] @ c4``."""
    for plane in a[:nr]:
        for q in range(nq):
            row = plane[q]
            result = []
            for p in range(np):
                acc = 0.0
                for s in range(np):
                    acc += row[s] * c4[s][p]
                result.append(acc)
            row[:np] = result


def bench(np, nq, nr):
    """Time the kernel for an ``nr`` x ``nq`` x ``np`` array."""
    a, c4 = init_array(nr, nq, np)
    elapsed = time_function(lambda: kernel_doitgen(nr, nq, np, a, c4))
    consume(a)
    return elapsed