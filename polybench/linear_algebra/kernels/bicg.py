"""BiCG sub-kernel: s = A^T*r and q = A*p."""

from __future__ import annotations

from ...util import consume, time_function

__all__ = ["init_array", "kernel_bicg", "bench"]


def init_array(m, n):
    """Return ``(a, r, p)`` with ``a`` of shape ``m`` x ``n``."""
    p = [(i % n) / n for i in range(n)]
    r = [(i % m) / m for i in range(m)]
    a = [[(i * (j + 1) % m) / m for j in range(n)] for i in range(m)]
    return a, r, p


def kernel_bicg(m, n, a, p, r):
    """Return ``(s, q)`` where ``s = a.T @ r`` and ``q = a @ p``."""
    s = [0.0] * n
    q = []
    for i in range(m):
        a_row = a[i]
        r_i = r[i]
        q_i = 0.0
        for j in range(n):
            a_ij = a_row[j]
            s[j] = s[j] + r_i * a_ij
            q_i = q_i + a_ij * p[j]
        q.append(q_i)
    return s, q


def bench(m, n):
    """Time the kernel for an ``m`` x ``n`` matrix."""
    a, r, p = init_array(m, n)
    results = []
    elapsed = time_function(lambda: results.append(kernel_bicg(m, n, a, p, r)))
    s, q = results[0]
    consume(s)
    consume(q)
    return elapsed