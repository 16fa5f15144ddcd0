"""Deriche recursive edge-detection filter in single precision."""

from __future__ import annotations

import math

from ..config import data_type
from ..util import consume, time_function

__all__ = ["init_array", "kernel_deriche", "bench"]

_f32 = data_type("deriche").convert


def init_array(w, h):
    """Return ``(alpha, img_in)`` with ``img_in`` of shape ``w`` x ``h``."""
    alpha = 0.25
    img_in = [
        [_f32(((313 * i + 991 * j) % 65536) / 65535.0) for j in range(h)]
        for i in range(w)
    ]
    return alpha, img_in


def _combine(terms):
    """Evaluate ``c0*x0 + c1*x1 + ...`` left to right with f32 rounding."""
    it = iter(terms)
    c, x = next(it)
    acc = _f32(c * x)
    for c, x in it:
        acc = _f32(acc + _f32(c * x))
    return acc


def _causal(line, ca, cb, b1, b2):
    out = []
    xm1 = ym1 = ym2 = 0.0
    for x in line:
        y = _combine(((ca, x), (cb, xm1), (b1, ym1), (b2, ym2)))
        out.append(y)
        xm1 = x
        ym2 = ym1
        ym1 = y
    return out


def _anticausal(line, ca, cb, b1, b2):
    out = []
    xp1 = xp2 = yp1 = yp2 = 0.0
    for x in reversed(line):
        y = _combine(((ca, xp1), (cb, xp2), (b1, yp1), (b2, yp2)))
        out.append(y)
        xp2 = xp1
        xp1 = x
        yp2 = yp1
        yp1 = y
    out.reverse()
    return out


def _merge(c, first, second):
    return [
        [_f32(c * _f32(p + q)) for p, q in zip(row1, row2)]
        for row1, row2 in zip(first, second)
    ]


def _transpose(rows, width):
    return [[row[j] for row in rows] for j in range(width)]


def kernel_deriche(w, h, alpha, img_in):
    """Filter the ``w`` x ``h`` image and return the output image."""
    alpha = _f32(alpha)
    e_neg = _f32(math.exp(-alpha))
    one_minus = _f32(1.0 - e_neg)
    two_alpha = _f32(2.0 * alpha)
    denominator = _f32(
        _f32(1.0 + _f32(two_alpha * e_neg)) - _f32(math.exp(two_alpha))
    )
    k = _f32(_f32(one_minus * one_minus) / denominator)
    e_neg2 = _f32(math.exp(_f32(-2.0 * alpha)))

    a1 = a5 = k
    a2 = a6 = _f32(_f32(k * e_neg) * _f32(alpha - 1.0))
    a3 = a7 = _f32(_f32(k * e_neg) * _f32(alpha + 1.0))
    a4 = a8 = _f32(-k * e_neg2)
    b1 = _f32(2.0 ** -alpha)
    b2 = -e_neg2
    c1 = c2 = 1.0

    rows = [row[:h] for row in img_in[:w]]
    y1 = [_causal(row, a1, a2, b1, b2) for row in rows]
    y2 = [_anticausal(row, a3, a4, b1, b2) for row in rows]
    img_out = _merge(c1, y1, y2)

    columns = _transpose(img_out, h)
    y1 = _transpose([_causal(col, a5, a6, b1, b2) for col in columns], w)
    y2 = _transpose([_anticausal(col, a7, a8, b1, b2) for col in columns], w)
    return _merge(c2, y1, y2)


def bench(h, w):
    """Time the filter on a ``w`` x ``h`` image."""
    alpha, img_in = init_array(w, h)
    results = []
    elapsed = time_function(
        lambda: results.append(kernel_deriche(w, h, alpha, img_in))
    )
    consume(results[0])
    return elapsed