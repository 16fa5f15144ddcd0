"""Timing helpers used by every benchmark."""

from __future__ import annotations

import time

from .ndarray import format_array

__all__ = ["consume", "time_function"]

_LLC_CACHE_SIZE = 32 * 1024 * 1024
_WORD_SIZE = 8
_NUM_ELEMS = (_LLC_CACHE_SIZE - 1) // _WORD_SIZE + 1


def consume(value, echo=False):
    """Keep a result alive and hand it back, printing it if ``echo`` is set."""
    if echo:
        print(format_array(value))
    return value


def _flush_llc_cache() -> None:
    buffer = [0] * _NUM_ELEMS
    consume(sum(buffer))


def time_function(func) -> float:
    """Flush the cache, run ``func()`` once and return the seconds it took."""
    _flush_llc_cache()
    start = time.perf_counter()
    func()
    return time.perf_counter() - start