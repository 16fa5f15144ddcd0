"""Element types used by each benchmark kernel."""

from __future__ import annotations

import math
import struct
from enum import Enum

__all__ = ["DataType", "data_type"]


class DataType(Enum):
    """Numeric element type of a kernel's arrays."""

    F64 = "f64"
    F32 = "f32"
    I32 = "i32"

    @property
    def itemsize(self) -> int:
        """Size of one element in bytes."""
        return _ITEMSIZES[self]

    def convert(self, value):
        """Return ``value`` as this type would store it."""
        if self is DataType.F64:
            return float(value)
        if self is DataType.F32:
            try:
                return struct.unpack("<f", struct.pack("<f", value))[0]
            except OverflowError:
                return math.copysign(math.inf, value)
        wrapped = (int(value) + 2**31) % 2**32
        return wrapped - 2**31


_ITEMSIZES = {DataType.F64: 8, DataType.F32: 4, DataType.I32: 4}

_KERNEL_TYPES = {
    "correlation": DataType.F64,
    "covariance": DataType.F64,
    "gemm": DataType.F64,
    "gemver": DataType.F64,
    "gesummv": DataType.F64,
    "symm": DataType.F64,
    "syr2k": DataType.F64,
    "syrk": DataType.F64,
    "trmm": DataType.F64,
    "2mm": DataType.F64,
    "3mm": DataType.F64,
    "atax": DataType.F64,
    "bicg": DataType.F64,
    "doitgen": DataType.F64,
    "mvt": DataType.F64,
    "cholesky": DataType.F64,
    "durbin": DataType.F64,
    "gramschmidt": DataType.F64,
    "lu": DataType.F64,
    "ludcmp": DataType.F64,
    "trisolv": DataType.F64,
    "deriche": DataType.F32,
    "floyd_warshall": DataType.I32,
    "nussinov": DataType.I32,
    "adi": DataType.F64,
    "fdtd_2d": DataType.F64,
    "heat_3d": DataType.F64,
    "jacobi_1d": DataType.F64,
    "jacobi_2d": DataType.F64,
    "seidel_2d": DataType.F64,
}


def data_type(kernel: str) -> DataType:
    """Return the element type used by the named kernel."""
    try:
        return _KERNEL_TYPES[kernel]
    except KeyError:
        raise ValueError(f"unknown kernel: {kernel!r}") from None