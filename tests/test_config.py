import pytest

from polybench.config import DataType, data_type


@pytest.mark.parametrize(
    "kernel, expected",
    [
        ("correlation", DataType.F64),
        ("gemm", DataType.F64),
        ("seidel_2d", DataType.F64),
        ("deriche", DataType.F32),
        ("floyd_warshall", DataType.I32),
        ("nussinov", DataType.I32),
    ],
)
def test_data_type_per_kernel(kernel, expected):
    assert data_type(kernel) is expected


def test_unknown_kernel_raises():
    with pytest.raises(ValueError):
        data_type("no_such_kernel")


def test_f32_convert_rounds_and_is_idempotent():
    once = DataType.F32.convert(0.1)
    assert once != 0.1
    assert DataType.F32.convert(once) == once
    assert abs(once - 0.1) < 1e-8


def test_f32_convert_keeps_exact_values():
    assert DataType.F32.convert(0.25) == 0.25


def test_f32_overflow_becomes_infinity():
    assert DataType.F32.convert(1e300) == float("inf")
    assert DataType.F32.convert(-1e300) == float("-inf")


def test_i32_convert_wraps():
    assert DataType.I32.convert(2**31) == -(2**31)
    assert DataType.I32.convert(-(2**31) - 1) == 2**31 - 1
    assert DataType.I32.convert(999) == 999


def test_f64_convert_is_identity_for_floats():
    assert DataType.F64.convert(0.1) == 0.1


def test_itemsizes_match_element_widths():
    f64 = data_type("gemm")
    f32 = data_type("deriche")
    i32 = data_type("nussinov")
    assert f32.itemsize == i32.itemsize
    assert f64.itemsize == 2 * f32.itemsize