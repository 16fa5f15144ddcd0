import pytest

from polybench.linear_algebra.kernels.atax import bench, init_array, kernel_atax


def test_bench_small():
    assert bench(19, 21) >= 0.0


def test_init_array_values():
    a, x = init_array(19, 21)
    assert (len(a), len(a[0])) == (19, 21)
    assert x[0] == 1.0
    assert x[7] == pytest.approx(1 + 7 / 21)
    assert a[0][0] == 0.0
    assert a[1][2] == pytest.approx(3 / 95)


def test_small_product():
    assert kernel_atax(2, 2, [[1.0, 2.0], [3.0, 4.0]], [1.0, 1.0]) == [24.0, 34.0]


def test_zero_rows_give_zero_vector():
    assert kernel_atax(0, 3, [], [1.0, 2.0, 3.0]) == [0.0, 0.0, 0.0]