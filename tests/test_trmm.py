import pytest

from polybench.linear_algebra.blas.trmm import bench, init_array, kernel_trmm


def test_bench_small():
    assert bench(10, 12) >= 0.0


def test_init_array_values():
    alpha, a, b = init_array(10, 12)
    assert alpha == 1.5
    assert all(a[i][i] == 1.0 for i in range(10))
    assert a[3][1] == pytest.approx(0.4)
    assert a[1][3] == 0.0
    assert b[0][0] == 0.0
    assert b[1][0] == pytest.approx(1 / 12)


def test_small_product():
    a = [[1.0, 0.0], [3.0, 1.0]]
    b = [[1.0], [2.0]]
    kernel_trmm(2, 1, 2.0, a, b)
    assert b == [[14.0], [4.0]]


def test_upper_triangle_is_ignored():
    a = [[1.0, 100.0], [0.0, 1.0]]
    b = [[1.0, 2.0], [3.0, 4.0]]
    kernel_trmm(2, 2, 1.0, a, b)
    assert b == [[1.0, 2.0], [3.0, 4.0]]