import pytest

from polybench.linear_algebra.solvers.trisolv import bench, init_array, kernel_trisolv


def test_check():
    assert bench(20) >= 0.0


def test_init_array_small():
    l, x, b = init_array(2)
    assert l == [[3.0, 0.0], [4.0, 3.0]]
    assert x == [-999.0, -999.0]
    assert b == [0.0, 1.0]


def test_small_system():
    l, x, b = init_array(2)
    kernel_trisolv(2, l, x, b)
    assert x == [0.0, pytest.approx(1.0 / 3.0)]


def test_single_element():
    l, x, b = init_array(1)
    assert l == [[4.0]]
    kernel_trisolv(1, l, x, b)
    assert x == [0.0]


def test_solution_satisfies_system():
    n = 20
    l, x, b = init_array(n)
    kernel_trisolv(n, l, x, b)
    for row, b_i in zip(l, b):
        assert sum(l_ij * x_j for l_ij, x_j in zip(row, x)) == pytest.approx(
            b_i, abs=1e-9
        )