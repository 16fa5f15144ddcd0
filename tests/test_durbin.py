import pytest

from polybench.linear_algebra.solvers.durbin import bench, init_array, kernel_durbin


def test_check():
    assert bench(20) >= 0.0


def test_init_array_values():
    assert init_array(3) == [4.0, 3.0, 2.0]


def test_single_coefficient():
    assert kernel_durbin(1, [0.5]) == [-0.5]


def test_rejects_empty():
    with pytest.raises(ValueError):
        kernel_durbin(0, [])


def test_solves_yule_walker_system():
    r = [0.5, 0.2, 0.1, 0.05]
    n = len(r)
    y = kernel_durbin(n, r)
    first_column = [1.0] + r[:-1]
    for i in range(n):
        row = [first_column[abs(i - j)] for j in range(n)]
        lhs = sum(t * v for t, v in zip(row, y))
        assert lhs == pytest.approx(-r[i], abs=1e-12)


def test_input_unchanged():
    r = [0.4, 0.3, 0.2]
    kernel_durbin(3, r)
    assert r == [0.4, 0.3, 0.2]