import pytest

from polybench.linear_algebra.kernels.two_mm import bench, init_array, kernel_2mm


def test_bench_small():
    assert bench(8, 9, 11, 12) >= 0.0


def test_init_array_shapes_and_values():
    alpha, beta, a, b, c, d = init_array(8, 9, 11, 12)
    assert (alpha, beta) == (1.5, 1.2)
    assert (len(a), len(a[0])) == (8, 11)
    assert (len(b), len(b[0])) == (11, 9)
    assert (len(c), len(c[0])) == (9, 12)
    assert (len(d), len(d[0])) == (8, 12)
    assert a[0][0] == pytest.approx(1 / 8)
    assert c[0][0] == pytest.approx(1 / 12)
    assert d[1][0] == pytest.approx(2 / 11)


def test_scalar_case():
    d = [[5.0]]
    kernel_2mm(1, 1, 1, 1, 1.0, 2.0, [[2.0]], [[3.0]], [[4.0]], d)
    assert d == [[34.0]]


def test_identity_factors_copy_b():
    identity = [[1.0, 0.0], [0.0, 1.0]]
    b = [[1.0, 2.0], [3.0, 4.0]]
    d = [[9.0, 9.0], [9.0, 9.0]]
    kernel_2mm(2, 2, 2, 2, 1.0, 0.0, identity, b, identity, d)
    assert d == [[1.0, 2.0], [3.0, 4.0]]