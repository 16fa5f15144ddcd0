import pytest

from polybench.linear_algebra.kernels.three_mm import bench, init_array, kernel_3mm


def test_bench_small():
    assert bench(8, 9, 10, 11, 12) >= 0.0


def test_init_array_shapes_and_values():
    a, b, c, d = init_array(8, 9, 10, 11, 12)
    assert (len(a), len(a[0])) == (8, 10)
    assert (len(b), len(b[0])) == (10, 9)
    assert (len(c), len(c[0])) == (9, 12)
    assert (len(d), len(d[0])) == (12, 11)
    assert a[0][0] == pytest.approx(1 / 40)
    assert b[0][0] == pytest.approx(2 / 45)
    assert c[0][0] == 0.0
    assert d[0][0] == pytest.approx(2 / 50)


def test_small_chain():
    g = kernel_3mm(1, 1, 2, 1, 1, [[1.0, 2.0]], [[1.0], [1.0]], [[3.0]], [[2.0]])
    assert g == [[18.0]]


def test_result_shape():
    a, b, c, d = init_array(3, 4, 5, 6, 7)
    g = kernel_3mm(3, 4, 5, 6, 7, a, b, c, d)
    assert len(g) == 3
    assert all(len(row) == 6 for row in g)