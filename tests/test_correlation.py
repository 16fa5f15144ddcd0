import pytest

from polybench.datamining.correlation import bench, init_array, kernel_correlation


def test_check():
    assert bench(12, 14) >= 0.0


def test_init_array_values():
    float_n, data = init_array(12, 14)
    assert float_n == 14.0
    assert len(data) == 12 and all(len(row) == 14 for row in data)
    assert data[2][3] == 6 / 16
    assert data[0][5] == 0.0


def test_correlation_is_symmetric_with_unit_diagonal():
    float_n, data = init_array(12, 14)
    corr = kernel_correlation(12, 14, float_n, data)
    assert len(corr) == 14
    for i in range(14):
        assert corr[i][i] == 1.0
        for j in range(14):
            assert corr[i][j] == corr[j][i]


def test_zero_columns_rejected():
    with pytest.raises(ValueError):
        kernel_correlation(3, 0, 0.0, [[], [], []])