import statistics

import pytest

from polybench.datamining.covariance import bench, init_array, kernel_covariance


def test_check():
    assert bench(12, 14) >= 0.0


def test_init_array_values():
    float_n, data = init_array(12, 14)
    assert float_n == 14.0
    assert data[2][3] == 6 / 14
    assert data[11][13] == 143 / 14


def test_covariance_is_symmetric():
    float_n, data = init_array(12, 14)
    cov = kernel_covariance(12, 14, float_n, data)
    for i in range(14):
        assert cov[i][i] >= 0.0
        for j in range(14):
            assert cov[i][j] == cov[j][i]


def test_square_data_matches_sample_variance():
    m = n = 6
    float_n, data = init_array(m, n)
    columns = [[row[j] for row in data] for j in range(n)]
    cov = kernel_covariance(m, n, float_n, data)
    for j in range(n):
        assert cov[j][j] == pytest.approx(statistics.variance(columns[j]))


def test_data_is_centred_in_place():
    float_n, data = init_array(12, 14)
    kernel_covariance(12, 14, float_n, data)
    assert data[0][0] == 0.0
    assert data[5][0] == 0.0