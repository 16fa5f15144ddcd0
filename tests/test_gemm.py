from polybench.linear_algebra.blas import gemm


def test_bench_small():
    assert gemm.bench(10, 11, 12) >= 0.0


def test_init_values():
    alpha, beta, c, a, b = gemm.init_array(2, 3, 4)
    assert (alpha, beta) == (1.5, 1.2)
    assert c[0][0] == 0.5
    assert c[1][1] == 0.0
    assert a[1][2] == 0.75
    assert len(b) == 4 and all(len(row) == 3 for row in b)


def test_identity_product():
    a = [[1.0, 0.0], [0.0, 1.0]]
    b = [[1.0, 2.0], [3.0, 4.0]]
    c = [[0.0, 0.0], [0.0, 0.0]]
    gemm.kernel_gemm(2, 2, 2, 1.0, 0.0, c, a, b)
    assert c == [[1.0, 2.0], [3.0, 4.0]]


def test_beta_scales_c():
    c = [[1.0, 2.0]]
    gemm.kernel_gemm(1, 2, 1, 1.0, 2.0, c, [[0.0]], [[5.0, 6.0]])
    assert c == [[2.0, 4.0]]