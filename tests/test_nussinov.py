from polybench.medley.nussinov import bench, init_array, kernel_nussinov


def test_check():
    assert bench(25) >= 0.0


def test_init_array_values():
    seq, table = init_array(5)
    assert seq == [1, 2, 3, 0, 1]
    assert table == [[0] * 5 for _ in range(5)]


def test_small_sequence_scores():
    seq, table = init_array(5)
    kernel_nussinov(5, seq, table)
    assert table[1][4] == 1
    assert table[0][4] == 1
    assert table[2][4] == 0


def test_short_sequences_score_zero():
    for n in (1, 2, 3, 4):
        seq, table = init_array(n)
        kernel_nussinov(n, seq, table)
        assert table == [[0] * n for _ in range(n)]


def test_scores_are_monotone_and_lower_triangle_untouched():
    n = 25
    seq, table = init_array(n)
    kernel_nussinov(n, seq, table)
    for i in range(n):
        for j in range(n):
            if j <= i:
                assert table[i][j] == 0
            else:
                assert table[i][j] >= table[i][j - 1]
                if i + 1 < n:
                    assert table[i][j] >= table[i + 1][j]
    assert table[0][n - 1] > 0