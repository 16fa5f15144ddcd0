from polybench.config import DataType
from polybench.medley.deriche import bench, init_array, kernel_deriche


def test_check():
    assert bench(16, 9) >= 0.0


def test_init_array_values():
    alpha, img = init_array(9, 16)
    assert alpha == 0.25
    assert len(img) == 9 and all(len(row) == 16 for row in img)
    assert img[0][0] == 0.0
    assert img[1][0] == DataType.F32.convert(313 / 65535.0)


def test_output_shape_and_f32_values():
    alpha, img = init_array(9, 16)
    out = kernel_deriche(9, 16, alpha, img)
    assert len(out) == 9 and all(len(row) == 16 for row in out)
    for row in out:
        for value in row:
            assert DataType.F32.convert(value) == value


def test_zero_image_gives_zero_output():
    out = kernel_deriche(4, 5, 0.25, [[0.0] * 5 for _ in range(4)])
    assert out == [[0.0] * 5 for _ in range(4)]


def test_filter_is_linear_under_doubling():
    alpha, img = init_array(9, 16)
    doubled = [[2.0 * value for value in row] for row in img]
    out = kernel_deriche(9, 16, alpha, img)
    out2 = kernel_deriche(9, 16, alpha, doubled)
    for row, row2 in zip(out, out2):
        for value, value2 in zip(row, row2):
            assert value2 == 2.0 * value


def test_input_is_not_modified():
    alpha, img = init_array(9, 16)
    copy = [row[:] for row in img]
    kernel_deriche(9, 16, alpha, img)
    assert img == copy