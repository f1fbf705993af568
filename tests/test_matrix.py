import math

import pytest

from selfplaychess.matrix import Matrix


def test_new_matrix_is_filled_with_init():
    m = Matrix(2, 3, 1.5)
    assert m.shape == (2, 3)
    assert all(value == 1.5 for row in m.data for value in row)


def test_default_init_is_zero():
    m = Matrix(3, 2)
    assert (m.data == 0).all()


def test_negative_dimensions_rejected():
    with pytest.raises(ValueError):
        Matrix(-1, 2)


def test_vector_round_trip():
    values = [1.0, 0.5, -0.5]
    m = Matrix.from_vector(values)
    assert m.shape == (3, 1)
    assert m.to_vector() == values


def test_to_vector_requires_column():
    with pytest.raises(ValueError):
        Matrix(2, 2).to_vector()


def test_add_with_negation_is_zero():
    a = Matrix.from_vector([1.0, -2.0, 3.5])
    result = a + a * -1.0
    assert result.to_vector() == [0.0, 0.0, 0.0]


def test_scalar_multiplication_matches_repeated_addition():
    a = Matrix.from_vector([1.0, -2.0, 3.5])
    assert a * 2 == a + a
    assert 2 * a == a * 2


def test_add_shape_mismatch():
    with pytest.raises(ValueError):
        Matrix(2, 1) + Matrix(3, 1)


def test_matmul_identity():
    identity = Matrix(3, 3)
    for i in range(3):
        identity.data[i][i] = 1.0
    v = Matrix.from_vector([4.0, -1.0, 2.0])
    assert identity @ v == v


def test_matmul_shape():
    result = Matrix(2, 3, 1.0) @ Matrix(3, 4, 1.0)
    assert result.shape == (2, 4)


def test_matmul_shape_mismatch():
    with pytest.raises(ValueError):
        Matrix(2, 3) @ Matrix(2, 3)


def test_sigmoid_of_zero_is_half():
    assert Matrix(2, 2).sigmoid().data.tolist() == [[0.5, 0.5], [0.5, 0.5]]


def test_sigmoid_is_symmetric():
    s = Matrix.from_vector([2.0, -2.0]).sigmoid().to_vector()
    assert math.isclose(s[0] + s[1], 1.0)
    assert 0.0 < s[1] < s[0] < 1.0


def test_sigmoid_derivative_peak_at_zero():
    d = Matrix.from_vector([0.0, 3.0, -3.0]).sigmoid_derivative().to_vector()
    assert d[0] == 0.25
    assert d[1] < d[0]
    assert math.isclose(d[1], d[2])


def test_softmax_sums_to_one_and_keeps_order():
    s = Matrix.from_vector([1.0, 3.0, 2.0]).softmax().to_vector()
    assert math.isclose(sum(s), 1.0)
    assert s[1] > s[2] > s[0]


def test_softmax_uniform_for_equal_inputs():
    s = Matrix.from_vector([7.0] * 4).softmax().to_vector()
    assert all(math.isclose(value, s[0]) for value in s)
    assert math.isclose(sum(s), 1.0)


def test_softmax_handles_large_values():
    s = Matrix.from_vector([1000.0, 1000.0]).softmax().to_vector()
    assert all(math.isfinite(value) for value in s)
    assert math.isclose(s[0], s[1])


def test_softmax_requires_column():
    with pytest.raises(ValueError):
        Matrix(2, 2).softmax()


def test_softmax_derivative_rows_sum_to_zero():
    s = Matrix.from_vector([0.2, 0.3, 0.5])
    d = s.softmax_derivative(1).to_vector()
    assert math.isclose(sum(d), 0.0, abs_tol=1e-12)
    assert d[1] > 0
    assert d[0] < 0 and d[2] < 0


def test_softmax_derivative_bad_index():
    with pytest.raises(IndexError):
        Matrix.from_vector([0.5, 0.5]).softmax_derivative(2)


def test_transpose_round_trip():
    m = Matrix(2, 3)
    m.data[0][2] = 5.0
    t = m.transpose()
    assert t.shape == (3, 2)
    assert t.data[2][0] == 5.0
    assert t.transpose() == m


def test_hadamard_with_ones_is_identity():
    m = Matrix.from_vector([1.0, -2.0, 3.0])
    ones = Matrix(3, 1, 1.0)
    assert m.hadamard(ones) == m


def test_hadamard_shape_mismatch():
    with pytest.raises(ValueError):
        Matrix(2, 1).hadamard(Matrix(1, 2))


def test_str_format():
    assert str(Matrix.from_vector([1.0, 2.0])) == "1 \n2 \n"