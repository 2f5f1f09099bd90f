import pytest

from algocorner.arrays import (
    ToeplitzMatrix,
    array_sum,
    min_max,
    move_negatives,
    multiply_matrices,
    reverse_string,
    rotation_count,
    spiral_order,
)

BASE = [1, 2, 3, 4, 5, 6, 7]


def test_rotation_count_of_sorted_is_zero():
    assert rotation_count(BASE) == 0
    assert rotation_count([]) == 0


def test_multiply_by_identity_is_unchanged():
    matrix = [[1, 2, 3], [4, 5, 6]]
    identity = [[1, 0, 0], [0, 1, 0], [0, 0, 1]]
    assert multiply_matrices(matrix, identity) == matrix


def test_multiply_known_product():
    assert multiply_matrices([[1, 2], [3, 4]], [[5, 6], [7, 8]]) == [[19, 22], [43, 50]]


def test_multiply_shape():
    result = multiply_matrices([[1, 2, 3]], [[1], [2], [3]])
    assert len(result) == 1 and len(result[0]) == 1


def test_multiply_mismatch_raises():
    with pytest.raises(ValueError):
        multiply_matrices([[1, 2]], [[1, 2]])


def test_reverse_string_round_trip():
    text = "hacktoberfest2022"
    assert reverse_string(reverse_string(text)) == text
    assert reverse_string(text)[0] == text[-1]


def test_reverse_string_small():
    assert reverse_string("abc") == "cba"
    assert reverse_string("") == ""


def test_min_max():
    assert min_max([0, 1, 3]) == (0, 3)
    assert min_max([5]) == (5, 5)


def test_min_max_empty_raises():
    with pytest.raises(ValueError):
        min_max([])


def test_array_sum_is_additive():
    first, second = [4, 9, -2], [7, 1]
    assert array_sum(first + second) == array_sum(first) + array_sum(second)
    assert array_sum([]) == 0
    assert array_sum([7]) == 7


def test_move_negatives_partitions():
    values = [3, -1, 4, -5, 9, -2, 6, -8]
    result = move_negatives(values)
    assert sorted(result) == sorted(values)
    negatives = sum(1 for v in values if v < 0)
    assert all(v < 0 for v in result[:negatives])
    assert all(v > 0 for v in result[negatives:])


def test_move_negatives_leaves_input_alone():
    values = [1, -1]
    move_negatives(values)
    assert values == [1, -1]


def test_spiral_square():
    assert spiral_order([[1, 2, 3], [4, 5, 6], [7, 8, 9]]) == [1, 2, 3, 6, 9, 8, 7, 4, 5]


@pytest.mark.parametrize(
    "matrix",
    [
        [[1, 2, 3, 4]],
        [[1], [2], [3]],
        [[1, 2, 3], [4, 5, 6]],
        [[1, 2], [3, 4], [5, 6], [7, 8]],
    ],
)
def test_spiral_is_permutation_starting_with_first_row(matrix):
    result = spiral_order(matrix)
    assert sorted(result) == sorted(v for row in matrix for v in row)
    assert result[: len(matrix[0])] == list(matrix[0])


def test_spiral_single_column():
    assert spiral_order([[1], [2], [3]]) == [1, 2, 3]


def test_spiral_empty_and_ragged():
    assert spiral_order([]) == []
    with pytest.raises(ValueError):
        spiral_order([[1, 2], [3]])


def test_toeplitz_diagonals_are_constant():
    matrix = ToeplitzMatrix(5)
    for col, value in enumerate([1, 2, 3, 4, 5]):
        matrix.set(0, col, value)
    for row, value in enumerate([6, 7, 8, 9], 1):
        matrix.set(row, 0, value)
    rows = matrix.rows()
    assert rows[0] == [1, 2, 3, 4, 5]
    assert [row[0] for row in rows] == [1, 6, 7, 8, 9]
    for r in range(1, 5):
        for c in range(1, 5):
            assert rows[r][c] == rows[r - 1][c - 1]


def test_toeplitz_set_get_round_trip():
    matrix = ToeplitzMatrix(3)
    matrix.set(1, 2, 42)
    assert matrix.get(0, 1) == 42
    assert matrix.get(1, 2) == 42
    assert matrix.get(2, 1) == 0


def test_toeplitz_out_of_range():
    matrix = ToeplitzMatrix(3)
    with pytest.raises(IndexError):
        matrix.get(3, 0)
    with pytest.raises(IndexError):
        matrix.set(0, -1, 1)
    with pytest.raises(ValueError):
        ToeplitzMatrix(0)