import math
from itertools import accumulate

import pytest

from algocorner.dynamic import (
    binomial_coefficient,
    catalan,
    distinct_subsequences,
    edit_distance,
    friends_pairings,
    lcs_length,
    lcs_length_recursive,
    matrix_chain_order,
    max_gold,
    n_choose_r,
    partition_cost,
    pascal_triangle,
)

WORDS = ["", "a", "horse", "ros", "intention", "execution", "AGGTAB", "GXTXAYB"]


def test_edit_distance_known_example():
    assert edit_distance("horse", "ros") == 3


@pytest.mark.parametrize("word", WORDS)
def test_edit_distance_identity_and_empty(word):
    assert edit_distance(word, word) == 0
    assert edit_distance("", word) == len(word)
    assert edit_distance(word, "") == len(word)


@pytest.mark.parametrize("a", WORDS)
@pytest.mark.parametrize("b", WORDS)
def test_edit_distance_symmetric_and_bounded(a, b):
    distance = edit_distance(a, b)
    assert distance == edit_distance(b, a)
    assert abs(len(a) - len(b)) <= distance <= max(len(a), len(b))


@pytest.mark.parametrize("a", WORDS)
@pytest.mark.parametrize("b", WORDS)
def test_lcs_versions_agree(a, b):
    length = lcs_length(a, b)
    assert length == lcs_length_recursive(a, b)
    assert length == lcs_length(b, a)
    assert length <= min(len(a), len(b))


def test_lcs_of_string_with_itself_and_empty():
    assert lcs_length("AGGTAB", "AGGTAB") == len("AGGTAB")
    assert lcs_length("RGBGARGA", "") == 0


def test_distinct_subsequences_edge_cases():
    assert distinct_subsequences("abc", "") == 1
    assert distinct_subsequences("abc", "abc") == 1
    assert distinct_subsequences("ab", "abc") == 0


def test_distinct_subsequences_single_character_counts_occurrences():
    text = "rabbbit"
    assert distinct_subsequences(text, "b") == text.count("b")


def _square_sum_cost(values):
    prefix = [0, *accumulate(values)]
    return lambda i, j: (prefix[j + 1] - prefix[i]) ** 2


def test_partition_cost_one_group_is_whole_range():
    values = [3, 1, 4, 1, 5, 9, 2, 6]
    cost = _square_sum_cost(values)
    assert partition_cost(1, len(values), cost) == cost(0, len(values) - 1)


def test_partition_cost_never_grows_with_more_groups():
    values = [3, 1, 4, 1, 5, 9, 2, 6]
    cost = _square_sum_cost(values)
    results = [partition_cost(g, len(values), cost) for g in range(1, 6)]
    assert all(a >= b for a, b in zip(results, results[1:]))


@pytest.mark.parametrize("groups, length", [(0, 3), (2, 0)])
def test_partition_cost_rejects_bad_sizes(groups, length):
    with pytest.raises(ValueError):
        partition_cost(groups, length, lambda i, j: 0)


@pytest.mark.parametrize("n", range(0, 9))
def test_binomial_matches_math_comb(n):
    assert [binomial_coefficient(n, k) for k in range(n + 2)] == [
        math.comb(n, k) for k in range(n + 2)
    ]


def test_binomial_rejects_negative():
    with pytest.raises(ValueError):
        binomial_coefficient(3, -1)


def test_friends_pairings_small_and_recurrence():
    assert [friends_pairings(n) for n in range(3)] == [0, 1, 2]
    for n in range(3, 12):
        expected = friends_pairings(n - 1) + (n - 1) * friends_pairings(n - 2)
        assert friends_pairings(n) == expected


def test_friends_pairings_rejects_negative():
    with pytest.raises(ValueError):
        friends_pairings(-1)


def test_max_gold_source_example():
    gold = [[1, 3, 1, 5], [2, 2, 4, 1], [5, 0, 2, 3], [0, 6, 1, 2]]
    assert max_gold(gold) == 16


def test_max_gold_single_column_and_row():
    assert max_gold([[4], [9], [2]]) == max(4, 9, 2)
    assert max_gold([[1, 7, 3, 5]]) == sum([1, 7, 3, 5])
    assert max_gold([]) == 0


def test_max_gold_rejects_ragged_grid():
    with pytest.raises(ValueError):
        max_gold([[1, 2], [3]])


def test_matrix_chain_source_example():
    assert matrix_chain_order([1, 2, 3, 4, 3]) == 30


def test_matrix_chain_single_and_reversed():
    assert matrix_chain_order([7, 9]) == 0
    dims = [10, 30, 5, 60, 2]
    assert matrix_chain_order(dims) == matrix_chain_order(dims[::-1])


def test_matrix_chain_rejects_too_few_dimensions():
    with pytest.raises(ValueError):
        matrix_chain_order([5])


@pytest.mark.parametrize("n", range(0, 12))
def test_catalan_closed_form(n):
    assert catalan(n) == math.comb(2 * n, n) // (n + 1)


def test_pascal_triangle_rows():
    rows = pascal_triangle(10)
    assert len(rows) == 11
    for n, row in enumerate(rows):
        assert row == [math.comb(n, r) for r in range(n + 1)]
        assert row == row[::-1]


def test_n_choose_r():
    assert n_choose_r(12, 5) == math.comb(12, 5)
    assert n_choose_r(4, 6) == 0
    with pytest.raises(ValueError):
        n_choose_r(4, -1)