import random

import pytest

from aocsolver.day01 import parse_lists, similarity_score, total_distance

EXAMPLE = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n"


def _swap_columns(text):
    left, right = parse_lists(text)
    return "".join(f"{b}   {a}\n" for a, b in zip(left, right))


def _shuffled(text, seed):
    lines = text.splitlines()
    random.Random(seed).shuffle(lines)
    return "\n".join(lines) + "\n"


def test_parse_lists_example():
    left, right = parse_lists(EXAMPLE)
    assert left == [3, 4, 2, 1, 3, 3]
    assert right == [4, 3, 5, 3, 9, 3]


def test_parse_lists_empty():
    assert parse_lists("") == ([], [])


def test_total_distance_example():
    assert total_distance(EXAMPLE) == 11


def test_similarity_score_example():
    assert similarity_score(EXAMPLE) == 31


def test_total_distance_symmetric_in_columns():
    assert total_distance(_swap_columns(EXAMPLE)) == total_distance(EXAMPLE)
    assert total_distance("10   4\n") == total_distance("4   10\n")


def test_similarity_symmetric_in_columns():
    assert similarity_score(_swap_columns(EXAMPLE)) == similarity_score(EXAMPLE)


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_results_ignore_line_order(seed):
    shuffled = _shuffled(EXAMPLE, seed)
    assert total_distance(shuffled) == total_distance(EXAMPLE)
    assert similarity_score(shuffled) == similarity_score(EXAMPLE)


@pytest.mark.parametrize("value", [5, 42, 1234])
def test_single_matching_pair(value):
    text = f"{value}   {value}\n"
    assert similarity_score(text) == value
    assert total_distance(text) == total_distance("")


def test_disjoint_columns_have_no_similarity():
    assert similarity_score("1   2\n3   4\n") == similarity_score("")


@pytest.mark.parametrize("bad", ["12 13\n", "a   3\n", "3   b\n", "\n"])
def test_malformed_lines_raise(bad):
    with pytest.raises(ValueError):
        total_distance(bad)