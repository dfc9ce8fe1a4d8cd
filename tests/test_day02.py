import pytest

from aocsolver.day02 import (
    count_safe,
    count_safe_with_dampener,
    is_safe,
    is_safe_with_dampener,
    parse_reports,
)

EXAMPLE = "7 6 4 2 1\n1 2 7 8 9\n9 7 6 2 1\n1 3 2 4 5\n8 6 4 4 1\n1 3 6 7 9\n"


def test_parse_reports():
    reports = parse_reports(EXAMPLE)
    assert reports[0] == [7, 6, 4, 2, 1]
    assert reports[-1] == [1, 3, 6, 7, 9]
    assert len(reports) == len(EXAMPLE.splitlines())


def test_parse_empty_line_gives_empty_report():
    assert parse_reports("\n") == [[]]


def test_count_safe_example():
    assert count_safe(EXAMPLE) == 2


def test_count_safe_with_dampener_example():
    assert count_safe_with_dampener(EXAMPLE) == 4


def test_dampener_never_reduces_count():
    assert count_safe(EXAMPLE) <= count_safe_with_dampener(EXAMPLE)


@pytest.mark.parametrize("levels", [[7, 6, 4, 2, 1], [1, 3, 6, 7, 9]])
def test_safe_reports(levels):
    assert is_safe(levels)
    assert is_safe(list(reversed(levels)))
    assert is_safe_with_dampener(levels)


@pytest.mark.parametrize("levels", [[1, 2, 7, 8, 9], [9, 7, 6, 2, 1]])
def test_unsafe_even_with_dampener(levels):
    assert not is_safe(levels)
    assert not is_safe_with_dampener(levels)


@pytest.mark.parametrize("levels", [[1, 3, 2, 4, 5], [8, 6, 4, 4, 1]])
def test_fixed_by_dampener(levels):
    assert not is_safe(levels)
    assert is_safe_with_dampener(levels)


def test_short_reports():
    assert not is_safe([5])
    assert not is_safe([])
    assert not is_safe_with_dampener([5])
    assert is_safe_with_dampener([])


def test_all_safe_text_counts_every_line():
    text = "1 2 3\n10 8 5\n4 7\n"
    assert count_safe(text) == len(text.splitlines())


def test_invalid_token_raises():
    with pytest.raises(ValueError):
        count_safe("1 2  3\n")