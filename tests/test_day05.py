import pytest

from aocsolver.day05 import (
    is_ordered,
    middle_sum_ordered,
    middle_sum_reordered,
    parse_manual,
    reorder,
)

EXAMPLE = """47|53
97|13
97|61
97|47
75|29
61|13
75|53
29|13
97|29
53|29
61|53
97|53
61|29
47|13
75|47
97|75
47|61
75|61
47|29
75|13
53|13

75,47,61,53,29
97,61,53,29,13
75,29,13
75,97,47,61,53
61,13,29
97,13,75,29,47
"""


@pytest.fixture
def manual():
    return parse_manual(EXAMPLE)


def test_parse_manual(manual):
    rules, updates = manual
    assert 53 in rules[47]
    assert 13 in rules[97]
    assert updates[0] == [75, 47, 61, 53, 29]
    assert len(updates) == 6


def test_middle_sum_ordered_example():
    assert middle_sum_ordered(EXAMPLE) == 143


def test_middle_sum_reordered_example():
    assert middle_sum_reordered(EXAMPLE) == 123


def test_reorder_produces_ordered_permutation(manual):
    rules, updates = manual
    for update in updates:
        fixed = reorder(update, rules)
        assert is_ordered(fixed, rules)
        assert sorted(fixed) == sorted(update)


def test_reorder_keeps_ordered_updates(manual):
    rules, updates = manual
    for update in updates:
        if is_ordered(update, rules):
            assert reorder(update, rules) == update


def test_is_ordered_detects_violation(manual):
    rules, _ = manual
    assert is_ordered([47, 53], rules)
    assert not is_ordered([53, 47], rules)


def test_self_rule_makes_update_unordered():
    assert not is_ordered([5], {5: {5}})


def test_empty_update_in_ordered_sum_raises():
    with pytest.raises(ValueError):
        middle_sum_ordered(EXAMPLE + "\n")


def test_empty_update_is_skipped_when_reordering():
    assert middle_sum_reordered(EXAMPLE + "\n") == middle_sum_reordered(EXAMPLE)