"""Print queue: page ordering rules and the updates that follow them."""

from collections import defaultdict
from functools import cmp_to_key

_RULE_SEPARATOR = "|"


def parse_manual(text):
    """Return the rules (page -> pages that must follow) and the updates.

    Rules are read until the first line without a ``|``; that line is dropped.
    """
    rules = defaultdict(set)
    lines = iter(text.splitlines())
    for line in lines:
        before, sep, after = line.partition(_RULE_SEPARATOR)
        if not sep:
            break
        rules[int(before)].add(int(after))
    updates = [
        [int(page) for page in line.split(",")] if line else [] for line in lines
    ]
    return dict(rules), updates


def is_ordered(update, rules):
    """True when no page appears after a page it must precede."""
    printed = set()
    for page in update:
        printed.add(page)
        if any(successor in printed for successor in rules.get(page, ())):
            return False
    return True


def reorder(update, rules):
    """A copy of the update sorted so that it follows the rules."""

    def compare(a, b):
        if b in rules.get(a, ()):
            return -1
        if a in rules.get(b, ()):
            return 1
        return 0

    return sorted(update, key=cmp_to_key(compare))


def _middle(update):
    if not update:
        raise ValueError("an update must hold at least one page")
    return update[len(update) // 2]


def middle_sum_ordered(text):
    """Sum of the middle pages of the updates already in order."""
    rules, updates = parse_manual(text)
    return sum(_middle(update) for update in updates if is_ordered(update, rules))


def middle_sum_reordered(text):
    """Sum of the middle pages of the out-of-order updates once reordered."""
    rules, updates = parse_manual(text)
    return sum(
        _middle(reorder(update, rules))
        for update in updates
        if not is_ordered(update, rules)
    )