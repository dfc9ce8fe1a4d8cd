"""Two columns of location ids: total distance and similarity score."""

from collections import Counter

_DELIMITER = "   "


def parse_lists(text):
    """Split lines of ``left   right`` into a left and a right list of ints."""
    left, right = [], []
    for line in text.splitlines():
        head, sep, tail = line.partition(_DELIMITER)
        if not sep:
            raise ValueError(f"missing column separator in line {line!r}")
        left.append(int(head))
        right.append(int(tail))
    return left, right


def total_distance(text):
    """Sum of the distances between the sorted left and right columns."""
    left, right = parse_lists(text)
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def similarity_score(text):
    """Sum of each value times its occurrences in both columns."""
    left, right = parse_lists(text)
    left_counts = Counter(left)
    right_counts = Counter(right)
    return sum(
        value * count * right_counts[value] for value, count in left_counts.items()
    )