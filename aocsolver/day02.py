"""Reactor reports: which level sequences are safe."""


def parse_reports(text):
    """Each line of space-separated integers becomes one list of levels."""
    return [
        [int(token) for token in line.split(" ")] if line else []
        for line in text.splitlines()
    ]


def is_safe(levels):
    """Strictly monotonic with every step between 1 and 3."""
    decreasing = increasing = False
    for previous, current in zip(levels, levels[1:]):
        if current < previous:
            decreasing = True
        else:
            increasing = True
        if not 1 <= abs(current - previous) <= 3:
            return False
    return decreasing != increasing


def is_safe_with_dampener(levels):
    """Safe as is, or after removing any single level."""
    if not levels:
        return True
    return is_safe(levels) or any(
        is_safe(levels[:index] + levels[index + 1:]) for index in range(len(levels))
    )


def count_safe(text):
    """Number of safe reports."""
    return sum(1 for levels in parse_reports(text) if is_safe(levels))


def count_safe_with_dampener(text):
    """Number of reports that are safe with the problem dampener."""
    return sum(1 for levels in parse_reports(text) if is_safe_with_dampener(levels))