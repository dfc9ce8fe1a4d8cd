"""Hiking trails on a topographic map: trailhead scores and ratings."""

_TRAILHEAD = 0
_PEAK = 9


def parse_topography(text):
    """Rows of heights; any non-digit becomes None and cannot be walked."""
    return [
        [int(char) if char.isdigit() else None for char in line]
        for line in text.splitlines()
    ]


def _climb(grid, at_peak, combine):
    """Fold a value from each peak down to every cell, one height at a time."""
    cells = {
        (i, j): height
        for i, row in enumerate(grid)
        for j, height in enumerate(row)
        if height is not None
    }
    values = {}
    for (i, j), height in sorted(cells.items(), key=lambda item: -item[1]):
        if height == _PEAK:
            values[(i, j)] = at_peak((i, j))
            continue
        steps = [
            values[neighbour]
            for neighbour in ((i + 1, j), (i - 1, j), (i, j + 1), (i, j - 1))
            if cells.get(neighbour) == height + 1 and neighbour in values
        ]
        values[(i, j)] = combine(steps)
    return [value for cell, value in values.items() if cells[cell] == _TRAILHEAD]


def trailhead_scores(text):
    """Sum over trailheads of the number of distinct peaks they reach."""
    heads = _climb(
        parse_topography(text),
        lambda cell: frozenset((cell,)),
        lambda steps: frozenset().union(*steps),
    )
    return sum(len(peaks) for peaks in heads)


def trailhead_ratings(text):
    """Sum over trailheads of the number of distinct trails to a peak."""
    return sum(_climb(parse_topography(text), lambda cell: 1, sum))