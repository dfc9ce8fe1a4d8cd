"""Word search: XMAS in any direction and X-shaped MAS crosses."""

_DIRECTIONS = tuple(
    (di, dj) for di in (-1, 0, 1) for dj in (-1, 0, 1) if (di, dj) != (0, 0)
)


def _at(rows, i, j):
    if 0 <= i < len(rows) and 0 <= j < len(rows[i]):
        return rows[i][j]
    return ""


def _cells(rows, letter):
    for i, row in enumerate(rows):
        for j, char in enumerate(row):
            if char == letter:
                yield i, j


def count_xmas(text):
    """Occurrences of XMAS horizontally, vertically, diagonally and reversed."""
    rows = text.splitlines()
    return sum(
        all(
            _at(rows, i + step * di, j + step * dj) == char
            for step, char in enumerate("MAS", start=1)
        )
        for i, j in _cells(rows, "X")
        for di, dj in _DIRECTIONS
    )


def _is_cross(rows, i, j):
    up_left = _at(rows, i - 1, j - 1)
    up_right = _at(rows, i - 1, j + 1)
    down_left = _at(rows, i + 1, j - 1)
    down_right = _at(rows, i + 1, j + 1)

    def pair(first, second, letter):
        return first == letter and second == letter

    return (
        (pair(up_left, up_right, "M") and pair(down_left, down_right, "S"))
        or (pair(up_left, up_right, "S") and pair(down_left, down_right, "M"))
        or (pair(up_left, down_left, "S") and pair(up_right, down_right, "M"))
        or (pair(up_left, down_left, "M") and pair(up_right, down_right, "S"))
    )


def count_x_mas(text):
    """Number of A cells at the centre of two crossing MAS diagonals."""
    rows = text.splitlines()
    return sum(_is_cross(rows, i, j) for i, j in _cells(rows, "A"))