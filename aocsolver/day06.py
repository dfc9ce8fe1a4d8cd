"""Guard patrol: the cells the guard covers and where a new obstruction traps it."""

from dataclasses import dataclass

# Up, right, down, left: the guard turns right by stepping through this cycle.
_MOVES = ((-1, 0), (0, 1), (1, 0), (0, -1))
_GUARD = "^"
_OBSTACLE = "#"


@dataclass(frozen=True)
class Lab:
    """A lab map and the guard's starting cell. The guard starts facing up."""

    rows: tuple
    start: tuple

    @classmethod
    def parse(cls, text):
        """Read a map in which ``#`` is an obstacle and ``^`` is the guard."""
        rows = tuple(text.splitlines())
        for i, row in enumerate(rows):
            j = row.find(_GUARD)
            if j >= 0:
                return cls(rows, (i, j))
        raise ValueError("the map holds no guard '^'")

    def _inside(self, cell):
        i, j = cell
        return 0 <= i < len(self.rows) and 0 <= j < len(self.rows[i])

    def _blocked(self, cell, obstruction):
        i, j = cell
        return cell == obstruction or self.rows[i][j] == _OBSTACLE

    def patrol(self, obstruction=None):
        """Walk the guard, optionally with one extra obstruction on the map.

        Returns the set of cells the guard stepped into and whether the
        walk loops forever instead of leaving the map.
        """
        position = self.start
        direction = 0
        entered = set()
        turns = {(position, direction)}
        while True:
            di, dj = _MOVES[direction]
            ahead = (position[0] + di, position[1] + dj)
            if not self._inside(ahead):
                return frozenset(entered), False
            if self._blocked(ahead, obstruction):
                direction = (direction + 1) % len(_MOVES)
                state = (position, direction)
                if state in turns:
                    return frozenset(entered), True
                turns.add(state)
            else:
                position = ahead
                entered.add(ahead)

    def visited(self):
        """Every distinct cell the guard occupies before leaving the map."""
        entered, looped = self.patrol()
        if looped:
            raise ValueError("the guard never leaves the map")
        return entered | {self.start}


def count_visited(text):
    """Number of distinct cells the guard covers."""
    return len(Lab.parse(text).visited())


def count_loop_positions(text):
    """Number of cells on the guard's route where one obstruction causes a loop."""
    lab = Lab.parse(text)
    route, _ = lab.patrol()
    return sum(1 for cell in route if lab.patrol(cell)[1])