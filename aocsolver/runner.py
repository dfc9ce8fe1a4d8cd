"""Pick a puzzle solver by year, day and part, and run it on an input file."""

import argparse
import sys
from pathlib import Path

from aocsolver import day01, day02, day03, day04, day05, day06, day07, day09, day10, day11

DEFAULT_INPUT = "input.txt"
DEFAULT_OUTPUT = "output.txt"

_SOLVERS = {
    (2024, 1, 1): day01.total_distance,
    (2024, 1, 2): day01.similarity_score,
    (2024, 2, 1): day02.count_safe,
    (2024, 2, 2): day02.count_safe_with_dampener,
    (2024, 3, 1): day03.sum_multiplications,
    (2024, 3, 2): day03.sum_enabled_multiplications,
    (2024, 4, 1): day04.count_xmas,
    (2024, 4, 2): day04.count_x_mas,
    (2024, 5, 1): day05.middle_sum_ordered,
    (2024, 5, 2): day05.middle_sum_reordered,
    (2024, 6, 1): day06.count_visited,
    (2024, 6, 2): day06.count_loop_positions,
    (2024, 7, 1): day07.calibration_total,
    (2024, 7, 2): day07.calibration_total_with_concat,
    (2024, 9, 1): day09.block_checksum,
    (2024, 9, 2): day09.file_checksum,
    (2024, 10, 1): day10.trailhead_scores,
    (2024, 10, 2): day10.trailhead_ratings,
    (2024, 11, 1): day11.total_stones,
    (2024, 11, 2): day11.total_stones,
    (2025, 1, 1): day01.total_distance,
    (2025, 1, 2): day01.similarity_score,
}


def solve(year, day, part, text):
    """Answer of the given puzzle part for the puzzle input ``text``."""
    try:
        solver = _SOLVERS[(year, day, part)]
    except KeyError:
        raise ValueError(
            f"no solver for year {year}, day {day}, part {part}"
        ) from None
    return solver(text)


def format_result(result):
    """The line written to the output file."""
    return f"Result: {result}\n"


def run(year, day, part, input_path=DEFAULT_INPUT, output_path=DEFAULT_OUTPUT):
    """Solve the puzzle read from ``input_path``, write the result line, return it."""
    text = Path(input_path).read_text()
    result = solve(year, day, part, text)
    Path(output_path).write_text(format_result(result))
    return result


def main(argv=None):
    """Command-line entry point."""
    parser = argparse.ArgumentParser(
        prog="aocsolver", description="Solve a puzzle and write its result."
    )
    parser.add_argument("year", type=int)
    parser.add_argument("day", type=int)
    parser.add_argument("part", type=int, choices=(1, 2))
    parser.add_argument("--input", default=DEFAULT_INPUT, help="puzzle input file")
    parser.add_argument("--output", default=DEFAULT_OUTPUT, help="result file")
    args = parser.parse_args(argv)

    if (args.year, args.day, args.part) not in _SOLVERS:
        parser.error(f"no solver for year {args.year}, day {args.day}, part {args.part}")
    try:
        run(args.year, args.day, args.part, args.input, args.output)
    except OSError as error:
        print(f"aocsolver: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())