# aocsolver

Solutions to Advent of Code puzzles: 2024 days 1–7 and 9–11, and 2025 day 1.
You can use them as a library or from the command line.

## Installation

    pip install .

To run the tests:

    pip install .[test]
    pytest

## Command line

The `aocsolver` command solves one part of one puzzle. It reads the puzzle
input from a file and writes a single line `Result: <value>` to an output
file:

    aocsolver 2024 1 1
    aocsolver 2024 11 2 --input stones.txt --output answer.txt
    aocsolver --help

Arguments:

- `year`, `day`, `part`: which puzzle to solve. `part` is 1 or 2.
- `--input`: the puzzle input file. The default is `input.txt`.
- `--output`: the file the result line is written to. The default is
  `output.txt`.

If no solver exists for the given year, day and part, the command prints a
usage error and exits with status 2. If the input cannot be read or the
output cannot be written, it prints the error and exits with status 1.

## Library

Each day's module has functions that take the puzzle input as text:

```python
from aocsolver import day01, day11
from aocsolver.runner import solve, format_result

text = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n"
day01.total_distance(text)    # 11
day01.similarity_score(text)  # 31

day11.total_stones("125 17", 25)  # 55312

print(format_result(solve(2024, 1, 1, text)), end="")  # Result: 11
```

Modules and their main functions:

| Module   | Part 1                    | Part 2                                    |
|----------|---------------------------|-------------------------------------------|
| `day01`  | `total_distance`          | `similarity_score`                        |
| `day02`  | `count_safe`              | `count_safe_with_dampener`                |
| `day03`  | `sum_multiplications`     | `sum_enabled_multiplications`             |
| `day04`  | `count_xmas`              | `count_x_mas`                             |
| `day05`  | `middle_sum_ordered`      | `middle_sum_reordered`                    |
| `day06`  | `count_visited`           | `count_loop_positions`                    |
| `day07`  | `calibration_total`       | `calibration_total_with_concat`           |
| `day09`  | `block_checksum`          | `file_checksum`                           |
| `day10`  | `trailhead_scores`        | `trailhead_ratings`                       |
| `day11`  | `total_stones`            | `total_stones`                            |

Some modules also expose their building blocks, such as
`day02.is_safe`, `day05.reorder`, `day06.Lab`, `day07.can_solve`,
`day09.expand_disk_map` and `day11.count_stones`.

`day11.total_stones(text, blinks=75)` blinks 75 times by default; the
command line uses that default for both parts of day 11. The 2025 day 1
solvers are the same functions as those for 2024 day 1.

`runner` ties it together:

- `solve(year, day, part, text)` returns the answer, or raises
  `ValueError` if there is no solver for that puzzle.
- `format_result(result)` returns the line `Result: <value>` with a newline.
- `run(year, day, part, input_path="input.txt", output_path="output.txt")`
  reads the input, writes the result line and returns the answer.
- `main(argv=None)` is the command-line entry point.

Malformed input raises `ValueError`. For example, a day 6 map with no
guard, or a guard that never leaves the map, is an error.

## What it does not do

- There is no solver for 2024 day 8, nor for any other day not listed above.
- It does not download puzzle inputs or submit answers. You supply the
  input file yourself.