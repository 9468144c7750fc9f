# advent2024

Solutions to the 2024 Advent of Code puzzles for days 1 to 6, 8 to 13, 16 and 17.

Each day is its own module: `advent2024.day_01` to `advent2024.day_06`,
`advent2024.day_08` to `advent2024.day_13`, `advent2024.day_16` and
`advent2024.day_17`. Every one of them has a `solve_day(text)` function. It takes the
puzzle input as a string and returns the answers to both parts as a tuple.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Usage

```python
from advent2024 import day_01, day_11

print(day_01.solve_day("3   4\n4   3\n2   5\n1   3\n3   9\n3   3"))  # (11, 31)

stones = day_11.parse_stones("125 17")
print(day_11.part_a(stones))  # 55312
```

Most modules also expose their parsing helpers and the two parts separately
(`part_a`, `part_b`), along with the classes that model the puzzle, such as
`day_06.Map`, `day_09.FileSystem`, `day_12.Garden`, `day_16.Maze` and
`day_17.Computer`.

For day 17, `solve_day` returns the program output for part one and `0` for part two.
`day_17.part_b` searches for the answer to part two by trying register values one by
one. It is only practical for short programs.

## What it does not do

There is no command-line program. The package does not read input files. Load each
day's input yourself and pass the text to that day's `solve_day`. Days 7, 14 and 15
have no module.