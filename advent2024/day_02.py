"""Day 2: checking reactor reports for safety."""

from dataclasses import dataclass
from itertools import pairwise
from typing import Sequence


def check_safe_levels(levels: Sequence[int]) -> bool:
    """Levels are safe if strictly monotonic with steps of 1 to 3."""
    increasing: bool | None = None
    for prev, nxt in pairwise(levels):
        diff = abs(prev - nxt)
        if diff == 0 or diff > 3:
            return False
        step_up = nxt > prev
        if increasing is None:
            increasing = step_up
        elif increasing != step_up:
            return False
    return True


@dataclass(frozen=True)
class Report:
    levels: tuple[int, ...]

    @classmethod
    def parse(cls, line: str) -> "Report":
        try:
            levels = tuple(int(word) for word in line.split())
        except ValueError as exc:
            raise ValueError(f"could not parse report: {line!r}") from exc
        if any(level < 0 for level in levels):
            raise ValueError(f"could not parse report: {line!r}")
        return cls(levels)

    def is_safe_a(self) -> bool:
        return check_safe_levels(self.levels)

    def is_safe_b(self) -> bool:
        """Safe if safe already, or after removing any single level."""
        if self.is_safe_a():
            return True
        return any(
            check_safe_levels(self.levels[:i] + self.levels[i + 1:])
            for i in range(len(self.levels))
        )


def parse(text: str) -> list[Report]:
    return [Report.parse(line) for line in text.strip().split("\n")]


def part_a(text: str) -> int:
    return sum(1 for report in parse(text) if report.is_safe_a())


def part_b(text: str) -> int:
    return sum(1 for report in parse(text) if report.is_safe_b())


def solve_day(text: str) -> tuple[int, int]:
    return part_a(text), part_b(text)