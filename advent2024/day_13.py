"""Day 13: claw machines and the cheapest way to win their prizes."""

from __future__ import annotations

import re
from dataclasses import dataclass

_DIGITS = re.compile(r"(\d+)")


@dataclass(frozen=True)
class Machine:
    button_a: tuple[int, int]
    button_b: tuple[int, int]
    prize: tuple[int, int]

    @classmethod
    def parse(cls, text: str) -> Machine:
        digits = [int(match.group(0)) for match in _DIGITS.finditer(text)]
        if len(digits) != 6:
            raise ValueError(f"machine should contain 6 numbers, got {len(digits)}")
        return cls(
            (digits[0], digits[1]),
            (digits[2], digits[3]),
            (digits[4], digits[5]),
        )

    def brute_force(self) -> int | None:
        """Cheapest win using at most 100 presses of each button."""
        (ax, ay), (bx, by), (px, py) = self.button_a, self.button_b, self.prize
        costs = [
            n_a * 3 + n_b
            for n_a in range(101)
            for n_b in range(101)
            if n_a * ax + n_b * bx == px and n_a * ay + n_b * by == py
        ]
        return min(costs, default=None)

    def solve_mathematically(self, offset: int) -> int | None:
        """Solve the linear system with the prize shifted by ``offset``."""
        (ax, ay), (bx, by) = self.button_a, self.button_b
        px = self.prize[0] + offset
        py = self.prize[1] + offset
        nom_b = py * ax - px * ay
        den_b = by * ax - bx * ay
        if nom_b % den_b != 0:
            return None
        b = nom_b // den_b
        nom_a = px - b * bx
        if nom_a % ax != 0:
            return None
        a = nom_a // ax
        return a * 3 + b


def parse_input(text: str) -> list[Machine]:
    return [Machine.parse(block) for block in text.strip().split("\n\n")]


def part_a(machines: list[Machine]) -> int:
    return sum(cost for m in machines if (cost := m.brute_force()) is not None)


def part_b(machines: list[Machine]) -> int:
    return sum(
        cost
        for m in machines
        if (cost := m.solve_mathematically(10000000000000)) is not None
    )


def solve_day(text: str) -> tuple[int, int]:
    machines = parse_input(text)
    return part_a(machines), part_b(machines)