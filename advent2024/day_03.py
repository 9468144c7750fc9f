"""Day 3: scanning corrupted memory for multiplication instructions."""

import re
from dataclasses import dataclass
from typing import Iterable, Union

_INSTRUCTION = re.compile(r"((mul)\((\d{1,3}),(\d{1,3})\)|don't|do)")


@dataclass(frozen=True)
class Mul:
    x: int
    y: int

    def solve(self) -> int:
        return self.x * self.y


@dataclass(frozen=True)
class Do:
    pass


@dataclass(frozen=True)
class Dont:
    pass


Instruction = Union[Mul, Do, Dont]


def parse_instructions(text: str) -> list[Instruction]:
    instructions: list[Instruction] = []
    for match in _INSTRUCTION.finditer(text):
        if match.group(2) == "mul":
            instructions.append(Mul(int(match.group(3)), int(match.group(4))))
        elif match.group(1) == "don't":
            instructions.append(Dont())
        else:
            instructions.append(Do())
    return instructions


def part_a(instructions: Iterable[Instruction]) -> int:
    """Sum of all multiplications."""
    return sum(ins.solve() for ins in instructions if isinstance(ins, Mul))


def part_b(instructions: Iterable[Instruction]) -> int:
    """Sum of multiplications that are enabled by do/don't instructions."""
    enabled = True
    total = 0
    for ins in instructions:
        match ins:
            case Mul():
                if enabled:
                    total += ins.solve()
            case Do():
                enabled = True
            case Dont():
                enabled = False
    return total


def solve_day(text: str) -> tuple[int, int]:
    instructions = parse_instructions(text)
    return part_a(instructions), part_b(instructions)