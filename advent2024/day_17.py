"""Day 17: a three-bit computer and its output."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Sequence

_DIGITS = re.compile(r"(\d+)")
_SEARCH_END = 10_000_000_000_000_000


class _Opcode(IntEnum):
    ADV = 0
    BXL = 1
    BST = 2
    JNZ = 3
    BXC = 4
    OUT = 5
    BDV = 6
    CDV = 7


@dataclass
class Computer:
    a: int
    b: int
    c: int
    ptr: int = 0

    def _combo(self, operand: int) -> int:
        if 0 <= operand <= 3:
            return operand
        if operand == 4:
            return self.a
        if operand == 5:
            return self.b
        if operand == 6:
            return self.c
        raise ValueError(f"invalid combo operand: {operand}")

    def _division(self, operand: int) -> int:
        return self.a // 2 ** self._combo(operand)

    def run(self, program: Sequence[int]) -> list[int]:
        """Execute ``program`` until the pointer runs off its end; return the output."""
        out: list[int] = []
        while self.ptr < len(program):
            if self.ptr + 1 >= len(program):
                raise ValueError("instruction without operand")
            try:
                opcode = _Opcode(program[self.ptr])
            except ValueError:
                raise ValueError(f"invalid opcode: {program[self.ptr]}") from None
            operand = program[self.ptr + 1]
            if opcode is _Opcode.ADV:
                self.a = self._division(operand)
            elif opcode is _Opcode.BXL:
                self.b ^= operand
            elif opcode is _Opcode.BST:
                self.b = self._combo(operand) % 8
            elif opcode is _Opcode.JNZ:
                if self.a != 0:
                    self.ptr = operand
                    continue
            elif opcode is _Opcode.BXC:
                self.b ^= self.c
            elif opcode is _Opcode.OUT:
                out.append(self._combo(operand) % 8)
            elif opcode is _Opcode.BDV:
                self.b = self._division(operand)
            else:
                self.c = self._division(operand)
            self.ptr += 2
        return out


def parse(text: str) -> tuple[Computer, list[int]]:
    digits = [int(match.group(0)) for match in _DIGITS.finditer(text)]
    if len(digits) < 3:
        raise ValueError("input must hold three registers")
    return Computer(digits[0], digits[1], digits[2]), digits[3:]


def part_a(text: str) -> str:
    computer, program = parse(text)
    return ",".join(str(d) for d in computer.run(program))


def part_b(text: str) -> int:
    """Lowest register A value that makes the program print itself."""
    computer, program = parse(text)
    start = 8 ** (len(program) - 1)
    for a in range(start, _SEARCH_END):
        candidate = replace(computer, a=a)
        if candidate.run(program) == program:
            return a
    raise ValueError("no register value reproduces the program")


def solve_day(text: str) -> tuple[str, int]:
    return part_a(text), 0