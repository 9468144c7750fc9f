"""Day 11: plutonian pebbles that change with every blink."""

from __future__ import annotations

from collections import Counter
from functools import lru_cache
from typing import Iterable

_YEAR = 2024


def _digit_count(n: int) -> int:
    return len(str(n))


def parse_stones(text: str) -> list[int]:
    try:
        stones = [int(word) for word in text.strip().split(" ")]
    except ValueError as exc:
        raise ValueError(f"invalid stones: {text!r}") from exc
    if any(stone < 0 for stone in stones):
        raise ValueError(f"invalid stones: {text!r}")
    return stones


def split_stone(n: int) -> tuple[int, int]:
    """Split the digits of ``n`` into a left and right half."""
    if n <= 0:
        raise ValueError(f"cannot split stone {n}")
    divisor = 10 ** (_digit_count(n) // 2)
    return n // divisor, n % divisor


def _change(stone: int) -> tuple[int, ...]:
    if stone == 0:
        return (1,)
    if _digit_count(stone) % 2 == 0:
        return split_stone(stone)
    return (stone * _YEAR,)


def blink(stones: Iterable[int], n: int) -> list[int]:
    """The full row of stones after ``n`` blinks."""
    row = list(stones)
    for _ in range(n):
        row = [new for stone in row for new in _change(stone)]
    return row


@lru_cache(maxsize=None)
def count_recursive(stone: int, n: int) -> int:
    """Number of stones one stone turns into after ``n`` blinks."""
    if n == 0:
        return 1
    return sum(count_recursive(new, n - 1) for new in _change(stone))


def count_after_blinks(stones: Iterable[int], n: int) -> int:
    """Number of stones after ``n`` blinks, tracking counts per stone value."""
    counter = Counter(stones)
    for _ in range(n):
        nxt: Counter[int] = Counter()
        for stone, count in counter.items():
            for new in _change(stone):
                nxt[new] += count
        counter = nxt
    return sum(counter.values())


def part_a(stones: Iterable[int]) -> int:
    return count_after_blinks(stones, 25)


def part_b(stones: Iterable[int]) -> int:
    return count_after_blinks(stones, 75)


def solve_day(text: str) -> tuple[int, int]:
    stones = parse_stones(text)
    return part_a(stones), part_b(stones)