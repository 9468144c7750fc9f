"""Day 1: comparing two lists of location ids."""

from collections import Counter


def parse(text: str) -> tuple[list[int], list[int]]:
    """Split the input into its left and right columns."""
    left: list[int] = []
    right: list[int] = []
    for line in text.strip().split("\n"):
        numbers = [int(word) for word in line.split()]
        if len(numbers) < 2:
            raise ValueError(f"expected two numbers on line: {line!r}")
        left.append(numbers[0])
        right.append(numbers[1])
    return left, right


def part_a(text: str) -> int:
    """Total distance between the sorted columns."""
    left, right = parse(text)
    return sum(abs(l - r) for l, r in zip(sorted(left), sorted(right)))


def part_b(text: str) -> int:
    """Similarity score: each left number times its count in the right column."""
    left, right = parse(text)
    counts = Counter(right)
    return sum(number * counts[number] for number in left)


def solve_day(text: str) -> tuple[int, int]:
    return part_a(text), part_b(text)